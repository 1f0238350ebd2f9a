# Copyright 2018 The tritoncli Authors. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Tests for the log module."""

import json
import logging

from tritoncli.core import log
from tritoncli.core import properties
from tritoncli.tests.lib import test_case


class LogTest(test_case.Base):

  def testJsonRecord(self):
    log.SetFormat('json')
    log.info('Installing man(1) pages', extra=log.Fields(section=8))
    record = json.loads(self.GetErr().splitlines()[-1])
    self.assertEqual('info', record['level'])
    self.assertEqual(8, record['section'])
    self.assertEqual('Installing man(1) pages', record['message'])
    self.assertTrue(record['time'].endswith('Z'))

  def testAutoIsJsonWhenNotATerminal(self):
    log.SetFormat('auto')
    self.assertEqual(log.FORMAT_ZEROLOG, log.GetFormat())

  def testHumanRecord(self):
    log.SetFormat('human')
    log.warning('careful')
    self.assertIn('|WARN| careful', self.GetErr())

  def testUnsupportedFormat(self):
    with self.assertRaisesRegex(log.UnsupportedFormatError, '"xml"'):
      log.SetFormat('xml')

  def testConfigure(self):
    store = properties.PropertyStore()
    store.SetExplicit('log.level', 'DEBUG')
    store.SetExplicit('log.format', 'human')
    log.Configure(store)
    self.assertEqual(logging.DEBUG, log.GetVerbosity())
    self.assertEqual('debug', log.GetVerbosityName())
    self.assertEqual(log.FORMAT_HUMAN, log.GetFormat())

  def testUnsupportedLevel(self):
    with self.assertRaisesRegex(log.UnsupportedLevelError, '"chatty"'):
      log.ParseVerbosity('chatty')

  def testLevelFilters(self):
    log.SetVerbosity(logging.ERROR)
    log.info('hidden')
    self.assertNotIn('hidden', self.GetErr())
