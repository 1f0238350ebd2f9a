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

"""Tests for the display helpers."""

from tritoncli.api_lib.triton import compute
from tritoncli.command_lib.triton import display
from tritoncli.core import properties
from tritoncli.tests.lib import test_case


class HumanizeTest(test_case.Base):

  def testBytes(self):
    self.assertEqual('5 B', display.HumanizeBytes(5))
    self.assertEqual('1.5 kB', display.HumanizeBytes(1500))
    self.assertEqual('25 kB', display.HumanizeBytes(25000))
    self.assertEqual('1.0 GB', display.HumanizeBytes(1000 * 1000 * 1000))

  def testMiB(self):
    self.assertEqual('512 MB', display.HumanizeMiB(512))
    self.assertEqual('0 B', display.HumanizeMiB(None))


class InstanceFlagsTest(test_case.Base):

  def testOrder(self):
    instance = compute.Instance(docker=True, brand='KVM',
                                firewall_enabled=True)
    self.assertEqual('DKF', display.InstanceFlags(instance))

  def testNone(self):
    self.assertEqual('', display.InstanceFlags(compute.Instance(brand='lx')))

  def testShortID(self):
    self.assertEqual('abcdef01', display.ShortID('abcdef0123456789'))
    self.assertEqual('', display.ShortID(None))


class FormatTimestampTest(test_case.Base):

  def testUTC(self):
    store = properties.PropertyStore()
    store.SetExplicit('general.utc', True)
    created = compute.Instance({'created': '2018-01-02T03:04:05Z'}).created
    self.assertEqual('2018-01-02 03:04:05 +0000 UTC',
                     display.FormatTimestamp(store, created))
