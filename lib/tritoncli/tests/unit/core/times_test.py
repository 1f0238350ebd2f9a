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

"""Tests for the times module."""

import datetime

from tritoncli.core.util import times
from tritoncli.tests.lib import test_case


class FormatTimeTest(test_case.Base):

  def SetUp(self):
    self.now = datetime.datetime(2018, 6, 1, 12, 0, 0, tzinfo=times.UTC)

  def _Ago(self, **kwargs):
    return times.FormatTime(self.now - datetime.timedelta(**kwargs),
                            now=self.now)

  def testSeconds(self):
    self.assertEqual('45s', self._Ago(seconds=45))

  def testHours(self):
    self.assertEqual(' 3h', self._Ago(hours=3, minutes=10))

  def testMonths(self):
    self.assertEqual(' 1mo', self._Ago(days=40))

  def testYears(self):
    self.assertEqual(' 2y', self._Ago(days=800))

  def testFuture(self):
    self.assertEqual('', self._Ago(seconds=-30))

  def testNone(self):
    self.assertEqual('', times.FormatTime(None))


class ParseDateTimeTest(test_case.Base):

  def testDefaultsToUTC(self):
    dt = times.ParseDateTime('2018-01-02T03:04:05')
    self.assertEqual(times.UTC, dt.tzinfo)

  def testInvalid(self):
    with self.assertRaises(times.DateTimeSyntaxError):
      times.ParseDateTime('not a date')

  def testRFC1123(self):
    dt = datetime.datetime(2018, 1, 2, 3, 4, 5, tzinfo=times.UTC)
    self.assertEqual('Tue, 02 Jan 2018 03:04:05 GMT', times.FormatRFC1123(dt))
