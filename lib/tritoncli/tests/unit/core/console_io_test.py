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

"""Tests for the terminal writer."""

import io

from tritoncli.core.console import console_io
from tritoncli.tests.lib import test_case


class TerminalWriterTest(test_case.Base):

  def SetUp(self):
    self.out = io.StringIO()
    self.terminal = console_io.TerminalWriter(out=self.out)

  def testWaitDrainsOnce(self):
    self.terminal.Write('one')
    self.terminal.Wait()
    self.terminal.Write('two')
    self.terminal.Wait()
    self.assertEqual('one\n', self.out.getvalue())
    self.assertEqual(1, self.terminal.drain_count)
    self.assertTrue(self.terminal.drained)

  def testNothingWritten(self):
    self.terminal.Wait()
    self.assertEqual('', self.out.getvalue())
    self.assertEqual(1, self.terminal.drain_count)

  def testPagerSkippedWhenNotInteractive(self):
    self.terminal.SetUsePager(True)
    self.terminal.Print('a', 'b')
    self.terminal.Wait()
    self.assertEqual('a b\n', self.out.getvalue())
