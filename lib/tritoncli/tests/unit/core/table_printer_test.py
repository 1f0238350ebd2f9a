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

"""Tests for the table_printer module."""

import io

from tritoncli.core.resource import table_printer
from tritoncli.tests.lib import test_case


class TablePrinterTest(test_case.Base):

  def SetUp(self):
    self.out = io.StringIO()

  def testPlain(self):
    printer = table_printer.TablePrinter(self.out, heading=['a', 'bb'])
    printer.AddRow(['xyz', 1])
    printer.Finish()
    self.assertEqual(' A    BB \n'
                     ' xyz  1  \n', self.out.getvalue())

  def testAlignment(self):
    printer = table_printer.TablePrinter(
        self.out, heading=['name', 'n'],
        align=[table_printer.ALIGN_LEFT, table_printer.ALIGN_RIGHT],
        heading_align=table_printer.ALIGN_RIGHT)
    printer.AddRow(['a', 100])
    printer.Finish()
    self.assertEqual(' NAME    N \n'
                     ' a     100 \n', self.out.getvalue())

  def testBoxWithMultilineCell(self):
    printer = table_printer.TablePrinter(self.out, heading=['k', 'v'],
                                         box=True)
    printer.AddRow(['a', 'x\nyy'])
    printer.Finish()
    self.assertEqual('+---+----+\n'
                     '| K | V  |\n'
                     '+---+----+\n'
                     '| a | x  |\n'
                     '|   | yy |\n'
                     '+---+----+\n', self.out.getvalue())

  def testStringify(self):
    printer = table_printer.TablePrinter(self.out)
    printer.AddRow([None, True, {'b': 1}])
    printer.Finish()
    self.assertEqual('   true  {"b": 1} \n', self.out.getvalue())

  def testEmpty(self):
    table_printer.TablePrinter(self.out).Finish()
    self.assertEqual('', self.out.getvalue())
