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

"""Methods for formatting and printing row oriented results.

The artif-* tools build a heading and a list of rows and hand them to a
printer selected by --format:

  table: A boxed table, see table_printer.
  tabular: Tab separated lines, the heading first.
  json: A JSON list with one object per row, keyed by heading.
  yaml: The same objects as YAML documents.

Usage:

  printer = resource_printer.Printer('json', out=log.out)
  printer.SetHeading(['Name', 'Uri'])
  printer.AddRow(['admin', 'https://...'])
  printer.Finish()
"""

from collections import OrderedDict
import json

from tritoncli.core import exceptions as core_exceptions
from tritoncli.core.resource import table_printer


class Error(core_exceptions.Error):
  """Exceptions for this module."""


class UnknownFormatError(Error):
  """UnknownFormatError for unknown format names."""


class ResourcePrinter(object):
  """Base class for the row printers.

  Attributes:
    _out: The output stream.
    _heading: [str], The column headings.
    _rows: [[str]], The rows added so far.
  """

  def __init__(self, out):
    self._out = out
    self._heading = []
    self._rows = []

  def SetHeading(self, heading):
    self._heading = list(heading)

  def AddRow(self, row):
    self._rows.append(list(row))

  def _Records(self):
    records = []
    for row in self._rows:
      record = OrderedDict()
      for i, label in enumerate(self._heading):
        record[label] = row[i] if i < len(row) else ''
      records.append(record)
    return records

  def Finish(self):
    raise NotImplementedError


class TablePrinter(ResourcePrinter):
  """Prints the rows in a boxed table with centered headings."""

  def Finish(self):
    printer = table_printer.TablePrinter(
        self._out, heading=self._heading,
        heading_align=table_printer.ALIGN_CENTER, box=True)
    for row in self._rows:
      printer.AddRow(row)
    printer.Finish()


class TabularPrinter(ResourcePrinter):
  """Prints tab separated rows, the heading first."""

  def Finish(self):
    for row in [self._heading] + self._rows:
      self._out.write('\t'.join(str(cell).replace('\n', ',') for cell in row))
      self._out.write('\n')


class JsonPrinter(ResourcePrinter):
  """Prints the rows as a JSON list of objects."""

  def Finish(self):
    self._out.write(json.dumps(self._Records(), indent=2))
    self._out.write('\n')


class YamlPrinter(ResourcePrinter):
  """Prints the rows as a YAML list of mappings."""

  def __init__(self, out):
    super(YamlPrinter, self).__init__(out)
    # pylint:disable=g-import-not-at-top, Delay import for performance.
    import yaml
    self._yaml = yaml

  def Finish(self):
    records = [dict(record) for record in self._Records()]
    self._out.write(self._yaml.safe_dump(records, default_flow_style=False,
                                         sort_keys=False))


_FORMATTERS = {
    'json': JsonPrinter,
    'table': TablePrinter,
    'tabular': TabularPrinter,
    'yaml': YamlPrinter,
}


def SupportedFormats():
  """Returns a sorted list of supported format names."""
  return sorted(_FORMATTERS)


def Printer(print_format, out):
  """Returns a resource printer given a format name.

  Args:
    print_format: str, One of SupportedFormats().
    out: Output stream.

  Raises:
    UnknownFormatError: The print_format is invalid.

  Returns:
    ResourcePrinter, An initialized printer.
  """
  printer_class = _FORMATTERS.get(print_format)
  if not printer_class:
    raise UnknownFormatError(
        'Format must be one of {0}; received [{1}].'.format(
            ', '.join(SupportedFormats()), print_format))
  return printer_class(out)
