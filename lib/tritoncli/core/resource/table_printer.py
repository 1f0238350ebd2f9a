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

"""Table format resource printer.

Two table styles are supported:

  plain: The listing style of the triton commands. Each cell is padded by one
    space on both sides, there are no row or column rules and the left and
    right borders are drawn with the (empty by default) column separator.
  box: The style of the artif-* tools, with +---+ rules around the heading
    and the table and | between the columns.

Cells may contain newlines, in which case the row grows to the height of its
tallest cell.
"""

import json

ALIGN_LEFT = 'left'
ALIGN_RIGHT = 'right'
ALIGN_CENTER = 'center'

_JUSTIFY = {
    ALIGN_LEFT: lambda s, w: s.ljust(w),
    ALIGN_RIGHT: lambda s, w: s.rjust(w),
    ALIGN_CENTER: lambda s, w: s.center(w),
}


def _Stringify(value):
  """Dumps value to JSON if it's not a string."""
  if value is None:
    return ''
  elif isinstance(value, str):
    return value
  elif isinstance(value, bool):
    return 'true' if value else 'false'
  elif isinstance(value, (int, float)):
    return str(value)
  else:
    return json.dumps(value, sort_keys=True)


def FormatHeader(label):
  """Upper cases a heading the way the table headers are shown."""
  return label.replace('_', ' ').upper()


class TablePrinter(object):
  """A printer for printing human-readable tables.

  Attributes:
    _out: The output stream, anything with a write() method.
    _heading: [str], The column headings.
    _rows: [[str]], The rows added so far.
  """

  def __init__(self, out, heading=None, align=None, heading_align=ALIGN_LEFT,
               box=False, column_separator='', auto_format_headers=True):
    """Creates a new TablePrinter.

    Args:
      out: The output stream.
      heading: [str], The column headings, None for no heading line.
      align: [str], Per column ALIGN_* values, left aligned by default.
      heading_align: str, The ALIGN_* value for the heading cells.
      box: bool, Draw the box style instead of the plain style.
      column_separator: str, The plain style border string.
      auto_format_headers: bool, Upper case the headings.
    """
    self._out = out
    self._heading = None
    if heading is not None:
      self.SetHeading(heading, auto_format_headers)
    self._align = align or []
    self._heading_align = heading_align
    self._box = box
    self._column_separator = column_separator
    self._rows = []

  def SetHeading(self, heading, auto_format_headers=True):
    self._heading = [FormatHeader(_Stringify(h)) if auto_format_headers
                     else _Stringify(h) for h in heading]

  def AddRow(self, row):
    """Adds a list of columns. Output delayed until Finish()."""
    self._rows.append([_Stringify(cell) for cell in row])

  def _Widths(self):
    rows = self._rows + ([self._heading] if self._heading else [])
    col_widths = [0] * max(len(row) for row in rows)
    for row in rows:
      for i, cell in enumerate(row):
        for line in cell.split('\n'):
          col_widths[i] = max(col_widths[i], len(line))
    return col_widths

  def _Justify(self, column, heading):
    if heading:
      return _JUSTIFY[self._heading_align]
    if column < len(self._align):
      return _JUSTIFY[self._align[column]]
    return _JUSTIFY[ALIGN_LEFT]

  def _WriteRow(self, row, col_widths, heading=False):
    cells = [cell.split('\n') for cell in row]
    cells.extend([['']] * (len(col_widths) - len(cells)))
    height = max(len(lines) for lines in cells)
    sep = '|' if self._box else self._column_separator
    for line_number in range(height):
      parts = []
      for i, lines in enumerate(cells):
        text = lines[line_number] if line_number < len(lines) else ''
        parts.append(' ' + self._Justify(i, heading)(text, col_widths[i]) +
                     ' ')
      self._out.write(sep + sep.join(parts) + sep + '\n')

  def _WriteRule(self, col_widths):
    self._out.write(
        '+' + '+'.join('-' * (w + 2) for w in col_widths) + '+\n')

  def Finish(self):
    """Prints the actual table."""
    if not self._rows and not self._heading:
      return
    col_widths = self._Widths()
    if self._box:
      self._WriteRule(col_widths)
    if self._heading:
      self._WriteRow(self._heading, col_widths, heading=True)
      if self._box:
        self._WriteRule(col_widths)
    for row in self._rows:
      self._WriteRow(row, col_widths)
    if self._box and self._rows:
      self._WriteRule(col_widths)
