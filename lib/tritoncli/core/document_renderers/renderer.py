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

"""Command help document renderer base class."""

from tritoncli.core import log


# Font attributes.
BOLD, ITALIC, CODE = range(3)


class Renderer(object):
  r"""Help document renderer base class.

  The member functions provide an abstract document model that the command
  help generator drives, one call per document entity.

  Attributes:
    _font: The font attribute bitmask.
    _out: The output stream.
    _title: The document title.
    _width: The output width in characters.
  """

  def __init__(self, out=None, title=None, width=80):
    self._font = 0
    self._out = out or log.out
    self._title = title
    self._width = width

  def Escape(self, buf):
    """Escapes special characters in normal text.

    Args:
      buf: The normal text that may contain special characters.

    Returns:
      The escaped string.
    """
    return buf

  def Font(self, unused_attr, unused_out=None):
    """Returns the font embellishment string for attr.

    Args:
      unused_attr: None to reset to the default font, otherwise one of BOLD,
        ITALIC, or CODE.
      unused_out: Writes tags line to this stream if not None.

    Returns:
      The font embellishment string.
    """
    return ''

  def Link(self, target, text):
    """Renders an anchor.

    Args:
      target: The link target, a command path or URL.
      text: The text to be displayed instead of the link.

    Returns:
      The rendered link anchor and text.
    """
    if text:
      if target and '://' in target:
        return '{0} ({1})'.format(text, target)
      return text
    return target or ''

  def Title(self, title, section=None, source=None, manual=None):
    """Starts the document."""

  def Heading(self, level, heading):
    """Renders a heading."""

  def Synopsis(self, line):
    """Renders a usage line."""

  def Fill(self, line):
    """Adds a line of running text."""

  def Line(self):
    """Renders a paragraph separating line."""

  def Example(self, line):
    """Displays line as an indented example."""

  def List(self, level, definition=None, end=False):
    """Renders a bullet or definition list item."""

  def Finish(self):
    """Finishes all output document rendering."""
