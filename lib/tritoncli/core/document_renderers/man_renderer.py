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

"""Command help document man page format renderer."""

from tritoncli.core.document_renderers import renderer


class ManRenderer(renderer.Renderer):
  """Renders command help documents to man(1) input.

  Attributes:
    _BULLET: A list of bullet characters indexed by list level modulo #bullets.
    _ESCAPE: Character element code string dict indexed by input character.
    _FONT_TAG: Font embellishment tag string list indexed by font attribute.
    _example: True if currently rendering an example.
    _fill: The number of characters in the current output line.
    _level: The section or list level counting from 0.
    _th_emitted: True if .TH already emitted.
  """
  _BULLET = (r'\(bu', r'\(em')
  _ESCAPE = {'\\': r'\e', '-': r'\-'}
  _FONT_TAG = (r'\fB', r'\fI', r'\f5')

  def __init__(self, *args, **kwargs):
    super(ManRenderer, self).__init__(*args, **kwargs)
    self._example = False
    self._fill = 0
    self._level = 0
    self._th_emitted = False

  def _Flush(self):
    """Flushes the current collection of Fill() lines."""
    if self._fill:
      self._fill = 0
      self._out.write('\n')
    if self._example:
      self._example = False
      self._out.write('.fi\n.RE\n')

  def Escape(self, buf):
    return ''.join(self._ESCAPE.get(c, c) for c in buf)

  def Title(self, title, section=None, source=None, manual=None):
    """Emits the .TH line. The date field is left empty.

    Args:
      title: str, The page title, the command path.
      section: int, The manual section.
      source: str, The source string, e.g. "Triton 1.0".
      manual: str, The manual name.
    """
    self._out.write('.nh\n.TH "{0}" "{1}" "" "{2}" "{3}"\n.ad l\n'.format(
        self.Escape(title.upper()), section or '', source or '',
        manual or ''))
    self._th_emitted = True

  def Example(self, line):
    if self._fill:
      self._fill = 0
      self._out.write('\n')
    if not self._example:
      self._example = True
      self._out.write('.RS 2m\n.nf\n')
    self._out.write(self.Escape(line) + '\n')

  def Fill(self, line):
    """Adds a line to the output, splitting to stay within the output width.

    Args:
      line: The line string.
    """
    if self._example:
      self._Flush()
    for word in self.Escape(line).split():
      n = len(word)
      if self._fill + n >= self._width:
        self._out.write('\n')
        self._fill = 0
      elif self._fill:
        self._fill += 1
        self._out.write(' ')
      if not self._fill and word[0] in ".'":
        self._out.write(r'\&')
      self._fill += n
      self._out.write(word)

  def Finish(self):
    self.Font(out=self._out)
    self.List(0)

  def Font(self, attr=None, out=None):
    """Returns the font embellishment string for attr.

    Args:
      attr: None to reset to the default font, otherwise one of renderer.BOLD,
        renderer.ITALIC, or renderer.CODE.
      out: Writes tags line to this stream if not None.

    Returns:
      The font embellishment string.
    """
    if attr is None:
      if self._font:
        self._font = 0
        tags = r'\fR'
      else:
        tags = ''
    else:
      mask = 1 << attr
      self._font ^= mask
      tags = self._FONT_TAG[attr] if (self._font & mask) else r'\fR'
    if out and tags:
      out.write(tags + '\n')
    return tags

  def Heading(self, level, heading):
    self._Flush()
    self.Font(out=self._out)
    self.List(0)
    if not self._th_emitted:
      self.Title(self._title or 'NOTES')
    if level == 1:
      self._out.write('\n.SH "{0}"\n'.format(heading.upper()))
    else:
      self._out.write('\n.SS "{0}"\n'.format(heading))

  def Line(self):
    self._Flush()
    self._out.write('\n')

  def List(self, level, definition=None, end=False):
    self._Flush()
    need_sp = False
    while self._level and self._level > level:
      self._out.write('.RE\n')
      self._level -= 1
      need_sp = True
    if need_sp:
      self._out.write('.sp\n')
    if end or not level:
      return
    if self._level < level:
      self._level += 1
      self._out.write('.RS 2m\n')
    if definition is not None:
      self._out.write('.TP 2m\n{0}{1}\\fR\n'.format(
          self._FONT_TAG[renderer.BOLD], self.Escape(definition)))
    else:
      self._out.write('.IP "{0}" 2m\n'.format(
          self._BULLET[(level - 1) % len(self._BULLET)]))

  def Synopsis(self, line):
    """Renders NAME and SYNOPSIS lines as a hanging indent.

    Does not split top-level [...] or (...) groups.

    Args:
      line: The synopsis text.
    """
    self._Flush()
    self._out.write('.HP\n')
    nest = 0
    for c in self.Escape(line):
      if c in '[(':
        nest += 1
      elif c in ')]':
        nest -= 1
      elif c == ' ' and nest:
        c = r'\ '
      self._out.write(c)
    self._out.write('\n')
