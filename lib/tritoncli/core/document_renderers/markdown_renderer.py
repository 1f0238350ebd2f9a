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

"""Command help document markdown format renderer."""

from tritoncli.core.document_renderers import renderer


class MarkdownRenderer(renderer.Renderer):
  """Renders command help documents to markdown.

  Attributes:
    _example: True if currently inside an example code block.
    _fill: The number of characters in the current output line.
    _url_prefix: str, Prepended to the target of every command link.
  """

  def __init__(self, *args, **kwargs):
    self._url_prefix = kwargs.pop('url_prefix', '')
    super(MarkdownRenderer, self).__init__(*args, **kwargs)
    self._example = False
    self._fill = 0

  def _Flush(self):
    if self._fill:
      self._fill = 0
      self._out.write('\n')
    if self._example:
      self._example = False
      self._out.write('```\n')

  def Escape(self, buf):
    return buf.replace('*', r'\*').replace('_', r'\_')

  def Link(self, target, text):
    if '://' in target:
      return '[{0}]({1})'.format(text or target, target)
    return '[{0}]({1}/{2})'.format(
        text or target, self._url_prefix.rstrip('/'), target)

  def Title(self, title, section=None, source=None, manual=None):
    self._out.write('## {0}\n'.format(title))

  def Heading(self, level, heading):
    self._Flush()
    self._out.write('\n{0} {1}\n\n'.format('#' * (level + 2), heading.title()))

  def Synopsis(self, line):
    self._Flush()
    self._out.write('```\n{0}\n```\n'.format(line))

  def Fill(self, line):
    if self._example:
      self._Flush()
    if self._fill:
      self._out.write(' ')
    self._out.write(line)
    self._fill += len(line) + 1

  def Line(self):
    self._Flush()
    self._out.write('\n')

  def Example(self, line):
    if self._fill:
      self._fill = 0
      self._out.write('\n')
    if not self._example:
      self._example = True
      self._out.write('```\n')
    self._out.write(line + '\n')

  def List(self, level, definition=None, end=False):
    self._Flush()
    if end or not level:
      return
    indent = '  ' * (level - 1)
    if definition is not None:
      self._out.write('{0}* `{1}` '.format(indent, definition))
    else:
      self._out.write(indent + '* ')
    self._fill = 1

  def Finish(self):
    self._Flush()
