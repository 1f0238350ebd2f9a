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

"""The calliope help document generator.

CommandDocument walks the sections of one command or group and drives a
document renderer, so the same section layout is written as a man page or as
a markdown page.
"""

from tritoncli.calliope import usage_text


class CommandDocument(object):
  """Generates the help document of one command or group.

  Attributes:
    _command: backend.CommandCommon, The command or group being documented.
    _renderer: renderer.Renderer, Receives one call per document entity.
    _link_separator: str, Joins the command path into a link target.
  """

  def __init__(self, command, renderer, link_separator='_'):
    self._command = command
    self._renderer = renderer
    self._link_separator = link_separator
    self._command_path = command.GetPath()
    self._command_name = ' '.join(self._command_path)

  def _LinkTarget(self, node):
    return self._link_separator.join(node.GetPath())

  def PrintSectionHeader(self, name, level=1):
    self._renderer.Heading(level, name)

  def PrintNameSection(self):
    """Prints the command line name section."""
    self.PrintSectionHeader('NAME')
    self._renderer.Fill('{0} - {1}'.format(
        '-'.join(self._command_path), self._command.short_help))
    self._renderer.Line()

  def PrintSynopsisSection(self):
    """Prints the command line synopsis section."""
    self.PrintSectionHeader('SYNOPSIS')
    parts = [self._command_name]
    if self._command.is_group:
      parts.append('[command]')
    else:
      for arg in usage_text.FilterOutSuppressed(
          self._command.ai.positional_args):
        parts.append(usage_text.PositionalDisplayString(arg))
    parts.append('[flags]')
    self._renderer.Synopsis(' '.join(parts))

  def PrintDescriptionSection(self):
    self.PrintSectionHeader('DESCRIPTION')
    for paragraph in self._command.long_help.split('\n\n'):
      for line in paragraph.splitlines():
        self._renderer.Fill(line)
      self._renderer.Line()

  def PrintFlagDefinition(self, flag):
    self._renderer.List(1, definition=usage_text.FlagDisplayString(flag))
    self._renderer.Fill(usage_text.FlagHelp(flag))

  def PrintFlagSection(self, heading, flags):
    """Prints a flag section.

    Args:
      heading: str, The section heading.
      flags: [argparse.Action], The flags, hidden ones are skipped.
    """
    flags = usage_text.FilterOutSuppressed(flags)
    if not flags:
      return
    self.PrintSectionHeader(heading)
    for flag in sorted(flags, key=lambda f: f.option_strings[-1]):
      self.PrintFlagDefinition(flag)
    self._renderer.List(0)

  def PrintExamplesSection(self):
    examples = self._command.examples
    if not examples:
      return
    self.PrintSectionHeader('EXAMPLES')
    for line in examples.strip('\n').splitlines():
      self._renderer.Example(line.strip())
    self._renderer.Line()

  def PrintSeeAlsoSection(self):
    """Prints the links to the parent group and to the sub elements."""
    links = []
    parent = self._command.parent_group
    if parent:
      links.append((parent, parent.short_help))
    if self._command.is_group:
      for _, element in sorted(self._command.AllSubElements().items()):
        if not element.IsHidden():
          links.append((element, element.short_help))
    if not links:
      return
    self.PrintSectionHeader('SEE ALSO')
    for node, short_help in links:
      self._renderer.List(1)
      self._renderer.Fill('{0} - {1}'.format(
          self._renderer.Link(self._LinkTarget(node),
                              ' '.join(node.GetPath())),
          short_help))
    self._renderer.List(0)

  def Generate(self, section=None, source=None, manual=None):
    """Renders the whole document.

    Args:
      section: int, The manual section, for renderers that have one.
      source: str, The source string, e.g. "Triton 1.0".
      manual: str, The manual name.
    """
    self._renderer.Title(self._command_name, section=section, source=source,
                         manual=manual)
    self.PrintNameSection()
    self.PrintSynopsisSection()
    self.PrintDescriptionSection()
    self.PrintFlagSection('OPTIONS', self._command.ai.flag_args)
    self.PrintFlagSection('OPTIONS INHERITED FROM PARENT COMMANDS',
                          self._command.ai.ancestor_flag_args)
    self.PrintExamplesSection()
    self.PrintSeeAlsoSection()
    self._renderer.Finish()
