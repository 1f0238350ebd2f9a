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

"""A collection of CLI walkers."""

import io
import os

import argcomplete

from tritoncli.calliope import exceptions
from tritoncli.calliope import markdown
from tritoncli.calliope import walker
from tritoncli.core import log
from tritoncli.core.document_renderers import man_renderer
from tritoncli.core.document_renderers import markdown_renderer
from tritoncli.core.util import files


def _WriteFile(path, contents):
  try:
    files.WriteFileContents(path, contents)
  except files.Error as e:
    raise exceptions.FileError(str(e), path=path)


def _MakeDir(directory):
  try:
    files.MakeDir(directory)
  except files.Error as e:
    raise exceptions.FileError(str(e), path=directory)


class DocumentGenerator(walker.Walker):
  """Generates one document file per command node in an output directory.

  All files will be generated in one directory.

  Attributes:
    _directory: The document output directory.
    _separator: Joins the command path into the file name.
    _suffix: The output file suffix.
  """

  def __init__(self, cli, directory, separator, suffix):
    """Constructor.

    Args:
      cli: calliope.cli.CLI, The CLI to document.
      directory: The output directory path name.
      separator: str, Joins the command path into the file name.
      suffix: str, The file name suffix.
    """
    super(DocumentGenerator, self).__init__(cli)
    self._directory = directory
    self._separator = separator
    self._suffix = suffix
    _MakeDir(self._directory)

  def MakeRenderer(self, out, title):
    raise NotImplementedError()

  def Render(self, document):
    document.Generate()

  def Visit(self, node, parent, is_group):
    """Renders document file for each node in the CLI tree.

    Args:
      node: group/command CommandCommon info.
      parent: The parent Visit() return value, None at the top level.
      is_group: True if node is a group, otherwise its is a command.

    Returns:
      The parent value, ignored here.
    """
    command = node.GetPath()
    path = os.path.join(self._directory,
                        self._separator.join(command)) + self._suffix
    buf = io.StringIO()
    self.Render(markdown.CommandDocument(
        node, self.MakeRenderer(buf, ' '.join(command)),
        link_separator=self._separator))
    _WriteFile(path, buf.getvalue())
    log.debug('Wrote %s', path)
    return parent


class ManPageGenerator(DocumentGenerator):
  """Generates man pages in the man<section> subdirectory of a directory.

  Pages are named after the command path, e.g. triton-instances-list.8. The
  date field of the title line is left empty so the output is reproducible.
  """

  _SECTION_FORMAT = 'man{section}'

  def __init__(self, cli, directory, section=8, source=None, manual=None):
    """Constructor.

    Args:
      cli: calliope.cli.CLI, The CLI to document.
      directory: The manpage output directory path name.
      section: int, The manual section.
      source: str, The source string, e.g. "Triton 1.0.0".
      manual: str, The manual name.
    """
    self._section = section
    self._source = source
    self._manual = manual
    section_dir = os.path.join(
        directory, self._SECTION_FORMAT.format(section=section))
    super(ManPageGenerator, self).__init__(
        cli, directory=section_dir, separator='-',
        suffix='.{0}'.format(section))

  def MakeRenderer(self, out, title):
    return man_renderer.ManRenderer(out=out, title=title)

  def Render(self, document):
    document.Generate(section=self._section, source=self._source,
                      manual=self._manual)


class MarkdownGenerator(DocumentGenerator):
  """Generates markdown pages, e.g. triton_instances_list.md."""

  def __init__(self, cli, directory, url_prefix=''):
    """Constructor.

    Args:
      cli: calliope.cli.CLI, The CLI to document.
      directory: The markdown output directory path name.
      url_prefix: str, Prepended to the links between the pages.
    """
    self._url_prefix = url_prefix
    super(MarkdownGenerator, self).__init__(
        cli, directory=directory, separator='_', suffix='.md')

  def MakeRenderer(self, out, title):
    return markdown_renderer.MarkdownRenderer(
        out=out, title=title, url_prefix=self._url_prefix)


def GenerateBashCompletion(cli, directory):
  """Writes the bash completion script of the CLI root command.

  The script hands completion to argcomplete, which the CLI hooks into its
  root parser.

  Args:
    cli: calliope.cli.CLI, The CLI to complete.
    directory: str, The bash completion directory.

  Returns:
    str, The path of the written script.

  Raises:
    exceptions.FileError: If the directory or the file cannot be written.
  """
  _MakeDir(directory)
  path = os.path.join(directory, '{0}.sh'.format(cli.name))
  _WriteFile(path, argcomplete.shellcode([cli.name], shell='bash'))
  return path
