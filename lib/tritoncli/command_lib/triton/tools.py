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

"""The documentation, completion and version commands of triton and manta."""

import os

from tritoncli.calliope import exceptions
from tritoncli.calliope import walker_util
from tritoncli.core import config
from tritoncli.core import exceptions as core_exceptions
from tritoncli.core import log
from tritoncli.core.util import files


def ProductName(cli):
  """Returns 'Triton' or 'Manta' for the CLI named triton or manta."""
  return cli.name.capitalize()


def VersionString(cli):
  return 'Version: {0}\n'.format(config.MakeUserAgentString(cli.name))


def _MakeDir(directory, what):
  try:
    files.MakeDir(directory)
  except files.Error as e:
    raise core_exceptions.Wrap(
        exceptions.FileError, 'unable to make {0} "{1}"'.format(
            what, directory), e)


def InstallManPages(cli, man_dir):
  """Writes one man page per command of cli to <man_dir>/man8.

  Args:
    cli: calliope.cli.CLI, The CLI to document.
    man_dir: str, The MANDIR.

  Returns:
    int, The number of pages written.

  Raises:
    exceptions.FileError: If the directory or a page cannot be written.
  """
  section = config.MAN_SECTION
  _MakeDir(os.path.join(man_dir, 'man{0}'.format(section)), 'mandir')
  log.info('Installing man(1) pages',
           extra=log.Fields(MANDIR=man_dir, section=section))
  product = ProductName(cli)
  generator = walker_util.ManPageGenerator(
      cli, man_dir, section=section,
      source='{0} {1}'.format(product, cli.version or
                              config.TRITON_CLI_VERSION),
      manual=product)
  generator.Walk()
  log.info('Installation completed successfully.')
  return generator.num_visited


def InstallMarkdown(cli, markdown_dir, url_prefix):
  """Writes one markdown page per command of cli to markdown_dir."""
  _MakeDir(markdown_dir, 'markdown-dir')
  log.info('Installing markdown pages',
           extra=log.Fields(dir=markdown_dir, url_prefix=url_prefix))
  generator = walker_util.MarkdownGenerator(cli, markdown_dir,
                                            url_prefix=url_prefix)
  generator.Walk()
  log.info('Installation completed successfully.')
  return generator.num_visited


def InstallBashCompletion(cli, target):
  """Writes the bash completion script of cli to target.

  Args:
    cli: calliope.cli.CLI, The CLI to complete.
    target: str, The bash completion directory.

  Returns:
    str, The path of the script.

  Raises:
    exceptions.FileError: If the script cannot be written.
  """
  _MakeDir(target, 'bash-autocomplete-target')
  path = walker_util.GenerateBashCompletion(cli, target)
  log.info('Installation completed successfully.',
           extra=log.Fields(path=path))
  return path
