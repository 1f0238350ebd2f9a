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

"""The artif-* command line tools.

Every tool is a single command CLI whose root is a module of
tritoncli.surface.artif, e.g. artif-list-users runs
tritoncli.surface.artif.list_users.
"""

import sys

from tritoncli import triton_main
from tritoncli.calliope import cli as calliope_cli
from tritoncli.core import config


TOOLS = (
    'cli',
    'list_users',
    'get_user',
    'list_groups',
    'get_group',
    'list_repos',
    'get_repo',
    'get_permission_target',
    'get_license',
    'get_encrypted_password',
    'create_api_key',
    'delete_user',
    'deploy_artifact',
    'list_files',
    'docker_search',
    'vagrant_search',
    'search_gavc',
)


def ToolName(tool):
  return 'artif-' + tool.replace('_', '-')


def CreateCLI(tool, store=None, terminal_factory=None):
  """Generates the CLI of one artif-* tool.

  Args:
    tool: str, One of TOOLS.
    store: properties.PropertyStore, The configuration store, a new one if
      None.
    terminal_factory: () -> console_io.TerminalWriter, The output sink
      factory.

  Returns:
    calliope.cli.CLI, The tool.
  """
  loader = calliope_cli.CLILoader(
      name=ToolName(tool),
      command_root_module='tritoncli.surface.artif.' + tool,
      version=config.TRITON_CLI_VERSION,
      store=store,
      terminal_factory=terminal_factory)
  return loader.Generate()


def _Main(tool):
  triton_main.InstallSignalHandlers()
  sys.exit(CreateCLI(tool).Execute())


def cli():  # pylint: disable=invalid-name
  _Main('cli')


def list_users():  # pylint: disable=invalid-name
  _Main('list_users')


def get_user():  # pylint: disable=invalid-name
  _Main('get_user')


def list_groups():  # pylint: disable=invalid-name
  _Main('list_groups')


def get_group():  # pylint: disable=invalid-name
  _Main('get_group')


def list_repos():  # pylint: disable=invalid-name
  _Main('list_repos')


def get_repo():  # pylint: disable=invalid-name
  _Main('get_repo')


def get_permission_target():  # pylint: disable=invalid-name
  _Main('get_permission_target')


def get_license():  # pylint: disable=invalid-name
  _Main('get_license')


def get_encrypted_password():  # pylint: disable=invalid-name
  _Main('get_encrypted_password')


def create_api_key():  # pylint: disable=invalid-name
  _Main('create_api_key')


def delete_user():  # pylint: disable=invalid-name
  _Main('delete_user')


def deploy_artifact():  # pylint: disable=invalid-name
  _Main('deploy_artifact')


def list_files():  # pylint: disable=invalid-name
  _Main('list_files')


def docker_search():  # pylint: disable=invalid-name
  _Main('docker_search')


def vagrant_search():  # pylint: disable=invalid-name
  _Main('vagrant_search')


def search_gavc():  # pylint: disable=invalid-name
  _Main('search_gavc')
