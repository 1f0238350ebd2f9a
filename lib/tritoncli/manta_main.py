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

"""manta command line tool."""

import sys

from tritoncli import triton_main
from tritoncli.calliope import cli
from tritoncli.core import config


def CreateCLI(store=None, terminal_factory=None):
  """Generates the manta CLI."""
  loader = cli.CLILoader(
      name='manta',
      command_root_module='tritoncli.surface.manta',
      version=config.TRITON_CLI_VERSION,
      store=store,
      terminal_factory=terminal_factory)
  return loader.Generate()


def main():
  triton_main.InstallSignalHandlers()
  sys.exit(CreateCLI().Execute())


if __name__ == '__main__':
  main()
