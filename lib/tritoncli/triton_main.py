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

"""triton command line tool."""

import os
import signal
import sys

from tritoncli.calliope import cli
from tritoncli.core import config
from tritoncli.core import log


# Disable stack traces when people kill a command.
def CTRLCHandler(unused_signal, unused_frame):
  """Custom SIGNINT handler.

  Signal handler that doesn't print the stack trace when a command is
  killed by keyboard interupt.
  """
  log.err.Print('\n\nCommand killed by keyboard interrupt\n')
  # Kill ourselves with SIGINT so our parent can detect that we exited because
  # of a signal. SIG_DFL disables further KeyboardInterrupt exceptions.
  signal.signal(signal.SIGINT, signal.SIG_DFL)
  os.kill(os.getpid(), signal.SIGINT)
  # Just in case the kill failed ...
  sys.exit(1)


def InstallSignalHandlers():
  signal.signal(signal.SIGINT, CTRLCHandler)
  # Enable normal UNIX handling of SIGPIPE to play nice with grep -q, head,
  # etc.
  if hasattr(signal, 'SIGPIPE'):
    signal.signal(signal.SIGPIPE, signal.SIG_DFL)


def CreateCLI(store=None, terminal_factory=None):
  """Generates the triton CLI."""
  loader = cli.CLILoader(
      name='triton',
      command_root_module='tritoncli.surface.triton',
      version=config.TRITON_CLI_VERSION,
      store=store,
      terminal_factory=terminal_factory)
  return loader.Generate()


def main():
  InstallSignalHandlers()
  sys.exit(CreateCLI().Execute())


if __name__ == '__main__':
  main()
