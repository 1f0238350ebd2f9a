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

"""manta ls command."""

from tritoncli.calliope import arg_parsers
from tritoncli.calliope import base
from tritoncli.command_lib.triton import clients


class Ls(base.Command):
  """List directory contents.

  Lists the entries of a Manta directory, e.g. /stor. Without an argument the
  top level directory of the account is listed.
  """

  args_spec = arg_parsers.MaximumArgs(3)

  def Run(self, args):
    """Lists the directory.

    Args:
      args: argparse.Namespace, The arguments that this command was invoked
          with.

    Returns:
      storage.DirectoryListing, The entries and the size of the result set.
    """
    storage = clients.NewStorageClient(self.store)
    return storage.GetDirectoryListing(getattr(args, 'positionals', []))

  def Display(self, unused_args, result):
    self.terminal.Write('Found {0:d} directory entries'.format(
        result.result_set_size))
    for entry in result.entries:
      self.terminal.Write('\n{0}/'.format(entry.name))
