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

"""doc man command."""

from tritoncli.calliope import base
from tritoncli.command_lib.triton import flags
from tritoncli.command_lib.triton import tools


class Man(base.Command):
  """Generate and install the man(1) pages.

  One page is written per command to the man8 directory of the MANDIR.
  """

  @staticmethod
  def Args(parser):
    flags.MAN_DIR_FLAG.AddToParser(parser)

  def Run(self, args):
    """Writes the pages.

    Args:
      args: argparse.Namespace, The arguments that this command was invoked
          with.

    Returns:
      int, The number of pages written.
    """
    return tools.InstallManPages(self._cli_power_users_only,
                                 self.store.GetString('doc.mandir'))
