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

"""packages list command."""

from tritoncli.calliope import base
from tritoncli.command_lib.triton import clients
from tritoncli.command_lib.triton import display
from tritoncli.core.resource import table_printer


@base.Aliases('ls')
class List(base.Command):
  """List packages.

  Memory, swap and disk sizes are filters in MiB.
  """

  @staticmethod
  def Args(parser):
    """Args is called by calliope to gather arguments for this command.

    Args:
      parser: An argparse parser that you can use to add arguments that go
          on the command line after this command. Positional arguments are
          allowed.
    """
    for name, what in (('memory', 'Memory'), ('disk', 'Disk size'),
                       ('swap', 'Swap size')):
      parser.add_argument(
          '--' + name,
          type=int,
          property='compute.package.' + name,
          help='{0} in MiB.'.format(what))
    parser.add_argument(
        '--vcpu',
        type=int,
        property='compute.package.vcpu',
        help='Number of VCPUs.')

  def Run(self, args):
    return clients.NewComputeClient(self.store).ListPackages()

  def Display(self, unused_args, result):
    table = display.NewListTable(
        self.terminal,
        ['SHORTID', 'NAME', 'MEMORY', 'SWAP', 'DISK', 'VCPUS'],
        heading_align=table_printer.ALIGN_CENTER)
    for package in result:
      table.AddRow([
          display.ShortID(package.id),
          package.name,
          display.HumanizeMiB(package.memory),
          display.HumanizeMiB(package.swap),
          display.HumanizeMiB(package.disk),
          package.vcpus if package.vcpus else '-',
      ])
    table.Finish()
