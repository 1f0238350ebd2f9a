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

"""instances list command."""

from tritoncli.calliope import base
from tritoncli.command_lib.triton import clients
from tritoncli.command_lib.triton import display
from tritoncli.core.resource import table_printer
from tritoncli.core.util import times


@base.Aliases('ls')
class List(base.Command):
  """List instances.

  Lists the instances of the account, oldest first. The --name, --tag,
  --state and --brand flags narrow the listing.
  """

  def Run(self, args):
    """Lists the instances and the images they were created from.

    Args:
      args: argparse.Namespace, The arguments that this command was invoked
          with.

    Returns:
      ([compute.Instance], [compute.Image]), The instances and the images
      used to name them.
    """
    compute = clients.NewComputeClient(self.store)
    instances = compute.ListInstances()
    images = compute.ListImages()
    return instances, images

  def Display(self, unused_args, result):
    instances, images = result
    table = display.NewListTable(
        self.terminal,
        ['SHORTID', 'NAME', 'IMG', 'STATE', 'FLAGS', 'AGE'],
        align=[table_printer.ALIGN_LEFT] + [table_printer.ALIGN_RIGHT] * 5,
        heading_align=table_printer.ALIGN_RIGHT)
    now = times.Now(times.UTC)
    for instance in instances:
      table.AddRow([
          display.ShortID(instance.id),
          instance.name,
          clients.FormatImageName(images, instance.image),
          instance.state,
          display.InstanceFlags(instance),
          times.FormatTime(instance.created, now=now),
      ])
    table.Finish()
