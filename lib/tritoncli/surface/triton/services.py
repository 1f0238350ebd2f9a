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

"""services command."""

from tritoncli.calliope import base
from tritoncli.command_lib.triton import clients
from tritoncli.command_lib.triton import display
from tritoncli.core.resource import table_printer


class Services(base.Command):
  """List the services of the data center."""

  def Run(self, args):
    return clients.NewComputeClient(self.store).ListServices()

  def Display(self, unused_args, result):
    table = display.NewListTable(self.terminal, ['NAME', 'ENDPOINT'],
                                 heading_align=table_printer.ALIGN_CENTER)
    for service in result:
      table.AddRow([service.name, service.endpoint])
    table.Finish()
