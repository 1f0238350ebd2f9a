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

"""keys list command."""

from tritoncli.calliope import base
from tritoncli.command_lib.triton import clients
from tritoncli.command_lib.triton import display


@base.Aliases('ls')
class List(base.Command):
  """List the SSH keys of the account."""

  def Run(self, args):
    return clients.NewAccountClient(self.store).ListKeys()

  def Display(self, unused_args, result):
    table = display.NewListTable(self.terminal, ['NAME', 'FINGERPRINT'])
    for key in result:
      table.AddRow([key.name, key.fingerprint])
    table.Finish()
