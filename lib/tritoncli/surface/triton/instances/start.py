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

"""instances start command."""

from tritoncli.calliope import base
from tritoncli.command_lib.triton import clients
from tritoncli.command_lib.triton import flags


class Start(base.Command):
  """Start a stopped instance."""

  @staticmethod
  def Args(parser):
    flags.INSTANCE_ID_FLAG.AddToParser(parser)

  def PreRun(self, args):
    flags.ValidateExactlyOne(self.store, 'compute.instance.id',
                             'compute.instance.name', 'id', 'name')

  def Run(self, args):
    return clients.NewComputeClient(self.store).StartInstance()

  def Display(self, unused_args, result):
    self.terminal.Write('Started instance "{0}"\n'.format(result.name))
