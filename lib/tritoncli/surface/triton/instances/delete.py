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

"""instances delete command."""

from tritoncli.calliope import base
from tritoncli.command_lib.triton import clients
from tritoncli.command_lib.triton import flags


class Delete(base.Command):
  """Delete an instance.

  The instance is given by exactly one of --id or --name.
  """

  @staticmethod
  def Args(parser):
    flags.INSTANCE_ID_FLAG.AddToParser(parser)

  def PreRun(self, args):
    flags.ValidateExactlyOne(self.store, 'compute.instance.id',
                             'compute.instance.name', 'id', 'name')

  def Run(self, args):
    """Deletes the instance.

    Args:
      args: argparse.Namespace, The arguments that this command was invoked
          with.

    Returns:
      compute.Instance, The instance as it was before the delete.
    """
    return clients.NewComputeClient(self.store).DeleteInstance()

  def Display(self, unused_args, result):
    self.terminal.Write('Deleted instance "{0}"\n'.format(result.name))
