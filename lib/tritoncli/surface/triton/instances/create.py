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

"""instances create command."""

from tritoncli.calliope import base
from tritoncli.calliope import exceptions
from tritoncli.calliope import parser_arguments
from tritoncli.command_lib.triton import clients
from tritoncli.command_lib.triton import flags


class Create(base.Command):
  """Create a new instance.

  The instance is provisioned from a package, given by --pkg-id or
  --pkg-name, and an image, given by --img-id or --img-name. With --wait the
  command returns once the instance is running.
  """

  @staticmethod
  def Args(parser):
    """Args is called by calliope to gather arguments for this command.

    Args:
      parser: An argparse parser that you can use to add arguments that go
          on the command line after this command. Positional arguments are
          allowed.
    """
    parser.add_argument(
        '--wait', '-w',
        action='store_true',
        property='compute.instance.wait',
        help='Block until the instance is running.')
    parser.add_argument(
        '--pkg-id',
        property='compute.package.id',
        help='Package ID.')
    parser.add_argument(
        '--pkg-name',
        property='compute.package.name',
        help='Package name.')
    parser.add_argument(
        '--img-id',
        property='compute.image.id',
        help='Image ID.')
    parser.add_argument(
        '--img-name',
        property='compute.image.name',
        help='Image name.')
    parser.add_argument(
        '--firewall',
        action='store_true',
        property='compute.instance.firewall',
        help='Enable the cloud firewall for the instance.')
    parser.add_argument(
        '--networks', '-N',
        property='compute.instance.networks',
        arity=parser_arguments.LIST,
        help='Network IDs to attach the instance to.')
    parser.add_argument(
        '--metadata', '-m',
        property='compute.instance.metadata',
        arity=parser_arguments.MAP,
        help='Instance metadata, as key=value.')
    parser.add_argument(
        '--affinity',
        property='compute.instance.affinity',
        arity=parser_arguments.LIST,
        help='Affinity rules, e.g. instance!=db.')
    parser.add_argument(
        '--userdata',
        property='compute.instance.userdata',
        help='A script to run when the instance boots.')

  def PreRun(self, args):
    flags.ValidateRequired(self.store, 'compute.instance.name', 'name')
    store = self.store
    if (not store.GetString('compute.package.name') and
        not store.GetString('compute.package.id')):
      raise exceptions.ValidationError(
          'Either `pkg-name` or `pkg-id` must be specified for Create '
          'Instance')
    if (not store.GetString('compute.image.name') and
        not store.GetString('compute.image.id')):
      raise exceptions.ValidationError(
          'Either `img-name` or `img-id` must be specified for Create '
          'Instance')

  def Run(self, args):
    return clients.NewComputeClient(self.store).CreateInstance()

  def Display(self, unused_args, result):
    self.terminal.Write('Created instance "{0}" ({1})\n'.format(
        result.name, result.id))
