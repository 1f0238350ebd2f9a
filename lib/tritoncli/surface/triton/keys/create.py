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

"""keys create command."""

from tritoncli.calliope import base
from tritoncli.command_lib.triton import clients
from tritoncli.command_lib.triton import flags


@base.Aliases('add')
class Create(base.Command):
  """Add an SSH public key to the account.

  The key is named by --keyname, CloudAPI uses the fingerprint when no name
  is given.
  """

  @staticmethod
  def Args(parser):
    parser.add_argument(
        '--publickey',
        property='keys.publickey',
        help='The SSH public key, in OpenSSH format.')

  def PreRun(self, args):
    flags.ValidateRequired(self.store, 'keys.publickey', 'publickey')

  def Run(self, args):
    return clients.NewAccountClient(self.store).CreateKey()

  def Display(self, unused_args, result):
    self.terminal.Write('Created key "{0}"\n'.format(result.name))
