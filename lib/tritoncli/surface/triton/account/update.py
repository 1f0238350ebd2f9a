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

"""account update command."""

from tritoncli.calliope import base
from tritoncli.command_lib.triton import clients
from tritoncli.command_lib.triton import display

# (flag, property, help)
_UPDATE_FLAGS = (
    ('--email', 'account.email', 'Email address.'),
    ('--companyName', 'account.companyname', 'Company name.'),
    ('--firstName', 'account.firstname', 'First name.'),
    ('--lastName', 'account.lastname', 'Last name.'),
    ('--address', 'account.address', 'Address.'),
    ('--postalCode', 'account.postcode', 'Postal code.'),
    ('--city', 'account.city', 'City.'),
    ('--state', 'account.state', 'State.'),
    ('--country', 'account.country', 'Country.'),
    ('--phone', 'account.phone', 'Phone number.'),
    ('--triton_cns_enabled', 'account.triton_cns_enabled',
     'Enable Triton CNS for the account (true or false).'),
)


class Update(base.Command):
  """Update the account details.

  Only the fields given on the command line are sent, everything else is
  left as it is.
  """

  @staticmethod
  def Args(parser):
    for flag, prop, help_text in _UPDATE_FLAGS:
      parser.add_argument(flag, property=prop, help=help_text)

  def Run(self, args):
    """Sends the update.

    Args:
      args: argparse.Namespace, The arguments that this command was invoked
          with.

    Returns:
      account.Account, The updated account.
    """
    return clients.NewAccountClient(self.store).Update()

  def Display(self, unused_args, result):
    self.terminal.Write(
        '\n'.join(display.AccountLines(self.store, result)) + '\n')
