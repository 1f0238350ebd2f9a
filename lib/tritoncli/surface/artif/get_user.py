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

"""artif-get-user command."""

from tritoncli.calliope import base
from tritoncli.command_lib.artifactory import flags
from tritoncli.command_lib.artifactory import util


class GetUser(base.Command):
  """Show the details of an Artifactory user.

  The password is never shown.
  """

  @staticmethod
  def Args(parser):
    """Args is called by calliope to gather arguments for this command.

    Args:
      parser: An argparse parser that you can use to add arguments that go
          on the command line after this command. Positional arguments are
          allowed.
    """
    parser.add_argument('user', property='artifactory.user',
                        help='The user name.')
    flags.AddOutputFlags(parser)

  @util.ReportClientErrors()
  def Run(self, args):
    return util.NewClient(self.store).GetUser(
        self.store.GetString('artifactory.user'))

  def Display(self, unused_args, result):
    util.PrintRows(
        self.store, self.terminal,
        ['Name', 'Email', 'Password', 'Admin?', 'Updatable?',
         'Last Logged In', 'Internal Password Disabled?', 'Realm', 'Groups'],
        [[result.name, result.email, '<hidden>',
          util.FormatBool(result.admin),
          util.FormatBool(result.profile_updatable),
          result.last_logged_in,
          util.FormatBool(result.internal_password_disabled),
          result.realm, util.JoinLines(result.groups)]])
