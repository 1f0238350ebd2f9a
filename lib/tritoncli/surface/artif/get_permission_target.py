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

"""artif-get-permission-target command."""

from tritoncli.api_lib.artifactory import resources
from tritoncli.calliope import base
from tritoncli.command_lib.artifactory import flags
from tritoncli.command_lib.artifactory import util


class GetPermissionTarget(base.Command):
  """Show an Artifactory permission target.

  The permissions of each user and group are listed by their letter, the
  legend follows the table.
  """

  @staticmethod
  def Args(parser):
    parser.add_argument('target', property='artifactory.target',
                        help='The permission target name.')
    flags.AddOutputFlags(parser)

  @util.ReportClientErrors()
  def Run(self, args):
    return util.NewClient(self.store).GetPermissionTarget(
        self.store.GetString('artifactory.target'))

  def Display(self, unused_args, result):
    util.PrintRows(
        self.store, self.terminal,
        ['Name', 'Includes', 'Excludes', 'Repositories', 'Users', 'Groups'],
        [[result.name, result.includes_pattern, result.excludes_pattern,
          util.JoinLines(result.repositories),
          util.FormatPrincipals(result.users),
          util.FormatPrincipals(result.groups)]])
    self.terminal.Write(resources.PERMISSION_LEGEND + '\n')
