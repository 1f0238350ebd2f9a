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

"""artif-get-group command."""

from tritoncli.calliope import base
from tritoncli.command_lib.artifactory import flags
from tritoncli.command_lib.artifactory import util


class GetGroup(base.Command):
  """Show the details of an Artifactory group."""

  @staticmethod
  def Args(parser):
    parser.add_argument('group', property='artifactory.group',
                        help='The group name.')
    flags.AddOutputFlags(parser)

  @util.ReportClientErrors()
  def Run(self, args):
    return util.NewClient(self.store).GetGroup(
        self.store.GetString('artifactory.group'))

  def Display(self, unused_args, result):
    util.PrintRows(
        self.store, self.terminal,
        ['Name', 'Description', 'AutoJoin?', 'Realm', 'Realm Attributes'],
        [[result.name, result.description, util.FormatBool(result.auto_join),
          result.realm, result.realm_attributes]])
