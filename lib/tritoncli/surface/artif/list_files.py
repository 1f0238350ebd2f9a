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

"""artif-list-files command."""

from tritoncli.calliope import base
from tritoncli.command_lib.artifactory import flags
from tritoncli.command_lib.artifactory import util


class ListFiles(base.Command):
  """List the files below a path of an Artifactory repository."""

  @staticmethod
  def Args(parser):
    parser.add_argument('repo', property='artifactory.repo',
                        help='The repository key.')
    parser.add_argument('path', nargs='?', property='artifactory.path',
                        default='/',
                        help='The directory to list, the root by default.')
    flags.AddOutputFlags(parser)

  @util.ReportClientErrors()
  def Run(self, args):
    return util.NewClient(self.store).ListFiles(
        self.store.GetString('artifactory.repo'),
        self.store.GetString('artifactory.path'))

  def Display(self, unused_args, result):
    util.PrintRows(self.store, self.terminal, ['URI', 'Size', 'SHA-1'],
                   [[entry.uri, entry.size, entry.sha1]
                    for entry in result.files])
