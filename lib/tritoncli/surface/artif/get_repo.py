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

"""artif-get-repo command."""

from tritoncli.calliope import base
from tritoncli.command_lib.artifactory import flags
from tritoncli.command_lib.artifactory import util


class GetRepo(base.Command):
  """Show the configuration of an Artifactory repository.

  Remote repositories also show their URL, local repositories their layout
  and virtual repositories the repositories they aggregate.
  """

  @staticmethod
  def Args(parser):
    parser.add_argument('repo', property='artifactory.repo',
                        help='The repository key.')
    flags.AddOutputFlags(parser)

  @util.ReportClientErrors()
  def Run(self, args):
    """Gets the repository configuration.

    Args:
      args: argparse.Namespace, The arguments that this command was invoked
          with.

    Returns:
      repositories.RepositoryConfig, The configuration, of the subclass that
      matches the kind of the repository.
    """
    return util.NewClient(self.store).GetRepository(
        self.store.GetString('artifactory.repo'))

  def Display(self, unused_args, result):
    heading, row = util.RepositoryTable(result)
    util.PrintRows(self.store, self.terminal, heading, [row])
