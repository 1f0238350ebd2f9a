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

"""artif-search-gavc command."""

from tritoncli.api_lib.artifactory import resources
from tritoncli.calliope import base
from tritoncli.calliope import parser_arguments
from tritoncli.command_lib.artifactory import flags
from tritoncli.command_lib.artifactory import util


class SearchGavc(base.Command):
  """Search artifacts by their Maven coordinates.

  Any of --groupid, --artifactid, --version and --classifier may be given,
  --repo limits the search to some repositories.
  """

  @staticmethod
  def Args(parser):
    """Args is called by calliope to gather arguments for this command.

    Args:
      parser: An argparse parser that you can use to add arguments that go
          on the command line after this command. Positional arguments are
          allowed.
    """
    for name, what in (('groupid', 'groupId'), ('artifactid', 'artifactId'),
                       ('version', 'version'), ('classifier', 'classifier')):
      parser.add_argument(
          '--' + name,
          property='artifactory.' + name,
          help='The {0} to search for.'.format(what))
    parser.add_argument(
        '--repo',
        property='artifactory.repos',
        arity=parser_arguments.LIST,
        help='Only search this repository. May be repeated.')
    flags.AddOutputFlags(parser)

  @util.ReportClientErrors()
  def Run(self, args):
    store = self.store
    coordinates = resources.GAVC(
        group_id=store.GetString('artifactory.groupid'),
        artifact_id=store.GetString('artifactory.artifactid'),
        version=store.GetString('artifactory.version'),
        classifier=store.GetString('artifactory.classifier'),
        repos=store.GetStringSlice('artifactory.repos'))
    return util.NewClient(store).GAVCSearch(coordinates)

  def Display(self, unused_args, result):
    util.PrintRows(self.store, self.terminal, util.GAVC_HEADING,
                   [util.GAVCRow(r) for r in result])
