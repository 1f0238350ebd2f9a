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

"""artif-deploy-artifact command."""

from tritoncli.calliope import base
from tritoncli.calliope import parser_arguments
from tritoncli.command_lib.artifactory import flags
from tritoncli.command_lib.artifactory import util


class DeployArtifact(base.Command):
  """Upload a file to an Artifactory repository.

  The file is stored at PATH in the repository, under its own name when PATH
  is omitted or ends with a slash. The URI of the deployed artifact is
  printed.
  """

  @staticmethod
  def Args(parser):
    """Args is called by calliope to gather arguments for this command.

    Args:
      parser: An argparse parser that you can use to add arguments that go
          on the command line after this command. Positional arguments are
          allowed.
    """
    parser.add_argument('repo', property='artifactory.repo',
                        help='The repository key.')
    parser.add_argument('filename', property='artifactory.filename',
                        help='The file to upload.')
    parser.add_argument('path', nargs='?', property='artifactory.path',
                        help='The target path in the repository.')
    parser.add_argument(
        '--property',
        property='artifactory.property',
        arity=parser_arguments.MAP,
        help='Properties of the artifact, as key=value. May be repeated.')
    parser.add_argument(
        '--silent',
        action='store_true',
        property='artifactory.silent',
        help='Print nothing, only set the exit status.')
    flags.LOG_LEVEL_FLAG.AddToParser(parser)

  @util.ReportClientErrors(silent_property='artifactory.silent')
  def Run(self, args):
    store = self.store
    return util.NewClient(store).DeployArtifact(
        store.GetString('artifactory.repo'),
        store.GetString('artifactory.filename'),
        path=store.GetString('artifactory.path'),
        properties=store.GetStringMap('artifactory.property'))

  def Display(self, unused_args, result):
    if not self.store.GetBool('artifactory.silent'):
      self.terminal.Write('{0}\n'.format(result.uri))
