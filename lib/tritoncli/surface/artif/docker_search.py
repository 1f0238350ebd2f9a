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

"""artif-docker-search command."""

from tritoncli.calliope import base
from tritoncli.command_lib.artifactory import flags
from tritoncli.command_lib.artifactory import util


class DockerSearch(base.Command):
  """Search the Docker images whose repository name contains CRITERIA."""

  @staticmethod
  def Args(parser):
    parser.add_argument('criteria', property='artifactory.criteria',
                        help='Part of the image name.')
    parser.add_argument(
        '--labels',
        action='store_true',
        property='artifactory.labels',
        help='Also show the labels of the images.')
    flags.AddOutputFlags(parser)

  @util.ReportClientErrors()
  def Run(self, args):
    return util.NewClient(self.store).DockerSearch(
        self.store.GetString('artifactory.criteria'))

  def Display(self, unused_args, result):
    labels = self.store.GetBool('artifactory.labels')
    heading = list(util.DOCKER_HEADING)
    if labels:
      heading.append('LABELS')
    util.PrintRows(self.store, self.terminal, heading,
                   [util.DockerRow(item, labels=labels) for item in result])
