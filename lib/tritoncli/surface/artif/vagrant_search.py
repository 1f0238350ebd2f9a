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

"""artif-vagrant-search command."""

from tritoncli.calliope import base
from tritoncli.command_lib.artifactory import flags
from tritoncli.command_lib.artifactory import util


class VagrantSearch(base.Command):
  """Search the Vagrant boxes whose name contains CRITERIA."""

  @staticmethod
  def Args(parser):
    parser.add_argument('criteria', property='artifactory.criteria',
                        help='Part of the box name.')
    flags.AddOutputFlags(parser)

  @util.ReportClientErrors()
  def Run(self, args):
    return util.NewClient(self.store).VagrantSearch(
        self.store.GetString('artifactory.criteria'))

  def Display(self, unused_args, result):
    util.PrintRows(self.store, self.terminal, util.VAGRANT_HEADING,
                   [util.VagrantRow(item) for item in result])
