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

"""artif-get-license command."""

from tritoncli.calliope import base
from tritoncli.command_lib.artifactory import flags
from tritoncli.command_lib.artifactory import util


class GetLicense(base.Command):
  """Show the license of the Artifactory server."""

  @staticmethod
  def Args(parser):
    flags.AddOutputFlags(parser)

  @util.ReportClientErrors()
  def Run(self, args):
    return util.NewClient(self.store).GetLicense()

  def Display(self, unused_args, result):
    util.PrintRows(self.store, self.terminal, ['Type', 'Expires', 'Owner'],
                   [[result.license_type, result.valid_through,
                     result.licensed_to]])
