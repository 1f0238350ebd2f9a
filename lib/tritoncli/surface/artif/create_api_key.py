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

"""artif-create-api-key command."""

from tritoncli.calliope import base
from tritoncli.command_lib.artifactory import flags
from tritoncli.command_lib.artifactory import util


class CreateApiKey(base.Command):
  """Create an API key for the authenticated user and print it."""

  @staticmethod
  def Args(parser):
    flags.LOG_LEVEL_FLAG.AddToParser(parser)

  @util.ReportClientErrors()
  def Run(self, args):
    return util.NewClient(self.store).CreateAPIKey()

  def Display(self, unused_args, result):
    self.terminal.Write('{0}\n'.format(result))
