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

"""doc md command."""

from tritoncli.calliope import base
from tritoncli.command_lib.triton import flags
from tritoncli.command_lib.triton import tools


class Md(base.Command):
  """Generate the markdown pages."""

  @staticmethod
  def Args(parser):
    flags.MARKDOWN_DIR_FLAG.AddToParser(parser)
    flags.MARKDOWN_URL_PREFIX_FLAG.AddToParser(parser)

  def Run(self, args):
    return tools.InstallMarkdown(
        self._cli_power_users_only,
        self.store.GetString('doc.markdown-dir'),
        self.store.GetString('doc.markdown-url-prefix'))
