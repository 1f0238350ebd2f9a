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

"""The triton command group."""

from tritoncli.calliope import base
from tritoncli.command_lib.triton import flags


class Triton(base.Group):
  """Joyent Triton CLI and client (https://www.joyent.com/triton).

  The triton command manages the instances, packages, SSH keys and account
  of a Triton data center through CloudAPI.
  """

  @staticmethod
  def Args(parser):
    """Args is called by calliope to gather arguments for this command.

    Args:
      parser: An argparse parser that you can use to add arguments that go
          on the command line after this command. Positional arguments are
          not allowed.
    """
    flags.AddOutputFlags(parser)
    flags.AddTritonCredentialFlags(parser)
