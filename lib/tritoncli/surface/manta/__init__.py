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

"""The manta command group."""

from tritoncli.calliope import base
from tritoncli.command_lib.triton import flags


class Manta(base.Group):
  """Joyent Manta CLI and client (https://www.joyent.com/manta).

  The manta command browses the Manta object store of an account.
  """

  @staticmethod
  def Args(parser):
    flags.AddOutputFlags(parser)
    flags.AddMantaCredentialFlags(parser)
