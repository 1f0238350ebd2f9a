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

"""The keys command group."""

from tritoncli.calliope import base


@base.Aliases('key')
class Keys(base.Group):
  """Interact with the SSH keys of the account."""

  @staticmethod
  def Args(parser):
    parser.add_argument(
        '--fingerprint',
        persistent=True,
        property='keys.fingerprint',
        help='SSH key fingerprint.')
    parser.add_argument(
        '--keyname',
        persistent=True,
        property='keys.name',
        help='SSH key name.')
