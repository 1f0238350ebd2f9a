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

"""The packages command group."""

from tritoncli.calliope import base


@base.Aliases('package', 'pkgs')
class Packages(base.Group):
  """Interact with packages."""

  @staticmethod
  def Args(parser):
    parser.add_argument(
        '--id',
        persistent=True,
        property='compute.package.id',
        help='Package ID.')
    parser.add_argument(
        '--name',
        persistent=True,
        property='compute.package.name',
        help='Package name.')
