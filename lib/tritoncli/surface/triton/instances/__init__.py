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

"""The instances command group."""

from tritoncli.calliope import base
from tritoncli.calliope import parser_arguments


def _NormalizeTagFlag(name):
  if name == 'tag':
    return 'tags'
  return name


@base.Aliases('instance', 'vms', 'machines')
class Instances(base.Group):
  """Interact with instances."""

  @staticmethod
  def Args(parser):
    """Args is called by calliope to gather arguments for this command.

    Args:
      parser: An argparse parser that you can use to add arguments that go
          on the command line after this command. Positional arguments are
          not allowed.
    """
    parser.add_argument(
        '--name', '-n',
        persistent=True,
        property='compute.instance.name',
        help='Instance name.')
    parser.SetNormalizeFunc(_NormalizeTagFlag)
    parser.add_argument(
        '--tag', '-t',
        persistent=True,
        property='compute.instance.tag',
        arity=parser_arguments.LIST,
        help='Instance tags, as key=value. May be repeated.')
    parser.add_argument(
        '--state',
        persistent=True,
        property='compute.instance.state',
        help='Instance state (e.g. running).')
    parser.add_argument(
        '--brand',
        persistent=True,
        property='compute.instance.brand',
        help='Instance brand (e.g. lx, kvm).')
