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

"""Flags shared by the artif-* tools."""

from tritoncli.calliope import base
from tritoncli.core.resource import resource_printer


FORMAT_FLAG = base.Argument(
    '--format',
    property='artifactory.format',
    default='table',
    choices=resource_printer.SupportedFormats(),
    help='Output format.')

LOG_LEVEL_FLAG = base.Argument(
    '--log-level', '-l',
    property='log.level',
    help='Change the log level being sent to stderr.')

KIND_FLAG = base.Argument(
    '--kind',
    property='artifactory.kind',
    default='all',
    choices=['local', 'remote', 'virtual', 'all'],
    help='Only list the repositories of this kind.')


def AddOutputFlags(parser):
  FORMAT_FLAG.AddToParser(parser)
  LOG_LEVEL_FLAG.AddToParser(parser)
