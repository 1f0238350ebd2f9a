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

"""Installation wide constants of the tritoncli tools."""

import platform


TRITON_CLI_VERSION = '0.1.0'

CLOUDAPI_VERSION = '8'

MAN_SECTION = 8


def MakeUserAgentString(product='tritoncli'):
  """Return a user-agent string for the API clients.

  Args:
    product: str, The product token, the name of the tool.

  Returns:
    str, For example 'tritoncli/0.1.0 (x86_64-linux; python3.12.1)'.
  """
  return '{product}/{version} ({machine}-{system}; python{py_version})'.format(
      product=product,
      version=TRITON_CLI_VERSION,
      machine=platform.machine() or 'unknown',
      system=platform.system().lower() or 'unknown',
      py_version=platform.python_version())
