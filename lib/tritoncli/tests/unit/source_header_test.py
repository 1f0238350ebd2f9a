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

"""Tests for the license header of the tritoncli sources."""

import os

import tritoncli
from tritoncli.tests.lib import test_case


_HEADER = '# Copyright 2018 The tritoncli Authors. All Rights Reserved.\n'


class SourceHeaderTest(test_case.Base):

  def testEverySourceFileCarriesTheProjectHeader(self):
    root = os.path.dirname(tritoncli.__file__)
    checked = 0
    for directory, _, names in os.walk(root):
      for name in names:
        path = os.path.join(directory, name)
        if not name.endswith('.py') or not os.path.getsize(path):
          continue
        with open(path) as f:
          self.assertEqual(_HEADER, f.readline(), path)
        checked += 1
    self.assertGreater(checked, 0)
