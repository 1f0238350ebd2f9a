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

"""Tests for the manta commands."""

from unittest import mock

from tritoncli import manta_main
from tritoncli.api_lib.triton import storage
from tritoncli.tests.lib import test_case


class LsTest(test_case.CliTestBase):

  def SetUp(self):
    super(LsTest, self).SetUp()
    self.cli = manta_main.CreateCLI(store=self.store,
                                    terminal_factory=self.NewTerminal)
    self.storage = mock.Mock()
    self.new_storage = self.StartPatch(
        'tritoncli.command_lib.triton.clients.NewStorageClient',
        return_value=self.storage)

  def testLs(self):
    self.storage.GetDirectoryListing.return_value = storage.DirectoryListing(
        [storage.DirectoryEntry(name='a'), storage.DirectoryEntry(name='b')],
        2)
    self.assertEqual(0, self.Run(['ls', '/stor']))
    self.assertEqual('Found 2 directory entries\na/\nb/\n', self.GetOutput())
    self.storage.GetDirectoryListing.assert_called_once_with(['/stor'])

  def testStoreCredentialsFromMantaEnvironment(self):
    seen = {}

    def _NewStorage(store):
      seen['user'] = store.GetString('general.manta.account')
      seen['url'] = store.GetString('general.manta.url')
      return self.storage

    self.new_storage.side_effect = _NewStorage
    self.storage.GetDirectoryListing.return_value = storage.DirectoryListing(
        [], 0)
    self.assertEqual(0, self.Run(
        ['ls'], environ={'MANTA_USER': 'bob', 'SDC_URL': 'https://sdc',
                         'MANTA_URL': 'https://manta'}))
    self.assertEqual({'user': 'bob', 'url': 'https://manta'}, seen)

  def testVersion(self):
    self.assertEqual(0, self.Run(['version']))
    self.assertTrue(self.GetOutput().startswith('Version: manta/'))
