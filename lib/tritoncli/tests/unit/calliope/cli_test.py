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

"""Tests for the command dispatcher."""

from unittest import mock

from tritoncli import manta_main
from tritoncli import triton_main
from tritoncli.core import properties
from tritoncli.tests.lib import test_case


class ExecuteTest(test_case.CliTestBase):

  def SetUp(self):
    super(ExecuteTest, self).SetUp()
    self.cli = triton_main.CreateCLI(store=self.store,
                                     terminal_factory=self.NewTerminal)
    self.seen = {}
    self.new_compute = self.StartPatch(
        'tritoncli.command_lib.triton.clients.NewComputeClient',
        side_effect=self._NewCompute)
    self.compute = mock.Mock()
    self.compute.CountInstances.return_value = 3

  def _NewCompute(self, store):
    self.seen['tag'] = store.GetStringSlice('compute.instance.tag')
    self.seen['account'] = store.GetString('general.triton.account')
    self.seen['account_source'] = store.Source('general.triton.account')
    self.seen['frozen'] = store.frozen
    return self.compute

  def testTagFlagIsNormalized(self):
    self.assertEqual(0, self.Run(['instances', 'count', '--tag', 'foo']))
    self.assertEqual(['foo'], self.seen['tag'])

  def testRepeatedTags(self):
    self.assertEqual(0, self.Run(['instances', 'count', '--tags', 'a=1',
                                  '-t', 'b=2']))
    self.assertEqual(['a=1', 'b=2'], self.seen['tag'])

  def testGroupAlias(self):
    self.assertEqual(0, self.Run(['vms', 'count']))
    self.assertIn('Found 3 instances', self.GetOutput())

  def testEnvironmentThenFlag(self):
    self.assertEqual(0, self.Run(['instances', 'count'],
                                 environ={'SDC_ACCOUNT': 'sdc'}))
    self.assertEqual('sdc', self.seen['account'])
    self.assertEqual(properties.ConfigSource.ENV, self.seen['account_source'])
    self.assertTrue(self.seen['frozen'])

    self.assertEqual(0, self.Run(['instances', 'count', '--account', 'flag'],
                                 environ={'SDC_ACCOUNT': 'sdc'}))
    self.assertEqual('flag', self.seen['account'])
    self.assertEqual(properties.ConfigSource.FLAG,
                     self.seen['account_source'])

  def testValuesDoNotLeakBetweenInvocations(self):
    self.Run(['instances', 'count', '--account', 'bob'])
    self.assertEqual('', self.store.GetString('general.triton.account'))
    self.assertFalse(self.store.frozen)

  def testNoArgs(self):
    self.assertEqual(1, self.Run(['instances', 'count', 'extra']))
    self.assertIn('unknown command', self.GetErr())
    self.assertIn('extra', self.GetErr())
    self.new_compute.assert_not_called()

  def testUnknownFlag(self):
    self.assertEqual(1, self.Run(['instances', 'count', '--bogus']))
    self.new_compute.assert_not_called()

  def testGroupWithoutCommandShowsUsage(self):
    self.assertEqual(0, self.Run(['instances']))
    self.assertIn('instances', self.GetOutput())
    self.new_compute.assert_not_called()

  def testHelpCommand(self):
    self.assertEqual(0, self.Run(['help', 'instances']))
    self.assertIn('instances', self.GetOutput())

  def testDrainedOnceOnSuccess(self):
    self.Run(['instances', 'count'])
    self.assertEqual(1, self.terminals[-1].drain_count)
    self.assertEqual('Found 3 instances\n', self.GetOutput())

  def testDrainedOnceOnError(self):
    self.compute.CountInstances.side_effect = RuntimeError('boom')
    self.assertEqual(1, self.Run(['instances', 'count']))
    self.assertEqual(1, self.terminals[-1].drain_count)
    self.assertIn('RuntimeError: boom', self.GetErr())

  def testLogLevelIsValidated(self):
    self.assertEqual(1, self.Run(['instances', 'count', '--log-level',
                                  'chatty']))
    self.assertIn('unsupported error level', self.GetErr())


class ArgSpecTest(test_case.CliTestBase):

  def SetUp(self):
    super(ArgSpecTest, self).SetUp()
    self.cli = manta_main.CreateCLI(store=self.store,
                                    terminal_factory=self.NewTerminal)
    self.storage = mock.Mock()
    self.new_storage = self.StartPatch(
        'tritoncli.command_lib.triton.clients.NewStorageClient',
        return_value=self.storage)
    self.storage.GetDirectoryListing.return_value = mock.Mock(
        entries=[], result_set_size=0)

  def testMaximumArgs(self):
    self.assertEqual(0, self.Run(['ls', 'a', 'b', 'c']))
    self.storage.GetDirectoryListing.assert_called_once_with(['a', 'b', 'c'])

  def testTooManyArgs(self):
    self.assertEqual(1, self.Run(['ls', 'a', 'b', 'c', 'd']))
    self.assertIn('accepts at most 3 arg(s), received 4', self.GetErr())
    self.new_storage.assert_not_called()


class LoaderTest(test_case.Base):

  def testLoadMessagesTellGroupsFromCommands(self):
    with self.assertLogs(level='DEBUG') as logs:
      triton_main.CreateCLI(store=properties.PropertyStore())
    messages = [record.getMessage() for record in logs.records]
    self.assertIn("Loaded Command Group: ['triton', 'instances']", messages)
    self.assertIn("Loaded Command: ['triton', 'version']", messages)
    self.assertNotIn("Loaded Command Group: ['triton', 'version']", messages)
