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

"""Tests for the service agents."""

from unittest import mock

from tritoncli.api_lib.triton import account
from tritoncli.api_lib.triton import compute
from tritoncli.api_lib.triton import errors
from tritoncli.calliope import exceptions as calliope_exceptions
from tritoncli.command_lib.triton import clients
from tritoncli.core import properties
from tritoncli.tests.lib import test_case


class NewClientTest(test_case.Base):

  def testConstructionErrorsArePrefixed(self):
    store = properties.PropertyStore()
    store.SetExplicit('general.triton.account', 'bob')
    store.SetExplicit('general.triton.key-id', 'aa:bb')
    self.StartPatch(
        'tritoncli.api_lib.triton.compute.NewClient',
        side_effect=errors.Error('endpoint must be provided'))
    self.StartPatch('tritoncli.command_lib.triton.config.NewTritonConfig')
    with self.assertRaises(calliope_exceptions.ConfigError) as ctx:
      clients.NewComputeClient(store)
    self.assertEqual(
        'Error Creating Triton Compute Client: endpoint must be provided',
        str(ctx.exception))
    self.assertIsInstance(ctx.exception.__cause__, errors.Error)

  def testAccountPrefix(self):
    store = properties.PropertyStore()
    self.StartPatch('tritoncli.api_lib.triton.account.NewClient',
                    side_effect=errors.Error('boom'))
    self.StartPatch('tritoncli.command_lib.triton.config.NewTritonConfig')
    with self.assertRaisesRegex(calliope_exceptions.ConfigError,
                                '^Error Creating Triton Account Client: boom$'):
      clients.NewAccountClient(store)

  def testNetworkAndIdentityPrefixes(self):
    store = properties.PropertyStore()
    self.StartPatch('tritoncli.command_lib.triton.config.NewTritonConfig')
    self.StartPatch('tritoncli.api_lib.triton.network.NewClient',
                    side_effect=errors.Error('boom'))
    self.StartPatch('tritoncli.api_lib.triton.identity.NewClient',
                    side_effect=errors.Error('boom'))
    with self.assertRaisesRegex(calliope_exceptions.ConfigError,
                                '^Error Creating Triton Netowkr Client: boom$'):
      clients.NewNetworkClient(store)
    with self.assertRaisesRegex(
        calliope_exceptions.ConfigError,
        '^Error Creating Triton Identity Client: boom$'):
      clients.NewIdentityClient(store)


class FormatImageNameTest(test_case.Base):

  def testKnownImage(self):
    images = [compute.Image(id='img-1', name='base-64', version='18.1.0')]
    self.assertEqual('base-64@18.1.0',
                     clients.FormatImageName(images, 'img-1'))

  def testUnknownImage(self):
    self.assertEqual('12345678', clients.FormatImageName([], '1234567890'))


class ComputeAgentTest(test_case.Base):

  def SetUp(self):
    self.store = properties.PropertyStore()
    self.client = mock.Mock()
    self.agent = clients.ComputeAgent(self.client, self.store)

  def testNotFoundByID(self):
    self.store.SetExplicit('compute.instance.id', 'abc')
    self.client.instances.Get.side_effect = errors.APIError(
        status_code=404, code='ResourceNotFound')
    with self.assertRaisesRegex(clients.NotFoundError, 'Instance not found'):
      self.agent.GetInstance()

  def testOtherErrorsPropagate(self):
    self.store.SetExplicit('compute.instance.id', 'abc')
    self.client.instances.Get.side_effect = errors.APIError(
        status_code=500, code='InternalError')
    with self.assertRaises(errors.APIError):
      self.agent.GetInstance()

  def testNotFoundByName(self):
    self.store.SetExplicit('compute.instance.name', 'web')
    self.client.instances.List.return_value = []
    with self.assertRaisesRegex(clients.NotFoundError, 'No instance'):
      self.agent.GetInstance()
    self.client.instances.List.assert_called_once_with(name='web')

  def testListFilters(self):
    self.store.SetExplicit('compute.instance.tag', ['role=web', 'env = prod'])
    self.store.SetExplicit('compute.instance.state', 'running')
    self.client.instances.List.return_value = []
    self.agent.ListInstances()
    self.client.instances.List.assert_called_once_with(
        name=None, tags={'role': 'web', 'env': 'prod'}, state='running',
        brand=None)

  def testCreateResolvesNames(self):
    self.store.SetExplicit('compute.instance.name', 'web')
    self.store.SetExplicit('compute.package.name', 'g4-highcpu-1G')
    self.store.SetExplicit('compute.image.id', 'img-1')
    self.store.SetExplicit('compute.instance.userdata', 'echo hi')
    self.client.packages.List.return_value = [
        compute.Package(id='pkg-1', name='g4-highcpu-1G')]
    self.client.instances.Create.return_value = compute.Instance(id='i-1')
    self.assertEqual('i-1', self.agent.CreateInstance().id)
    kwargs = self.client.instances.Create.call_args[1]
    self.assertEqual('pkg-1', kwargs['package'])
    self.assertEqual('img-1', kwargs['image'])
    self.assertEqual({'user-data': 'echo hi'}, kwargs['metadata'])

  def testWaitForRunning(self):
    sleep = self.StartPatch('time.sleep')
    self.client.instances.Get.side_effect = [
        compute.Instance(id='i-1', state='provisioning'),
        compute.Instance(id='i-1', state='running'),
    ]
    self.assertEqual('running', self.agent.WaitForRunning('i-1').state)
    self.assertEqual(2, sleep.call_count)
    sleep.assert_called_with(clients.WAIT_INTERVAL_SECONDS)

  def testWaitForFailed(self):
    self.StartPatch('time.sleep')
    self.client.instances.Get.return_value = compute.Instance(
        id='i-1', state='failed')
    with self.assertRaisesRegex(calliope_exceptions.RemoteError,
                                'failed to provision'):
      self.agent.WaitForRunning('i-1')


class AccountAgentTest(test_case.Base):

  def SetUp(self):
    self.store = properties.PropertyStore()
    self.client = mock.Mock()
    self.agent = clients.AccountAgent(self.client, self.store)

  def testDeleteByFingerprint(self):
    self.store.SetExplicit('keys.fingerprint', 'aa:bb')
    self.client.keys.List.return_value = [
        account.Key(name='laptop', fingerprint='00:11'),
        account.Key(name='desktop', fingerprint='aa:bb'),
    ]
    self.assertEqual('desktop', self.agent.DeleteKey().name)
    self.client.keys.Delete.assert_called_once_with('desktop')

  def testUnknownFingerprint(self):
    self.store.SetExplicit('keys.fingerprint', 'ff:ff')
    self.client.keys.List.return_value = []
    with self.assertRaisesRegex(clients.NotFoundError, 'Key not found'):
      self.agent.GetKey()

  def testUpdateSendsCNSFlag(self):
    self.store.SetExplicit('account.triton_cns_enabled', 'true')
    self.store.SetExplicit('account.email', 'bob@example.com')
    self.agent.Update()
    kwargs = self.client.Update.call_args[1]
    self.assertTrue(kwargs['triton_cns_enabled'])
    self.assertEqual('bob@example.com', kwargs['email'])
    self.assertEqual('', kwargs['phone'])
