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

"""Tests for the triton commands."""

import datetime
import os
from unittest import mock

from tritoncli import triton_main
from tritoncli.api_lib.triton import account
from tritoncli.api_lib.triton import compute
from tritoncli.core.util import times
from tritoncli.tests.lib import test_case


class TritonTestBase(test_case.CliTestBase):

  def SetUp(self):
    super(TritonTestBase, self).SetUp()
    self.cli = triton_main.CreateCLI(store=self.store,
                                     terminal_factory=self.NewTerminal)
    self.compute = mock.Mock()
    self.account = mock.Mock()
    self.new_compute = self.StartPatch(
        'tritoncli.command_lib.triton.clients.NewComputeClient',
        return_value=self.compute)
    self.new_account = self.StartPatch(
        'tritoncli.command_lib.triton.clients.NewAccountClient',
        return_value=self.account)


class InstancesTest(TritonTestBase):

  def testCount(self):
    self.compute.CountInstances.return_value = 7
    self.assertEqual(0, self.Run(['instances', 'count']))
    self.assertIn('Found 7 instances', self.GetOutput())

  def testGetRequiresIDOrName(self):
    self.assertEqual(1, self.Run(['instances', 'get']))
    self.assertIn('Either `id` or `name` must be specified', self.GetErr())
    self.new_compute.assert_not_called()

  def testGetRejectsIDAndName(self):
    self.assertEqual(1, self.Run(['instances', 'get', '--id', 'abc',
                                  '--name', 'web']))
    self.assertIn('Only 1 of `id` or `name` must be specified',
                  self.GetErr())
    self.new_compute.assert_not_called()

  def testGet(self):
    self.compute.GetInstance.return_value = compute.Instance(
        id='abc', name='web', package='g4', image='img-1', brand='lx',
        firewall_enabled=True)
    self.assertEqual(0, self.Run(['instances', 'get', '--name', 'web']))
    output = self.GetOutput()
    self.assertIn('web', output)
    self.assertIn('firewall enabled', output)
    self.assertIn('true', output)

  def testList(self):
    now = times.Now(times.UTC)
    self.compute.ListInstances.return_value = [
        compute.Instance(id='abcdef0123456789', name='web', image='imgA',
                         state='running', docker=True, brand='KVM',
                         firewall_enabled=False,
                         created=now - datetime.timedelta(days=800)),
        compute.Instance(id='0011223344556677', name='db', image='imgB',
                         state='stopped', docker=False, brand='lx',
                         firewall_enabled=True,
                         created=now - datetime.timedelta(hours=3)),
    ]
    self.compute.ListImages.return_value = [
        compute.Image(id='imgA', name='base', version='1.0')]
    self.assertEqual(0, self.Run(['instances', 'list']))
    lines = self.GetOutput().splitlines()
    self.assertEqual(['SHORTID', 'NAME', 'IMG', 'STATE', 'FLAGS', 'AGE'],
                     lines[0].split())
    self.assertEqual(['abcdef01', 'web', 'base@1.0', 'running', 'DK', '2y'],
                     lines[1].split())
    self.assertEqual(['00112233', 'db', 'imgB', 'stopped', 'F', '3h'],
                     lines[2].split())

  def testIP(self):
    self.compute.GetInstance.return_value = compute.Instance(
        primary_ip='10.0.0.5')
    self.assertEqual(0, self.Run(['instances', 'ip', '--id', 'abc']))
    self.assertEqual('10.0.0.5\n', self.GetOutput())

  def testDelete(self):
    self.compute.DeleteInstance.return_value = compute.Instance(name='web')
    self.assertEqual(0, self.Run(['instances', 'delete', '--name', 'web']))
    self.assertIn('Deleted instance "web"', self.GetOutput())

  def testCreateRequiresName(self):
    self.assertEqual(1, self.Run(['instances', 'create', '--pkg-id', 'p',
                                  '--img-id', 'i']))
    self.assertIn('required flag(s)', self.GetErr())
    self.new_compute.assert_not_called()

  def testCreateRequiresPackage(self):
    self.assertEqual(1, self.Run(['instances', 'create', '--name', 'web',
                                  '--img-id', 'i']))
    self.assertIn('Either `pkg-name` or `pkg-id` must be specified',
                  self.GetErr())

  def testCreateRequiresImage(self):
    self.assertEqual(1, self.Run(['instances', 'create', '--name', 'web',
                                  '--pkg-id', 'p']))
    self.assertIn('Either `img-name` or `img-id` must be specified',
                  self.GetErr())

  def testCreate(self):
    self.compute.CreateInstance.return_value = compute.Instance(
        id='abc', name='web')
    self.assertEqual(0, self.Run(['instances', 'create', '--name', 'web',
                                  '--pkg-id', 'p', '--img-id', 'i']))
    self.assertIn('Created instance "web" (abc)', self.GetOutput())


class PackagesTest(TritonTestBase):

  def testGetPrintsJSON(self):
    self.compute.GetPackage.return_value = compute.Package(
        {'id': 'p1', 'name': 'g4-highcpu-1G', 'memory': 1024})
    self.assertEqual(0, self.Run(['packages', 'get', '--name',
                                  'g4-highcpu-1G']))
    self.assertIn('"memory": 1024', self.GetOutput())

  def testGetRequiresExactlyOne(self):
    self.assertEqual(1, self.Run(['packages', 'get']))
    self.assertEqual(1, self.Run(['packages', 'get', '--id', 'a',
                                  '--name', 'b']))
    self.new_compute.assert_not_called()

  def testList(self):
    self.compute.ListPackages.return_value = [
        compute.Package(id='p1', name='small', memory=512, disk=10240,
                        swap=1024, vcpus=1)]
    self.assertEqual(0, self.Run(['pkgs', 'ls', '--memory', '512']))
    self.assertIn('small', self.GetOutput())
    self.assertIn('512 MB', self.GetOutput())


class KeysTest(TritonTestBase):

  def testDeleteRejectsBoth(self):
    self.assertEqual(1, self.Run(['keys', 'delete', '--fingerprint', 'X',
                                  '--keyname', 'Y']))
    self.assertIn('Only 1 of `fingerprint` or `keyname` must be specified',
                  self.GetErr())
    self.new_account.assert_not_called()

  def testDelete(self):
    self.account.DeleteKey.return_value = account.Key(name='laptop')
    self.assertEqual(0, self.Run(['keys', 'delete', '--keyname', 'laptop']))
    self.assertIn('Deleted key "laptop"', self.GetOutput())

  def testList(self):
    self.account.ListKeys.return_value = [
        account.Key(name='laptop', fingerprint='aa:bb')]
    self.assertEqual(0, self.Run(['keys', 'list']))
    lines = self.GetOutput().splitlines()
    self.assertEqual(['NAME', 'FINGERPRINT'], lines[0].split())
    self.assertEqual(['laptop', 'aa:bb'], lines[1].split())

  def testCreateRequiresPublicKey(self):
    self.assertEqual(1, self.Run(['keys', 'add', '--keyname', 'laptop']))
    self.assertIn('required flag(s)', self.GetErr())


class AccountTest(TritonTestBase):

  def testGet(self):
    self.account.Get.return_value = account.Account(
        {'id': 'u1', 'login': 'bob', 'email': 'bob@example.com',
         'triton_cns_enabled': True, 'created': '2018-01-02T03:04:05Z',
         'updated': '2018-01-02T03:04:05Z'})
    self.assertEqual(0, self.Run(['account', 'get', '--utc']))
    output = self.GetOutput()
    self.assertIn('login: bob\n', output)
    self.assertIn('triton_cns_enabled: true\n', output)
    self.assertIn('created: 2018-01-02 03:04:05 +0000 UTC (', output)


class DocTest(TritonTestBase):

  def testManPages(self):
    man_dir = os.path.join(self.CreateTempDir(), 'tmp')
    self.assertEqual(0, self.Run(['doc', 'man', '--man-dir', man_dir]))
    pages = os.listdir(os.path.join(man_dir, 'man8'))
    self.assertIn('triton.8', pages)
    self.assertIn('triton-instances.8', pages)
    self.assertIn('triton-instances-list.8', pages)
    self.assertIn('triton-doc-man.8', pages)
    self.assertNotIn('triton-help.8', pages)
    self.assertIn('Installing man(1) pages', self.GetErr())

  def testMarkdown(self):
    md_dir = os.path.join(self.CreateTempDir(), 'md')
    self.assertEqual(0, self.Run(['docs', 'md', '--markdown-dir', md_dir]))
    self.assertIn('triton_keys_list.md', os.listdir(md_dir))


class VersionTest(TritonTestBase):

  def testVersion(self):
    self.assertEqual(0, self.Run(['version']))
    self.assertTrue(self.GetOutput().startswith('Version: triton/'))


class ExactlyOneTest(TritonTestBase):
  """Commands that act on a single resource named by one of two flags."""

  def _Cases(self):
    instance = compute.Instance(id='abc', name='web', primary_ip='10.0.0.5')
    key = account.Key(name='laptop', fingerprint='aa:bb')
    package = compute.Package({'id': 'p1', 'name': 'small'})
    by_id = ('--id', 'abc')
    by_name = ('--name', 'web')
    by_fingerprint = ('--fingerprint', 'aa:bb')
    by_keyname = ('--keyname', 'laptop')
    return [
        (['instances', 'get'], by_id, by_name, 'id', 'name',
         self.compute, 'GetInstance', instance, 'web'),
        (['instances', 'ip'], by_id, by_name, 'id', 'name',
         self.compute, 'GetInstance', instance, '10.0.0.5\n'),
        (['instances', 'delete'], by_id, by_name, 'id', 'name',
         self.compute, 'DeleteInstance', instance, 'Deleted instance "web"'),
        (['instances', 'reboot'], by_id, by_name, 'id', 'name',
         self.compute, 'RebootInstance', instance,
         'Rebooted instance "web"'),
        (['instances', 'start'], by_id, by_name, 'id', 'name',
         self.compute, 'StartInstance', instance, 'Started instance "web"'),
        (['instances', 'stop'], by_id, by_name, 'id', 'name',
         self.compute, 'StopInstance', instance, 'Stopped instance "web"'),
        (['packages', 'get'], ('--id', 'p1'), ('--name', 'small'), 'id',
         'name', self.compute, 'GetPackage', package, '"name": "small"'),
        (['keys', 'get'], by_fingerprint, by_keyname, 'fingerprint',
         'keyname', self.account, 'GetKey', key, 'aa:bb'),
        (['keys', 'delete'], by_fingerprint, by_keyname, 'fingerprint',
         'keyname', self.account, 'DeleteKey', key, 'Deleted key "laptop"'),
    ]

  def _RunCapturing(self, args):
    out_start = len(self.GetOutput())
    err_start = len(self.GetErr())
    code = self.Run(args)
    return code, self.GetOutput()[out_start:], self.GetErr()[err_start:]

  def testNeitherFlag(self):
    for command, _, _, name_a, name_b, agent, method, _, _ in self._Cases():
      with self.subTest(command=command):
        code, out, err = self._RunCapturing(command)
        self.assertEqual(1, code)
        self.assertEqual('', out)
        self.assertIn('Either `{0}` or `{1}` must be specified'.format(
            name_a, name_b), err)
        getattr(agent, method).assert_not_called()

  def testBothFlags(self):
    for command, flag_a, flag_b, name_a, name_b, agent, method, _, _ in (
        self._Cases()):
      with self.subTest(command=command):
        code, out, err = self._RunCapturing(
            command + list(flag_a) + list(flag_b))
        self.assertEqual(1, code)
        self.assertEqual('', out)
        self.assertIn('Only 1 of `{0}` or `{1}` must be specified'.format(
            name_a, name_b), err)
        getattr(agent, method).assert_not_called()

  def testExactlyOneFlag(self):
    for command, flag_a, flag_b, _, _, agent, method, result, expected in (
        self._Cases()):
      for flag in (flag_a, flag_b):
        with self.subTest(command=command, flag=flag[0]):
          agent.reset_mock()
          getattr(agent, method).return_value = result
          code, out, _ = self._RunCapturing(command + list(flag))
          self.assertEqual(0, code)
          self.assertIn(expected, out)
          getattr(agent, method).assert_called_once_with()
