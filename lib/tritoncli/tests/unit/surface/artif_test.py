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

"""Tests for the artif-* tools."""

import json
from unittest import mock

from tritoncli import artif_main
from tritoncli.api_lib.artifactory import client as artifactory_client
from tritoncli.api_lib.artifactory import repositories
from tritoncli.api_lib.artifactory import resources
from tritoncli.command_lib.artifactory import util
from tritoncli.tests.lib import test_case


def _DockerItem(**properties):
  return resources.AQLItem({
      'repo': 'docker-local',
      'updated': '2018-02-03T04:05:06.000Z',
      'modified_by': 'admin',
      'properties': [{'key': k.replace('_', '.'), 'value': v}
                     for k, v in sorted(properties.items())],
  })


class RenderersTest(test_case.Base):

  def testDockerRow(self):
    item = _DockerItem(docker_repoName='busybox', docker_manifest='latest',
                       docker_label_description='A tiny image')
    self.assertEqual(
        ['busybox:latest', 'A tiny image', '2018-02-03T04:05:06.000Z',
         'admin'], util.DockerRow(item))

  def testDockerRowWithoutDescription(self):
    item = _DockerItem(docker_repoName='busybox', docker_manifest='1.0')
    self.assertEqual(util.NO_DESCRIPTION, util.DockerRow(item)[1])

  def testDockerLabels(self):
    item = _DockerItem(docker_repoName='busybox', docker_manifest='1.0',
                       docker_label_maintainer='ops',
                       docker_label_description='d', other='x')
    self.assertEqual('docker.label.description = d\n'
                     'docker.label.maintainer = ops',
                     util.DockerRow(item, labels=True)[4])

  def testVagrantRow(self):
    item = resources.AQLItem({
        'repo': 'vagrant-local',
        'modified': '2018-01-01',
        'modified_by': 'bob',
        'properties': [{'key': 'box_name', 'value': 'centos'},
                       {'key': 'box_version', 'value': '7.4'},
                       {'key': 'box_provider', 'value': 'virtualbox'}],
    })
    self.assertEqual(
        ['vagrant-local/centos', '7.4', 'virtualbox', '2018-01-01', 'bob'],
        util.VagrantRow(item))

  def testRepositorySuffixColumns(self):
    body = {'key': 'r', 'rclass': 'x', 'blackedOut': False}
    remote = repositories.RemoteRepositoryConfig(dict(body, url='https://up'))
    local = repositories.LocalRepositoryConfig(
        dict(body, repoLayoutRef='maven-2-default'))
    virtual = repositories.VirtualRepositoryConfig(
        dict(body, repositories=['a', 'b']))
    heading, row = util.RepositoryTable(remote)
    self.assertEqual(('Url', 'https://up'), (heading[-1], row[-1]))
    heading, row = util.RepositoryTable(local)
    self.assertEqual(('Layout', 'maven-2-default'), (heading[-1], row[-1]))
    heading, row = util.RepositoryTable(virtual)
    self.assertEqual(('Repositories', 'a\nb'), (heading[-1], row[-1]))
    self.assertEqual('false', row[5])

  def testRepositoryKindFromContentType(self):
    repo = repositories.FromResponse(
        repositories.REMOTE_MIME_TYPE + '; charset=utf-8', {'key': 'r'})
    self.assertIsInstance(repo, repositories.RemoteRepositoryConfig)
    repo = repositories.FromResponse(None, {'key': 'r', 'rclass': 'virtual'})
    self.assertIsInstance(repo, repositories.VirtualRepositoryConfig)

  def testFormatPrincipals(self):
    self.assertEqual('alice (r,w)\nbob (m)', util.FormatPrincipals(
        {'bob': ['m'], 'alice': ['r', 'w']}))


class ClientTest(test_case.Base):

  def _Response(self, status_code=200, body=None, headers=None):
    response = mock.Mock(status_code=status_code, headers=headers or {},
                         text=json.dumps(body))
    response.json.return_value = body
    return response

  def SetUp(self):
    self.session = mock.Mock(headers={})
    self.client = artifactory_client.Client.FromEnvironment(
        environ={'ARTIFACTORY_URL': 'https://art.example.com/artifactory/',
                 'ARTIFACTORY_USERNAME': 'bob',
                 'ARTIFACTORY_PASSWORD': 'secret'},
        session=self.session)

  def testMissingURL(self):
    with self.assertRaisesRegex(artifactory_client.ConfigError,
                                'ARTIFACTORY_URL'):
      artifactory_client.Client.FromEnvironment(environ={})

  def testMissingToken(self):
    with self.assertRaisesRegex(artifactory_client.ConfigError,
                                'ARTIFACTORY_TOKEN'):
      artifactory_client.Client.FromEnvironment(
          environ={'ARTIFACTORY_URL': 'https://a',
                   'ARTIFACTORY_AUTH_TYPE': 'token'})

  def testReprHidesPassword(self):
    self.assertNotIn('secret', repr(self.client))
    self.assertIn('https://art.example.com/artifactory', repr(self.client))

  def testListRepositoriesByKind(self):
    self.session.request.return_value = self._Response(
        body=[{'key': 'libs', 'type': 'LOCAL'}])
    repos = self.client.ListRepositories('local')
    self.assertEqual(['libs'], [r.key for r in repos])
    self.session.request.assert_called_once_with(
        'GET', 'https://art.example.com/artifactory/api/repositories',
        params={'type': 'local'}, data=None, headers=None)

  def testErrorResponse(self):
    self.session.request.return_value = self._Response(
        status_code=404,
        body={'errors': [{'status': 404, 'message': 'User not found'}]})
    with self.assertRaisesRegex(artifactory_client.APIError,
                                '^404: User not found$'):
      self.client.GetUser('nobody')


class ToolsTest(test_case.CliTestBase):

  def SetUp(self):
    super(ToolsTest, self).SetUp()
    self.client = mock.Mock()
    self.new_client = self.StartPatch(
        'tritoncli.command_lib.artifactory.util.NewClient',
        return_value=self.client)

  def _Run(self, tool, args):
    self.cli = artif_main.CreateCLI(tool, store=self.store,
                                    terminal_factory=self.NewTerminal)
    return self.Run(args)

  def testToolName(self):
    self.assertEqual('artif-get-permission-target',
                     artif_main.ToolName('get_permission_target'))

  def testListUsers(self):
    self.client.ListUsers.return_value = [
        resources.UserRef(name='bob', uri='https://a/bob')]
    self.assertEqual(0, self._Run('list_users', []))
    self.assertIn('| bob  | https://a/bob |', self.GetOutput())

  def testListUsersJSON(self):
    self.client.ListUsers.return_value = [
        resources.UserRef(name='bob', uri='https://a/bob')]
    self.assertEqual(0, self._Run('list_users', ['--format', 'json']))
    self.assertEqual([{'Name': 'bob', 'Uri': 'https://a/bob'}],
                     json.loads(self.GetOutput()))

  def testClientErrorIsPrintedToStdout(self):
    self.client.GetUser.side_effect = artifactory_client.APIError(
        '404: User not found', status_code=404)
    self.assertEqual(1, self._Run('get_user', ['nobody']))
    self.assertEqual('404: User not found\n', self.GetOutput())
    self.client.GetUser.assert_called_once_with('nobody')

  def testConfigErrorIsPrintedToStdout(self):
    self.new_client.side_effect = artifactory_client.ConfigError(
        'You must set the environment variable ARTIFACTORY_URL')
    self.assertEqual(1, self._Run('cli', []))
    self.assertIn('ARTIFACTORY_URL', self.GetOutput())

  def testDeleteUser(self):
    self.assertEqual(0, self._Run('delete_user', ['bob']))
    self.assertEqual('User bob deleted\n', self.GetOutput())
    self.client.DeleteUser.assert_called_once_with('bob')

  def testDeleteUserRequiresName(self):
    self.assertEqual(1, self._Run('delete_user', []))
    self.client.DeleteUser.assert_not_called()

  def testDeployArtifact(self):
    self.client.DeployArtifact.return_value = resources.DeployedArtifact(
        uri='https://a/libs/x.jar')
    self.assertEqual(0, self._Run('deploy_artifact', [
        'libs', 'x.jar', 'dir/', '--property', 'a=1', '--property', 'b=2']))
    self.assertEqual('https://a/libs/x.jar\n', self.GetOutput())
    self.client.DeployArtifact.assert_called_once_with(
        'libs', 'x.jar', path='dir/', properties={'a': '1', 'b': '2'})

  def testDeployArtifactSilentFailure(self):
    self.client.DeployArtifact.side_effect = artifactory_client.APIError(
        '403: Forbidden', status_code=403)
    self.assertEqual(1, self._Run('deploy_artifact',
                                  ['libs', 'x.jar', '--silent']))
    self.assertEqual('', self.GetOutput())

  def testGetPermissionTargetLegend(self):
    self.client.GetPermissionTarget.return_value = resources.PermissionTarget(
        {'name': 'all', 'repositories': ['libs'],
         'principals': {'users': {'bob': ['r']}}})
    self.assertEqual(0, self._Run('get_permission_target', ['all']))
    self.assertTrue(self.GetOutput().endswith(
        resources.PERMISSION_LEGEND + '\n'))
    self.assertIn('bob (r)', self.GetOutput())

  def testDockerSearch(self):
    self.client.DockerSearch.return_value = [
        _DockerItem(docker_repoName='busybox', docker_manifest='latest')]
    self.assertEqual(0, self._Run('docker_search', ['busy']))
    self.assertIn('busybox:latest', self.GetOutput())
    self.assertIn(util.NO_DESCRIPTION, self.GetOutput())
    self.assertNotIn('LABELS', self.GetOutput())

  def testListReposKind(self):
    self.client.ListRepositories.return_value = []
    self.assertEqual(0, self._Run('list_repos', ['--kind', 'remote']))
    self.client.ListRepositories.assert_called_once_with('remote')
