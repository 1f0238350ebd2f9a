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

"""A client for the Artifactory REST API.

The client is configured from the environment:

  ARTIFACTORY_URL: The base URL, e.g. https://example.com/artifactory.
  ARTIFACTORY_AUTH_TYPE: basic (the default) or token.
  ARTIFACTORY_USERNAME, ARTIFACTORY_PASSWORD: The basic credentials.
  ARTIFACTORY_TOKEN: The API key sent with token authentication.
"""

import hashlib
import os
import posixpath

from requests import auth as requests_auth

from tritoncli.api_lib.artifactory import repositories
from tritoncli.api_lib.artifactory import resources
from tritoncli.calliope import exceptions as calliope_exceptions
from tritoncli.core import config
from tritoncli.core import exceptions as core_exceptions
from tritoncli.core import log
from tritoncli.core import requests as core_requests
from tritoncli.core.util import files


AUTH_BASIC = 'basic'
AUTH_TOKEN = 'token'

TOKEN_HEADER = 'X-JFrog-Art-Api'

REPOSITORY_KINDS = ('local', 'remote', 'virtual', 'all')

DOCKER_AQL = (
    'items.find({{"name":"manifest.json",'
    '"@docker.repoName":{{"$match":"*{criteria}*"}}}})'
    '.include("*","property.*")')

VAGRANT_AQL = (
    'items.find({{"@box_name":{{"$match":"*{criteria}*"}}}})'
    '.include("*","property.*")')


class Error(core_exceptions.Error):
  """Base class for the Artifactory client errors."""


class ConfigError(calliope_exceptions.ConfigError):
  """The environment does not describe a usable client."""


class APIError(calliope_exceptions.RemoteError):
  """An error response of Artifactory."""

  @classmethod
  def FromResponse(cls, response):
    """Builds the error from a failed requests.Response.

    Artifactory answers with {"errors": [{"status": ..., "message": ...}]}.

    Args:
      response: requests.Response, The failed response.

    Returns:
      APIError, The error.
    """
    try:
      body = response.json()
    except ValueError:
      body = None
    messages = []
    if isinstance(body, dict):
      messages = [e.get('message') for e in body.get('errors') or []
                  if e.get('message')]
    elif response.text:
      messages = [response.text.strip()]
    message = '; '.join(messages) or 'HTTP error {0}'.format(
        response.status_code)
    return cls('{0}: {1}'.format(response.status_code, message),
               status_code=response.status_code)


class Client(object):
  """Executes requests against one Artifactory server.

  Attributes:
    url: str, The base URL without a trailing slash.
    auth_type: str, AUTH_BASIC or AUTH_TOKEN.
    username: str, The basic auth user.
  """

  def __init__(self, url, username=None, password=None, token=None,
               auth_type=AUTH_BASIC, session=None, log_stats=False):
    if not url:
      raise ConfigError(
          'You must set the environment variable ARTIFACTORY_URL')
    if auth_type not in (AUTH_BASIC, AUTH_TOKEN):
      raise ConfigError(
          'Unsupported ARTIFACTORY_AUTH_TYPE [{0}], use {1} or {2}'.format(
              auth_type, AUTH_BASIC, AUTH_TOKEN))
    if auth_type == AUTH_TOKEN and not token:
      raise ConfigError(
          'You must set the environment variable ARTIFACTORY_TOKEN')
    if auth_type == AUTH_BASIC and not (username and password):
      raise ConfigError(
          'You must set the environment variables ARTIFACTORY_USERNAME '
          'and ARTIFACTORY_PASSWORD')
    self.url = url.rstrip('/')
    self.auth_type = auth_type
    self.username = username
    self._session = core_requests.GetSession(
        user_agent=config.MakeUserAgentString('artif'), log_stats=log_stats,
        session=session)
    if auth_type == AUTH_TOKEN:
      self._session.headers[TOKEN_HEADER] = token
    else:
      self._session.auth = requests_auth.HTTPBasicAuth(username, password)

  @classmethod
  def FromEnvironment(cls, environ=None, session=None):
    """Creates a client from the ARTIFACTORY_* environment variables.

    Args:
      environ: {str: str}, The environment, os.environ if None.
      session: requests.Session, The transport, a new one if None.

    Returns:
      Client, The configured client.

    Raises:
      ConfigError: If a required variable is missing.
    """
    if environ is None:
      environ = os.environ
    return cls(environ.get('ARTIFACTORY_URL'),
               username=environ.get('ARTIFACTORY_USERNAME'),
               password=environ.get('ARTIFACTORY_PASSWORD'),
               token=environ.get('ARTIFACTORY_TOKEN'),
               auth_type=environ.get('ARTIFACTORY_AUTH_TYPE') or AUTH_BASIC,
               session=session)

  def __repr__(self):
    return 'Client(url={0!r}, auth_type={1!r}, username={2!r})'.format(
        self.url, self.auth_type, self.username)

  def ExecuteRequest(self, method, path, query=None, data=None, headers=None):
    """Sends one request.

    Args:
      method: str, The HTTP method.
      path: str, The path relative to the base URL.
      query: {str: str}, The query parameters.
      data: str or bytes, The request body.
      headers: {str: str}, Extra request headers.

    Returns:
      requests.Response, The successful response.

    Raises:
      APIError: If the server answered with an error status.
    """
    log.debug('%s %s %s', method, path, query or '')
    response = self._session.request(
        method, self.url + '/' + path.lstrip('/'), params=query, data=data,
        headers=headers)
    if response.status_code >= 400:
      raise APIError.FromResponse(response)
    return response

  def ExecuteRequestJSON(self, method, path, query=None, data=None,
                         headers=None):
    response = self.ExecuteRequest(method, path, query=query, data=data,
                                   headers=headers)
    try:
      return response.json()
    except ValueError as e:
      raise Error('unable to decode response of {0} {1}: {2}'.format(
          method, path, e))

  # Security.

  def ListUsers(self):
    return resources.UserRef.FromList(
        self.ExecuteRequestJSON('GET', 'api/security/users'))

  def GetUser(self, name):
    return resources.User(
        self.ExecuteRequestJSON('GET', 'api/security/users/' + name))

  def DeleteUser(self, name):
    self.ExecuteRequest('DELETE', 'api/security/users/' + name)

  def ListGroups(self):
    return resources.GroupRef.FromList(
        self.ExecuteRequestJSON('GET', 'api/security/groups'))

  def GetGroup(self, name):
    return resources.Group(
        self.ExecuteRequestJSON('GET', 'api/security/groups/' + name))

  def GetPermissionTarget(self, name):
    return resources.PermissionTarget(
        self.ExecuteRequestJSON('GET', 'api/security/permissions/' + name))

  def GetEncryptedPassword(self):
    """Returns the encrypted password of the authenticated user."""
    return self.ExecuteRequest(
        'GET', 'api/security/encryptedPassword').text.strip()

  def CreateAPIKey(self):
    """Creates an API key for the authenticated user and returns it."""
    return self.ExecuteRequestJSON('POST', 'api/security/apiKey').get(
        'apiKey')

  # System.

  def GetLicense(self):
    return resources.License(
        self.ExecuteRequestJSON('GET', 'api/system/license'))

  # Repositories.

  def ListRepositories(self, kind='all'):
    """Lists the repositories.

    Args:
      kind: str, One of REPOSITORY_KINDS.

    Returns:
      [resources.RepositoryRef], The repositories.
    """
    query = {'type': kind} if kind and kind != 'all' else None
    return resources.RepositoryRef.FromList(
        self.ExecuteRequestJSON('GET', 'api/repositories', query=query))

  def GetRepository(self, key):
    """Gets the configuration of a repository.

    Returns:
      repositories.RepositoryConfig, The subclass matching the kind of the
      repository.
    """
    response = self.ExecuteRequest('GET', 'api/repositories/' + key)
    return repositories.FromResponse(response.headers.get('Content-Type'),
                                     response.json())

  # Storage.

  def DeployArtifact(self, repo, filename, path=None, properties=None):
    """Uploads a file.

    Args:
      repo: str, The repository key.
      filename: str, The local file.
      path: str, The target path in the repository. The base name of
        filename if empty; a path ending in / is a directory that receives
        the base name.
      properties: {str: str}, Properties set on the deployed artifact.

    Returns:
      resources.DeployedArtifact, The deployed artifact.
    """
    contents = files.ReadFileContents(filename, binary=True)
    base_name = os.path.basename(filename)
    if not path:
      path = base_name
    elif path.endswith('/'):
      path += base_name
    target = posixpath.join(repo, path.lstrip('/'))
    if properties:
      target += ''.join(';{0}={1}'.format(k, v)
                        for k, v in sorted(properties.items()))
    headers = {
        'X-Checksum-Sha1': hashlib.sha1(contents).hexdigest(),
        'X-Checksum-Md5': hashlib.md5(contents).hexdigest(),
    }
    return resources.DeployedArtifact(self.ExecuteRequestJSON(
        'PUT', target, data=contents, headers=headers))

  def ListFiles(self, repo, path='/'):
    return resources.FileList(self.ExecuteRequestJSON(
        'GET', posixpath.join('api/storage', repo, (path or '').lstrip('/')),
        query={'list': '', 'deep': '1'}))

  # Searches.

  def AQLSearch(self, query):
    """Runs an AQL query.

    Args:
      query: str, The query.

    Returns:
      [resources.AQLItem], The items found.
    """
    body = self.ExecuteRequestJSON('POST', 'api/search/aql', data=query,
                                   headers={'Content-Type': 'text/plain'})
    return resources.AQLItem.FromList(body.get('results'))

  def DockerSearch(self, criteria):
    return self.AQLSearch(DOCKER_AQL.format(criteria=criteria))

  def VagrantSearch(self, criteria):
    return self.AQLSearch(VAGRANT_AQL.format(criteria=criteria))

  def GAVCSearch(self, coordinates):
    """Searches artifacts by Maven coordinates.

    Args:
      coordinates: resources.GAVC, The coordinates.

    Returns:
      [resources.GAVCResult], The files found.
    """
    body = self.ExecuteRequestJSON(
        'GET', 'api/search/gavc', query=coordinates.Query(),
        headers={'X-Result-Detail': 'info'})
    return resources.GAVCResult.FromList(body.get('results'))
