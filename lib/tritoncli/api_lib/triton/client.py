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

"""The HTTP transport shared by the Triton CloudAPI and Manta clients."""

import json
import posixpath

from tritoncli.api_lib.triton import errors
from tritoncli.core import config
from tritoncli.core import log
from tritoncli.core import requests as core_requests
from tritoncli.core.util import times


JSON_CONTENT_TYPE = 'application/json'


class Error(errors.Error):
  """Errors raised while building a client."""


class ClientConfig(object):
  """What a client needs to reach and authenticate to a service.

  Attributes:
    triton_url: str, The CloudAPI endpoint.
    manta_url: str, The Manta endpoint.
    account_name: str, The account (login) name.
    signers: [authentication.Signer], Signers, the first one is used.
  """

  def __init__(self, account_name, signers, triton_url=None, manta_url=None):
    self.triton_url = triton_url
    self.manta_url = manta_url
    self.account_name = account_name
    self.signers = list(signers)


class Client(object):
  """Executes signed requests against one service endpoint.

  Attributes:
    account_name: str, The account the requests are made for.
    endpoint: str, The service URL without a trailing slash.
  """

  def __init__(self, endpoint, account_name, signers, session=None,
               api_version=None, log_stats=False):
    """Creates the client.

    Args:
      endpoint: str, The service URL.
      account_name: str, The account name.
      signers: [authentication.Signer], The request signers.
      session: requests.Session, The transport, a new one if None.
      api_version: str, The CloudAPI version, sent as Api-Version when set.
      log_stats: bool, Log a line per HTTP exchange.

    Raises:
      Error: If the endpoint, the account or the signers are missing.
    """
    if not endpoint:
      raise Error('endpoint URL must be provided')
    if not account_name:
      raise Error('account name must be provided')
    if not signers:
      raise Error('at least one signer must be provided')
    self.endpoint = endpoint.rstrip('/')
    self.account_name = account_name
    self._signers = list(signers)
    self._api_version = api_version
    self._session = core_requests.GetSession(
        user_agent=config.MakeUserAgentString(), log_stats=log_stats,
        session=session)

  def AccountPath(self, *parts):
    """Joins parts below the account root, e.g. /<account>/machines/<id>."""
    return posixpath.join('/', self.account_name,
                          *[p.lstrip('/') for p in parts if p])

  def ExecuteRequest(self, method, path, query=None, body=None, headers=None):
    """Sends one signed request.

    Args:
      method: str, The HTTP method.
      path: str, The absolute request path.
      query: {str: str}, The query parameters.
      body: object, Sent JSON encoded when not None.
      headers: {str: str}, Extra request headers.

    Returns:
      requests.Response, The successful response.

    Raises:
      errors.APIError: If the service answered with an error status.
    """
    request_headers = {'Accept': JSON_CONTENT_TYPE}
    if self._api_version:
      request_headers['Api-Version'] = self._api_version
    request_headers.update(self._signers[0].Headers())
    if headers:
      request_headers.update(headers)
    data = None
    if body is not None:
      request_headers['Content-Type'] = JSON_CONTENT_TYPE
      data = json.dumps(body)
    log.debug('%s %s %s', method, path, query or '')
    response = self._session.request(
        method, self.endpoint + path, params=query, data=data,
        headers=request_headers)
    if response.status_code >= 400:
      raise errors.APIError.FromResponse(response)
    return response

  def ExecuteRequestJSON(self, method, path, query=None, body=None,
                         headers=None):
    """Sends one signed request and decodes the JSON body.

    Returns:
      The decoded body, None for an empty body.

    Raises:
      errors.APIError: If the service answered with an error status.
      errors.DecodeError: If the body is not JSON.
    """
    response = self.ExecuteRequest(method, path, query=query, body=body,
                                   headers=headers)
    if not response.content:
      return None
    try:
      return response.json()
    except ValueError as e:
      raise errors.DecodeError(
          'unable to decode response of {0} {1}: {2}'.format(method, path, e))


def NewTritonClient(client_config, session=None, log_stats=False):
  """Creates a CloudAPI transport from a ClientConfig."""
  return Client(client_config.triton_url, client_config.account_name,
                client_config.signers, session=session,
                api_version=config.CLOUDAPI_VERSION, log_stats=log_stats)


def NewMantaClient(client_config, session=None, log_stats=False):
  """Creates a Manta transport from a ClientConfig."""
  return Client(client_config.manta_url, client_config.account_name,
                client_config.signers, session=session, log_stats=log_stats)


class Resource(object):
  """A decoded API object with attribute access to the declared fields.

  Subclasses list their fields in _FIELDS as (attribute, json key) pairs and
  their timestamp attributes in _TIMES. Fields missing from the body are
  None. The decoded body is kept in raw.
  """

  _FIELDS = ()
  _TIMES = ()

  def __init__(self, raw=None, **kwargs):
    self.raw = dict(raw or {})
    for attribute, key in self._FIELDS:
      value = kwargs.get(attribute, self.raw.get(key))
      if value is not None and attribute in self._TIMES and isinstance(
          value, str):
        value = times.ParseDateTime(value)
      setattr(self, attribute, value)

  @classmethod
  def FromList(cls, items):
    return [cls(item) for item in items or []]

  def __repr__(self):
    return '{0}({1})'.format(type(self).__name__, ', '.join(
        '{0}={1!r}'.format(a, getattr(self, a)) for a, _ in self._FIELDS))
