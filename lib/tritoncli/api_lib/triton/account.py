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

"""The CloudAPI account client: account details and SSH keys."""

from tritoncli.api_lib.triton import client as client_lib


class Account(client_lib.Resource):
  _FIELDS = (
      ('id', 'id'),
      ('login', 'login'),
      ('email', 'email'),
      ('company_name', 'companyName'),
      ('first_name', 'firstName'),
      ('last_name', 'lastName'),
      ('address', 'address'),
      ('postal_code', 'postalCode'),
      ('city', 'city'),
      ('state', 'state'),
      ('country', 'country'),
      ('phone', 'phone'),
      ('created', 'created'),
      ('updated', 'updated'),
      ('triton_cns_enabled', 'triton_cns_enabled'),
  )
  _TIMES = ('created', 'updated')


# Attribute of the update request to its JSON key.
UPDATE_FIELDS = (
    ('email', 'email'),
    ('company_name', 'companyName'),
    ('first_name', 'firstName'),
    ('last_name', 'lastName'),
    ('address', 'address'),
    ('postal_code', 'postalCode'),
    ('city', 'city'),
    ('state', 'state'),
    ('country', 'country'),
    ('phone', 'phone'),
    ('triton_cns_enabled', 'triton_cns_enabled'),
)


class Key(client_lib.Resource):
  _FIELDS = (
      ('name', 'name'),
      ('fingerprint', 'fingerprint'),
      ('key', 'key'),
  )


class KeysClient(object):
  """The /:account/keys endpoints."""

  def __init__(self, client):
    self._client = client

  def List(self):
    return Key.FromList(self._client.ExecuteRequestJSON(
        'GET', self._client.AccountPath('keys')))

  def Get(self, name):
    return Key(self._client.ExecuteRequestJSON(
        'GET', self._client.AccountPath('keys', name)))

  def Create(self, key, name=None):
    body = {'key': key}
    if name:
      body['name'] = name
    return Key(self._client.ExecuteRequestJSON(
        'POST', self._client.AccountPath('keys'), body=body))

  def Delete(self, name):
    self._client.ExecuteRequest('DELETE',
                                self._client.AccountPath('keys', name))


class AccountClient(object):
  """The /:account endpoints."""

  def __init__(self, client):
    self._client = client
    self.keys = KeysClient(client)

  def Get(self):
    return Account(self._client.ExecuteRequestJSON(
        'GET', self._client.AccountPath()))

  def Update(self, **kwargs):
    """Updates the account.

    Args:
      **kwargs: Attributes from UPDATE_FIELDS. Only the given, non-empty ones
        are sent.

    Returns:
      Account, The updated account.
    """
    body = {}
    for attribute, key in UPDATE_FIELDS:
      value = kwargs.get(attribute)
      if value not in (None, ''):
        body[key] = value
    return Account(self._client.ExecuteRequestJSON(
        'POST', self._client.AccountPath(), body=body))


def NewClient(client_config, session=None, log_stats=False):
  """Creates an AccountClient from a client_lib.ClientConfig."""
  return AccountClient(client_lib.NewTritonClient(
      client_config, session=session, log_stats=log_stats))
