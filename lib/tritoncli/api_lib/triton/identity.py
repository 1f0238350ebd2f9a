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

"""The CloudAPI identity client for the sub users of an account."""

from tritoncli.api_lib.triton import client as client_lib


class User(client_lib.Resource):
  _FIELDS = (
      ('id', 'id'),
      ('login', 'login'),
      ('email', 'email'),
      ('company_name', 'companyName'),
      ('first_name', 'firstName'),
      ('last_name', 'lastName'),
      ('postal_code', 'postCode'),
      ('roles', 'roles'),
      ('default_roles', 'defaultRoles'),
      ('created', 'created'),
      ('updated', 'updated'),
  )
  _TIMES = ('created', 'updated')


class UsersClient(object):
  """The /:account/users endpoints."""

  def __init__(self, client):
    self._client = client

  def List(self):
    return User.FromList(self._client.ExecuteRequestJSON(
        'GET', self._client.AccountPath('users')))

  def Get(self, user_id):
    return User(self._client.ExecuteRequestJSON(
        'GET', self._client.AccountPath('users', user_id)))


class IdentityClient(object):

  def __init__(self, client):
    self.users = UsersClient(client)


def NewClient(client_config, session=None, log_stats=False):
  """Creates an IdentityClient from a client_lib.ClientConfig."""
  return IdentityClient(client_lib.NewTritonClient(
      client_config, session=session, log_stats=log_stats))
