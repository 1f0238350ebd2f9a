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

"""The CloudAPI network client."""

from tritoncli.api_lib.triton import client as client_lib


class Network(client_lib.Resource):
  _FIELDS = (
      ('id', 'id'),
      ('name', 'name'),
      ('public', 'public'),
      ('fabric', 'fabric'),
      ('description', 'description'),
      ('subnet', 'subnet'),
      ('gateway', 'gateway'),
  )


class NetworkClient(object):
  """The /:account/networks endpoints."""

  def __init__(self, client):
    self._client = client

  def List(self):
    return Network.FromList(self._client.ExecuteRequestJSON(
        'GET', self._client.AccountPath('networks')))

  def Get(self, network_id):
    return Network(self._client.ExecuteRequestJSON(
        'GET', self._client.AccountPath('networks', network_id)))


def NewClient(client_config, session=None, log_stats=False):
  """Creates a NetworkClient from a client_lib.ClientConfig."""
  return NetworkClient(client_lib.NewTritonClient(
      client_config, session=session, log_stats=log_stats))
