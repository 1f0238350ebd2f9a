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

"""The Manta storage client."""

import json

from tritoncli.api_lib.triton import client as client_lib
from tritoncli.api_lib.triton import errors


DIRECTORY_CONTENT_TYPE = 'application/x-json-stream; type=directory'
RESULT_SET_SIZE_HEADER = 'Result-Set-Size'


class DirectoryEntry(client_lib.Resource):
  _FIELDS = (
      ('name', 'name'),
      ('type', 'type'),
      ('size', 'size'),
      ('etag', 'etag'),
      ('mtime', 'mtime'),
      ('durability', 'durability'),
  )
  _TIMES = ('mtime',)


class DirectoryListing(object):
  """A page of directory entries.

  Attributes:
    entries: [DirectoryEntry], The entries in server order.
    result_set_size: int, The total number of entries in the directory.
  """

  def __init__(self, entries, result_set_size):
    self.entries = entries
    self.result_set_size = result_set_size


class DirectoryClient(object):
  """Lists Manta directories."""

  def __init__(self, client):
    self._client = client

  def List(self, directory_name='', limit=None, marker=None):
    """Lists one directory.

    Args:
      directory_name: str, The path below the account root, e.g. /stor.
      limit: int, The maximum number of entries.
      marker: str, List the entries after this name.

    Returns:
      DirectoryListing, The entries.

    Raises:
      errors.DecodeError: If a line of the response is not JSON.
    """
    query = {}
    if limit:
      query['limit'] = limit
    if marker:
      query['marker'] = marker
    response = self._client.ExecuteRequest(
        'GET', self._client.AccountPath(directory_name), query=query,
        headers={'Accept': DIRECTORY_CONTENT_TYPE})
    entries = []
    for line in response.text.splitlines():
      if not line.strip():
        continue
      try:
        entries.append(DirectoryEntry(json.loads(line)))
      except ValueError as e:
        raise errors.DecodeError(
            'unable to decode directory entry {0!r}: {1}'.format(line, e))
    size = response.headers.get(RESULT_SET_SIZE_HEADER)
    return DirectoryListing(entries,
                            int(size) if size else len(entries))


class StorageClient(object):

  def __init__(self, client):
    self.dir = DirectoryClient(client)


def NewClient(client_config, session=None, log_stats=False):
  """Creates a StorageClient from a client_lib.ClientConfig."""
  return StorageClient(client_lib.NewMantaClient(
      client_config, session=session, log_stats=log_stats))
