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

"""The CloudAPI compute client: instances, packages, images and datacenters."""

from tritoncli.api_lib.triton import client as client_lib


RESOURCE_COUNT_HEADER = 'x-resource-count'


class Instance(client_lib.Resource):
  _FIELDS = (
      ('id', 'id'),
      ('name', 'name'),
      ('type', 'type'),
      ('brand', 'brand'),
      ('state', 'state'),
      ('image', 'image'),
      ('ips', 'ips'),
      ('memory', 'memory'),
      ('disk', 'disk'),
      ('metadata', 'metadata'),
      ('tags', 'tags'),
      ('created', 'created'),
      ('updated', 'updated'),
      ('docker', 'docker'),
      ('networks', 'networks'),
      ('primary_ip', 'primaryIp'),
      ('firewall_enabled', 'firewall_enabled'),
      ('compute_node', 'compute_node'),
      ('package', 'package'),
  )
  _TIMES = ('created', 'updated')


class Package(client_lib.Resource):
  _FIELDS = (
      ('id', 'id'),
      ('name', 'name'),
      ('memory', 'memory'),
      ('disk', 'disk'),
      ('swap', 'swap'),
      ('lwps', 'lwps'),
      ('vcpus', 'vcpus'),
      ('version', 'version'),
      ('group', 'group'),
      ('description', 'description'),
      ('default', 'default'),
  )


class Image(client_lib.Resource):
  _FIELDS = (
      ('id', 'id'),
      ('name', 'name'),
      ('os', 'os'),
      ('type', 'type'),
      ('version', 'version'),
      ('state', 'state'),
      ('published_at', 'published_at'),
  )
  _TIMES = ('published_at',)


class DataCenter(client_lib.Resource):
  _FIELDS = (('name', 'name'), ('url', 'url'))


class Service(client_lib.Resource):
  _FIELDS = (('name', 'name'), ('endpoint', 'endpoint'))


def _ListQuery(name=None, brand=None, state=None, tags=None, limit=None,
               offset=None):
  query = {}
  if name:
    query['name'] = name
  if brand:
    query['brand'] = brand
  if state:
    query['state'] = state
  for key, value in sorted((tags or {}).items()):
    query['tag.{0}'.format(key)] = value
  if limit:
    query['limit'] = limit
  if offset is not None:
    query['offset'] = offset
  return query


class InstancesClient(object):
  """The /:account/machines endpoints."""

  def __init__(self, client):
    self._client = client

  def List(self, name=None, brand=None, state=None, tags=None, limit=None,
           offset=None):
    body = self._client.ExecuteRequestJSON(
        'GET', self._client.AccountPath('machines'),
        query=_ListQuery(name, brand, state, tags, limit, offset))
    return Instance.FromList(body)

  def Count(self, name=None, brand=None, state=None, tags=None):
    """Counts the instances matching the filters with a HEAD request.

    Returns:
      int, The x-resource-count header of the response.
    """
    response = self._client.ExecuteRequest(
        'HEAD', self._client.AccountPath('machines'),
        query=_ListQuery(name, brand, state, tags, offset=0))
    return int(response.headers.get(RESOURCE_COUNT_HEADER, 0))

  def Get(self, instance_id):
    return Instance(self._client.ExecuteRequestJSON(
        'GET', self._client.AccountPath('machines', instance_id)))

  def Create(self, name=None, package=None, image=None, networks=None,
             affinity=None, metadata=None, tags=None, firewall_enabled=False):
    """Creates an instance.

    Metadata and tags are sent as metadata.<key> and tag.<key> fields.

    Returns:
      Instance, The new instance, usually in the provisioning state.
    """
    body = {'image': image, 'package': package}
    if name:
      body['name'] = name
    if networks:
      body['networks'] = list(networks)
    if affinity:
      body['affinity'] = list(affinity)
    if firewall_enabled:
      body['firewall_enabled'] = True
    for key, value in sorted((metadata or {}).items()):
      body['metadata.{0}'.format(key)] = value
    for key, value in sorted((tags or {}).items()):
      body['tag.{0}'.format(key)] = value
    return Instance(self._client.ExecuteRequestJSON(
        'POST', self._client.AccountPath('machines'), body=body))

  def Delete(self, instance_id):
    self._client.ExecuteRequest(
        'DELETE', self._client.AccountPath('machines', instance_id))

  def _Action(self, instance_id, action):
    self._client.ExecuteRequest(
        'POST', self._client.AccountPath('machines', instance_id),
        query={'action': action})

  def Reboot(self, instance_id):
    self._Action(instance_id, 'reboot')

  def Start(self, instance_id):
    self._Action(instance_id, 'start')

  def Stop(self, instance_id):
    self._Action(instance_id, 'stop')


class PackagesClient(object):
  """The /:account/packages endpoints."""

  def __init__(self, client):
    self._client = client

  def List(self, name=None, memory=None, disk=None, swap=None, vcpus=None):
    query = {}
    for key, value in (('name', name), ('memory', memory), ('disk', disk),
                       ('swap', swap), ('vcpus', vcpus)):
      if value:
        query[key] = value
    return Package.FromList(self._client.ExecuteRequestJSON(
        'GET', self._client.AccountPath('packages'), query=query))

  def Get(self, package_id):
    return Package(self._client.ExecuteRequestJSON(
        'GET', self._client.AccountPath('packages', package_id)))


class ImagesClient(object):
  """The /:account/images endpoints."""

  def __init__(self, client):
    self._client = client

  def List(self, name=None, version=None):
    query = {}
    if name:
      query['name'] = name
    if version:
      query['version'] = version
    return Image.FromList(self._client.ExecuteRequestJSON(
        'GET', self._client.AccountPath('images'), query=query))

  def Get(self, image_id):
    return Image(self._client.ExecuteRequestJSON(
        'GET', self._client.AccountPath('images', image_id)))


def _FromMapping(resource_type, value_name, body):
  return [resource_type(name=name, **{value_name: value})
          for name, value in sorted((body or {}).items())]


class DatacentersClient(object):
  """The /:account/datacenters endpoint, a map of name to URL."""

  def __init__(self, client):
    self._client = client

  def List(self):
    return _FromMapping(DataCenter, 'url', self._client.ExecuteRequestJSON(
        'GET', self._client.AccountPath('datacenters')))


class ServicesClient(object):
  """The /:account/services endpoint, a map of name to endpoint."""

  def __init__(self, client):
    self._client = client

  def List(self):
    return _FromMapping(Service, 'endpoint', self._client.ExecuteRequestJSON(
        'GET', self._client.AccountPath('services')))


class ComputeClient(object):
  """Groups the compute endpoints of one CloudAPI transport."""

  def __init__(self, client):
    self.instances = InstancesClient(client)
    self.packages = PackagesClient(client)
    self.images = ImagesClient(client)
    self.datacenters = DatacentersClient(client)
    self.services = ServicesClient(client)


def NewClient(client_config, session=None, log_stats=False):
  """Creates a ComputeClient from a client_lib.ClientConfig."""
  return ComputeClient(client_lib.NewTritonClient(
      client_config, session=session, log_stats=log_stats))
