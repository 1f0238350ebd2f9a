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

"""Service clients that read their request parameters from the properties.

Each agent wraps one API client and turns the properties of the running
command into API calls, so the command modules only render results.
"""

import time

from tritoncli.api_lib.triton import account
from tritoncli.api_lib.triton import compute
from tritoncli.api_lib.triton import errors
from tritoncli.api_lib.triton import identity
from tritoncli.api_lib.triton import network
from tritoncli.api_lib.triton import storage
from tritoncli.calliope import exceptions as calliope_exceptions
from tritoncli.command_lib.triton import config
from tritoncli.core import exceptions as core_exceptions
from tritoncli.core import log


WAIT_INTERVAL_SECONDS = 2
RUNNING_STATE = 'running'
FAILED_STATE = 'failed'


class NotFoundError(calliope_exceptions.RemoteError):
  """The requested resource does not exist."""


def _IsGone(err):
  return (errors.IsSpecificStatusCode(err, 404) or
          errors.IsSpecificStatusCode(err, 410))


def _NewClient(new_client, new_config, store, prefix, session=None):
  """Creates an API client from the credentials in store.

  Args:
    new_client: (ClientConfig, ...) -> object, The API client factory.
    new_config: (PropertyStore) -> ClientConfig, The config factory.
    store: properties.PropertyStore, The configuration store.
    prefix: str, The context of construction errors.
    session: requests.Session, The transport, a new one if None.

  Returns:
    The API client.

  Raises:
    calliope_exceptions.ConfigError: If the client cannot be constructed.
  """
  client_config = new_config(store)
  try:
    return new_client(client_config, session=session,
                      log_stats=store.GetBool('log.stats'))
  except core_exceptions.Error as e:
    raise core_exceptions.Wrap(calliope_exceptions.ConfigError, prefix, e)


def FormatImageName(images, image_id):
  """Returns name@version of the image with image_id, or its short ID."""
  for image in images:
    if image.id == image_id:
      return '{0}@{1}'.format(image.name, image.version)
  return (image_id or '')[:8]


def _SortKey(value):
  # Entries without a timestamp sort first.
  return (value is not None, value.timestamp() if value is not None else 0)


def SortInstances(instances):
  return sorted(instances, key=lambda i: _SortKey(i.created))


def SortImages(images):
  return sorted(images, key=lambda i: _SortKey(i.published_at))


class ComputeAgent(object):
  """Instances, packages, images, datacenters and services."""

  def __init__(self, client, store):
    self._client = client
    self._store = store

  def _Tags(self):
    """Returns compute.instance.search-tags merged with the k=v tag items."""
    tags = self._store.GetStringMap('compute.instance.search-tags')
    for item in self._store.GetStringSlice('compute.instance.tag'):
      key, sep, value = item.partition('=')
      if sep:
        tags[key.strip()] = value.strip()
    return tags

  def _InstanceFilters(self):
    return dict(
        name=self._store.GetString('compute.instance.name') or None,
        tags=self._Tags() or None,
        state=self._store.GetString('compute.instance.state') or None,
        brand=self._store.GetString('compute.instance.brand') or None)

  def ListInstances(self):
    """Lists the instances matching the filter properties, oldest first."""
    return SortInstances(
        self._client.instances.List(**self._InstanceFilters()))

  def CountInstances(self):
    return self._client.instances.Count(**self._InstanceFilters())

  def _GetInstanceByID(self, instance_id):
    try:
      return self._client.instances.Get(instance_id)
    except errors.APIError as e:
      if _IsGone(e):
        raise NotFoundError('Instance not found')
      raise

  def _GetInstanceByName(self, name):
    try:
      instances = self._client.instances.List(name=name)
    except errors.APIError as e:
      if _IsGone(e):
        raise NotFoundError('Instance not found')
      raise
    if not instances:
      raise NotFoundError('No instance(s) found')
    return instances[0]

  def GetInstance(self):
    """Gets the instance named by compute.instance.id or .name."""
    instance_id = self._store.GetString('compute.instance.id')
    if instance_id:
      return self._GetInstanceByID(instance_id)
    name = self._store.GetString('compute.instance.name')
    if name:
      return self._GetInstanceByName(name)
    return None

  def _RunAction(self, action):
    instance = self.GetInstance()
    action(instance.id)
    return instance

  def DeleteInstance(self):
    return self._RunAction(self._client.instances.Delete)

  def RebootInstance(self):
    return self._RunAction(self._client.instances.Reboot)

  def StartInstance(self):
    return self._RunAction(self._client.instances.Start)

  def StopInstance(self):
    return self._RunAction(self._client.instances.Stop)

  def _ResolvePackageID(self):
    package_id = self._store.GetString('compute.package.id')
    if package_id:
      return package_id
    name = self._store.GetString('compute.package.name')
    for package in self.ListPackages():
      if package.name == name:
        return package.id
    raise NotFoundError('Package not found')

  def _ResolveImageID(self):
    image_id = self._store.GetString('compute.image.id')
    if image_id:
      return image_id
    name = self._store.GetString('compute.image.name')
    for image in self.ListImages():
      if image.name == name:
        return image.id
    raise NotFoundError('Image not found')

  def CreateInstance(self):
    """Creates an instance from the compute.* properties.

    With compute.instance.wait set this polls until the instance is running.

    Returns:
      compute.Instance, The new instance.
    """
    metadata = {}
    userdata = self._store.GetString('compute.instance.userdata')
    if userdata:
      metadata['user-data'] = userdata
    metadata.update(self._store.GetStringMap('compute.instance.metadata'))
    instance = self._client.instances.Create(
        name=self._store.GetString('compute.instance.name'),
        package=self._ResolvePackageID(),
        image=self._ResolveImageID(),
        networks=self._store.GetStringSlice('compute.instance.networks'),
        affinity=self._store.GetStringSlice('compute.instance.affinity'),
        metadata=metadata,
        tags=self._Tags(),
        firewall_enabled=self._store.GetBool('compute.instance.firewall'))
    if self._store.GetBool('compute.instance.wait'):
      instance = self.WaitForRunning(instance.id)
    return instance

  def WaitForRunning(self, instance_id):
    """Polls the instance every WAIT_INTERVAL_SECONDS until it is running.

    Args:
      instance_id: str, The instance to wait for.

    Returns:
      compute.Instance, The running instance.

    Raises:
      calliope_exceptions.RemoteError: If the instance failed to provision.
    """
    while True:
      time.sleep(WAIT_INTERVAL_SECONDS)
      instance = self._GetInstanceByID(instance_id)
      log.debug('instance %s is %s', instance_id, instance.state)
      if instance.state == RUNNING_STATE:
        return instance
      if instance.state == FAILED_STATE:
        raise calliope_exceptions.RemoteError(
            'Instance {0} failed to provision'.format(instance_id))

  def ListPackages(self):
    return self._client.packages.List(
        name=self._store.GetString('compute.package.name') or None,
        memory=self._store.GetInt('compute.package.memory') or None,
        disk=self._store.GetInt('compute.package.disk') or None,
        swap=self._store.GetInt('compute.package.swap') or None,
        vcpus=self._store.GetInt('compute.package.vcpu') or None)

  def GetPackage(self):
    """Gets the package named by compute.package.id or .name."""
    package_id = self._store.GetString('compute.package.id')
    name = self._store.GetString('compute.package.name')
    try:
      if package_id:
        return self._client.packages.Get(package_id)
      if not name:
        return None
      packages = self._client.packages.List(name=name)
    except errors.APIError as e:
      if _IsGone(e):
        raise NotFoundError('Package not found')
      raise
    if not packages:
      raise NotFoundError('No package(s) found')
    return packages[0]

  def ListImages(self):
    return SortImages(self._client.images.List())

  def ListDatacenters(self):
    return self._client.datacenters.List()

  def ListServices(self):
    return self._client.services.List()


class AccountAgent(object):
  """The account and its SSH keys."""

  def __init__(self, client, store):
    self._client = client
    self._store = store

  def Get(self):
    return self._client.Get()

  def Update(self):
    """Sends the account.* properties that are set."""
    cns_enabled = self._store.GetString('account.triton_cns_enabled')
    return self._client.Update(
        email=self._store.GetString('account.email'),
        company_name=self._store.GetString('account.companyname'),
        first_name=self._store.GetString('account.firstname'),
        last_name=self._store.GetString('account.lastname'),
        address=self._store.GetString('account.address'),
        postal_code=self._store.GetString('account.postcode'),
        city=self._store.GetString('account.city'),
        state=self._store.GetString('account.state'),
        country=self._store.GetString('account.country'),
        phone=self._store.GetString('account.phone'),
        triton_cns_enabled=(cns_enabled.lower() in ('true', '1', 't')
                            if cns_enabled else None))

  def ListKeys(self):
    return self._client.keys.List()

  def CreateKey(self):
    return self._client.keys.Create(
        self._store.GetString('keys.publickey'),
        name=self._store.GetString('keys.name') or None)

  def GetKey(self):
    """Gets the key named by keys.name or with keys.fingerprint."""
    name = self._store.GetString('keys.name')
    if name:
      return self._client.keys.Get(name)
    fingerprint = self._store.GetString('keys.fingerprint')
    if fingerprint:
      for key in self._client.keys.List():
        if key.fingerprint == fingerprint:
          return key
      raise NotFoundError('Key not found')
    return None

  def DeleteKey(self):
    key = self.GetKey()
    self._client.keys.Delete(key.name)
    return key


class StorageAgent(object):
  """Manta directories."""

  def __init__(self, client, store):
    self._client = client
    self._store = store

  def GetDirectoryListing(self, args):
    """Lists the directory in args[0], the account root if args is empty."""
    return self._client.dir.List(directory_name=args[0] if args else '')


def NewComputeClient(store, session=None):
  return ComputeAgent(
      _NewClient(compute.NewClient, config.NewTritonConfig, store,
                 'Error Creating Triton Compute Client', session=session),
      store)


def NewAccountClient(store, session=None):
  return AccountAgent(
      _NewClient(account.NewClient, config.NewTritonConfig, store,
                 'Error Creating Triton Account Client', session=session),
      store)


def NewStorageClient(store, session=None):
  return StorageAgent(
      _NewClient(storage.NewClient, config.NewMantaConfig, store,
                 'Error Creating Triton Storage Client', session=session),
      store)


def NewNetworkClient(store, session=None):
  return _NewClient(network.NewClient, config.NewTritonConfig, store,
                    'Error Creating Triton Netowkr Client', session=session)


def NewIdentityClient(store, session=None):
  return _NewClient(identity.NewClient, config.NewTritonConfig, store,
                    'Error Creating Triton Identity Client', session=session)
