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

"""Reads credentials from the environment and the properties.

The triton commands accept both the TRITON_* and the older SDC_* environment
variables, the manta commands also MANTA_*. The first one that is set to a
non-empty value wins.
"""

import os
import re

from tritoncli.api_lib.triton import authentication
from tritoncli.api_lib.triton import client
from tritoncli.calliope import exceptions as calliope_exceptions
from tritoncli.core import exceptions as core_exceptions
from tritoncli.core.util import files


TRITON_ENV_PREFIXES = ('TRITON', 'SDC')
MANTA_ENV_PREFIXES = ('MANTA', 'TRITON', 'SDC')

_PEM_BLOCK_RE = re.compile(
    r'-----BEGIN (?P<type>[A-Z0-9 ]+)-----\r?\n'
    r'(?P<body>.*?)'
    r'-----END (?P=type)-----', re.DOTALL)

_ENCRYPTED_RE = re.compile(r'^Proc-Type:\s*4,\s*ENCRYPTED', re.MULTILINE)


def EnvNames(name, prefixes=TRITON_ENV_PREFIXES):
  """Returns the environment variable names for name, in lookup order."""
  return ['{0}_{1}'.format(prefix, name) for prefix in prefixes]


def _GetEnv(name, prefixes, environ):
  if environ is None:
    environ = os.environ
  for env_name in EnvNames(name, prefixes):
    value = environ.get(env_name)
    if value:
      return value
  return ''


def GetTritonEnv(name, environ=None):
  """Returns TRITON_<name> or SDC_<name>, '' if neither is set.

  Args:
    name: str, The variable name without its prefix, e.g. ACCOUNT.
    environ: {str: str}, The environment, os.environ if None.
  """
  return _GetEnv(name, TRITON_ENV_PREFIXES, environ)


def GetMantaEnv(name, environ=None):
  """Returns MANTA_<name>, TRITON_<name> or SDC_<name>, '' if none is set."""
  return _GetEnv(name, MANTA_ENV_PREFIXES, environ)


def LoadKeyMaterial(key_material):
  """Resolves the key-material property into the private key.

  Args:
    key_material: str, A path to a private key file or the key itself.

  Returns:
    str, The PEM encoded key.

  Raises:
    calliope_exceptions.ConfigError: If the file holds no key or an encrypted
      key.
  """
  if not os.path.exists(key_material):
    return key_material
  contents = files.ReadFileContents(key_material)
  block = _PEM_BLOCK_RE.search(contents)
  if not block:
    raise calliope_exceptions.ConfigError(
        "failed to read key material '{0}': no key found".format(key_material))
  if _ENCRYPTED_RE.search(block.group('body')):
    raise calliope_exceptions.ConfigError(
        "failed to read key '{0}': password protected keys are\n"
        'not currently supported. Please decrypt the key prior to use.'.format(
            key_material))
  return block.group(0)


def _NewSigner(service, key_id, account, key_material):
  """Creates the signer for the credentials of service.

  An empty key_material selects the SSH agent.

  Args:
    service: str, Triton or Manta, for the error messages.
    key_id: str, The key fingerprint.
    account: str, The account name.
    key_material: str, The key-material property.

  Returns:
    authentication.Signer, The signer.

  Raises:
    calliope_exceptions.ConfigError: If the key material holds no usable key
      or the signer cannot be created.
    files.Error: If the key file cannot be read.
  """
  if not key_material:
    try:
      return authentication.SSHAgentSigner(key_id, account)
    except authentication.Error as e:
      raise core_exceptions.Wrap(
          calliope_exceptions.ConfigError,
          'Error Creating {0} SSH Agent Signer'.format(service), e)
  private_key = LoadKeyMaterial(key_material)
  try:
    return authentication.PrivateKeySigner(key_id, account, private_key)
  except authentication.Error as e:
    raise core_exceptions.Wrap(
        calliope_exceptions.ConfigError,
        'Error Creating {0} SSH Private Key Signer'.format(service), e)


def NewTritonConfig(store):
  """Builds the CloudAPI client configuration from general.triton.*.

  Args:
    store: properties.PropertyStore, The configuration store.

  Returns:
    client.ClientConfig, The configuration.
  """
  account = store.GetString('general.triton.account')
  signer = _NewSigner('Triton', store.GetString('general.triton.key-id'),
                      account, store.GetString('general.triton.key-material'))
  return client.ClientConfig(account, [signer],
                             triton_url=store.GetString('general.triton.url'))


def NewMantaConfig(store):
  """Builds the Manta client configuration from general.manta.*."""
  account = store.GetString('general.manta.account')
  signer = _NewSigner('Manta', store.GetString('general.manta.key-id'),
                      account, store.GetString('general.manta.key-material'))
  return client.ClientConfig(account, [signer],
                             manta_url=store.GetString('general.manta.url'))
