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

"""Request signers for the Triton CloudAPI and Manta HTTP signature scheme.

Every request carries a Date header and an Authorization header holding an
RSA-SHA256 signature of "date: <Date>", made either with a private key read
from disk or by the SSH agent.
"""

import base64
import hashlib
import os
import socket
import struct

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric import rsa

from tritoncli.core import exceptions
from tritoncli.core.util import times


ALGORITHM = 'rsa-sha256'

AUTH_HEADER_FORMAT = ('Signature keyId="{key_id}",algorithm="{algorithm}",'
                      'headers="date",signature="{signature}"')

# SSH agent protocol message numbers.
SSH_AGENTC_REQUEST_IDENTITIES = 11
SSH_AGENT_IDENTITIES_ANSWER = 12
SSH_AGENTC_SIGN_REQUEST = 13
SSH_AGENT_SIGN_RESPONSE = 14
SSH_AGENT_RSA_SHA2_256 = 2


class Error(exceptions.Error):
  """Errors raised while building a signer or signing a request."""


class KeyMismatchError(Error):
  """The private key does not match the configured key id."""


class AgentError(Error):
  """The SSH agent could not be reached or refused to sign."""


def _NormalizeFingerprint(key_id):
  fingerprint = key_id.strip().lower()
  if fingerprint.startswith('md5:'):
    fingerprint = fingerprint[len('md5:'):]
  return fingerprint


def FingerprintMD5(public_key_blob):
  """Returns the colon separated MD5 fingerprint of an SSH public key blob.

  Args:
    public_key_blob: bytes, The key in SSH wire format.

  Returns:
    str, For example 'a1:b2:...'.
  """
  digest = hashlib.md5(public_key_blob).hexdigest()
  return ':'.join(digest[i:i + 2] for i in range(0, len(digest), 2))


def _PublicKeyBlob(public_key):
  openssh = public_key.public_bytes(serialization.Encoding.OpenSSH,
                                    serialization.PublicFormat.OpenSSH)
  return base64.b64decode(openssh.split()[1])


def AuthorizationHeader(account_name, fingerprint, signature):
  """Formats the Authorization header value.

  Args:
    account_name: str, The account the key belongs to.
    fingerprint: str, The MD5 fingerprint of the key.
    signature: bytes, The raw signature of the date line.

  Returns:
    str, The header value.
  """
  return AUTH_HEADER_FORMAT.format(
      key_id='/{0}/keys/{1}'.format(account_name, fingerprint),
      algorithm=ALGORITHM,
      signature=base64.b64encode(signature).decode('ascii'))


class Signer(object):
  """Base class of the request signers.

  Attributes:
    account_name: str, The account (login) name.
    key_id: str, The MD5 fingerprint of the signing key.
  """

  def __init__(self, key_id, account_name):
    if not account_name:
      raise Error('account name must be provided')
    if not key_id:
      raise Error('key id must be provided')
    self.account_name = account_name
    self.key_id = _NormalizeFingerprint(key_id)

  def Sign(self, data):
    """Returns the RSA-SHA256 signature of data as bytes."""
    raise NotImplementedError()

  def SignDate(self, date_header):
    """Signs a Date header value.

    Args:
      date_header: str, The value of the Date header.

    Returns:
      str, The Authorization header value.
    """
    signature = self.Sign('date: {0}'.format(date_header).encode('utf-8'))
    return AuthorizationHeader(self.account_name, self.key_id, signature)

  def Headers(self, date_header=None):
    """Returns the Date and Authorization headers of a request."""
    if date_header is None:
      date_header = times.FormatRFC1123()
    return {
        'Date': date_header,
        'Authorization': self.SignDate(date_header),
    }


class PrivateKeySigner(Signer):
  """Signs with an unencrypted RSA private key."""

  def __init__(self, key_id, account_name, key_material):
    """Loads the key and checks it against key_id.

    Args:
      key_id: str, The MD5 fingerprint of the key.
      account_name: str, The account name.
      key_material: bytes, The PEM or OpenSSH encoded private key.

    Raises:
      Error: If the key cannot be loaded or is not an RSA key.
      KeyMismatchError: If the key fingerprint is not key_id.
    """
    super(PrivateKeySigner, self).__init__(key_id, account_name)
    if isinstance(key_material, str):
      key_material = key_material.encode('utf-8')
    try:
      if b'OPENSSH PRIVATE KEY' in key_material:
        private_key = serialization.load_ssh_private_key(key_material,
                                                         password=None)
      else:
        private_key = serialization.load_pem_private_key(key_material,
                                                         password=None)
    except (ValueError, TypeError) as e:
      raise Error('unable to parse private key: {0}'.format(e))
    if not isinstance(private_key, rsa.RSAPrivateKey):
      raise Error('unsupported private key type: {0}'.format(
          type(private_key).__name__))
    fingerprint = FingerprintMD5(_PublicKeyBlob(private_key.public_key()))
    if fingerprint != self.key_id:
      raise KeyMismatchError(
          'private key fingerprint {0} does not match key id {1}'.format(
              fingerprint, self.key_id))
    self._private_key = private_key

  def Sign(self, data):
    return self._private_key.sign(data, padding.PKCS1v15(), hashes.SHA256())


def _PackString(data):
  return struct.pack('>I', len(data)) + data


def _UnpackString(buf, offset):
  (length,) = struct.unpack_from('>I', buf, offset)
  start = offset + 4
  return buf[start:start + length], start + length


class SSHAgentSigner(Signer):
  """Signs by asking the SSH agent listening on $SSH_AUTH_SOCK."""

  def __init__(self, key_id, account_name, socket_path=None):
    """Finds the key with fingerprint key_id among the agent identities.

    Args:
      key_id: str, The MD5 fingerprint of the key.
      account_name: str, The account name.
      socket_path: str, The agent socket, $SSH_AUTH_SOCK if None.

    Raises:
      AgentError: If the agent is unreachable or does not hold the key.
    """
    super(SSHAgentSigner, self).__init__(key_id, account_name)
    self._socket_path = socket_path or os.environ.get('SSH_AUTH_SOCK')
    if not self._socket_path:
      raise AgentError('SSH_AUTH_SOCK is not set')
    self._key_blob = self._FindKey()

  def _Request(self, message):
    """Sends one message to the agent and returns the response body."""
    try:
      conn = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
      try:
        conn.connect(self._socket_path)
        conn.sendall(_PackString(message))
        header = self._ReadExactly(conn, 4)
        (length,) = struct.unpack('>I', header)
        return self._ReadExactly(conn, length)
      finally:
        conn.close()
    except OSError as e:
      raise AgentError('unable to talk to the SSH agent at {0}: {1}'.format(
          self._socket_path, e))

  @staticmethod
  def _ReadExactly(conn, size):
    data = b''
    while len(data) < size:
      chunk = conn.recv(size - len(data))
      if not chunk:
        raise AgentError('unexpected end of SSH agent response')
      data += chunk
    return data

  def _FindKey(self):
    response = self._Request(bytes([SSH_AGENTC_REQUEST_IDENTITIES]))
    if not response or response[0] != SSH_AGENT_IDENTITIES_ANSWER:
      raise AgentError('unexpected SSH agent identities response')
    (count,) = struct.unpack_from('>I', response, 1)
    offset = 5
    for _ in range(count):
      blob, offset = _UnpackString(response, offset)
      _, offset = _UnpackString(response, offset)
      if FingerprintMD5(blob) == self.key_id:
        return blob
    raise AgentError('no key in the SSH agent matches {0}'.format(
        self.key_id))

  def Sign(self, data):
    message = (bytes([SSH_AGENTC_SIGN_REQUEST]) + _PackString(self._key_blob) +
               _PackString(data) + struct.pack('>I', SSH_AGENT_RSA_SHA2_256))
    response = self._Request(message)
    if not response or response[0] != SSH_AGENT_SIGN_RESPONSE:
      raise AgentError('the SSH agent refused to sign the request')
    signature_blob, _ = _UnpackString(response, 1)
    algorithm, offset = _UnpackString(signature_blob, 0)
    if algorithm != b'rsa-sha2-256':
      raise AgentError('unexpected SSH agent signature type {0}'.format(
          algorithm.decode('ascii', 'replace')))
    signature, _ = _UnpackString(signature_blob, offset)
    return signature
