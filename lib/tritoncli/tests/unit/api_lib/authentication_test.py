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

"""Tests for the request signers."""

import base64
import re

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric import rsa

from tritoncli.api_lib.triton import authentication
from tritoncli.tests.lib import test_case


_HEADER_RE = re.compile(
    r'^Signature keyId="/(?P<account>[^/]+)/keys/(?P<key_id>[0-9a-f:]+)",'
    r'algorithm="rsa-sha256",headers="date",signature="(?P<signature>[^"]+)"$')

DATE = 'Tue, 02 Jan 2018 03:04:05 GMT'


class AuthorizationHeaderTest(test_case.Base):

  def testFormat(self):
    self.assertEqual(
        'Signature keyId="/bob/keys/aa:bb",algorithm="rsa-sha256",'
        'headers="date",signature="c2ln"',
        authentication.AuthorizationHeader('bob', 'aa:bb', b'sig'))

  def testFingerprint(self):
    self.assertEqual('d4:1d:8c:d9:8f:00:b2:04:e9:80:09:98:ec:f8:42:7e',
                     authentication.FingerprintMD5(b''))


class PrivateKeySignerTest(test_case.Base):

  def SetUp(self):
    self.private_key = rsa.generate_private_key(public_exponent=65537,
                                                key_size=2048)
    self.pem = self.private_key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.TraditionalOpenSSL,
        serialization.NoEncryption()).decode('ascii')
    openssh = self.private_key.public_key().public_bytes(
        serialization.Encoding.OpenSSH, serialization.PublicFormat.OpenSSH)
    self.fingerprint = authentication.FingerprintMD5(
        base64.b64decode(openssh.split()[1]))

  def testSignedHeaders(self):
    signer = authentication.PrivateKeySigner(
        'MD5:' + self.fingerprint.upper(), 'bob', self.pem)
    headers = signer.Headers(DATE)
    self.assertEqual(DATE, headers['Date'])
    match = _HEADER_RE.match(headers['Authorization'])
    self.assertIsNotNone(match)
    self.assertEqual('bob', match.group('account'))
    self.assertEqual(self.fingerprint, match.group('key_id'))
    # Raises InvalidSignature if the date line was not what got signed.
    self.private_key.public_key().verify(
        base64.b64decode(match.group('signature')),
        'date: {0}'.format(DATE).encode('utf-8'),
        padding.PKCS1v15(), hashes.SHA256())

  def testDefaultDateHeader(self):
    signer = authentication.PrivateKeySigner(self.fingerprint, 'bob', self.pem)
    self.assertTrue(signer.Headers()['Date'].endswith(' GMT'))

  def testKeyMismatch(self):
    with self.assertRaises(authentication.KeyMismatchError):
      authentication.PrivateKeySigner('00:11', 'bob', self.pem)

  def testUnparseableKey(self):
    with self.assertRaisesRegex(authentication.Error,
                                'unable to parse private key'):
      authentication.PrivateKeySigner(self.fingerprint, 'bob', 'garbage')

  def testMissingAccount(self):
    with self.assertRaisesRegex(authentication.Error,
                                'account name must be provided'):
      authentication.PrivateKeySigner(self.fingerprint, '', self.pem)
