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

"""Tests for the signed CloudAPI and Manta transports."""

import json
from unittest import mock

from tritoncli.api_lib.triton import client
from tritoncli.api_lib.triton import compute
from tritoncli.api_lib.triton import errors
from tritoncli.api_lib.triton import storage
from tritoncli.tests.lib import test_case


class _FakeSigner(object):

  def Headers(self):
    return {'Date': 'Tue, 02 Jan 2018 03:04:05 GMT',
            'Authorization': 'Signature keyId="/bob/keys/aa"'}


def _Response(status_code=200, body=None, text=None, headers=None):
  if text is None:
    text = json.dumps(body) if body is not None else ''
  response = mock.Mock(status_code=status_code, text=text,
                       content=text.encode('utf-8'), headers=headers or {})
  if body is None:
    response.json.side_effect = ValueError('no json')
  else:
    response.json.return_value = body
  return response


class ClientTest(test_case.Base):

  def SetUp(self):
    self.session = mock.Mock(headers={})
    self.config = client.ClientConfig(
        'bob', [_FakeSigner()], triton_url='https://cloudapi.example.com/',
        manta_url='https://manta.example.com')

  def testMissingEndpoint(self):
    with self.assertRaisesRegex(client.Error, 'endpoint URL must be provided'):
      client.NewTritonClient(client.ClientConfig('bob', [_FakeSigner()]))

  def testSignedRequest(self):
    self.session.request.return_value = _Response(
        body=[{'id': 'abc', 'name': 'web', 'primaryIp': '10.0.0.5'}])
    instances = compute.NewClient(self.config, session=self.session)
    result = instances.instances.List(name='web')
    self.assertEqual(['10.0.0.5'], [i.primary_ip for i in result])
    args, kwargs = self.session.request.call_args
    self.assertEqual(('GET', 'https://cloudapi.example.com/bob/machines'),
                     args)
    self.assertEqual({'name': 'web'}, kwargs['params'])
    headers = kwargs['headers']
    self.assertEqual('Signature keyId="/bob/keys/aa"', headers['Authorization'])
    self.assertEqual('Tue, 02 Jan 2018 03:04:05 GMT', headers['Date'])
    self.assertEqual('8', headers['Api-Version'])

  def testCount(self):
    self.session.request.return_value = _Response(
        headers={'x-resource-count': '7'})
    instances = compute.NewClient(self.config, session=self.session).instances
    self.assertEqual(7, instances.Count())
    self.assertEqual('HEAD', self.session.request.call_args[0][0])

  def testErrorResponse(self):
    self.session.request.return_value = _Response(
        status_code=404,
        body={'code': 'ResourceNotFound', 'message': 'vm not found'})
    instances = compute.NewClient(self.config, session=self.session).instances
    with self.assertRaises(errors.APIError) as ctx:
      instances.Get('abc')
    self.assertTrue(errors.IsSpecificError(ctx.exception, 'ResourceNotFound'))
    self.assertTrue(errors.IsSpecificStatusCode(ctx.exception, 404))

  def testDirectoryListing(self):
    self.session.request.return_value = _Response(
        text='{"name": "a", "type": "directory"}\n'
             '{"name": "b", "type": "object", "size": 3}\n',
        headers={'Result-Set-Size': '2'})
    manta = storage.NewClient(self.config, session=self.session)
    listing = manta.dir.List(directory_name='/stor')
    self.assertEqual(['a', 'b'], [e.name for e in listing.entries])
    self.assertEqual(2, listing.result_set_size)
    args, kwargs = self.session.request.call_args
    self.assertEqual('https://manta.example.com/bob/stor', args[1])
    self.assertNotIn('Api-Version', kwargs['headers'])

  def testDirectoryListingDecodeError(self):
    self.session.request.return_value = _Response(text='not json\n')
    manta = storage.NewClient(self.config, session=self.session)
    with self.assertRaises(errors.DecodeError):
      manta.dir.List(directory_name='/stor')
