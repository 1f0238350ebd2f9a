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

"""Tests for the Triton API error classifiers."""

from unittest import mock

from tritoncli.api_lib.triton import errors
from tritoncli.calliope import exceptions as calliope_exceptions
from tritoncli.core import exceptions as core_exceptions
from tritoncli.tests.lib import test_case


class ClassifierTest(test_case.Base):

  def SetUp(self):
    self.not_found = errors.APIError(
        status_code=404, code='ResourceNotFound', message='vm not found')

  def testDirectMatch(self):
    self.assertTrue(errors.IsSpecificError(self.not_found, 'ResourceNotFound'))
    self.assertTrue(errors.IsSpecificStatusCode(self.not_found, 404))
    self.assertFalse(errors.IsSpecificStatusCode(self.not_found, 410))

  def testWrappedMatch(self):
    wrapped = core_exceptions.Wrap(calliope_exceptions.ConfigError,
                                   'Error Getting Instance', self.not_found)
    self.assertEqual('Error Getting Instance: ResourceNotFound: vm not found',
                     str(wrapped))
    self.assertTrue(errors.IsSpecificError(wrapped, 'ResourceNotFound'))
    self.assertTrue(errors.IsSpecificStatusCode(wrapped, 404))

  def testPlainErrorMatchesNothing(self):
    plain = ValueError('boom')
    self.assertFalse(errors.IsSpecificError(plain, 'ResourceNotFound'))
    self.assertFalse(errors.IsSpecificStatusCode(plain, 404))

  def testMessageFormats(self):
    self.assertEqual('HTTP error 500', str(errors.APIError(status_code=500)))
    self.assertEqual('just text', str(errors.APIError(message='just text')))
    self.assertEqual('Conflict', str(errors.APIError(code='Conflict')))

  def testFromJSONResponse(self):
    response = mock.Mock(status_code=409, text='{}')
    response.json.return_value = {'code': 'InvalidArgument', 'message': 'bad'}
    err = errors.APIError.FromResponse(response)
    self.assertEqual(409, err.status_code)
    self.assertEqual('InvalidArgument', err.code)
    self.assertEqual('bad', err.message)

  def testFromTextResponse(self):
    response = mock.Mock(status_code=502, text='Bad Gateway\n')
    response.json.side_effect = ValueError('not json')
    err = errors.APIError.FromResponse(response)
    self.assertIsNone(err.code)
    self.assertEqual('Bad Gateway', str(err))


class InnermostTest(test_case.Base):

  def testUnwrappedErrorIsItsOwnInnermost(self):
    err = ValueError('boom')
    self.assertIs(err, core_exceptions.GetInnermost(err))

  def testFollowsEveryWrap(self):
    not_found = errors.APIError(status_code=404, code='ResourceNotFound')
    inner = core_exceptions.Wrap(calliope_exceptions.RemoteError,
                                 'Error Getting Instance', not_found)
    outer = core_exceptions.Wrap(calliope_exceptions.ToolException,
                                 'Error Deleting Instance', inner)
    self.assertIs(not_found, core_exceptions.GetInnermost(outer))
    self.assertTrue(errors.IsSpecificStatusCode(outer, 404))

  def testOnlyInnermostErrorIsClassified(self):
    api_error = errors.APIError(status_code=404, code='ResourceNotFound')
    api_error.__cause__ = ValueError('socket closed')
    self.assertFalse(errors.IsSpecificError(api_error, 'ResourceNotFound'))
    self.assertFalse(errors.IsSpecificStatusCode(api_error, 404))
