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

"""Errors returned by the Triton CloudAPI and Manta clients."""

from tritoncli.calliope import exceptions as calliope_exceptions
from tritoncli.core import exceptions as core_exceptions


class Error(core_exceptions.Error):
  """Base class for the Triton API client errors."""


class APIError(calliope_exceptions.RemoteError):
  """An error response of the remote service.

  Attributes:
    status_code: int, The HTTP status of the response.
    code: str, The symbolic error code of the body, e.g. ResourceNotFound.
    message: str, The message of the body.
  """

  def __init__(self, status_code=None, code=None, message=None):
    self.message = message or ''
    super(APIError, self).__init__(
        self._Format(status_code, code, self.message),
        status_code=status_code, code=code)

  @staticmethod
  def _Format(status_code, code, message):
    if code:
      return '{0}: {1}'.format(code, message) if message else code
    if message:
      return message
    return 'HTTP error {0}'.format(status_code)

  @classmethod
  def FromResponse(cls, response):
    """Builds the error from a failed requests.Response.

    CloudAPI answers with {"code": ..., "message": ...}; Manta with the same
    keys. Bodies that are not JSON keep the raw text as the message.

    Args:
      response: requests.Response, The failed response.

    Returns:
      APIError, The error.
    """
    code = None
    message = None
    try:
      body = response.json()
    except ValueError:
      body = None
    if isinstance(body, dict):
      code = body.get('code')
      message = body.get('message')
    elif response.text:
      message = response.text.strip()
    return cls(status_code=response.status_code, code=code, message=message)


class DecodeError(Error):
  """A response body could not be decoded."""


def _InnermostAPIError(err):
  innermost = core_exceptions.GetInnermost(err)
  return innermost if isinstance(innermost, APIError) else None


def IsSpecificError(err, code):
  """Returns True if the innermost cause of err is an APIError with code.

  Args:
    err: Exception, The error to check.
    code: str, The symbolic code, e.g. 'ResourceNotFound'.
  """
  api_error = _InnermostAPIError(err)
  return api_error is not None and api_error.code == code


def IsSpecificStatusCode(err, status_code):
  """Returns True if the innermost cause of err has the HTTP status.

  Args:
    err: Exception, The error to check.
    status_code: int, The HTTP status, e.g. 404.
  """
  api_error = _InnermostAPIError(err)
  return api_error is not None and api_error.status_code == status_code
