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

"""Exceptions that can be thrown by calliope tools.

The exceptions in this file, and those that extend them, can be thrown by
the PreRun() and Run() functions in calliope tools without worrying about
stack traces littering the screen. The CLI reports their message on stderr
and exits with status 1.
"""

from tritoncli.core import exceptions as core_exceptions


class ToolException(core_exceptions.Error):
  """ToolException is for Run methods to throw for non-code-bug errors."""


class ParseError(ToolException):
  """The command line could not be parsed or has the wrong number of args.

  Attributes:
    command_path: str, The space separated path of the command being parsed.
  """

  def __init__(self, message, command_path=None):
    super(ParseError, self).__init__(message)
    self.command_path = command_path


class ValidationError(ToolException):
  """A cross-flag rule checked before the command runs has failed."""


class ConfigError(ToolException):
  """Credentials are missing or a service client could not be constructed."""


class RemoteError(ToolException):
  """A remote service call failed.

  Attributes:
    status_code: int, The HTTP status, if there was a response.
    code: str, The symbolic error code reported by the service.
  """

  def __init__(self, message, status_code=None, code=None):
    super(RemoteError, self).__init__(message)
    self.status_code = status_code
    self.code = code


class FileError(ToolException):
  """A file or directory could not be created or written.

  Attributes:
    path: str, The path that was being written.
  """

  def __init__(self, message, path=None):
    super(FileError, self).__init__(message)
    self.path = path


class ExitCodeNoError(core_exceptions.Error):
  """A special exception for exit codes without error messages.

  If this exception is raised, it's identical in behavior to returning from
  the command code, except the overall exit code will be different.
  """


class ConflictingArgumentsException(ValidationError):
  """ConflictingArgumentsException arguments that are mutually exclusive."""

  def __init__(self, *parameter_names):
    super(ConflictingArgumentsException, self).__init__(
        'arguments not allowed simultaneously: ' + ', '.join(parameter_names))
    self.parameter_names = parameter_names


class RequiredArgumentException(ValidationError):
  """An exception for when a usually optional argument is required in this case.
  """

  def __init__(self, parameter_name, message):
    super(RequiredArgumentException, self).__init__(
        'Missing required argument [{0}]: {1}'.format(parameter_name, message))
    self.parameter_name = parameter_name


def _ConvertRequestsError(exc):
  response = getattr(exc, 'response', None)
  status_code = response.status_code if response is not None else None
  return RemoteError(str(exc), status_code=status_code)


# Errors raised by libraries that cannot derive from core_exceptions.Error but
# that should still be reported as a message instead of a traceback. Names are
# used so that the libraries are only imported when they are actually in use.
_KNOWN_ERRORS = {
    'tritoncli.core.util.files.Error': lambda exc: exc,
    'requests.exceptions.ConnectionError': _ConvertRequestsError,
    'requests.exceptions.ConnectTimeout': _ConvertRequestsError,
    'requests.exceptions.ReadTimeout': _ConvertRequestsError,
    'requests.exceptions.Timeout': _ConvertRequestsError,
    'requests.exceptions.SSLError': _ConvertRequestsError,
    'requests.exceptions.HTTPError': _ConvertRequestsError,
    'requests.exceptions.TooManyRedirects': _ConvertRequestsError,
}


def ConvertKnownError(exc):
  """Convert the given exception into an alternate type if it is known.

  Args:
    exc: Exception, the exception to convert.

  Returns:
    None if this is not a known type, otherwise a new exception that should be
    reported.
  """
  name = exc.__class__.__module__ + '.' + exc.__class__.__name__
  converter = _KNOWN_ERRORS.get(name)
  if converter is None:
    return None
  converted = converter(exc)
  if converted is not exc:
    converted.__cause__ = exc
  return converted
