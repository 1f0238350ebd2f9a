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

"""Base exceptions for the tritoncli libraries.

Every error that is expected to reach the user derives from Error. Errors
that wrap a lower level failure keep that failure as __cause__ so that
classifiers can walk the chain down to the innermost typed error.
"""


class Error(Exception):
  """Base exception for all user-facing tritoncli errors.

  Attributes:
    exit_code: int, The process exit code to use when this error reaches the
      top level.
  """

  def __init__(self, *args, **kwargs):
    super(Error, self).__init__(*args)
    self.exit_code = kwargs.get('exit_code', 1)


class InternalError(Error):
  """A problem in the code, not in the user input or the environment."""


def Wrap(error_class, prefix, cause):
  """Wraps cause in a new error_class exception with a contextual prefix.

  Args:
    error_class: type, The Error subclass to construct.
    prefix: str, The context to put in front of the cause message.
    cause: Exception, The original exception.

  Returns:
    error_class, The new exception with __cause__ set to cause.
  """
  message = str(cause)
  wrapped = error_class(
      '{prefix}: {message}'.format(prefix=prefix, message=message)
      if message else prefix)
  wrapped.__cause__ = cause
  return wrapped


def GetInnermost(error):
  """Returns the error at the end of the __cause__ chain of error.

  Only explicit wraps such as the ones made by Wrap() are followed.

  Args:
    error: Exception, The outermost error.

  Returns:
    Exception, The innermost cause, error itself when it wraps nothing.
  """
  seen = set()
  while error.__cause__ is not None and id(error) not in seen:
    seen.add(id(error))
    error = error.__cause__
  return error
