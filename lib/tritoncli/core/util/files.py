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

"""Some general file utilities used that can be used by the tritoncli tools."""

import errno
import os

from tritoncli.core import exceptions


class Error(exceptions.Error):
  """Base exception for the file_utils module."""


def MakeDir(path, mode=0o777):
  """Creates the given directory and its parents and does not fail if it exists.

  Args:
    path: str, The path of the directory to create.
    mode: int, The permissions to give the created directories. 0777 is the
        default mode for os.makedirs(), allowing reading, writing, and listing
        by all users on the machine.

  Raises:
    Error: if the operation fails.
  """
  try:
    os.makedirs(path, mode=mode)
  except OSError as ex:
    base_msg = 'Could not create directory [{0}]: '.format(path)
    if ex.errno == errno.EEXIST and os.path.isdir(path):
      pass
    elif ex.errno == errno.EEXIST and os.path.isfile(path):
      raise Error(base_msg + 'A file exists at that location.')
    elif ex.errno == errno.EACCES:
      raise Error(
          base_msg + 'Permission denied. Please verify that you have '
          'permissions to write to the parent directory.')
    else:
      raise Error(base_msg + (ex.strerror or str(ex)))


def ReadFileContents(path, binary=False):
  """Reads the full contents of the file at path.

  Args:
    path: str, The file to read.
    binary: bool, Return bytes instead of text.

  Returns:
    str | bytes, The file contents.

  Raises:
    Error: If the file cannot be read.
  """
  try:
    with open(path, 'rb' if binary else 'r') as f:
      return f.read()
  except (IOError, OSError) as e:
    raise Error('Unable to read file [{0}]: {1}'.format(
        path, e.strerror or e))


def WriteFileContents(path, contents):
  """Writes contents to path, creating parent directories as needed.

  Args:
    path: str, The file to write.
    contents: str, The text to write.

  Raises:
    Error: If the file cannot be written.
  """
  parent = os.path.dirname(path)
  if parent:
    MakeDir(parent)
  try:
    with open(path, 'w') as f:
      f.write(contents)
  except (IOError, OSError) as e:
    raise Error('Unable to write file [{0}]: {1}'.format(
        path, e.strerror or e))


def FindExecutableOnPath(executable, path=None):
  """Searches for `executable` in the directories listed in `path` or $PATH.

  Args:
    executable: The name of the executable to find.
    path: A list of directories to search separated by 'os.pathsep'.  If None
      then the system PATH is used.

  Returns:
    The path of 'executable' if found and executable, None if not found.

  Raises:
    ValueError: if executable has a path.
  """
  if os.path.dirname(executable):
    raise ValueError('FindExecutableOnPath({0},...) failed because first '
                     'argument must not have a path.'.format(executable))
  effective_path = path if path is not None else os.environ.get('PATH', '')
  for directory in effective_path.split(os.pathsep):
    full = os.path.join(directory, executable)
    if os.path.isfile(full) and os.access(full, os.X_OK):
      return full
  return None
