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

"""General console printing utilities used by the tritoncli commands."""

import io
import os
import subprocess
import sys

from tritoncli.core import log
from tritoncli.core.util import files


def IsInteractive(output=False, error=False):
  """Determines if the current terminal session is interactive.

  sys.stdin must be a terminal input stream.

  Args:
    output: If True then sys.stdout must also be a terminal output stream.
    error: If True then sys.stderr must also be a terminal output stream.

  Returns:
    True if the current terminal session is interactive.
  """
  if not sys.stdin.isatty():
    return False
  if output and not sys.stdout.isatty():
    return False
  if error and not sys.stderr.isatty():
    return False
  return True


def More(contents, out=None, check_pager=True):
  """Run a user specified pager, less(1) or more(1) over contents.

  Args:
    contents: The entire contents of the text lines to page.
    out: The output stream, log.out (effectively) if None.
    check_pager: Checks the PAGER env var and uses it if True.
  """
  if not out:
    out = log.out
  if not IsInteractive(output=True):
    out.write(contents)
    return
  pager = os.environ.get('PAGER', None) if check_pager else None
  if pager == '-':
    pager = None
  elif not pager:
    for command in ('less', 'more'):
      if files.FindExecutableOnPath(command):
        pager = command
        break
  if not pager:
    out.write(contents)
    return
  less = os.environ.get('LESS', None)
  if less is None:
    os.environ['LESS'] = '-R'
  try:
    p = subprocess.Popen(pager, stdin=subprocess.PIPE, shell=True)
    p.communicate(input=contents.encode(sys.stdout.encoding or 'utf-8'))
    p.wait()
  finally:
    if less is None:
      os.environ.pop('LESS')


class TerminalWriter(object):
  """The sink that every command writes its results to.

  Output is buffered for the whole invocation and drained to the real output
  stream by Wait(), which the dispatcher calls exactly once, after the command
  returns or raises. Later calls to Wait() do nothing.

  Attributes:
    drain_count: int, How many times the buffer was drained.
  """

  def __init__(self, out=None, use_pager=False):
    """Creates a new terminal writer.

    Args:
      out: The stream to drain to, log.out at drain time if None.
      use_pager: bool, Page the output when stdout is a terminal.
    """
    self._out = out
    self._use_pager = use_pager
    self._buffer = io.StringIO()
    self._drained = False
    self.drain_count = 0

  def SetUsePager(self, use_pager):
    self._use_pager = use_pager

  # pylint: disable=g-bad-name, This must match file-like objects
  def write(self, text):
    self._buffer.write(text)

  # pylint: disable=g-bad-name, This must match file-like objects
  def flush(self):
    pass

  def Write(self, text):
    self.write(text)

  def Print(self, *msg):
    self.write(' '.join(str(x) for x in msg) + '\n')

  def getvalue(self):
    return self._buffer.getvalue()

  @property
  def drained(self):
    return self._drained

  def Wait(self):
    """Drains everything written so far, once."""
    if self._drained:
      return
    self._drained = True
    self.drain_count += 1
    contents = self._buffer.getvalue()
    if not contents:
      return
    if not contents.endswith('\n'):
      contents += '\n'
    out = self._out or log.out
    if self._use_pager:
      More(contents, out=out)
    else:
      out.write(contents)
    out.flush()
