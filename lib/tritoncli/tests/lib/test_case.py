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

"""Base classes for the tritoncli unit tests."""

import io
import os
import shutil
import tempfile
import unittest
from unittest import mock

from tritoncli.core import log
from tritoncli.core import properties
from tritoncli.core.console import console_io


class Base(unittest.TestCase):
  """A base class for tests that need a clean environment.

  Subclasses override SetUp() and TearDown() instead of setUp() and
  tearDown(), the base class takes care of the common state: log output is
  captured, the process environment is restored and temporary directories
  are deleted.
  """

  def setUp(self):
    self._stdout = io.StringIO()
    self._stderr = io.StringIO()
    log.Reset(self._stdout, self._stderr)
    self._temp_dirs = []
    self._env_patcher = mock.patch.dict(os.environ, {}, clear=False)
    self._env_patcher.start()
    self.SetUp()

  def tearDown(self):
    try:
      self.TearDown()
    finally:
      self._env_patcher.stop()
      for directory in self._temp_dirs:
        shutil.rmtree(directory, ignore_errors=True)
      log.Reset()

  def SetUp(self):
    pass

  def TearDown(self):
    pass

  def CreateTempDir(self):
    directory = tempfile.mkdtemp(prefix='tritoncli-test-')
    self._temp_dirs.append(directory)
    return directory

  def SetEnv(self, **values):
    """Sets environment variables for the duration of the test."""
    os.environ.update(values)

  def ClearEnv(self, *prefixes):
    """Removes the variables starting with one of prefixes."""
    for name in list(os.environ):
      if name.startswith(prefixes):
        del os.environ[name]

  def GetErr(self):
    return self._stderr.getvalue()

  def GetLogOut(self):
    return self._stdout.getvalue()

  def StartPatch(self, *args, **kwargs):
    patcher = mock.patch(*args, **kwargs)
    self.addCleanup(patcher.stop)
    return patcher.start()

  def StartObjectPatch(self, target, attribute, **kwargs):
    patcher = mock.patch.object(target, attribute, **kwargs)
    self.addCleanup(patcher.stop)
    return patcher.start()


class CliTestBase(Base):
  """A base class for tests that run the commands of one CLI.

  Attributes:
    store: properties.PropertyStore, The configuration store of the CLI.
    out: io.StringIO, Receives what the commands write to their terminal.
  """

  def SetUp(self):
    self.store = properties.PropertyStore()
    self.out = io.StringIO()
    self.terminals = []
    self.cli = None
    self.ClearEnv('TRITON_', 'SDC_', 'MANTA_', 'ARTIFACTORY_')

  def NewTerminal(self):
    terminal = console_io.TerminalWriter(out=self.out, use_pager=False)
    self.terminals.append(terminal)
    return terminal

  def Run(self, args, environ=None):
    """Executes the CLI with args and returns the exit code."""
    return self.cli.Execute(list(args), call_arg_complete=False,
                            environ=environ if environ is not None else {})

  def GetOutput(self):
    return self.out.getvalue()
