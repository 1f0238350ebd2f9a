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

"""The calliope CLI/API is a framework for building library interfaces."""

import importlib
import os
import sys

import argcomplete

from tritoncli.calliope import backend
from tritoncli.calliope import exceptions
from tritoncli.calliope import parser_extensions
from tritoncli.core import exceptions as core_exceptions
from tritoncli.core import log
from tritoncli.core import properties
from tritoncli.core.console import console_io


class CLILoader(object):
  """A class to encapsulate loading the CLI."""

  def __init__(self, name, command_root_module, version=None, store=None,
               terminal_factory=None):
    """Initialize Calliope.

    Args:
      name: str, The name of the top level command, used for nice error
        reporting.
      command_root_module: str, The dotted name of the package holding the
        command tree, or of a module holding a single root command.
      version: str, The version reported by the version and doc commands.
      store: properties.PropertyStore, The configuration store of the CLI. A
        new store with the default sections if None.
      terminal_factory: () -> console_io.TerminalWriter, Creates the output
        sink of one invocation.

    Raises:
      backend.LayoutException: If no command root module is given.
    """
    self.__name = name
    self.__command_root_module = command_root_module
    if not self.__command_root_module:
      raise backend.LayoutException(
          'You must specify a command root module.')
    self.version = version
    self.store = store or properties.PropertyStore()
    self.__terminal_factory = terminal_factory or console_io.TerminalWriter

  def Generate(self):
    """Uses the registered information to generate the CLI tool.

    Every group and command under the root is loaded, so all flags and
    property bindings exist before anything is parsed.

    Returns:
      CLI, The generated CLI tool.
    """
    module = importlib.import_module(self.__command_root_module)
    if hasattr(module, '__path__'):
      top_element = backend.CommandGroup(
          self.__command_root_module, [self.__name], self, parser_group=None)
    else:
      top_element = backend.Command.FromModule(
          self.__command_root_module, [self.__name], self, parser_group=None)
    return self.__MakeCLI(top_element)

  def __MakeCLI(self, top_element):
    """Generate a CLI object from the given data.

    Args:
      top_element: The top element of the command tree
        (that extends backend.CommandCommon).

    Returns:
      CLI, The generated CLI tool.
    """
    return CLI(self.__name, top_element, self.store, self.version,
               self.__terminal_factory)


def _ArgComplete(parser, **kwargs):
  """Runs argcomplete.autocomplete on a calliope argument parser."""
  if '_ARGCOMPLETE' not in os.environ:
    return
  mute_stderr = None
  try:
    # Leave stderr alone when the caller wants to see completion errors.
    if '_ARGCOMPLETE_TRACE' in os.environ:
      mute_stderr = argcomplete.mute_stderr

      def _DisableMuteStderr():
        pass

      argcomplete.mute_stderr = _DisableMuteStderr

    argcomplete.autocomplete(parser, always_complete_options=False, **kwargs)
  finally:
    if mute_stderr:
      argcomplete.mute_stderr = mute_stderr


class CLI(object):
  """A generated command line tool.

  Attributes:
    store: properties.PropertyStore, The configuration store read by the
      commands.
    terminal: console_io.TerminalWriter, The output sink of the current or
      most recent invocation.
    version: str, The version of the tool.
  """

  def __init__(self, name, top_element, store, version, terminal_factory):
    # pylint: disable=protected-access
    self.__name = name
    self.__parser = top_element._parser
    self.__top_element = top_element
    self.__terminal_factory = terminal_factory
    self.store = store
    self.version = version
    self.terminal = terminal_factory()

  @property
  def name(self):
    return self.__name

  @property
  def top_element(self):
    return self.__top_element

  def Execute(self, args=None, call_arg_complete=True, environ=None):
    """Execute the CLI tool with the given arguments.

    The environment is imported first, then the command line is parsed and
    the flag values are bound, then the store is frozen and the selected
    command runs. The terminal writer is drained exactly once, whatever
    happens.

    Args:
      args: [str], The arguments from the command line or None to use sys.argv
      call_arg_complete: Call the _ArgComplete function if True
      environ: {str: str}, The environment, os.environ if None.

    Returns:
      int, The exit code, 0 on success and 1 on any error.

    Raises:
      ValueError: for ill-typed arguments.
    """
    if isinstance(args, str):
      raise ValueError('Execute expects an iterable of strings, not a string.')

    if call_arg_complete:
      _ArgComplete(self.__parser)

    if args is None:
      args = sys.argv[1:]

    self.terminal = self.__terminal_factory()
    self.store.PushInvocationValues()
    command_path_string = self.__name
    try:
      self.store.ImportEnvironment(environ)
      try:
        namespace = self.__parser.parse_args(list(args))
      except parser_extensions.HelpRequested as e:
        self.terminal.Write(e.command.GetUsage())
        return 0

      command = namespace.calliope_command
      command_path_string = ' '.join(command.GetPath())
      for dest, default in command.ai.defaults.items():
        if not hasattr(namespace, dest):
          setattr(namespace, dest, default)
      for ancestor_flag in command.ai.ancestor_flag_args:
        if (not ancestor_flag.property and
            not hasattr(namespace, ancestor_flag.dest)):
          setattr(namespace, ancestor_flag.dest,
                  ancestor_flag.declared_default)

      self.store.SetFlagValues(namespace)
      self.store.Freeze()
      log.Configure(self.store)
      self.terminal.SetUsePager(self.store.GetBool('general.use-pager'))

      if command.is_group:
        # A group without a sub command just shows its help.
        self.terminal.Write(command.GetUsage())
        return 0

      command.ValidatePositionals(namespace)
      command.Run(cli=self, args=namespace)
      return 0

    except exceptions.ExitCodeNoError as exc:
      log.debug('({0}) {1}'.format(command_path_string, exc))
      return getattr(exc, 'exit_code', 1)
    except Exception as exc:  # pylint: disable=broad-except
      return self._HandleAllErrors(exc, command_path_string)

    finally:
      self.terminal.Wait()
      self.store.PopInvocationValues()

  def _HandleAllErrors(self, exc, command_path_string):
    """Reports an error of the running command.

    Args:
      exc: Exception, The exception that was raised.
      command_path_string: str, The space separated command path.

    Returns:
      int, The exit code.
    """
    known_exc = exc
    if not isinstance(exc, core_exceptions.Error):
      known_exc = exceptions.ConvertKnownError(exc)
    if known_exc is not None:
      log.debug('({0}) {1}'.format(command_path_string, known_exc),
                exc_info=sys.exc_info())
      log.error(str(known_exc))
      return getattr(known_exc, 'exit_code', 1)
    # Not one of ours: still a message and status 1, with the traceback at
    # debug level.
    log.debug('({0}) unexpected {1}'.format(
        command_path_string, exc.__class__.__name__), exc_info=sys.exc_info())
    log.error('{0}: {1}'.format(exc.__class__.__name__, exc))
    return 1
