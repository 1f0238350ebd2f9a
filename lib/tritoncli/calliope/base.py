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

"""Base classes for calliope commands and groups.

A command module defines exactly one subclass of Command and a group package
defines exactly one subclass of Group in its __init__.py. Args() is the
declaration step: it registers flags and their property bindings on the
parser interceptor. PreRun() and Run() are the execution steps and read their
inputs from self.store, never from argv.
"""

import abc

from tritoncli.calliope import arg_parsers


class LayoutException(Exception):
  """An exception for when a command or group .py file has the wrong types."""


class Action(object, metaclass=abc.ABCMeta):
  """A class that allows you to save an Action configuration for reuse."""

  def __init__(self, *args, **kwargs):
    """Creates the Action.

    Args:
      *args: The positional args to parser.add_argument.
      **kwargs: The keyword args to parser.add_argument.
    """
    self.args = args
    self.kwargs = kwargs

  @property
  def name(self):
    return self.args[0]

  @abc.abstractmethod
  def AddToParser(self, parser):
    """Adds this Action to the given parser.

    Args:
      parser: The argparse parser.

    Returns:
      The result of adding the Action to the parser.
    """
    pass


class Argument(Action):
  """A class that allows you to save an argument configuration for reuse.

  The keyword args accept everything ArgumentInterceptor.add_argument()
  accepts, including property, env, persistent and arity.
  """

  def AddToParser(self, parser):
    """Adds this argument to the given parser.

    Args:
      parser: The argparse parser.

    Returns:
      The result of parser.add_argument().
    """
    return parser.add_argument(*self.args, **self.kwargs)


class _Common(object, metaclass=abc.ABCMeta):
  """Base class for Command and Group.

  Attributes:
    detailed_help: {str: str}, Optional help sections. 'brief' overrides the
      docstring summary, 'DESCRIPTION' the docstring body and 'EXAMPLES' is
      rendered as the example section.
  """

  detailed_help = {}
  _is_hidden = False
  _aliases = ()

  def __init__(self, cli, context=None):
    self._cli = cli
    self.context = context if context is not None else {}

  @property
  def store(self):
    """The properties.PropertyStore of the running CLI."""
    return self._cli.store

  @property
  def terminal(self):
    """The console_io.TerminalWriter that command results are written to."""
    return self._cli.terminal

  @staticmethod
  def FromModule(module, is_command):
    """Get the type implementing _Common from the module.

    Args:
      module: module, The module resulting from importing the file containing a
        command.
      is_command: bool, True if we are loading a command, False to load a group.

    Returns:
      type, The custom class that implements _Common.

    Raises:
      LayoutException: If there is not exactly one type inheriting _Common of
        the expected kind.
    """
    commands = []
    groups = []
    for name, command_or_group in vars(module).items():
      if not isinstance(command_or_group, type) or name.startswith('_'):
        continue
      if command_or_group.__module__ != module.__name__:
        continue
      if issubclass(command_or_group, Command):
        commands.append(command_or_group)
      elif issubclass(command_or_group, Group):
        groups.append(command_or_group)

    mod_file = getattr(module, '__file__', module.__name__)
    if is_command:
      if groups:
        raise LayoutException(
            'You cannot define groups [{0}] in a command file: [{1}]'
            .format(', '.join([g.__name__ for g in groups]), mod_file))
      found = commands
    else:
      if commands:
        raise LayoutException(
            'You cannot define commands [{0}] in a command group file: [{1}]'
            .format(', '.join([c.__name__ for c in commands]), mod_file))
      found = groups
    if len(found) != 1:
      raise LayoutException(
          'Expected exactly one {0} in file: [{1}], found [{2}]'.format(
              'command' if is_command else 'group', mod_file, len(found)))
    return found[0]

  @staticmethod
  def Args(parser):
    """Set up arguments for this command.

    Args:
      parser: parser_arguments.ArgumentInterceptor, The flag registry of this
        node.
    """
    pass

  @classmethod
  def IsHidden(cls):
    return cls._is_hidden

  @classmethod
  def Aliases(cls):
    return tuple(cls._aliases)


class Group(_Common):
  """Group is a base class for groups to implement."""

  def Filter(self, context, args):
    """Modify the context that will be given to this group's commands when run.

    Args:
      context: {str:object}, A set of key-value pairs that can be used for
          common initialization among commands.
      args: argparse.Namespace: The same namespace given to the corresponding
          .Run() invocation.
    """
    pass


class Command(_Common):
  """Command is a base class for commands to implement.

  Attributes:
    args_spec: arg_parsers.ArgSpec, The accepted number of positional
      arguments. Commands that declare their own positionals in Args() are
      checked by argparse instead.
  """

  args_spec = arg_parsers.NoArgs()

  @property
  def _cli_power_users_only(self):
    """The calliope.cli.CLI that is running this command.

    Only the documentation and completion commands need the whole tree.
    """
    return self._cli

  def PreRun(self, args):
    """Validates cross-flag constraints before Run().

    Args:
      args: argparse.Namespace, The parsed command line.

    Raises:
      exceptions.ValidationError: If the properties are not acceptable.
    """
    pass

  @abc.abstractmethod
  def Run(self, args):
    """Runs the command.

    Args:
      args: argparse.Namespace, An object that contains the values for the
          arguments specified in the .Args() method.

    Returns:
      A resource object passed to Display().
    """
    pass

  def Display(self, args, result):
    """Writes the result of Run() to self.terminal.

    Args:
      args: argparse.Namespace, The parsed command line.
      result: The object returned by Run().
    """
    pass


def Aliases(*aliases):
  """Decorator for adding alternate names to a command or group.

  Args:
    *aliases: str, The alternate names.

  Returns:
    The inner decorator.
  """
  def Inner(cmd_class):
    # pylint: disable=protected-access
    cmd_class._aliases = tuple(aliases)
    return cmd_class
  return Inner
