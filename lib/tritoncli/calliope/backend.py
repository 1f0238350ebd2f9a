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

"""Backend stuff for the calliope.cli module.

Not to be used by mortals.

The command tree is loaded from a package of command modules. A package with
an __init__.py is a group and every other module in it is a command. The
whole tree is loaded up front so that every flag and property binding exists
before the first argument is parsed.
"""

import argparse
import importlib
import pkgutil
import re

from tritoncli.calliope import arg_parsers
from tritoncli.calliope import base
from tritoncli.calliope import parser_arguments
from tritoncli.calliope import parser_errors
from tritoncli.calliope import parser_extensions
from tritoncli.calliope import usage_text
from tritoncli.core import log


class LayoutException(Exception):
  """LayoutException is for problems with module directory structure."""


class CommandLoadFailure(Exception):
  """An exception for when a command or group module cannot be imported."""

  def __init__(self, command, root_exception):
    self.command = command
    self.root_exception = root_exception
    super(CommandLoadFailure, self).__init__(
        'Problem loading {command}: {issue}.'.format(
            command=command, issue=str(root_exception)))


def _ImportModule(module_name, path):
  try:
    return importlib.import_module(module_name)
  except ImportError as e:
    raise CommandLoadFailure('.'.join(path), e)


class CommandCommon(object):
  """A base class for CommandGroup and Command.

  It is responsible for extracting arguments from the modules and does argument
  validation, since this is always the same for groups and commands.
  """

  is_group = False
  is_builtin = False

  def __init__(self, common_type, path, cli_generator, parser_group,
               allow_positional_args, parent_group):
    """Create a new CommandCommon.

    Args:
      common_type: base._Common, The actual loaded user written command or
        group class.
      path: [str], The path to this command or group with respect to the CLI
        itself, the CLI name first.
      cli_generator: cli.CLILoader, The builder used to generate this CLI.
      parser_group: argparse._SubParsersAction, The sub parsers of the parent
        group, None at the root.
      allow_positional_args: bool, True if this command can have positional
        arguments.
      parent_group: CommandGroup, The parent of this command or group. None if
        at the root.
    """
    self._parent_group = parent_group

    self.name = path[-1]
    # For the purposes of argparse and the help, we should use dashes.
    self.cli_name = self.name.replace('_', '-')
    if self.is_group:
      log.debug('Loaded Command Group: %s', path)
    else:
      log.debug('Loaded Command: %s', path)
    path[-1] = self.cli_name
    self._path = path
    self.dotted_name = '.'.join(path)
    self._cli_generator = cli_generator

    self._common_type = common_type
    self.aliases = common_type.Aliases()
    self.detailed_help = getattr(self._common_type, 'detailed_help', {})
    self._ExtractHelpStrings(self._common_type.__doc__)

    self._AssignParser(
        parser_group=parser_group,
        allow_positional_args=allow_positional_args)

  def IsHidden(self):
    """Gets the hidden status of this command or group."""
    if self._parent_group and self._parent_group.IsHidden():
      return True
    return self._common_type.IsHidden()

  def IsRoot(self):
    """Returns True if this is the root element in the CLI tree."""
    return not self._parent_group

  def _TopCLIElement(self):
    """Gets the top group of this CLI."""
    if self.IsRoot():
      return self
    # pylint: disable=protected-access
    return self._parent_group._TopCLIElement()

  @property
  def parent_group(self):
    return self._parent_group

  @property
  def examples(self):
    return self.detailed_help.get('EXAMPLES', '')

  def _ExtractHelpStrings(self, docstring):
    """Extracts short help and long help from a docstring.

    Args:
      docstring: The docstring from which short and long help are to be taken
    """
    self.short_help, self.long_help = usage_text.ExtractHelpStrings(docstring)
    if 'brief' in self.detailed_help:
      self.short_help = re.sub(r'\s', ' ', self.detailed_help['brief']).strip()
    if 'DESCRIPTION' in self.detailed_help:
      self.long_help = self.detailed_help['DESCRIPTION'].strip()

  def _AssignParser(self, parser_group, allow_positional_args):
    """Assign a parser to model this Command or CommandGroup.

    Args:
      parser_group: argparse._SubParsersAction, the sub parsers of the parent,
          or None at the root.
      allow_positional_args: bool, Whether to allow positional args.

    Raises:
      LayoutException: If the name or an alias is already taken in the parent.
    """
    prog = ' '.join(self._path)
    if not parser_group:
      # This is the root of the command tree, so we create the first parser.
      self._parser = parser_extensions.ArgumentParser(
          description=self.long_help,
          prog=prog,
          calliope_command=self)
    else:
      # This is a normal sub element, so just add a new subparser to the
      # existing one. Flag name normalizers are inherited.
      try:
        self._parser = parser_group.add_parser(
            self.cli_name,
            aliases=list(self.aliases),
            help=self.short_help,
            description=self.long_help,
            prog=prog,
            calliope_command=self,
            normalize_funcs=self._parent_group.ai.normalize_funcs)
      except argparse.ArgumentError as e:
        raise LayoutException(
            'Duplicate command name or alias in [{0}]: {1}'.format(prog, e))
    self._parser.set_defaults(calliope_command=self)

    self.ai = parser_arguments.ArgumentInterceptor(
        parser=self._parser,
        store=self._cli_generator.store,
        command_name=prog,
        is_root=not parser_group,
        allow_positional=allow_positional_args)

    self._parser.add_argument(
        '-h', '--help',
        action=parser_extensions.HelpAction,
        calliope_command=self,
        help='help for {0}'.format(self.cli_name))

    self._AcquireArgs()

  def _AcquireArgs(self):
    """Calls the functions to register the arguments for this module."""
    # A command implementation can optionally define an Args() method.
    self._common_type.Args(self.ai)

    if self._parent_group:
      # Add the persistent flags of the ancestors. Redeclaring one of them is
      # an error.
      for flag in self._parent_group.ai.persistent_flag_args:
        try:
          self.ai.AddFlagActionFromAncestors(flag)
        except parser_errors.ArgumentException:
          raise parser_errors.ArgumentException(
              'repeated flag in {command}: {flag}'.format(
                  command=' '.join(self._path),
                  flag=', '.join(flag.option_strings)))

  def GetPath(self):
    return self._path

  def GetUsage(self):
    return usage_text.GetUsage(self)

  def AllSubElements(self):
    """Gets all the sub elements of this node, keyed by cli name."""
    return {}

  def LoadSubElementByPath(self, path):
    """Finds a sub group or command by path, names or aliases.

    If path is empty, returns the current element.

    Args:
      path: list of str, The names of the elements down the hierarchy.

    Returns:
      CommandCommon, The sub element, or None if it does not exist.
    """
    curr = self
    for part in path:
      curr = curr.GetSubElement(part)
      if curr is None:
        return None
    return curr

  def GetSubElement(self, unused_name):
    return None

  def GetAllAvailableFlags(self):
    return self.ai.GetAllAvailableFlags()


class CommandGroup(CommandCommon):
  """A class to encapsulate a group of commands."""

  is_group = True

  def __init__(self, module_name, path, cli_generator, parser_group,
               parent_group=None):
    """Create a new command group.

    Args:
      module_name: str, The dotted name of the group package.
      path: [str], The path to this command group with respect to the CLI.
      cli_generator: cli.CLILoader, The builder used to generate this CLI.
      parser_group: The sub parsers of the parent group, or None if this is the
        root command group.
      parent_group: CommandGroup, The parent of this group. None if at the
        root.

    Raises:
      LayoutException: if the module has no sub groups or commands
    """
    module = _ImportModule(module_name, path)
    try:
      common_type = base._Common.FromModule(module, is_command=False)  # pylint:disable=protected-access
    except base.LayoutException as e:
      raise LayoutException(str(e))
    super(CommandGroup, self).__init__(
        common_type,
        path=path,
        cli_generator=cli_generator,
        allow_positional_args=False,
        parser_group=parser_group,
        parent_group=parent_group)

    self._module = module
    self.groups = {}
    self.commands = {}
    self._sub_parser = self._parser.add_subparsers(
        title='commands', metavar='command')
    self._LoadSubElements()
    if not self.groups and not self.commands:
      raise LayoutException('Group %s has no subgroups or commands'
                            % self.dotted_name)
    self._AddBuiltinHelp()

  def _LoadSubElements(self):
    """Loads all the sub groups and commands under this group.

    Raises:
      LayoutException: if there is a command or group with an illegal name.
    """
    for _, name, is_package in sorted(pkgutil.iter_modules(
        self._module.__path__)):
      if name.startswith('_'):
        continue
      if re.search('[A-Z]', name):
        raise LayoutException('Commands and groups cannot have capital '
                              'letters: %s.' % name)
      module_name = '{0}.{1}'.format(self._module.__name__, name)
      if is_package:
        element = CommandGroup(
            module_name, self._path + [name], self._cli_generator,
            self._sub_parser, parent_group=self)
        self.groups[element.cli_name] = element
      else:
        element = Command.FromModule(
            module_name, self._path + [name], self._cli_generator,
            self._sub_parser, parent_group=self)
        self.commands[element.cli_name] = element

  def _AddBuiltinHelp(self):
    if 'help' in self.commands:
      return
    self.commands['help'] = Command(
        _BuiltinHelp, self._path + ['help'], self._cli_generator,
        self._sub_parser, parent_group=self)

  def AllSubElements(self):
    elements = dict(self.groups)
    elements.update(self.commands)
    return elements

  def GetSubElement(self, name):
    for element in self.AllSubElements().values():
      if name == element.cli_name or name in element.aliases:
        return element
    return None

  def RunGroupFilter(self, cli, context, args):
    """Constructs and runs the Filter() method of all parent groups.

    This recurses up to the root group and then constructs each group and runs
    its Filter() method down the tree.

    Args:
      cli: cli.CLI, The running CLI.
      context: {}, The context dictionary that Filter() can modify.
      args: The argparse namespace.
    """
    if self._parent_group:
      self._parent_group.RunGroupFilter(cli, context, args)
    self._common_type(cli=cli, context=context).Filter(context, args)


class Command(CommandCommon):
  """A class that encapsulates the configuration for a single command."""

  def __init__(self, common_type, path, cli_generator, parser_group,
               parent_group=None):
    """Create a new command.

    Args:
      common_type: base.Command, The command class.
      path: [str], The path to this command with respect to the CLI.
      cli_generator: cli.CLILoader, The builder used to generate this CLI.
      parser_group: The sub parsers of the parent, None for a root command.
      parent_group: CommandGroup, The parent of this command.
    """
    super(Command, self).__init__(
        common_type,
        path=path,
        cli_generator=cli_generator,
        allow_positional_args=True,
        parser_group=parser_group,
        parent_group=parent_group)
    self.args_spec = common_type.args_spec
    self.is_builtin = common_type is _BuiltinHelp
    if not self.ai.positional_args:
      # The positional arguments are checked against args_spec after parsing.
      self._parser.add_argument(
          'positionals', nargs='*', metavar='ARG', default=argparse.SUPPRESS,
          help=argparse.SUPPRESS)

  @classmethod
  def FromModule(cls, module_name, path, cli_generator, parser_group,
                 parent_group=None):
    """Loads the command class from module_name and creates the command."""
    module = _ImportModule(module_name, path)
    try:
      common_type = base._Common.FromModule(module, is_command=True)  # pylint:disable=protected-access
    except base.LayoutException as e:
      raise LayoutException(str(e))
    return cls(common_type, path, cli_generator, parser_group,
               parent_group=parent_group)

  def ValidatePositionals(self, args):
    """Applies the positional argument count of the command.

    Args:
      args: argparse.Namespace, The parsed command line.

    Raises:
      exceptions.ParseError: If the count is not acceptable.
    """
    if self.ai.positional_args:
      return
    self.args_spec.Validate(' '.join(self._path),
                            getattr(args, 'positionals', []))

  def Run(self, cli, args):
    """Run this command with the given arguments.

    PreRun() is called first and Run() is not called if it fails.

    Args:
      cli: The cli.CLI object for this command line tool.
      args: The arguments for this command as a namespace.

    Returns:
      The object returned by the module's Run() function.

    Raises:
      exceptions.Error: if thrown by the PreRun() or Run() function.
    """
    tool_context = {}
    if self._parent_group:
      self._parent_group.RunGroupFilter(cli, tool_context, args)

    command_instance = self._common_type(cli=cli, context=tool_context)

    command_instance.PreRun(args)
    log.debug('Running %s with %s.', self.dotted_name, args)
    resources = command_instance.Run(args)
    command_instance.Display(args, resources)
    return resources


class _BuiltinHelp(base.Command):
  """Help about any command.

  Help provides help for any command in the application. Simply type
  `help [path to command]` for full details.
  """

  args_spec = arg_parsers.ArbitraryArgs()

  def Run(self, args):
    group = args.calliope_command.parent_group
    target = group.LoadSubElementByPath(getattr(args, 'positionals', []))
    if target is None:
      self.terminal.Write('Unknown help topic {0}\n'.format(
          ' '.join(getattr(args, 'positionals', []))))
      target = group
    self.terminal.Write(target.GetUsage())
