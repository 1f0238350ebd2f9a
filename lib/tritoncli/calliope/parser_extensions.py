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

"""Calliope argparse intercepts and extensions.

Calliope uses the argparse module for command line parsing with three
extensions:

  * Every parser carries the flag name normalizers installed on its node and
    on its ancestors. Before a parser looks at its arguments, the long names
    of all --flag and --flag=value tokens are passed through them, so that a
    user may type --tag where the declared flag is --tags.

  * Parse failures raise exceptions.ParseError instead of printing usage and
    exiting, so that the CLI can report them like any other error.

  * -h and the builtin help command raise HelpRequested, which the CLI turns
    into a help page on the terminal and exit status 0.
"""

import argparse

from tritoncli.calliope import exceptions


class HelpRequested(Exception):
  """Control flow exception raised when help for a node was requested.

  Attributes:
    command: backend.CommandCommon, The node to print help for.
  """

  def __init__(self, command):
    super(HelpRequested, self).__init__()
    self.command = command


class HelpAction(argparse.Action):
  """The -h/--help flag of a node."""

  def __init__(self, option_strings, dest=argparse.SUPPRESS,
               default=argparse.SUPPRESS, help=None,  # pylint:disable=redefined-builtin
               calliope_command=None):
    super(HelpAction, self).__init__(
        option_strings=option_strings,
        dest=dest,
        default=default,
        nargs=0,
        help=help)
    self._calliope_command = calliope_command

  def __call__(self, parser, namespace, values, option_string=None):
    raise HelpRequested(self._calliope_command)


def NormalizeArgs(args, normalize_funcs):
  """Applies the flag name normalizers to the long flags in args.

  Args:
    args: [str], The command line tokens.
    normalize_funcs: [(str)->str], Normalizers, applied in order to the flag
      name without its leading dashes.

  Returns:
    [str], The normalized tokens. Everything after '--' is left as is.
  """
  if not normalize_funcs:
    return list(args)
  normalized = []
  for i, arg in enumerate(args):
    if arg == '--':
      normalized.extend(args[i:])
      break
    if arg.startswith('--'):
      name, sep, value = arg[2:].partition('=')
      for func in normalize_funcs:
        name = func(name)
      arg = '--' + name + sep + value
    normalized.append(arg)
  return normalized


class ArgumentParser(argparse.ArgumentParser):
  """A custom subclass for arg parsing behavior.

  Attributes:
    normalize_funcs: [(str)->str], The flag name normalizers in effect for this
      parser, the ancestors' first.
  """

  def __init__(self, *args, **kwargs):
    self._calliope_command = kwargs.pop('calliope_command', None)
    self.normalize_funcs = list(kwargs.pop('normalize_funcs', None) or [])
    kwargs.setdefault('add_help', False)
    kwargs.setdefault('allow_abbrev', False)
    super(ArgumentParser, self).__init__(*args, **kwargs)

  @property
  def calliope_command(self):
    return self._calliope_command

  def parse_known_args(self, args=None, namespace=None):
    if args is not None:
      args = NormalizeArgs(args, self.normalize_funcs)
    return super(ArgumentParser, self).parse_known_args(args, namespace)

  def _check_value(self, action, value):
    """Reports unknown sub commands the way the rest of the CLI words it."""
    if (isinstance(action, argparse._SubParsersAction) and  # pylint:disable=protected-access
        value not in action.choices):
      raise argparse.ArgumentError(
          None, 'unknown command "{0}" for "{1}"'.format(value, self.prog))
    super(ArgumentParser, self)._check_value(action, value)

  def error(self, message):
    """Raises a ParseError instead of printing usage and exiting.

    Args:
      message: str, The argparse error message.

    Raises:
      exceptions.ParseError: Always.
    """
    raise exceptions.ParseError(message, command_path=self.prog)

  def exit(self, status=0, message=None):
    if status:
      raise exceptions.ParseError(message or 'parse error',
                                  command_path=self.prog)
    raise HelpRequested(self._calliope_command)
