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

"""A module that provides parsing utilities for argparse.

For details of how argparse argument pasers work, see:

  http://docs.python.org/dev/library/argparse.html#type

Example usage:

  import argparse
  import arg_parsers

  parser = argparse.ArgumentParser()

  parser.add_argument(
      '--metadata',
      type=arg_parsers.ArgDict(),
      action=arg_parsers.UpdateAction)
  parser.add_argument(
      '--networks',
      type=arg_parsers.ArgList(),
      action=arg_parsers.UpdateAction)

  res = parser.parse_args(
      '--metadata x=y,a=b --metadata c=d --networks n1,n2'.split())

  assert res.metadata == {'a': 'b', 'c': 'd', 'x': 'y'}
  assert res.networks == ['n1', 'n2']

The positional argument count of a command is checked after parsing by one of
the ArgSpec classes below, for example:

  class List(base.Command):
    args_spec = arg_parsers.MaximumArgs(3)
"""

import argparse
import copy

from tritoncli.calliope import exceptions


class Error(Exception):
  """Exceptions that are defined by this module."""


class ArgumentTypeError(Error, argparse.ArgumentTypeError):
  """Exceptions for parsers that are used as argparse types."""


def _TokenizeQuotedList(arg_value, delim=','):
  """Tokenize an argument into a list.

  Args:
    arg_value: str, The raw argument.
    delim: str, The delimiter on which to split the argument string.

  Returns:
    [str], The tokenized list.
  """
  if arg_value:
    if not arg_value.endswith(delim):
      arg_value += delim
    return arg_value.split(delim)[:-1]
  return []


class ArgType(object):
  """Base class for arg types."""


class ArgList(ArgType):
  """Interpret an argument value as a list.

  Intended to be used as the type= for a flag argument. Splits the string on
  commas and returns a list:
      'a,b,c' -> ['a', 'b', 'c']
  """

  DEFAULT_DELIM_CHAR = ','

  def __init__(self, element_type=None, min_length=0, max_length=None):
    """Initialize an ArgList.

    Args:
      element_type: (str)->str, A function to apply to each of the list items.
      min_length: int, The minimum size of the list.
      max_length: int, The maximum size of the list.
    """
    self.element_type = element_type
    self.min_length = min_length
    self.max_length = max_length

  def __call__(self, arg_value):  # pylint:disable=missing-docstring
    arg_list = [item.strip() for item in
                _TokenizeQuotedList(arg_value, delim=self.DEFAULT_DELIM_CHAR)]

    if len(arg_list) < self.min_length:
      raise ArgumentTypeError('not enough args')
    if self.max_length is not None and len(arg_list) > self.max_length:
      raise ArgumentTypeError('too many args')

    if self.element_type:
      arg_list = [self.element_type(arg) for arg in arg_list]

    return arg_list


class ArgDict(ArgList):
  """Interpret an argument value as a dict.

  Intended to be used as the type= for a flag argument. Splits the string on
  commas to get a list, and then splits the items on equals to get a set of
  key-value pairs to get a dict.
  """

  def __init__(self, value_type=None, min_length=0, max_length=None):
    super(ArgDict, self).__init__(min_length=min_length, max_length=max_length)
    self.value_type = value_type

  def __call__(self, arg_value):  # pylint:disable=missing-docstring
    arg_list = super(ArgDict, self).__call__(arg_value)

    arg_dict = {}
    for arg in arg_list:
      split_arg = arg.split('=', 1)  # only use the first =
      if len(split_arg) != 2:
        raise ArgumentTypeError(
            'Bad syntax for dict arg: {0}. Expected key=value.'.format(
                repr(arg)))
      key, value = split_arg
      if not key:
        raise ArgumentTypeError('bad key for dict arg: ' + repr(arg))
      if self.value_type:
        value = self.value_type(value)
      arg_dict[key] = value

    return arg_dict


class UpdateAction(argparse.Action):
  r"""Create a single list or dict value from delimited or repeated flags.

  With type=ArgDict() a caller can specify

    --metadata k1=v1,k2=v2

  or

    --metadata k1=v1 --metadata k2=v2

  and both produce the same {'k1': 'v1', 'k2': 'v2'}; a key given twice keeps
  its last value. With type=ArgList() the items of every occurrence are
  appended in order.
  """

  def __call__(self, parser, namespace, values, option_string=None):
    if isinstance(values, dict):
      items = copy.copy(getattr(namespace, self.dest, None) or {})
      items.update(values)
    else:
      items = copy.copy(getattr(namespace, self.dest, None) or [])
      items.extend(values)
    setattr(namespace, self.dest, items)


class ArgSpec(object):
  """Base class for the positional argument count of a command."""

  def Validate(self, command_path, positionals):
    """Checks the positional arguments of a parsed command line.

    Args:
      command_path: str, The space separated command path, for messages.
      positionals: [str], The positional arguments that were given.

    Raises:
      exceptions.ParseError: If the count is not acceptable.
    """
    raise NotImplementedError

  def _Fail(self, command_path, message):
    raise exceptions.ParseError(message, command_path=command_path)


class ArbitraryArgs(ArgSpec):
  """Accepts any number of positional arguments."""

  def Validate(self, command_path, positionals):
    pass

  def __repr__(self):
    return 'ArbitraryArgs()'


class NoArgs(ArgSpec):
  """Rejects every positional argument."""

  def Validate(self, command_path, positionals):
    if positionals:
      self._Fail(command_path, 'unknown command "{0}" for "{1}"'.format(
          positionals[0], command_path))

  def __repr__(self):
    return 'NoArgs()'


class ExactArgs(ArgSpec):
  """Requires exactly n positional arguments."""

  def __init__(self, n):
    self.n = n

  def Validate(self, command_path, positionals):
    if len(positionals) != self.n:
      self._Fail(command_path, 'accepts {0} arg(s), received {1}'.format(
          self.n, len(positionals)))

  def __repr__(self):
    return 'ExactArgs({0})'.format(self.n)


class MaximumArgs(ArgSpec):
  """Accepts at most n positional arguments."""

  def __init__(self, n):
    self.n = n

  def Validate(self, command_path, positionals):
    if len(positionals) > self.n:
      self._Fail(command_path, 'accepts at most {0} arg(s), received {1}'
                 .format(self.n, len(positionals)))

  def __repr__(self):
    return 'MaximumArgs({0})'.format(self.n)


class MinimumArgs(ArgSpec):
  """Requires at least n positional arguments."""

  def __init__(self, n):
    self.n = n

  def Validate(self, command_path, positionals):
    if len(positionals) < self.n:
      self._Fail(command_path, 'requires at least {0} arg(s), only received {1}'
                 .format(self.n, len(positionals)))

  def __repr__(self):
    return 'MinimumArgs({0})'.format(self.n)


class RangeArgs(ArgSpec):
  """Accepts between lo and hi positional arguments, inclusive."""

  def __init__(self, lo, hi):
    self.lo = lo
    self.hi = hi

  def Validate(self, command_path, positionals):
    if not self.lo <= len(positionals) <= self.hi:
      self._Fail(command_path,
                 'accepts between {0} and {1} arg(s), received {2}'.format(
                     self.lo, self.hi, len(positionals)))

  def __repr__(self):
    return 'RangeArgs({0}, {1})'.format(self.lo, self.hi)
