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

"""Calliope argparse argument intercepts and extensions.

The ArgumentInterceptor is the flag registry of one command tree node. It
records every flag declared on the node, promotes persistent flags so that
the backend can copy them onto every descendant, and wires flags, environment
variables and defaults into the property store.

Refer to the calliope.parser_extensions module for a detailed overview.
"""

import argparse

from tritoncli.calliope import arg_parsers
from tritoncli.calliope import parser_errors
from tritoncli.core import properties


# Flag arities.
SCALAR = 'scalar'
LIST = 'list'
MAP = 'map'


def _ValueType(kwargs, arity):
  """Returns the properties type produced by a flag declaration."""
  if kwargs.get('action') in ('store_true', 'store_false'):
    return properties.BOOL
  if arity == LIST:
    return properties.LIST
  if arity == MAP:
    return properties.MAP
  if kwargs.get('type') is int:
    return properties.INT
  return properties.STRING


class ArgumentInterceptor(object):
  """ArgumentInterceptor intercepts calls to argparse parsers.

  The argparse module provides no public way to access the arguments that were
  specified on the command line, and no notion of flags that are inherited by
  sub commands. The interceptor keeps track of both.

  Attributes:
    allow_positional: bool, Whether or not to allow positional arguments.
    ancestor_flag_args: [argparse.Action], The persistent flags copied from
      the ancestors of this node.
    command_name: str, The space separated command path, for messages.
    defaults: {str:obj}, A dict of {dest: default} for the unbound arguments.
    dests: [str], A list of the dests for all arguments.
    flag_args: [argparse.Action], A list of the flags declared on this node.
    normalize_funcs: [(str)->str], The flag name normalizers of this node and
      its ancestors.
    parser: parser_extensions.ArgumentParser, The intercepted parser.
    persistent_flag_args: [argparse.Action], The flags of this node that are
      inherited by its descendants, including those it inherited itself.
    positional_args: [argparse.Action], A list of the positional arguments.
    store: properties.PropertyStore, The store flags are bound into.
  """

  def __init__(self, parser, store, command_name, is_root=False,
               allow_positional=True):
    self.parser = parser
    self.store = store
    self.command_name = command_name
    self.is_root = is_root
    self.allow_positional = allow_positional

    self.ancestor_flag_args = []
    self.defaults = {}
    self.dests = []
    self.flag_args = []
    self.persistent_flag_args = []
    self.positional_args = []

  @property
  def normalize_funcs(self):
    return self.parser.normalize_funcs

  def SetNormalizeFunc(self, func):
    """Installs a flag name normalizer on this node and its descendants.

    Normalizers apply to the flag names used on the command line and to the
    names of the flags declared after this call.

    Args:
      func: (str)->str, Maps a long flag name without the leading dashes to
        its canonical name.
    """
    self.parser.normalize_funcs.append(func)

  def _NormalizeName(self, name):
    if not name.startswith('--'):
      return name
    name = name[2:]
    for func in self.normalize_funcs:
      name = func(name)
    return '--' + name

  # pylint: disable=g-bad-name
  def add_argument(self, *args, **kwargs):
    """add_argument intercepts calls to the parser to track arguments.

    Beyond the argparse keyword args this accepts:

      persistent: bool, The flag is inherited by every descendant node.
      property: str, The properties key the flag value is bound to.
      env: str or [str], Environment variables imported into the property,
        in lookup order.
      arity: SCALAR, LIST or MAP. LIST flags collect comma separated and
        repeated values, MAP flags collect key=value items.
      hidden: bool, Leave the flag out of the help.

    A default for a bound flag becomes the property default. Unbound flags
    keep their default in self.defaults and the CLI applies it after parsing.
    Every flag is parsed with default=argparse.SUPPRESS, so a dest that is
    present on the parsed namespace was supplied on the command line.

    Args:
      *args: The option strings or the positional name.
      **kwargs: The argparse and calliope keyword args described above.

    Returns:
      argparse.Action, The added argument.

    Raises:
      parser_errors.ArgumentException: If the declaration is not valid for
        this node.
    """
    persistent = kwargs.pop('persistent', False)
    prop = kwargs.pop('property', None)
    env = kwargs.pop('env', None)
    arity = kwargs.pop('arity', SCALAR)
    if kwargs.pop('hidden', False):
      kwargs['help'] = argparse.SUPPRESS

    args = tuple(self._NormalizeName(a) for a in args)
    name = args[0]
    positional = not name.startswith('-')
    if positional:
      if not self.allow_positional:
        raise parser_errors.ArgumentException(
            'Illegal positional argument [{0}] for command [{1}]'.format(
                name, self.command_name))
      if persistent:
        raise parser_errors.ArgumentException(
            'Positional argument [{0}] cannot be persistent in '
            'command [{1}]'.format(name, self.command_name))
    long_names = [a for a in args if a.startswith('--')]
    if not positional and not long_names:
      raise parser_errors.ArgumentException(
          'Flag [{0}] in command [{1}] has no long name'.format(
              name, self.command_name))

    value_type = _ValueType(kwargs, arity)
    if arity == LIST:
      kwargs.setdefault('type', arg_parsers.ArgList())
      kwargs.setdefault('action', arg_parsers.UpdateAction)
    elif arity == MAP:
      kwargs.setdefault('type', arg_parsers.ArgDict())
      kwargs.setdefault('action', arg_parsers.UpdateAction)

    has_default = 'default' in kwargs
    default = kwargs.pop('default', None)
    if prop:
      dest = name if positional else prop
    else:
      dest = kwargs.get('dest') or name.lstrip('-').replace('-', '_')
    if not positional:
      kwargs['dest'] = dest
      if value_type != properties.BOOL:
        kwargs.setdefault('metavar',
                          long_names[0][2:].upper().replace('-', '_'))
    kwargs['default'] = argparse.SUPPRESS

    if prop:
      self.store.BindFlag(prop, dest, value_type)
      if env:
        if isinstance(env, str):
          env = [env]
        self.store.BindEnv(prop, *env)
      if has_default:
        self.store.SetDefault(prop, default)
    else:
      self.defaults[dest] = default

    try:
      added_argument = self.parser.add_argument(*args, **kwargs)
    except argparse.ArgumentError as e:
      raise parser_errors.ArgumentException(
          'repeated flag in {command}: {error}'.format(
              command=self.command_name, error=e))

    added_argument.property = prop
    added_argument.env = list(env or [])
    added_argument.declared_default = default
    added_argument.is_persistent = persistent
    added_argument.arity = arity
    self.dests.append(dest)
    if positional:
      self.positional_args.append(added_argument)
      return added_argument

    self.flag_args.append(added_argument)
    if persistent:
      self.persistent_flag_args.append(added_argument)
    if value_type == properties.BOOL:
      self._AddInvertedBooleanFlag(added_argument, long_names[0], dest,
                                   kwargs.get('action'))
    return added_argument

  def _AddInvertedBooleanFlag(self, added_argument, name, dest, action):
    """Adds the hidden --no-* flag for a Boolean flag.

    Args:
      added_argument: argparse.Action, The Boolean flag.
      name: str, The long name of the Boolean flag.
      dest: str, The dest of the Boolean flag.
      action: str, store_true or store_false.
    """
    inverted = self.parser.add_argument(
        name.replace('--', '--no-', 1),
        action='store_false' if action == 'store_true' else 'store_true',
        dest=dest,
        default=argparse.SUPPRESS,
        help=argparse.SUPPRESS)
    inverted.property = added_argument.property
    inverted.env = []
    inverted.declared_default = None
    inverted.is_persistent = added_argument.is_persistent
    inverted.arity = SCALAR
    self.flag_args.append(inverted)
    if added_argument.is_persistent:
      self.persistent_flag_args.append(inverted)

  def AddFlagActionFromAncestors(self, action):
    """Add a persistent flag action of an ancestor to this parser.

    Segregating the action allows automatically generated help text to list
    it with the inherited flags.

    Args:
      action: argparse.Action, The action for the flag being added.

    Raises:
      parser_errors.ArgumentException: If this node already declares one of
        the option strings of the flag.
    """
    try:
      # pylint:disable=protected-access, simply no other way to do this.
      self.parser._add_action(action)
    except argparse.ArgumentError as e:
      raise parser_errors.ArgumentException(
          'repeated flag in {command}: {error}'.format(
              command=self.command_name, error=e))
    # explicitly do this second, in case ._add_action() fails.
    self.ancestor_flag_args.append(action)
    self.persistent_flag_args.append(action)

  def GetAllAvailableFlags(self):
    return self.flag_args + self.ancestor_flag_args
