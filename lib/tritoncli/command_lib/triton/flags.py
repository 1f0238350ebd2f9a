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

"""Flags and validators shared by the triton and manta commands."""

import sys

from tritoncli.calliope import base
from tritoncli.calliope import exceptions
from tritoncli.command_lib.triton import config


def _IsTerminal():
  isatty = getattr(sys.stdout, 'isatty', None)
  return bool(isatty and isatty())


def AddOutputFlags(parser):
  """Adds the pager, logging and time zone flags every root command has."""
  is_terminal = _IsTerminal()
  parser.add_argument(
      '--use-pager', '-P',
      action='store_true',
      persistent=True,
      property='general.use-pager',
      default=is_terminal,
      help='Use a pager to read the output (defaults to $PAGER, less(1), '
      'or more(1)).')
  parser.add_argument(
      '--log-level', '-l',
      persistent=True,
      property='log.level',
      default='INFO',
      help='Change the log level being sent to stderr.')
  parser.add_argument(
      '--log-format', '-F',
      persistent=True,
      property='log.format',
      default='auto',
      help='Specify the log format ("auto", "zerolog", or "human").')
  parser.add_argument(
      '--use-color',
      action='store_true',
      persistent=True,
      property='log.use-color',
      default=is_terminal,
      help='Use ASCII colors.')
  parser.add_argument(
      '--utc', '-Z',
      action='store_true',
      persistent=True,
      property='general.utc',
      default=False,
      help='Display times in UTC.')


def AddTritonCredentialFlags(parser):
  """Adds the CloudAPI credential flags of the triton root command."""
  parser.add_argument(
      '--account', '-A',
      persistent=True,
      property='general.triton.account',
      env=config.EnvNames('ACCOUNT'),
      help='Account (login name). If not specified, the environment variable '
      'TRITON_ACCOUNT or SDC_ACCOUNT will be used.')
  parser.add_argument(
      '--url', '-U',
      persistent=True,
      property='general.triton.url',
      env=config.EnvNames('URL'),
      help='CloudAPI URL. If not specified, the environment variable '
      'TRITON_URL or SDC_URL will be used.')
  parser.add_argument(
      '--key-id', '-K',
      persistent=True,
      property='general.triton.key-id',
      env=config.EnvNames('KEY_ID'),
      help='The fingerprint of the public key matching the key in '
      'key-material, see ssh-keygen -l -E md5 -f /path/to/key. It can be '
      'provided via the SDC_KEY_ID or TRITON_KEY_ID environment variables.')
  parser.add_argument(
      '--key-material',
      persistent=True,
      property='general.triton.key-material',
      env=config.EnvNames('KEY_MATERIAL'),
      help='The private key, or the path to it, of an SSH key associated '
      'with the account. If this is not set, the key with the fingerprint '
      'in key-id must be available via an SSH agent. It can be provided via '
      'the SDC_KEY_MATERIAL or TRITON_KEY_MATERIAL environment variables.')


def AddMantaCredentialFlags(parser):
  """Adds the Manta credential flags of the manta root command."""
  prefixes = config.MANTA_ENV_PREFIXES
  parser.add_argument(
      '--account', '-A',
      persistent=True,
      property='general.manta.account',
      env=config.EnvNames('USER', prefixes),
      help='Account (login name). If not specified, the environment variable '
      'MANTA_USER will be used.')
  parser.add_argument(
      '--url', '-U',
      persistent=True,
      property='general.manta.url',
      env=config.EnvNames('URL', prefixes),
      help='Manta URL. If not specified, the environment variable MANTA_URL '
      'will be used.')
  parser.add_argument(
      '--key-id', '-K',
      persistent=True,
      property='general.manta.key-id',
      env=config.EnvNames('KEY_ID', prefixes),
      help='The fingerprint of the public key matching the key in '
      'key-material. It can be provided via the MANTA_KEY_ID, TRITON_KEY_ID '
      'or SDC_KEY_ID environment variables.')
  parser.add_argument(
      '--key-material',
      persistent=True,
      property='general.manta.key-material',
      env=config.EnvNames('KEY_MATERIAL', prefixes),
      help='The private key, or the path to it. If this is not set, the key '
      'with the fingerprint in key-id must be available via an SSH agent.')


INSTANCE_ID_FLAG = base.Argument(
    '--id',
    property='compute.instance.id',
    help='Instance ID.')

MAN_DIR_FLAG = base.Argument(
    '--man-dir', '-m',
    property='doc.mandir',
    env='MANDIR',
    help='Specify the MANDIR to use.')

MARKDOWN_DIR_FLAG = base.Argument(
    '--markdown-dir',
    property='doc.markdown-dir',
    help='Directory the markdown pages are written to.')

MARKDOWN_URL_PREFIX_FLAG = base.Argument(
    '--markdown-url-prefix',
    property='doc.markdown-url-prefix',
    help='URL prefix of the links between the markdown pages.')

BASH_AUTOCOMPLETE_DIR_FLAG = base.Argument(
    '--bash-autocomplete-dir',
    persistent=True,
    property='shell.autocomplete.bash.target',
    help='Autocompletion directory.')


def ValidateExactlyOne(store, key_a, key_b, name_a, name_b):
  """Checks that exactly one of two properties is set.

  Args:
    store: properties.PropertyStore, The configuration store.
    key_a: str, The first property.
    key_b: str, The second property.
    name_a: str, The flag name of key_a, for the message.
    name_b: str, The flag name of key_b, for the message.

  Raises:
    exceptions.ValidationError: If neither or both are set.
  """
  has_a = bool(store.GetString(key_a))
  has_b = bool(store.GetString(key_b))
  if not has_a and not has_b:
    raise exceptions.ValidationError(
        'Either `{0}` or `{1}` must be specified'.format(name_a, name_b))
  if has_a and has_b:
    raise exceptions.ValidationError(
        'Only 1 of `{0}` or `{1}` must be specified'.format(name_a, name_b))


def ValidateRequired(store, key, name):
  """Raises the required flag error when key is not set."""
  if not store.GetString(key):
    raise exceptions.ValidationError(
        'required flag(s) "{0}" not set'.format(name))
