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

"""Generate usage text for displaying to the user."""

import argparse
import io
import textwrap

LINE_WIDTH = 80
HELP_INDENT = 30


def IsSuppressed(arg):
  """Returns True if arg is suppressed."""
  return arg.help == argparse.SUPPRESS


def FilterOutSuppressed(args):
  """Returns a copy of args containing only non-suppressed arguments."""
  return [a for a in args if not IsSuppressed(a)]


def _SortedOptionStrings(arg):
  """Short options first, then long ones."""
  return sorted(arg.option_strings, key=lambda o: (o.startswith('--'), o))


def PositionalDisplayString(arg):
  """Create the display help string for a positional arg.

  Args:
    arg: argparse.Action, The argument object to be displayed.

  Returns:
    str, The string representation for printing.
  """
  msg = arg.metavar or arg.dest.upper()
  if arg.nargs == '?':
    return '[{0}]'.format(msg)
  if arg.nargs == '*':
    return '[{0} ...]'.format(msg)
  if arg.nargs == '+':
    return '{0} [{0} ...]'.format(msg)
  return msg


def FlagDisplayString(arg):
  """Create the display help string for a flag arg.

  Args:
    arg: argparse.Action, The argument object to be displayed.

  Returns:
    str, The string representation for printing, e.g. '-n, --name NAME'.
  """
  display_string = ', '.join(_SortedOptionStrings(arg))
  if arg.nargs != 0:
    display_string += ' ' + (arg.metavar or arg.dest.upper())
  return display_string


def FlagHelp(arg):
  """Returns the help message of a flag with its declared default."""
  help_message = textwrap.dedent(arg.help or '').strip()
  default = getattr(arg, 'declared_default', None)
  if default not in (None, '', [], {}, False):
    if isinstance(default, list):
      default = ','.join(default)
    help_message += ' (default "{0}")'.format(default)
  env = getattr(arg, 'env', None)
  if env:
    help_message += ' [${0}]'.format(', $'.join(env))
  return help_message.strip()


def WrapWithPrefix(prefix, message, indent, length, spacing, writer):
  """Helper function that does two-column writing.

  If the first column is too long, the second column begins on the next line.

  Args:
    prefix: str, Text for the first column.
    message: str, Text for the second column.
    indent: int, Width of the first column.
    length: int, Width of both columns, added together.
    spacing: str, Space to put on the front of prefix.
    writer: file-like, Receiver of the written output.
  """
  message = ('\n' + ' ' * indent).join(
      textwrap.TextWrapper(break_on_hyphens=False,
                           width=length - indent).wrap(message)) or ''
  if len(prefix) > indent - len(spacing) - 2:
    writer.write('{0}{1}\n'.format(spacing, prefix))
    writer.write(' ' * indent + message + '\n')
  else:
    writer.write('{0}{1}'.format(spacing, prefix))
    writer.write(' ' * (indent - len(prefix) - len(spacing)) + message + '\n')


def TextIfExists(title, messages):
  """Generates the text for the given section.

  Args:
    title: str, The name of this section.
    messages: [(str, str)], The items to print in aligned columns.

  Returns:
    str, The generated text, or '' if there are no messages.
  """
  if not messages:
    return ''
  textbuf = io.StringIO()
  textbuf.write('\n{0}:\n'.format(title))
  for (arg, helptxt) in messages:
    WrapWithPrefix(arg, helptxt, HELP_INDENT, LINE_WIDTH, spacing='  ',
                   writer=textbuf)
  return textbuf.getvalue()


def GetUsage(command):
  """Return the command help text.

  Args:
    command: backend.CommandCommon, The command or group that we're helping.

  Returns:
    str, The help text.
  """
  buf = io.StringIO()
  buf.write((command.long_help or command.short_help).rstrip() + '\n')

  command_path = ' '.join(command.GetPath())
  buf.write('\nUsage:\n')
  if command.is_group:
    buf.write('  {0} [command]\n'.format(command_path))
  else:
    usage_parts = [command_path]
    for arg in FilterOutSuppressed(command.ai.positional_args):
      usage_parts.append(PositionalDisplayString(arg))
    usage_parts.append('[flags]')
    buf.write('  {0}\n'.format(' '.join(usage_parts)))

  if command.aliases:
    buf.write('\nAliases:\n  {0}\n'.format(
        ', '.join([command.cli_name] + list(command.aliases))))

  examples = command.examples
  if examples:
    buf.write('\nExamples:\n{0}\n'.format(
        textwrap.indent(examples.strip('\n'), '  ')))

  if command.is_group:
    buf.write(TextIfExists('Available Commands', [
        (name, element.short_help)
        for name, element in sorted(command.AllSubElements().items())
        if not element.IsHidden()]))

  buf.write(TextIfExists('Flags', [
      (FlagDisplayString(arg), FlagHelp(arg))
      for arg in FilterOutSuppressed(command.ai.flag_args)]))
  buf.write(TextIfExists('Global Flags', [
      (FlagDisplayString(arg), FlagHelp(arg))
      for arg in FilterOutSuppressed(command.ai.ancestor_flag_args)]))

  if command.is_group:
    buf.write('\nUse "{0} [command] --help" for more information about a '
              'command.\n'.format(command_path))
  return buf.getvalue()


def ExtractHelpStrings(docstring):
  """Extracts short help and long help from a docstring.

  If the docstring contains a blank line (i.e., a line consisting of zero or
  more spaces), everything before the first blank line is taken as the short
  help string and everything after it is taken as the long help string. The
  short help is flowing text with no line breaks, while the long help may
  consist of multiple lines, each line beginning with an amount of whitespace
  determined by dedenting the docstring.

  If the docstring does not contain a blank line, the sequence of words in the
  docstring is used as both the short help and the long help.

  Args:
    docstring: The docstring from which short and long help are to be taken

  Returns:
    a tuple consisting of a short help string and a long help string
  """
  if docstring:
    unstripped_doc_lines = docstring.splitlines()
    stripped_doc_lines = [s.strip() for s in unstripped_doc_lines]
    try:
      empty_line_index = stripped_doc_lines.index('')
      short_help = ' '.join(stripped_doc_lines[:empty_line_index])
      raw_long_help = '\n'.join(unstripped_doc_lines[empty_line_index + 1:])
      long_help = textwrap.dedent(raw_long_help).strip()
    except ValueError:  # no empty line in stripped_doc_lines
      short_help = ' '.join(stripped_doc_lines).strip()
      long_help = ''
    if not short_help:  # docstring started with a blank line
      short_help = ' '.join(stripped_doc_lines[empty_line_index + 1:]).strip()
    return (short_help, long_help or short_help)
  else:
    return ('', '')
