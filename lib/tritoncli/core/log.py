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

"""Module with logging related functionality for the tritoncli tools.

Log records go to stderr. Command output goes through the terminal writer in
console_io instead, so a tool's stdout only ever holds its results.
"""

from collections import OrderedDict
import datetime
import json
import logging
import sys

from tritoncli.core import exceptions


DEFAULT_VERBOSITY = logging.INFO
DEFAULT_VERBOSITY_STRING = 'info'

_VERBOSITY_LEVELS = [
    ('debug', logging.DEBUG),
    ('info', logging.INFO),
    ('warn', logging.WARNING),
    ('error', logging.ERROR),
    ('fatal', logging.CRITICAL)]
VALID_VERBOSITY_STRINGS = OrderedDict(_VERBOSITY_LEVELS)

FORMAT_AUTO = 'auto'
FORMAT_ZEROLOG = 'zerolog'
FORMAT_HUMAN = 'human'
_FORMAT_ALIASES = {
    'auto': FORMAT_AUTO,
    'json': FORMAT_ZEROLOG,
    'zerolog': FORMAT_ZEROLOG,
    'human': FORMAT_HUMAN,
}

# Fixed width, RFC3339 with nanosecond precision.
STRUCTURED_TIME_FORMAT = '%Y-%m-%dT%H:%M:%S.%f000Z'

_LEVEL_NAMES = {
    logging.DEBUG: 'debug',
    logging.INFO: 'info',
    logging.WARNING: 'warn',
    logging.ERROR: 'error',
    logging.CRITICAL: 'fatal',
}


class Error(exceptions.Error):
  """Exceptions for the log module."""


class UnsupportedLevelError(Error):
  """The requested log level is not one of the known levels."""

  def __init__(self, level):
    super(UnsupportedLevelError, self).__init__(
        'unable to set log level: unsupported error level: "{0}" '
        '(supported levels: {1})'.format(
            level, ' '.join(VALID_VERBOSITY_STRINGS)))


class UnsupportedFormatError(Error):
  """The requested log format is not one of the known formats."""

  def __init__(self, log_format):
    super(UnsupportedFormatError, self).__init__(
        'unable to parse log format: unsupported log format: "{0}"'.format(
            log_format))


class _StreamWrapper(object):
  """A class to hold an output stream that we can manipulate."""

  def __init__(self, stream):
    self.stream = stream


class _ConsoleWriter(object):
  """A file-like wrapper around stdout or stderr.

  Everything written is also logged at DEBUG level so a --log-level=debug run
  shows what was printed in between the log records.
  """

  def __init__(self, logger, stream_wrapper):
    """Creates a new _ConsoleWriter wrapper.

    Args:
      logger: logging.Logger, The logger to log to.
      stream_wrapper: _StreamWrapper, The wrapper for the output stream,
        stdout or stderr.
    """
    self.__logger = logger
    self.__stream_wrapper = stream_wrapper

  def Print(self, *msg):
    """Writes the given message to the output stream, and adds a newline.

    Args:
      *msg: str, The messages to print.
    """
    self.write(' '.join(str(x) for x in msg) + '\n')

  # pylint: disable=g-bad-name, This must match file-like objects
  def write(self, msg):
    self.__logger.debug(msg.rstrip('\n'))
    self.__stream_wrapper.stream.write(msg)

  # pylint: disable=g-bad-name, This must match file-like objects
  def flush(self):
    self.__stream_wrapper.stream.flush()

  def isatty(self):
    isatty = getattr(self.__stream_wrapper.stream, 'isatty', None)
    return isatty() if isatty else False


class _ConsoleFormatter(logging.Formatter):
  """The human formatter, handles colorizing messages."""

  TIME = '%(asctime)s '
  LEVEL = '|%(level)s|'
  MESSAGE = ' %(message)s'
  DEFAULT_FORMAT = TIME + LEVEL + MESSAGE

  RED = '\033[1;31m'
  YELLOW = '\033[1;33m'
  CYAN = '\033[1;36m'
  END = '\033[0m'

  COLOR_FORMATS = {
      logging.DEBUG: TIME + CYAN + LEVEL + END + MESSAGE,
      logging.WARNING: TIME + YELLOW + LEVEL + END + MESSAGE,
      logging.ERROR: TIME + RED + LEVEL + END + MESSAGE,
      logging.CRITICAL: TIME + RED + LEVEL + MESSAGE + END,
  }

  def __init__(self, use_color):
    super(_ConsoleFormatter, self).__init__(datefmt='%H:%M:%S')
    self._formats = _ConsoleFormatter.COLOR_FORMATS if use_color else {}

  def format(self, record):
    record.level = _LEVEL_NAMES.get(record.levelno, 'info').upper()[:4]
    self._style._fmt = self._formats.get(  # pylint: disable=protected-access
        record.levelno, _ConsoleFormatter.DEFAULT_FORMAT)
    return logging.Formatter.format(self, record)


class _JsonFormatter(logging.Formatter):
  """Formats each record as a single zerolog style JSON object."""

  def GetErrorText(self, log_record):
    if log_record.exc_info:
      if not log_record.exc_text:
        log_record.exc_text = self.formatException(log_record.exc_info)
      return log_record.exc_text
    return None

  def BuildLogMsg(self, log_record):
    """Converts a logging.LogRecord to a JSON serializable OrderedDict.

    Args:
      log_record: logging.LogRecord, log record to be converted

    Returns:
      OrderedDict with level, time, message and any extra fields.
    """
    message_dict = OrderedDict()
    message_dict['level'] = _LEVEL_NAMES.get(log_record.levelno, 'info')
    created = datetime.datetime.fromtimestamp(log_record.created,
                                              datetime.timezone.utc)
    message_dict['time'] = created.strftime(STRUCTURED_TIME_FORMAT)
    for key, value in sorted(getattr(log_record, 'fields', {}).items()):
      message_dict[key] = value
    error = self.GetErrorText(log_record)
    if error:
      message_dict['error'] = error
    message_dict['message'] = log_record.getMessage()
    return message_dict

  def format(self, record):
    return json.dumps(self.BuildLogMsg(record))


class _LogManager(object):
  """Manages the stderr logging handler of the current process."""

  def __init__(self):
    self._root_logger = logging.getLogger()
    self._root_logger.setLevel(logging.NOTSET)
    self._output_logger = logging.getLogger('tritoncli.output')

    self.stdout_stream_wrapper = _StreamWrapper(None)
    self.stderr_stream_wrapper = _StreamWrapper(None)
    self.stdout_writer = _ConsoleWriter(self._output_logger,
                                        self.stdout_stream_wrapper)
    self.stderr_writer = _ConsoleWriter(self._output_logger,
                                        self.stderr_stream_wrapper)

    self.verbosity = None
    self.log_format = None
    self.use_color = False
    self.stderr_handler = None
    self.Reset(sys.stdout, sys.stderr)

  def Reset(self, stdout, stderr):
    """Resets all logging functionality to its default state."""
    self._root_logger.handlers[:] = []

    self.stdout_stream_wrapper.stream = stdout
    self.stderr_stream_wrapper.stream = stderr

    self.stderr_handler = logging.StreamHandler(stderr)
    self._root_logger.addHandler(self.stderr_handler)

    self.verbosity = None
    self.SetVerbosity(DEFAULT_VERBOSITY)
    self.use_color = False
    self.log_format = None
    self.SetFormat(FORMAT_HUMAN)

  def SetVerbosity(self, verbosity):
    """Sets the active verbosity for the logger.

    Args:
      verbosity: int, A verbosity constant from the logging module.

    Returns:
      int, The previous verbosity.
    """
    old_verbosity = self.verbosity
    self.verbosity = verbosity
    self.stderr_handler.setLevel(verbosity)
    return old_verbosity

  def SetFormat(self, log_format, use_color=None):
    """Installs the formatter for log_format on the stderr handler.

    Args:
      log_format: str, One of auto, zerolog, json or human.
      use_color: bool, Colorize human output. None keeps the current setting.

    Raises:
      UnsupportedFormatError: If log_format is unknown.
    """
    resolved = _FORMAT_ALIASES.get((log_format or '').lower())
    if resolved is None:
      raise UnsupportedFormatError(log_format)
    if use_color is not None:
      self.use_color = use_color
    if resolved == FORMAT_AUTO:
      resolved = (FORMAT_HUMAN if self.stderr_writer.isatty()
                  else FORMAT_ZEROLOG)
    if resolved == FORMAT_ZEROLOG:
      formatter = _JsonFormatter()
    else:
      formatter = _ConsoleFormatter(self.use_color)
    self.stderr_handler.setFormatter(formatter)
    self.log_format = resolved


_log_manager = _LogManager()

# The stream for user facing output that is not part of a command's results.
out = _log_manager.stdout_writer

# The stream for errors and status messages.
err = _log_manager.stderr_writer

status = err


def Print(*msg):
  """Writes the given message to the output stream, and adds a newline."""
  out.Print(*msg)


def Reset(stdout=None, stderr=None):
  """Reinitialize the logging system.

  Args:
    stdout: The stream to use for stdout messages, defaults to sys.stdout.
    stderr: The stream to use for stderr messages, defaults to sys.stderr.
  """
  _log_manager.Reset(stdout or sys.stdout, stderr or sys.stderr)


def ParseVerbosity(level):
  """Converts a level name into a logging verbosity.

  Args:
    level: str, One of debug, info, warn, error or fatal.

  Returns:
    int, The logging module level.

  Raises:
    UnsupportedLevelError: If level is unknown.
  """
  verbosity = VALID_VERBOSITY_STRINGS.get((level or '').lower())
  if verbosity is None:
    raise UnsupportedLevelError(level)
  return verbosity


def SetVerbosity(verbosity):
  """Sets the logging verbosity, returning the previous one."""
  return _log_manager.SetVerbosity(verbosity)


def GetVerbosity():
  return _log_manager.verbosity


def GetVerbosityName(verbosity=None):
  if verbosity is None:
    verbosity = GetVerbosity()
  for name, level in _VERBOSITY_LEVELS:
    if level == verbosity:
      return name
  return None


def SetFormat(log_format, use_color=None):
  _log_manager.SetFormat(log_format, use_color=use_color)


def GetFormat():
  return _log_manager.log_format


def Configure(store):
  """Applies the log.* properties of store to the logging system.

  Args:
    store: properties.PropertyStore, The configuration store.

  Raises:
    UnsupportedLevelError: If log.level is unknown.
    UnsupportedFormatError: If log.format is unknown.
  """
  verbosity = ParseVerbosity(store.GetString('log.level'))
  SetFormat(store.GetString('log.format'),
            use_color=store.GetBool('log.use-color'))
  SetVerbosity(verbosity)


def Fields(**kwargs):
  """Returns the `extra` mapping that attaches structured fields to a record.

  For example log.info('Installing man(1) pages', extra=log.Fields(section=8)).

  Args:
    **kwargs: The fields to attach.

  Returns:
    dict, Suitable for the extra argument of the logging calls.
  """
  return {'fields': kwargs}


# pylint: disable=invalid-name
log = logging.log
debug = logging.debug
info = logging.info
warning = logging.warning
warn = logging.warning
error = logging.error
critical = logging.critical
fatal = logging.critical
exception = logging.exception
