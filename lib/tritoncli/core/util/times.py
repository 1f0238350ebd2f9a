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

"""dateutil and datetime helpers for the API timestamps the tools display.

  string => ParseDateTime => datetime => FormatDateTime => string
                                      => FormatTime     => ' 3y', ' 4h', ...
"""

import datetime
from email import utils as email_utils

from dateutil import parser
from dateutil import tz

from tritoncli.core import exceptions


LOCAL = tz.tzlocal()  # The local timezone.
UTC = tz.tzutc()  # The UTC timezone.

DEFAULT_FORMAT = '%Y-%m-%d %H:%M:%S %z %Z'

_SECONDS_PER_DAY = 24 * 60 * 60


class Error(exceptions.Error):
  """Base errors for this module."""


class DateTimeSyntaxError(Error):
  """Date/Time string syntax error."""


class DateTimeValueError(Error):
  """Date/Time part overflow error."""


def ParseDateTime(string, tzinfo=UTC):
  """Parses a date/time string and returns a datetime.datetime object.

  Args:
    string: The date/time string to parse, usually RFC 3339.
    tzinfo: A default timezone tzinfo object to use if string has no timezone.

  Raises:
    DateTimeSyntaxError: Invalid date/time syntax.
    DateTimeValueError: A date/time numeric constant exceeds its range.

  Returns:
    A timezone aware datetime.datetime object for the given string.
  """
  try:
    dt = parser.parse(string)
  except OverflowError as e:
    raise DateTimeValueError(str(e))
  except (AttributeError, ValueError, TypeError) as e:
    raise DateTimeSyntaxError(
        'Failed to parse date/time [{0}]: {1}'.format(string, e))
  if dt.tzinfo is None and tzinfo is not None:
    dt = dt.replace(tzinfo=tzinfo)
  return dt


def Now(tzinfo=LOCAL):
  return datetime.datetime.now(tzinfo)


def LocalizeDateTime(dt, tzinfo=LOCAL):
  """Returns a datetime object localized to the timezone tzinfo."""
  if dt.tzinfo is None:
    dt = dt.replace(tzinfo=UTC)
  return dt.astimezone(tzinfo)


def FormatDateTime(dt, fmt=None, tzinfo=None):
  """Returns a string of a datetime object formatted by an strftime format.

  Args:
    dt: The datetime object to be formatted.
    fmt: The strftime(3) format string, DEFAULT_FORMAT if None.
    tzinfo: Format dt relative to this timezone.

  Returns:
    The formatted string, or '' when dt is None.
  """
  if dt is None:
    return ''
  if tzinfo is not None:
    dt = LocalizeDateTime(dt, tzinfo)
  return dt.strftime(fmt or DEFAULT_FORMAT)


def FormatRFC1123(dt=None):
  """Formats dt, now by default, the way the HTTP Date header wants it."""
  if dt is None:
    dt = Now(UTC)
  return email_utils.format_datetime(
      LocalizeDateTime(dt, datetime.timezone.utc), usegmt=True)


def FormatTime(dt, now=None):
  """Returns how long ago dt was, using only the largest non-zero unit.

  Years are counted as 365.25 days and months as 30.25 days within the year.

  Args:
    dt: datetime, A timezone aware point in the past.
    now: datetime, The reference point, the current time if None.

  Returns:
    str, For example ' 3y', '11mo', ' 4h' or '' if dt is not in the past.
  """
  if dt is None:
    return ''
  if now is None:
    now = Now(UTC)
  if dt.tzinfo is None:
    dt = dt.replace(tzinfo=UTC)
  elapsed = int((now - dt).total_seconds())
  if elapsed <= 0:
    return ''
  days = elapsed // _SECONDS_PER_DAY
  segments = [
      (int(days / 365.25), 'y'),
      (int((days % 365) / 30.25), 'mo'),
      (days % 365 % 7, 'd'),
      ((elapsed // 3600) % 24, 'h'),
      ((elapsed // 60) % 60, 'm'),
      (elapsed % 60, 's'),
  ]
  for value, unit in segments:
    if value > 0:
      return '{0:2d}{1}'.format(value, unit)
  return ''
