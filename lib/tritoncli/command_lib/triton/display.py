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

"""Rendering helpers for the triton and manta command output."""

from tritoncli.core.resource import table_printer
from tritoncli.core.util import times

SHORT_ID_LENGTH = 8

_SI_UNITS = ('B', 'kB', 'MB', 'GB', 'TB', 'PB', 'EB')

# The heading of the key/value views.
KEY_VALUE_HEADING = ['------', '------']


def ShortID(resource_id):
  return (resource_id or '')[:SHORT_ID_LENGTH]


def HumanizeBytes(size):
  """Formats a byte count in SI units, e.g. 1000000000 is '1.0 GB'.

  Args:
    size: int, The number of bytes.

  Returns:
    str, The size with one significant decimal below 10 units.
  """
  if size < 10:
    return '{0:d} B'.format(int(size))
  value = float(size)
  unit = _SI_UNITS[0]
  for unit in _SI_UNITS:
    if value < 1000 or unit == _SI_UNITS[-1]:
      break
    value /= 1000
  value = int(value * 10 + 0.5) / 10.0
  if value < 10:
    return '{0:.1f} {1}'.format(value, unit)
  return '{0:.0f} {1}'.format(value, unit)


def HumanizeMiB(mib):
  """Formats a size given in MiB the way the packages list shows it."""
  return HumanizeBytes((mib or 0) * 1000 * 1000)


def InstanceFlags(instance):
  """Returns D for docker, K for kvm and F for firewall, in that order."""
  flags = ''
  if instance.docker:
    flags += 'D'
  if (instance.brand or '').lower() == 'kvm':
    flags += 'K'
  if instance.firewall_enabled:
    flags += 'F'
  return flags


def FormatTimestamp(store, dt):
  """Formats dt in UTC when general.utc is set, else in local time."""
  tzinfo = times.UTC if store.GetBool('general.utc') else times.LOCAL
  return times.FormatDateTime(dt, tzinfo=tzinfo)


def FormatBool(value):
  return 'true' if value else 'false'


def NewListTable(out, heading, align=None,
                 heading_align=table_printer.ALIGN_LEFT):
  """Creates the borderless table the listing commands print."""
  return table_printer.TablePrinter(
      out, heading=heading, align=align, heading_align=heading_align)


def WriteKeyValues(out, rows):
  """Writes (key, value) rows under the key/value heading."""
  table = NewListTable(out, KEY_VALUE_HEADING)
  for key, value in rows:
    table.AddRow([key, value])
  table.Finish()


def _Timestamp(store, dt, now=None):
  return '{0} ({1})'.format(FormatTimestamp(store, dt),
                            times.FormatTime(dt, now=now).strip())


def AccountLines(store, account, now=None):
  """Returns the lines of the account view.

  Args:
    store: properties.PropertyStore, Decides the time zone of the timestamps.
    account: account.Account, The account to show.
    now: datetime, The reference point of the ages, the current time if None.

  Returns:
    [str], One 'key: value' line per field.
  """
  return [
      'id: {0}'.format(account.id or ''),
      'login: {0}'.format(account.login or ''),
      'email: {0}'.format(account.email or ''),
      'companyName: {0}'.format(account.company_name or ''),
      'firstName: {0}'.format(account.first_name or ''),
      'lastName: {0}'.format(account.last_name or ''),
      'postalCode: {0}'.format(account.postal_code or ''),
      'triton_cns_enabled: {0}'.format(
          FormatBool(account.triton_cns_enabled)),
      'address: {0}'.format(account.address or ''),
      'city: {0}'.format(account.city or ''),
      'state: {0}'.format(account.state or ''),
      'country: {0}'.format(account.country or ''),
      'phone: {0}'.format(account.phone or ''),
      'updated: {0}'.format(_Timestamp(store, account.updated, now=now)),
      'created: {0}'.format(_Timestamp(store, account.created, now=now)),
  ]
