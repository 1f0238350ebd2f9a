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

"""Read and layer the configuration properties used by the tritoncli tools.

A PropertyStore holds every known property, grouped into dotted sections
(general.triton, compute.instance, ...). Each property has a declared type and
its effective value is chosen, at lookup time, from the highest precedence
source that has one:

  explicit > flag > environment > default

Environment and flag values are imported once per invocation, after which the
store is frozen and becomes read only for the command that runs.
"""

import os

from tritoncli.core import exceptions


STRING = 'string'
BOOL = 'bool'
INT = 'int'
LIST = 'list'
MAP = 'map'

_ZERO_VALUES = {
    STRING: '',
    BOOL: False,
    INT: 0,
    LIST: [],
    MAP: {},
}

_TRUE_STRINGS = ['true', '1', 'on', 'yes', 'y']
_FALSE_STRINGS = ['false', '0', 'off', 'no', 'n', '', 'none']


class ConfigSource(object):
  """The places a property value can come from."""
  DEFAULT = 'default'
  ENV = 'env'
  FLAG = 'flag'
  EXPLICIT = 'explicit'

  # Invocation sources, highest precedence first. DEFAULT is always last.
  INVOCATION_PRECEDENCE = (EXPLICIT, FLAG, ENV)


class Error(exceptions.Error):
  """Exceptions for the properties module."""


class NoSuchPropertyError(Error):
  """An exception to be raised when the desired property does not exist."""


class InvalidValueError(Error):
  """An exception to be raised when the set value of a property is invalid."""


class PropertyTypeMismatchError(Error):
  """A property was bound or read as a type other than its declared type."""

  def __init__(self, prop, requested):
    super(PropertyTypeMismatchError, self).__init__(
        'Property [{0}] is declared as [{1}], not [{2}].'.format(
            prop.key, prop.value_type, requested))


class ReadOnlyPropertyError(Error):
  """A property was written after the store was frozen."""

  def __init__(self, key):
    super(ReadOnlyPropertyError, self).__init__(
        'Property [{0}] cannot be changed while a command is running.'.format(
            key))


def Stringize(value):
  if isinstance(value, str):
    return value
  return str(value)


def _ParseBool(property_name, value):
  """Parses a boolean property value.

  Args:
    property_name: str, the name of the property
    value: str | bool, the value to parse

  Returns:
    bool, The parsed value.

  Raises:
    InvalidValueError: if value is not boolean
  """
  if isinstance(value, bool):
    return value
  lowered = Stringize(value).strip().lower()
  if lowered in _TRUE_STRINGS:
    return True
  if lowered in _FALSE_STRINGS:
    return False
  raise InvalidValueError(
      'The [{0}] value [{1}] is not valid. Possible values: [{2}].'.format(
          property_name, value,
          ', '.join([x if x else "''"
                     for x in _TRUE_STRINGS + _FALSE_STRINGS])))


def _ParseInt(property_name, value):
  if isinstance(value, bool):
    return int(value)
  if isinstance(value, int):
    return value
  text = Stringize(value).strip()
  if not text:
    return 0
  try:
    return int(text)
  except ValueError:
    raise InvalidValueError(
        'The [{0}] value [{1}] is not a valid integer.'.format(
            property_name, value))


def _SplitItems(value):
  """Flattens a string or a list of strings into comma separated items."""
  if value is None:
    return []
  if isinstance(value, (list, tuple)):
    pieces = value
  else:
    pieces = [value]
  items = []
  for piece in pieces:
    for item in Stringize(piece).split(','):
      item = item.strip()
      if item:
        items.append(item)
  return items


def _ParseList(unused_property_name, value):
  return _SplitItems(value)


def _ParseMap(property_name, value):
  """Parses key=value items into a dict, later keys win."""
  if isinstance(value, dict):
    return dict((Stringize(k), Stringize(v)) for k, v in value.items())
  result = {}
  for item in _SplitItems(value):
    key, sep, val = item.partition('=')
    if not sep or not key:
      raise InvalidValueError(
          'The [{0}] value [{1}] is not a key=value pair.'.format(
              property_name, item))
    result[key.strip()] = val.strip()
  return result


def _ParseString(unused_property_name, value):
  if value is None:
    return ''
  if isinstance(value, (list, tuple)):
    return ','.join(Stringize(v) for v in value)
  return Stringize(value)


_PARSERS = {
    STRING: _ParseString,
    BOOL: _ParseBool,
    INT: _ParseInt,
    LIST: _ParseList,
    MAP: _ParseMap,
}


class _Property(object):
  """An individual configuration property.

  Attributes:
    section: str, The dotted name of the section the property lives in.
    name: str, The name of the property within its section.
    key: str, The full dotted key, section.name.
    value_type: str, One of STRING, BOOL, INT, LIST or MAP.
    help_text: str, A short description of what the property does.
    default: The value declared when the property was added, or None.
  """

  def __init__(self, section, name, value_type=STRING, help_text=None,
               default=None):
    if value_type not in _PARSERS:
      raise exceptions.InternalError(
          'Unknown property type [{0}] for [{1}.{2}].'.format(
              value_type, section, name))
    self.__section = section
    self.__name = name
    self.__value_type = value_type
    self.__help_text = help_text
    self.__default = default

  @property
  def section(self):
    return self.__section

  @property
  def name(self):
    return self.__name

  @property
  def key(self):
    return '{0}.{1}'.format(self.__section, self.__name)

  @property
  def value_type(self):
    return self.__value_type

  @property
  def help_text(self):
    return self.__help_text

  @property
  def default(self):
    return self.__default

  def __eq__(self, other):
    return self.key == other.key

  def __ne__(self, other):
    return not self == other

  def __hash__(self):
    return hash(self.key)

  def __lt__(self, other):
    return self.key < other.key

  def __repr__(self):
    return '<Property {0} ({1})>'.format(self.key, self.value_type)

  def Parse(self, value):
    """Converts value into this property's declared type.

    Args:
      value: A raw value, either a string from the environment or a parsed
        command line value.

    Returns:
      The value converted to the declared type.

    Raises:
      InvalidValueError: If the value cannot be converted.
    """
    return _PARSERS[self.__value_type](self.key, value)

  def Zero(self):
    zero = _ZERO_VALUES[self.__value_type]
    return type(zero)(zero) if isinstance(zero, (list, dict)) else zero


class _Section(object):
  """Represents a group of related properties.

  Attributes:
    name: str, The dotted name of the section.
  """

  def __init__(self, name):
    self.__name = name
    self.__properties = {}

  @property
  def name(self):
    return self.__name

  def __iter__(self):
    return iter(self.__properties.values())

  def _Add(self, name, value_type=STRING, help_text=None, default=None):
    prop = _Property(section=self.__name, name=name, value_type=value_type,
                     help_text=help_text, default=default)
    self.__properties[name] = prop
    return prop

  def _AddBool(self, name, help_text=None, default=None):
    return self._Add(name, value_type=BOOL, help_text=help_text,
                     default=default)

  def _AddInt(self, name, help_text=None, default=None):
    return self._Add(name, value_type=INT, help_text=help_text,
                     default=default)

  def _AddList(self, name, help_text=None, default=None):
    return self._Add(name, value_type=LIST, help_text=help_text,
                     default=default)

  def _AddMap(self, name, help_text=None, default=None):
    return self._Add(name, value_type=MAP, help_text=help_text,
                     default=default)

  def Property(self, property_name):
    """Gets a property from this section, given its name.

    Args:
      property_name: str, The name of the desired property.

    Returns:
      _Property, The property corresponding to the given name.

    Raises:
      NoSuchPropertyError: If the property is not known for this section.
    """
    try:
      return self.__properties[property_name]
    except KeyError:
      raise NoSuchPropertyError(
          'Section [{s}] has no property [{p}].'.format(
              s=self.__name, p=property_name))


class _SectionGeneral(_Section):
  """Contains the properties shared by every command."""

  def __init__(self):
    super(_SectionGeneral, self).__init__('general')
    self.use_pager = self._AddBool(
        'use-pager',
        help_text='Use a pager to read the output.')
    self.utc = self._AddBool('utc', help_text='Display times in UTC.')


class _SectionCredentials(_Section):
  """Contains the credentials used to reach one service."""

  def __init__(self, service):
    super(_SectionCredentials, self).__init__('general.' + service)
    self.account = self._Add('account', help_text='Account (login name).')
    self.url = self._Add('url', help_text='Service endpoint URL.')
    self.key_id = self._Add(
        'key-id', help_text='MD5 fingerprint of the SSH key to sign with.')
    self.key_material = self._Add(
        'key-material',
        help_text='Private key, or path to it. Empty means the SSH agent.')


class _SectionLog(_Section):
  """Contains the logging properties."""

  def __init__(self):
    super(_SectionLog, self).__init__('log')
    self.format = self._Add('format', default='auto',
                            help_text='Log format: auto, zerolog or human.')
    self.level = self._Add('level', default='info',
                           help_text='Log level sent to stderr.')
    self.stats = self._AddBool('stats', help_text='Log request statistics.')
    self.use_color = self._AddBool('use-color', help_text='Use ASCII colors.')


class _SectionComputeInstance(_Section):
  """Contains the properties for instance commands."""

  def __init__(self):
    super(_SectionComputeInstance, self).__init__('compute.instance')
    self.id = self._Add('id', help_text='Instance ID.')
    self.instance_name = self._Add('name', help_text='Instance name.')
    self.name_prefix = self._Add('name-prefix',
                                 help_text='Instance name prefix.')
    self.wait = self._AddBool('wait', help_text='Wait for the instance.')
    self.firewall = self._AddBool('firewall',
                                  help_text='Enable the cloud firewall.')
    self.state = self._Add('state', help_text='Instance state.')
    self.brand = self._Add('brand', help_text='Instance brand.')
    self.networks = self._AddList('networks', help_text='Network IDs.')
    self.tag = self._AddList('tag', help_text='Instance tags as key=value.')
    self.search_tags = self._AddMap('search-tags',
                                    help_text='Tags to filter on.')
    self.metadata = self._AddMap('metadata', help_text='Instance metadata.')
    self.affinity = self._AddList('affinity', help_text='Affinity rules.')
    self.userdata = self._Add('userdata', help_text='Instance user-script.')


class _SectionComputePackage(_Section):
  """Contains the properties for package commands."""

  def __init__(self):
    super(_SectionComputePackage, self).__init__('compute.package')
    self.id = self._Add('id', help_text='Package ID.')
    self.package_name = self._Add('name', help_text='Package name.')
    self.memory = self._AddInt('memory', help_text='Memory in MiB.')
    self.disk = self._AddInt('disk', help_text='Disk in MiB.')
    self.swap = self._AddInt('swap', help_text='Swap in MiB.')
    self.vcpu = self._AddInt('vcpu', help_text='Number of VCPUs.')


class _SectionComputeImage(_Section):

  def __init__(self):
    super(_SectionComputeImage, self).__init__('compute.image')
    self.id = self._Add('id', help_text='Image ID.')
    self.image_name = self._Add('name', help_text='Image name.')


class _SectionKeys(_Section):

  def __init__(self):
    super(_SectionKeys, self).__init__('keys')
    self.fingerprint = self._Add('fingerprint',
                                 help_text='SSH key fingerprint.')
    self.key_name = self._Add('name', help_text='SSH key name.')
    self.publickey = self._Add('publickey', help_text='SSH public key.')


class _SectionAccount(_Section):
  """Contains the account fields that can be updated."""

  def __init__(self):
    super(_SectionAccount, self).__init__('account')
    self.email = self._Add('email')
    self.companyname = self._Add('companyname')
    self.firstname = self._Add('firstname')
    self.lastname = self._Add('lastname')
    self.address = self._Add('address')
    self.postcode = self._Add('postcode')
    self.city = self._Add('city')
    self.state = self._Add('state')
    self.country = self._Add('country')
    self.phone = self._Add('phone')
    # Kept as a string so an unset value is distinguishable from false.
    self.triton_cns_enabled = self._Add('triton_cns_enabled')


class _SectionDoc(_Section):

  def __init__(self):
    super(_SectionDoc, self).__init__('doc')
    self.mandir = self._Add('mandir', default='./docs/man',
                            help_text='Directory for man pages.')
    self.markdown_dir = self._Add('markdown-dir', default='./docs/md',
                                  help_text='Directory for markdown pages.')
    self.markdown_url_prefix = self._Add(
        'markdown-url-prefix', default='/command',
        help_text='URL prefix for links between markdown pages.')


class _SectionShellAutocompleteBash(_Section):

  def __init__(self):
    super(_SectionShellAutocompleteBash, self).__init__(
        'shell.autocomplete.bash')
    self.target = self._Add('target', default='/etc/bash_completion.d',
                            help_text='Bash completion directory.')


class _SectionArtifactory(_Section):
  """Contains the properties read by the artif-* tools."""

  def __init__(self):
    super(_SectionArtifactory, self).__init__('artifactory')
    self.format = self._Add('format', default='table',
                            help_text='Output format.')
    self.kind = self._Add('kind', default='all', help_text='Repo kind.')
    self.user = self._Add('user')
    self.group = self._Add('group')
    self.repo = self._Add('repo')
    self.repos = self._AddList('repos')
    self.target = self._Add('target')
    self.filename = self._Add('filename')
    self.path = self._Add('path')
    self.property = self._AddMap('property')
    self.silent = self._AddBool('silent')
    self.criteria = self._Add('criteria')
    self.labels = self._AddBool('labels')
    self.groupid = self._Add('groupid')
    self.artifactid = self._Add('artifactid')
    self.version = self._Add('version')
    self.classifier = self._Add('classifier')


def _DefaultSections():
  return [
      _SectionGeneral(),
      _SectionCredentials('triton'),
      _SectionCredentials('manta'),
      _SectionLog(),
      _SectionComputeInstance(),
      _SectionComputePackage(),
      _SectionComputeImage(),
      _SectionKeys(),
      _SectionAccount(),
      _SectionDoc(),
      _SectionShellAutocompleteBash(),
      _SectionArtifactory(),
  ]


class _InvocationValues(object):
  """The values imported for a single command invocation."""

  def __init__(self):
    self.values = dict(
        (source, {}) for source in ConfigSource.INVOCATION_PRECEDENCE)
    self.frozen = False


class PropertyStore(object):
  """The configuration store consulted by every command.

  The store is constructed once per CLI and handed to each command; nothing
  about it is module global.
  """

  def __init__(self, sections=None):
    if sections is None:
      sections = _DefaultSections()
    self.__sections = dict((section.name, section) for section in sections)
    self.__defaults = {}
    self.__env_bindings = {}
    self.__flag_bindings = {}
    self.__invocation_value_stack = [_InvocationValues()]

  def __iter__(self):
    return iter(self.__sections.values())

  def Section(self, section):
    """Gets a section given its dotted name.

    Args:
      section: str, The section for the desired property.

    Returns:
      _Section, The section corresponding to the given name.

    Raises:
      NoSuchPropertyError: If the section is not known.
    """
    try:
      return self.__sections[section]
    except KeyError:
      raise NoSuchPropertyError(
          'Section [{section}] does not exist.'.format(section=section))

  def Property(self, key):
    """Gets the property for a dotted key such as compute.instance.id.

    Args:
      key: str | _Property, The key to look up.

    Returns:
      _Property, The declared property.

    Raises:
      NoSuchPropertyError: If the key does not name a declared property.
    """
    if isinstance(key, _Property):
      key = key.key
    section, sep, name = key.rpartition('.')
    if not sep:
      raise NoSuchPropertyError(
          'Property [{0}] is not in the form section.name.'.format(key))
    return self.Section(section).Property(name)

  # Declaration time.

  def SetDefault(self, key, value):
    """Sets the default layer value for key."""
    prop = self.Property(key)
    self._CheckWritable(prop)
    self.__defaults[prop.key] = prop.Parse(value)

  def BindEnv(self, key, *env_names):
    """Imports the given environment variables into key.

    When more than one name is given, the first one with a non-empty value
    wins.

    Args:
      key: str, The property key.
      *env_names: str, The environment variable names, in lookup order.
    """
    prop = self.Property(key)
    names = self.__env_bindings.setdefault(prop.key, [])
    for name in env_names:
      if name not in names:
        names.append(name)

  def BindFlag(self, key, dest, value_type=None):
    """Links the parsed value of the flag stored at dest to key.

    Args:
      key: str, The property key.
      dest: str, The argparse destination of the flag.
      value_type: str, The type the flag produces. When given it must match
        the declared property type.

    Raises:
      PropertyTypeMismatchError: If value_type disagrees with the property.
    """
    prop = self.Property(key)
    if value_type is not None and value_type != prop.value_type:
      raise PropertyTypeMismatchError(prop, value_type)
    self.__flag_bindings[prop.key] = dest

  # Invocation time.

  def PushInvocationValues(self):
    self.__invocation_value_stack.append(_InvocationValues())

  def PopInvocationValues(self):
    if len(self.__invocation_value_stack) > 1:
      self.__invocation_value_stack.pop()
    else:
      self.__invocation_value_stack[0] = _InvocationValues()

  def _Latest(self):
    return self.__invocation_value_stack[-1]

  def _CheckWritable(self, prop):
    if self._Latest().frozen:
      raise ReadOnlyPropertyError(prop.key)

  def _SetInvocationValue(self, source, key, value):
    prop = self.Property(key)
    self._CheckWritable(prop)
    self._Latest().values[source][prop.key] = prop.Parse(value)

  def ImportEnvironment(self, environ=None):
    """Copies every bound environment variable into the environment layer.

    Args:
      environ: {str: str}, The environment to read, os.environ by default.
    """
    if environ is None:
      environ = os.environ
    for key, names in sorted(self.__env_bindings.items()):
      for name in names:
        value = environ.get(name)
        if value:
          self._SetInvocationValue(ConfigSource.ENV, key, value)
          break

  def SetFlagValues(self, namespace):
    """Copies every supplied, bound flag from namespace into the flag layer.

    A flag counts as supplied when its destination is present on the
    namespace; flags that were not given on the command line are absent.

    Args:
      namespace: argparse.Namespace, The parsed command line.
    """
    for key, dest in sorted(self.__flag_bindings.items()):
      if hasattr(namespace, dest):
        self._SetInvocationValue(ConfigSource.FLAG, key,
                                 getattr(namespace, dest))

  def SetExplicit(self, key, value):
    self._SetInvocationValue(ConfigSource.EXPLICIT, key, value)

  def Freeze(self):
    self._Latest().frozen = True

  @property
  def frozen(self):
    return self._Latest().frozen

  # Lookup.

  def _Resolve(self, prop):
    latest = self._Latest()
    for source in ConfigSource.INVOCATION_PRECEDENCE:
      values = latest.values[source]
      if prop.key in values:
        return source, values[prop.key]
    if prop.key in self.__defaults:
      return ConfigSource.DEFAULT, self.__defaults[prop.key]
    if prop.default is not None:
      return ConfigSource.DEFAULT, prop.Parse(prop.default)
    return None, prop.Zero()

  def Source(self, key):
    """Returns the ConfigSource that supplies key, or None if it is unset."""
    return self._Resolve(self.Property(key))[0]

  def IsSet(self, key):
    source = self.Source(key)
    return source is not None and source != ConfigSource.DEFAULT

  def Get(self, key):
    """Gets the effective value of key in its declared type."""
    value = self._Resolve(self.Property(key))[1]
    if isinstance(value, (list, dict)):
      return type(value)(value)
    return value

  def _GetTyped(self, key, value_type):
    prop = self.Property(key)
    if prop.value_type != value_type:
      raise PropertyTypeMismatchError(prop, value_type)
    return self.Get(prop.key)

  def GetString(self, key):
    return self._GetTyped(key, STRING)

  def GetBool(self, key):
    return self._GetTyped(key, BOOL)

  def GetInt(self, key):
    return self._GetTyped(key, INT)

  def GetStringSlice(self, key):
    return self._GetTyped(key, LIST)

  def GetStringMap(self, key):
    return self._GetTyped(key, MAP)
