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

"""Tests for the properties module."""

import argparse
import itertools

from tritoncli.core import properties
from tritoncli.tests.lib import test_case


class PropertyStoreTest(test_case.Base):

  def SetUp(self):
    self.store = properties.PropertyStore()

  def testUnsetIsZeroValue(self):
    self.assertEqual('', self.store.GetString('compute.instance.name'))
    self.assertEqual(False, self.store.GetBool('general.utc'))
    self.assertEqual(0, self.store.GetInt('compute.package.memory'))
    self.assertEqual([], self.store.GetStringSlice('compute.instance.tag'))
    self.assertEqual({}, self.store.GetStringMap('compute.instance.metadata'))
    self.assertIsNone(self.store.Source('compute.instance.name'))

  def testDeclaredDefault(self):
    self.assertEqual('./docs/man', self.store.GetString('doc.mandir'))
    self.assertEqual(properties.ConfigSource.DEFAULT,
                     self.store.Source('doc.mandir'))
    self.assertFalse(self.store.IsSet('doc.mandir'))

  def testPrecedence(self):
    self.store.BindEnv('general.triton.account', 'TRITON_ACCOUNT')
    self.store.BindFlag('general.triton.account', 'general.triton.account')
    self.store.SetDefault('general.triton.account', 'default')
    self.assertEqual('default',
                     self.store.GetString('general.triton.account'))

    self.store.PushInvocationValues()
    self.store.ImportEnvironment({'TRITON_ACCOUNT': 'env'})
    self.assertEqual('env', self.store.GetString('general.triton.account'))

    namespace = type('Namespace', (object,), {})()
    setattr(namespace, 'general.triton.account', 'flag')
    self.store.SetFlagValues(namespace)
    self.assertEqual('flag', self.store.GetString('general.triton.account'))
    self.assertEqual(properties.ConfigSource.FLAG,
                     self.store.Source('general.triton.account'))

    self.store.SetExplicit('general.triton.account', 'explicit')
    self.assertEqual('explicit',
                     self.store.GetString('general.triton.account'))

    self.store.PopInvocationValues()
    self.assertEqual('default',
                     self.store.GetString('general.triton.account'))

  def testFlagNotSuppliedKeepsEnvironment(self):
    self.store.BindEnv('general.triton.url', 'TRITON_URL')
    self.store.BindFlag('general.triton.url', 'general.triton.url')
    self.store.ImportEnvironment({'TRITON_URL': 'https://env'})
    self.store.SetFlagValues(type('Namespace', (object,), {})())
    self.assertEqual('https://env', self.store.GetString('general.triton.url'))

  def testFirstNonEmptyEnvironmentVariableWins(self):
    self.store.BindEnv('general.triton.account', 'TRITON_ACCOUNT',
                       'SDC_ACCOUNT')
    self.store.ImportEnvironment({'TRITON_ACCOUNT': '', 'SDC_ACCOUNT': 'sdc'})
    self.assertEqual('sdc', self.store.GetString('general.triton.account'))

  def testFrozenStoreRejectsWrites(self):
    self.store.Freeze()
    with self.assertRaises(properties.ReadOnlyPropertyError):
      self.store.SetExplicit('general.utc', True)

  def testTypedAccessMismatch(self):
    with self.assertRaises(properties.PropertyTypeMismatchError):
      self.store.GetBool('compute.instance.name')

  def testUnknownProperty(self):
    with self.assertRaises(properties.NoSuchPropertyError):
      self.store.Get('compute.instance.nope')

  def testListAndMapParsing(self):
    self.store.SetExplicit('compute.instance.tag', 'a=b,c=d')
    self.store.SetExplicit('compute.instance.metadata', 'k=v,x=y')
    self.assertEqual(['a=b', 'c=d'],
                     self.store.GetStringSlice('compute.instance.tag'))
    self.assertEqual({'k': 'v', 'x': 'y'},
                     self.store.GetStringMap('compute.instance.metadata'))

  def testBoolParsing(self):
    self.store.SetExplicit('general.utc', 'yes')
    self.assertTrue(self.store.GetBool('general.utc'))

  def testEverySourceCombinationResolvesToHighestLayer(self):
    key = 'general.triton.account'
    layers = [properties.ConfigSource.DEFAULT, properties.ConfigSource.ENV,
              properties.ConfigSource.FLAG, properties.ConfigSource.EXPLICIT]
    for present in itertools.product([False, True], repeat=len(layers)):
      store = properties.PropertyStore()
      store.BindEnv(key, 'TRITON_ACCOUNT')
      store.BindFlag(key, key)
      default_set, env_set, flag_set, explicit_set = present
      if default_set:
        store.SetDefault(key, 'default')
      store.PushInvocationValues()
      store.ImportEnvironment({'TRITON_ACCOUNT': 'env'} if env_set else {})
      namespace = argparse.Namespace()
      if flag_set:
        setattr(namespace, key, 'flag')
      store.SetFlagValues(namespace)
      if explicit_set:
        store.SetExplicit(key, 'explicit')

      expected = None
      for layer, is_set, value in reversed(list(zip(
          layers, present, ['default', 'env', 'flag', 'explicit']))):
        if is_set:
          expected = (layer, value)
          break
      with self.subTest(present=present):
        if expected is None:
          self.assertIsNone(store.Source(key))
          self.assertEqual('', store.GetString(key))
        else:
          self.assertEqual(expected[0], store.Source(key))
          self.assertEqual(expected[1], store.GetString(key))

      store.PopInvocationValues()
      self.assertEqual('default' if default_set else '',
                       store.GetString(key))


class DefaultSectionsTest(test_case.Base):

  def testNamePropertiesKeepSectionNames(self):
    store = properties.PropertyStore()
    for section in ('compute.instance', 'compute.package', 'compute.image',
                    'keys'):
      self.assertEqual(section, store.Section(section).name)
      self.assertEqual(section + '.name',
                       store.Property(section + '.name').key)
      self.assertEqual('', store.GetString(section + '.name'))
