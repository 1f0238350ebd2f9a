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

"""Repository configurations, one class per repository kind.

Artifactory answers GET api/repositories/<key> with a body whose
Content-Type names the kind of repository. FromResponse() picks the class
registered for that MIME type; bodies served as plain JSON fall back to the
rclass field.
"""

from tritoncli.api_lib.triton import client as client_lib


MIME_TYPE_FORMAT = (
    'application/vnd.org.jfrog.artifactory.repositories.'
    '{0}RepositoryConfiguration+json')

LOCAL_MIME_TYPE = MIME_TYPE_FORMAT.format('Local')
REMOTE_MIME_TYPE = MIME_TYPE_FORMAT.format('Remote')
VIRTUAL_MIME_TYPE = MIME_TYPE_FORMAT.format('Virtual')


class RepositoryConfig(client_lib.Resource):
  """The settings shared by every kind of repository.

  Attributes:
    mime_type: str, The discriminator of the repository kind.
  """

  mime_type = None

  _FIELDS = (
      ('key', 'key'),
      ('rclass', 'rclass'),
      ('package_type', 'packageType'),
      ('description', 'description'),
      ('notes', 'notes'),
      ('blacked_out', 'blackedOut'),
      ('handle_releases', 'handleReleases'),
      ('handle_snapshots', 'handleSnapshots'),
      ('excludes_pattern', 'excludesPattern'),
      ('includes_pattern', 'includesPattern'),
  )


class LocalRepositoryConfig(RepositoryConfig):
  mime_type = LOCAL_MIME_TYPE
  _FIELDS = RepositoryConfig._FIELDS + (
      ('repo_layout_ref', 'repoLayoutRef'),
      ('checksum_policy_type', 'checksumPolicyType'),
  )


class RemoteRepositoryConfig(RepositoryConfig):
  mime_type = REMOTE_MIME_TYPE
  _FIELDS = RepositoryConfig._FIELDS + (
      ('url', 'url'),
      ('username', 'username'),
      ('offline', 'offline'),
  )


class VirtualRepositoryConfig(RepositoryConfig):
  mime_type = VIRTUAL_MIME_TYPE
  _FIELDS = RepositoryConfig._FIELDS + (
      ('repositories', 'repositories'),
      ('default_deployment_repo', 'defaultDeploymentRepo'),
  )


_BY_MIME_TYPE = dict(
    (cls.mime_type, cls) for cls in
    (LocalRepositoryConfig, RemoteRepositoryConfig, VirtualRepositoryConfig))

_BY_RCLASS = {
    'local': LocalRepositoryConfig,
    'remote': RemoteRepositoryConfig,
    'virtual': VirtualRepositoryConfig,
}


def FromResponse(content_type, body):
  """Builds the configuration object for a repository.

  Args:
    content_type: str, The Content-Type of the response, parameters allowed.
    body: dict, The decoded body.

  Returns:
    RepositoryConfig, An instance of the class registered for the kind.
  """
  mime_type = (content_type or '').split(';')[0].strip()
  cls = _BY_MIME_TYPE.get(mime_type)
  if cls is None:
    cls = _BY_RCLASS.get((body or {}).get('rclass'), RepositoryConfig)
  return cls(body)
