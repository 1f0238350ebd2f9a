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

"""Objects returned by the Artifactory REST API."""

from tritoncli.api_lib.triton import client as client_lib


class UserRef(client_lib.Resource):
  _FIELDS = (
      ('name', 'name'),
      ('uri', 'uri'),
  )


class User(client_lib.Resource):
  _FIELDS = (
      ('name', 'name'),
      ('email', 'email'),
      ('password', 'password'),
      ('admin', 'admin'),
      ('profile_updatable', 'profileUpdatable'),
      ('last_logged_in', 'lastLoggedIn'),
      ('internal_password_disabled', 'internalPasswordDisabled'),
      ('realm', 'realm'),
      ('groups', 'groups'),
  )


class GroupRef(UserRef):
  pass


class Group(client_lib.Resource):
  _FIELDS = (
      ('name', 'name'),
      ('description', 'description'),
      ('auto_join', 'autoJoin'),
      ('realm', 'realm'),
      ('realm_attributes', 'realmAttributes'),
  )


class RepositoryRef(client_lib.Resource):
  """An entry of the repository listing."""

  _FIELDS = (
      ('key', 'key'),
      ('type', 'type'),
      ('description', 'description'),
      ('url', 'url'),
  )


class PermissionTarget(client_lib.Resource):
  """A permission target.

  principals is {'users': {name: [perm]}, 'groups': {name: [perm]}} where
  each perm is one of the letters of PERMISSION_LEGEND.
  """

  _FIELDS = (
      ('name', 'name'),
      ('includes_pattern', 'includesPattern'),
      ('excludes_pattern', 'excludesPattern'),
      ('repositories', 'repositories'),
      ('principals', 'principals'),
  )

  @property
  def users(self):
    return (self.principals or {}).get('users') or {}

  @property
  def groups(self):
    return (self.principals or {}).get('groups') or {}


PERMISSION_LEGEND = 'm=admin; d=delete; w=deploy; n=annotate; r=read'


class License(client_lib.Resource):
  _FIELDS = (
      ('license_type', 'type'),
      ('valid_through', 'validThrough'),
      ('licensed_to', 'licensedTo'),
  )


class DeployedArtifact(client_lib.Resource):
  """The answer to an artifact upload."""

  _FIELDS = (
      ('uri', 'uri'),
      ('download_uri', 'downloadUri'),
      ('repo', 'repo'),
      ('path', 'path'),
      ('created', 'created'),
      ('created_by', 'createdBy'),
      ('size', 'size'),
      ('mime_type', 'mimeType'),
      ('checksums', 'checksums'),
  )


class FileListEntry(client_lib.Resource):
  _FIELDS = (
      ('uri', 'uri'),
      ('size', 'size'),
      ('last_modified', 'lastModified'),
      ('folder', 'folder'),
      ('sha1', 'sha1'),
  )


class FileList(client_lib.Resource):
  """A deep listing of the files below a repository path."""

  _FIELDS = (
      ('uri', 'uri'),
      ('created', 'created'),
      ('files', 'files'),
  )

  def __init__(self, raw=None, **kwargs):
    super(FileList, self).__init__(raw, **kwargs)
    self.files = FileListEntry.FromList(self.files)


def _PropertyMap(properties):
  """Converts AQL [{key, value}] properties into {key: [value]}."""
  result = {}
  for prop in properties or []:
    result.setdefault(prop.get('key'), []).append(prop.get('value'))
  return result


class AQLItem(client_lib.Resource):
  """An item found by an AQL query that includes its properties.

  Attributes:
    properties: {str: [str]}, The property values by property name.
  """

  _FIELDS = (
      ('repo', 'repo'),
      ('path', 'path'),
      ('name', 'name'),
      ('created', 'created'),
      ('created_by', 'created_by'),
      ('modified', 'modified'),
      ('modified_by', 'modified_by'),
      ('last_modified', 'updated'),
      ('properties', 'properties'),
  )

  def __init__(self, raw=None, **kwargs):
    super(AQLItem, self).__init__(raw, **kwargs)
    if isinstance(self.properties, list):
      self.properties = _PropertyMap(self.properties)
    elif self.properties is None:
      self.properties = {}

  def Property(self, name):
    """Returns the first value of the named property, None if it is unset."""
    values = self.properties.get(name)
    return values[0] if values else None


class GAVCResult(client_lib.Resource):
  """A file found by a Maven coordinate search."""

  _FIELDS = (
      ('uri', 'uri'),
      ('repo', 'repo'),
      ('path', 'path'),
      ('remote_url', 'remoteUrl'),
      ('created', 'created'),
      ('created_by', 'createdBy'),
      ('last_modified', 'lastModified'),
      ('modified_by', 'modifiedBy'),
      ('last_updated', 'lastUpdated'),
      ('download_uri', 'downloadUri'),
      ('mime_type', 'mimeType'),
      ('size', 'size'),
      ('checksums', 'checksums'),
  )

  @property
  def sha1(self):
    return (self.checksums or {}).get('sha1')

  @property
  def md5(self):
    return (self.checksums or {}).get('md5')

  @property
  def file_name(self):
    return (self.path or '').split('/')[-1]


class GAVC(object):
  """Maven coordinates to search for.

  Attributes:
    group_id: str, The groupId.
    artifact_id: str, The artifactId.
    version: str, The version.
    classifier: str, The classifier.
    repos: [str], Limits the search to these repositories.
  """

  def __init__(self, group_id=None, artifact_id=None, version=None,
               classifier=None, repos=None):
    self.group_id = group_id
    self.artifact_id = artifact_id
    self.version = version
    self.classifier = classifier
    self.repos = list(repos or [])

  def Query(self):
    """Returns the query parameters of the gavc search endpoint."""
    query = {}
    for name, value in (('g', self.group_id), ('a', self.artifact_id),
                        ('v', self.version), ('c', self.classifier)):
      if value:
        query[name] = value
    if self.repos:
      query['repos'] = ','.join(self.repos)
    return query
