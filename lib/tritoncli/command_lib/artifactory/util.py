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

"""Helpers shared by the artif-* tools."""

import functools

import requests

from tritoncli.api_lib.artifactory import client as artifactory_client
from tritoncli.api_lib.artifactory import repositories
from tritoncli.calliope import exceptions
from tritoncli.core import exceptions as core_exceptions
from tritoncli.core import log
from tritoncli.core.resource import resource_printer


def NewClient(store, environ=None):
  """Creates the Artifactory client from the ARTIFACTORY_* variables."""
  client = artifactory_client.Client.FromEnvironment(environ=environ)
  log.debug('using %r', client)
  return client


def ReportClientErrors(silent_property=None):
  """Decorates Run() so client errors become a message and exit status 1.

  The message of the error is written to the terminal and the command exits
  through ExitCodeNoError, so no error record is logged.

  Args:
    silent_property: str, A bool property that suppresses the message.

  Returns:
    The decorator.
  """
  def Decorator(run):
    @functools.wraps(run)
    def Func(self, args):
      try:
        return run(self, args)
      except (core_exceptions.Error, requests.exceptions.RequestException) as e:
        if not (silent_property and self.store.GetBool(silent_property)):
          self.terminal.Write('{0}\n'.format(e))
        raise exceptions.ExitCodeNoError(str(e), exit_code=1)
    return Func
  return Decorator


def PrintRows(store, out, heading, rows):
  """Prints rows in the format of artifactory.format.

  Args:
    store: properties.PropertyStore, The configuration store.
    out: The output stream.
    heading: [str], The column headings.
    rows: [[object]], The rows.
  """
  printer = resource_printer.Printer(store.GetString('artifactory.format'),
                                     out)
  printer.SetHeading(heading)
  for row in rows:
    printer.AddRow(row)
  printer.Finish()


def FormatBool(value):
  return 'true' if value else 'false'


def JoinLines(values):
  return '\n'.join(str(v) for v in values or [])


_REPOSITORY_HEADING = [
    'Key', 'Type', 'PackageType', 'Description', 'Notes', 'Blacked Out?',
    'Releases?', 'Snapshots?', 'Excludes', 'Includes']


def RepositoryTable(repo):
  """Returns the heading and the row of a repository configuration.

  The columns shared by every kind come first, then Url for remote, Layout
  for local and Repositories for virtual repositories.

  Args:
    repo: repositories.RepositoryConfig, The configuration.

  Returns:
    ([str], [object]), The heading and the row.
  """
  heading = list(_REPOSITORY_HEADING)
  row = [repo.key, repo.rclass, repo.package_type, repo.description,
         repo.notes, FormatBool(repo.blacked_out),
         FormatBool(repo.handle_releases), FormatBool(repo.handle_snapshots),
         repo.excludes_pattern, repo.includes_pattern]
  if repo.mime_type == repositories.REMOTE_MIME_TYPE:
    heading.append('Url')
    row.append(repo.url)
  elif repo.mime_type == repositories.LOCAL_MIME_TYPE:
    heading.append('Layout')
    row.append(repo.repo_layout_ref)
  elif repo.mime_type == repositories.VIRTUAL_MIME_TYPE:
    heading.append('Repositories')
    row.append(JoinLines(repo.repositories))
  return heading, row


def FormatPrincipals(principals):
  """Formats {name: [perm]} as 'name (p,q)' lines, sorted by name."""
  return JoinLines('{0} ({1})'.format(name, ','.join(perms or []))
                   for name, perms in sorted(principals.items()))


DOCKER_HEADING = ['NAME', 'DESCRIPTION', 'LAST MODIFIED', 'MODIFIED BY']

NO_DESCRIPTION = 'no description'

_DOCKER_LABEL_PREFIX = 'docker.label'


def DockerRow(item, labels=False):
  """Returns the docker-search row of an AQL item.

  Args:
    item: resources.AQLItem, A manifest.json item with its properties.
    labels: bool, Append the docker.label* properties as 'k = v' lines.

  Returns:
    [str], The row.
  """
  row = [
      '{0}:{1}'.format(item.Property('docker.repoName') or '',
                       item.Property('docker.manifest') or ''),
      item.Property('docker.label.description') or NO_DESCRIPTION,
      item.last_modified,
      item.modified_by,
  ]
  if labels:
    row.append(JoinLines(
        '{0} = {1}'.format(key, value)
        for key, values in sorted(item.properties.items())
        if key.startswith(_DOCKER_LABEL_PREFIX)
        for value in values))
  return row


VAGRANT_HEADING = ['NAME', 'VERSION', 'PROVIDER', 'MODIFIED', 'MODIFIED BY']


def VagrantRow(item):
  return [
      '{0}/{1}'.format(item.repo, item.Property('box_name') or ''),
      item.Property('box_version'),
      item.Property('box_provider'),
      item.modified,
      item.modified_by,
  ]


GAVC_HEADING = ['File', 'Repo', 'RemoteUrl', 'Created', 'Last Modified',
                'Created By', 'Modified By', 'SHA1', 'MD5', 'Size',
                'MimeType', 'Download']


def GAVCRow(result):
  return [result.file_name, result.repo, result.remote_url, result.created,
          result.last_modified, result.created_by, result.modified_by,
          result.sha1, result.md5, result.size, result.mime_type,
          result.download_uri]
