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

"""A module to get a requests.Session object configured for the API clients."""

import time

import requests

from tritoncli.core import config
from tritoncli.core import log


DEFAULT_TIMEOUT = 300


def _LogStats(response, *unused_args, **unused_kwargs):
  """Response hook that logs one line per HTTP exchange."""
  log.info('%s %s %s', response.request.method, response.url,
           response.status_code,
           extra=log.Fields(
               status=response.status_code,
               elapsed_ms=int(response.elapsed.total_seconds() * 1000)))


class Session(requests.Session):
  """A requests.Session with a default timeout.

  Attributes:
    timeout: float, The socket timeout applied to requests that do not set one.
  """

  def __init__(self, timeout=DEFAULT_TIMEOUT):
    super(Session, self).__init__()
    self.timeout = timeout

  def request(self, method, url, *args, **kwargs):  # pylint: disable=arguments-differ
    kwargs.setdefault('timeout', self.timeout)
    start = time.time()
    try:
      return super(Session, self).request(method, url, *args, **kwargs)
    finally:
      log.debug('%s %s took %.3fs', method, url, time.time() - start)


def GetSession(timeout=DEFAULT_TIMEOUT, user_agent=None, log_stats=False,
               session=None):
  """Get a requests.Session that is properly configured for the API clients.

  This method does not add credentials to the session; the clients sign each
  request themselves.

  Args:
    timeout: float, The socket level timeout in seconds, None for no timeout.
    user_agent: str, The User-Agent header, the tritoncli one if None.
    log_stats: bool, Log a line with the status and timing of every response.
    session: requests.Session, An existing session to configure instead of a
      new one.

  Returns:
    A requests.Session object.
  """
  if session is None:
    session = Session(timeout=timeout)
  session.headers['User-Agent'] = (user_agent or
                                   config.MakeUserAgentString())
  if log_stats:
    session.hooks['response'].append(_LogStats)
  return session
