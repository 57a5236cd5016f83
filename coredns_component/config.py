# Copyright 2026 The Kraken Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging

from . import consts
from . import report
from .errors import ConfigParseError

log = logging.getLogger(__name__)


class ReleaseTarget():
    """Place where the built binary is uploaded: <domain>/<namespace>/<repository>/<tag>."""

    def __init__(self, domain, namespace, repository, tag):
        self.domain = domain
        self.namespace = namespace
        self.repository = repository
        self.tag = tag

    @classmethod
    def from_string(cls, release):
        if not release:
            raise ConfigParseError('release target is not set')

        parts = release.split('/')
        if len(parts) != consts.RELEASE_PARTS or not all(parts):
            raise ConfigParseError("release target '%s' does not match <domain>/<namespace>/<repository>/<tag>" % release)

        return cls(*parts)

    def artifact_uri(self, filename=consts.BINARY_NAME):
        # segments are used as is, without any escaping
        return consts.UPLOAD_URL_FMT % (self.domain, self.namespace, self.repository, filename, self.tag)

    def __eq__(self, other):
        if not isinstance(other, ReleaseTarget):
            return NotImplemented
        return (self.domain, self.namespace, self.repository, self.tag) == \
            (other.domain, other.namespace, other.repository, other.tag)

    def __repr__(self):
        return 'ReleaseTarget(%s/%s/%s/%s)' % (self.domain, self.namespace, self.repository, self.tag)


class ComponentConfig():
    def __init__(self, repo_uri=None, action=None, release=None):
        self.repo_uri = repo_uri
        self.action = action
        self.release = release

    def release_target(self):
        return ReleaseTarget.from_string(self.release)

    def __eq__(self, other):
        if not isinstance(other, ComponentConfig):
            return NotImplemented
        return (self.repo_uri, self.action, self.release) == (other.repo_uri, other.action, other.release)

    def __repr__(self):
        return 'ComponentConfig(repo_uri=%r, action=%r, release=%r)' % (self.repo_uri, self.action, self.release)


def parse_co_data(data):
    """Parse CO_DATA value ie. whitespace separated key=value tokens.

    Recognized keys are coredns (repository URI), action (build/test/release)
    and release (upload target). Unknown keys are reported and skipped.
    """
    tokens = (data or '').split()
    if not tokens:
        raise ConfigParseError('CO_DATA value is null')

    fields = {}
    for token in tokens:
        if '=' not in token:
            raise ConfigParseError("malformed parameter '%s', expected key=value" % token)
        key, value = token.split('=', 1)

        if key == consts.KEY_REPO:
            fields['repo_uri'] = value
        elif key == consts.KEY_ACTION:
            fields['action'] = value
        elif key == consts.KEY_RELEASE:
            fields['release'] = value
        else:
            log.warning('unknown parameter %s, skipping it', key)
            report.cout('Unknown Parameter: [%s %s]' % (key, value))

    return ComponentConfig(**fields)
