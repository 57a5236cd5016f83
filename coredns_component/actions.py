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
from . import gitops
from . import builder
from . import upload
from .errors import UnknownActionError

log = logging.getLogger(__name__)


def release(runner, repo_dir, target):
    """Build CoreDNS and upload the coredns binary to the artifact repository."""
    builder.build(runner, repo_dir)

    file_path = repo_dir / consts.BINARY_NAME
    uri = upload.upload_binary(file_path, target)
    report.report_value(consts.URI_KEY, uri)
    return uri


def dispatch(config, runner, repo_dir, target=None):
    action = config.action
    log.info('execute action %s', action)

    if action == consts.ACTION_BUILD:
        builder.build(runner, repo_dir)
    elif action == consts.ACTION_TEST:
        builder.test(runner, repo_dir)
    elif action == consts.ACTION_RELEASE:
        if target is None:
            target = config.release_target()
        return release(runner, repo_dir, target)
    else:
        raise UnknownActionError("'%s'" % action if action else 'action is not set')

    return None


def run_component(config, gopath, runner):
    """Clone CoreDNS and execute configured action. Raises ComponentError on any failure."""
    # check release target before spending time on cloning
    target = None
    if config.action == consts.ACTION_RELEASE:
        target = config.release_target()

    repo_dir = gitops.repo_dir(gopath)
    gitops.clone(runner, config.repo_uri, repo_dir)

    return dispatch(config, runner, repo_dir, target)
