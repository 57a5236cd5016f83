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

import os
import logging
from pathlib import Path

from . import consts
from .errors import FetchError

log = logging.getLogger(__name__)


def repo_dir(gopath):
    """Directory of CoreDNS checkout inside GOPATH, relative to cwd when GOPATH is not set."""
    return Path(gopath or '.').joinpath(*consts.REPO_SUBDIR)


def clone(runner, repo_uri, dest):
    if not repo_uri:
        raise FetchError('CoreDNS repository URI is not set, add coredns=<uri> to CO_DATA')

    dest = Path(dest)
    try:
        os.makedirs(dest, exist_ok=True)
    except OSError as ex:
        raise FetchError('cannot create %s: %s' % (dest, ex)) from ex

    log.info('clone %s -> %s', repo_uri, dest)
    ret, _ = runner.run(['git', 'clone', repo_uri, str(dest)])
    if ret != 0:
        raise FetchError('git clone exited with non-zero retcode: %s' % ret)

    return dest
