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
from .errors import BuildError, TestError

log = logging.getLogger(__name__)


def _make(runner, repo_dir, target):
    log.info('make %s in %s', target, repo_dir)
    ret, _ = runner.run(['make', target], cwd=str(repo_dir))
    return ret


def build(runner, repo_dir):
    """Execute `make coredns` in the CoreDNS folder."""
    ret = _make(runner, repo_dir, consts.MAKE_BUILD_TARGET)
    if ret != 0:
        raise BuildError('make %s exited with non-zero retcode: %s' % (consts.MAKE_BUILD_TARGET, ret))


def test(runner, repo_dir):
    """Execute `make test` in the CoreDNS folder."""
    ret = _make(runner, repo_dir, consts.MAKE_TEST_TARGET)
    if ret != 0:
        raise TestError('make %s exited with non-zero retcode: %s' % (consts.MAKE_TEST_TARGET, ret))
