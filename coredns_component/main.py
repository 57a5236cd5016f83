#!/usr/bin/env python3

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

import sys
import logging
import platform
import importlib.metadata

import click

from . import logs
from . import consts
from . import utils
from . import report
from . import actions
from . import config as cfg
from .errors import ComponentError


log = logging.getLogger('component')


def _intro():
    logs.setup_logging()
    try:
        version = importlib.metadata.version('coredns-component')
    except importlib.metadata.PackageNotFoundError:
        version = 'unknown'
    log.info('Starting CoreDNS component, version %s', version)
    log.info('using Python version %s', platform.python_version())


def _finish(ok):
    # result line has to be the last line on stdout
    report.report_result(ok)
    sys.exit(0 if ok else 1)


@click.command()
@click.option('--co-data', envvar=consts.CO_DATA_ENV, help='Component parameters: coredns=<repo-uri> action=<build|test|release> [release=<domain>/<namespace>/<repository>/<tag>]')
@click.option('--gopath', envvar=consts.GOPATH_ENV, default='', help='Base directory, CoreDNS is cloned to <gopath>/src/github.com/coredns/coredns')
def main(co_data, gopath):
    'Clone CoreDNS, then build, test or release it'
    _intro()

    try:
        config = cfg.parse_co_data(co_data)
        logs.set_secrets(logs.url_secrets(config.repo_uri))
        log.info('config: %s', config)
        actions.run_component(config, gopath, utils.CommandRunner())
    except ComponentError as ex:
        log.error('%s', ex)
        _finish(False)
    except Exception as ex:  # pylint: disable=broad-except
        log.error('component interrupted by exception: %s: %s', type(ex).__name__, ex)
        log.debug('traceback', exc_info=True)
        _finish(False)

    _finish(True)


if __name__ == '__main__':
    main()  # pylint: disable=no-value-for-parameter
