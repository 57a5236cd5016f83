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
import shlex
import logging
import subprocess

import click

from . import logs

log = logging.getLogger(__name__)

# retcode reported when a command cannot be started at all
RETCODE_NOT_STARTED = 127


def _echo_output(line):
    click.echo(line, nl=False)


def execute(cmd, cwd=None, env=None, output_handler=None, capture=False):
    """Run cmd (argv list) and stream its combined stdout/stderr line by line.

    Every line goes to output_handler (stdout by default) with secrets masked.
    There is no timeout, the call blocks until the command exits.
    Returns (retcode, out) where out holds the whole output if capture is set
    and is an empty string otherwise.
    """
    if cwd is None:
        cwd = os.getcwd()
    if output_handler is None:
        output_handler = _echo_output
    cmd_trc = logs.mask_secrets(shlex.join(cmd))
    log.info("exec: '%s' in '%s'", cmd_trc, cwd)

    text = [] if capture else None
    try:
        p = subprocess.Popen(cmd,
                             cwd=cwd,
                             env=env,
                             stdout=subprocess.PIPE,
                             stderr=subprocess.STDOUT,
                             universal_newlines=True,
                             errors='replace')
    except OSError as ex:
        msg = logs.mask_secrets(str(ex))
        log.error("cannot start cmd '%s': %s", cmd_trc, msg)
        return RETCODE_NOT_STARTED, msg if capture else ''

    with p:
        for line in p.stdout:
            line = logs.mask_secrets(line)
            output_handler(line)
            if text is not None:
                text.append(line)
        retcode = p.wait()

    log.info("cmd '%s' exited with retcode %d", cmd_trc, retcode)

    out = ''
    if text is not None:
        out = ''.join(text)
    return retcode, out


class CommandRunner():
    """Runs external tools like git and make. Tests replace it with a fake."""

    def __init__(self, env=None, output_handler=None):
        self.env = env
        self.output_handler = output_handler

    def run(self, cmd, cwd=None, capture=False):
        return execute(cmd, cwd=cwd, env=self.env, output_handler=self.output_handler, capture=capture)
