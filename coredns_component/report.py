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

import click

from . import consts


def cout(msg):
    click.echo('%s %s' % (consts.COUT_PREFIX, msg))


def report_value(key, value):
    cout('%s = %s' % (key, value))


def report_result(ok):
    report_value(consts.RESULT_KEY, 'true' if ok else 'false')
