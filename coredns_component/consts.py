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

LOG_FMT = '[COUT] %(asctime)s %(levelname)-4.4s %(module)8.8s:%(lineno)-5d %(message)s'

COUT_PREFIX = '[COUT]'

CO_DATA_ENV = 'CO_DATA'
GOPATH_ENV = 'GOPATH'

# output keys scraped by the orchestrator
RESULT_KEY = 'CO_RESULT'
URI_KEY = 'CO_COREDNS_URI'

# keys accepted in CO_DATA
KEY_REPO = 'coredns'
KEY_ACTION = 'action'
KEY_RELEASE = 'release'

ACTION_BUILD = 'build'
ACTION_TEST = 'test'
ACTION_RELEASE = 'release'

# location of the checkout inside GOPATH
REPO_SUBDIR = ('src', 'github.com', 'coredns', 'coredns')

MAKE_BUILD_TARGET = 'coredns'
MAKE_TEST_TARGET = 'test'

BINARY_NAME = 'coredns'

# Pattern: <domain>/<namespace>/<repository>/<tag>
# e.g. hub.opshub.sh/containerops/cncf-demo/demo
RELEASE_PARTS = 4
UPLOAD_URL_FMT = 'https://%s/binary/v1/%s/%s/binary/%s/%s'
UPLOAD_CONTENT_TYPE = 'text/plain'
