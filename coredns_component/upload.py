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

import requests

from . import consts
from .errors import FileOpenError, UploadError, UploadRejected, UploadUnauthorized

log = logging.getLogger(__name__)


def upload_binary(file_path, target):
    """PUT the binary to the artifact repository and return its URI.

    Status 200 is success, 400 and 401 have their own errors,
    anything else including connection problems ends with UploadError.
    """
    uri = target.artifact_uri(consts.BINARY_NAME)
    headers = {'Content-Type': consts.UPLOAD_CONTENT_TYPE}

    try:
        f = open(file_path, 'rb')  # pylint: disable=consider-using-with
    except OSError as ex:
        raise FileOpenError(str(ex)) from ex

    with f:
        log.info('upload %s -> %s', file_path, uri)
        try:
            resp = requests.put(uri, data=f, headers=headers)
        except requests.RequestException as ex:
            raise UploadError(str(ex)) from ex

    log.info('upload response: %s', resp.status_code)
    if resp.status_code == 200:
        return uri
    if resp.status_code == 400:
        raise UploadRejected()
    if resp.status_code == 401:
        raise UploadUnauthorized()
    raise UploadError('service returned unexpected status %s' % resp.status_code)
