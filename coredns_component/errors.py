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


class ComponentError(Exception):
    """Base for every failure that ends the component with CO_RESULT = false."""

    prefix = 'component error'

    def __str__(self):
        msg = super().__str__()
        if msg:
            return '%s: %s' % (self.prefix, msg)
        return self.prefix


class ConfigParseError(ComponentError):
    prefix = 'Parse the CO_DATA error'


class FetchError(ComponentError):
    prefix = 'Git clone error'


class BuildError(ComponentError):
    prefix = 'Make build error'


class TestError(ComponentError):
    prefix = 'Make test error'
    __test__ = False  # not a pytest test class


class UnknownActionError(ComponentError):
    prefix = 'Unknown action, the component only support build, test and release action'


class FileOpenError(ComponentError):
    prefix = 'Read coredns binary file error'


class UploadError(ComponentError):
    prefix = 'Upload coredns binary file error'


class UploadRejected(UploadError):
    prefix = 'Upload coredns binary file, service return 400 error, bad request'


class UploadUnauthorized(UploadError):
    prefix = 'Upload coredns binary file, service return 401 error, unauthorized'
