from unittest.mock import patch, Mock

import pytest
import requests

from coredns_component import upload
from coredns_component.config import ReleaseTarget
from coredns_component.errors import FileOpenError, UploadError, UploadRejected, UploadUnauthorized


TARGET = ReleaseTarget('hub.example.com', 'ns', 'repo', 'v1.0')
URI = 'https://hub.example.com/binary/v1/ns/repo/binary/coredns/v1.0'


@pytest.fixture
def binary(tmp_path):
    f = tmp_path / 'coredns'
    f.write_bytes(b'\x7fELF coredns')
    return f


def test_upload_binary_ok(binary):
    sent = {}

    def fake_put(url, data=None, headers=None):
        sent['url'] = url
        sent['body'] = data.read()
        sent['file'] = data
        sent['headers'] = headers
        return Mock(status_code=200)

    with patch('requests.put', side_effect=fake_put):
        uri = upload.upload_binary(binary, TARGET)

    assert uri == URI
    assert sent['url'] == URI
    assert sent['body'] == b'\x7fELF coredns'
    assert sent['headers'] == {'Content-Type': 'text/plain'}
    # file handle is released after upload
    assert sent['file'].closed


@pytest.mark.parametrize('status, exc_cls, text', [
    (400, UploadRejected, 'bad request'),
    (401, UploadUnauthorized, 'unauthorized'),
])
def test_upload_binary_known_errors(binary, status, exc_cls, text):
    with patch('requests.put', return_value=Mock(status_code=status)):
        with pytest.raises(exc_cls) as exc_info:
            upload.upload_binary(binary, TARGET)

    assert text in str(exc_info.value)


@pytest.mark.parametrize('status', [201, 403, 404, 500, 502])
def test_upload_binary_other_status(binary, status):
    with patch('requests.put', return_value=Mock(status_code=status)):
        with pytest.raises(UploadError) as exc_info:
            upload.upload_binary(binary, TARGET)

    assert type(exc_info.value) is UploadError  # pylint: disable=unidiomatic-typecheck
    assert str(status) in str(exc_info.value)


def test_upload_binary_connection_error(binary):
    files = []

    def fake_put(url, data=None, headers=None):  # pylint: disable=unused-argument
        files.append(data)
        raise requests.ConnectionError('Name or service not known')

    with patch('requests.put', side_effect=fake_put):
        with pytest.raises(UploadError) as exc_info:
            upload.upload_binary(binary, TARGET)

    assert 'Name or service not known' in str(exc_info.value)
    assert files[0].closed


def test_upload_binary_missing_file(tmp_path):
    with patch('requests.put') as rp:
        with pytest.raises(FileOpenError):
            upload.upload_binary(tmp_path / 'coredns', TARGET)

    rp.assert_not_called()
