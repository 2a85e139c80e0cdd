"""Tests for the archive HTTP transport"""

import logging

import pytest
import requests
from unittest.mock import MagicMock

from swift_uploader.core import UploadFailure
from swift_uploader.services import ArchiveTransport


def make_response(status_code, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.text = text
    return response


@pytest.fixture
def wav(tmp_path):
    path = tmp_path / "SWX 20190116.wav"
    path.write_bytes(b"0123456789")
    return path


def make_transport(response=None, error=None):
    session = MagicMock()
    if error is not None:
        session.put.side_effect = error
    else:
        session.put.return_value = response
    transport = ArchiveTransport("AK", "SK", base_url="https://s3.example.org/", timeout=5, session=session)
    return transport, session


def test_put_builds_request(wav):
    transport, session = make_transport(make_response(200))

    transport.put("SWX20190116", wav, [("x-archive-meta-mediatype", "audio")])

    args, kwargs = session.put.call_args
    assert args[0] == "https://s3.example.org/SWX20190116/SWX%2020190116.wav"
    headers = kwargs["headers"]
    assert headers["authorization"] == "LOW AK:SK"
    assert headers["x-amz-auto-make-bucket"] == "1"
    assert headers["x-archive-meta-mediatype"] == "audio"
    assert headers["Content-Length"] == "10"
    assert kwargs["timeout"] == 5


def test_put_streams_file_handle(wav):
    transport, session = make_transport(make_response(200))
    transport.put("SWX20190116", wav, [])
    body = session.put.call_args.kwargs["data"]
    assert hasattr(body, "read")
    assert body.closed


def test_error_status_raises_upload_failure(wav):
    transport, _ = make_transport(make_response(403, "<Error>InvalidAccessKeyId</Error>"))

    with pytest.raises(UploadFailure) as excinfo:
        transport.put("SWX20190116", wav, [])

    assert excinfo.value.status_code == 403
    assert "InvalidAccessKeyId" in excinfo.value.body


def test_connection_error_raises_upload_failure(wav):
    transport, _ = make_transport(error=requests.ConnectionError("refused"))

    with pytest.raises(UploadFailure) as excinfo:
        transport.put("SWX20190116", wav, [])

    assert excinfo.value.status_code is None


def test_missing_file_raises_upload_failure(tmp_path):
    transport, session = make_transport(make_response(200))

    with pytest.raises(UploadFailure):
        transport.put("SWX20190116", tmp_path / "gone.wav", [])

    session.put.assert_not_called()


def test_metadata_headers_are_logged_at_debug(wav, caplog):
    transport, _ = make_transport(make_response(200))

    with caplog.at_level(logging.DEBUG, logger="swift_uploader.services.transport"):
        transport.put("SWX20190116", wav, [("x-archive-meta-mediatype", "audio")])

    assert "x-archive-meta-mediatype:audio" in caplog.text
    assert "LOW AK:SK" not in caplog.text
