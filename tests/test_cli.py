"""Tests for the command line entry point"""

from unittest.mock import MagicMock

from swift_uploader import main as cli
from swift_uploader.services import save_site


def test_unknown_command_prints_usage(capsys):
    assert cli.run(["sync", "."]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_missing_arguments_prints_usage(capsys):
    assert cli.run([]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_root_must_be_directory(tmp_path, capsys):
    assert cli.run(["upload", str(tmp_path / "missing")]) == 1
    assert "Not a directory" in capsys.readouterr().out


def test_declined_config_exits_nonzero(tmp_path, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt="": "n")
    assert cli.run(["upload", str(tmp_path)]) == 1
    assert not (tmp_path / "swift.toml").exists()


def test_status_with_placeholder_config(tmp_path, monkeypatch, capsys):
    (tmp_path / "pond").mkdir()
    monkeypatch.setattr("builtins.input", lambda prompt="": "y")

    assert cli.run(["status", str(tmp_path)]) == 0

    assert (tmp_path / "swift.toml").is_file()
    assert "MISSING" in capsys.readouterr().out


SWIFT_TOML = (
    '[device]\nname = "SWX"\n\n'
    '[archive_org]\naccess_key = "AK"\nsecret_key = "SK"\ncreator = "c"\n'
    'subject_tags = []\ncollection_id = "media"\nlicense_url = "l"\n'
)


def mock_http(monkeypatch, status_code, text=""):
    http = MagicMock()
    http.put.return_value = MagicMock(status_code=status_code, ok=200 <= status_code < 400, text=text)
    monkeypatch.setattr("swift_uploader.services.transport.requests.Session", lambda: http)
    return http


def test_connection_test_succeeds(tmp_path, monkeypatch, capsys):
    (tmp_path / "swift.toml").write_text(SWIFT_TOML)
    http = mock_http(monkeypatch, 200)

    assert cli.run(["test", str(tmp_path)]) == 0

    url = http.put.call_args.args[0]
    assert url.endswith("/SWX-swift-uploader-test/connection-test.txt")
    headers = http.put.call_args.kwargs["headers"]
    assert headers["authorization"] == "LOW AK:SK"
    assert headers["x-archive-meta-collection"] == "test_collection"
    assert "succeeded" in capsys.readouterr().out


def test_connection_test_reports_refusal(tmp_path, monkeypatch, capsys):
    (tmp_path / "swift.toml").write_text(SWIFT_TOML)
    mock_http(monkeypatch, 403, "<Error>InvalidAccessKeyId</Error>")

    assert cli.run(["test", str(tmp_path)]) == 1

    out = capsys.readouterr().out
    assert "HTTP 403" in out
    assert "InvalidAccessKeyId" in out


def test_corrupt_manifest_exits_nonzero(tmp_path, monkeypatch, site):
    (tmp_path / "swift.toml").write_text(SWIFT_TOML)
    session = tmp_path / "cartwright" / "SWX_2019-01-16"
    session.mkdir(parents=True)
    save_site(site, tmp_path / "cartwright" / "site.toml")
    (session / "manifest.toml").write_bytes(b"[manifest]\nidentifier = \"\xff\"\n")
    http = mock_http(monkeypatch, 200)

    assert cli.run(["upload", str(tmp_path)]) == 1
    http.put.assert_not_called()


def test_closed_stdin_exits_nonzero(tmp_path, monkeypatch):
    def raise_eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)
    assert cli.run(["upload", str(tmp_path)]) == 1
