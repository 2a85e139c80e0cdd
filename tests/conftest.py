"""
Pytest Configuration File

Fixtures for a recordings tree on disk, a scripted prompter and a transport
that records calls instead of talking to the archive.
"""

import pytest
from pathlib import Path

from swift_uploader.core import Settings, UploadFailure
from swift_uploader.schemas import ArchiveOrg, Device, Site, SwiftConfig
from swift_uploader.services import ScriptedPrompter, SessionOrchestrator, save_site


class FakeTransport:
    """Records every PUT; names in `fail_on` raise UploadFailure"""

    def __init__(self, fail_on=()):
        self.calls = []
        self.fail_on = set(fail_on)

    def put(self, bucket, file_path, headers):
        name = Path(file_path).name
        if name in self.fail_on:
            raise UploadFailure(f"simulated failure for {name}", status_code=503, body="SlowDown")
        self.calls.append((bucket, name, list(headers)))

    @property
    def uploaded(self):
        return [name for _, name, _ in self.calls]


@pytest.fixture
def settings():
    s = Settings()
    s.MANIFEST_FILENAME = "manifest.toml"
    s.SITE_FILENAME = "site.toml"
    s.ARCHIVE_TEST_COLLECTION = "test_collection"
    return s


@pytest.fixture
def config():
    return SwiftConfig(
        device=Device(name="SWX"),
        archive_org=ArchiveOrg(
            access_key="AK",
            secret_key="SK",
            creator="Jane Recorder",
            subject_tags=["soundscapes", "Cornell Swift Recorder"],
            collection_id="media",
            license_url="https://creativecommons.org/licenses/by/4.0/",
            base_description="Recordings from a Cornell Swift Bioacoustics Recorder.",
            test_item=False
        )
    )


@pytest.fixture
def site():
    return Site(
        name="Cartwright Nature Sanctuary",
        subject_tags=["Dundas, Ontario"],
        description=" Pond edge.",
        ready_to_upload=True
    )


@pytest.fixture
def recordings(tmp_path, site):
    """<root>/cartwright/site.toml and one session with two recordings"""
    site_dir = tmp_path / "cartwright"
    session_dir = site_dir / "SWX_2019-01-16"
    session_dir.mkdir(parents=True)
    save_site(site, site_dir / "site.toml")
    (session_dir / "SWX_20190116_000000.wav").write_bytes(b"RIFF-a")
    (session_dir / "SWX_20190116_010000.wav").write_bytes(b"RIFF-b")
    return tmp_path


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def make_orchestrator(config, settings):
    def _make(transport, answers=()):
        return SessionOrchestrator(config, transport, ScriptedPrompter(answers), settings)
    return _make
