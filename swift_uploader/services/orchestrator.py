"""
Session orchestrator: walks a recordings tree and uploads what is missing

Layout:

    <root>/swift.toml
    <root>/<site>/site.toml
    <root>/<site>/<DEVICE>_<YYYY-MM-DD>/manifest.toml
    <root>/<site>/<DEVICE>_<YYYY-MM-DD>/*.wav

Sites, sessions and files are visited in sorted order, one file at a time.
The manifest is the only thing deciding whether a file is sent, so a re-run
over an unchanged tree uploads nothing.
"""
import logging
import tempfile
from pathlib import Path
from typing import List, Optional

from ..core.config import Settings, settings as default_settings
from ..core.errors import FileSystemError, ManifestCorrupt, UploadFailure
from ..schemas import (
    Manifest,
    RunReport,
    Session,
    SessionReport,
    SessionStatus,
    Site,
    StatusReport,
    SwiftConfig,
)
from . import manifest as manifest_store
from .identifier import connection_test_identifier, describe_session
from .metadata import (
    CONNECTION_TEST_FILENAME,
    build_connection_test_headers,
    build_metadata_headers,
)
from .prompt import Prompter
from .site import load_site, resolve_site
from .transport import ArchiveTransport

logger = logging.getLogger(__name__)

HIDDEN_PREFIX = "."


def _is_hidden(path: Path) -> bool:
    return path.name.startswith(HIDDEN_PREFIX)


def _sorted_entries(directory: Path) -> List[Path]:
    try:
        return sorted(Path(directory).iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise FileSystemError(f"Cannot list {directory}: {e}") from e


class SessionOrchestrator:
    """Uploads every session of every site under a recordings root"""

    def __init__(
        self,
        config: SwiftConfig,
        transport: ArchiveTransport,
        prompter: Prompter,
        settings: Optional[Settings] = None
    ):
        self.config = config
        self.transport = transport
        self.prompter = prompter
        self.settings = settings or default_settings

    # Enumeration

    def list_site_dirs(self, root: Path) -> List[Path]:
        return [p for p in _sorted_entries(root) if p.is_dir() and not _is_hidden(p)]

    def list_session_dirs(self, site_dir: Path) -> List[Path]:
        return [p for p in _sorted_entries(site_dir) if p.is_dir() and not _is_hidden(p)]

    def list_upload_candidates(self, session_dir: Path) -> List[str]:
        """Regular files of a session, minus hidden files and the manifest"""
        return [
            p.name for p in _sorted_entries(session_dir)
            if p.is_file()
            and not _is_hidden(p)
            and p.name != self.settings.MANIFEST_FILENAME
        ]

    # Manifest

    def manifest_path(self, session_dir: Path) -> Path:
        return Path(session_dir) / self.settings.MANIFEST_FILENAME

    def load_or_create_manifest(self, session: Session) -> Manifest:
        path = self.manifest_path(session.path)
        if not manifest_store.exists(path):
            logger.info(f"[{session.identifier}] No manifest yet, starting a new one")
            return manifest_store.create_empty(session.identifier)

        manifest = manifest_store.load(path)
        if manifest.identifier != session.identifier:
            raise ManifestCorrupt(
                f"Manifest {path} belongs to {manifest.identifier}, "
                f"expected {session.identifier}"
            )
        logger.info(
            f"[{session.identifier}] Loaded manifest with {len(manifest.files)} uploaded file(s)"
        )
        return manifest

    # Uploading

    def build_headers(self, site: Site, session: Session) -> list:
        return build_metadata_headers(
            self.config,
            site,
            session.date,
            test_collection=self.settings.ARCHIVE_TEST_COLLECTION,
            scanner=self.settings.SCANNER_NAME,
            project_url=self.settings.PROJECT_URL
        )

    def _upload_file(
        self,
        site: Site,
        session: Session,
        manifest: Manifest,
        file_path: Path,
        report: SessionReport
    ) -> None:
        name = file_path.name
        if manifest_store.contains(manifest, name):
            logger.info(f"[{session.identifier}] ⏭️  {name} already uploaded, skipping")
            report.skipped.append(name)
            return

        # test_item is read on every upload, never cached per session
        headers = self.build_headers(site, session)
        try:
            self.transport.put(session.identifier, file_path, headers)
        except UploadFailure as e:
            logger.error(f"[{session.identifier}] ✗ {e}")
            report.failed.append(name)
            return

        manifest_store.append_and_save(manifest, name, self.manifest_path(session.path))
        report.uploaded.append(name)

    def process_session(self, site: Site, descriptor_path: Path, session_dir: Path) -> SessionReport:
        """
        Upload the site descriptor and every unlisted file of one session.

        A failed upload is recorded in the report and the session moves on to
        the next file; the manifest only ever lists confirmed uploads.
        """
        session = describe_session(Path(session_dir), self.config.device.name)
        report = SessionReport(identifier=session.identifier)
        logger.info(f"[{session.identifier}] Processing session {session.folder_name}")

        manifest = self.load_or_create_manifest(session)

        self._upload_file(site, session, manifest, Path(descriptor_path), report)
        for name in self.list_upload_candidates(session.path):
            self._upload_file(site, session, manifest, session.path / name, report)

        logger.info(
            f"[{session.identifier}] Done: {len(report.uploaded)} uploaded, "
            f"{len(report.skipped)} skipped, {len(report.failed)} failed"
        )
        return report

    def check_connection(self) -> str:
        """
        Upload a small text object to a throwaway item in the test collection
        to verify the archive keys and the endpoint.

        Returns:
            Identifier of the test item

        Raises:
            UploadFailure: with the archive's status and body when refused
        """
        identifier = connection_test_identifier(self.config.device.name)
        headers = build_connection_test_headers(self.config, self.settings.ARCHIVE_TEST_COLLECTION)

        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / CONNECTION_TEST_FILENAME
            try:
                path.write_text(f"Connection test from {self.settings.SCANNER_NAME}\n", encoding="utf-8")
            except OSError as e:
                raise FileSystemError(f"Cannot write {path}: {e}") from e
            self.transport.put(identifier, path, headers)

        logger.info(f"✅ Connection test upload to {identifier} succeeded")
        return identifier

    def process_site(self, site_dir: Path, report: RunReport) -> None:
        site_dir = Path(site_dir)
        descriptor_path = site_dir / self.settings.SITE_FILENAME
        site = resolve_site(site_dir, self.prompter, self.settings.SITE_FILENAME)

        if not site.ready_to_upload:
            logger.warning(f"Site {site.name} ({site_dir.name}) is not ready_to_upload, skipping")
            report.skipped_sites.append(site_dir.name)
            return

        for session_dir in self.list_session_dirs(site_dir):
            report.sessions.append(self.process_session(site, descriptor_path, session_dir))

    def run(self, root: Path) -> RunReport:
        """Upload everything under `root` that is not in a manifest yet"""
        report = RunReport()
        for site_dir in self.list_site_dirs(root):
            self.process_site(site_dir, report)

        logger.info(
            f"🏁 Run finished: {report.uploaded_count} uploaded, "
            f"{report.failed_count} failed across {len(report.sessions)} session(s)"
        )
        return report

    # Read-only views

    def session_status(self, site: Site, session_dir: Path) -> SessionStatus:
        session = describe_session(Path(session_dir), self.config.device.name)
        path = self.manifest_path(session.path)
        if manifest_store.exists(path):
            manifest = manifest_store.load(path)
        else:
            manifest = manifest_store.create_empty(session.identifier)

        candidates = self.list_upload_candidates(session.path)
        return SessionStatus(
            site=site.name,
            folder_name=session.folder_name,
            identifier=session.identifier,
            uploaded=len(manifest.files),
            pending=manifest_store.pending_files(manifest, candidates),
            complete=manifest_store.is_session_complete(manifest, candidates)
        )

    def status(self, root: Path) -> StatusReport:
        """Report progress without prompting or uploading"""
        report = StatusReport()
        for site_dir in self.list_site_dirs(root):
            descriptor_path = site_dir / self.settings.SITE_FILENAME
            if not descriptor_path.is_file():
                report.unprepared_sites.append(site_dir.name)
                continue

            site = load_site(descriptor_path)
            if not site.ready_to_upload:
                report.not_ready_sites.append(site_dir.name)

            for session_dir in self.list_session_dirs(site_dir):
                report.sessions.append(self.session_status(site, session_dir))
        return report

    def prepare(self, root: Path) -> List[Path]:
        """Create any missing site descriptors; returns the ones created"""
        created = []
        for site_dir in self.list_site_dirs(root):
            descriptor_path = site_dir / self.settings.SITE_FILENAME
            if descriptor_path.is_file():
                continue
            resolve_site(site_dir, self.prompter, self.settings.SITE_FILENAME)
            created.append(descriptor_path)
        return created
