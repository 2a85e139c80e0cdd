"""
Command line entry point

    swift-uploader upload <root>    upload every session not fully archived
    swift-uploader status <root>    show which sessions still have files pending
    swift-uploader prepare <root>   create missing site.toml files
    swift-uploader test <root>      check the archive keys with a test upload
"""
import logging
import sys
from pathlib import Path

from .core import SwiftUploaderError, UploadFailure, settings
from .services import (
    ArchiveTransport,
    ConsolePrompter,
    SessionOrchestrator,
    load_swift_config,
)

logger = logging.getLogger("swift_uploader")

COMMANDS = ("upload", "status", "prepare", "test")


def print_usage():
    print("Usage:")
    print("  Upload sessions:       swift-uploader upload <root>")
    print("  Show progress:         swift-uploader status <root>")
    print("  Create site.toml:      swift-uploader prepare <root>")
    print("  Check archive keys:    swift-uploader test <root>")


def build_orchestrator(root: Path, prompter=None) -> SessionOrchestrator:
    prompter = prompter or ConsolePrompter()
    config = load_swift_config(root / settings.SWIFT_CONFIG_FILENAME, prompter)
    transport = ArchiveTransport(
        config.archive_org.access_key,
        config.archive_org.secret_key,
        base_url=settings.ARCHIVE_S3_URL,
        timeout=settings.UPLOAD_TIMEOUT
    )
    return SessionOrchestrator(config, transport, prompter, settings)


def print_status(orchestrator: SessionOrchestrator, root: Path) -> None:
    report = orchestrator.status(root)
    for name in report.unprepared_sites:
        print(f"MISSING: {root / name / settings.SITE_FILENAME}")
    for name in report.not_ready_sites:
        print(f"NOT READY: {name}")
    for session in report.sessions:
        mark = "✓" if session.complete else "…"
        print(
            f"{mark} {session.identifier:<20} {session.site:<30} "
            f"{session.uploaded} uploaded, {len(session.pending)} pending"
        )


def check_connection(orchestrator: SessionOrchestrator) -> int:
    try:
        identifier = orchestrator.check_connection()
    except UploadFailure as e:
        print(f"✗ Connection test failed: {e}")
        if e.body:
            print(e.body)
        return 1
    print(f"✓ Connection test upload to {identifier} succeeded")
    return 0


def run(argv) -> int:
    if len(argv) != 2 or argv[0] not in COMMANDS:
        print_usage()
        return 1

    command, root = argv[0], Path(argv[1])
    if not root.is_dir():
        print(f"✗ Not a directory: {root}")
        return 1

    try:
        orchestrator = build_orchestrator(root)
        if command == "upload":
            report = orchestrator.run(root)
            return 1 if report.failed_count else 0
        if command == "status":
            print_status(orchestrator, root)
            return 0
        if command == "test":
            return check_connection(orchestrator)
        for path in orchestrator.prepare(root):
            print(f"✓ Created {path}")
        return 0
    except SwiftUploaderError as e:
        logger.error(f"✗ {e}")
        return 1


def main():
    """CLI for the uploader."""
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
