"""Services module exports"""
from swift_uploader.services.identifier import derive_identifier, session_date, dotted_date
from swift_uploader.services.metadata import build_metadata_headers, format_header_lines
from swift_uploader.services.transport import ArchiveTransport
from swift_uploader.services.prompt import Prompter, ConsolePrompter, ScriptedPrompter
from swift_uploader.services.site import load_site, save_site, resolve_site
from swift_uploader.services.config_loader import load_swift_config
from swift_uploader.services.orchestrator import SessionOrchestrator

__all__ = [
    "derive_identifier",
    "session_date",
    "dotted_date",
    "build_metadata_headers",
    "format_header_lines",
    "ArchiveTransport",
    "Prompter",
    "ConsolePrompter",
    "ScriptedPrompter",
    "load_site",
    "save_site",
    "resolve_site",
    "load_swift_config",
    "SessionOrchestrator",
]
