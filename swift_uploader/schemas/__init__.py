"""Schemas module exports"""
from swift_uploader.schemas.config import Device, ArchiveOrg, SwiftConfig
from swift_uploader.schemas.site import Site
from swift_uploader.schemas.manifest import (
    Manifest,
    Session,
    SessionReport,
    RunReport,
    SessionStatus,
    StatusReport
)

__all__ = [
    "Device",
    "ArchiveOrg",
    "SwiftConfig",
    "Site",
    "Manifest",
    "Session",
    "SessionReport",
    "RunReport",
    "SessionStatus",
    "StatusReport"
]
