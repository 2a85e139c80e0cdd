"""Core module exports"""
from .config import Settings, settings
from .errors import (
    SwiftUploaderError,
    ConfigurationMissing,
    ConfigurationMalformed,
    ParseError,
    ManifestCorrupt,
    SiteDescriptorMalformed,
    FileSystemError,
    InputClosed,
    UploadFailure,
)

__all__ = [
    "Settings",
    "settings",
    "SwiftUploaderError",
    "ConfigurationMissing",
    "ConfigurationMalformed",
    "ParseError",
    "ManifestCorrupt",
    "SiteDescriptorMalformed",
    "FileSystemError",
    "InputClosed",
    "UploadFailure",
]
