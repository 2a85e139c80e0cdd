"""
Error taxonomy for the uploader

Everything except UploadFailure is fatal for a run. UploadFailure is raised
per file and the orchestrator decides whether to carry on with the session.
"""
from typing import Optional


class SwiftUploaderError(Exception):
    """Base class for all uploader errors"""


class ConfigurationMissing(SwiftUploaderError):
    """The run configuration file does not exist and was not created"""


class ConfigurationMalformed(SwiftUploaderError):
    """The run configuration file could not be parsed or validated"""


class ParseError(SwiftUploaderError):
    """A persisted TOML document is not well formed"""


class ManifestCorrupt(ParseError):
    """A session manifest could not be loaded"""


class SiteDescriptorMalformed(ParseError):
    """A site descriptor could not be loaded"""


class FileSystemError(SwiftUploaderError):
    """Directory or file enumeration failed"""


class InputClosed(SwiftUploaderError):
    """Input ended before a required answer was given"""


class UploadFailure(SwiftUploaderError):
    """A PUT to the archive did not succeed"""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
