"""
Manifest store: the durable record of uploaded files per session

Stored as TOML:

    [manifest]
    identifier = "SWX20190116"
    update = true
    files = ["site.toml", "SWX_20190116_004000.wav"]

The manifest is rewritten after every successful upload, through a temp file
and an atomic rename, so a crash can lose at most the upload in flight.
"""
import logging
import os
import stat
import tempfile
import tomllib
from pathlib import Path
from typing import Iterable, List

import tomli_w
from pydantic import ValidationError

from ..core.errors import FileSystemError, ManifestCorrupt
from ..schemas import Manifest

logger = logging.getLogger(__name__)


def exists(path: Path) -> bool:
    return Path(path).is_file()


def load(path: Path) -> Manifest:
    """Load a manifest; the caller checks existence first"""
    path = Path(path)
    try:
        with open(path, "rb") as f:
            document = tomllib.load(f)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ManifestCorrupt(f"Manifest {path} is not valid TOML: {e}") from e
    except OSError as e:
        raise FileSystemError(f"Cannot read manifest {path}: {e}") from e

    table = document.get("manifest")
    if not isinstance(table, dict):
        raise ManifestCorrupt(f"Manifest {path} has no [manifest] table")

    try:
        return Manifest.model_validate(table)
    except ValidationError as e:
        raise ManifestCorrupt(f"Manifest {path} is malformed: {e}") from e


def create_empty(identifier: str) -> Manifest:
    """Fresh in-memory manifest, nothing is written"""
    return Manifest(identifier=identifier, update=True, files=[])


def contains(manifest: Manifest, file_name: str) -> bool:
    return file_name in manifest.files


def dumps(manifest: Manifest) -> str:
    return tomli_w.dumps({"manifest": manifest.model_dump()})


def _new_file_mode(path: Path) -> int:
    """Mode of the file being replaced, or the umask default for a new one"""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _write_atomically(path: Path, text: str) -> None:
    fd, tmp_path = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        # mkstemp creates 0600
        os.chmod(tmp_path, _new_file_mode(path))
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def save(manifest: Manifest, path: Path) -> None:
    """Atomically replace the manifest file at `path`"""
    path = Path(path)
    try:
        _write_atomically(path, dumps(manifest))
    except OSError as e:
        raise FileSystemError(f"Cannot write manifest {path}: {e}") from e


def append_and_save(manifest: Manifest, file_name: str, path: Path) -> None:
    manifest.files.append(file_name)
    save(manifest, path)
    logger.debug(f"Recorded {file_name} in {path} ({len(manifest.files)} files)")


def pending_files(manifest: Manifest, candidates: Iterable[str]) -> List[str]:
    """Candidates the manifest does not list yet, order preserved"""
    return [name for name in candidates if not contains(manifest, name)]


def is_session_complete(manifest: Manifest, candidates: Iterable[str]) -> bool:
    """
    True when every upload candidate of a session is listed.

    Does not touch `update`; nothing in this tool flips it to false.
    """
    return not pending_files(manifest, candidates)
