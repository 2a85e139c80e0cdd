"""
Archive identifiers and dates derived from session folder names

Folder names follow the recorder's `<DEVICE>_<YYYY-MM-DD>[_...]` layout.
Everything here is pure, so re-running over the same tree always targets the
same archive items.
"""
from pathlib import Path

from ..schemas import Session


def session_date(folder_name: str) -> str:
    """Second underscore-delimited segment of the folder name, or ''"""
    parts = folder_name.split("_")
    return parts[1] if len(parts) > 1 else ""


def derive_identifier(folder_name: str, device_name: str) -> str:
    """
    Archive identifier for a session folder.

    Example: ("SWX_2019-01-16", "SWX") -> "SWX20190116"
    """
    return device_name + session_date(folder_name).replace("-", "")


def dotted_date(date: str) -> str:
    """2019-01-16 -> 2019.01.16, used in item titles"""
    return date.replace("-", ".")


def describe_session(session_dir: Path, device_name: str) -> Session:
    folder_name = session_dir.name
    return Session(
        path=session_dir,
        folder_name=folder_name,
        identifier=derive_identifier(folder_name, device_name),
        date=session_date(folder_name)
    )


def connection_test_identifier(device_name: str) -> str:
    """Throwaway item used to check keys, never a real session"""
    return f"{device_name}-swift-uploader-test"
