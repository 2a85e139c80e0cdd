"""
Schemas for session manifests and run reports
"""
from pathlib import Path
from typing import List
from pydantic import BaseModel, Field


class Manifest(BaseModel):
    """Files of one session already confirmed uploaded"""
    identifier: str
    update: bool = True
    files: List[str] = Field(default_factory=list)


class Session(BaseModel):
    """One leaf recording directory"""
    path: Path
    folder_name: str
    identifier: str
    date: str


class SessionReport(BaseModel):
    """Outcome of processing one session"""
    identifier: str
    uploaded: List[str] = Field(default_factory=list)
    skipped: List[str] = Field(default_factory=list)
    failed: List[str] = Field(default_factory=list)


class RunReport(BaseModel):
    """Outcome of a whole upload run"""
    sessions: List[SessionReport] = Field(default_factory=list)
    skipped_sites: List[str] = Field(default_factory=list)

    @property
    def uploaded_count(self) -> int:
        return sum(len(s.uploaded) for s in self.sessions)

    @property
    def failed_count(self) -> int:
        return sum(len(s.failed) for s in self.sessions)


class SessionStatus(BaseModel):
    """Read-only view of a session's progress"""
    site: str
    folder_name: str
    identifier: str
    uploaded: int
    pending: List[str] = Field(default_factory=list)
    complete: bool


class StatusReport(BaseModel):
    """Read-only view of a whole recordings tree"""
    sessions: List[SessionStatus] = Field(default_factory=list)
    unprepared_sites: List[str] = Field(default_factory=list)
    not_ready_sites: List[str] = Field(default_factory=list)
