"""
Pydantic schemas for the run configuration (swift.toml)
"""
from typing import List
from pydantic import BaseModel, Field


class Device(BaseModel):
    """Recorder the sessions came from"""
    name: str = Field(..., description="Device name, used as the identifier prefix")


class ArchiveOrg(BaseModel):
    """Archive account and item defaults"""
    access_key: str
    secret_key: str
    creator: str
    subject_tags: List[str] = Field(default_factory=list, description="Base subject tags, emitted before site tags")
    collection_id: str
    license_url: str
    base_description: str = ""
    test_item: bool = Field(False, description="Route every upload to the test collection")


class SwiftConfig(BaseModel):
    """Whole swift.toml document"""
    device: Device
    archive_org: ArchiveOrg
