"""
Pydantic schema for a site descriptor (site.toml)
"""
from typing import List
from pydantic import BaseModel, Field


class Site(BaseModel):
    """Recording location shared by every session below it"""
    name: str
    subject_tags: List[str] = Field(default_factory=list, description="Site tags, emitted after base tags")
    description: str = ""
    ready_to_upload: bool = False
