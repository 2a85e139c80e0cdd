"""
Site descriptors (site.toml)

A descriptor is written once, the first time a site directory is seen, and is
the only place site metadata is edited afterwards.
"""
import logging
import tomllib
from pathlib import Path

import tomli_w
from pydantic import ValidationError

from ..core.errors import FileSystemError, SiteDescriptorMalformed
from ..schemas import Site
from .prompt import Prompter

logger = logging.getLogger(__name__)


def load_site(path: Path) -> Site:
    path = Path(path)
    try:
        with open(path, "rb") as f:
            document = tomllib.load(f)
        return Site.model_validate(document)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise SiteDescriptorMalformed(f"Site descriptor {path} is not valid TOML: {e}") from e
    except ValidationError as e:
        raise SiteDescriptorMalformed(f"Site descriptor {path} is malformed: {e}") from e
    except OSError as e:
        raise FileSystemError(f"Cannot read site descriptor {path}: {e}") from e


def save_site(site: Site, path: Path) -> None:
    try:
        with open(path, "wb") as f:
            tomli_w.dump(site.model_dump(), f)
    except OSError as e:
        raise FileSystemError(f"Cannot write site descriptor {path}: {e}") from e


def split_tags(raw: str) -> list:
    """Tags are entered ';' separated since a tag may contain commas"""
    return [tag.strip() for tag in raw.split(";") if tag.strip()]


def ask_site(prompter: Prompter, site_dir: Path) -> Site:
    name = prompter.ask(f"Site name for `{site_dir.name}`:").strip() or site_dir.name
    tags = split_tags(prompter.ask("Subject tags for this site (separate with ';'):"))
    description = prompter.ask("Site description:").strip()
    return Site(name=name, subject_tags=tags, description=description, ready_to_upload=True)


def resolve_site(site_dir: Path, prompter: Prompter, descriptor_filename: str) -> Site:
    """
    Load the site descriptor, creating it interactively when missing.

    A freshly created descriptor is read back from disk so the returned value
    is exactly what was persisted.
    """
    path = Path(site_dir) / descriptor_filename
    if path.is_file():
        logger.info(f"Found site config in: {path}")
        return load_site(path)

    logger.warning(f"MISSING: {path}, asking for site details")
    save_site(ask_site(prompter, Path(site_dir)), path)
    logger.info(f"✅ Created {path}")
    return load_site(path)
