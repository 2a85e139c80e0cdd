"""
Item metadata as Internet Archive S3 headers

Every upload in a session (the site descriptor and each recording) carries
the same header set; only the request body differs.

Standard archive fields use `x-archive-meta-`. Fields this tool adds are kept
under `x-archive-meta-swift-` so they never shadow a reserved archive field.
"""
from typing import List, Tuple
from urllib.parse import quote

from ..core.config import settings as default_settings
from ..schemas import Site, SwiftConfig
from .identifier import dotted_date

META_PREFIX = "x-archive-meta-"
CUSTOM_META_PREFIX = "x-archive-meta-swift-"
MEDIA_TYPE = "audio"
TITLE_SUFFIX = "Soundscape"
CONNECTION_TEST_FILENAME = "connection-test.txt"

Header = Tuple[str, str]


def encode_header_value(value: str) -> str:
    """
    Printable ASCII passes through untouched. Anything else (accents,
    newlines) is sent in the archive's `uri(...)` form.
    """
    if value.isascii() and value.isprintable():
        return value
    return f"uri({quote(value, safe='')})"


def build_title(config: SwiftConfig, site: Site, date: str) -> str:
    return " ".join([config.device.name, dotted_date(date), site.name, TITLE_SUFFIX])


def build_description(config: SwiftConfig, site: Site) -> str:
    return config.archive_org.base_description + site.description


def build_subject(config: SwiftConfig, site: Site) -> str:
    """Base tags first, then site tags, ';' separated"""
    subject = ""
    for tag in list(config.archive_org.subject_tags) + list(site.subject_tags):
        subject += f"{tag};"
    return subject[:-1] if subject.endswith(";") else subject


def select_collection(config: SwiftConfig, test_collection: str) -> str:
    if config.archive_org.test_item:
        return test_collection
    return config.archive_org.collection_id


def build_metadata_headers(
    config: SwiftConfig,
    site: Site,
    date: str,
    test_collection: str = None,
    scanner: str = None,
    project_url: str = None
) -> List[Header]:
    """
    Ordered (name, value) pairs describing one session item.

    Args:
        config: Run configuration
        site: Site the session belongs to
        date: Session date as found in the folder name (YYYY-MM-DD)
        test_collection: Collection used when the config is in test mode
        scanner: Value of the custom scanner field
        project_url: Value of the custom project URL field

    Returns:
        List of header name/value tuples, ready for the transport
    """
    test_collection = test_collection or default_settings.ARCHIVE_TEST_COLLECTION
    scanner = scanner or default_settings.SCANNER_NAME
    project_url = project_url or default_settings.PROJECT_URL

    fields = [
        (f"{META_PREFIX}mediatype", MEDIA_TYPE),
        (f"{META_PREFIX}collection", select_collection(config, test_collection)),
        (f"{META_PREFIX}title", build_title(config, site, date)),
        (f"{META_PREFIX}description", build_description(config, site)),
        (f"{META_PREFIX}subject", build_subject(config, site)),
        (f"{META_PREFIX}creator", config.archive_org.creator),
        (f"{META_PREFIX}licenseurl", config.archive_org.license_url),
        (f"{META_PREFIX}date", date),
        (f"{CUSTOM_META_PREFIX}scanner", scanner),
        (f"{CUSTOM_META_PREFIX}projecturl", project_url),
        (f"{CUSTOM_META_PREFIX}deviceprefix", config.device.name),
        (f"{CUSTOM_META_PREFIX}location", site.name),
    ]

    return [(name, encode_header_value(value)) for name, value in fields]


def build_connection_test_headers(config: SwiftConfig, test_collection: str) -> List[Header]:
    """Headers for the throwaway key-check item, always in the test collection"""
    fields = [
        (f"{META_PREFIX}mediatype", "texts"),
        (f"{META_PREFIX}collection", test_collection),
        (f"{META_PREFIX}title", f"{config.device.name} connection test"),
        (f"{META_PREFIX}creator", config.archive_org.creator),
    ]
    return [(name, encode_header_value(value)) for name, value in fields]


def format_header_lines(headers: List[Header]) -> List[str]:
    """`name:value` lines, the way the archive documents its headers"""
    return [f"{name}:{value}" for name, value in headers]
