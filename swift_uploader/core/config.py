"""
Process settings for the uploader
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings"""

    # Archive S3 endpoint
    ARCHIVE_S3_URL: str = os.getenv("ARCHIVE_S3_URL", "https://s3.us.archive.org")
    ARCHIVE_TEST_COLLECTION: str = os.getenv("ARCHIVE_TEST_COLLECTION", "test_collection")
    UPLOAD_TIMEOUT: float = float(os.getenv("UPLOAD_TIMEOUT", "300"))

    # Files inside the recordings tree
    SWIFT_CONFIG_FILENAME: str = os.getenv("SWIFT_CONFIG_FILENAME", "swift.toml")
    SITE_FILENAME: str = os.getenv("SITE_FILENAME", "site.toml")
    MANIFEST_FILENAME: str = os.getenv("MANIFEST_FILENAME", "manifest.toml")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Custom metadata attached to every item
    SCANNER_NAME: str = os.getenv("SCANNER_NAME", "swift-uploader 0.1.0")
    PROJECT_URL: str = os.getenv(
        "PROJECT_URL",
        "https://www.birds.cornell.edu/ccb/swift-one/"
    )


settings = Settings()
