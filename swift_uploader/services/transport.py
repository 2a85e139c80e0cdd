"""
HTTP transport for the Internet Archive S3-compatible API

One PUT per file: bucket is the session identifier, object key is the
file's base name, body is streamed from disk.
"""
import logging
import os
from pathlib import Path
from typing import List, Optional, Tuple
from urllib.parse import quote

import requests

from ..core.config import settings as default_settings
from ..core.errors import UploadFailure
from .metadata import format_header_lines

logger = logging.getLogger(__name__)


class ArchiveTransport:
    """Authenticated uploader for single files"""

    def __init__(
        self,
        access_key: str,
        secret_key: str,
        base_url: str = None,
        timeout: float = None,
        session: Optional[requests.Session] = None
    ):
        self.access_key = access_key
        self.secret_key = secret_key
        self.base_url = (base_url or default_settings.ARCHIVE_S3_URL).rstrip("/")
        self.timeout = timeout or default_settings.UPLOAD_TIMEOUT
        self.session = session or requests.Session()

    def authorization(self) -> str:
        return f"LOW {self.access_key}:{self.secret_key}"

    def object_url(self, bucket: str, file_path: Path) -> str:
        return f"{self.base_url}/{bucket}/{quote(Path(file_path).name)}"

    def request_headers(self, headers: List[Tuple[str, str]], content_length: int) -> dict:
        request_headers = {
            "authorization": self.authorization(),
            "x-amz-auto-make-bucket": "1",
        }
        request_headers.update(headers)
        request_headers["Content-Length"] = str(content_length)
        return request_headers

    def put(self, bucket: str, file_path: Path, headers: List[Tuple[str, str]]) -> requests.Response:
        """
        Upload one file.

        Raises:
            UploadFailure: when the file cannot be read, on any transport
                error, or on a non-2xx response
        """
        file_path = Path(file_path)
        url = self.object_url(bucket, file_path)
        try:
            size = os.path.getsize(file_path)
            logger.info(f"📤 PUT {url} ({size / (1024*1024):.2f} MB)")
            logger.debug("Metadata headers:\n" + "\n".join(format_header_lines(headers)))

            with open(file_path, "rb") as body:
                response = self.session.put(
                    url,
                    data=body,
                    headers=self.request_headers(headers, size),
                    timeout=self.timeout
                )
        except requests.RequestException as e:
            raise UploadFailure(f"Upload of {file_path.name} to {bucket} failed: {e}") from e
        except OSError as e:
            raise UploadFailure(f"Cannot read {file_path} for upload: {e}") from e

        if not response.ok:
            logger.error(f"❌ {response.status_code} from archive: {response.text}")
            raise UploadFailure(
                f"Upload of {file_path.name} to {bucket} failed with HTTP {response.status_code}",
                status_code=response.status_code,
                body=response.text
            )

        logger.info(f"✅ Uploaded {file_path.name} to {bucket}")
        return response
