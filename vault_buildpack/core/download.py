"""
Network download for release archives.

Downloads are streamed to disk in fixed-size chunks. A failed transfer is
never retried: any connection error, non-success status or truncated body
raises TransferFailure and aborts the build.
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import requests
from requests.exceptions import RequestException

from vault_buildpack.core.exceptions import FilesystemFailure, TransferFailure

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


@dataclass
class DownloadProgress:
    """Progress information for a download."""

    bytes_downloaded: int
    total_bytes: int
    elapsed_seconds: float

    @property
    def percentage(self) -> float:
        if self.total_bytes <= 0:
            return 0.0
        return self.bytes_downloaded / self.total_bytes * 100

    def __str__(self) -> str:
        return format_progress(self)


def download_file(
    url: str,
    destination: Path,
    timeout: float = 300,
    progress_callback: Optional[Callable[[DownloadProgress], None]] = None,
) -> Path:
    """
    Download file from URL to destination.

    Args:
        url: URL to download from
        destination: Local path to save file (overwritten if present)
        timeout: Connect/read timeout in seconds
        progress_callback: Optional callback for progress updates

    Returns:
        Path to downloaded file

    Raises:
        TransferFailure: If the request fails, returns a non-success status,
            or the body is shorter than announced
        FilesystemFailure: If the destination cannot be written
        ValueError: If URL or destination is invalid

    Example:
        >>> download_file(
        ...     "https://releases.hashicorp.com/vault/1.2.3/vault_1.2.3_linux_amd64.zip",
        ...     Path("/tmp/vault.zip"),
        ... )
    """
    if not url:
        raise ValueError("URL cannot be empty")

    if not destination:
        raise ValueError("Destination path cannot be empty")

    destination = Path(destination)
    logger.debug(f"Downloading from {url}")

    try:
        with requests.get(
            url, stream=True, timeout=timeout, allow_redirects=True
        ) as response:
            response.raise_for_status()
            downloaded, expected = _stream_to_file(
                response, destination, progress_callback
            )
    except RequestException as e:
        raise TransferFailure(f"Download of {url} failed: {e}") from e
    except OSError as e:
        raise FilesystemFailure(f"Could not write {destination}: {e}") from e

    if expected is not None and downloaded != expected:
        raise TransferFailure(
            f"Download of {url} truncated: received {downloaded} of {expected} bytes"
        )

    logger.debug(f"Download complete: {destination} ({downloaded} bytes)")
    return destination


def _stream_to_file(
    response: requests.Response,
    destination: Path,
    progress_callback: Optional[Callable[[DownloadProgress], None]],
) -> tuple[int, Optional[int]]:
    """
    Write a streamed response body to destination.

    Returns:
        Tuple of (bytes written, expected byte count or None if unknown)
    """
    expected = None
    content_length = response.headers.get("content-length")
    # Content-Length counts encoded bytes, iter_content yields decoded ones
    if content_length and not response.headers.get("content-encoding"):
        try:
            expected = int(content_length)
        except ValueError:
            logger.debug(f"Ignoring malformed Content-Length: {content_length!r}")

    downloaded = 0
    start_time = time.time()

    with open(destination, "wb") as f:
        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
            if not chunk:
                continue
            f.write(chunk)
            downloaded += len(chunk)

            if progress_callback:
                progress_callback(
                    DownloadProgress(
                        bytes_downloaded=downloaded,
                        total_bytes=expected or 0,
                        elapsed_seconds=time.time() - start_time,
                    )
                )

    return downloaded, expected


def format_progress(progress: DownloadProgress) -> str:
    """
    Format progress for display.

    Example:
        >>> print(format_progress(DownloadProgress(52428800, 104857600, 2.0)))
        50.0/100.0 MB (50.0%)
    """
    mb_downloaded = progress.bytes_downloaded / 1024 / 1024

    if progress.total_bytes > 0:
        mb_total = progress.total_bytes / 1024 / 1024
        return f"{mb_downloaded:.1f}/{mb_total:.1f} MB ({progress.percentage:.1f}%)"
    return f"{mb_downloaded:.1f} MB"
