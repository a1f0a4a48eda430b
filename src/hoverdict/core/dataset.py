# src/hoverdict/core/dataset.py
"""
Fetch the ECDICT csv once and keep it in the storage directory.

The file is never re-downloaded while it exists.
"""

from pathlib import Path

import httpx
from rich.console import Console

from hoverdict.config import DATASET_LABEL, DATASET_NAME, DATASET_URL, DOWNLOAD_TIMEOUT


console = Console(stderr=True)


class DownloadError(RuntimeError):
    pass


def download(dest: Path, url: str, name: str, client: httpx.Client) -> None:
    """Stream `url` into `dest`. Raises DownloadError on a non-2xx response."""
    part = dest.with_name(dest.name + ".part")
    with console.status(f"Downloading {name}..."):
        try:
            with client.stream("GET", url) as resp:
                if not resp.is_success:
                    raise DownloadError(f"Download failed: {url} ({resp.status_code})")
                with part.open("wb") as f:
                    for chunk in resp.iter_bytes():
                        f.write(chunk)
        except BaseException:
            part.unlink(missing_ok=True)
            raise
    part.replace(dest)


def ensure_dataset(
    storage_dir: str | Path,
    url: str = DATASET_URL,
    name: str = DATASET_NAME,
    client: httpx.Client | None = None,
) -> Path:
    """Path to the local dataset, downloading it first if missing."""
    storage_dir = Path(storage_dir)
    storage_dir.mkdir(parents=True, exist_ok=True)

    dest = storage_dir / name
    if dest.exists():
        return dest

    if client is not None:
        download(dest, url, DATASET_LABEL, client)
    else:
        with httpx.Client(timeout=DOWNLOAD_TIMEOUT, follow_redirects=True) as c:
            download(dest, url, DATASET_LABEL, c)

    print(f"✓ Saved {DATASET_LABEL} to {dest}")
    return dest
