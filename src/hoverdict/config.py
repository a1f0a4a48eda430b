"""
Settings. Module-level constants, a few overridable from the environment.
"""

import os
from pathlib import Path


DATASET_NAME = "ecdict.csv"
DATASET_LABEL = "ECDICT"
DATASET_URL = os.environ.get(
    "HOVERDICT_DATASET_URL",
    "https://raw.githubusercontent.com/skywind3000/ECDICT/master/ecdict.csv",
)
DOWNLOAD_TIMEOUT = 120

STORAGE_DIR = Path(os.environ.get("HOVERDICT_STORAGE", Path.home() / ".cache" / "hoverdict"))

BASE_URL = os.environ.get("HOVERDICT_API", "http://localhost:8000/api")


def dataset_path(storage_dir: Path = STORAGE_DIR) -> Path:
    return Path(storage_dir) / DATASET_NAME
