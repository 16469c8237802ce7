import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

load_dotenv()

UNIVERSITY_CATALOG = os.getenv("UNIVERSITY_CATALOG", "catalog.json")
EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")
LOG_DIR = os.getenv("LOG_DIR", "logs")


def get_catalog_path(override: Optional[Union[str, Path]] = None) -> Path:
    """Resolve the catalog file, preferring an explicit path over the environment."""
    if override:
        return Path(override)
    return Path(os.getenv("UNIVERSITY_CATALOG", UNIVERSITY_CATALOG))


def get_export_dir() -> Path:
    return Path(os.getenv("EXPORT_DIR", EXPORT_DIR))
