from __future__ import annotations

from pathlib import Path

from brewship.services.release.config import LICENSE_CANDIDATES
from brewship.services.release.model import LicenseType

_MIT_MARKERS = (
    "MIT License",
    "Permission is hereby granted, free of charge",
)


def classify_license_text(text: str) -> LicenseType:
    if any(marker in text for marker in _MIT_MARKERS):
        return LicenseType.MIT
    if "Apache License" in text and "Version 2.0" in text:
        return LicenseType.APACHE_2
    # Header is upper case in the official text; the LGPL header differs.
    if "GNU GENERAL PUBLIC LICENSE" in text:
        if "Version 3" in text:
            return LicenseType.GPL_3
        if "Version 2" in text:
            return LicenseType.GPL_2
    return LicenseType.UNKNOWN


def find_license_file(repo_root: Path) -> Path | None:
    for name in LICENSE_CANDIDATES:
        path = repo_root / name
        if path.is_file():
            return path
    return None


def detect_license(repo_root: Path) -> LicenseType:
    """License of the project, judged from the first candidate file only."""
    path = find_license_file(repo_root)
    if path is None:
        return LicenseType.UNKNOWN

    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return LicenseType.UNKNOWN
    return classify_license_text(text)
