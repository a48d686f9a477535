from pathlib import Path

from repofetch.exceptions import DirectoryUnreadableError
from repofetch.logging import get_logger

from .interfaces import LicenseClassifier
from .models import UNKNOWN

LICENSE_FILES = ("LICENSE", "LICENCE", "COPYING")

logger = get_logger("license")


def is_license_file(file_name: str) -> bool:
    return any(file_name.startswith(name) for name in LICENSE_FILES)


def detect_project_license(directory: Path, classifier: LicenseClassifier) -> str:
    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        raise DirectoryUnreadableError(directory) from exc

    licenses: set[str] = set()
    for entry in entries:
        if not is_license_file(entry.name) or not entry.is_file():
            continue
        try:
            contents = entry.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.debug("skipping unreadable license file %s: %s", entry, exc)
            continue
        license_id = classifier.classify(contents)
        if license_id:
            licenses.add(license_id)

    if not licenses:
        return UNKNOWN
    return ", ".join(sorted(licenses))
