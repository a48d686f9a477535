import re

from repofetch.summary.interfaces import LicenseClassifier

# Checked in order; the more specific licenses come before the ones whose
# phrases they also contain (LGPL/AGPL before GPL, BSD-3 before BSD-2).
_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Apache-2.0", ("apache license", "version 2.0")),
    ("AGPL-3.0", ("gnu affero general public license", "version 3")),
    ("LGPL-3.0", ("gnu lesser general public license", "version 3")),
    ("LGPL-2.1", ("gnu lesser general public license", "version 2.1")),
    ("GPL-3.0", ("gnu general public license", "version 3")),
    ("GPL-2.0", ("gnu general public license", "version 2")),
    ("MPL-2.0", ("mozilla public license", "2.0")),
    ("BSD-3-Clause", ("redistribution and use in source and binary forms", "neither the name")),
    ("BSD-2-Clause", ("redistribution and use in source and binary forms",)),
    ("MIT", ("permission is hereby granted, free of charge", "the above copyright notice")),
    ("ISC", ("permission to use, copy, modify, and/or distribute this software",)),
    ("Unlicense", ("this is free and unencumbered software released into the public domain",)),
)

_WHITESPACE = re.compile(r"\s+")


def normalize(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip().lower()


class KeywordLicenseClassifier(LicenseClassifier):
    __slots__ = ()

    def classify(self, text: str) -> str | None:
        normalized = normalize(text)
        if not normalized:
            return None
        for license_id, phrases in _RULES:
            if all(phrase in normalized for phrase in phrases):
                return license_id
        return None
