# route_request/localization.py
# Purpose: Locale negotiation for the `locale` argument (explicit value > Accept-Language > default).

from __future__ import annotations

import re
from typing import Optional, Protocol

_TAG = re.compile(r"^[A-Za-z]{2,3}(?:[-_][A-Za-z0-9]{2,8})*$")


class LocaleNegotiator(Protocol):
    def __call__(self, raw: Optional[str], *, accept_language: Optional[str], default: str) -> str: ...


def normalize_locale_tag(raw: str) -> str:
    """
    "fi_fi" -> "fi-FI", "en" -> "en", "zh_hant_tw" -> "zh-Hant-TW".
    Raises ValueError for anything that is not a language tag.
    """
    s = raw.strip()
    if not _TAG.match(s):
        raise ValueError(f"'{raw}' is not a language tag")

    parts = re.split(r"[-_]", s)
    out = [parts[0].lower()]
    for p in parts[1:]:
        if len(p) == 4 and p.isalpha():
            out.append(p.title())
        elif len(p) in (2, 3):
            out.append(p.upper())
        else:
            out.append(p.lower())
    return "-".join(out)


def parse_accept_language(header: Optional[str]) -> list[str]:
    """Return language tags from an Accept-Language header, best first. Bad entries are skipped."""
    if not header:
        return []

    weighted: list[tuple[float, int, str]] = []
    for index, item in enumerate(header.split(",")):
        tag, _, params = item.strip().partition(";")
        tag = tag.strip()
        if not tag or tag == "*":
            continue
        q = 1.0
        if params.strip().startswith("q="):
            try:
                q = float(params.strip()[2:])
            except ValueError:
                continue
        if q <= 0:
            continue
        try:
            weighted.append((-q, index, normalize_locale_tag(tag)))
        except ValueError:
            continue
    return [tag for _, _, tag in sorted(weighted)]


def negotiate_locale(raw: Optional[str], *, accept_language: Optional[str], default: str) -> str:
    if raw is not None and not isinstance(raw, str):
        raise TypeError(f"locale must be a string, got {type(raw).__name__}")
    if raw and raw.strip():
        return normalize_locale_tag(raw)

    preferred = parse_accept_language(accept_language)
    if preferred:
        return preferred[0]
    return normalize_locale_tag(default)
