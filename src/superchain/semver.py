"""Semantic version helpers for implementation keys.

Keys may be stored with or without the ``v`` marker. Everything here
canonicalizes first so callers never have to care which form they hold.
"""

import re
from typing import Optional, Tuple

import semantic_version

from constants import Constants

# "1" and "1.2" are accepted as shorthand for "1.0.0" and "1.2.0".
_SHORTHAND = re.compile(r"^\d+(\.\d+)?$")


def canonicalize(version: str) -> str:
    """Return ``version`` with the marker prefix, adding it when absent."""
    if not version.startswith(Constants.SEMVER_PREFIX):
        version = Constants.SEMVER_PREFIX + version
    return version


def strip_prefix(version: str) -> str:
    """Remove a single leading marker prefix, if present."""
    if version.startswith(Constants.SEMVER_PREFIX):
        return version[len(Constants.SEMVER_PREFIX):]
    return version


def parse(version: str) -> Optional[semantic_version.Version]:
    """Parse a version string in either prefix form.

    Args:
        version: Version string such as "1.2.3", "v1.2.3-rc.1" or "v1.2".

    Returns:
        Parsed version, or None when the string is not valid semver
    """
    raw = strip_prefix(canonicalize(version))
    if _SHORTHAND.match(raw):
        raw = raw + ".0" * (2 - raw.count("."))
    try:
        return semantic_version.Version(raw)
    except ValueError:
        return None


def is_valid(version: str) -> bool:
    """Return True when ``version`` canonicalizes to a valid semantic version."""
    return parse(version) is not None


def _precedence(version: semantic_version.Version) -> Tuple:
    # Build metadata does not take part in precedence.
    if not version.prerelease:
        return (version.major, version.minor, version.patch, 1, ())
    identifiers = tuple(
        (0, int(part), "") if part.isdigit() else (1, 0, part)
        for part in version.prerelease
    )
    return (version.major, version.minor, version.patch, 0, identifiers)


def compare(a: str, b: str) -> int:
    """Compare two version strings by semver precedence.

    An invalid version is considered lower than every valid one and equal
    to any other invalid version.

    Returns:
        -1, 0 or 1
    """
    pa, pb = parse(a), parse(b)
    if pa is None or pb is None:
        if pa is None and pb is None:
            return 0
        return -1 if pa is None else 1
    ka, kb = _precedence(pa), _precedence(pb)
    if ka == kb:
        return 0
    return -1 if ka < kb else 1


def sort_key(version: str) -> Tuple:
    """Ascending sort key; invalid versions first, ties broken by the string."""
    parsed = parse(version)
    if parsed is None:
        return (0, (), version)
    return (1, _precedence(parsed), version)
