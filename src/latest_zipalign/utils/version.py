"""Dotted-numeric version comparison for build-tools directory names."""

import re
from typing import NamedTuple

_VALID_RE = re.compile(r"^\d[0-9A-Za-z._-]*$")
_LEADING_DIGITS_RE = re.compile(r"^(\d+)(.*)$")
_IDENTIFIER_RE = re.compile(r"\d+|[A-Za-z]+")

# Pre-release identifiers: numeric ones sort below alphanumeric ones
_NUMERIC = 0
_ALPHA = 1


class VersionKey(NamedTuple):
    """Sortable key for a version directory name.

    Tuple ordering gives the comparison rule directly: unparseable names sort
    first, then numeric components (trailing zeros stripped, so ``30`` and
    ``30.0.0`` are equal), then pre-releases before the matching release,
    then pre-release identifiers compared in order.
    """

    parseable: bool
    numbers: tuple[int, ...] = ()
    is_release: bool = True
    pre_release: tuple[tuple[int, int, str], ...] = ()


UNPARSEABLE = VersionKey(parseable=False)


def _strip_trailing_zeros(numbers: list[int]) -> tuple[int, ...]:
    while numbers and numbers[-1] == 0:
        numbers.pop()
    return tuple(numbers)


def _pre_release_identifiers(text: str) -> tuple[tuple[int, int, str], ...]:
    """Split a pre-release part into alternating alpha and numeric identifiers.

    "rc1" becomes ("rc", 1) and "beta.2" becomes ("beta", 2). Labels compare
    case-insensitively, numbers numerically.
    """
    identifiers = []
    for token in _IDENTIFIER_RE.findall(text):
        if token.isdigit():
            identifiers.append((_NUMERIC, int(token), ""))
        else:
            identifiers.append((_ALPHA, 0, token.lower()))
    return tuple(identifiers)


def parse_version(text: str) -> VersionKey:
    """Parse a version directory name into a comparable key.

    The release part is the run of leading numeric components. Whatever
    follows it (``34.0.0-rc3``, ``30.0.0rc1``, ``34.0.0.rc3``, ``1.0-rc.2``)
    is the pre-release part.

    Args:
        text: Directory name such as "34.0.0" or "34.0.0-rc3".

    Returns:
        VersionKey for the name. Names that do not start with a digit, or
        contain empty components, yield ``UNPARSEABLE``.
    """
    text = text.strip()
    if not _VALID_RE.match(text):
        return UNPARSEABLE

    components = text.split(".")
    if any(not component for component in components):
        return UNPARSEABLE

    numbers: list[int] = []
    pre_release = ""
    for i, component in enumerate(components):
        if component.isdigit():
            numbers.append(int(component))
            continue

        match = _LEADING_DIGITS_RE.match(component)
        if match is not None:
            numbers.append(int(match.group(1)))
            component = match.group(2)
        pre_release = ".".join([component, *components[i + 1 :]])
        break

    if not pre_release:
        return VersionKey(True, _strip_trailing_zeros(numbers))

    identifiers = _pre_release_identifiers(pre_release)
    if not identifiers:
        return UNPARSEABLE
    return VersionKey(True, _strip_trailing_zeros(numbers), False, identifiers)


def compare_versions(left: str, right: str) -> int:
    """Compare two version strings.

    Returns:
        -1 if left < right, 0 if equal, 1 if left > right.
    """
    left_key = parse_version(left)
    right_key = parse_version(right)
    if left_key < right_key:
        return -1
    if left_key > right_key:
        return 1
    return 0
