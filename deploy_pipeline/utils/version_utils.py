"""Release version parsing utilities"""

from typing import List

from ..constants import VERSION_QUALIFIER_SEPARATOR
from ..exceptions import VersionFormatError
from ..models.release import ParsedVersion


def parse_version(version_str: str) -> ParsedVersion:
    """
    Parse release version string

    Grammar is ``<base>[+<qualifier>]``; both parts are opaque, non-empty
    and may not contain '+'.

    Args:
        version_str: Version string, e.g. "1+capi" or "3421.11"

    Returns:
        ParsedVersion

    Raises:
        VersionFormatError: If the string does not follow the grammar
    """
    if not isinstance(version_str, str):
        raise VersionFormatError(str(version_str))

    parts = version_str.split(VERSION_QUALIFIER_SEPARATOR)
    if len(parts) > 2 or not all(parts):
        raise VersionFormatError(version_str)

    if len(parts) == 1:
        return ParsedVersion(base=parts[0])
    return ParsedVersion(base=parts[0], qualifier=parts[1])


def is_valid_version(version: str) -> bool:
    """
    Check if version string is valid

    Args:
        version: Version string

    Returns:
        True if valid
    """
    try:
        parse_version(version)
    except VersionFormatError:
        return False
    return True


def compare_versions(version1: str, version2: str) -> int:
    """
    Compare two versions

    Args:
        version1: First version
        version2: Second version

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        VersionFormatError: If either version is malformed
    """
    v1 = parse_version(version1)
    v2 = parse_version(version2)

    if v1 < v2:
        return -1
    elif v1 > v2:
        return 1
    return 0


def sort_versions(versions: List[str], reverse: bool = False) -> List[str]:
    """
    Sort version strings; malformed versions go last in input order

    Args:
        versions: List of version strings
        reverse: Sort valid versions in descending order

    Returns:
        Sorted list
    """
    valid = [v for v in versions if is_valid_version(v)]
    invalid = [v for v in versions if not is_valid_version(v)]
    return sorted(valid, key=parse_version, reverse=reverse) + invalid
