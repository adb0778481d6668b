"""Various utility functions that don't belong anywhere else. Mostly these
deal with matching curve names regardless of how they were written, so that
"IN_CUBIC", "InCubic", "in-cubic" and "in cubic" all read the same."""

import typing

SEPARATORS = (' ', '-', '_')

def equals_ignore_case(s1: str, s2: str) -> bool:
    """Returns True if the two strings are equal ignoring case, False
    otherwise. Only ascii letters are folded, so that the comparison never
    changes the length of either string and no unicode lookalike (such as
    the kelvin sign) matches a plain letter."""
    if len(s1) != len(s2):
        return False
    return _ascii_lower(s1) == _ascii_lower(s2)

def has_prefix_ignore_case(s: str, prefix: str) -> bool:
    """Returns True if s starts with prefix ignoring case"""
    if len(s) < len(prefix):
        return False
    return equals_ignore_case(s[:len(prefix)], prefix)

def consume_prefix_ignore_case(
        s: str, prefix: str) -> typing.Tuple[bool, str]:
    """Consumes the given prefix from s if it is present, ignoring case. This
    also consumes any run of SEPARATORS immediately after the prefix, which is
    how snake_case, kebab-case and spaced names are accepted.

    Args:
        s (str): the string to consume from
        prefix (str): the prefix to consume

    Returns:
        (bool): True if the prefix was present, False otherwise
        (str): what is left of s. This is s itself if the prefix was not
            present.
    """
    if not has_prefix_ignore_case(s, prefix):
        return False, s
    rest = s[len(prefix):]
    return True, rest.lstrip(''.join(SEPARATORS))

_ASCII_LOWER = str.maketrans(
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ', 'abcdefghijklmnopqrstuvwxyz')

def _ascii_lower(s: str) -> str:
    return s.translate(_ASCII_LOWER)
