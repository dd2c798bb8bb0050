"""
Identifier Case Converter

Turns a word-capitalized variant identifier into its canonical name:

    IronXylophone   ->  iron_xylophone
    NorthNortheast  ->  north_northeast
    X               ->  x

RULE:
    - The first character is lowercased, no leading separator.
    - Every later uppercase ASCII letter becomes "_" plus its lowercase form.
    - Everything else is copied unchanged.

Every uppercase letter is a word boundary, so a run of capitals is split
letter by letter ("ABC" -> "a_b_c"). No declared identifier contains such
a run; has_adjacent_capitals() lets declarations flag one if it appears.

Casing is ASCII only. str.lower()/str.isupper() are not used because they
are Unicode-aware.
"""

import re

_IDENTIFIER = re.compile(r"[A-Z][A-Za-z0-9]*\Z")
_ASCII_UPPER = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_LOWER_OFFSET = ord("a") - ord("A")


def _is_ascii_upper(ch: str) -> bool:
    return ch in _ASCII_UPPER


def _ascii_lower(ch: str) -> str:
    if ch in _ASCII_UPPER:
        return chr(ord(ch) + _LOWER_OFFSET)
    return ch


def is_valid_identifier(identifier: str) -> bool:
    """
    Check the shape a variant identifier must have to be declared.

    An uppercase ASCII letter followed by ASCII letters or digits.
    """
    return isinstance(identifier, str) and _IDENTIFIER.match(identifier) is not None


def has_adjacent_capitals(identifier: str) -> bool:
    """True if two uppercase letters follow each other anywhere in the identifier."""
    return any(
        _is_ascii_upper(a) and _is_ascii_upper(b)
        for a, b in zip(identifier, identifier[1:])
    )


def canonical_name_length(identifier: str) -> int:
    """
    Length of the canonical name, known before converting.

    Number of input characters plus one separator for every uppercase
    letter after the first character.
    """
    return len(identifier) + sum(1 for ch in identifier[1:] if _is_ascii_upper(ch))


def to_canonical_name(identifier: str) -> str:
    """
    Convert a variant identifier to its canonical name.

    Args:
        identifier: Declared identifier, e.g. "SingleWall"

    Returns:
        Canonical name, e.g. "single_wall"
    """
    parts = [_ascii_lower(identifier[0])]
    for ch in identifier[1:]:
        if _is_ascii_upper(ch):
            parts.append("_")
            parts.append(_ascii_lower(ch))
        else:
            parts.append(ch)
    return "".join(parts)


def to_member_name(identifier: str) -> str:
    """Python enum member name for an identifier ("DownEast" -> "DOWN_EAST")."""
    return to_canonical_name(identifier).upper()
