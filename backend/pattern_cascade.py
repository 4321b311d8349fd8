"""
Ordered regex cascades with acceptance predicates.

A cascade is a list of patterns tried in priority order. The first match whose
captured value passes the predicate wins; if none does, the field stays empty.
"""
import re
from typing import Callable, Iterable, Iterator, Optional

Predicate = Callable[[str], bool]


def _captured(match: re.Match) -> str:
    value = match.group(1) if match.groups() else match.group(0)
    return (value or "").strip()


def iter_candidates(
    patterns: Iterable[str],
    source: str,
    flags: int = re.IGNORECASE,
    all_matches: bool = False,
) -> Iterator[str]:
    """Yield trimmed captures in cascade order."""
    for pattern in patterns:
        if all_matches:
            for match in re.finditer(pattern, source, flags):
                yield _captured(match)
        else:
            match = re.search(pattern, source, flags)
            if match:
                yield _captured(match)


def try_patterns(
    patterns: Iterable[str],
    source: str,
    predicate: Optional[Predicate] = None,
    flags: int = re.IGNORECASE,
    all_matches: bool = False,
) -> Optional[str]:
    """
    Run a cascade over source.

    Args:
        patterns: Regexes in priority order; group 1 (or the whole match) is the value
        source: Text to search
        predicate: Optional validity filter applied to each trimmed capture
        flags: Regex flags, case-insensitive by default
        all_matches: Try every match of a pattern before falling through to the next

    Returns:
        First accepted value, or None
    """
    if not source:
        return None

    for value in iter_candidates(patterns, source, flags, all_matches):
        if not value:
            continue
        if predicate is None or predicate(value):
            return value

    return None


# ------------------- PREDICATES -------------------------

def length_between(low: int, high: int) -> Predicate:
    """Accept values with low <= len(value) < high."""
    return lambda value: low <= len(value) < high


def excludes(*substrings: str) -> Predicate:
    return lambda value: not any(s in value for s in substrings)


def contains_digit(value: str) -> bool:
    return any(ch.isdigit() for ch in value)


def all_of(*predicates: Predicate) -> Predicate:
    return lambda value: all(p(value) for p in predicates)
