"""
editsim.utils — sequence helpers shared by the distance metrics.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from typing import Any


def default_process(s: Any) -> str:
    """Lowercase *s*, replace non-alphanumeric characters with spaces and trim.

    ``None`` is treated as the empty string; bytes are decoded as UTF-8.
    """
    if s is None:
        return ""
    if isinstance(s, (bytes, bytearray)):
        s = s.decode("utf-8", errors="replace")
    return "".join(ch if ch.isalnum() else " " for ch in str(s)).lower().strip()


def as_sequence(s: Any) -> Sequence[Hashable]:
    """Return *s* as an indexable sequence, materializing one-shot iterables."""
    if s is None:
        raise TypeError("expected a sequence, got None")
    if isinstance(s, (str, bytes, list, tuple, range)):
        return s
    try:
        return list(s)
    except TypeError:
        raise TypeError(
            f"expected a sequence of hashable items, got {type(s).__name__}"
        ) from None


def conv_sequences(
    s1: Any,
    s2: Any,
    processor: Callable[[Any], Any] | None = None,
) -> tuple[Sequence[Hashable], Sequence[Hashable]]:
    """Apply *processor* to both inputs and return them as indexable sequences."""
    if processor is not None:
        s1 = processor(s1)
        s2 = processor(s2)
    return as_sequence(s1), as_sequence(s2)


def common_prefix_length(s1: Sequence[Hashable], s2: Sequence[Hashable]) -> int:
    """Number of leading items shared by *s1* and *s2*."""
    n = 0
    for a, b in zip(s1, s2):
        if a != b:
            break
        n += 1
    return n


def common_suffix_length(s1: Sequence[Hashable], s2: Sequence[Hashable]) -> int:
    """Number of trailing items shared by *s1* and *s2*."""
    n = 0
    limit = min(len(s1), len(s2))
    while n < limit and s1[-1 - n] == s2[-1 - n]:
        n += 1
    return n


def split_on_common_prefix(
    s1: Sequence[Hashable], s2: Sequence[Hashable]
) -> tuple[Sequence[Hashable], Sequence[Hashable], Sequence[Hashable]]:
    """Return ``(prefix, s1_rest, s2_rest)`` split after the shared prefix.

    >>> split_on_common_prefix("kitten", "kites")
    ('kit', 'ten', 'es')
    """
    i = common_prefix_length(s1, s2)
    return s1[:i], s1[i:], s2[i:]


def strip_common_affix(
    s1: Sequence[Hashable], s2: Sequence[Hashable]
) -> tuple[Sequence[Hashable], Sequence[Hashable]]:
    """Drop the shared prefix and suffix; edit distances are unchanged by it."""
    _, s1, s2 = split_on_common_prefix(s1, s2)
    suffix = common_suffix_length(s1, s2)
    if suffix:
        s1 = s1[:-suffix]
        s2 = s2[:-suffix]
    return s1, s2


__all__ = [
    "default_process",
    "as_sequence",
    "conv_sequences",
    "common_prefix_length",
    "common_suffix_length",
    "split_on_common_prefix",
    "strip_common_affix",
]
