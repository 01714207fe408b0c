"""Flag-set parsing for CPU description text.

The input is the free-form ``key : value`` text produced by
``/proc/cpuinfo`` (or piped in by the user). Only two fields matter:

    flags       space-separated feature tokens, e.g. ``fpu lm sse2 avx2``
    model name  human-readable CPU name, used in diagnostic messages

Everything here is a pure function of its input text. Errors are raised
as CpuInfoError subclasses and never sanitized away: if the flags value
contains anything unexpected, token comparison cannot be trusted.
"""

import re
from typing import FrozenSet, Optional


# Anything outside the allowed flags alphabet [a-z0-9_ ]
_BAD_CHARS = re.compile(r"[^a-z0-9_ ]")


class CpuInfoError(ValueError):
    """Base class for CPU description parsing errors."""


class EmptyInputError(CpuInfoError):
    """No CPU description text was supplied."""

    def __init__(self):
        super().__init__("Input data is empty")


class MissingFlagsFieldError(CpuInfoError):
    """The text contains no (non-empty) 'flags' field."""

    def __init__(self):
        super().__init__(
            "Cannot infer the x86-64 level, because there is no "
            "'flags' field in the CPU information")


class InvalidFlagsFormatError(CpuInfoError):
    """The 'flags' value contains characters outside [a-z0-9_ ]."""

    def __init__(self, bad_chars):
        self.bad_chars = bad_chars
        shown = "".join(bad_chars)
        super().__init__(
            f"Cannot reliably infer the x86-64 level, because the 'flags' "
            f"field contains unexpected characters: {shown!r}")


def _field_value(text, key):
    """Return the trimmed value of the first line whose key equals `key`.

    Lines without a ':' separator are skipped. Returns None when no line
    carries the key.
    """
    for line in text.splitlines():
        name, sep, value = line.partition(":")
        if not sep:
            continue
        if name.strip() == key:
            return value.strip()
    return None


def parse_flags(text: str) -> FrozenSet[str]:
    """Parse CPU description text into an immutable set of feature tokens.

    Args:
        text: Raw multi-line CPU description (``key : value`` lines).

    Returns:
        frozenset of lowercase feature tokens. Duplicates collapse.

    Raises:
        EmptyInputError: `text` is empty or whitespace only.
        MissingFlagsFieldError: No 'flags' line, or its value is empty.
        InvalidFlagsFormatError: The value has characters outside [a-z0-9_ ].
    """
    if not text or not text.strip():
        raise EmptyInputError()

    value = _field_value(text, "flags")
    if not value:
        raise MissingFlagsFieldError()

    bad = _BAD_CHARS.findall(value)
    if bad:
        raise InvalidFlagsFormatError(sorted(set(bad)))

    return frozenset(value.split())


def extract_cpu_name(text: str) -> Optional[str]:
    """Best-effort lookup of the CPU's 'model name'. Never raises."""
    if not text:
        return None
    return _field_value(text, "model name") or None
