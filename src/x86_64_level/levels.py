"""x86-64 microarchitecture level classification.

The psABI defines four cumulative levels. Each entry in
LEVEL_REQUIREMENTS lists only the tokens a level adds on top of the one
below it, using the names Linux reports in /proc/cpuinfo.

Classification walks the table in ascending order and stops at the
first level with a missing token:

    level 0  ── lm cmov ... sse2 ──>  level 1  ── cx16 ... ssse3 ──>  level 2
    level 2  ── avx avx2 ... xsave ──>  level 3  ── avx512* ──>  level 4

Levels above the first failing one are never looked at.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple


LEVEL_REQUIREMENTS: Tuple[Tuple[str, ...], ...] = (
    # x86-64-v1
    ("lm", "cmov", "cx8", "fpu", "fxsr", "mmx", "syscall", "sse2"),
    # x86-64-v2
    ("cx16", "lahf_lm", "popcnt", "sse4_1", "sse4_2", "ssse3"),
    # x86-64-v3
    ("avx", "avx2", "bmi1", "bmi2", "f16c", "fma", "abm", "movbe", "xsave"),
    # x86-64-v4
    ("avx512f", "avx512bw", "avx512cd", "avx512dq", "avx512vl"),
)

MAX_LEVEL = len(LEVEL_REQUIREMENTS)


@dataclass(frozen=True)
class ClassificationResult:
    """Highest fully supported level plus the token that blocked the next.

    Attributes:
        level: Achieved level, 0 through 4.
        blocking_token: First required-but-absent token of level + 1,
            or None when every level is satisfied.
    """
    level: int
    blocking_token: Optional[str] = None

    @property
    def next_level(self) -> Optional[int]:
        """The level that was not reached, or None at the top."""
        if self.blocking_token is None:
            return None
        return self.level + 1

    @property
    def is_max(self) -> bool:
        return self.blocking_token is None


def level_name(level: int) -> str:
    """Return the canonical name of a level, e.g. 'x86-64-v3'."""
    return f"x86-64-v{level}"


def _first_missing(required: Iterable[str], flags) -> Optional[str]:
    for token in required:
        if token not in flags:
            return token
    return None


def classify(flags, requirements: Sequence[Sequence[str]] = LEVEL_REQUIREMENTS
             ) -> ClassificationResult:
    """Classify a feature set into the highest contiguous satisfied level.

    Args:
        flags: Set-like collection of feature tokens (see parse_flags).
        requirements: Per-level token lists, lowest level first.

    Returns:
        ClassificationResult. The blocking token is the first absent
        token, in table order, of the first level that fails.
    """
    achieved = 0
    for level, required in enumerate(requirements, start=1):
        missing = _first_missing(required, flags)
        if missing is not None:
            return ClassificationResult(level=achieved, blocking_token=missing)
        achieved = level
    return ClassificationResult(level=achieved)


def check_cumulative(requirements: Sequence[Sequence[str]] = LEVEL_REQUIREMENTS
                     ) -> List[str]:
    """Return tokens listed by more than one level (empty when well-formed).

    Each level lists only its additions, so a token that shows up twice
    means the table was edited inconsistently.
    """
    seen = set()
    repeated = []
    for required in requirements:
        for token in required:
            if token in seen and token not in repeated:
                repeated.append(token)
            seen.add(token)
    return repeated
