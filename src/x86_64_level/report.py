"""Human-readable messages for classification results.

Kept apart from levels.py so the classifier only returns data. All
functions are pure; the CLI decides where (and whether) to print.
"""

from typing import Optional

from x86_64_level.levels import ClassificationResult, level_name


def _cpu_label(cpu_name):
    return f"CPU [{cpu_name}]" if cpu_name else "this CPU"


def format_reason(result: ClassificationResult,
                  cpu_name: Optional[str] = None) -> str:
    """Explain which level was identified and what blocked the next one.

    Example::

        Identified x86-64-v3, because x86-64-v4 requires 'avx512f',
        which CPU [Intel(R) Core(TM) i7-8650U] does not support
    """
    achieved = level_name(result.level)
    if result.is_max:
        suffix = f" for CPU [{cpu_name}]" if cpu_name else ""
        return f"Identified {achieved}, the highest level known{suffix}"
    return (f"Identified {achieved}, because {level_name(result.next_level)} "
            f"requires '{result.blocking_token}', which "
            f"{_cpu_label(cpu_name)} does not support")


def format_assert_failure(level: int, minimum: int,
                          cpu_name: Optional[str] = None,
                          hostname: Optional[str] = None) -> str:
    """Message for an --assert check that the host does not meet."""
    parts = ["The CPU"]
    if cpu_name:
        parts.append(f"[{cpu_name}]")
    parts.append("on this host")
    if hostname:
        parts.append(f"('{hostname}')")
    return (f"{' '.join(parts)} supports {level_name(level)}, which is less "
            f"than the required {level_name(minimum)}")


def assert_satisfied(result: ClassificationResult, minimum: int) -> bool:
    return result.level >= minimum
