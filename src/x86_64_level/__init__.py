"""x86-64-level — report the x86-64 microarchitecture level of this CPU.

Classifies the CPU feature flags into x86-64-v1 through x86-64-v4, so a
script can tell whether a binary built for a given level will run here.
"""

from x86_64_level._version import __version__, __app_name__
from x86_64_level.cpuinfo import (
    CpuInfoError,
    EmptyInputError,
    InvalidFlagsFormatError,
    MissingFlagsFieldError,
    extract_cpu_name,
    parse_flags,
)
from x86_64_level.levels import (
    LEVEL_REQUIREMENTS,
    MAX_LEVEL,
    ClassificationResult,
    classify,
    level_name,
)

__all__ = [
    "__version__", "__app_name__",
    "CpuInfoError", "EmptyInputError", "InvalidFlagsFormatError",
    "MissingFlagsFieldError", "extract_cpu_name", "parse_flags",
    "LEVEL_REQUIREMENTS", "MAX_LEVEL", "ClassificationResult", "classify",
    "level_name",
]
