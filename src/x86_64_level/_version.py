"""
Version information for x86-64-level.

This file is the canonical source for version numbers. The __version__
string carries build metadata (branch, build number, date, commit hash).

Format: MAJOR.MINOR.PATCH[-PHASE]_BRANCH_BUILD-YYYYMMDD-COMMITHASH
Example: 1.0.0_main_4-20261018-a1b2c3d4
"""

# Version components - edit these for version bumps
MAJOR = 1
MINOR = 0
PATCH = 0
PHASE = None  # None, "alpha", "beta", "rc1", ...

# Build metadata appended on release
__version__ = "1.0.0_main_1-20261018-3f9c2e1"
__app_name__ = "x86-64-level"


def get_version():
    """Return the full version string including branch and build info."""
    return __version__


def get_base_version():
    """Return the semantic version string (MAJOR.MINOR.PATCH[-PHASE])."""
    if "_" in __version__:
        return __version__.split("_")[0]
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        base = f"{base}-{PHASE}"
    return base


def get_pip_version():
    """
    Return a PEP 440 compliant version for pip/setuptools.

    - Main branch: 1.0.0_main_3-20261018-hash        -> 1.0.0
    - Dev branch:  1.1.0-alpha_dev_3-20261018-hash   -> 1.1.0a0.dev3
    """
    base = f"{MAJOR}.{MINOR}.{PATCH}"

    phase_map = {"alpha": "a0", "beta": "b0"}
    if PHASE:
        base += phase_map.get(PHASE, PHASE)

    if "_" not in __version__:
        return base

    parts = __version__.split("_")
    branch = parts[1] if len(parts) > 1 else "unknown"
    if branch == "main":
        return base

    build_info = "_".join(parts[2:]) if len(parts) > 2 else ""
    build_num = build_info.split("-")[0] if "-" in build_info else "0"
    return f"{base}.dev{build_num}"


VERSION = get_version()
BASE_VERSION = get_base_version()
PIP_VERSION = get_pip_version()
