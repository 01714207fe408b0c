"""Shared test fixtures for the x86-64-level test suite."""

import os
from unittest.mock import patch

import pytest

from x86_64_level.levels import LEVEL_REQUIREMENTS
from x86_64_level.lib.log_lib import manager as _manager_mod


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: subprocess tests of the installed console script")


# ---------------------------------------------------------------------------
# CPU information samples
# ---------------------------------------------------------------------------
# Flags as reported by Linux for an Intel Core i7-8650U (Kaby Lake R):
# everything through x86-64-v3, no AVX-512.
KABY_LAKE_FLAGS = (
    "fpu vme de pse tsc msr pae mce cx8 apic sep mtrr pge mca cmov pat pse36 "
    "clflush dts acpi mmx fxsr sse sse2 ss ht tm pbe syscall nx pdpe1gb rdtscp "
    "lm constant_tsc art arch_perfmon pebs bts rep_good nopl xtopology "
    "nonstop_tsc cpuid aperfmperf pni pclmulqdq dtes64 monitor ds_cpl vmx smx "
    "est tm2 ssse3 sdbg fma cx16 xtpr pdcm pcid sse4_1 sse4_2 x2apic movbe "
    "popcnt tsc_deadline_timer aes xsave avx f16c rdrand lahf_lm abm "
    "3dnowprefetch cpuid_fault epb invpcid_single pti ssbd ibrs ibpb stibp "
    "tpr_shadow vnmi flexpriority ept vpid ept_ad fsgsbase tsc_adjust bmi1 "
    "avx2 smep bmi2 erms invpcid mpx rdseed adx smap clflushopt intel_pt "
    "xsaveopt xsavec xgetbv1 xsaves dtherm ida arat pln pts hwp hwp_notify "
    "hwp_act_window hwp_epp md_clear flush_l1d"
)

KABY_LAKE_NAME = "Intel(R) Core(TM) i7-8650U CPU @ 1.90GHz"


def make_cpuinfo(flags, model_name=KABY_LAKE_NAME, processors=2):
    """Build /proc/cpuinfo-style text with tab-aligned keys."""
    blocks = []
    for n in range(processors):
        lines = [
            f"processor\t: {n}",
            "vendor_id\t: GenuineIntel",
            "cpu family\t: 6",
            "model\t\t: 142",
        ]
        if model_name is not None:
            lines.append(f"model name\t: {model_name}")
        lines += [
            "stepping\t: 10",
            "cpu MHz\t\t: 2112.000",
            "cache size\t: 8192 KB",
            "fpu\t\t: yes",
            "fpu_exception\t: yes",
        ]
        if flags is not None:
            lines.append(f"flags\t\t: {flags}")
        lines += [
            "bugs\t\t: cpu_meltdown spectre_v1 spectre_v2",
            "bogomips\t: 4224.00",
            "address sizes\t: 39 bits physical, 48 bits virtual",
            "power management:",
        ]
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"


def tokens_through(level):
    """All tokens required for levels 1..level."""
    return {t for required in LEVEL_REQUIREMENTS[:level] for t in required}


@pytest.fixture
def kaby_lake_cpuinfo():
    return make_cpuinfo(KABY_LAKE_FLAGS)


@pytest.fixture
def cpuinfo_file(tmp_path):
    """Write cpuinfo text to a file and return its path."""
    def _write(text, name="cpuinfo"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_manager():
    """Reset the OutputManager singleton between tests."""
    old = _manager_mod._manager
    yield
    _manager_mod._manager = old


@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.x86-64-level/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def project_dir(tmp_path, tmp_config_home, monkeypatch):
    """An empty working directory with an isolated home directory."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project
