"""Tests for x86_64_level.cpuinfo — flag-set parsing."""

import pytest

from x86_64_level.cpuinfo import (
    CpuInfoError,
    EmptyInputError,
    InvalidFlagsFormatError,
    MissingFlagsFieldError,
    extract_cpu_name,
    parse_flags,
)

from conftest import KABY_LAKE_FLAGS, KABY_LAKE_NAME, make_cpuinfo


class TestParseFlags:
    """Valid input produces a frozenset of tokens."""

    def test_single_flags_line(self):
        flags = parse_flags("flags : lm cmov cx8 fpu fxsr mmx syscall sse2")
        assert flags == {"lm", "cmov", "cx8", "fpu", "fxsr", "mmx",
                         "syscall", "sse2"}

    def test_returns_frozenset(self):
        flags = parse_flags("flags : lm cmov")
        assert isinstance(flags, frozenset)

    def test_duplicates_collapse(self):
        """Duplicate tokens are not an error."""
        flags = parse_flags("flags : lm lm cmov")
        assert flags == {"lm", "cmov"}
        assert len(flags) == 2

    def test_real_cpuinfo(self, kaby_lake_cpuinfo):
        flags = parse_flags(kaby_lake_cpuinfo)
        assert flags == set(KABY_LAKE_FLAGS.split())
        assert "avx2" in flags
        assert "avx512f" not in flags

    def test_tab_aligned_key(self):
        assert parse_flags("flags\t\t: fpu sse2\n") == {"fpu", "sse2"}

    def test_key_is_trimmed(self):
        assert parse_flags("   flags   :   fpu   sse2   ") == {"fpu", "sse2"}

    def test_first_flags_line_wins(self):
        text = "flags : fpu\nflags : avx2\n"
        assert parse_flags(text) == {"fpu"}

    def test_similar_keys_ignored(self):
        """Keys like 'vmx flags' are not the flags field."""
        text = "vmx flags : vnmi ept\nflags : fpu\n"
        assert parse_flags(text) == {"fpu"}

    def test_lines_without_separator_skipped(self):
        text = "garbage line\nflags : fpu\n"
        assert parse_flags(text) == {"fpu"}

    def test_digits_and_underscores_allowed(self):
        assert parse_flags("flags : sse4_1 3dnowprefetch") == {
            "sse4_1", "3dnowprefetch"}

    def test_order_independent(self):
        a = parse_flags("flags : lm cmov cx8 fpu")
        b = parse_flags("flags : fpu cx8 cmov lm")
        assert a == b


class TestParseFlagsErrors:
    """Malformed input raises a CpuInfoError subclass."""

    def test_empty_input(self):
        with pytest.raises(EmptyInputError):
            parse_flags("")

    def test_whitespace_only_input(self):
        with pytest.raises(EmptyInputError):
            parse_flags("\n\n  \n")

    def test_empty_flags_value(self):
        with pytest.raises(MissingFlagsFieldError):
            parse_flags("flags : ")

    def test_no_flags_line(self):
        with pytest.raises(MissingFlagsFieldError):
            parse_flags(make_cpuinfo(None))

    def test_arm_cpuinfo_has_no_flags(self):
        text = ("processor\t: 0\nBogoMIPS\t: 48.00\n"
                "Features\t: fp asimd evtstrm aes pmull sha1 sha2 crc32\n")
        with pytest.raises(MissingFlagsFieldError):
            parse_flags(text)

    def test_uppercase_rejected(self):
        with pytest.raises(InvalidFlagsFormatError):
            parse_flags("flags : SSE2")

    def test_punctuation_rejected(self):
        with pytest.raises(InvalidFlagsFormatError) as exc_info:
            parse_flags("flags : fpu sse2; rm -rf")
        assert exc_info.value.bad_chars == ["-", ";"]

    def test_tab_inside_value_rejected(self):
        with pytest.raises(InvalidFlagsFormatError):
            parse_flags("flags : fpu\tsse2")

    def test_bad_chars_reported_once(self):
        with pytest.raises(InvalidFlagsFormatError) as exc_info:
            parse_flags("flags : AVX AVX2")
        assert exc_info.value.bad_chars == ["A", "V", "X"]

    @pytest.mark.parametrize("error_cls", [
        EmptyInputError, MissingFlagsFieldError, InvalidFlagsFormatError,
    ])
    def test_errors_share_base(self, error_cls):
        assert issubclass(error_cls, CpuInfoError)
        assert issubclass(error_cls, ValueError)

    def test_error_messages(self):
        with pytest.raises(CpuInfoError, match="empty"):
            parse_flags("")
        with pytest.raises(CpuInfoError, match="'flags' field"):
            parse_flags("model name : x")
        with pytest.raises(CpuInfoError, match="unexpected characters"):
            parse_flags("flags : SSE2")


class TestExtractCpuName:
    """extract_cpu_name is best effort and never raises."""

    def test_real_cpuinfo(self, kaby_lake_cpuinfo):
        assert extract_cpu_name(kaby_lake_cpuinfo) == KABY_LAKE_NAME

    def test_missing_name(self):
        assert extract_cpu_name(make_cpuinfo(KABY_LAKE_FLAGS, model_name=None)) is None

    def test_empty_name(self):
        assert extract_cpu_name("model name\t: \nflags : fpu") is None

    def test_empty_text(self):
        assert extract_cpu_name("") is None

    def test_name_with_colon(self):
        """Only the first ':' separates key from value."""
        assert extract_cpu_name("model name : QEMU Virtual CPU version 2.5+: x") \
            == "QEMU Virtual CPU version 2.5+: x"
