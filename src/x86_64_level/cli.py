"""Main CLI entry point for x86-64-level.

    x86-64-level                    # print the level (0-4) of this CPU
    x86-64-level --verbose          # ...and explain what blocks the next one
    x86-64-level --assert 3         # exit 1 unless this CPU supports v3
    cat cpuinfo.txt | x86-64-level -

Exit codes:
    0    success, or the --assert level is supported
    1    CPU information unusable, or the --assert level is not supported
    2    invalid command-line usage
"""

import argparse
import sys

from x86_64_level import config as _config
from x86_64_level._version import BASE_VERSION, VERSION
from x86_64_level.cpuinfo import (
    CpuInfoError, MissingFlagsFieldError, extract_cpu_name, parse_flags,
)
from x86_64_level.levels import classify, level_name
from x86_64_level.lib.help_lib import HelpContent, HelpSection
from x86_64_level.lib.log_lib import format_channel_list, get_output, init_output
from x86_64_level.lib.log_lib.levels import CONFIG, DEBUG, DEFAULT, REASON
from x86_64_level.output import print_error, print_hint, print_result
from x86_64_level.report import (
    assert_satisfied, format_assert_failure, format_reason,
)
from x86_64_level.source import (
    DEFAULT_CPUINFO_PATH, get_hostname, read_cpuinfo, read_stdin,
)


PROG = "x86-64-level"

# ---------------------------------------------------------------------------
# Verbosity flags
# ---------------------------------------------------------------------------
OUTPUT_FLAGS = {
    "--verbose": {"aliases": ["-v"], "action": "count", "default": 0,
                  "help": "Increase verbosity (-v, -vv, -vvv)"},
    "--quiet": {"aliases": ["-Q"], "action": "count", "default": 0,
                "help": "Decrease verbosity (-Q, -QQ, -QQQ, -QQQQ=silent)"},
    "--show": {"nargs": "?", "action": "append", "metavar": "CHANNEL[:LEVEL]",
               "help": "Show output channel (bare --show lists channels)"},
}


# ---------------------------------------------------------------------------
# Help examples
# ---------------------------------------------------------------------------
def _build_examples():
    section = HelpSection("examples", "Examples")
    section.add_items(
        HelpContent("basic", "{prog}",
                    "Print the level of this CPU", priority=10),
        HelpContent("verbose", "{prog} --verbose",
                    "Also explain what blocks the next level", priority=20),
        HelpContent("assert", "{prog} --assert 3",
                    "Exit 1 unless x86-64-v3 is supported", priority=30),
        HelpContent("stdin", "cat cpuinfo.txt | {prog} -",
                    "Classify CPU information from stdin", priority=40),
        HelpContent("save", "{prog} --assert 3 --save",
                    "Remember --assert for this project", priority=50),
    )
    return section.format_section(prog=PROG)


def _assert_level_arg(value):
    """argparse type for --assert."""
    try:
        return _config.parse_assert_level(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _build_parser():
    """Build the argparse parser."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=("Report the x86-64 microarchitecture level "
                     "(x86-64-v1 to x86-64-v4) supported by this CPU."),
        epilog=(
            _build_examples() + "\n\n"
            "Exit codes: 0 = success, 1 = failure or assertion not met, "
            "2 = usage error."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "source", nargs="?", metavar="-",
        help="Read CPU information from standard input "
             f"instead of {DEFAULT_CPUINFO_PATH}",
    )
    parser.add_argument(
        "--assert", dest="assert_level", metavar="LEVEL",
        type=_assert_level_arg, default=None,
        help="Exit 1 unless the CPU supports LEVEL (1-4, v3, x86-64-v3)",
    )
    parser.add_argument(
        "--cpuinfo", metavar="PATH", default=None,
        help=f"File to read CPU information from (default: {DEFAULT_CPUINFO_PATH})",
    )
    parser.add_argument(
        "--config", metavar="PATH", default=None,
        help="Global config file (default: ~/.x86-64-level/config.json)",
    )
    parser.add_argument(
        "--save", action="store_true", default=False,
        help=f"Save --assert/--cpuinfo to {_config.PROJECT_CONFIG_NAME} "
             "in the current directory",
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"{PROG} {BASE_VERSION} ({VERSION})",
    )
    for flag, kwargs in OUTPUT_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        parser.add_argument(flag, *kwargs.get("aliases", []), **kw)
    return parser


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------
def _resolve_settings(args):
    """Resolve --assert/--cpuinfo through the config layers.

    Raises:
        ConfigError: A config file holds an unusable value.
    """
    out = get_output()
    resolved, sources = _config.resolve_config(args)
    for key in _config.CONFIG_KEYS:
        if sources[key]:
            out.emit(CONFIG, "{key} = {value!r} (from {src})", channel='config',
                     key=key, value=resolved[key], src=sources[key])
    return resolved


def _save_settings(args):
    updates = {}
    if args.assert_level is not None:
        updates["assert"] = args.assert_level
    if args.cpuinfo is not None:
        updates["cpuinfo"] = args.cpuinfo
    path = _config.update_project_config(updates)
    get_output().emit(DEFAULT, "Saved {keys} to {path}", channel='config',
                      keys=", ".join(sorted(updates)), path=path)


def _read_input(args, cpuinfo_path):
    if args.source == "-":
        return read_stdin()
    return read_cpuinfo(cpuinfo_path)


def run(args):
    """Classify the CPU and report according to `args`.

    Returns:
        Exit code.
    """
    out = get_output()

    try:
        settings = _resolve_settings(args)
    except _config.ConfigError as e:
        print_error(str(e))
        return 1

    if args.save:
        try:
            _save_settings(args)
        except OSError as e:
            print_error(f"Cannot save settings: {e}")
            return 1

    cpuinfo_path = settings["cpuinfo"] or DEFAULT_CPUINFO_PATH
    try:
        text = _read_input(args, cpuinfo_path)
    except OSError as e:
        if args.source == "-":
            print_error(f"Cannot read CPU information from standard input: "
                        f"{e.strerror or e}")
            return 1
        print_error(f"Cannot read CPU information from {cpuinfo_path}: "
                    f"{e.strerror or e}")
        print_hint('cpuinfo.stdin', prog=PROG)
        return 1

    try:
        flags = parse_flags(text)
    except MissingFlagsFieldError as e:
        print_error(str(e))
        print_hint('cpuinfo.non_x86')
        return 1
    except CpuInfoError as e:
        print_error(str(e))
        return 1

    out.emit(DEBUG, "Parsed {n} flags: {flags}", channel='cpuinfo',
             n=len(flags), flags=" ".join(sorted(flags)))

    result = classify(flags)
    cpu_name = extract_cpu_name(text)
    out.emit(REASON, format_reason(result, cpu_name), channel='classify')

    minimum = settings["assert"]
    if minimum is None:
        print_result(result.level)
        out.hint('assert.usage', 'verbose')
        return 0

    if assert_satisfied(result, minimum):
        out.emit(REASON, "{cpu} meets the required {required}",
                 channel='classify',
                 cpu=f"CPU [{cpu_name}]" if cpu_name else "This CPU",
                 required=level_name(minimum))
        return 0

    print_error(format_assert_failure(result.level, minimum,
                                      cpu_name=cpu_name,
                                      hostname=get_hostname()))
    print_hint('assert.lower_build', level=level_name(result.level))
    return 1


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for the x86-64-level CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code. Usage errors, --help and --version exit through
        argparse (SystemExit 2 or 0).
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = _build_parser()
    args = parser.parse_args(argv)

    # Bare --show lists channels and exits
    if args.show and None in args.show:
        print(format_channel_list())
        return 0

    if args.source is not None and args.source != "-":
        parser.error(f"unexpected argument {args.source!r} (only '-' is accepted)")
    if args.save and args.assert_level is None and args.cpuinfo is None:
        parser.error("--save needs --assert or --cpuinfo")

    channels = [s for s in (args.show or []) if s is not None]
    try:
        init_output(verbosity=args.verbose - args.quiet, channels=channels)
    except ValueError:
        parser.error(f"invalid --show spec in {channels!r} "
                     "(expected CHANNEL[:LEVEL])")
    import x86_64_level.hints  # noqa: F401  (registers hints)

    try:
        return run(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
