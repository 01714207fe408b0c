"""x86-64-level hints for the THAC0 verbosity system.

Hints are short tips printed after an error or result. Each shows at
most once per session.

Import this module to register the hints with the global registry.
"""

from x86_64_level.lib.log_lib import Hint, register_hints


register_hints(
    Hint(
        id='cpuinfo.stdin',
        message=('  Tip: CPU information can be piped in instead: '
                 'cat /proc/cpuinfo | {prog} -'),
        context={'error'},
        min_level=0,
        category='cpuinfo',
    ),
    Hint(
        id='cpuinfo.non_x86',
        message=("  Note: Only x86-64 CPUs report a 'flags' field; "
                 "other architectures are not supported."),
        context={'error'},
        min_level=0,
        category='cpuinfo',
    ),
    Hint(
        id='assert.lower_build',
        message=('  Tip: Use a build that targets {level} or lower '
                 'on this host.'),
        context={'error'},
        min_level=0,
        category='assert',
    ),
    Hint(
        id='assert.usage',
        message=('  Tip: Use --assert LEVEL in scripts to stop early '
                 'on hosts below LEVEL.'),
        context={'verbose'},
        min_level=1,
        category='assert',
    ),
)
