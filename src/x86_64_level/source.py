"""Acquisition of raw CPU information text.

The parser works on an opaque text blob; this module is the only place
that touches the file system, stdin, or the network name of the host.
"""

import socket
import sys

from x86_64_level.lib.log_lib import get_output, trace
from x86_64_level.lib.log_lib.levels import REASON


DEFAULT_CPUINFO_PATH = "/proc/cpuinfo"


@trace
def read_cpuinfo(path=DEFAULT_CPUINFO_PATH):
    """Read CPU information text from a file.

    Raises:
        OSError: The file cannot be read (e.g. no /proc on macOS).
    """
    with open(path, encoding="utf-8", errors="replace") as f:
        text = f.read()
    get_output().emit(REASON, "Read {n} characters from {path}",
                      channel='cpuinfo', n=len(text), path=path)
    return text


@trace
def read_stdin(stream=None):
    """Read all CPU information text from standard input.

    Bytes are decoded as UTF-8 with undecodable bytes replaced, the same
    as read_cpuinfo(), whatever the locale says. A text stream without
    an underlying buffer (e.g. io.StringIO) is read as is.
    """
    stream = stream if stream is not None else sys.stdin
    raw = getattr(stream, "buffer", stream).read()
    if isinstance(raw, bytes):
        text = raw.decode("utf-8", errors="replace")
    else:
        text = raw
    get_output().emit(REASON, "Read {n} characters from standard input",
                      channel='cpuinfo', n=len(text))
    return text


def get_hostname():
    """Return this host's name, or None if it cannot be determined."""
    try:
        return socket.gethostname() or None
    except OSError:
        return None
