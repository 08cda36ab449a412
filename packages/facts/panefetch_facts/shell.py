"""Shell command execution for `$(...)` directives."""

from __future__ import annotations

import logging
import subprocess

_log = logging.getLogger("panefetch.shell")


def shell_exec(command: str) -> str:
    """Run ``command`` through the user's shell and return its raw stdout.

    A failing command is not an error: whatever it printed is returned and the
    exit status is only logged. Blocks until the process exits.
    """
    try:
        proc = subprocess.run(command, shell=True, capture_output=True, text=True)
    except OSError as exc:
        _log.warning(f"could not run {command!r}: {exc}", extra={"event": "exec_failed"})
        return ""

    if proc.returncode != 0:
        _log.info(
            f"command {command!r} exited with {proc.returncode}",
            extra={"event": "exec_nonzero"},
        )
    return proc.stdout
