"""Error reporting for the shell: message formatting and status mapping."""

from __future__ import annotations

import errno
import os
import sys
from typing import Any

PROMPT_NAME = "minishell"


class ShellError(Exception):
    """An error that carries the exit status the shell should report."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


class LexerError(ShellError):
    """Raised when a command line cannot be split into tokens."""

    def __init__(self, message: str, status: int = 2) -> None:
        super().__init__(message, status)


def format_cmd_error(cmd: str | None, arg: str | None, msg: str) -> str:
    """Build ``minishell: cmd: [arg: ]msg`` without a trailing newline."""
    parts = [f"{PROMPT_NAME}: ", cmd or "", ": "]
    if arg:
        parts.append(f"{arg}: ")
    parts.append(msg)
    return "".join(parts)


def cmd_err(cmd: str | None, arg: str | None, msg: str, err_num: int) -> int:
    """Report an error about ``cmd`` on standard error and return ``err_num``."""
    sys.stderr.write(format_cmd_error(cmd, arg, msg) + "\n")
    sys.stderr.flush()
    return err_num


def err_msg(cmd: str | None, msg: str, shell: Any, exit_status: int) -> None:
    """Report ``msg`` on standard error and record ``exit_status`` on ``shell``."""
    text = f"{PROMPT_NAME}: "
    if cmd:
        text += f"{cmd}: "
    sys.stderr.write(text + msg + "\n")
    sys.stderr.flush()
    shell.exit_status = exit_status
    return None


_EXEC_ERRORS: dict[int, tuple[str, int]] = {
    errno.EACCES: ("Permission denied", 126),
    errno.ENOENT: ("No such file or directory", 127),
    errno.ENOTDIR: ("Not a directory", 127),
}


def exec_error(cmd: str | None, errno_value: int) -> int:
    """Report why ``cmd`` could not be executed; return the matching status."""
    msg, status = _EXEC_ERRORS.get(errno_value, (os.strerror(errno_value), 1))
    return cmd_err(cmd, None, msg, status)