"""The builtin commands echo, pwd, cd and exit."""

from __future__ import annotations

import errno
import os
import sys
from dataclasses import dataclass, field
from itertools import zip_longest

from minish.environment import Environment
from minish.strutil import atoi


@dataclass
class Shell:
    """State shared by the builtins: last status, working directory, variables."""

    exit_status: int = 0
    pwd: str | None = None
    env_vars: Environment = field(default_factory=Environment)


class ShellExit(Exception):
    """Raised by the exit builtin; ``status`` is the process exit status."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status & 0xFF


def _out(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _err(text: str) -> None:
    sys.stderr.write(text)
    sys.stderr.flush()


def echo(args: list[str]) -> int:
    """Print the arguments separated by spaces; ``-n`` as first drops the newline.

    Like the shell this mirrors, any first argument starting with ``-n`` counts.
    """
    if len(args) < 2 or not args[1]:
        _out("\n")
        return 0
    if args[1].startswith("-n"):
        words, end = args[2:], ""
    else:
        words, end = args[1:], "\n"
    pieces = [
        word + (" " if following else end)
        for word, following in zip_longest(words, words[1:])
    ]
    _out("".join(pieces))
    return 0


def pwd(shell: Shell) -> int:
    """Print the working directory and remember it on ``shell``."""
    try:
        cwd = os.getcwd()
    except OSError as exc:
        _err(f"pwd: {exc.strerror}\n")
        return 0
    shell.pwd = cwd
    _out(f"{cwd}\n")
    return 0


def _change_directory(path: str) -> None:
    if not os.access(path, os.X_OK):
        os.stat(path)
        raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), path)
    os.chdir(path)


def cd(args: list[str], shell: Shell) -> int:
    """Change directory; handles no argument, ``~``, ``--`` and ``-``.

    Updates OLDPWD and PWD in the shell's variables. Returns 0 or 1.
    """
    if len(args) > 2:
        _err("cd: too many arguments\n")
        return 1
    try:
        oldpwd = os.getcwd()
    except OSError:
        oldpwd = ""
    target = args[1] if len(args) > 1 else None
    if not target or target in ("~", "--"):
        path = shell.env_vars.get("HOME")
        if path is None:
            _err("cd: HOME not set\n")
            return 1
    elif target == "-":
        path = shell.env_vars.get("OLDPWD")
        if path is None:
            _err("cd: OLDPWD not set\n")
            return 1
    else:
        path = target
    try:
        _change_directory(path)
    except OSError as exc:
        _err(f"cd: {exc.strerror}\n")
        return 1
    shell.env_vars.set("OLDPWD", oldpwd)
    shell.pwd = os.getcwd()
    shell.env_vars.set("PWD", shell.pwd)
    if target == "-":
        _out(f"{path}\n")
    return 0


def exit_builtin(args: list[str]) -> int:
    """Leave the shell by raising ShellExit.

    A non-numeric argument exits with status 2; more than one argument is
    refused and 1 is returned without leaving.
    """
    if len(args) < 2 or not args[1]:
        _out("exit\n")
        raise ShellExit(0)
    if not all("0" <= ch <= "9" for ch in args[1]):
        _out("exit\n")
        _err(f"exit: {args[1]}: numeric argument required\n")
        raise ShellExit(2)
    if len(args) > 2:
        _out("exit\n")
        _err("exit: too many arguments\n")
        return 1
    raise ShellExit(atoi(args[1]))