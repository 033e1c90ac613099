"""Run ``infile cmd1 | cmd2 > outfile`` with two child processes."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Sequence
from enum import IntEnum

from minish.environment import parse_entry
from minish.strutil import split


class PipexError(Exception):
    """A command that cannot be started; ``status`` is its exit status."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


class OpenMode(IntEnum):
    """How open_file opens its file."""

    APPEND = 0
    TRUNCATE = 1
    READ = 2


_FLAGS = {
    OpenMode.APPEND: os.O_WRONLY | os.O_CREAT | os.O_APPEND,
    OpenMode.TRUNCATE: os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
    OpenMode.READ: os.O_RDONLY,
}


def _err(text: str) -> None:
    sys.stderr.write(text)
    sys.stderr.flush()


def link_path(path_list: Sequence[str], cmd: str) -> str | None:
    """Return the first ``dir/cmd`` in ``path_list`` that is executable."""
    if not path_list or not cmd:
        return None
    for directory in path_list:
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def find_path(cmd: str, envp: Sequence[str]) -> str | None:
    """Locate ``cmd`` through the PATH entry of ``envp``; the last PATH wins.

    A command containing ``/`` is used as given when it is executable.
    """
    if "/" in cmd:
        return cmd if os.access(cmd, os.X_OK) else None
    path_env = None
    for entry in envp:
        if entry.startswith("PATH="):
            path_env = entry[5:]
    if path_env is None:
        return None
    return link_path(split(path_env, ":"), cmd)


def open_file(path: str, mode: OpenMode | int) -> int:
    """Open ``path`` in the given mode and return its file descriptor."""
    return os.open(path, _FLAGS[OpenMode(mode)], 0o644)


def _prepare(cmd: str, envp: Sequence[str]) -> tuple[str, list[str]]:
    if not cmd:
        raise PipexError("", 1)
    args = split(cmd, " ")
    if not args:
        raise PipexError("", 1)
    path = find_path(args[0], envp)
    if path is None:
        raise PipexError(f"pipex : {cmd} : command not found", 127)
    return path, args


def _child_env(envp: Sequence[str]) -> dict[str, str]:
    pairs = (parse_entry(entry) for entry in envp)
    return {name: value for name, value in pairs if value is not None}


def _spawn(
    cmd: str, envp: Sequence[str], stdin: int, stdout: int
) -> subprocess.Popen | int:
    try:
        path, args = _prepare(cmd, envp)
    except PipexError as exc:
        if exc.message:
            _err(exc.message + "\n")
        return exc.status
    try:
        return subprocess.Popen(
            args, executable=path, stdin=stdin, stdout=stdout, env=_child_env(envp)
        )
    except OSError:
        return 1


def _wait(child: subprocess.Popen | int) -> int:
    if isinstance(child, int):
        return child
    code = child.wait()
    return code if code >= 0 else 0


def _close(*fds: int) -> None:
    for fd in fds:
        if fd >= 0:
            os.close(fd)


def run_pipex(
    infile: str, cmd1: str, cmd2: str, outfile: str, envp: Sequence[str]
) -> int:
    """Run ``cmd1 < infile | cmd2 > outfile``; return the second command's status."""
    failed = False
    out_fd = in_fd = -1
    try:
        out_fd = open_file(outfile, OpenMode.TRUNCATE)
    except OSError as exc:
        _err(f"{outfile}: {exc.strerror}\n")
        failed = True
    try:
        in_fd = open_file(infile, OpenMode.READ)
    except OSError as exc:
        _err(f"{infile}: {exc.strerror}\n")
        failed = True
    if failed:
        _close(in_fd, out_fd)
        return 1
    try:
        read_end, write_end = os.pipe()
    except OSError:
        _close(in_fd, out_fd)
        _err("Terminated\n")
        return 1
    try:
        first = _spawn(cmd1, envp, in_fd, write_end)
        second = _spawn(cmd2, envp, read_end, out_fd)
    finally:
        _close(in_fd, out_fd, read_end, write_end)
    statuses = [_wait(child) for child in (first, second)]
    return statuses[-1]


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry: ``pipex infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        _err("Wrong number of arguments\n")
        return 1
    envp = [f"{name}={value}" for name, value in os.environ.items()]
    infile, cmd1, cmd2, outfile = args
    return run_pipex(infile, cmd1, cmd2, outfile, envp)