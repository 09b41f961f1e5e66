"""Run ``infile | cmd1 | cmd2 > outfile`` with two child processes joined by a pipe."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from contextlib import ExitStack

from pypipex.command import get_paths, parse_command, resolve_command
from pypipex.errors import CommandNotFoundError, PipexError

_OUTFILE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
_OUTFILE_MODE = 0o644


def _report(message: str) -> None:
    sys.stderr.write(message + "\n")
    sys.stderr.flush()


def validate_args(argv: Sequence[str]) -> tuple[str, str, str, str]:
    """Check the four pipeline arguments and return them as a tuple.

    Raises PipexError when the count is wrong or a command is empty.
    """
    if len(argv) != 4:
        raise PipexError("ERROR: Invalid Arguments", 1)
    infile, cmd1, cmd2, outfile = argv
    if any(arg is None for arg in argv):
        raise PipexError("ERROR: Invalid Arguments", 1)
    if not cmd1 or not cmd2:
        raise PipexError("ERROR: Invalid Command", 1)
    return infile, cmd1, cmd2, outfile


def _open_infile(path: str) -> int | None:
    try:
        return os.open(path, os.O_RDONLY)
    except OSError:
        _report("Cannot open infile")
        return None


def _open_outfile(path: str) -> int:
    try:
        return os.open(path, _OUTFILE_FLAGS, _OUTFILE_MODE)
    except OSError as exc:
        raise PipexError("Cannot create outputfile", 1) from exc


def _start(
    argv: list[str] | None,
    paths: list[str] | None,
    stdin: int,
    stdout: int,
    env: dict[str, str],
) -> subprocess.Popen | int:
    """Start one command; return its process, or the exit status if it never ran."""
    try:
        program = resolve_command(paths, argv)
    except CommandNotFoundError as exc:
        _report(exc.message)
        return exc.exit_code
    try:
        return subprocess.Popen(
            argv, executable=program, stdin=stdin, stdout=stdout, env=env
        )
    except OSError:
        _report("Execution failed")
        return 127


def _wait(child: subprocess.Popen | int) -> int:
    if isinstance(child, int):
        return child
    return child.wait()


def run_pipex(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> tuple[int, int]:
    """Feed *infile* through *cmd1* then *cmd2*, writing the result to *outfile*.

    Returns the exit statuses of the two commands. Setup failures raise
    PipexError; failures of a single command are reported on stderr and
    show up in its status (1 for an unreadable input file, 127 for a
    command that cannot be found or executed).
    """
    environment = dict(os.environ if env is None else env)
    paths = get_paths(environment)
    argv1 = parse_command(cmd1)
    argv2 = parse_command(cmd2)
    if paths is None and (not cmd1.startswith("/") or not cmd2.startswith("/")):
        raise PipexError("Error parsing cmd or paths", 1)

    with ExitStack() as stack:
        try:
            pipe_read, pipe_write = os.pipe()
        except OSError as exc:
            raise PipexError("Pipe creation failed", 1) from exc
        stack.callback(os.close, pipe_read)
        stack.callback(os.close, pipe_write)

        in_fd = _open_infile(infile)
        if in_fd is not None:
            stack.callback(os.close, in_fd)
        out_fd = _open_outfile(outfile)
        stack.callback(os.close, out_fd)

        if in_fd is None:
            _report("Cannot open input file")
            first: subprocess.Popen | int = 1
        else:
            first = _start(argv1, paths, in_fd, pipe_write, environment)
        second = _start(argv2, paths, pipe_read, out_fd, environment)

    return _wait(first), _wait(second)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry: ``pypipex infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        infile, cmd1, cmd2, outfile = validate_args(args)
        run_pipex(infile, cmd1, cmd2, outfile, os.environ)
    except PipexError as exc:
        _report(exc.message)
        return exc.exit_code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())