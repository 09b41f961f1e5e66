# pypipex

`pypipex` runs two commands joined by a pipe. The first command reads from an
input file, and the second command writes to an output file. It does the same
job as this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Command-line use

```sh
pypipex infile "cmd1 args" "cmd2 args" outfile
```

The same entry point can be started with `python -m pypipex.pipeline`.

You must give exactly four arguments. Each command is split on spaces, and
runs of spaces are treated as one. Quoting inside a command is not
interpreted. If the program name contains a `/`, it is used as given.
Otherwise each directory on `PATH` is searched, in order, for an executable
file of that name.

For example:

```sh
pypipex input.txt "grep error" "wc -l" count.txt
```

### Behaviour and exit codes

- If the number of arguments is wrong, the message `ERROR: Invalid Arguments`
  goes to standard error and the exit status is 1. If a command is empty, the
  message is `ERROR: Invalid Command` and the exit status is 1.
- If `PATH` is not set and either command does not start with `/`, the
  message `Error parsing cmd or paths` is printed and the exit status is 1.
- If the output file cannot be created, the message `Cannot create outputfile`
  is printed and the exit status is 1. An existing output file is truncated.
  A new one is created with mode `0644`, which the umask may reduce.
- If the input file cannot be opened, `Cannot open infile` and
  `Cannot open input file` are printed. The first command is not started. The
  second command still runs, and it reads an empty stream.
- If a command cannot be found, `Command not found` is printed for it. If it
  is found but cannot be started, `Execution failed` is printed. The other
  command still runs.
- Once both commands have been started and have finished, the exit status is
  0, whatever their own statuses were.

## Library use

```python
from pypipex.pipeline import run_pipex

status1, status2 = run_pipex("input.txt", "grep error", "wc -l", "count.txt")
```

`run_pipex(infile, cmd1, cmd2, outfile, env=None)` uses `os.environ` when
`env` is not given. It returns the exit statuses of the two commands. A
command that was never run gets status 1 when the input file could not be
opened, and 127 when it could not be found or started. Setup failures raise
`PipexError`.

`validate_args(argv)` checks a list of four arguments and returns them as a
tuple, raising `PipexError` otherwise. `main(argv=None)` is the command-line
entry. It reads `sys.argv[1:]` when `argv` is not given, and it returns the
exit status.

The helpers in `pypipex.command` can also be called directly:

```python
from pypipex.command import get_paths, parse_command, resolve_command, split_words

split_words("a::b", ":")                   # ["a", "b"]
paths = get_paths({"PATH": "/usr/bin:/bin"})  # ["/usr/bin", "/bin"]; None if PATH is absent
argv = parse_command("ls  -l")            # ["ls", "-l"]
executable = resolve_command(paths, argv)  # e.g. "/usr/bin/ls"
```

`find_command_path(paths, name)` returns the first executable `dir/name`, or
`None` if there is none.

Errors are raised as `pypipex.errors.PipexError`, which carries `message` and
`exit_code`. A command that cannot be resolved raises
`pypipex.errors.CommandNotFoundError`, a subclass whose exit code is 127.

## What it does not do

- It runs exactly two commands. Longer pipelines are not supported.
- It has no here-document mode and no append mode for the output file.
- Command strings get no shell processing: no quoting, escaping, globbing or
  variable expansion.

## Running the tests

```sh
pip install ".[test]"
pytest
```