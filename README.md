# minish

A small Unix-style shell toolkit. It has these parts:

- a tokenizer for command lines that handles pipes, redirections and quotes;
- the builtins `echo`, `pwd`, `cd` and `exit`, plus an `env` printer;
- a runner that connects two commands through a pipe, reading from an input
  file and writing to an output file;
- a few string and formatting helpers.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The prompt loop

```
minish
```

This shows the prompt `minishell> ` and reads one line at a time. Input
editing and history come from Python's `readline` module where it is
available. The loop works like this:

- Empty lines are skipped.
- The line `exit` ends the loop.
- At end of input, the loop writes `exit` and stops.
- Any other line becomes a single word token, which is reported like this:

```
Token créé: type=0, content='echo hi'
```

From Python, `minish.shell.run(lines, out)` runs the same loop over any
iterable of lines and writes to `out`. A trailing newline on each line is
ignored.

```python
import io
from minish.shell import run

out = io.StringIO()
run(["echo hi", "", "exit"], out)
print(out.getvalue())
```

## Running two commands through a pipe

```
minish-pipex infile "cmd1 args" "cmd2 args" outfile
```

This behaves like `< infile cmd1 args | cmd2 args > outfile`:

- The output file is created, or truncated if it exists, with mode `0644`.
- Each command string is split on spaces. There is no quoting.
- The command name is looked up through the last `PATH=` entry of the
  environment. A name that contains `/` is used as given if it is
  executable.
- A command that cannot be found is reported on standard error as
  `pipex : <cmd> : command not found`, and its status is 127.
- The exit status is the status of the second command.
- If either file cannot be opened, the status is 1.
- Any number of arguments other than four prints
  `Wrong number of arguments` and gives status 1.

From Python, these functions are available in `minish.pipex`:

- `run_pipex(infile, cmd1, cmd2, outfile, envp)` returns that status.
  `envp` is a list of `NAME=value` strings.
- `find_path(cmd, envp)` returns the resolved path, or `None`.
- `link_path(path_list, cmd)` returns the first `dir/cmd` in `path_list`
  that is executable.
- `open_file(path, mode)` opens a file using an `OpenMode` (`APPEND`,
  `TRUNCATE` or `READ`) and returns the file descriptor.

## Tokenizing

```python
from minish.tokens import tokenize, TokenType

for token in tokenize("cat < in.txt | grep 'a b' >> out.txt"):
    print(token.type.name, token.content)
```

`|`, `<`, `>`, `<<` and `>>` each become their own token, of type `PIPE`,
`R_INPUT`, `R_OUTPUT`, `R_HEREDOC` or `R_APPEND`.

Words are of type `WORD`. Within a word, quoted text has its quotes removed
and is joined with the unquoted text around it. No variable expansion is
done inside double quotes.

A line with an unclosed single or double quote raises
`minish.errors.LexerError`. Its `status` is 2.

Other helpers in `minish.tokens` are:

- `is_meta(c)`
- `is_redirect(token_type)`
- `has_unclosed_quotes(line)`
- `single_quote(line, index)`

## Builtins

`minish.builtins` provides these functions:

- `echo(args)`: prints its arguments separated by spaces. If the first
  argument starts with `-n`, no newline is printed at the end.
- `pwd(shell)`: prints the working directory and stores it in `shell.pwd`.
- `cd(args, shell)`: changes the directory.
  - With no argument, an empty argument, `~` or `--`, it goes to `HOME`.
  - With `-`, it goes to `OLDPWD` and prints that path.
  - On success it updates `OLDPWD` and `PWD`.
  - It returns 0 or 1.
- `exit_builtin(args)`: prints `exit` and raises `ShellExit`, whose
  `status` is the argument modulo 256.
  - A non-numeric argument gives status 2.
  - If there is more than one argument, nothing is raised and the function
    returns 1.

`Shell` holds `exit_status`, `pwd` and `env_vars`. `env_vars` is a
`minish.environment.Environment`, an ordered mapping of variables that
offers these methods:

- `from_envp`
- `get`
- `set`
- `lines`

`minish.environment.print_env(envp)` prints `NAME=value` entries, one per
line, in the way the `env` builtin does.

## Errors

`minish.errors` provides:

- `ShellError` and `LexerError`, both of which carry a `status`.
- `format_cmd_error(cmd, arg, msg)`, which builds messages of the form
  `minishell: cmd: arg: msg`.
- `cmd_err(cmd, arg, msg, err_num)`, which writes such a message to
  standard error.
- `err_msg(cmd, msg, shell, exit_status)`, which writes a message and sets
  `shell.exit_status`.
- `exec_error(cmd, errno_value)`, which maps `EACCES` to status 126 and
  `ENOENT` or `ENOTDIR` to status 127.

## Helpers

- `minish.strutil` provides:
  - `is_space`;
  - `atoi`, which parses a leading integer the way C does, wrapping to
    32 bits;
  - `split`, which drops empty pieces;
  - `iter_lines`, which yields the lines of a text or binary stream.
- `minish.ftprintf` provides `format_printf` and `printf` for the
  conversions `%c %s %p %d %i %u %x %X %%`, and `is_format`.

## What it does not do

The prompt loop does not run commands. It does not connect the tokenizer,
the builtins or the pipe runner. It only reports each line as one token.

There is also no support for any of the following:

- variable expansion;
- `export` or `unset`;
- heredocs;
- pipelines of more than two commands.