# minishell

A small interactive shell for POSIX systems. It reads a command line, checks
it for syntax errors, expands variables, splits it into a pipeline and runs
each stage in its own child process, connecting the stages with pipes.

## Features

- Pipelines with `|` (a `|` inside quotes does not split)
- Redirections: `< file`, `> file`, `>> file` and heredocs with `<< DELIM`;
  when a command has several redirections in the same direction, the first
  one is used
- Single and double quotes; `$NAME` and `$?` expansion, except inside single
  quotes; heredoc lines are expanded too
- Builtins: `echo` (with `-n`), `cd`, `pwd`, `export`, `unset`, `env`, `exit`;
  `cd`, `exit`, `export` and `unset` run in the shell itself so they can
  change its directory and environment
- External commands looked up through `PATH`
- Syntax checks for open quotes, missing redirection targets and empty pipe
  stages; a line that fails them is not run
- Command history, saved after every line to `/tmp/history.txt` and loaded at
  start-up (at most 500 lines are kept)
- Ctrl-C abandons the line being typed instead of quitting; Ctrl-\ is
  ignored at the prompt; Ctrl-D leaves the shell

## Installation

```
pip install .
```

## Usage

Start the shell:

```
minishell
```

The prompt is `$ > `. For example:

```
$ > echo hello | tr a-z A-Z
HELLO
$ > export GREETING=hi
$ > echo "$GREETING there" > out.txt
$ > cat < out.txt
hi there
$ > cat << END
(heredoc)> value: $GREETING
(heredoc)> END
value: hi
$ > exit
exit
```

`exit` takes an optional numeric status, used modulo 256. A status that is
not a number makes the shell report an error and quit with status 2; more
than one argument is reported and the shell keeps running.

## Using it as a library

The line-processing steps can be used on their own. Environments are lists of
`NAME=value` strings:

```python
from minishell.checker import check
from minishell.preprocess import process_input

line = 'echo "$USER" | wc -c > count.txt'
assert check(line) == []
commands = process_input(line, ["USER=alice"], 0)
```

`check` prints a message for each syntax error and returns the list of
`minishell.errors.CheckerErrorKind` values found. `process_input` returns a
list of `minishell.parser.Command` objects, each with `args` and optional
`input` and `output` redirections (kept with their operator, e.g. `">count.txt"`).
`minishell.executor.execute_commands(commands, env, exitno)` runs such a list
and returns the exit status of the pipeline.

Other pieces:

- `minishell.lexer.lex`, `minishell.parser.parse`,
  `minishell.var_translator.translate_vars` and
  `minishell.file_translator.translate_files` for the individual steps
- `minishell.path.find_executable(name, env)` for `PATH` lookup
- `minishell.history.History(path, limit)` with `load`, `insert`, `save` and
  `clear`
- `minishell.builtins.check_builtins(command, env)` to run a builtin directly

## What it does not do

There are no `&&`, `||` or `;` operators, no globbing, no job control, no
subshells and no scripting: the shell only reads lines interactively and any
command-line arguments are ignored.

## Running the tests

```
pip install .[test]
pytest
```