# lookpath

`lookpath` searches every directory listed in `$PATH` for file names that
match a pattern. It prints what it finds grouped by directory.

## Installation

```
pip install .
```

No third-party packages are needed at run time. The tests need `pytest`
(`pip install .[test]`).

## Usage

```
lookpath [FLAGS] PATTERN
```

By default the pattern is matched as a prefix of each file name. The
results are printed as a tree, one block per directory:

```
$ lookpath pyth
/usr/bin:
├─ python3
└─ python3.12
```

Flags:

| Flag | Meaning |
|------|---------|
| `-t` | print the matched file names as trees (default) |
| `-p` | list the matched file names as full paths, `directory/name` |
| `-l` | match the pattern as a prefix of file names (default) |
| `-E` | match the pattern as a Python regular expression, anywhere in the name |
| `-h` | print the help text to standard output and exit with status 0 |

This lists the full paths of everything whose name ends in `sh`:

```
$ lookpath -p -E 'sh$'
/usr/bin/bash
/usr/bin/sh
```

### Details

- Each flag must be given on its own and spelled exactly as shown. Flags
  cannot be combined, as in `-pE`.
- When flags conflict, the last one given wins.
- Only the first argument that is not a flag is used as the pattern. Later
  ones are ignored.
- Names that start with `.` are never matched.
- A directory that cannot be read, or that holds no match, is left out of
  the output.
- The search goes through the directories in the order they appear in
  `$PATH`. Within each directory, names are listed in the order the
  operating system returns them.

### Errors

Each of these makes `lookpath` write a message to standard error and exit
with status 1:

- `$PATH` is unset or empty. The usage text follows the message.
- No arguments are given, or no pattern is given. The usage text follows
  the message.
- An argument starts with `-` but is not a known flag. The usage text
  follows the message.
- `-E` is given with a pattern that is not a valid regular expression.
  Only the message is written.

If `-h` is given anywhere on the command line, the usage text is printed
and other problems with the arguments are ignored.

## Using it from Python

The command is `lookpath.cli.main(argv=None)`, which returns the exit
status. The modules it is built from can also be used directly:

- `lookpath.arguments.parse_arguments(argv)` takes a list whose first
  element is the program name. It returns a `Pattern` and a `Settings`, and
  raises `ArgumentError` when the arguments cannot be used.
- `lookpath.search.Pattern` holds the search text and a `SearchMethod`
  (`LOOK` or `REGEX`). `Pattern.find(name)` tells whether a name matches.
- `lookpath.lookup.look_path(stack, pattern, path_var)` searches a
  colon-separated list of directories and fills a
  `lookpath.labels.LabelStack`. It returns the number of directories that
  were unusable or had no match.
- `lookpath.display.display_tree(stream, stack)` and
  `lookpath.display.display_paths(stream, stack)` write the results to a
  text stream.

```python
import io
from lookpath.labels import LabelStack
from lookpath.lookup import look_path
from lookpath.search import Pattern
from lookpath.display import display_paths

stack = LabelStack()
look_path(stack, Pattern("py"), "/usr/bin:/usr/local/bin")
out = io.StringIO()
display_paths(out, stack)
print(out.getvalue(), end="")
```