# smalltools

A set of small command-line utilities for text and files. Each tool can also be
used from Python through the functions of its module. No third-party libraries
are needed.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `smalltools-cal MONTH YEAR` | Prints a month calendar (`smalltools.calendar_month`). 1752 has the calendar change: 3–13 September 1752 are skipped. |
| `smalltools-replace IN OUT OLD NEW` | Copies `IN` to `OUT`, replacing the word `OLD` with `NEW` where whitespace stands before and after it. |
| `smalltools-substring SUB [FILE ...]` | Prints the lines that contain `SUB`, each prefixed with its source name. `-` or no file reads standard input. |
| `smalltools-last [-N] [FILE ...]` | Prints the last lines of each input (5 by default) under a `Last N Lines of NAME` title. `-N` sets the count for the inputs after it; `-` reads standard input. |
| `smalltools-convert IN OUT` | Rewrites `/* ... */` block comments as `//` line comments. `OUT` is removed if the input has an open comment or quote. |
| `smalltools-cpp IN OUT` | Expands `#include <name>` lines from `/usr/include`, each header once, and prints `Included: name` for each. |
| `smalltools-cat [OPTIONS] [FILE ...]` | Concatenates files. Supports `-A -b -e -E -n -s -t -T -v` and `--`. `--help` and `--version` show the files `cat_help` and `cat_version` from the current directory. |
| `smalltools-ls [-i] [-l] [-R] [DIR ...]` | Lists directory contents (hidden entries left out), with inode numbers, long format and recursion. |
| `smalltools-strip-comments` | Removes C comments from standard input. |
| `smalltools-check-brackets` | Reports unbalanced `{}`, `[]` and `()` in C source read from standard input. |
| `smalltools-temperature [int\|float\|heading\|reverse\|celsius] [--lower N] [--upper N] [--step N]` | Prints Fahrenheit/Celsius tables (0 to 300 in steps of 20 by default). |
| `smalltools-count [chars\|lines\|words\|kinds\|blanks]` | Counts things in standard input; `words` prints lines, words and characters. |
| `smalltools-basics [hello\|copy\|power\|escape\|flags\|eof]` | Greeting, copy of standard input, powers table and other small demos. |
| `smalltools-lines [longest\|lengths\|long\|trim\|reverse]` | Line tools on standard input: longest line, line lengths, lines over 80 characters, trimming, reversing. |
| `smalltools-filter squeeze\|visible\|words\|detab N\|entab\|fold W T` | Text filters on standard input: squeeze blanks, make tabs visible, one word per line, detab, entab, fold. |
| `smalltools-histogram [words\|words-vertical\|letters\|letters-vertical]` | Histograms of word lengths and letter frequencies of standard input. |

## Library use

```python
from smalltools.calendar_month import format_month
from smalltools.replace import replace_word
from smalltools.filters import detab

print(format_month(9, 1752))
print(replace_word("the cat and the dog\n", "the", "a"))  # "the cat and a dog\n"
print(detab("a\tb\n", 4))                                 # "a   b\n"
```

Other entry points include `smalltools.minicat.parse_args` and
`smalltools.minicat.Formatter`, `smalltools.minils.iter_listing`,
`smalltools.minicpp.Preprocessor`, `smalltools.comments.strip_comments` and
`smalltools.comments.check_brackets`, and the counting, line and histogram
functions in `smalltools.counting`, `smalltools.lines` and
`smalltools.histogram`.

Errors are raised as exceptions: `smalltools.convert.ConvertError` for an
unterminated comment or quote, `smalltools.comments.CommentError` for the same
or for an unmatched closing bracket, `smalltools.minicat.UsageError` for a bad
switch, and `ValueError` for out-of-range arguments. The `main` functions turn
these into messages and exit codes.

## Limits

- `smalltools-cpp` handles only `#include <name>`; it does not expand macros,
  conditionals or `#include "name"`.
- `smalltools-ls` shows only whether an entry is a directory in the long
  format's type column, and does not sort entries.
- `smalltools-cat --help` and `--version` print nothing useful unless the
  files `cat_help` and `cat_version` exist in the current directory.