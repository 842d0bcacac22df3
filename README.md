# deltaview

Building blocks for presenting diff output in a terminal: aligning token
sequences by edit distance, splitting lines into tokens, walking and editing
strings that contain ANSI escape sequences, and choosing terminal colors.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `deltaview.align`: `Alignment(x, y)` fills an edit-distance table over two
  token sequences on construction. It offers `operations()`,
  `coalesced_operations()`, `distance()`, `distance_parts()` and
  `levenshtein_distance()`. `Operation` names the edit operations (`NOOP`,
  `SUBSTITUTION`, `DELETION`, `INSERTION`), and `run_length_encode(sequence)`
  collapses runs of equal items into `(item, count)` pairs.
- `deltaview.tokens`: `tokenize(line, regex)` turns each match of the regex
  into one token and splits the text between matches into grapheme clusters.
  If the line does not begin with a match, the list starts with `""`. The
  tokens concatenate back to the line.
- `deltaview.ansi_iterator`: `AnsiElementIterator(s)` yields `Element` values
  (`kind`, `start`, `end`, `style`) for text runs and for CSI, OSC and ESC
  sequences. `ElementKind` names the kinds. CSI elements for SGR sequences carry
  the `TermStyle` they set. Offsets are code-point indices into `s`.
- `deltaview.ansi`: `strip_ansi_codes`, `measure_text_width`, `truncate_str`,
  `parse_first_style`, `string_starts_with_ansi_style_sequence` and
  `ansi_preserving_slice`. The module also defines the constants
  `ANSI_CSI_CLEAR_TO_EOL`, `ANSI_CSI_CLEAR_TO_BOL`, `ANSI_SGR_RESET` and
  `ANSI_SGR_REVERSE`.
- `deltaview.colors`: `Color` (a basic named color, a 256-palette index, or
  RGB), `RGBA` (a theme color with alpha) and `TermStyle` (colors plus
  attributes, with `paint(text)`). It also provides the 16 ANSI color names
  and numbers (`ansi_16_color_name_to_number`, `ansi_16_color_number_to_name`),
  `color_to_string`, and default backgrounds for removed and added lines in
  light and dark mode (`get_minus_background_color_default` and related
  functions). `to_ansi_color` and `ansi256_from_rgb` convert theme colors to
  terminal colors.
- `deltaview.env`: `get_env_var(name)` returns the trimmed value, or `None`
  if the variable is unset or blank. `get_boolean_env_var(name)` tells whether
  the variable is set at all.

## Example

```python
from deltaview.align import Alignment, Operation
from deltaview.ansi import strip_ansi_codes, truncate_str
from deltaview.tokens import tokenize

tokenize("aaa bbb", r"\w+")                  # ["aaa", " ", "bbb"]

alignment = Alignment(list("kitten"), list("sitting"))
alignment.levenshtein_distance()            # 3
alignment.operations()[-1] is Operation.INSERTION  # True

strip_ansi_codes("\x1b[31mred\x1b[0m")       # "red"
truncate_str("foo bar baz", 10, "...")      # "foo bar..."
```

## What it does not do

The package has no command to run. It does not read diff input, parse
commits, files or hunks, pair removed lines with added lines, syntax-highlight
code, or start a pager. It supplies the pieces listed above for a program that
does those things.