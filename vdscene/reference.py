"""Reference text for the scene description format."""

from textwrap import dedent

BNF = dedent(
"""
```
File      := { Row NEWLINE }
Row       := Comment | Blank | Point | Line
Comment   := '#' { any }                       (only when '#' is the first character)
Blank     := { WS }

Point     := { any } 'point(' INT ',' INT ',' Label ')' { any }
Line      := { any } 'line(' Label ',' Label ')' { any }
            | { any } 'line(' INT ',' INT ',' INT ',' INT ')' { any }

INT       := [ '+' | '-' ] DIGIT { DIGIT }               (DIGIT is 0-9, value within -2**31 .. 2**31-1)
Label     := BareLabel                          (default dialect)
            | '"' { any but '"' } '"'           (quoted dialect)
BareLabel := one or more characters other than ',' and ')', surrounding whitespace trimmed
```

Notes:
- Whitespace around every field is insignificant.
- Rows are separated by "\\n" only; a trailing "\\r" is dropped.
- In the quoted dialect both labels of a line are quoted too: line("a, b", "c").
  A label can never contain ")".
- Labels are case-sensitive and must be unique; later duplicates are dropped.
- A line may reference a point declared anywhere in the file.
"""
).strip()
