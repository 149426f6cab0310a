"""Error rendering for front ends.

Turns a :class:`BwlError` into the familiar compiler-style report::

    script.bwl:3:9: parse error: Expected ';' after value but got 'print'
      print 1 print 2;
              ^~~~~

Colour comes from termcolor, which leaves the text plain when ``NO_COLOR`` is
set or the stream is not a terminal.


File: diagnostics.py
Version: 0.1.0
License: MIT
"""

from termcolor import colored

from bwlang.exceptions import BwlError
from bwlang.source import Source

ERROR = "red"

_STAGE_LABELS = {
    "lex": "syntax error",
    "parse": "parse error",
    "runtime": "runtime error",
}


def diagnose(source: Source, error: BwlError) -> str:
    """
    Return the offending line with the failing lexeme highlighted and a caret
    underneath it, or an empty string when the error has no position.
    """
    position = error.position
    if position is None:
        return ""
    line = source.line(position.line)
    start = min(max(position.column - 1, 0), len(line))
    end = min(start + max(position.length, 1), len(line))

    diagnosis = "  " + line[:start]
    diagnosis += colored(line[start:end], ERROR, attrs=["bold"])
    diagnosis += line[end:] + "\n"

    diagnosis += "  " + " " * start
    diagnosis += colored("^" + "~" * (max(end - start, 1) - 1), ERROR, attrs=["bold"])
    return diagnosis


def format_error(source: Source, error: BwlError) -> str:
    """
    Render ``error`` against the source it came from.
    """
    label = _STAGE_LABELS.get(error.stage, "error")
    location = source.label
    if error.position is not None:
        location += f":{error.position.line}:{error.position.column}"

    message = colored(f"{location}: ", attrs=["bold"])
    message += colored(f"{label}: ", ERROR, attrs=["bold"]) + error.message

    diagnosis = diagnose(source, error)
    if diagnosis:
        message += "\n" + diagnosis
    return message
