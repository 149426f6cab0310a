"""Parser package for bwlang.

This package splits the parser functionality into multiple modules to
keep the code organized. The :class:`Parser` class is exposed at the
package level for convenience, along with the :func:`parse` and
:func:`parse_expression` shortcuts.


File: __init__.py
Version: 0.1.0
License: MIT
"""

from .parser import Parser, parse, parse_expression

__all__ = ["Parser", "parse", "parse_expression"]
