"""A string with search, regex and splitting helpers."""

from __future__ import annotations

import re
from typing import List

_FORMAT = re.compile(r"\$(\$|&|`|'|\d\d?)")


class SmartString(str):
    """``str`` with a few convenience methods."""

    def contains(self, sub: str) -> bool:
        """Whether ``sub`` occurs in the string."""
        return sub in self

    def contains_regex(self, pattern: str) -> bool:
        """Whether ``pattern`` matches somewhere in the string."""
        return re.search(pattern, self) is not None

    def regex_replace(self, pattern: str, repl: str) -> "SmartString":
        """Replace every match of ``pattern`` and return the new string.

        ``repl`` may refer to the match with ``$&``, to groups with ``$1``,
        to the text before and after with ``$``` and ``$'``, and ``$$`` is a
        literal dollar sign.
        """
        text = str(self)

        def expand(match: re.Match) -> str:
            groups = match.re.groups

            def token(fmt: re.Match) -> str:
                tok = fmt.group(1)
                if tok == "$":
                    return "$"
                if tok == "&":
                    return match.group(0)
                if tok == "`":
                    return text[: match.start()]
                if tok == "'":
                    return text[match.end():]
                if 1 <= int(tok) <= groups:
                    return match.group(int(tok)) or ""
                if len(tok) == 2 and 1 <= int(tok[0]) <= groups:
                    return (match.group(int(tok[0])) or "") + tok[1]
                return fmt.group(0)

            return _FORMAT.sub(token, repl)

        return SmartString(re.sub(pattern, expand, text))

    def is_subsequence(self, sub: str) -> bool:
        """Whether ``sub`` appears in order, not necessarily contiguously."""
        it = iter(self)
        return all(ch in it for ch in sub)

    def split_on(self, delim: str) -> List[str]:
        """Split at every occurrence of ``delim``; an empty ``delim`` keeps the whole."""
        if not delim:
            return [str(self)]
        return str(self).split(delim)