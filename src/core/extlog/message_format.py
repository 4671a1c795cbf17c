from __future__ import annotations

import re
from typing import Any, Sequence

_PLACEHOLDER = re.compile(r"\{(\d+)\}")


def format_positional(template: str, params: Sequence[Any]) -> str:
    """
    Substitute {N} placeholders with str(params[N]).

    Placeholders whose index has no parameter are left as written.
    """
    if not params:
        return template

    def _replace(match: re.Match) -> str:
        index = int(match.group(1))
        if index < len(params):
            return str(params[index])
        return match.group(0)

    return _PLACEHOLDER.sub(_replace, template)


class PositionalMessage:
    """
    Deferred {N}-style log message.

    Passed as the msg of a LogRecord with no record args; rendering happens
    only when a handler calls record.getMessage().
    """

    __slots__ = ("_template", "_params")

    def __init__(self, template: str, params: Sequence[Any] = ()):
        self._template = template
        self._params = tuple(params)

    @property
    def template(self) -> str:
        return self._template

    @property
    def params(self) -> tuple[Any, ...]:
        return self._params

    def __str__(self) -> str:
        return format_positional(self._template, self._params)

    def __repr__(self) -> str:
        return f"PositionalMessage(template={self._template!r}, params={self._params!r})"
