from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import List, Literal, Optional, TextIO


Level = Literal["info", "warning", "error"]

_PREFIX = {"info": "", "warning": "[warn] ", "error": "[error] "}


@dataclass
class _Entry:
    level: Level
    message: str
    count: int = 1


class ConsoleLog:
    """
    Leveled log sink for terminal use.

    Every message is written to ``stream`` as soon as it is added, so diagnostics
    appear at the point of detection. A bounded history is kept alongside:
      - consecutive identical messages are coalesced (rendered as ``(xN)``)
      - oldest entries are dropped beyond ``max_entries``
    """

    def __init__(self, stream: Optional[TextIO] = None, *, max_entries: int = 2000) -> None:
        self._entries: List[_Entry] = []
        self._stream = stream
        self._max_entries = int(max_entries)

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so redirected/captured stdout is honoured.
        return self._stream if self._stream is not None else sys.stdout

    def clear(self) -> None:
        self._entries.clear()

    def info(self, message: str) -> None:
        self._add("info", message)

    def warning(self, message: str) -> None:
        self._add("warning", message)

    def error(self, message: str) -> None:
        self._add("error", message)

    def count(self, level: Level) -> int:
        return sum(e.count for e in self._entries if e.level == level)

    def render(self) -> str:
        lines = []
        for e in self._entries:
            suffix = f" (x{e.count})" if e.count > 1 else ""
            lines.append(f"{_PREFIX[e.level]}{e.message}{suffix}")
        return "\n".join(lines)

    def _add(self, level: Level, message: str) -> None:
        msg = "" if message is None else str(message)

        print(f"{_PREFIX[level]}{msg}", file=self.stream)

        # Coalesce consecutive duplicates
        if self._entries and self._entries[-1].level == level and self._entries[-1].message == msg:
            self._entries[-1].count += 1
            return

        self._entries.append(_Entry(level=level, message=msg, count=1))
        if len(self._entries) > self._max_entries:
            self._entries = self._entries[-self._max_entries :]
