# src/voicetasker/actions/extractor.py

"""
Directive extraction (and its inverse for display).

A directive is a fenced region inside free-form model output:

    ```action
    {"action": "ADD_TASK", ...}
    ```

Grammar is deliberately tiny: one opening marker, the nearest following bare
fence closes it, no nesting. Extraction honors only the first region; the
display-side helpers strip all of them.
"""

from __future__ import annotations

import re

FENCE = "```"
DIRECTIVE_START = f"{FENCE}action"
DIRECTIVE_END = FENCE

# Non-greedy: a region never swallows content past the nearest closing fence.
_DIRECTIVE_RE = re.compile(
    re.escape(DIRECTIVE_START) + r"\s*([\s\S]*?)\s*" + re.escape(DIRECTIVE_END)
)


def extract_directive(text: str | None) -> str | None:
    """
    Return the trimmed payload of the first directive region, or None if absent.

    Absence is the common case ("no action this turn"), not an error.
    """
    if not text:
        return None
    m = _DIRECTIVE_RE.search(text)
    if m is None:
        return None
    return m.group(1).strip()


def wrap_directive(payload: str) -> str:
    """Encode a payload as a directive region."""
    return f"{DIRECTIVE_START}\n{payload.strip()}\n{DIRECTIVE_END}"


def strip_directives(text: str | None) -> str:
    """Remove every directive region for user-facing display."""
    if not text:
        return ""
    return _DIRECTIVE_RE.sub("", text).strip()


def _partial_prefix_len(buf: str, tag: str) -> int:
    """Length of the longest suffix of buf that is a proper prefix of tag."""
    for n in range(min(len(buf), len(tag) - 1), 0, -1):
        if buf.endswith(tag[:n]):
            return n
    return 0


class DirectiveStripper:
    """
    Streaming-safe remover for directive regions.

    Works across chunk boundaries: a marker split between two chunks is held
    back until it can be decided. An unterminated region at end of stream is
    dropped entirely.
    """

    def __init__(self, start_tag: str = DIRECTIVE_START, end_tag: str = DIRECTIVE_END) -> None:
        self._start = start_tag
        self._end = end_tag
        self._buf = ""
        self._inside = False

    def feed(self, chunk: str) -> str:
        if not chunk:
            return ""

        self._buf += chunk
        out_parts: list[str] = []

        while self._buf:
            if not self._inside:
                i = self._buf.find(self._start)
                if i == -1:
                    # Hold back a possible start marker split across chunks.
                    keep = _partial_prefix_len(self._buf, self._start)
                    cut = len(self._buf) - keep
                    out_parts.append(self._buf[:cut])
                    self._buf = self._buf[cut:]
                    break

                if i:
                    out_parts.append(self._buf[:i])

                self._buf = self._buf[i + len(self._start) :]
                self._inside = True
                continue

            # Inside a region: drop everything until the closing fence.
            j = self._buf.find(self._end)
            if j == -1:
                keep = _partial_prefix_len(self._buf, self._end)
                self._buf = self._buf[len(self._buf) - keep :] if keep else ""
                break

            self._buf = self._buf[j + len(self._end) :]
            self._inside = False

        return "".join(out_parts)

    def flush(self) -> str:
        if self._inside:
            self._buf = ""
            return ""
        out = self._buf
        self._buf = ""
        return out
