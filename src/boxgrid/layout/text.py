"""Word wrapping for box labels."""

from __future__ import annotations

from boxgrid.layout.constants import MAX_TEXT_LINES

ELLIPSIS = "..."


def wrap_text(
    text: str, max_chars_per_line: int, max_lines: int = MAX_TEXT_LINES
) -> list[str]:
    """Split *text* into at most *max_lines* lines of *max_chars_per_line*.

    Explicit newlines are kept, blank lines dropped. Lines break on word
    boundaries where possible; words longer than a line are chopped. When the
    text is cut short the last line ends with an ellipsis if there is room
    for one.
    """
    if max_lines <= 0:
        max_lines = MAX_TEXT_LINES

    result: list[str] = []
    for raw in text.split("\n"):
        line = raw.strip()
        if not line:
            continue
        if len(line) <= max_chars_per_line:
            result.append(line)
        else:
            result.extend(_wrap_line(line, max_chars_per_line))

    if len(result) > max_lines:
        result = result[:max_lines]
        last = result[-1]
        if max_chars_per_line > 3 and len(last) > max_chars_per_line - 3:
            result[-1] = last[: max_chars_per_line - 3] + ELLIPSIS
        elif max_chars_per_line > 0 and len(last) > max_chars_per_line:
            result[-1] = last[:max_chars_per_line]

    return result


def _wrap_line(line: str, max_chars: int) -> list[str]:
    lines: list[str] = []
    current = ""

    for word in line.split():
        if len(word) > max_chars:
            if current:
                lines.append(current)
                current = ""
            while len(word) > max_chars:
                lines.append(word[:max_chars])
                word = word[max_chars:]
            current = word
            continue

        candidate = f"{current} {word}" if current else word
        if len(candidate) <= max_chars:
            current = candidate
        else:
            if current:
                lines.append(current)
            current = word

    if current:
        lines.append(current)
    return lines
