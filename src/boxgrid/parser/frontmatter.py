"""Front matter extraction for diagram files.

Two forms are accepted at the top of a file:

1. Delimited: ``key: value`` lines between an opening and a closing ``---``.
2. Undelimited: ``key: value`` lines at the very top, ending at the first
   line that is not a recognised key.

Comments (``#``) and blank lines may appear anywhere inside front matter.
"""

from __future__ import annotations

from boxgrid.parser.model import Frontmatter, LegendEntry

_DELIMITER = "---"


def _split_assignment(value: str) -> tuple[str, str] | None:
    parts = value.split("=", 1)
    if len(parts) != 2:
        return None
    return parts[0].strip(), parts[1].strip()


def _parse_key(fm: Frontmatter, line: str) -> bool:
    """Apply one front matter line to *fm*. Returns True if it was recognised."""
    if not line or line.startswith("#"):
        return True

    if line.startswith("font:"):
        fm.font = line[len("font:") :].strip()
    elif line.startswith("x-label:"):
        fm.x_label = line[len("x-label:") :].strip()
    elif line.startswith("y-label:"):
        fm.y_label = line[len("y-label:") :].strip()
    elif line.startswith("arrow-flow:"):
        fm.arrow_flow = line[len("arrow-flow:") :].strip()
    elif line.startswith("legend:"):
        pair = _split_assignment(line[len("legend:") :].strip())
        if pair:
            fm.legend.append(LegendEntry(style=pair[0], label=pair[1]))
    elif line.startswith("color:"):
        pair = _split_assignment(line[len("color:") :].strip())
        if pair:
            fm.colors[pair[0]] = pair[1]
    else:
        return False
    return True


def parse_frontmatter(text: str) -> tuple[Frontmatter, str]:
    """Extract front matter from *text*.

    Returns the parsed Frontmatter and the remaining diagram text with the
    front matter lines removed.
    """
    fm = Frontmatter()
    lines = text.split("\n")
    consumed = 0

    # Skip leading blanks and comments to look for an opening delimiter
    while consumed < len(lines):
        stripped = lines[consumed].strip()
        if stripped and not stripped.startswith("#"):
            break
        consumed += 1

    if consumed < len(lines) and lines[consumed].strip() == _DELIMITER:
        consumed += 1
        while consumed < len(lines):
            stripped = lines[consumed].strip()
            consumed += 1
            if stripped == _DELIMITER:
                return fm, "\n".join(lines[consumed:])
            _parse_key(fm, stripped)
        # No closing delimiter: the whole input was front matter
        return fm, ""

    consumed = 0
    while consumed < len(lines):
        if not _parse_key(fm, lines[consumed].strip()):
            break
        consumed += 1

    return fm, "\n".join(lines[consumed:])
