"""
Preprocessor that keeps column tags literal through pandoc.

Pandoc reads ``[begin]``, ``[col]`` and ``[end]`` as bracketed link text: a
reference definition or a following ``(...)`` would turn them into links.
Escaping the brackets makes pandoc emit the tag text unchanged:

    [col]2          →  \\[col\\]2          →  <p>[col]2</p>
    [end] wrap rtl  →  \\[end\\] wrap rtl  →  <p>[end] wrap rtl</p>

Lines inside fenced code blocks are left alone.
"""

import re

TAG_LINE_RE = re.compile(r"^\[(begin|col|end)\]", re.MULTILINE)
FENCE_RE = re.compile(r"^(`{3,}|~{3,})")


def escape_column_tags(text: str, context: dict) -> str:
    """
    Escape line-anchored column tags outside fenced code.

    Args:
        text: Markdown source
        context: Context dictionary (unused but required for preprocessor signature)

    Returns:
        Markdown with ``\\[tag\\]`` in place of ``[tag]`` at line starts
    """
    lines = text.split("\n")
    fence = None

    for i, line in enumerate(lines):
        fence_match = FENCE_RE.match(line)
        if fence_match:
            marker = fence_match.group(1)
            if fence is None:
                fence = marker
            elif marker[0] == fence[0] and len(marker) >= len(fence):
                fence = None
            continue
        if fence is None:
            lines[i] = TAG_LINE_RE.sub(r"\\[\1\\]", line)

    return "\n".join(lines)


def column_tag_escaper_default(text: str, context: dict) -> str:
    """
    Default configuration for column_tag_escaper.

    Register this in PREPROCESSORS.
    """
    return escape_column_tags(text, context)
