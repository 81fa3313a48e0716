from __future__ import annotations

EMPTY_JSDOC = "/** */"


def to_jsdoc_comment(text: str) -> str:
    text = (text or "").strip()
    if not text:
        return EMPTY_JSDOC

    lines = []
    for line in text.replace("*/", "*\\/").splitlines():
        line = line.rstrip()
        lines.append(f" * {line}" if line else " *")
    return "\n".join(["/**", *lines, " */"])
