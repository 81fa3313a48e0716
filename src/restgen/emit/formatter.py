from __future__ import annotations

import logging
import subprocess
from typing import Protocol, Sequence

from restgen.errors import ConfigError, FormatError

logger = logging.getLogger(__name__)

_OPENERS = "{[("
_CLOSERS = "}])"
_PAIRS = {"}": "{", "]": "[", ")": "("}
_QUOTES = "\"'`"


class Formatter(Protocol):
    name: str

    def format(self, source: str) -> str:
        ...


def _scan_line(line: str, stack: list[str], in_comment: bool, lineno: int) -> bool:
    """
    Update the bracket stack with one line of TypeScript.
    String literals and comments are skipped. Returns whether the line ends
    inside a block comment.
    """
    i, n = 0, len(line)
    while i < n:
        if in_comment:
            end = line.find("*/", i)
            if end < 0:
                return True
            i = end + 2
            in_comment = False
            continue

        if line.startswith("/*", i):
            in_comment = True
            i += 2
            continue
        if line.startswith("//", i):
            break

        ch = line[i]
        if ch in _QUOTES:
            j = i + 1
            while j < n and line[j] != ch:
                j += 2 if line[j] == "\\" else 1
            if j >= n:
                raise FormatError(f"line {lineno}: unterminated string literal")
            i = j + 1
            continue

        if ch in _OPENERS:
            stack.append(ch)
        elif ch in _CLOSERS:
            if not stack or stack[-1] != _PAIRS[ch]:
                raise FormatError(f"line {lineno}: unexpected '{ch}'")
            stack.pop()
        i += 1
    return in_comment


def _leading_closers(line: str) -> int:
    count = 0
    for ch in line:
        if ch in _CLOSERS:
            count += 1
        elif ch != " ":
            break
    return count


class IndentFormatter:
    """
    Dependency-free formatter: re-indents by bracket depth.

    Does not reflow or re-punctuate; output of the type emitter is already
    one member per line, so indentation is all that is missing.
    """

    name = "builtin"

    def __init__(self, indent: str = "  ") -> None:
        self.indent = indent

    def format(self, source: str) -> str:
        stack: list[str] = []
        in_comment = False
        out: list[str] = []
        pending_blank = False

        for lineno, raw in enumerate(source.splitlines(), start=1):
            line = raw.strip()
            if not line:
                pending_blank = bool(out)
                continue

            depth = len(stack)
            if in_comment:
                # doc comment continuation: align "*" under the opening "/**"
                text = f" {line}" if line.startswith("*") else f"   {line}"
            else:
                depth = max(depth - _leading_closers(line), 0)
                text = line

            if pending_blank:
                out.append("")
                pending_blank = False
            out.append(self.indent * depth + text)

            in_comment = _scan_line(line, stack, in_comment, lineno)

        if in_comment:
            raise FormatError("unterminated block comment")
        if stack:
            raise FormatError(f"unbalanced brackets, unclosed: {''.join(stack)}")

        return "\n".join(out) + "\n"


class PrettierFormatter:
    """Runs prettier as a subprocess; source on stdin, formatted text on stdout."""

    name = "prettier"

    def __init__(self, command: Sequence[str] = ("prettier",), timeout: float = 120.0) -> None:
        self.command = list(command)
        self.timeout = timeout

    def format(self, source: str) -> str:
        argv = [*self.command, "--parser", "typescript"]
        try:
            proc = subprocess.run(
                argv,
                input=source,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise FormatError(f"Formatter executable not found: {self.command[0]}") from e
        except subprocess.TimeoutExpired as e:
            raise FormatError(f"Formatter timed out after {self.timeout}s") from e

        if proc.returncode != 0:
            raise FormatError(f"prettier failed ({proc.returncode}): {proc.stderr.strip()}")
        return proc.stdout


FORMATTERS = {
    IndentFormatter.name: IndentFormatter,
    PrettierFormatter.name: PrettierFormatter,
}


def get_formatter(name: str) -> Formatter:
    key = (name or "").lower().strip()
    if key not in FORMATTERS:
        raise ConfigError(f"formatter must be one of: {', '.join(sorted(FORMATTERS))}")
    logger.debug("Using formatter: %s", key)
    return FORMATTERS[key]()
