"""Load programs from text files.

A program file holds one program on its first line. A corpus file holds one
program per line; blank lines and lines starting with '#' are skipped.
"""

from __future__ import annotations

from pathlib import Path


def _strip_eol(line: str) -> str:
    return line.rstrip("\r\n")


def load_program(path: Path) -> str:
    """Return the first line of a program file, without its line terminator.

    An empty file yields the empty program "" (which evaluates to 0).
    """
    with open(path, encoding="utf-8") as f:
        return _strip_eol(f.readline())


def load_corpus(path: Path) -> list[str]:
    """Return every program in a corpus file, in file order."""
    programs: list[str] = []
    # Only \n ends a line; \v and \f are whitespace inside a program.
    for line in Path(path).read_text(encoding="utf-8").split("\n"):
        line = _strip_eol(line)
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        programs.append(line)
    return programs
