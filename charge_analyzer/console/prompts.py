"""Interactive prompts used when no files are given on the command line."""

from __future__ import annotations

import sys
from typing import Callable, List, Optional, Sequence, TextIO


TRUE_ANSWERS: Sequence[str] = ("yes", "y", "true", "1")
FALSE_ANSWERS: Sequence[str] = ("no", "n", "false", "0")

RETRY_PROMPT = "Yay, or nay? [y/n]:"
INVALID_ANSWER = "Sorry, the value you inputted was not valid."


def parse_yes_no(text: str) -> Optional[bool]:
    """Map a yes/no answer to a bool, or None if it is neither.

    Matching is case-insensitive and ignores surrounding whitespace.

    >>> parse_yes_no(" Y ")
    True
    >>> parse_yes_no("False")
    False
    >>> parse_yes_no("maybe") is None
    True
    """
    s = (text or "").strip().lower()
    if s in TRUE_ANSWERS:
        return True
    if s in FALSE_ANSWERS:
        return False
    return None


def ask_yes_no(read_line: Callable[[], str] = input, out: Optional[TextIO] = None) -> bool:
    """Read answers until one parses; end of input counts as "no"."""
    out = out if out is not None else sys.stdout
    while True:
        try:
            line = read_line()
        except EOFError:
            return False
        answer = parse_yes_no(line)
        if answer is not None:
            return answer
        print(INVALID_ANSWER, file=out)
        print(RETRY_PROMPT, file=out)


def prompt_filenames(read_line: Callable[[], str] = input, out: Optional[TextIO] = None) -> List[str]:
    """
    Collect file names one at a time, asking after each whether there is another.

    Blank names are asked for again. Stops early on end of input.
    """
    out = out if out is not None else sys.stdout
    files: List[str] = []
    while True:
        print("Please enter the name of the file you wish to load:", file=out)
        try:
            name = read_line().strip()
        except EOFError:
            return files
        if not name:
            continue
        files.append(name)

        print("Is there another file you'd like to load? [y/n]", file=out)
        if not ask_yes_no(read_line, out):
            return files
