"""The scrolling text window where game messages are shown."""

from __future__ import annotations

import os
import re

from .constants import TEXTCOLS, TEXTROWS, ErrorKind, error_message

_SPACE = " \t\n\r\v\f"
_WORD_RUN = re.compile(f"([{re.escape(_SPACE)}]*)([^{re.escape(_SPACE)}]*)")
_CLEAR_ROW = 5
MORE_PROMPT = "--more--"


def format_error(context, kind, errno_value=None):
    """Return the text shown for an error of the given kind.

    An operating-system error also shows the description of errno_value.
    """
    kind = ErrorKind(kind)
    text = f"***{context}***\n{error_message(kind)}\n"
    if kind is ErrorKind.UNIX and errno_value is not None:
        text += f"{os.strerror(errno_value)}\n"
    return text


class TextWindow:
    """A fixed grid of text lines that wraps back to the top when full.

    When the last line is reached, pager (if given) is called while a
    "--more--" prompt is showing, so the reader can catch up.
    """

    def __init__(self, rows=TEXTROWS, cols=TEXTCOLS, pager=None):
        if rows < 2 or cols < 1:
            raise ValueError("text window needs at least two rows and one column")
        self.rows = rows
        self.cols = cols
        self.pager = pager
        self.linenum = 0
        self._x = 0
        self._col = 0
        self._grid = [[" "] * cols for _ in range(rows)]

    def _write(self, text):
        row = self._grid[self.linenum]
        for ch in text:
            if self._x < self.cols:
                row[self._x] = ch
                self._x += 1

    def _clear_to_eol(self):
        row = self._grid[self.linenum]
        row[self._x:] = [" "] * (self.cols - self._x)

    def _clear_to_bottom(self):
        self._clear_to_eol()
        for row in self._grid[self.linenum + 1:]:
            row[:] = [" "] * self.cols

    def putc(self, ch):
        """Put one character in the window; a newline moves to the next line."""
        if ch != "\n":
            self._write(ch)
            return
        self.linenum += 1
        self._x = 0
        if self.linenum == _CLEAR_ROW:
            self._clear_to_bottom()
        else:
            self._clear_to_eol()
        if self.linenum == self.rows - 1:
            if self.pager is not None:
                self._write(MORE_PROMPT)
                self.pager()
                self._x = 0
                self._clear_to_eol()
            self.linenum = 0
            self._x = 0
            self._clear_to_eol()

    def print(self, text):
        """Print text, starting a new line rather than splitting a word."""
        for match in _WORD_RUN.finditer(text):
            spaces, word = match.groups()
            if not spaces and not word:
                continue
            for ch in spaces:
                if ch == "\n":
                    self.putc(ch)
                    self._col = 0
                elif self._col < self.cols:
                    self.putc(ch)
                    self._col += 1
            if self._col + len(word) >= self.cols:
                self.putc("\n")
                self.putc(" ")
                self._col = 1
            for ch in word:
                self.putc(ch)
                self._col += 1

    def lines(self):
        """Return the window contents, one string per row, trailing blanks removed."""
        return ["".join(row).rstrip() for row in self._grid]