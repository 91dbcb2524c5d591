"""Line-oriented operator I/O used by the interactive session."""

from __future__ import annotations

from abc import ABC, abstractmethod

import click


class Console(ABC):
    """Input source and output sink for one session.

    Implementations are injected into the session so tests can script
    the operator's input.
    """

    @abstractmethod
    def read_line(self) -> str:
        """Return the next input line without its terminator.

        Raises EOFError when input is exhausted.
        """

    @abstractmethod
    def write(self, message: str = "") -> None:
        """Show a message to the operator."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Report a diagnostic on the error stream."""

    def read_token(self) -> str:
        """Return the first word of the next non-blank line.

        The rest of that line is discarded, so the following read always
        starts on a fresh line.
        """
        while True:
            words = self.read_line().split()
            if words:
                return words[0]


class ClickConsole(Console):

    def __init__(self) -> None:
        self._stdin = click.get_text_stream("stdin", errors="replace")

    def read_line(self) -> str:
        line = self._stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def write(self, message: str = "") -> None:
        click.echo(message)

    def error(self, message: str) -> None:
        click.echo(message, err=True)
