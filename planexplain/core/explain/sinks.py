import io
from abc import ABC, abstractmethod
from typing import TextIO

from loguru import logger


class OutputSink(ABC):
    """Append-only destination for the lines of an explanation."""

    @abstractmethod
    def write_line(self, text: str) -> None:
        raise NotImplementedError()

    @abstractmethod
    def flush(self) -> None:
        raise NotImplementedError()


class TextStreamSink(OutputSink):
    """Writes each line, followed by a newline, to a text stream such as sys.stdout or an open file."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def write_line(self, text: str) -> None:
        self._stream.write(text)
        self._stream.write("\n")

    def flush(self) -> None:
        self._stream.flush()


class StringSink(TextStreamSink):
    def __init__(self) -> None:
        self._buffer = io.StringIO()
        super().__init__(self._buffer)

    def getvalue(self) -> str:
        return self._buffer.getvalue()

    def lines(self) -> list[str]:
        return self.getvalue().splitlines()


class LoggerSink(OutputSink):
    """Emits each line as a separate loguru record at the given level."""

    def __init__(self, level: str = "DEBUG") -> None:
        self._level = level

    def write_line(self, text: str) -> None:
        logger.log(self._level, text)

    def flush(self) -> None:
        # loguru handlers write every record immediately
        pass
