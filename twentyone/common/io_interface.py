"""
This module contains the IOInterface abstract base class and its implementations.

A game writes its human-readable notices (dealt hands, busts) to an
IOInterface instead of printing directly, so the same game can talk to the
console, a log file, or a test.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import aiofiles


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines where the game's output messages go.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""
        pass


class DummyIOInterface(IOInterface):
    """
    A dummy IO interface for simulation purposes. Does not perform any actual IO.
    """

    def output(self, message: str) -> None:
        """Simulates output operation."""
        pass


class TestIOInterface(IOInterface):
    """
    A test IO interface for testing purposes. Collects output messages in
    `sent_messages`.
    """

    __test__ = False

    def __init__(self):
        self.sent_messages = []

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    @property
    def last_message(self) -> str | None:
        """The most recent message, or None if nothing was sent."""
        return self.sent_messages[-1] if self.sent_messages else None


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface that prints every message.
    """

    def output(self, message: str) -> None:
        print(message)


class LoggingIOInterface(IOInterface):
    """
    A logging IO interface for recording purposes. Writes output messages to a log file.

    Output can be written synchronously or, from async code, through `output_async`.
    """

    def __init__(self, log_file_path: str):
        self.log_file_path = log_file_path

    def output(self, message: str) -> None:
        """Write an output message to the log file."""
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(message + "\n")

    async def output_async(self, message: str) -> None:
        """Async version of output."""
        async with aiofiles.open(
            self.log_file_path, mode="a", encoding="utf-8"
        ) as log_file:
            await log_file.write(message + "\n")
