from typing import Callable, Optional

from common.config import Message
from common.patterns import Command
from common.utils import Logger, console_output


class Receiver:
    """Knows how to carry out the actual action."""

    def __init__(self, output: Callable[[str], None] = console_output):
        self.output = output

    def perform_action(self) -> None:
        self.output(Message.ACTION_PERFORMED)


class ConcreteCommand(Command):
    """Command Pattern: wraps a receiver's action as an object"""

    def __init__(self, receiver: Receiver):
        if receiver is None:
            raise ValueError("ConcreteCommand requires a receiver")
        self._receiver: Receiver = receiver

    def execute(self) -> None:
        self._receiver.perform_action()


class Invoker:
    """
    Triggers a stored command without knowing anything about its receiver.
    """

    def __init__(self, logger: Optional[Logger] = None):
        self._command: Optional[Command] = None
        self.logger = logger

    @property
    def command(self) -> Optional[Command]:
        return self._command

    def set_command(self, command: Command) -> None:
        """
        Store a command, replacing any previous one.
        :param command: Command to run on the next execute_command() call.
        """
        self._command = command
        if self.logger:
            self.logger.log(f"Command set: {type(command).__name__}")

    def execute_command(self) -> None:
        """Run the stored command. Does nothing if no command has been set."""
        if self._command is None:
            if self.logger:
                self.logger.log("No command set, nothing to execute")
            return
        self._command.execute()
