from typing import Callable, Optional, Tuple

from common.config import Message
from common.patterns import Observer
from common.utils import Logger, console_output


class Subject:
    """
    Observer Pattern: keeps an ordered list of observers and notifies them after every change.
    Observers are referenced, not owned.
    """

    def __init__(self, logger: Optional[Logger] = None):
        self._observers: list[Observer] = []
        self.logger = logger

    @property
    def observers(self) -> Tuple[Observer, ...]:
        return tuple(self._observers)

    def __len__(self) -> int:
        return len(self._observers)

    def add_observer(self, observer: Observer) -> None:
        """
        Register an observer. The same observer may be registered more than once.
        :param observer: Observer to append to the notification list.
        """
        self._observers.append(observer)
        self._log(f"Observer added: {type(observer).__name__}")

    def remove_observer(self, observer: Observer) -> None:
        """
        Remove every registration of an observer (compared by identity).
        Removing an observer that is not registered does nothing.
        :param observer: Observer to remove.
        """
        remaining = [o for o in self._observers if o is not observer]
        if len(remaining) != len(self._observers):
            self._log(f"Observer removed: {type(observer).__name__}")
        self._observers = remaining

    def notify_observers(self) -> None:
        """Call update() on each registered observer, in registration order."""
        # Snapshot so observers may detach themselves from inside update()
        observers = list(self._observers)
        for observer in observers:
            observer.update()
        self._log(f"Notified {len(observers)} observer(s)")

    def do_something(self) -> None:
        """Perform the subject's state change, then inform observers."""
        self._log("Subject state changed")
        self.notify_observers()

    def _log(self, message: str) -> None:
        if self.logger:
            self.logger.log(message)


class ConcreteObserver(Observer):
    def __init__(self, output: Callable[[str], None] = console_output):
        self.output = output

    def update(self) -> None:
        self.output(Message.OBSERVER_NOTIFIED)
