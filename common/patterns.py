from abc import ABC, abstractmethod

# Observer pattern
class Observer(ABC):
    @abstractmethod
    def update(self) -> None:
        pass

# Strategy pattern
class Strategy(ABC):
    @abstractmethod
    def execute(self):
        pass

# Command pattern
class Command(ABC):
    @abstractmethod
    def execute(self) -> None:
        pass
