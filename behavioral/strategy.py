from typing import Callable, Optional

from common.config import Message
from common.patterns import Strategy
from common.utils import Logger, console_output


class Context:
    """
    Strategy Pattern: holds one interchangeable algorithm and delegates to it.
    """

    def __init__(self, strategy: Strategy, logger: Optional[Logger] = None):
        if strategy is None:
            raise ValueError("Context requires an initial strategy")
        self._strategy: Strategy = strategy
        self.logger = logger

    @property
    def strategy(self) -> Strategy:
        return self._strategy

    def set_strategy(self, strategy: Strategy) -> None:
        """
        Swap the held strategy. Takes effect on the next execute_strategy() call.
        :param strategy: Replacement strategy.
        """
        if self.logger:
            self.logger.log(
                f"Strategy changed: {type(self._strategy).__name__} -> {type(strategy).__name__}"
            )
        self._strategy = strategy

    def execute_strategy(self):
        """
        Run the current strategy.
        :return: Whatever the strategy's execute() returns.
        """
        return self._strategy.execute()


class ConcreteStrategyA(Strategy):
    def __init__(self, output: Callable[[str], None] = console_output):
        self.output = output

    def execute(self) -> None:
        self.output(Message.STRATEGY_A)


class ConcreteStrategyB(Strategy):
    def __init__(self, output: Callable[[str], None] = console_output):
        self.output = output

    def execute(self) -> None:
        self.output(Message.STRATEGY_B)
