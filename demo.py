from typing import Callable, Optional

from behavioral.command import ConcreteCommand, Invoker, Receiver
from behavioral.iterator import Iterator
from behavioral.observer import ConcreteObserver, Subject
from behavioral.strategy import ConcreteStrategyA, ConcreteStrategyB, Context
from common.config import DEMO_ELEMENTS, DEMO_LOGGER_NAME, Message, Section
from common.utils import Logger, console_output


def main(output: Callable[[str], None] = console_output, logger: Optional[Logger] = None) -> None:
    """
    Build one instance of each pattern and drive it.
    :param output: Sink for the console lines the pattern participants produce.
    :param logger: Logger for demo events. A file logger is created if omitted.
    """
    if logger is None:
        logger = Logger(DEMO_LOGGER_NAME)

    logger.log(Section.OBSERVER)
    subject = Subject(logger)
    subject.add_observer(ConcreteObserver(output))
    subject.do_something()

    logger.log(Section.STRATEGY)
    context = Context(ConcreteStrategyA(output), logger)
    context.execute_strategy()
    context.set_strategy(ConcreteStrategyB(output))
    context.execute_strategy()

    logger.log(Section.COMMAND)
    receiver = Receiver(output)
    command = ConcreteCommand(receiver)
    invoker = Invoker(logger)
    invoker.set_command(command)
    invoker.execute_command()

    logger.log(Section.ITERATOR)
    iterator = Iterator(DEMO_ELEMENTS)
    while iterator.has_next():
        element = iterator.next()
        output(Message.ELEMENT.format(element))

    logger.log("Demo finished")


if __name__ == "__main__":
    main()
