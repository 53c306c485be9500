# Demo data
DEMO_ELEMENTS = [1, 2, 3, 4, 5]

# Logging
LOGS_DIR_NAME = "logs"
DEMO_LOGGER_NAME = "patterns_demo"

# Console messages
class Message:
    OBSERVER_NOTIFIED = "Observer notified"
    STRATEGY_A = "Executing strategy A"
    STRATEGY_B = "Executing strategy B"
    ACTION_PERFORMED = "Action performed"
    ELEMENT = "Element: {}"

# Demo section headers (logged, not printed)
class Section:
    OBSERVER = "Observer pattern"
    STRATEGY = "Strategy pattern"
    COMMAND = "Command pattern"
    ITERATOR = "Iterator pattern"
