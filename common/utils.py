import os
import datetime

from common.config import LOGS_DIR_NAME

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class Logger:
    """
    Logger for demo events, writing to a text file and optionally printing to console.
    """

    def __init__(self, name: str) -> None:
        logs_dir = get_logs_dir()
        if not os.path.exists(logs_dir):
            os.makedirs(logs_dir)

        self.name = name
        self.log_file = os.path.join(logs_dir, f"{name}.txt")

        with open(self.log_file, 'w') as f:
            timestamp = get_current_time_string()
            f.write(f"[{timestamp}] {name} started\n")

    def log(self, message: str, also_print: bool = False) -> None:
        """
        Log a message to the log file (and optionally print it to the console).
        :param message: Message to log.
        :param also_print: Whether to print the message to console as well.
        """
        timestamp = get_current_time_string()
        log_entry = f"[{timestamp}] {message}\n"

        with open(self.log_file, 'a') as f:
            f.write(log_entry)

        if also_print:
            print(f"[{timestamp}] {message}")


def get_logs_dir() -> str:
    """
    Resolve the logs folder: next to the sources in a checkout, otherwise under the
    current working directory (an installed package must not write into site-packages).
    :return: Absolute path of the logs folder.
    """
    if os.path.exists(os.path.join(project_root, "pyproject.toml")):
        base_dir = project_root
    else:
        base_dir = os.getcwd()
    return os.path.join(base_dir, LOGS_DIR_NAME)


def get_current_time_string() -> str:
    """
    Get the current time as a string formatted HH:MM:SS.
    :return: Current time string.
    """
    return datetime.datetime.now().strftime("%H:%M:%S")


def console_output(message: str) -> None:
    """
    Default output sink for pattern participants: one line on stdout.
    :param message: Line to print.
    """
    print(message)
