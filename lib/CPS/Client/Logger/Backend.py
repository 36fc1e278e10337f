"""
CPS::Client::Logger::Backend - An abstract logger backend
"""

from abc import ABC, abstractmethod


class Backend(ABC):
    """Abstract base class for logger backends."""

    test = False

    def __init__(self, config=None):
        """
        Initialize the logger backend.

        Args:
            config: The client configuration object
        """
        self.config = config

    @abstractmethod
    def addMessage(self, *, level, message):
        """
        Add a log message with a specific level.

        Args:
            level (str): Can be one of: debug2, debug, info, warning, error
            message (str): The log message
        """

    def reload(self):
        """Used to reload a logger."""
