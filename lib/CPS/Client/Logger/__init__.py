"""
CPS Client Logger

Verbosity-filtered logging for the CPS client, fanned out to backends picked
by name (Stderr, File). An optional event callback sees every message,
including debug ones filtered out of the backends.
"""

import importlib
import sys
from typing import Any, Callable, List, Optional

from CPS.Client.Tools import split_list
from CPS.Client.Version import USER_AGENT

LOG_DEBUG2 = 5
LOG_DEBUG = 4
LOG_INFO = 3
LOG_WARNING = 2
LOG_ERROR = 1
LOG_NONE = 0

# Verbosity needed for a level to reach the backends
LEVELS = {
    'debug2': LOG_DEBUG2,
    'debug': LOG_DEBUG,
    'info': LOG_INFO,
    'warning': LOG_WARNING,
    'error': LOG_ERROR,
}

# Levels still handed to the event callback below the verbosity
CALLBACK_LEVELS = ('debug2', 'debug')


def _verbosity(debug: Any) -> int:
    try:
        debug = int(debug or 0)
    except (TypeError, ValueError):
        debug = 0
    return LOG_INFO + min(max(debug, 0), 2)


class Logger:
    """
    Logger of the CPS client.

    Args:
        **params: Parameters including:
            - config: Config object (or dict) providing the logger settings,
              other params only fill the settings it leaves unset
            - debug: 0 for info, 1 for debug, 2 for debug2 verbosity
            - logger: Backend names, as a list or comma separated string
            - prefix: String prepended to every message
    """

    def __init__(self, **params: Any) -> None:
        settings = self._settings(params)

        self.verbosity: int = _verbosity(settings.get('debug'))
        self.prefix: Optional[str] = settings.get('prefix')
        self._event_cb: Optional[Callable] = None
        self.backends: List[Any] = []

        names = []
        for name in split_list(settings.get('logger')) or ['Stderr']:
            name = name.capitalize()
            if name not in names:
                names.append(name)

        for name in names:
            backend = self._loadBackend(name, settings)
            if backend is None:
                continue
            self.backends.append(backend)
            if not backend.test:
                self.debug(f"Logger backend {name} initialized")

        self.debug2(USER_AGENT)

    @staticmethod
    def _settings(params: dict) -> dict:
        config = params.get('config')
        if config is None:
            return dict(params)

        settings = config.logger() if hasattr(config, 'logger') else dict(config)
        for key, value in params.items():
            if key != 'config' and settings.get(key) is None:
                settings[key] = value
        return settings

    @staticmethod
    def _loadBackend(name: str, settings: dict) -> Any:
        try:
            module = importlib.import_module(f"CPS.Client.Logger.{name}")
            backend_class = getattr(module, name)
        except (ImportError, AttributeError) as e:
            print(f"Failed to load Logger backend {name}: {e}", file=sys.stderr)
            return None
        return backend_class(**settings)

    def register_event_cb(self, callback: Callable[..., None]) -> None:
        """
        Register a callback for log events.

        Args:
            callback: Function called with level and message keywords
        """
        self._event_cb = callback

    def reload(self) -> None:
        for backend in self.backends:
            backend.reload()

    def debug_level(self) -> int:
        """Return the debug setting matching the verbosity (0, 1 or 2)."""
        return max(self.verbosity - LOG_INFO, 0)

    def log(self, level: str, message: str) -> None:
        """
        Log a message at the given level.

        Args:
            level: One of debug2, debug, info, warning, error
            message: Message to log, trailing newlines are dropped
        """
        if not message:
            return

        enabled = self.verbosity >= LEVELS[level]
        has_cb = callable(self._event_cb)
        if not enabled and not (has_cb and level in CALLBACK_LEVELS):
            return

        if self.prefix:
            message = self.prefix + message
        message = message.rstrip("\n")

        if has_cb:
            self._event_cb(level=level, message=message)
        if not enabled:
            return

        for backend in self.backends:
            backend.addMessage(level=level, message=message)

    def debug2(self, message: str) -> None:
        self.log('debug2', message)

    def debug(self, message: str) -> None:
        self.log('debug', message)

    def info(self, message: str) -> None:
        self.log('info', message)

    def warning(self, message: str) -> None:
        self.log('warning', message)

    def error(self, message: str) -> None:
        self.log('error', message)


__all__ = ['Logger', 'LOG_DEBUG2', 'LOG_DEBUG', 'LOG_INFO', 'LOG_WARNING', 'LOG_ERROR', 'LOG_NONE']
