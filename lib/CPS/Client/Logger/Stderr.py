"""
CPS::Client::Logger::Stderr - A stderr backend for the logger

It supports coloring based on message level.
"""

import sys

from CPS.Client.Logger.Backend import Backend


class Stderr(Backend):
    """Stderr-based logger backend with optional color support."""

    def __init__(self, color=False, **params):
        super().__init__(params.get('config'))

        # ANSI color formats for different log levels
        self._formats = None
        if color:
            self._formats = {
                'warning': '\033[1;35m[{}] {}\033[0m\n',
                'error': '\033[1;31m[{}] {}\033[0m\n',
                'info': '\033[1;34m[{}]\033[0m {}\n',
                'debug': '\033[1;1m[{}]\033[0m {}\n',
                'debug2': '\033[1;36m[{}]\033[0m {}\n'
            }

    def addMessage(self, *, level, message):
        if not message:
            return

        level = level or 'info'

        if self._formats and level in self._formats:
            format_str = self._formats[level]
        else:
            format_str = '[{}] {}\n'

        sys.stderr.write(format_str.format(level, message))
        sys.stderr.flush()
