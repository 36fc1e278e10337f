"""
CPS::Client::Logger::File - A file backend for the logger

It supports automatic filesize limitation.
"""

import os
from datetime import datetime

from CPS.Client.Logger.Backend import Backend


class File(Backend):
    """File-based logger backend with automatic filesize limitation."""

    def __init__(self, logfile=None, **params):
        """
        Initialize the file logger backend.

        Args:
            logfile (str): Path to the log file
            **params: Additional parameters, 'logfile-maxsize' is the maximum
                log file size in MB (0 for unlimited)
        """
        super().__init__(params.get('config'))
        self.logfile = logfile
        maxsize = params.get('logfile-maxsize') or params.get('logfile_maxsize')
        self.logfile_maxsize = int(maxsize) * 1024 * 1024 if maxsize else 0

    def addMessage(self, *, level, message):
        if not self.logfile:
            return

        mode = 'a'
        if self.logfile_maxsize and os.path.exists(self.logfile):
            if os.path.getsize(self.logfile) > self.logfile_maxsize:
                mode = 'w'

        timestamp = datetime.now().strftime('%a %b %d %H:%M:%S %Y')
        try:
            with open(self.logfile, mode, encoding='utf-8') as handle:
                handle.write(f"[{timestamp}][{level}] {message}\n")
        except OSError as e:
            print(f"Warning: Can't open {self.logfile}: {e}")
