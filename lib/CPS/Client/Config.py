"""
CPS Client Config

This module handles configuration management for the CPS client: defaults,
overridden by a configuration file, overridden by caller options.
"""

import os
import re
import warnings
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from CPS.Client.Tools import empty, split_list


LINE_RE = re.compile(r'^\s*([\w-]+)\s*=\s*(.*)$')
INCLUDE_RE = re.compile(r'^\s*(include)\s+(.+)$', re.I)
QUOTED_RE = re.compile(r"^(['\"])(.*?)\1$")
COMMENT_RE = re.compile(r'\s*#.*$')


DEFAULT = {
    'ca-cert-dir': None,
    'ca-cert-file': None,
    'color': None,
    'debug': None,
    'docs': None,
    'logger': 'Stderr',
    'logfile': None,
    'logfile-maxsize': None,
    'no-ssl-check': None,
    'proxy': None,
    'server': None,
    'timeout': 180,
    'user-agent': None,
}


class Config:
    """
    Configuration manager for the CPS client.

    Values are reachable as items (config['no-ssl-check']) or, for names
    without dashes, as attributes (config.server).
    """

    def __init__(self, **params: Any):
        """
        Initialize configuration.

        Args:
            **params: Configuration parameters including:
                - defaults: Default configuration dict
                - options: Command-line options dict, 'conf-file' naming the
                  configuration file to load

        Raises:
            TypeError: If defaults is not a dictionary
        """
        defaults = params.get('defaults')
        if defaults is not None and not isinstance(defaults, dict):
            raise TypeError("config: default can only be a dict")

        self._options: Dict[str, Any] = dict(params.get('options') or {})
        self._default: Dict[str, Any] = defaults or DEFAULT.copy()
        self._values: Dict[str, Any] = {}
        self._loadedConfs: Dict[str, bool] = {}

        self._load()

    def _load(self) -> None:
        self._values = dict(self._default)
        self._loadedConfs = {}

        conf_file = self._options.get('conf-file')
        if conf_file:
            self.loadFromFile(conf_file)

        self._loadUserParams(self._options)
        self._checkContent()

    def __getattr__(self, name: str) -> Any:
        if name.startswith('_'):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )
        return self._values.get(name)

    def __getitem__(self, name: str) -> Any:
        return self._values.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._values

    def get(self, name: str, default: Any = None) -> Any:
        value = self._values.get(name)
        return default if value is None else value

    def reload(self) -> None:
        """Reload configuration from sources."""
        self._load()

    def loadFromFile(self, file: str) -> None:
        """
        Load a `key = value` configuration file over the current values.

        Quoted values are unquoted, `#` starts a comment outside quotes, and
        `include <path>` pulls in another file or every `*.cfg` file of a
        directory, relative paths being resolved against the including file.

        Args:
            file: Configuration file path

        Raises:
            FileNotFoundError: If file doesn't exist
            PermissionError: If file isn't readable
        """
        path = Path(file)
        if not path.is_file():
            raise FileNotFoundError(f"Config: non-existing file {file}")
        if not os.access(path, os.R_OK):
            raise PermissionError(f"Config: non-readable file {file}")

        if str(path) in self._loadedConfs:
            warnings.warn(f"Config: {file} configuration file still loaded")
            return
        self._loadedConfs[str(path)] = True

        for line in path.read_text(encoding='utf-8').splitlines():
            directive = self._parseLine(line)
            if directive is None:
                continue

            key, val = directive
            if key.lower() == 'include':
                self._include(val, path)
            elif key in self._default:
                self._values[key] = val
            else:
                warnings.warn(f"Config: unknown configuration directive {key}")

    @staticmethod
    def _parseLine(line: str) -> Optional[Tuple[str, str]]:
        m = LINE_RE.match(line) or INCLUDE_RE.match(line)
        if not m:
            return None
        val = m.group(2).strip()
        quoted = QUOTED_RE.match(val)
        if quoted:
            return m.group(1), quoted.group(2)
        return m.group(1), COMMENT_RE.sub('', val)

    def _include(self, include: str, current: Path) -> None:
        target = Path(include)
        if not target.is_absolute():
            target = current.parent / target
        target = target.resolve()

        if target.is_dir():
            files = sorted(cfg for cfg in target.glob('*.cfg') if cfg.is_file())
        elif target.is_file():
            files = [target]
        else:
            return

        for cfg in files:
            if os.access(cfg, os.R_OK):
                self.loadFromFile(str(cfg))

    def _loadUserParams(self, params: Dict[str, Any]) -> None:
        for key, value in params.items():
            if key == 'conf-file' or value is None:
                continue
            self._values[key] = value

    def _checkContent(self) -> None:
        """
        Validate and normalize configuration content.

        Raises:
            RuntimeError: If configuration is invalid
        """
        # Add File logger if logfile is set
        if self._values.get('logfile'):
            loggers = split_list(self._values.get('logger'))
            if 'File' not in [name.capitalize() for name in loggers]:
                loggers.append('File')
            self._values['logger'] = loggers

        if self._values.get('ca-cert-file') and self._values.get('ca-cert-dir'):
            raise RuntimeError(
                "Config: use either 'ca-cert-file' or 'ca-cert-dir' option, not both"
            )

        self._values['logger'] = split_list(self._values.get('logger'))
        if (any(name.lower() == 'file' for name in self._values['logger'])
                and empty(self._values.get('logfile'))):
            raise RuntimeError(
                "Config: usage of 'file' logger backend makes 'logfile' option mandatory"
            )

        for option in ['no-ssl-check', 'color']:
            val = self._values.get(option)
            if isinstance(val, str):
                self._values[option] = val.strip().lower() not in ('', '0', 'no', 'false')

        # Resolve paths to absolute paths
        for option in ['ca-cert-file', 'ca-cert-dir', 'logfile']:
            val = self._values.get(option)
            if not empty(val):
                self._values[option] = str(Path(val).resolve())

        timeout = self._values.get('timeout')
        try:
            timeout = int(timeout)
        except (TypeError, ValueError):
            raise RuntimeError(f"Config: invalid timeout value '{timeout}'")
        if timeout <= 0:
            raise RuntimeError(f"Config: invalid timeout value '{timeout}'")
        self._values['timeout'] = timeout

        docs = self._values.get('docs')
        if not empty(docs):
            try:
                self._values['docs'] = int(docs)
            except (TypeError, ValueError):
                raise RuntimeError(f"Config: invalid docs value '{docs}'")

    def logger(self) -> Dict[str, Any]:
        """
        Get logger configuration.

        Returns:
            Dictionary of logger configuration values
        """
        return {
            k: self._values.get(k)
            for k in ['debug', 'logger', 'logfile', 'logfile-maxsize', 'color']
        }

    def asDict(self) -> Dict[str, Any]:
        return dict(self._values)
