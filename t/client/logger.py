#!/usr/bin/env python3

import sys
import pytest

sys.path.insert(0, 'lib')

from CPS.Client.Config import Config
from CPS.Client.Logger import Logger, LOG_DEBUG, LOG_DEBUG2, LOG_INFO
from CPS.Client.Logger.File import File
from CPS.Client.Logger.Stderr import Stderr
from CPS.Client.Version import USER_AGENT


VERBOSITY_TESTS = {
    0: (LOG_INFO, ['info', 'warning', 'error']),
    1: (LOG_DEBUG, ['debug', 'info', 'warning', 'error']),
    2: (LOG_DEBUG2, ['debug2', 'debug', 'info', 'warning', 'error']),
}


def log_all(logger):
    logger.debug2('debug2 message')
    logger.debug('debug message')
    logger.info('info message')
    logger.warning('warning message')
    logger.error('error message')


class TestLogger:
    """Tests for the logger"""

    @pytest.mark.parametrize('debug', sorted(VERBOSITY_TESTS))
    def test_verbosity(self, debug, capsys):
        """Test messages reaching stderr per debug level"""
        verbosity, levels = VERBOSITY_TESTS[debug]
        logger = Logger(logger='Stderr', debug=debug)
        assert logger.verbosity == verbosity
        assert logger.debug_level() == debug

        capsys.readouterr()
        log_all(logger)
        err = capsys.readouterr().err
        for level in ['debug2', 'debug', 'info', 'warning', 'error']:
            line = f"[{level}] {level} message"
            if level in levels:
                assert line in err
            else:
                assert line not in err

    def test_event_callback(self, capsys):
        """Test callback sees debug messages even when they are not logged"""
        events = []
        logger = Logger(logger='Stderr')
        logger.register_event_cb(lambda level, message: events.append((level, message)))

        capsys.readouterr()
        log_all(logger)
        assert [level for level, _ in events] == ['debug2', 'debug', 'info', 'warning', 'error']
        assert '[debug] debug message' not in capsys.readouterr().err

    def test_prefix(self):
        events = []
        logger = Logger(logger='Stderr', prefix='[test] ')
        logger.register_event_cb(lambda level, message: events.append(message))
        logger.info('hello\n')
        assert events == ['[test] hello']

    def test_empty_message(self):
        events = []
        logger = Logger(logger='Stderr')
        logger.register_event_cb(lambda level, message: events.append(message))
        logger.info('')
        assert events == []

    def test_default_backend(self):
        logger = Logger()
        assert len(logger.backends) == 1
        assert isinstance(logger.backends[0], Stderr)

    def test_duplicate_backends(self):
        logger = Logger(logger='stderr,Stderr')
        assert len(logger.backends) == 1

    def test_unknown_backend(self, capsys):
        """Test an unknown backend is reported and skipped"""
        logger = Logger(logger='Stderr,Syslog2000')
        assert len(logger.backends) == 1
        assert 'Failed to load Logger backend Syslog2000' in capsys.readouterr().err

    def test_from_config(self, tmp_path, capsys):
        """Test logger settings read from a configuration"""
        logfile = tmp_path / 'client.log'
        config = Config(options={'debug': 2, 'logfile': str(logfile)})
        logger = Logger(config=config)
        assert logger.verbosity == LOG_DEBUG2
        assert [type(backend) for backend in logger.backends] == [Stderr, File]
        assert USER_AGENT in logfile.read_text()

    def test_params_fill_config(self):
        config = Config()
        logger = Logger(config=config, debug=1)
        assert logger.verbosity == LOG_DEBUG


class TestFileBackend:
    """Tests for the file backend"""

    def test_write(self, tmp_path):
        logfile = tmp_path / 'client.log'
        backend = File(logfile=str(logfile))
        backend.addMessage(level='info', message='first')
        backend.addMessage(level='error', message='second')
        lines = logfile.read_text().splitlines()
        assert len(lines) == 2
        assert lines[0].endswith('[info] first')
        assert lines[1].endswith('[error] second')

    def test_maxsize(self, tmp_path):
        """Test the log file is truncated once over its size limit"""
        logfile = tmp_path / 'client.log'
        logfile.write_text('x' * (1024 * 1024 + 1))
        backend = File(logfile=str(logfile), **{'logfile-maxsize': 1})
        backend.addMessage(level='info', message='fresh')
        lines = logfile.read_text().splitlines()
        assert len(lines) == 1
        assert lines[0].endswith('[info] fresh')

    def test_no_logfile(self, tmp_path):
        backend = File()
        backend.addMessage(level='info', message='lost')
        assert list(tmp_path.iterdir()) == []


class TestStderrBackend:
    """Tests for the stderr backend"""

    def test_plain(self, capsys):
        Stderr().addMessage(level='warning', message='careful')
        assert capsys.readouterr().err == '[warning] careful\n'

    def test_color(self, capsys):
        Stderr(color=True).addMessage(level='error', message='failed')
        assert capsys.readouterr().err == '\033[1;31m[error] failed\033[0m\n'


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
