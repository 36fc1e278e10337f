#!/usr/bin/env python3

import sys
from pathlib import Path
import pytest

# Add paths for imports
sys.path.insert(0, 'lib')

from CPS.Client.Config import Config, DEFAULT


CONFIG_TESTS = {
    'sample1': {
        'content': (
            "server = http://localhost:5580/search\n"
            "timeout = 30\n"
            "# a comment\n"
            "docs = 20   # default page size\n"
        ),
        'expected': {
            'server': 'http://localhost:5580/search',
            'timeout': 30,
            'docs': 20,
            'logger': ['Stderr'],
        },
    },
    'sample2': {
        'content': (
            "proxy = 'http://proxy:3128'\n"
            "no-ssl-check = 1\n"
            "logger = Stderr,,Stderr\n"
            "user-agent = \"my client # 1\"\n"
        ),
        'expected': {
            'proxy': 'http://proxy:3128',
            'no-ssl-check': True,
            'logger': ['Stderr', 'Stderr'],
            'user-agent': 'my client # 1',
            'timeout': 180,
        },
    },
    'sample3': {
        'content': "no-ssl-check = 0\ncolor = no\n",
        'expected': {
            'no-ssl-check': False,
            'color': False,
        },
    },
}


@pytest.fixture
def conf_file(tmp_path):
    def write(content, name='client.cfg'):
        path = tmp_path / name
        path.write_text(content, encoding='utf-8')
        return str(path)
    return write


class TestConfig:
    """Tests for CPS client configuration"""

    def test_defaults(self):
        """Test default values"""
        config = Config()
        assert config['timeout'] == 180
        assert config['logger'] == ['Stderr']
        assert config['server'] is None
        assert config.timeout == 180
        assert 'no-ssl-check' in config

    def test_options_override_defaults(self):
        config = Config(options={'server': 'http://host/', 'timeout': '12', 'proxy': None})
        assert config.server == 'http://host/'
        assert config['timeout'] == 12
        assert config['proxy'] is None

    @pytest.mark.parametrize('sample', sorted(CONFIG_TESTS))
    def test_file(self, conf_file, sample):
        """Test loading configuration files"""
        path = conf_file(CONFIG_TESTS[sample]['content'])
        config = Config(options={'conf-file': path})
        for key, value in CONFIG_TESTS[sample]['expected'].items():
            assert config[key] == value, key

    def test_options_override_file(self, conf_file):
        path = conf_file("timeout = 30\nserver = http://a/\n")
        config = Config(options={'conf-file': path, 'timeout': 5})
        assert config['timeout'] == 5
        assert config['server'] == 'http://a/'

    def test_unknown_directive(self, conf_file):
        path = conf_file("foo = bar\n")
        with pytest.warns(UserWarning, match="unknown configuration directive foo"):
            config = Config(options={'conf-file': path})
        assert 'foo' not in config

    def test_include_file(self, conf_file):
        """Test include directive with a file"""
        conf_file("timeout = 99\n", name='extra.cfg')
        path = conf_file("timeout = 10\ninclude extra.cfg\n")
        config = Config(options={'conf-file': path})
        assert config['timeout'] == 99

    def test_include_directory(self, conf_file, tmp_path):
        """Test include directive with a directory"""
        conf_d = tmp_path / 'conf.d'
        conf_d.mkdir()
        (conf_d / '01.cfg').write_text("timeout = 11\n")
        (conf_d / '02.cfg').write_text("server = http://included/\n")
        (conf_d / 'ignored.txt').write_text("timeout = 1\n")
        path = conf_file("include = 'conf.d'\n")
        config = Config(options={'conf-file': path})
        assert config['timeout'] == 11
        assert config['server'] == 'http://included/'

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config(options={'conf-file': str(tmp_path / 'missing.cfg')})

    def test_logfile_adds_file_logger(self, tmp_path):
        config = Config(options={'logfile': str(tmp_path / 'client.log')})
        assert config['logger'] == ['Stderr', 'File']
        assert Path(config['logfile']).is_absolute()

    def test_file_logger_needs_logfile(self):
        with pytest.raises(RuntimeError, match="logfile"):
            Config(options={'logger': 'file'})

    def test_exclusive_ca_options(self):
        with pytest.raises(RuntimeError, match="ca-cert"):
            Config(options={'ca-cert-file': '/tmp/ca.pem', 'ca-cert-dir': '/tmp'})

    @pytest.mark.parametrize('timeout', ['abc', 0, -5])
    def test_invalid_timeout(self, timeout):
        with pytest.raises(RuntimeError, match="timeout"):
            Config(options={'timeout': timeout})

    def test_invalid_docs(self):
        with pytest.raises(RuntimeError, match="docs"):
            Config(options={'docs': 'many'})

    def test_invalid_defaults(self):
        with pytest.raises(TypeError):
            Config(defaults=['timeout'])

    def test_logger_settings(self):
        config = Config(options={'debug': 2})
        assert config.logger() == {
            'debug': 2,
            'logger': ['Stderr'],
            'logfile': None,
            'logfile-maxsize': None,
            'color': None,
        }

    def test_reload(self, conf_file):
        """Test reload picks up file changes"""
        path = conf_file("timeout = 10\n")
        config = Config(options={'conf-file': path})
        Path(path).write_text("timeout = 20\n")
        config.reload()
        assert config['timeout'] == 20

    def test_default_is_not_modified(self):
        Config(options={'timeout': 3})
        assert DEFAULT['timeout'] == 180


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
