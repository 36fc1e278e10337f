#!/usr/bin/env python3

import sys
import xml.etree.ElementTree as ET
from unittest.mock import patch

import pytest

sys.path.insert(0, 'lib')

from CPS.Client.Cli import get_parser, build_request, main
from CPS.Client.XML import XML_DECLARATION


def run(capsys, *argv):
    code = main(list(argv))
    out = capsys.readouterr().out
    return code, out


def parse(out):
    assert out.startswith(XML_DECLARATION)
    return ET.fromstring(out[len(XML_DECLARATION):])


BUILD_TESTS = {
    'search': (['-q', 'foo', '--offset', '0', '--docs', '10'], 'search',
               {'query': 'foo', 'offset': 0, 'docs': 10}, {}),
    'sql': (['--sql', 'SELECT *'], 'search', {'sql': 'SELECT *'}, {}),
    'delete': (['-c', 'delete', '--id', 'a', '--id', 'b'], 'delete',
               {}, {'_id': ['a', 'b']}),
    'retrieve': (['-c', 'retrieve', '--id', 'a'], 'retrieve', {}, {'_id': 'a'}),
    'list-last': (['-c', 'list-last', '--list', 'document/title=yes', '--docs', '3'],
                  'list-last', {'list': {'document/title': 'yes'}, 'docs': 3}, {}),
    'similar-text': (['-c', 'similar', '--text', 'foo bar', '--len', '5'], 'similar',
                     {'text': 'foo bar', 'len': 5}, {}),
    'similar-id': (['-c', 'similar', '--id', 'doc1', '--quota', '2'], 'similar',
                   {'id': 'doc1', 'quota': 2}, {}),
    'alternatives': (['-c', 'alternatives', '-q', 'foo', '--cr', '0.5'], 'alternatives',
                     {'query': 'foo', 'cr': 0.5}, {}),
    'show-history': (['-c', 'show-history', '--id', 'a', '--return-docs'], 'show-history',
                     {'return_doc': 'yes'}, {'_id': 'a'}),
    'list-facets': (['-c', 'list-facets', '--path', 'document/tag'], 'list-facets',
                    {'path': 'document/tag'}, {}),
    'status': (['-c', 'status'], 'status', {}, {}),
}


class TestBuildRequest:
    """Tests for requests built from the command line"""

    @pytest.mark.parametrize('case', sorted(BUILD_TESTS))
    def test_build(self, case):
        argv, command, params, unknown = BUILD_TESTS[case]
        request = build_request(get_parser().parse_args(argv))
        assert request.command == command
        assert request.params == params
        assert request.unknownParams == unknown

    def test_every_command_has_builder(self):
        parser = get_parser()
        choices = next(
            action.choices for action in parser._actions if action.dest == 'command'
        )
        for command in choices:
            request = build_request(parser.parse_args(['-c', command]))
            assert request.command == command


class TestMain:
    """Tests for the cps-request entry point"""

    def test_print_search(self, capsys):
        code, out = run(capsys, '-q', 'hello', '--docs', '5')
        assert code == 0
        root = parse(out)
        assert root.tag == 'search'
        assert root.findtext('query') == 'hello'
        assert root.findtext('docs') == '5'

    def test_print_insert(self, capsys):
        code, out = run(capsys, '-c', 'insert', '--document', '<doc><id>1</id></doc>')
        assert code == 0
        root = parse(out)
        assert root.tag == 'insert'
        assert root.find('document/doc').findtext('id') == '1'

    def test_docs_from_config(self, capsys, tmp_path):
        conf = tmp_path / 'client.cfg'
        conf.write_text("docs = 7\n")
        code, out = run(capsys, '-q', 'hello', '--conf-file', str(conf))
        assert code == 0
        assert parse(out).findtext('docs') == '7'

    def test_missing_conf_file(self, capsys, tmp_path):
        code = main(['--conf-file', str(tmp_path / 'missing.cfg')])
        assert code == 2
        assert 'non-existing file' in capsys.readouterr().err

    def test_invalid_timeout(self, capsys):
        assert main(['--timeout', '0']) == 2

    def test_send(self, capsys):
        """Test the answer is printed when a server is given"""
        with patch('CPS.Client.HTTP.Client.Client.send', return_value='<reply/>') as send:
            code, out = run(capsys, '-c', 'status', '--url', 'http://localhost:5580/')
        assert code == 0
        assert out == '<reply/>\n'
        request = send.call_args[0][0]
        assert request.command == 'status'

    def test_send_failure(self, capsys):
        with patch('CPS.Client.HTTP.Client.Client.send', return_value=None):
            code, out = run(capsys, '-c', 'status', '--url', 'http://localhost:5580/')
        assert code == 1
        assert out == ''


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
