#!/usr/bin/env python3

import sys
import pytest

# Add paths for imports
sys.path.insert(0, 'lib')

from CPS.Client.Command import Command
from CPS.Client.Logger import Logger
from CPS.Client.Request import Request, RetrieveRequest, SearchRequest, wireTag


# Setter name, parameter name, valid value, invalid values
NUMERIC_SETTERS = {
    'setOffset': ('offset', 5, ['5', None, True, [1], {'a': 1}, 1j]),
    'setDocs': ('docs', 20, ['20', None, False, (20,), 20j]),
    'setCr': ('cr', 0.5, ['0.5', None, True, 0.5 + 0j]),
    'setIdif': ('idif', 0.3, ['high', None, [0.3]]),
    'setH': ('h', 0.1, ['', None, {'h': 0.1}]),
}


class TestRequestConstruction:
    """Tests for the request base class construction"""

    def test_command_string(self):
        """Test a string sets the command literal"""
        request = Request('status')
        assert request.command == 'status'
        assert request.params == {}
        assert request.unknownParams == {}

    def test_command_enum(self):
        """Test a Command member is stored as its wire name"""
        request = Request(Command.LIST_PATHS)
        assert request.command == 'list-paths'
        assert isinstance(request.command, str)
        assert not isinstance(request.command, Command)

    def test_unknown_command_passthrough(self):
        """Test unsupported commands are passed through"""
        request = Request('frobnicate')
        assert request.command == 'frobnicate'

    def test_unknown_command_logged(self):
        """Test unsupported commands are reported at debug level"""
        messages = []
        logger = Logger(logger='Stderr')
        logger.register_event_cb(lambda level, message: messages.append((level, message)))

        Request('frobnicate', logger=logger)
        assert ('debug', "request: passing through unsupported command 'frobnicate'") in messages

    def test_command_is_read_only(self):
        """Test command can't be changed after construction"""
        request = Request('search')
        with pytest.raises(AttributeError):
            request.command = 'delete'

    def test_missing_command(self):
        """Test a request always needs a command"""
        with pytest.raises(ValueError):
            Request('')
        with pytest.raises(ValueError):
            Request({'query': 'foo'})
        with pytest.raises(ValueError):
            Request(None)

    def test_instances_do_not_share_bags(self):
        """Test each request owns its parameter bags"""
        first = Request('search')
        second = Request('search')
        first.setQuery('foo')
        first.unknownParams['_id'] = 'id1'
        assert second.params == {}
        assert second.unknownParams == {}


class TestRequestTemplate:
    """Tests for object-driven construction"""

    def test_template_command(self):
        """Test an explicit command on the template is kept"""
        request = Request({'command': 'list-words', 'query': 'foo'})
        assert request.command == 'list-words'
        assert request.params == {'query': 'foo'}

    def test_template_fields(self):
        """Test template fields are dispatched to their setters and bags"""
        template = {
            'command': 'search',
            'query': 'foo',
            'offset': 10,
            'docs': 'twenty',
            'list': {'document/title': 'yes'},
            'path': ['a/b', 'c'],
            'sql': 'SELECT * FROM db',
            '_id': ['id1', 'id2'],
        }
        request = Request(template)
        assert request.params == {
            'query': 'foo',
            'offset': 10,
            'list': {'document/title': 'yes'},
            'path': ['a/b', 'c'],
            'sql': 'SELECT * FROM db',
        }
        assert request.unknownParams == {'_id': ['id1', 'id2']}

    def test_template_not_mutated(self):
        """Test the caller template is left untouched"""
        template = {'query': 'foo'}
        request = SearchRequest(template)
        assert request.command == 'search'
        assert template == {'query': 'foo'}

    def test_template_non_string_key(self):
        """Test template keys that are not strings are dropped"""
        messages = []
        logger = Logger(logger='Stderr')
        logger.register_event_cb(lambda level, message: messages.append((level, message)))

        request = SearchRequest({1: 'x', None: 'y', 'query': 'q'}, logger=logger)
        assert request.command == 'search'
        assert request.params == {'query': 'q'}
        assert request.unknownParams == {}
        assert ('debug2', "request: template ignoring value 1") in messages

    def test_template_field_in_one_bag(self):
        """Test a template field and its unknown twin end up in one bag"""
        for template in ({'id': 'a', '_id': 'b'}, {'_id': 'b', 'id': 'a'}):
            request = RetrieveRequest.fromTemplate(template)
            assert request.params == {}
            assert request.unknownParams == {'_id': 'b'}
            assert request.dumpAsHash() == {'retrieve': {'id': 'b'}}

    def test_from_template_default_command(self):
        """Test fromTemplate falls back to the class command"""
        request = SearchRequest.fromTemplate({'query': 'foo', 'docs': 5})
        assert isinstance(request, SearchRequest)
        assert request.command == 'search'
        assert request.params == {'query': 'foo', 'docs': 5}

    def test_from_template_explicit_command(self):
        """Test fromTemplate keeps the template command"""
        request = SearchRequest.fromTemplate({'command': 'search-delete', 'query': 'foo'})
        assert request.command == 'search-delete'

    def test_from_template_without_command(self):
        """Test fromTemplate on the base class needs a command"""
        with pytest.raises(ValueError):
            Request.fromTemplate({'query': 'foo'})


class TestRequestSetters:
    """Tests for the typed setters"""

    @pytest.mark.parametrize('setter', sorted(NUMERIC_SETTERS))
    def test_numeric_setter(self, setter):
        """Test numeric setters accept numbers"""
        name, value, _ = NUMERIC_SETTERS[setter]
        request = Request('search')
        getattr(request, setter)(value)
        assert request.params == {name: value}

    @pytest.mark.parametrize('setter', sorted(NUMERIC_SETTERS))
    def test_numeric_setter_ignores_invalid(self, setter):
        """Test numeric setters silently ignore anything else"""
        name, value, invalids = NUMERIC_SETTERS[setter]
        request = Request('search')
        getattr(request, setter)(value)
        for invalid in invalids:
            getattr(request, setter)(invalid)
            assert request.params == {name: value}

    def test_numeric_setter_zero(self):
        """Test zero is a valid number"""
        request = Request('search')
        request.setOffset(0)
        assert request.params == {'offset': 0}

    def test_set_query(self):
        """Test query accepts strings and objects"""
        request = Request('search')
        request.setQuery('hello')
        assert request.params['query'] == 'hello'
        request.setQuery({'title': 'hello'})
        assert request.params['query'] == {'title': 'hello'}
        request.setQuery(42)
        request.setQuery(None)
        assert request.params['query'] == {'title': 'hello'}

    def test_set_list(self):
        """Test listing policy is stored verbatim"""
        policy = {'document/title': 'yes', 'document/body': 'snippet'}
        request = Request('search')
        request.setList(policy)
        assert request.params['list'] is policy

    @pytest.mark.parametrize('value', [None, {}, '', 0, False, 'yes', ['a']])
    def test_set_list_ignores_falsy_and_non_objects(self, value):
        """Test listing policy stays unset for falsy or non-object values"""
        request = Request('search')
        request.setList(value)
        assert 'list' not in request.params

    def test_set_path(self):
        """Test path accepts a string or a list of strings"""
        request = Request('list-facets')
        request.setPath('document/category')
        assert request.params == {'path': 'document/category'}
        request.setPath(['a', 'b'])
        assert request.params == {'path': ['a', 'b']}
        request.setPath(['a', 3])
        request.setPath(3)
        assert request.params == {'path': ['a', 'b']}

    def test_set_param(self):
        """Test ad-hoc parameters"""
        request = Request('similar')
        request.setParam('len', 10)
        request.setParam('return_doc', 'yes')
        request.setParam('fields', ['a', 'b'])
        assert request.params == {'len': 10, 'return_doc': 'yes', 'fields': ['a', 'b']}

    def test_set_param_ignores_invalid(self):
        """Test ad-hoc parameters need a name and a scalar value"""
        request = Request('similar')
        request.setParam('', 'value')
        request.setParam(None, 'value')
        request.setParam('obj', {'a': 1})
        request.setParam('none', None)
        request.setParam('flag', True)
        assert request.params == {}

    def test_ignored_values_logged(self):
        """Test dropped values are reported at debug2 level"""
        messages = []
        logger = Logger(logger='Stderr')
        logger.register_event_cb(lambda level, message: messages.append((level, message)))

        request = Request('search', logger=logger)
        request.setOffset('ten')
        assert request.params == {}
        assert ('debug2', "request: setOffset ignoring value 'ten'") in messages


class TestRequestUnknownParams:
    """Tests for the unknown parameters and their named accessors"""

    def test_document_ids(self):
        """Test document ids accessor"""
        request = Request('retrieve')
        assert request.documentIds is None
        request.documentIds = ['id1', 'id2']
        assert request.unknownParams == {'_id': ['id1', 'id2']}
        assert request.documentIds == ['id1', 'id2']

    def test_document_ids_ignores_invalid(self):
        """Test document ids must be a string or a list"""
        request = Request('retrieve')
        request.documentIds = 12
        request.documentIds = {'id': 1}
        assert request.unknownParams == {}

    def test_document_payloads(self):
        """Test document payloads accessor"""
        request = Request('insert')
        request.documentPayloads = [{'id': '1', 'title': 'foo'}]
        assert request.unknownParams == {'_document': [{'id': '1', 'title': 'foo'}]}
        request.documentPayloads = 3.5
        assert request.documentPayloads == [{'id': '1', 'title': 'foo'}]

    def test_set_param_shadowed_by_unknown(self):
        """Test setParam leaves alone a tag held by an unknown parameter"""
        request = RetrieveRequest(['id1'])
        request.setParam('id', 'other')
        request.setParam('document', 'payload')
        assert request.params == {'document': 'payload'}
        assert request.unknownParams == {'_id': ['id1']}

    def test_unknown_replaces_param(self):
        """Test an unknown parameter evicts the param with its wire tag"""
        request = Request('insert')
        request.setParam('document', '<doc/>')
        request.setParam('id', 'x')
        request.documentPayloads = ['<doc><id>1</id></doc>']
        request.documentIds = 'x'
        assert request.params == {}
        assert set(request.unknownParams) == {'_document', '_id'}

    def test_direct_assignment(self):
        """Test the unknown bag accepts raw values"""
        request = Request('retrieve')
        request.unknownParams['_id'] = 12
        assert request.documentIds == 12

    @pytest.mark.parametrize('key,tag', [
        ('_id', 'id'),
        ('_document', 'document'),
        ('_custom', 'custom'),
        ('plain', 'plain'),
    ])
    def test_wire_tag(self, key, tag):
        """Test unknown parameter wire tags"""
        assert wireTag(key) == tag


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
