#!/usr/bin/env python3

import sys
import pytest

sys.path.insert(0, 'lib')

from CPS.Client.Request import (
    AlternativesRequest,
    ListWordsRequest,
    Request,
    SQLSearchRequest,
    SearchDeleteRequest,
    SearchRequest,
)


class TestSearchRequest:
    """Tests for search requests"""

    def test_positional(self):
        """Test search with query, offset and docs"""
        request = SearchRequest("hello world", 0, 10)
        assert request.command == 'search'
        assert request.params == {'query': 'hello world', 'offset': 0, 'docs': 10}
        assert request.unknownParams == {}

    def test_listing_policy(self):
        """Test search with a listing policy"""
        policy = {'document/title': 'yes'}
        request = SearchRequest('foo', 5, 20, policy)
        assert request.params == {'query': 'foo', 'offset': 5, 'docs': 20, 'list': policy}

    def test_query_only(self):
        """Test unset paging leaves no parameter"""
        request = SearchRequest('foo')
        assert request.params == {'query': 'foo'}

    def test_invalid_paging(self):
        """Test non-numeric paging is dropped"""
        request = SearchRequest('foo', '5', 'ten', {})
        assert request.params == {'query': 'foo'}

    def test_object_driven(self):
        """Test a template skips positional arguments"""
        request = SearchRequest({'query': 'foo', 'docs': 3}, 100, 200, {'a': 'yes'})
        assert request.command == 'search'
        assert request.params == {'query': 'foo', 'docs': 3}

    def test_object_driven_keeps_command(self):
        """Test an explicit command on the template wins"""
        request = SearchRequest({'command': 'list-words', 'query': 'foo'})
        assert request.command == 'list-words'

    def test_is_request(self):
        assert isinstance(SearchRequest('foo'), Request)


class TestSQLSearchRequest:
    """Tests for SQL search requests"""

    def test_positional(self):
        """Test the SQL string goes to the sql parameter only"""
        request = SQLSearchRequest('SELECT * FROM docs WHERE price > 10')
        assert request.command == 'search'
        assert request.params == {'sql': 'SELECT * FROM docs WHERE price > 10'}

    def test_invalid(self):
        """Test a non-string query is dropped"""
        request = SQLSearchRequest(12)
        assert request.command == 'search'
        assert request.params == {}

    def test_object_driven(self):
        """Test object-driven SQL search"""
        request = SQLSearchRequest({'sql': 'SELECT 1'})
        assert request.command == 'search'
        assert request.params == {'sql': 'SELECT 1'}

    def test_object_driven_keeps_command(self):
        request = SQLSearchRequest({'command': 'custom-search', 'sql': 'SELECT 1'})
        assert request.command == 'custom-search'

    def test_is_search_request(self):
        assert isinstance(SQLSearchRequest('SELECT 1'), SearchRequest)


class TestSearchDeleteRequest:
    """Tests for search-delete requests"""

    def test_positional(self):
        request = SearchDeleteRequest('<category>old</category>')
        assert request.command == 'search-delete'
        assert request.params == {'query': '<category>old</category>'}

    def test_object_driven(self):
        """Test object-driven search-delete"""
        request = SearchDeleteRequest({'query': 'foo'})
        assert request.command == 'search-delete'
        assert request.params == {'query': 'foo'}

    def test_object_driven_keeps_command(self):
        request = SearchDeleteRequest({'command': 'search', 'query': 'foo'})
        assert request.command == 'search'


class TestAlternativesRequest:
    """Tests for alternatives requests"""

    def test_positional(self):
        """Test query plus the three quality thresholds"""
        request = AlternativesRequest("foo", 0.5, 0.3, 0.1)
        assert request.command == 'alternatives'
        assert request.params == {'query': 'foo', 'cr': 0.5, 'idif': 0.3, 'h': 0.1}

    def test_partial(self):
        """Test missing or invalid thresholds are dropped"""
        request = AlternativesRequest("foo", None, 'x', 2)
        assert request.params == {'query': 'foo', 'h': 2}

    def test_query_object(self):
        """Test a query object is kept as query"""
        request = AlternativesRequest({'title': 'foo'})
        assert request.command == 'alternatives'
        assert request.params == {'query': {'title': 'foo'}}


class TestListWordsRequest:
    """Tests for list-words requests"""

    def test_positional(self):
        request = ListWordsRequest('fo*')
        assert request.command == 'list-words'
        assert request.params == {'query': 'fo*'}


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
