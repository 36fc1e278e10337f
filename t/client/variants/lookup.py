#!/usr/bin/env python3

import sys
import pytest

sys.path.insert(0, 'lib')

from CPS.Client.Request import LookupRequest, RetrieveRequest, ShowHistoryRequest


class TestRetrieveRequest:
    """Tests for retrieve requests"""

    def test_ids(self):
        """Test identifiers go to the unknown parameters"""
        request = RetrieveRequest(["id1", "id2"])
        assert request.command == 'retrieve'
        assert request.unknownParams == {'_id': ['id1', 'id2']}
        assert request.params == {}

    def test_single_id(self):
        request = RetrieveRequest('id1')
        assert request.documentIds == 'id1'

    def test_invalid_ids(self):
        for ids in (None, 1, {'id': 'id1'}):
            request = RetrieveRequest(ids)
            assert request.unknownParams == {}


class TestLookupRequest:
    """Tests for lookup requests"""

    def test_ids_and_policy(self):
        """Test lookup with a listing policy"""
        request = LookupRequest(['id1'], {'document/title': 'yes'})
        assert request.command == 'lookup'
        assert request.unknownParams == {'_id': ['id1']}
        assert request.params == {'list': {'document/title': 'yes'}}

    def test_without_policy(self):
        request = LookupRequest('id1')
        assert request.unknownParams == {'_id': 'id1'}
        assert request.params == {}


class TestShowHistoryRequest:
    """Tests for show-history requests"""

    def test_return_docs(self):
        """Test return_docs sets return_doc"""
        request = ShowHistoryRequest("id1", True)
        assert request.command == 'show-history'
        assert request.unknownParams == {'_id': 'id1'}
        assert request.params == {'return_doc': 'yes'}

    def test_without_docs(self):
        request = ShowHistoryRequest(['id1', 'id2'])
        assert request.unknownParams == {'_id': ['id1', 'id2']}
        assert request.params == {}

    def test_truthy_return_docs(self):
        request = ShowHistoryRequest('id1', 1)
        assert request.params == {'return_doc': 'yes'}


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
