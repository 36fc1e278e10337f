#!/usr/bin/env python3

import sys
import pytest

sys.path.insert(0, 'lib')

from CPS.Client.Request import (
    BeginTransactionRequest,
    CommitTransactionRequest,
    ListFacetsRequest,
    ListPathsRequest,
    RollbackTransactionRequest,
    StatusRequest,
)


SIMPLE_TESTS = {
    'status': StatusRequest,
    'list-paths': ListPathsRequest,
    'begin-transaction': BeginTransactionRequest,
    'commit-transaction': CommitTransactionRequest,
    'rollback-transaction': RollbackTransactionRequest,
}


class TestSimpleRequests:
    """Tests for requests made of their command only"""

    @pytest.mark.parametrize('command', sorted(SIMPLE_TESTS))
    def test_command_only(self, command):
        request = SIMPLE_TESTS[command]()
        assert request.command == command
        assert request.params == {}
        assert request.unknownParams == {}


class TestListFacetsRequest:
    """Tests for list-facets requests"""

    def test_single_path(self):
        request = ListFacetsRequest('document/category')
        assert request.command == 'list-facets'
        assert request.params == {'path': 'document/category'}

    def test_paths(self):
        request = ListFacetsRequest(['document/category', 'document/author'])
        assert request.params == {'path': ['document/category', 'document/author']}

    def test_invalid_paths(self):
        request = ListFacetsRequest([1, 2])
        assert request.command == 'list-facets'
        assert request.params == {}


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
