#!/usr/bin/env python3

import sys
import pytest

sys.path.insert(0, 'lib')

from CPS.Client.Request import (
    ListFirstRequest,
    ListLastRequest,
    ListLastRetrieveFirstRequest,
    RetrieveFirstRequest,
    RetrieveLastRequest,
)


class TestListingRequests:
    """Tests for list-first, list-last, retrieve-first and retrieve-last"""

    def test_list_first(self):
        """Test list-first with listing policy and paging"""
        request = ListFirstRequest({'sortBy': 'date'}, 5, 20)
        assert request.command == 'list-first'
        assert request.params == {'offset': 5, 'docs': 20, 'list': {'sortBy': 'date'}}
        assert request.unknownParams == {}

    def test_list_last(self):
        request = ListLastRequest({'document/title': 'yes'}, 0, 10)
        assert request.command == 'list-last'
        assert request.params == {'offset': 0, 'docs': 10, 'list': {'document/title': 'yes'}}

    def test_list_without_policy(self):
        """Test an empty policy is left unset"""
        request = ListLastRequest({}, 0, 10)
        assert request.params == {'offset': 0, 'docs': 10}

    def test_retrieve_first(self):
        request = RetrieveFirstRequest(10, 5)
        assert request.command == 'retrieve-first'
        assert request.params == {'offset': 10, 'docs': 5}

    def test_retrieve_last(self):
        request = RetrieveLastRequest(docs=3)
        assert request.command == 'retrieve-last'
        assert request.params == {'docs': 3}

    def test_no_arguments(self):
        """Test paging requests are valid without arguments"""
        for request_class, command in (
            (ListFirstRequest, 'list-first'),
            (ListLastRequest, 'list-last'),
            (RetrieveFirstRequest, 'retrieve-first'),
            (RetrieveLastRequest, 'retrieve-last'),
        ):
            request = request_class()
            assert request.command == command
            assert request.params == {}

    def test_invalid_paging(self):
        request = RetrieveFirstRequest('1', [2])
        assert request.params == {}

    def test_shared_base(self):
        """Test the shared base takes its command"""
        request = ListLastRetrieveFirstRequest('list-first', 1, 2, {'a': 'yes'})
        assert request.command == 'list-first'
        assert request.params == {'offset': 1, 'docs': 2, 'list': {'a': 'yes'}}
        assert isinstance(ListFirstRequest(), ListLastRetrieveFirstRequest)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
