#!/usr/bin/env python3

import sys
import pytest

sys.path.insert(0, 'lib')

from CPS.Client.Request import (
    DeleteRequest,
    InsertRequest,
    ModifyRequest,
    PartialReplaceRequest,
    ReplaceRequest,
    UpdateRequest,
)


MODIFY_TESTS = {
    'insert': InsertRequest,
    'update': UpdateRequest,
    'replace': ReplaceRequest,
    'partial-replace': PartialReplaceRequest,
}

DOCUMENTS = [
    ["<doc>a</doc>"],
    "<document><id>1</id><title>foo</title></document>",
    [{'id': '1', 'title': 'foo'}, {'id': '2', 'title': 'bar'}],
    {'id': '1', 'title': 'foo'},
]


class TestModifyRequest:
    """Tests for document modification requests"""

    def test_insert(self):
        """Test insert stores its documents untouched"""
        request = InsertRequest(["<doc>a</doc>"])
        assert request.command == 'insert'
        assert request.unknownParams == {'_document': ["<doc>a</doc>"]}
        assert request.params == {}

    @pytest.mark.parametrize('command', sorted(MODIFY_TESTS))
    @pytest.mark.parametrize('documents', DOCUMENTS)
    def test_variants(self, command, documents):
        """Test every modify variant fixes its command"""
        request = MODIFY_TESTS[command](documents)
        assert request.command == command
        assert request.unknownParams == {'_document': documents}
        assert request.documentPayloads is documents
        assert request.params == {}

    @pytest.mark.parametrize('command', sorted(MODIFY_TESTS))
    def test_invalid_documents(self, command):
        """Test invalid payloads are dropped"""
        for documents in (None, 12, 3.5):
            request = MODIFY_TESTS[command](documents)
            assert request.unknownParams == {}

    def test_generic(self):
        """Test the generic modify request takes its command"""
        request = ModifyRequest('update', ['<doc/>'])
        assert request.command == 'update'
        assert request.unknownParams == {'_document': ['<doc/>']}

    def test_subclasses(self):
        for request_class in MODIFY_TESTS.values():
            assert issubclass(request_class, ModifyRequest)


class TestDeleteRequest:
    """Tests for delete requests"""

    def test_ids(self):
        """Test delete stores identifiers"""
        request = DeleteRequest(['id1', 'id2'])
        assert request.command == 'delete'
        assert request.unknownParams == {'_id': ['id1', 'id2']}
        assert request.params == {}

    def test_single_id(self):
        request = DeleteRequest('id1')
        assert request.unknownParams == {'_id': 'id1'}

    def test_invalid_ids(self):
        request = DeleteRequest(42)
        assert request.command == 'delete'
        assert request.unknownParams == {}

    def test_is_modify_request(self):
        assert isinstance(DeleteRequest('id1'), ModifyRequest)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
