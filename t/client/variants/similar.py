#!/usr/bin/env python3

import sys
import pytest

sys.path.insert(0, 'lib')

from CPS.Client.Request import SimilarDocumentsRequest, SimilarTextRequest


class TestSimilarDocumentsRequest:
    """Tests for similar requests built from a document ID"""

    def test_positional(self):
        """Test every positional argument"""
        request = SimilarDocumentsRequest('doc1', 10, 3, 0, 20, 'category:books')
        assert request.command == 'similar'
        assert request.params == {
            'id': 'doc1',
            'len': 10,
            'quota': 3,
            'offset': 0,
            'docs': 20,
            'query': 'category:books',
        }
        assert request.unknownParams == {}

    def test_only_valid_fields(self):
        """Test invalid fields are dropped"""
        request = SimilarDocumentsRequest(12, '10', None, 'a', 5)
        assert request.command == 'similar'
        assert request.params == {'docs': 5}

    def test_object_driven(self):
        """Test a template carries the fields"""
        request = SimilarDocumentsRequest({'id': 'doc1', 'len': 5}, 99, 99)
        assert request.command == 'similar'
        assert request.params == {'id': 'doc1', 'len': 5}

    def test_object_driven_keeps_command(self):
        request = SimilarDocumentsRequest({'command': 'search', 'query': 'foo'})
        assert request.command == 'search'
        assert request.params == {'query': 'foo'}


class TestSimilarTextRequest:
    """Tests for similar requests built from a chunk of text"""

    def test_positional(self):
        request = SimilarTextRequest('some text to match', 5, 2)
        assert request.command == 'similar'
        assert request.params == {'text': 'some text to match', 'len': 5, 'quota': 2}

    def test_float_thresholds(self):
        request = SimilarTextRequest('text', 5.0, 2.5)
        assert request.params == {'text': 'text', 'len': 5.0, 'quota': 2.5}

    def test_object_driven(self):
        request = SimilarTextRequest({'text': 'foo bar'})
        assert request.command == 'similar'
        assert request.params == {'text': 'foo bar'}


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
