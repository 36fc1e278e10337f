#!/usr/bin/env python3

import sys
import pytest

sys.path.insert(0, 'lib')

from CPS.Client.Command import Command
from CPS.Client.Tools import isNumber, isObject, isStringList, split_list


class TestCommand:
    """Tests for the command names"""

    def test_count(self):
        assert len(Command) == 23

    def test_wire_names(self):
        assert Command.PARTIAL_REPLACE == 'partial-replace'
        assert str(Command.SHOW_HISTORY) == 'show-history'
        assert Command('list-facets') is Command.LIST_FACETS

    @pytest.mark.parametrize('name', ['search', 'rollback-transaction', 'list-words'])
    def test_known(self, name):
        assert Command.isKnown(name)

    @pytest.mark.parametrize('name', ['SEARCH', 'frobnicate', ''])
    def test_unknown(self, name):
        assert not Command.isKnown(name)


class TestTools:
    """Tests for the input checks"""

    def test_is_number(self):
        assert isNumber(0)
        assert isNumber(0.5)
        assert not isNumber(True)
        assert not isNumber('1')
        assert not isNumber(None)
        assert not isNumber(1j)

    def test_is_object(self):
        assert isObject({})
        assert not isObject([])

    def test_is_string_list(self):
        assert isStringList(['a', 'b'])
        assert isStringList([])
        assert not isStringList(['a', 1])
        assert not isStringList('a')

    def test_split_list(self):
        assert split_list('Stderr, File,,') == ['Stderr', 'File']
        assert split_list(['a']) == ['a']
        assert split_list(None) == []


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
