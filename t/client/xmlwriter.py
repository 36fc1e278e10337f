#!/usr/bin/env python3

import sys
import xml.etree.ElementTree as ET
import pytest

sys.path.insert(0, 'lib')

from CPS.Client.XML import XML, XML_DECLARATION
from CPS.Client.Request import (
    AlternativesRequest,
    DeleteRequest,
    InsertRequest,
    ListFacetsRequest,
    Request,
    SearchRequest,
    ShowHistoryRequest,
    StatusRequest,
)


def parse(request):
    content = request.getContent()
    assert content.startswith(XML_DECLARATION)
    return ET.fromstring(content[len(XML_DECLARATION):])


class TestXMLWriter:
    """Tests for the XML writer"""

    def test_scalar(self):
        xml = XML(declaration=False)
        assert xml.write({'root': {'a': 1, 'b': 'two'}}) == '<root><a>1</a><b>two</b></root>'

    def test_list_repeats_element(self):
        xml = XML(declaration=False)
        assert xml.write({'root': {'id': ['1', '2']}}) == '<root><id>1</id><id>2</id></root>'

    def test_nested(self):
        xml = XML(declaration=False)
        content = xml.write({'root': {'list': {'title': 'yes'}}})
        assert content == '<root><list><title>yes</title></list></root>'

    def test_escaping(self):
        xml = XML(declaration=False)
        assert xml.write({'root': {'q': 'a < b & c'}}) == '<root><q>a &lt; b &amp; c</q></root>'

    def test_raw_tags(self):
        """Test XML fragments under raw tags are embedded"""
        xml = XML(raw_tags=['document'], declaration=False)
        content = xml.write({'root': {'document': ['<doc>a</doc>', 'not < xml']}})
        assert content == '<root><document><doc>a</doc></document><document>not &lt; xml</document></root>'

    def test_empty_root(self):
        xml = XML(declaration=False)
        assert xml.write({'status': {}}) == '<status />'

    def test_invalid_top_level(self):
        xml = XML()
        with pytest.raises(ValueError):
            xml.write({'a': 1, 'b': 2})
        with pytest.raises(ValueError):
            xml.write(['a'])


class TestRequestSerialization:
    """Tests for the XML document of requests"""

    def test_dump_as_hash(self):
        """Test the structure handed to the writer"""
        request = ShowHistoryRequest('id1', True)
        assert request.dumpAsHash() == {
            'show-history': {'return_doc': 'yes', 'id': 'id1'}
        }

    def test_root_is_command(self):
        root = parse(StatusRequest())
        assert root.tag == 'status'
        assert len(root) == 0

    def test_search(self):
        """Test one child per parameter"""
        root = parse(SearchRequest('hello world', 0, 10, {'document': {'title': 'yes'}}))
        assert root.tag == 'search'
        assert root.findtext('query') == 'hello world'
        assert root.findtext('offset') == '0'
        assert root.findtext('docs') == '10'
        assert root.find('list/document').findtext('title') == 'yes'

    def test_alternatives(self):
        root = parse(AlternativesRequest('foo', 0.5, 0.3, 0.1))
        assert [(child.tag, child.text) for child in root] == [
            ('query', 'foo'), ('cr', '0.5'), ('idif', '0.3'), ('h', '0.1'),
        ]

    def test_paths_repeat(self):
        root = parse(ListFacetsRequest(['a', 'b']))
        assert [child.text for child in root.findall('path')] == ['a', 'b']

    def test_ids_stripped_prefix(self):
        """Test unknown parameters lose their prefix on the wire"""
        root = parse(DeleteRequest(['id1', 'id2']))
        assert root.tag == 'delete'
        assert [child.text for child in root.findall('id')] == ['id1', 'id2']
        assert root.find('_id') is None

    def test_documents_xml(self):
        """Test XML document payloads are embedded"""
        root = parse(InsertRequest(['<doc><id>1</id></doc>', '<doc><id>2</id></doc>']))
        documents = root.findall('document')
        assert len(documents) == 2
        assert documents[0].find('doc').findtext('id') == '1'
        assert documents[1].find('doc').findtext('id') == '2'

    def test_documents_objects(self):
        """Test mapping document payloads become nested elements"""
        root = parse(InsertRequest([{'id': '1', 'title': 'foo'}]))
        document = root.find('document')
        assert document.findtext('id') == '1'
        assert document.findtext('title') == 'foo'

    def test_custom_unknown_param(self):
        request = Request('search')
        request.unknownParams['_stamp'] = '2020'
        root = parse(request)
        assert root.findtext('stamp') == '2020'


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
