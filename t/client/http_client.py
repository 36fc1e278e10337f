#!/usr/bin/env python3

import sys
from unittest.mock import MagicMock, patch

import certifi
import pytest
import requests

sys.path.insert(0, 'lib')

from CPS.Client.HTTP import Client
from CPS.Client.Logger import Logger
from CPS.Client.Request import SearchRequest, StatusRequest
from CPS.Client.Version import USER_AGENT


URL = 'http://localhost:5580/cps'


def make_response(status=200, text='<cps:reply/>', reason='OK'):
    response = MagicMock()
    response.status_code = status
    response.ok = status < 400
    response.reason = reason
    response.text = text
    return response


@pytest.fixture
def events():
    return []


@pytest.fixture
def logger(events):
    logger = Logger(logger='Stderr')
    logger.register_event_cb(lambda level, message: events.append((level, message)))
    return logger


class TestClientSetup:
    """Tests for the HTTP client setup"""

    def test_defaults(self, logger):
        client = Client(url=URL, logger=logger)
        assert client.url == URL
        assert client.timeout == 180
        assert client.session.verify == certifi.where()
        assert client.session.headers['User-Agent'] == USER_AGENT
        assert client.session.headers['Content-Type'] == 'application/xml; charset=UTF-8'

    def test_from_config(self, logger):
        config = {'server': URL, 'timeout': 10, 'user-agent': 'tester/1.0'}
        client = Client(config=config, logger=logger)
        assert client.url == URL
        assert client.timeout == 10
        assert client.session.headers['User-Agent'] == 'tester/1.0'

    def test_proxy(self, logger, events):
        client = Client(url=URL, logger=logger, proxy='http://proxy:3128')
        assert client.session.proxies == {
            'http': 'http://proxy:3128',
            'https': 'http://proxy:3128',
        }
        assert ('debug', "[http client] Using 'http://proxy:3128' as proxy") in events

    def test_no_ssl_check(self, logger):
        client = Client(url=URL, logger=logger, no_ssl_check=True)
        assert client.session.verify is False

    def test_ca_cert_file(self, logger, tmp_path):
        cafile = tmp_path / 'ca.pem'
        cafile.write_text('')
        client = Client(url=URL, logger=logger, ca_cert_file=str(cafile))
        assert client.session.verify == str(cafile)

    def test_missing_ca_cert_file(self, logger, tmp_path):
        with pytest.raises(ValueError, match="certificate file"):
            Client(url=URL, logger=logger, ca_cert_file=str(tmp_path / 'missing.pem'))

    def test_missing_ca_cert_dir(self, logger, tmp_path):
        with pytest.raises(ValueError, match="certificate directory"):
            Client(url=URL, logger=logger, ca_cert_dir=str(tmp_path / 'missing'))


class TestClientSend:
    """Tests for sending requests"""

    def test_send(self, logger):
        """Test the XML document is posted and the raw answer returned"""
        client = Client(url=URL, logger=logger, timeout=5)
        request = SearchRequest('foo', 0, 10)
        with patch.object(client.session, 'post', return_value=make_response()) as post:
            answer = client.send(request)

        assert answer == '<cps:reply/>'
        post.assert_called_once_with(
            URL,
            data=request.getContent().encode('utf-8'),
            timeout=5,
        )

    def test_send_other_url(self, logger):
        client = Client(url=URL, logger=logger)
        with patch.object(client.session, 'post', return_value=make_response()) as post:
            client.send(StatusRequest(), url='http://other/')
        assert post.call_args[0][0] == 'http://other/'

    def test_no_url(self, logger, events):
        client = Client(logger=logger)
        with patch.object(client.session, 'post') as post:
            assert client.send(StatusRequest()) is None
        post.assert_not_called()
        assert events[-1] == ('error', "[http client] no server url to send request to")

    def test_communication_error(self, logger, events):
        client = Client(url=URL, logger=logger)
        error = requests.exceptions.ConnectionError('connection refused')
        with patch.object(client.session, 'post', side_effect=error):
            assert client.send(StatusRequest()) is None
        assert events[-1] == ('error', "[http client] communication error: connection refused")

    def test_http_error(self, logger, events):
        client = Client(url=URL, logger=logger)
        response = make_response(status=500, reason='Internal Server Error')
        with patch.object(client.session, 'post', return_value=response):
            assert client.send(StatusRequest()) is None
        assert events[-1] == ('error', "[http client] communication error: 500 Internal Server Error")

    def test_empty_answer(self, logger, events):
        client = Client(url=URL, logger=logger)
        with patch.object(client.session, 'post', return_value=make_response(text='')):
            assert client.send(StatusRequest()) is None
        assert events[-1] == ('error', "[http client] empty answer from server")

    def test_context_manager(self, logger):
        client = Client(url=URL, logger=logger)
        with patch.object(client.session, 'close') as close:
            with client as entered:
                assert entered is client
        close.assert_called_once()


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
