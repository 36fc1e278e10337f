"""
CPS Client HTTP Client

Sends a serialized request to the server as an XML document through a POST
request and hands back the raw answer. Answers are not parsed here.
"""

import os
from typing import Any, Optional

import certifi
import requests

from CPS.Client.Logger import Logger
from CPS.Client.Version import USER_AGENT

LOG_PREFIX = "[http client] "


class Client:
    """
    HTTP client sending requests to a CPS server.

    Handles:
    - SSL certificate validation
    - Proxy support
    - Logging of sent and received messages
    """

    def __init__(self, **params: Any):
        """
        Initialize HTTP client.

        Args:
            **params: Parameters including:
                - url: Server URL
                - logger: Logger instance
                - config: Config object or dict
                - timeout: Request timeout in seconds
                - proxy: Proxy URL
                - no_ssl_check: Disable SSL verification
                - ca_cert_file: CA certificate file path
                - ca_cert_dir: CA certificate directory path
                - user_agent: User-Agent header value

        Raises:
            ValueError: If a certificate file or directory doesn't exist
        """
        config = params.get('config') or {}

        self.logger = params.get('logger') or Logger(config=config)
        self.url: Optional[str] = params.get('url') or config.get('server')
        self.timeout: int = params.get('timeout') or config.get('timeout') or 180
        self.no_ssl_check: bool = bool(params.get('no_ssl_check') or config.get('no-ssl-check'))
        self.ca_cert_file: Optional[str] = params.get('ca_cert_file') or config.get('ca-cert-file')
        self.ca_cert_dir: Optional[str] = params.get('ca_cert_dir') or config.get('ca-cert-dir')

        if self.ca_cert_file and not os.path.isfile(self.ca_cert_file):
            raise ValueError(f"non-existing certificate file {self.ca_cert_file}")

        if self.ca_cert_dir and not os.path.isdir(self.ca_cert_dir):
            raise ValueError(f"non-existing certificate directory {self.ca_cert_dir}")

        self.session = requests.Session()
        self.session.headers.update({
            'User-Agent': params.get('user_agent') or config.get('user-agent') or USER_AGENT,
            'Content-Type': 'application/xml; charset=UTF-8',
            'Pragma': 'no-cache',
        })

        proxy = params.get('proxy') or config.get('proxy')
        if proxy and proxy != 'none':
            self.session.proxies = {
                'http': proxy,
                'https': proxy
            }
            self.logger.debug(LOG_PREFIX + f"Using '{proxy}' as proxy")

        self._set_ssl_options()

    def _set_ssl_options(self) -> None:
        """Configure SSL/TLS options."""
        if self.no_ssl_check:
            self.logger.debug(LOG_PREFIX + "SSL verification disabled")
            self.session.verify = False
            import urllib3
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        elif self.ca_cert_file:
            self.session.verify = self.ca_cert_file
        elif self.ca_cert_dir:
            self.session.verify = self.ca_cert_dir
        else:
            self.session.verify = certifi.where()

    def send(self, request: Any, url: Optional[str] = None) -> Optional[str]:
        """
        Send a request to the server and return the answer.

        Args:
            request: Request object with a getContent() method
            url: Target URL, defaults to the client URL

        Returns:
            Raw answer content, or None on failure
        """
        url = url or self.url
        if not url:
            self.logger.error(LOG_PREFIX + "no server url to send request to")
            return None

        content = request.getContent()
        self.logger.debug2(LOG_PREFIX + f"sending message:\n{content}")

        try:
            response = self.session.post(
                url,
                data=content.encode('utf-8'),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            self.logger.error(LOG_PREFIX + f"communication error: {e}")
            return None

        if not response.ok:
            self.logger.error(
                LOG_PREFIX + f"communication error: {response.status_code} {response.reason}"
            )
            return None

        answer = response.text
        if not answer:
            self.logger.error(LOG_PREFIX + "empty answer from server")
            return None

        self.logger.debug2(LOG_PREFIX + f"received message:\n{answer}")
        return answer

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> 'Client':
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
