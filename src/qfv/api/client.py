"""
Core HTTP Caller for the QFV TPI Client

Performs one authenticated GET per remote method call and hands the
response to the ResponseHandler for classification. There is no retry,
caching or pooling policy here; callers own that.
"""

import time
import logging
from typing import Any, Dict, Mapping, Optional
from xml.etree import ElementTree

import requests
from requests.exceptions import (
    RequestException, ConnectionError, Timeout,
    SSLError, TooManyRedirects
)

from .. import __version__
from ..core.config_manager import APIConfig
from ..core.error_handler import TransportError
from .authentication import AuthenticationManager
from .request_builder import RequestBuilder
from .response_handler import ResponseHandler


USER_AGENT_PREFIX = f"Python QFV/{__version__}"


class TPICaller:
    """
    HTTP caller for the TPI REST service.

    Steps for every call:
    - refuse to run without customer, username and password
    - merge credentials into the parameters and build the URL
    - wait the configured request delay, then GET
    - classify the response or the transport failure
    """

    def __init__(
        self,
        config: Optional[APIConfig] = None,
        auth_manager: Optional[AuthenticationManager] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the caller

        Args:
            config: Service settings (base URL, port, timeout, user agent)
            auth_manager: Credential holder; a blank one is created if omitted
            session: requests session to use as transport
        """
        self.config = config or APIConfig()
        self.auth_manager = auth_manager or AuthenticationManager()
        self.request_builder = RequestBuilder()
        self.response_handler = ResponseHandler()
        self.session = session or requests.Session()
        self.request_count = 0

        self.logger = logging.getLogger(__name__)

    @property
    def user_agent(self) -> str:
        """Library identifier followed by the caller-supplied suffix"""
        return f"{USER_AGENT_PREFIX} {self.config.user_agent}".rstrip()

    def call(self, endpoint: str, parameters: Optional[Mapping[str, Any]] = None) -> ElementTree.Element:
        """
        Call a TPI remote method

        Args:
            endpoint: Remote method name relative to the base URL
            parameters: Method parameters, without credentials

        Returns:
            Parsed response document

        Raises:
            AuthenticationMissingError: Credentials incomplete, nothing was sent
            RemoteFaultError, HTTPStatusError, InvalidResponseError: see ResponseHandler
            TransportError: The request could not be completed
        """
        request_parameters = self.auth_manager.apply_authentication(dict(parameters or {}))
        url = self.request_builder.build_url(
            self.config.base_url, endpoint, request_parameters, port=self.config.port
        )

        self.logger.info(f"Calling TPI method {endpoint}")
        self.logger.debug(f"Request parameters: {AuthenticationManager.redact(request_parameters)}")

        if self.config.request_delay:
            time.sleep(self.config.request_delay)

        start_time = time.time()
        response = self._execute(endpoint, url)
        self.request_count += 1
        self.logger.debug(
            f"{endpoint} answered HTTP {response.status_code} in {time.time() - start_time:.2f}s"
        )

        return self.response_handler.handle_response(response, endpoint=endpoint)

    def _execute(self, endpoint: str, url: str) -> requests.Response:
        """Issue the GET and map transport failures to TransportError"""
        try:
            return self.session.get(
                url,
                headers={'User-Agent': self.user_agent},
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
                allow_redirects=self.config.follow_redirects
            )
        except Timeout as e:
            self.logger.error(f"{endpoint} timed out after {self.config.timeout}s: {e}")
            raise TransportError(
                f"Request timed out after {self.config.timeout}s",
                details={'endpoint': endpoint, 'reason': str(e)}
            ) from e
        except SSLError as e:
            self.logger.error(f"TLS failure calling {endpoint}: {e}")
            raise TransportError(str(e), details={'endpoint': endpoint}) from e
        except ConnectionError as e:
            self.logger.error(f"Connection to TPI service failed for {endpoint}: {e}")
            raise TransportError(
                str(e), code=self._errno(e), details={'endpoint': endpoint}
            ) from e
        except TooManyRedirects as e:
            self.logger.error(f"Too many redirects calling {endpoint}: {e}")
            raise TransportError(str(e), details={'endpoint': endpoint}) from e
        except RequestException as e:
            self.logger.error(f"Request exception calling {endpoint}: {e}")
            raise TransportError(str(e), details={'endpoint': endpoint}) from e

    @staticmethod
    def _errno(error: Exception) -> Optional[int]:
        """Find an OS error number in the exception chain, if any"""
        current: Optional[BaseException] = error
        while current is not None:
            errno = getattr(current, 'errno', None)
            if isinstance(errno, int):
                return errno
            current = current.__cause__ or current.__context__
        return None

    def close(self):
        """Close the underlying session"""
        if self.session:
            self.session.close()
            self.logger.info("TPI session closed")

    def get_metrics(self) -> Dict[str, Any]:
        return {'request_count': self.request_count}
