"""
Response Handler for the QFV TPI Client

Parses XML response bodies and classifies each response as a success
document, a service Fault, or an HTTP status failure.
"""

import logging
import time
from typing import Any, Dict, Optional
from xml.etree import ElementTree

import requests

from ..core.error_handler import HTTPStatusError, InvalidResponseError, RemoteFaultError


FAULT_TAG = 'Fault'
SUCCESS_STATUS_CODES = (0, 200)
BODY_EXCERPT_LENGTH = 500


def local_tag(tag: str) -> str:
    """Strip the ``{namespace}`` prefix ElementTree puts on qualified names"""
    if tag and tag[0] == '{':
        return tag.split('}', 1)[1]
    return tag


class ResponseParser:
    """Parses TPI response bodies into namespace-free element trees"""

    @staticmethod
    def parse(body: Optional[bytes]) -> Optional[ElementTree.Element]:
        """
        Parse a response body

        Returns:
            Root element, or None when the body is not well-formed XML
        """
        if not body:
            return None

        try:
            root = ElementTree.fromstring(body)
        except ElementTree.ParseError:
            return None

        for element in root.iter():
            element.tag = local_tag(element.tag)
            if any(key.startswith('{') for key in element.attrib):
                element.attrib = {local_tag(key): value for key, value in element.attrib.items()}

        return root


def _find_text(document: ElementTree.Element, path: str) -> Optional[str]:
    element = document.find(path)
    if element is None or element.text is None:
        return None
    return element.text.strip()


def decode_fault(document: ElementTree.Element, details: Optional[Dict[str, Any]] = None) -> RemoteFaultError:
    """
    Build the error for a Fault document

    The code comes from ``Code/Subcode/Value``; the message joins
    ``Code/Value`` and ``Reason/Text``.
    """
    code = None
    subcode = _find_text(document, 'Code/Subcode/Value')
    if subcode:
        try:
            code = int(subcode)
        except ValueError:
            code = None

    message = ''
    label = _find_text(document, 'Code/Value')
    if label is not None:
        message += f"{label}: "
    reason = _find_text(document, 'Reason/Text')
    if reason is not None:
        message += reason

    if not message.strip(': '):
        message = 'Unknown error'

    return RemoteFaultError(message, code=code, details=details)


def integer_result(document: ElementTree.Element) -> Optional[int]:
    """
    Read the integer a TPI method returns

    The service answers with ``<int>1</int>``, or wraps that element in a
    method-specific root.
    """
    element = document if document.tag == 'int' else document.find('int')
    if element is None:
        element = document

    text = (element.text or '').strip()
    try:
        return int(text)
    except ValueError:
        return None


class ResponseHandler:
    """
    Classifies TPI responses.

    Order of checks:
    1. a well-formed Fault document raises RemoteFaultError
    2. a status other than 0 or 200 raises HTTPStatusError
    3. a body that is not well-formed XML raises InvalidResponseError
    """

    def __init__(self):
        self.parser = ResponseParser()
        self.logger = logging.getLogger(__name__)

    def handle_response(self, response: requests.Response, endpoint: Optional[str] = None) -> ElementTree.Element:
        """
        Process an HTTP response

        Args:
            response: requests.Response object
            endpoint: Remote method name, for diagnostics

        Returns:
            Parsed response document

        Raises:
            RemoteFaultError, HTTPStatusError or InvalidResponseError
        """
        start_time = time.time()
        body = response.content or b''
        status_code = response.status_code
        details = {
            'endpoint': endpoint,
            'status_code': status_code,
            'body': body[:BODY_EXCERPT_LENGTH].decode('utf-8', errors='replace'),
        }

        document = self.parser.parse(body)

        if document is not None and document.tag == FAULT_TAG:
            error = decode_fault(document, details=details)
            self.logger.error(f"Fault returned by {endpoint}: {error}")
            raise error

        if status_code is not None and status_code not in SUCCESS_STATUS_CODES:
            self.logger.error(f"HTTP {status_code} returned by {endpoint}")
            raise HTTPStatusError(status_code, details=details)

        if document is None:
            self.logger.error(f"Invalid response returned by {endpoint}")
            raise InvalidResponseError('Invalid response', details=details)

        self.logger.debug(
            f"Parsed <{document.tag}> from {endpoint} "
            f"({len(body)} bytes, {(time.time() - start_time) * 1000:.1f}ms)"
        )
        return document

