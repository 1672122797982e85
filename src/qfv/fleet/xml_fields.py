"""Typed readers for fields of TPI response elements.

Required readers return a neutral value (``''``, ``0``, ``False`` or
``None`` for timestamps) when the element is missing. ``optional_*``
readers return ``None`` when the element is absent.
"""

import base64
import binascii
from datetime import datetime
from typing import Optional
from xml.etree.ElementTree import Element

from dateutil import parser as date_parser


TRUE_VALUES = ('true',)


def child(element: Optional[Element], name: str) -> Optional[Element]:
    if element is None:
        return None
    return element.find(name)


def has(element: Optional[Element], name: str) -> bool:
    """True when the child exists and is not marked ``nil``."""
    target = child(element, name)
    return target is not None and target.get('nil') != 'true'


def text(element: Optional[Element], name: Optional[str] = None) -> str:
    """Text of ``element`` or of its child ``name``, stripped."""
    target = element if name is None else child(element, name)
    if target is None or target.text is None:
        return ''
    return target.text.strip()


def to_int(value: Optional[str]) -> int:
    if not value:
        return 0
    try:
        return int(value.strip())
    except ValueError:
        try:
            return int(float(value))
        except ValueError:
            return 0


def to_bool(value: Optional[str]) -> bool:
    return (value or '').strip().lower() in TRUE_VALUES


def to_datetime(value: Optional[str]) -> Optional[datetime]:
    if not value or not value.strip():
        return None
    try:
        return date_parser.isoparse(value.strip())
    except ValueError:
        try:
            return date_parser.parse(value.strip())
        except (ValueError, OverflowError):
            return None


def integer(element: Optional[Element], name: str) -> int:
    return to_int(text(element, name))


def boolean(element: Optional[Element], name: str) -> bool:
    return to_bool(text(element, name))


def timestamp(element: Optional[Element], name: str) -> Optional[datetime]:
    return to_datetime(text(element, name))


def optional_text(element: Optional[Element], name: str) -> Optional[str]:
    if not has(element, name):
        return None
    return text(element, name)


def optional_integer(element: Optional[Element], name: str) -> Optional[int]:
    if not has(element, name):
        return None
    return integer(element, name)


def optional_timestamp(element: Optional[Element], name: str) -> Optional[datetime]:
    if not has(element, name):
        return None
    return timestamp(element, name)


def optional_bytes(element: Optional[Element], name: str) -> Optional[bytes]:
    """Base64-decoded content of a child element."""
    if not has(element, name):
        return None
    try:
        return base64.b64decode(text(element, name))
    except (binascii.Error, ValueError):
        return None


def attribute(element: Optional[Element], name: str) -> str:
    if element is None:
        return ''
    return (element.get(name) or '').strip()


def int_attribute(element: Optional[Element], name: str) -> int:
    return to_int(attribute(element, name))


def optional_int_attribute(element: Optional[Element], name: str) -> Optional[int]:
    if element is None or element.get(name) is None:
        return None
    return int_attribute(element, name)
