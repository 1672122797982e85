"""
Unit tests for the typed element readers.
"""

from datetime import datetime, timezone
from xml.etree import ElementTree

import pytest

from qfv.fleet import xml_fields as xf


@pytest.fixture
def row():
    return ElementTree.fromstring(
        '<Row Id=" 7 " Empty="">'
        '<Count> 12 </Count>'
        '<Ratio>3.9</Ratio>'
        '<Flag>True</Flag>'
        '<When>2013-04-02T10:30:00Z</When>'
        '<Odd>02/04/2013 10:30</Odd>'
        '<Blank/>'
        '<Nil nil="true"/>'
        '<Image>aGVsbG8=</Image>'
        '<Broken>abc</Broken>'
        '</Row>'
    )


class TestRequiredReaders:

    def test_text(self, row):
        assert xf.text(row, 'Count') == '12'
        assert xf.text(row, 'Missing') == ''
        assert xf.text(None, 'Count') == ''

    def test_integer(self, row):
        assert xf.integer(row, 'Count') == 12
        assert xf.integer(row, 'Ratio') == 3
        assert xf.integer(row, 'Flag') == 0
        assert xf.integer(row, 'Missing') == 0

    def test_boolean(self, row):
        assert xf.boolean(row, 'Flag') is True
        assert xf.boolean(row, 'Count') is False
        assert xf.to_bool('1') is False

    def test_timestamp(self, row):
        assert xf.timestamp(row, 'When') == datetime(2013, 4, 2, 10, 30, tzinfo=timezone.utc)
        assert xf.timestamp(row, 'Odd') == datetime(2013, 2, 4, 10, 30)
        assert xf.timestamp(row, 'Blank') is None
        assert xf.to_datetime('not a date') is None

    def test_attributes(self, row):
        assert xf.attribute(row, 'Id') == '7'
        assert xf.int_attribute(row, 'Id') == 7
        assert xf.attribute(row, 'Missing') == ''
        assert xf.attribute(None, 'Id') == ''


class TestOptionalReaders:

    def test_absent_is_none(self, row):
        assert xf.optional_text(row, 'Missing') is None
        assert xf.optional_integer(row, 'Missing') is None
        assert xf.optional_timestamp(row, 'Missing') is None
        assert xf.optional_bytes(row, 'Missing') is None

    def test_nil_is_none(self, row):
        assert xf.optional_text(row, 'Nil') is None

    def test_present_but_empty(self, row):
        assert xf.optional_text(row, 'Blank') == ''
        assert xf.optional_timestamp(row, 'Blank') is None

    def test_bytes(self, row):
        assert xf.optional_bytes(row, 'Image') == b'hello'
        assert xf.optional_bytes(row, 'Broken') is None

    def test_optional_int_attribute(self, row):
        assert xf.optional_int_attribute(row, 'Id') == 7
        assert xf.optional_int_attribute(row, 'Missing') is None
        assert xf.optional_int_attribute(row, 'Empty') == 0
