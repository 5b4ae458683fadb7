from __future__ import annotations

from leadrecon.reconcile.diff import diff_rows, format_row
from leadrecon.reconcile.search import filter_records


def test_diff_rows_positional():
    first = [{"a": "1"}, {"a": "2"}, {"a": "3"}]
    second = [{"a": "1"}, {"a": "X"}]
    assert diff_rows(first, second) == [1, 2]
    assert diff_rows(first, list(first)) == []


def test_diff_rows_field_order_counts():
    assert diff_rows([{"a": "1", "b": "2"}], [{"b": "2", "a": "1"}]) == [0]


def test_format_row():
    assert format_row({"name": "Jo", "phone": ""}) == "name: Jo, phone: empty"
    assert format_row(None) == "No data"


def test_filter_records_case_insensitive():
    records = [{"email": "kim@y.com", "name": "Kim Lee"}, {"email": "al@z.com", "name": "Al"}]
    assert filter_records(records, "LEE") == [records[0]]
    assert filter_records(records, "   ") == records
    assert filter_records(records, None) == records
    assert filter_records(records, "nobody") == []
