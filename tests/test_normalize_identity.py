from __future__ import annotations

import pytest

from leadrecon.reconcile.normalize import normalize_email, normalize_phone


def test_normalize_email_trims_and_lowercases():
    assert normalize_email(" Foo@Bar.com ") == "foo@bar.com"
    assert normalize_email("") == ""
    assert normalize_email(None) == ""
    # No syntax validation
    assert normalize_email("  Not An Email ") == "not an email"


def test_normalize_phone_keeps_digits_only():
    assert normalize_phone("(555) 123-4567") == "5551234567"
    assert normalize_phone("+1-555-123-4567") == "15551234567"
    assert normalize_phone("ext. abc") == ""
    assert normalize_phone(None) == ""
    assert normalize_phone(5551234567) == "5551234567"


def test_country_code_is_not_reconciled():
    assert normalize_phone("+1 555 123 4567") != normalize_phone("555 123 4567")


@pytest.mark.parametrize("value", [None, "", "  A@B.C ", "x", "+1 (555) 000", "Ünïcode@Mail.COM"])
def test_normalizers_are_idempotent(value):
    assert normalize_email(normalize_email(value)) == normalize_email(value)
    assert normalize_phone(normalize_phone(value)) == normalize_phone(value)
