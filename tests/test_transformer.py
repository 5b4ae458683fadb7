from __future__ import annotations

from leadrecon.reconcile.fields import FieldMap
from leadrecon.reconcile.transformer import project_to_reference, reference_template, split_full_name

SOURCE = FieldMap(email="email", phone="phone_number", name="full_name")
REFERENCE = FieldMap(email="Email", phone="Phone", name="First Name")


def test_split_full_name():
    assert split_full_name("Jane Doe") == ("Jane", "Doe")
    assert split_full_name("Mary Ann van Dyke") == ("Mary", "Ann van Dyke")
    assert split_full_name("Cher") == ("Cher", "")


def test_projection_copies_raw_identity_values():
    record = {"email": " Jane@X.com ", "phone_number": "+1 (555) 123", "full_name": "Jane Doe"}
    template = ["First Name", "Last Name", "Email", "Phone", "Tags"]
    projected = project_to_reference(record, template, SOURCE, REFERENCE, "Facebook Lead")
    assert projected == {
        "First Name": "Jane",
        "Last Name": "Doe",
        "Email": " Jane@X.com ",
        "Phone": "+1 (555) 123",
        "Tags": "Facebook Lead",
    }


def test_projection_never_adds_fields_outside_template():
    record = {"email": "a@x.com", "phone_number": "1", "full_name": "A B"}
    template = ["Name", "Email", "Notes"]
    fields = FieldMap(email="Email", phone="Phone", name="Name")
    projected = project_to_reference(record, template, SOURCE, fields, "Facebook Lead")
    assert projected == {"Name": "", "Email": "a@x.com", "Notes": ""}


def test_projection_handles_missing_source_values():
    projected = project_to_reference(
        {"full_name": ""}, ["First Name", "Last Name", "Email", "Phone"], SOURCE, REFERENCE, "x"
    )
    assert projected == {"First Name": "", "Last Name": "", "Email": "", "Phone": ""}


def test_reference_template():
    assert reference_template([{"B": 1, "A": 2}], REFERENCE) == ["B", "A"]
    assert reference_template([], REFERENCE) == ["Email", "Phone"]
