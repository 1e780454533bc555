from alumni.config import FIELD_SCHEMAS
from alumni.data.normalize import has_name, normalize_all, normalize_row, resolution_report


def test_every_schema_field_is_present(schema):
    record = normalize_row({"Name": "Bob Lee", "Title/ Designation/Role": "Engineer"}, schema)

    assert list(record) == [name for name, _ in schema]
    assert record["name"] == "Bob Lee"
    assert record["role"] == "Engineer"
    assert all(v == "" for k, v in record.items() if k not in ("name", "role"))


def test_spaced_name_header_resolves(schema):
    assert normalize_row({" Name ": "Cara"}, schema)["name"] == "Cara"


def test_none_row_normalizes_to_blank_record(schema):
    record = normalize_row(None, schema)
    assert set(record.values()) == {""}


def test_alternate_candidate_spellings_in_v2():
    record = normalize_row(
        {"Full Name": "Dana", "Company": "Initech", "Phone Number": "555-0100"},
        FIELD_SCHEMAS["v2"],
    )
    assert record["name"] == "Dana"
    assert record["organization"] == "Initech"
    assert record["phone"] == "555-0100"


def test_v1_records_have_no_v2_only_fields():
    record = normalize_row({"Name": "Eli", "Phone Number": "555"}, FIELD_SCHEMAS["v1"])
    assert "phone" not in record
    assert record["name"] == "Eli"


def test_blank_names_are_dropped_after_normalization(schema):
    rows = [
        {"Name": "Ana"},
        {"Name": "   "},
        {"Name": ""},
        {"Role": "No name column"},
        {" NAME ": "Bo"},
    ]
    assert [r["name"] for r in normalize_all(rows, schema)] == ["Ana", "Bo"]


def test_source_order_is_kept(schema):
    rows = [{"Name": n} for n in ("Zed", "Amy", "Moe")]
    assert [r["name"] for r in normalize_all(rows, schema)] == ["Zed", "Amy", "Moe"]


def test_normalize_all_is_idempotent(schema):
    rows = [{"Name": "Ana", "Role": "PI"}, {" name": "Bo"}, {"Name": ""}]
    assert normalize_all(rows, schema) == normalize_all(rows, schema)


def test_has_name():
    assert has_name({"name": "x"})
    assert not has_name({"name": " \t"})
    assert not has_name({})


def test_resolution_report_names_matched_headers(schema):
    report = {r["field"]: r["header"] for r in resolution_report([" Name", "Company", "Notes"], schema)}
    assert report["name"] == " Name"
    assert report["organization"] == "Company"
    assert report["role"] is None
