import pytest

from alumni.data.store import DirectoryStore
from alumni.reports.cards import (
    NO_MATCHES_MESSAGE,
    initials,
    linkedin_url,
    project_card,
    project_view,
    year_display,
)


@pytest.mark.parametrize("name,expected", [
    ("Bob Lee", "BL"),
    ("  cara  ", "C"),
    ("Ana Maria de Souza", "AS"),
    ("", ""),
    (None, ""),
])
def test_initials(name, expected):
    assert initials(name) == expected


@pytest.mark.parametrize("start,end,expected", [
    ("2018", "2023", "2018 - 2023"),
    ("2019", "", "2019"),
    ("", "2025", "2025"),
    ("", "", ""),
])
def test_year_display(start, end, expected):
    assert year_display({"starting_year": start, "year": end}) == expected


def test_linkedin_url_gets_scheme_when_missing():
    assert linkedin_url("linkedin.com/in/boblee") == "https://linkedin.com/in/boblee"
    assert linkedin_url("https://www.linkedin.com/in/cara") == "https://www.linkedin.com/in/cara"


def test_card_contacts_and_columns(records):
    bob = records[0]
    card = project_card(bob)

    assert card["name"] == "Bob Lee"
    assert card["initials"] == "BL"
    assert card["photo"] is None
    assert card["contacts"] == [
        {"kind": "email", "href": "mailto:bob@example.com", "title": "bob@example.com"},
        {"kind": "linkedin", "href": "https://linkedin.com/in/boblee", "title": "LinkedIn"},
    ]

    left, right = card["columns"]
    assert [i["label"] for i in left] == ["Year", "Department", "Past Universities"]
    assert [i["label"] for i in right] == ["Organization", "Position"]
    assert left[0]["value"] == "2018 - 2023"


def test_card_joins_universities(records):
    cara = records[1]
    items = [i for col in project_card(cara)["columns"] for i in col]
    universities = next(i for i in items if i["label"] == "Past Universities")
    assert universities["value"] == "Dhaka University,NSU"


def test_card_skips_empty_info_rows():
    card = project_card({"name": "Solo"})
    assert card["columns"] == [[], []]
    assert card["contacts"] == []


def test_photo_override_matches_name_fragment():
    card = project_card({"name": "Cara Khan", "photo": "https://broken"}, photo_overrides={"khan": "img/cara.jpg"})
    assert card["photo"] == "img/cara.jpg"


def test_view_signals_no_matches(loaded_store):
    view = project_view(loaded_store.fork().set_query("zzz"))
    assert view["status"] == "ok"
    assert view["message"] == NO_MATCHES_MESSAGE
    assert view["count"] == 0
    assert view["total"] == 3


def test_view_lists_visible_people_in_order(loaded_store):
    view = project_view(loaded_store)
    assert [p["name"] for p in view["people"]] == ["Bob Lee", "Cara Khan", "Dev Roy"]
    assert view["message"] == ""


def test_view_of_empty_load_keeps_headers_message():
    view = project_view(DirectoryStore().load([], headers=["Full Title"]))
    assert view["status"] == "empty"
    assert "Full Title" in view["message"]
