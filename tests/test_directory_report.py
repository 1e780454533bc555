from openpyxl import load_workbook

from alumni.reports.directory_report import DIRECTORY_COLS, generate_excel, generate_json


def _column(label):
    return next(i for i, (_, _, l) in enumerate(DIRECTORY_COLS, 1) if l == label)


def test_json_matches_visible_people(loaded_store):
    view = generate_json(loaded_store.fork().set_query("statistics"))
    assert [p["name"] for p in view["people"]] == ["Cara Khan", "Dev Roy"]


def test_excel_people_sheet(loaded_store, tmp_path):
    path = generate_excel(loaded_store, tmp_path / "nested" / "directory.xlsx")

    assert path.exists()
    ws = load_workbook(path)["People"]
    assert [c.value for c in ws[1]] == [label for _, _, label in DIRECTORY_COLS]
    assert ws.max_row == 1 + len(loaded_store.visible)

    bob_year = ws.cell(row=2, column=_column("Year")).value
    assert bob_year == "2018 - 2023"

    email = ws.cell(row=2, column=_column("Email"))
    assert email.value == "bob@example.com"
    assert email.hyperlink is not None

    linkedin = ws.cell(row=2, column=_column("LinkedIn"))
    assert linkedin.value == "https://linkedin.com/in/boblee"


def test_excel_summary_counts(loaded_store, tmp_path):
    store = loaded_store.fork().set_query("lee")
    ws = load_workbook(generate_excel(store, tmp_path / "d.xlsx"))["Summary"]

    assert ws["A1"].value == "ALUMNI DIRECTORY"
    assert ws["A2"].value.startswith('Search: "lee"')
    assert ws["A5"].value == "OVERVIEW"


def test_excel_keeps_formula_like_text_as_text(tmp_path):
    from alumni.data.store import DirectoryStore

    text = '=HYPERLINK("http://evil.example","x")'
    store = DirectoryStore().load([{"name": text, "role": "=1+1"}])
    ws = load_workbook(generate_excel(store, tmp_path / "d.xlsx"))["People"]

    for label, expected in (("Name", text), ("Position", "=1+1")):
        cell = ws.cell(row=2, column=_column(label))
        assert cell.data_type == "s"
        assert cell.value == expected
