import pytest

from alumni.config import FIELD_SCHEMAS
from alumni.data.loader import parse_csv
from alumni.data.normalize import normalize_all
from alumni.data.store import DirectoryStore

SAMPLE_CSV = """\
Name,Title/ Designation/Role,Currently Working at,Department at UNC,Primary Email ID,LinkedIn,Starting Year,Year of Passing (or Projected),Background University #1,Background University #2,Notes
Bob Lee,Engineer,Acme Corp,Computer Science,bob@example.com,linkedin.com/in/boblee,2018,2023,BUET,,
Cara Khan,Research Scientist,UNC Hospitals,Biostatistics,cara@example.com,https://www.linkedin.com/in/cara,2019,,Dhaka University,NSU,

   ,Ghost,,,,,,,,,
Dev Roy,Analyst,Lenovo,Statistics,,,,2025,,,internal note
"""

SAMPLE_HEADERS = [
    "Name",
    "Title/ Designation/Role",
    "Currently Working at",
    "Department at UNC",
    "Primary Email ID",
    "LinkedIn",
    "Starting Year",
    "Year of Passing (or Projected)",
    "Background University #1",
    "Background University #2",
    "Notes",
]


class FakeHandle:
    def __init__(self, when, callback, args):
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Manual clock with the ``call_later`` surface of an asyncio loop."""

    def __init__(self):
        self.now = 0.0
        self.handles = []

    def call_later(self, delay, callback, *args):
        handle = FakeHandle(self.now + delay, callback, args)
        self.handles.append(handle)
        return handle

    def advance_to(self, t):
        while True:
            due = [h for h in self.handles if not h.cancelled and h.when <= t]
            if not due:
                break
            handle = min(due, key=lambda h: h.when)
            self.handles.remove(handle)
            self.now = handle.when
            handle.callback(*handle.args)
        self.now = t

    @property
    def live(self):
        return [h for h in self.handles if not h.cancelled]


@pytest.fixture()
def schema():
    return FIELD_SCHEMAS["v2"]


@pytest.fixture()
def records(schema):
    return normalize_all(parse_csv(SAMPLE_CSV).rows, schema)


@pytest.fixture()
def loaded_store(records):
    return DirectoryStore().load(records, headers=SAMPLE_HEADERS)


@pytest.fixture()
def scheduler():
    return FakeScheduler()
