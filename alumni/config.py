"""
Alumni Directory — Configuration: dataset source, field schemas, paths, constants.
"""
import json
import os
from pathlib import Path


def _get_env(key: str, default: str | None = None) -> str | None:
    value = os.environ.get(key)
    if value is None:
        return default
    value = value.strip()
    return value or default


def _get_float(key: str, default: float) -> float:
    value = _get_env(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"Environment variable {key} must be a number") from exc


# ---------------------------------------------------------------------------
# Dataset source — published spreadsheet CSV export
# ---------------------------------------------------------------------------
DEFAULT_CSV_URL = (
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vSRY02YM6vA6268HoEcmuKMc2mP3A1wd67Iw9vLXpdAncAik8Nsik6VJJ6t2ki1UgzgZLX8XsmK6mls"
    "/pub?output=csv"
)
CSV_URL = _get_env("ALUMNI_CSV_URL", DEFAULT_CSV_URL)
HTTP_TIMEOUT = _get_float("ALUMNI_HTTP_TIMEOUT", 30.0)

# The export changes whenever the sheet is edited; never serve a cached copy
NO_CACHE_HEADERS = {"Cache-Control": "no-cache", "Pragma": "no-cache"}

# ---------------------------------------------------------------------------
# Paths — override with ALUMNI_DATA_DIR env var for cloud deployment
# ---------------------------------------------------------------------------
_data_dir = Path(_get_env("ALUMNI_DATA_DIR", str(Path.home() / "Desktop" / "Alumni Directory")))
BASE_FOLDER = _data_dir
EXPORT_FOLDER = Path(_get_env("ALUMNI_EXPORT_DIR", str(_data_dir / "exports")))

# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------
SEARCH_DEBOUNCE_MS = _get_float("SEARCH_DEBOUNCE_MS", 200.0)

# Fields concatenated into the search haystack, independent of the schema:
# photo URLs, LinkedIn handles and gender are not searchable.
SEARCH_FIELDS = (
    "name",
    "role",
    "organization",
    "program",
    "degree",
    "starting_year",
    "year",
    "location",
    "current_address",
    "bio",
    "highest_education",
    "background_uni1",
    "background_uni2",
    "address_in_home_country",
    "district_in_home_country",
    "email",
    "email2",
    "phone",
)

# ---------------------------------------------------------------------------
# Field schemas: semantic name → candidate headers (tried in order)
#
# Two revisions of the sheet exist. v1 is the original column set; v2 adds
# contact/address columns and the renamed spellings seen in later exports.
# They are never merged; pick one with ALUMNI_SCHEMA.
# ---------------------------------------------------------------------------
FIELD_SCHEMAS: dict[str, tuple[tuple[str, tuple[str, ...]], ...]] = {
    "v1": (
        # Core identity
        ("name", ("Name",)),
        ("photo", ("Headshot URL",)),
        # Contact
        ("email", ("Primary Email ID",)),
        ("email2", ("Secondary Email ID",)),
        ("linkedin", ("LinkedIn",)),
        # Personal
        ("gender", ("Gender",)),
        # Academic
        ("starting_year", ("Starting Year",)),
        ("year", ("Year of Passing (or Projected)",)),
        ("program", ("Department at UNC",)),
        ("degree", ("Degree/M.S./Ph.D.",)),
        ("bio", ("Research Topic",)),
        # Background education
        ("background_uni1", ("Background University #1",)),
        ("background_uni2", ("Background University #2",)),
        ("highest_education", ("Highest Level of Education",)),
        # Professional
        ("organization", ("Currently Working at",)),
        ("role", ("Title/ Designation/Role",)),
        # Location
        ("location", ("Current State",)),
        ("district_in_home_country", ("District in Bangladesh",)),
    ),
    "v2": (
        ("name", ("Name", "Full Name")),
        ("photo", ("Headshot URL", "Photo URL", "Photo")),
        ("email", ("Primary Email ID", "Email", "Email Address")),
        ("email2", ("Secondary Email ID", "Alternate Email")),
        ("phone", ("Phone Number", "Phone", "Contact Number")),
        ("linkedin", ("LinkedIn", "LinkedIn Profile", "LinkedIn URL")),
        ("gender", ("Gender",)),
        ("starting_year", ("Starting Year", "Year of Joining")),
        ("year", ("Year of Passing (or Projected)", "Year of Passing", "Graduation Year")),
        ("program", ("Department at UNC", "Department", "Program")),
        ("degree", ("Degree/M.S./Ph.D.", "Degree")),
        ("bio", ("Research Topic", "Research Area", "Bio")),
        ("background_uni1", ("Background University #1", "Undergraduate University")),
        ("background_uni2", ("Background University #2", "Masters University")),
        ("highest_education", ("Highest Level of Education", "Highest Education")),
        ("organization", ("Currently Working at", "Organization", "Company")),
        ("role", ("Title/ Designation/Role", "Title/Designation/Role", "Role", "Designation")),
        ("location", ("Current State", "Current Location")),
        ("current_address", ("Current Address", "Address")),
        ("address_in_home_country", ("Address in Bangladesh", "Home Address")),
        ("district_in_home_country", ("District in Bangladesh", "Home District")),
    ),
}

DEFAULT_SCHEMA_VERSION = "v2"
SCHEMA_VERSION = _get_env("ALUMNI_SCHEMA", DEFAULT_SCHEMA_VERSION)
SCHEMA_FILE = _get_env("ALUMNI_SCHEMA_FILE")


def load_schema_file(path: str | Path) -> tuple[tuple[str, tuple[str, ...]], ...]:
    """Read a FieldSchema from JSON: [[name, [header, ...]], ...]."""
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ValueError(f"ALUMNI_SCHEMA_FILE {path} could not be read: {exc}") from exc

    entries = []
    for entry in raw if isinstance(raw, list) else []:
        if (
            not isinstance(entry, (list, tuple))
            or len(entry) != 2
            or not isinstance(entry[0], str)
            or not isinstance(entry[1], list)
            or not all(isinstance(h, str) for h in entry[1])
        ):
            raise ValueError(f"ALUMNI_SCHEMA_FILE {path}: malformed entry {entry!r}")
        entries.append((entry[0], tuple(entry[1])))
    if not entries or "name" not in {name for name, _ in entries}:
        raise ValueError(f"ALUMNI_SCHEMA_FILE {path} must define a 'name' field")
    return tuple(entries)


def active_schema(
    version: str | None = None,
    schema_file: str | Path | None = None,
) -> tuple[tuple[str, tuple[str, ...]], ...]:
    """Return the configured FieldSchema. A schema file wins over a version name."""
    schema_file = schema_file if schema_file is not None else SCHEMA_FILE
    if schema_file:
        return load_schema_file(schema_file)
    version = version or SCHEMA_VERSION
    if version not in FIELD_SCHEMAS:
        raise ValueError(
            f"Environment variable ALUMNI_SCHEMA must be one of {sorted(FIELD_SCHEMAS)} (got {version!r})"
        )
    return FIELD_SCHEMAS[version]


def schema_label() -> str:
    """Which schema ``active_schema()`` picks, for health/diagnostics output."""
    return f"file:{SCHEMA_FILE}" if SCHEMA_FILE else (SCHEMA_VERSION or DEFAULT_SCHEMA_VERSION)


# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------
# Lower-cased name fragment → local photo path, used when the sheet's
# headshot link is broken for a person
PHOTO_OVERRIDES: dict[str, str] = {}

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = (_get_env("LOG_LEVEL", "INFO") or "INFO").upper()
