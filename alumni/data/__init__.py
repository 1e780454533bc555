"""Directory data: field resolution, normalization, search, and the in-memory store."""
from .loader import DirectoryLoadError, fetch_csv, load_directory, parse_csv
from .store import DirectoryStore
from .schemas import LoadStatus, ParsedCSV, ParseError
from .normalize import normalize_row, normalize_all
from .resolve import resolve
from .search import build_haystack, filter_records, matches
