import json

import pytest

from exchange import DataFormat, ImportCoordinator
from exchange.errors import (
    PersistenceError, ReplaceInconsistency, RowParseError, SourceNotFoundError,
)
from exchange.record import MediaRecord

HEADER = "url,beschreibung,channel,dauer,gesehen,mediaType,stichwort"


class RecordingStore:
    """In-memory store that rejects urls containing 'reject'."""

    def __init__(self):
        self.received: list[MediaRecord] = []
        self.wiped = 0

    def get_all(self):
        return list(self.received)

    def upsert(self, record):
        if "reject" in record.url:
            raise PersistenceError("constraint violated")
        self.received.append(record)
        return record

    def delete_all(self):
        self.wiped += 1
        count = len(self.received)
        self.received.clear()
        return count


# ── Replace policy ────────────────────────────────────────────────────

def test_replace_leaves_exactly_new_rows(seeded_store):
    assert seeded_store.count() == 3
    body = "\n".join([HEADER, "https://new1.com,N1,,,,,", "https://new2.com,N2,,,,,", ",bad,,,,,"])

    report = ImportCoordinator(seeded_store).replace(body)

    urls = [r.url for r in seeded_store.get_all()]
    assert urls == ["https://new1.com", "https://new2.com"]
    assert report.decoded == 2
    assert report.persisted == 2
    assert report.deleted == 3
    assert [d.line for d in report.diagnostics] == [4]


def test_replace_with_bad_json_leaves_store_empty(seeded_store):
    with pytest.raises(ReplaceInconsistency) as exc_info:
        ImportCoordinator(seeded_store).replace("{not json", DataFormat.JSON)

    assert seeded_store.count() == 0
    assert exc_info.value.deleted == 3
    assert "now empty" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, RowParseError)


def test_replace_json_empty_url_persists_nothing(store):
    with pytest.raises(ReplaceInconsistency):
        ImportCoordinator(store).replace('[{"url":""}]', DataFormat.JSON)
    assert store.count() == 0


def test_replace_with_all_rows_invalid_is_not_an_error(seeded_store):
    report = ImportCoordinator(seeded_store).replace(f"{HEADER}\n,x\n,y")
    assert report.persisted == 0
    assert report.failed == 2
    assert seeded_store.count() == 0


def test_replace_json_round_trip_of_export(seeded_store):
    from exchange import export_json
    dump = export_json(seeded_store)

    report = ImportCoordinator(seeded_store).replace(dump, DataFormat.JSON)

    assert report.persisted == 3
    assert [r.url for r in seeded_store.get_all()] == [
        "https://old1.example", "https://old2.example", "https://old3.example",
    ]


# ── Merge policy ──────────────────────────────────────────────────────

def test_merge_never_removes(seeded_store, tmp_path):
    (tmp_path / "more.csv").write_text(f"{HEADER}\nhttps://extra.com,E,,,true,,\n")

    report = ImportCoordinator(seeded_store, resource_root=tmp_path).import_path("more.csv")

    assert report.persisted == 1
    assert seeded_store.count() == 4


def test_merge_json_updates_by_id(seeded_store, tmp_path):
    first = seeded_store.get_all()[0]
    payload = [{"id": first.id, "url": first.url, "description": "Updated"}]
    (tmp_path / "patch.json").write_text(json.dumps(payload))

    ImportCoordinator(seeded_store, resource_root=tmp_path).import_path("patch.json")

    assert seeded_store.count() == 3
    assert seeded_store.get_by_id(first.id).description == "Updated"


def test_merge_explicit_format_overrides_suffix(store, tmp_path):
    (tmp_path / "items.txt").write_text('[{"url": "https://a.com"}]')
    report = ImportCoordinator(store, resource_root=tmp_path).import_path(
        "items.txt", DataFormat.JSON,
    )
    assert report.persisted == 1


def test_merge_bad_json_file_raises(store, tmp_path):
    (tmp_path / "broken.json").write_text("[{")
    with pytest.raises(RowParseError):
        ImportCoordinator(store, resource_root=tmp_path).import_path("broken.json")


@pytest.mark.parametrize("path", ["missing.csv", "../outside.csv", "sub"])
def test_missing_source(store, tmp_path, path):
    (tmp_path / "sub").mkdir()
    (tmp_path.parent / "outside.csv").write_text(HEADER)
    with pytest.raises(SourceNotFoundError):
        ImportCoordinator(store, resource_root=tmp_path).import_path(path)


def test_persistence_failure_is_row_level(store, tmp_path):
    too_long = "x" * 1001
    (tmp_path / "mixed.csv").write_text(
        f"{HEADER}\nhttps://a.com,A,,,,,\nhttps://b.com,{too_long},,,,,\nhttps://c.com,C,,,,,\n"
    )

    report = ImportCoordinator(store, resource_root=tmp_path).import_path("mixed.csv")

    assert report.decoded == 3
    assert report.persisted == 2
    assert report.diagnostics[0].line == 3
    assert "persistence failed" in report.diagnostics[0].reason
    assert [r.url for r in store.get_all()] == ["https://a.com", "https://c.com"]


# ── Coordinator contract ──────────────────────────────────────────────

def test_coordinator_passes_records_untouched():
    store = RecordingStore()
    body = f"{HEADER}\nhttps://a.com,,,,,,\nhttps://reject.com,,,,,,\nhttps://b.com,,,,,,"

    report = ImportCoordinator(store).replace(body)

    assert store.wiped == 1
    assert report.decoded == 3
    assert report.persisted == 2
    assert report.diagnostics[0].line == 3
    assert all(r.id is None and r.last_updated_at is None for r in store.received)


def test_report_to_dict():
    store = RecordingStore()
    report = ImportCoordinator(store).replace(f"{HEADER}\n,bad")
    assert report.to_dict() == {
        "decoded": 0,
        "persisted": 0,
        "deleted": 0,
        "failed": 1,
        "diagnostics": [{"line": 2, "reason": "url is required"}],
    }
