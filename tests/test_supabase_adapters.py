"""Tests for the Supabase key-value adapter."""

from dataclasses import dataclass, field

from daily_tracker.adapters.supabase_kv_store import SupabaseKeyValueStore
from daily_tracker.services.records import create_nutrition_log


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    rows: dict[str, dict[str, object]] = field(default_factory=dict)
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        self.last_filters = []
        return self

    def upsert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "upsert"
        self.last_payload = payload
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        if self._action == "upsert":
            payload = dict(self.last_payload)  # type: ignore[arg-type]
            self.rows[str(payload["key"])] = payload
            return FakeResponse(data=[payload])
        matches = [
            row
            for row in self.rows.values()
            if all(row.get(column) == value for column, value in self.last_filters)
        ]
        return FakeResponse(data=matches)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_supabase_kv_store_get_and_set() -> None:
    client = FakeSupabaseClient()
    store = SupabaseKeyValueStore(client)

    assert store.get("ct.weight") is None

    store.set("ct.weight", "70")
    store.set("ct.weight", "71")

    assert store.get("ct.weight") == "71"
    table = client.tables["kv_store"]
    assert table.last_filters == [("key", "ct.weight")]
    assert table.last_payload == {"key": "ct.weight", "value": "71"}


def test_supabase_kv_store_custom_table_backs_record_store() -> None:
    client = FakeSupabaseClient()
    store = SupabaseKeyValueStore(client, table="tracker_state")
    create_nutrition_log(store).insert_entry(
        "2024-05-01", {"food": "Salad", "calories": 230}
    )

    log = create_nutrition_log(SupabaseKeyValueStore(client, table="tracker_state"))
    log.load()

    assert log.query_group("2024-05-01").total == 230
    assert "kv_store" not in client.tables
