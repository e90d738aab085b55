"""
Unit tests for the service catalog store and the shared store behaviour.
"""

import json

import pytest

from data.repository import DataRepository
from models.service_offering import ServiceOffering
from services.catalog_service import ServiceCatalogStore


def offering(name="Ceramic Install", cost=200.0, labor_cost=150.0, **kw):
    return ServiceOffering(
        name=name,
        type=kw.get("type", "Floor"),
        cost=cost,
        labor_cost=labor_cost,
        time_required=kw.get("time_required", "1 day"),
        description=kw.get("description", ""),
        material=kw.get("material", "Ceramic"),
    )


@pytest.fixture
def store(repo):
    return ServiceCatalogStore(repo)


class TestAddAndList:

    def test_starts_empty_without_stored_data(self, store):
        assert store.list() == []
        assert len(store) == 0

    def test_ceramic_install_total(self, store):
        added = store.add(offering())
        assert store.total_cost(added) == 350.0
        assert store.list()[0].total_cost == 350.0

    def test_list_keeps_insertion_order(self, store):
        names = [f"Service {i}" for i in range(5)]
        for n in names:
            store.add(offering(name=n))
        assert [s.name for s in store.list()] == names
        assert len(store) == 5

    def test_add_assigns_id_when_missing(self, store):
        s = offering()
        s.id = ""
        added = store.add(s)
        assert added.id

    def test_add_replaces_duplicate_id(self, store):
        first = store.add(offering(name="A"))
        clash = offering(name="B")
        clash.id = first.id
        second = store.add(clash)
        assert second.id != first.id
        assert len({s.id for s in store.list()}) == 2

    def test_returned_records_are_copies(self, store):
        added = store.add(offering())
        added.name = "changed outside the store"
        store.list()[0].cost = 1.0
        assert store.list()[0].name == "Ceramic Install"
        assert store.list()[0].cost == 200.0


class TestUpdate:

    def test_update_replaces_in_place(self, store):
        a = store.add(offering(name="A"))
        b = store.add(offering(name="B"))
        a.labor_cost = 50.0
        assert store.update(a) is True
        listed = store.list()
        assert [s.id for s in listed] == [a.id, b.id]
        assert listed[0].labor_cost == 50.0
        assert store.total_cost(listed[0]) == 250.0

    def test_update_unknown_id_is_noop(self, store):
        store.add(offering())
        before = store.list()
        assert store.update(offering(name="ghost")) is False
        assert store.list() == before

    def test_update_is_idempotent(self, store):
        a = store.add(offering())
        a.cost = 300.0
        store.update(a)
        after_first = store.list()
        store.update(a)
        assert store.list() == after_first


class TestDelete:

    def test_delete_removes_exactly_one(self, store):
        added = [store.add(offering(name=n)) for n in "ABCD"]
        assert store.delete(added[1].id) is True
        assert [s.name for s in store.list()] == ["A", "C", "D"]

    def test_delete_unknown_id_is_noop(self, store):
        store.add(offering())
        assert store.delete("missing") is False
        assert len(store) == 1

    def test_delete_at_position(self, store):
        for n in "ABC":
            store.add(offering(name=n))
        assert store.delete_at(0) is True
        assert [s.name for s in store.list()] == ["B", "C"]

    def test_delete_at_out_of_range(self, store):
        store.add(offering())
        assert store.delete_at(5) is False
        assert store.delete_at(-1) is False
        assert len(store) == 1


class TestLookup:

    def test_find_and_get(self, store):
        a = store.add(offering())
        assert store.find(a.id) == a
        assert store.get(a.id) == a
        assert store.find("nope") is None

    def test_get_missing_raises(self, store):
        with pytest.raises(KeyError):
            store.get("nope")


class TestPersistence:

    def test_every_mutation_is_persisted(self, repo):
        store = ServiceCatalogStore(repo)
        a = store.add(offering(name="A"))
        store.add(offering(name="B"))
        a.material = "Porcelain"
        store.update(a)
        store.delete_at(1)

        reloaded = ServiceCatalogStore(repo).list()
        assert len(reloaded) == 1
        assert reloaded[0].material == "Porcelain"

    def test_reload_round_trip(self, repo):
        store = ServiceCatalogStore(repo)
        for n in ("Ceramic Install", "Backsplash", "Grout Repair"):
            store.add(offering(name=n))
        assert ServiceCatalogStore(repo).list() == store.list()

    def test_total_cost_not_written(self, repo, storage_dir):
        ServiceCatalogStore(repo).add(offering())
        on_disk = json.loads((storage_dir / "services.json").read_text(encoding="utf-8"))
        assert "total_cost" not in on_disk[0]

    def test_old_schema_loads_empty(self, repo):
        repo.save("services", [{"id": "1", "title": "Old format"}])
        store = ServiceCatalogStore(repo)
        assert store.list() == []

    def test_corrupt_file_loads_empty(self, storage_dir):
        storage_dir.mkdir(parents=True)
        (storage_dir / "services.json").write_text("[{", encoding="utf-8")
        store = ServiceCatalogStore(DataRepository(storage_dir))
        assert store.list() == []


class TestFailedSave:

    def test_failed_add_changes_nothing(self, repo):
        store = ServiceCatalogStore(repo)
        store.add(offering(name="A"))
        store.add(offering(name="B"))
        before = store.list()

        with pytest.raises(TypeError):
            store.add(offering(name="C", description={"x"}))

        assert store.list() == before
        assert ServiceCatalogStore(repo).list() == before

    def test_failed_update_changes_nothing(self, repo):
        store = ServiceCatalogStore(repo)
        a = store.add(offering(name="A"))
        a.material = {"not", "json"}

        with pytest.raises(TypeError):
            store.update(a)

        assert store.get(a.id).material == "Ceramic"
        assert ServiceCatalogStore(repo).get(a.id).material == "Ceramic"

    def test_store_still_saves_after_a_failure(self, repo):
        store = ServiceCatalogStore(repo)
        with pytest.raises(TypeError):
            store.add(offering(name="bad", description={"x"}))
        store.add(offering(name="good"))
        assert [s.name for s in ServiceCatalogStore(repo).list()] == ["good"]


class TestDuplicateIdsOnLoad:

    def test_duplicates_get_new_ids(self, repo):
        first = offering(name="A")
        second = offering(name="B")
        second.id = first.id
        repo.save("services", [first.to_dict(), second.to_dict()])

        listed = ServiceCatalogStore(repo).list()
        assert [s.name for s in listed] == ["A", "B"]
        assert listed[0].id == first.id
        assert listed[1].id != first.id
