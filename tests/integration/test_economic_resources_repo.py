import logging
import uuid
from decimal import Decimal

import pytest
from sqlalchemy import event, inspect

from valueflows.db import models
from valueflows.db.errors import NotFoundError, StorageFault, ValidationError
from valueflows.db.repositories import economic_resources as repo
from valueflows.db.repositories.economic_resources import Relation


def _names(page):
    return {r.name for r in page.nodes}


def _walk(db, params, size):
    """Follow end cursors until the last page, returning every node id."""
    seen = []
    after = None
    while True:
        args = dict(params, first=size)
        if after:
            args["after"] = after
        page = repo.get_economic_resources(db, args)
        seen.extend(r.id for r in page.nodes)
        if not page.page_info.has_next_page:
            return seen
        after = page.page_info.end_cursor


@pytest.fixture
def count_queries(engine):
    statements = []

    def _before(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    event.listen(engine, "before_cursor_execute", _before)
    try:
        yield statements
    finally:
        event.remove(engine, "before_cursor_execute", _before)


# one

def test_get_by_id_and_string_id(db, make_resource):
    res = make_resource("Flour")
    assert repo.get_economic_resource(db, res.id).name == "Flour"
    assert repo.get_economic_resource(db, str(res.id)).id == res.id


def test_get_absent_or_malformed_id_is_not_found(db, make_resource):
    make_resource()
    with pytest.raises(NotFoundError):
        repo.get_economic_resource(db, uuid.uuid4())
    with pytest.raises(NotFoundError):
        repo.get_economic_resource(db, "not-a-uuid")


def test_get_by_equality_clauses(db, make_resource, make_agent):
    alice = make_agent("Alice")
    make_resource("Flour", custodian_id=alice.id, tracking_identifier="lot-1")
    make_resource("Flour", tracking_identifier="lot-2")

    found = repo.get_economic_resource(db, {"name": "Flour", "custodian_id": str(alice.id)})
    assert found.tracking_identifier == "lot-1"

    with pytest.raises(NotFoundError):
        repo.get_economic_resource(db, {"name": "Sugar"})


def test_get_with_unknown_field_is_rejected(db):
    with pytest.raises(ValidationError) as ei:
        repo.get_economic_resource(db, {"colour": "red"})
    assert ei.value.errors[0].field == "colour"


def test_get_with_multiple_matches_is_a_storage_fault(db, make_resource):
    make_resource("Twin")
    make_resource("Twin")
    with pytest.raises(StorageFault):
        repo.get_economic_resource(db, {"name": "Twin"})


# all

def test_classified_as_filter_is_superset_match(db, make_resource):
    make_resource("a", classified_as=["food", "raw"])
    make_resource("b", classified_as=["food"])
    make_resource("c", classified_as=["tool"])
    make_resource("d")

    assert _names(repo.get_economic_resources(db, {"filter": {"classified_as": ["food"]}})) == {"a", "b"}
    assert _names(repo.get_economic_resources(db, {"filter": {"classified_as": ["food", "raw"]}})) == {"a"}
    assert _names(repo.get_economic_resources(db, {"filter": {"classified_as": ["raw", "tool"]}})) == set()


def test_membership_filters(db, make_resource, make_agent, unit):
    alice, bob = make_agent("Alice"), make_agent("Bob")
    other_spec = models.ResourceSpecification(name="Barley", default_unit_of_resource_id=unit.id)
    db.add(other_spec)
    db.commit()

    make_resource("a", primary_accountable_id=alice.id, custodian_id=bob.id)
    make_resource("b", primary_accountable_id=bob.id, custodian_id=bob.id)
    make_resource("c", primary_accountable_id=alice.id, conforms_to_id=other_spec.id)

    def names(filt):
        return _names(repo.get_economic_resources(db, {"filter": filt}))

    assert names({"primary_accountable": [alice.id]}) == {"a", "c"}
    assert names({"custodian": [bob.id]}) == {"a", "b"}
    assert names({"conforms_to": [str(other_spec.id)]}) == {"c"}
    assert names({"primary_accountable": [alice.id, bob.id]}) == {"a", "b", "c"}


def test_combined_filters_intersect(db, make_resource, make_agent):
    alice = make_agent("Alice")
    make_resource("a", classified_as=["food"], custodian_id=alice.id)
    make_resource("b", classified_as=["food"])
    make_resource("c", custodian_id=alice.id)

    by_tag = _names(repo.get_economic_resources(db, {"filter": {"classified_as": ["food"]}}))
    by_custodian = _names(repo.get_economic_resources(db, {"filter": {"custodian": [alice.id]}}))
    both = _names(repo.get_economic_resources(db, {"filter": {"classified_as": ["food"], "custodian": [alice.id]}}))
    assert both == by_tag & by_custodian == {"a"}


def test_unknown_filter_key_is_rejected(db, make_resource):
    make_resource()
    with pytest.raises(ValidationError) as ei:
        repo.get_economic_resources(db, {"filter": {"colour": ["red"]}})
    assert ei.value.errors[0].field == "filter.colour"


def test_pages_concatenate_to_full_scan(db, make_resource):
    for i in range(7):
        make_resource(f"r{i}", classified_as=["food"] if i % 2 else ["tool"])
    make_resource("other")

    full = repo.get_economic_resources(db, {"first": 100})
    walked = _walk(db, {}, size=3)
    assert walked == [r.id for r in full.nodes]
    assert len(walked) == 8

    filtered_full = repo.get_economic_resources(db, {"filter": {"classified_as": ["food"]}, "first": 100})
    filtered_walk = _walk(db, {"filter": {"classified_as": ["food"]}}, size=2)
    assert set(filtered_walk) == {r.id for r in filtered_full.nodes}
    assert len(filtered_walk) == 3


def test_page_info_forward_and_backward(db, make_resource):
    for i in range(5):
        make_resource(f"r{i}")
    ordered = [r.id for r in repo.get_economic_resources(db).nodes]

    first = repo.get_economic_resources(db, {"first": 2})
    assert [r.id for r in first.nodes] == ordered[:2]
    assert first.page_info.has_next_page is True
    assert first.page_info.has_previous_page is False
    assert first.page_info.page_limit == 2

    last = repo.get_economic_resources(db, {"last": 2})
    assert [r.id for r in last.nodes] == ordered[-2:]
    assert last.page_info.has_previous_page is True
    assert last.page_info.has_next_page is False

    before = repo.get_economic_resources(db, {"last": 10, "before": last.page_info.start_cursor})
    assert [r.id for r in before.nodes] == ordered[:3]
    assert before.page_info.has_next_page is True
    assert before.page_info.has_previous_page is False


def test_zero_page_size_is_rejected(db, make_resource):
    make_resource()
    for params in ({"first": 0}, {"last": 0}):
        with pytest.raises(ValidationError) as ei:
            repo.get_economic_resources(db, params)
        assert ei.value.errors[0].field == next(iter(params))


def test_empty_page(db):
    page = repo.get_economic_resources(db)
    assert page.edges == []
    assert page.page_info.start_cursor is None and page.page_info.end_cursor is None
    assert page.page_info.has_next_page is False


# update

def test_update_replaces_given_fields_only(db, make_resource):
    res = make_resource("Flour", note="fine", classified_as=["food"])
    updated = repo.update_economic_resource(
        db, res.id, {"name": "Whole flour", "classified_as": ["food", "raw", "food"], "metadata": {"mill": 3}}
    )
    assert updated.name == "Whole flour"
    assert updated.note == "fine"
    assert updated.classified_as == ["food", "raw"]
    assert updated.metadata_col == {"mill": 3}


def test_update_with_blank_name_leaves_row_unchanged(db, make_resource):
    res = make_resource("Flour", note="fine")
    with pytest.raises(ValidationError) as ei:
        repo.update_economic_resource(db, res.id, {"name": "", "note": "changed"})
    assert [e.field for e in ei.value.errors] == ["name"]

    db.expire_all()
    stored = repo.get_economic_resource(db, res.id)
    assert stored.name == "Flour"
    assert stored.note == "fine"


def test_update_rejects_fields_outside_the_changeset(db, make_resource):
    res = make_resource("Flour")
    with pytest.raises(ValidationError) as ei:
        repo.update_economic_resource(db, res.id, {"custodian_id": str(uuid.uuid4())})
    assert ei.value.errors[0].field == "custodian_id"


def test_update_missing_row_is_not_found(db):
    with pytest.raises(NotFoundError):
        repo.update_economic_resource(db, uuid.uuid4(), {"name": "x"})


# delete

def test_delete_returns_previous_state_then_not_found(db, make_resource):
    res = make_resource("Flour", note="last bag")
    rid = res.id
    deleted = repo.delete_economic_resource(db, rid)
    assert deleted.id == rid
    assert deleted.note == "last bag"
    with pytest.raises(NotFoundError):
        repo.get_economic_resource(db, rid)
    with pytest.raises(NotFoundError):
        repo.delete_economic_resource(db, rid)


def test_delete_removes_images(db, make_resource):
    res = make_resource("Photo subject")
    db.add(models.File(hash="h", name="front", mime_type="image/png", extension="png", size=10, economic_resource_id=res.id))
    db.commit()
    repo.delete_economic_resource(db, res.id)
    assert db.query(models.File).count() == 0


# preload

def test_preload_custodian_is_idempotent(db, make_resource, make_agent, count_queries):
    alice_id = make_agent("Alice").id
    res_id = make_resource("Flour", custodian_id=alice_id).id
    # start from an empty identity map so the custodian has to be fetched
    db.expunge_all()
    res = repo.get_economic_resource(db, res_id)

    count_queries.clear()
    first = repo.preload_economic_resource(db, res, Relation.CUSTODIAN)
    after_first = len(count_queries)
    custodian = (first.custodian.id, first.custodian.name)
    second = repo.preload_economic_resource(db, res, Relation.CUSTODIAN)

    assert after_first == 1
    assert len(count_queries) == after_first
    assert first is second
    assert (second.custodian.id, second.custodian.name) == custodian == (alice_id, "Alice")


def test_preload_quantities_build_measures(db, make_resource, unit):
    res = make_resource(
        "Flour",
        accounting_quantity_has_numerical_value=Decimal("12.5"),
        accounting_quantity_has_unit_id=unit.id,
    )
    db.expire_all()
    res = repo.get_economic_resource(db, res.id)
    repo.preload_economic_resource(db, res, Relation.ACCOUNTING_QUANTITY)
    repo.preload_economic_resource(db, res, Relation.ONHAND_QUANTITY)

    assert res.accounting_quantity.has_numerical_value == Decimal("12.5")
    assert res.accounting_quantity.has_unit.symbol == "kg"
    assert res.onhand_quantity is None


def test_preload_state_resolves_action(db, make_resource):
    res = make_resource("Inspected", state_id="pass")
    repo.preload_economic_resource(db, res, Relation.STATE)
    assert res.state.id == "pass"
    assert res.state.pairs_with == "accept"


def test_preload_every_relation(db, make_resource, make_agent, unit, spec):
    place = models.SpatialThing(name="Warehouse")
    batch = models.ProductBatch(batch_number="B-1")
    stage = models.ProcessSpecification(name="milled")
    db.add_all([place, batch, stage])
    db.commit()
    container = make_resource("Silo")
    res = make_resource(
        "Grain",
        primary_accountable_id=make_agent("Org", type="org").id,
        custodian_id=make_agent("Keeper").id,
        current_location_id=place.id,
        lot_id=batch.id,
        stage_id=stage.id,
        contained_in_id=container.id,
        unit_of_effort_id=unit.id,
    )
    db.add(models.File(hash="h", name="front", mime_type="image/png", extension="png", size=1, economic_resource_id=res.id))
    db.commit()
    db.expire_all()
    res = repo.get_economic_resource(db, res.id)

    for relation in Relation:
        assert repo.preload_economic_resource(db, res, relation) is res

    assert [f.name for f in res.images] == ["front"]
    assert res.conforms_to.id == spec.id
    assert res.primary_accountable.type == "org"
    assert res.custodian.name == "Keeper"
    assert res.current_location.name == "Warehouse"
    assert res.lot.batch_number == "B-1"
    assert res.stage.name == "milled"
    assert res.contained_in.name == "Silo"
    assert res.unit_of_effort.label == "kilogram"
    assert res.state is None


def test_preload_accepts_only_relation_members(db, make_resource):
    res = make_resource()
    assert repo.preload_economic_resource(db, res, Relation.CONFORMS_TO).conforms_to is not None
    for name in ("conforms_to", "owner"):
        with pytest.raises(ValidationError) as ei:
            repo.preload_economic_resource(db, res, name)
        assert ei.value.errors[0].field == "relation"


def test_preload_after_delete_fetches_through_the_session(db, make_resource, make_agent, unit, spec):
    container = make_resource("Silo")
    res = make_resource(
        "Grain",
        custodian_id=make_agent("Keeper").id,
        contained_in_id=container.id,
        state_id="pass",
        onhand_quantity_has_numerical_value=Decimal("3"),
        onhand_quantity_has_unit_id=unit.id,
    )
    db.add(models.File(hash="h", name="front", mime_type="image/png", extension="png", size=1, economic_resource_id=res.id))
    db.commit()
    rid = res.id
    spec_id = spec.id
    db.expunge_all()

    deleted = repo.delete_economic_resource(db, rid)
    assert inspect(deleted).detached
    for relation in Relation:
        assert repo.preload_economic_resource(db, deleted, relation) is deleted

    assert deleted.custodian.name == "Keeper"
    assert deleted.conforms_to.id == spec_id
    assert deleted.contained_in.name == "Silo"
    assert deleted.onhand_quantity.has_unit.symbol == "kg"
    assert deleted.state.id == "pass"
    assert deleted.primary_accountable is None
    assert [f.name for f in deleted.images] == ["front"]
    assert not db.dirty and not db.new and not db.deleted
    with pytest.raises(NotFoundError):
        repo.get_economic_resource(db, rid)


def test_preload_detached_entity_fetches_missing_relations_once(db, make_resource, make_agent, count_queries):
    rid = make_resource(custodian_id=make_agent("Keeper").id).id
    db.expunge_all()
    res = repo.get_economic_resource(db, rid)
    db.expunge(res)

    count_queries.clear()
    repo.preload_economic_resource(db, res, Relation.CUSTODIAN)
    repo.preload_economic_resource(db, res, Relation.CUSTODIAN)
    assert len(count_queries) == 1
    assert res.custodian.name == "Keeper"


def test_preload_never_writes(db, make_resource, make_agent, count_queries):
    res = make_resource(custodian_id=make_agent().id)
    db.expire_all()
    res = repo.get_economic_resource(db, res.id)
    count_queries.clear()
    for relation in Relation:
        repo.preload_economic_resource(db, res, relation)
    assert all(s.lstrip().upper().startswith("SELECT") for s in count_queries)
    assert not db.dirty


def test_rejections_are_logged(db, caplog):
    with caplog.at_level(logging.INFO, logger="valueflows.db.repositories.economic_resources"):
        with pytest.raises(NotFoundError):
            repo.get_economic_resource(db, uuid.uuid4())
        with pytest.raises(ValidationError):
            repo.get_economic_resources(db, {"filter": {"owner": ["x"]}})
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("economic_resource_not_found") for m in messages)
    assert any(m.startswith("economic_resource_filter_rejected") for m in messages)
