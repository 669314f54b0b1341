# /tests/test_database_service.py

import pytest

from app.services.database_helpers.generation_repository_sql import merge_mapping


@pytest.fixture
def pending_request(db_service):
    return db_service.create_generation_request("Plumber in Madrid", "services")


def test_create_generation_request_is_pending(pending_request):
    """A new record has an id, a creation time and no generated files yet."""
    assert pending_request.id.startswith("web_")
    assert pending_request.created_at is not None
    assert pending_request.generated_html is None
    assert pending_request.generated_css is None
    assert pending_request.generated_js is None
    assert pending_request.owner_id is None


def test_get_non_existent_request(db_service):
    """Looking up an unknown id returns None rather than raising."""
    assert db_service.get_generation_request("web_" + "0" * 32) is None


def test_update_merges_custom_colors(db_service, pending_request):
    """
    GIVEN: existing custom_colors = {primary: "#111"}
    WHEN:  update is called with custom_colors = {secondary: "#222"}
    THEN:  both keys are kept, not just the new one.
    """
    db_service.update_generation_request(pending_request.id, {"custom_colors": {"primary": "#111"}})
    updated = db_service.update_generation_request(pending_request.id, {"custom_colors": {"secondary": "#222"}})

    assert updated.custom_colors == {"primary": "#111", "secondary": "#222"}


def test_update_overwrites_matching_keys_only(db_service, pending_request):
    """Keys present in the update win; the rest of the stored mapping survives."""
    db_service.update_generation_request(pending_request.id, {"custom_texts": {"title": "Old", "tagline": "Keep me"}})
    updated = db_service.update_generation_request(pending_request.id, {"custom_texts": {"title": "New"}})

    assert updated.custom_texts == {"title": "New", "tagline": "Keep me"}


def test_update_replaces_scalar_fields(db_service, pending_request):
    """Non-mapping fields are replaced, not merged."""
    db_service.update_generation_request(pending_request.id, {"generated_html": "<html>v1</html>"})
    updated = db_service.update_generation_request(pending_request.id, {"generated_html": "<html>v2</html>"})

    assert updated.generated_html == "<html>v2</html>"


def test_update_with_no_changes_returns_current_record(db_service, pending_request):
    """Empty updates, or updates with only None values, return the record untouched."""
    for empty_update in ({}, None, {"generated_html": None, "custom_colors": None}):
        record = db_service.update_generation_request(pending_request.id, empty_update)
        assert record is not None
        assert record.id == pending_request.id
        assert record.generated_html is None
        assert record.custom_colors is None


def test_update_ignores_id_and_created_at(db_service, pending_request):
    """The id and creation time can never be changed through an update."""
    original_id = pending_request.id
    original_created_at = pending_request.created_at
    updated = db_service.update_generation_request(original_id, {"id": "web_other", "created_at": None})

    assert updated.id == original_id
    assert updated.created_at == original_created_at


def test_update_missing_record_returns_none(db_service):
    """Updating an unknown id returns None."""
    assert db_service.update_generation_request("web_" + "f" * 32, {"generated_html": "<html></html>"}) is None


def test_delete_is_idempotent(db_service, pending_request):
    """Deleting twice, or deleting an unknown id, never raises."""
    assert db_service.delete_generation_request(pending_request.id) is True
    assert db_service.get_generation_request(pending_request.id) is None
    # Deleting again, or deleting an id that never existed, is not an error.
    assert db_service.delete_generation_request(pending_request.id) is False
    assert db_service.delete_generation_request("web_does_not_exist") is False


def test_list_by_owner_only_returns_owned_records_in_creation_order(db_service):
    """Anonymous records and other accounts' records are excluded."""
    owner = db_service.add_user({"id": "usr_owner", "email": "owner@example.com", "hashed_password": "x"})
    other = db_service.add_user({"id": "usr_other", "email": "other@example.com", "hashed_password": "x"})

    first = db_service.create_generation_request("Cafe in Lisbon", "restaurant", owner.id)
    db_service.create_generation_request("Anonymous shop", "shop")
    db_service.create_generation_request("Someone else's firm", "consultancy", other.id)
    second = db_service.create_generation_request("Bakery in Porto", "shop", owner.id)

    owned = db_service.get_generation_requests_by_owner(owner.id)

    assert [r.id for r in owned] == [first.id, second.id]
    assert db_service.get_generation_requests_by_owner("usr_nobody") == []


def test_merge_mapping_skips_none_values():
    """None values in an update never erase a stored key."""
    assert merge_mapping({"primary": "#111"}, {"primary": None, "accent": "#333"}) == {"primary": "#111", "accent": "#333"}
    assert merge_mapping(None, {}) is None
    assert merge_mapping(None, {"logo": None}) is None
