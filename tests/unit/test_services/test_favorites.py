"""Tests for saved-properties management."""

import pytest
from src.services.favorites import (
    set_favorite,
    get_saved_properties,
    parse_saved_properties,
    serialize_saved_properties,
)
from src.utils.errors import NotFoundError


@pytest.mark.unit
@pytest.mark.parametrize("raw,expected", [
    ("[]", []),
    ("[3, 1, 2]", [3, 1, 2]),
    ("", []),
    (None, []),
    ("not json", []),
    ("{\"a\": 1}", []),
    ("[1, \"two\"]", []),
    ("[true]", []),
    ([4, 5], [4, 5]),
])
def test_parse_saved_properties_is_defensive(raw, expected):
    assert parse_saved_properties(raw) == expected


@pytest.mark.unit
def test_serialize_saved_properties():
    assert serialize_saved_properties([1, 2]) == "[1, 2]"
    assert parse_saved_properties(serialize_saved_properties([])) == []


@pytest.mark.unit
def test_add_favorite(store, sample_properties, buyer_ctx):
    p1, _ = sample_properties
    user = set_favorite(store, buyer_ctx, p1.id, add=True)

    assert parse_saved_properties(user.saved_properties) == [p1.id]


@pytest.mark.unit
def test_add_favorite_is_idempotent(store, sample_properties, buyer_ctx):
    p1, p2 = sample_properties
    set_favorite(store, buyer_ctx, p1.id, add=True)
    set_favorite(store, buyer_ctx, p2.id, add=True)
    once = parse_saved_properties(store.get_user(buyer_ctx.user_id).saved_properties)

    user = set_favorite(store, buyer_ctx, p1.id, add=True)

    assert parse_saved_properties(user.saved_properties) == once == [p1.id, p2.id]


@pytest.mark.unit
def test_remove_favorite(store, sample_properties, buyer_ctx):
    p1, p2 = sample_properties
    set_favorite(store, buyer_ctx, p1.id, add=True)
    set_favorite(store, buyer_ctx, p2.id, add=True)

    user = set_favorite(store, buyer_ctx, p1.id, add=False)

    assert parse_saved_properties(user.saved_properties) == [p2.id]


@pytest.mark.unit
def test_remove_non_member_is_noop(store, sample_properties, buyer_ctx):
    p1, p2 = sample_properties
    set_favorite(store, buyer_ctx, p1.id, add=True)

    user = set_favorite(store, buyer_ctx, p2.id, add=False)

    assert parse_saved_properties(user.saved_properties) == [p1.id]


@pytest.mark.unit
def test_remove_drops_all_duplicates(store, sample_properties, buyer):
    p1, p2 = sample_properties
    store.update_user(buyer.id, {"saved_properties": f"[{p1.id}, {p2.id}, {p1.id}]"})

    user = set_favorite(store, buyer.id, p1.id, add=False)

    assert parse_saved_properties(user.saved_properties) == [p2.id]


@pytest.mark.unit
def test_malformed_stored_favorites_recover(store, sample_properties, buyer):
    """Corrupt stored data is replaced rather than failing the request."""
    p1, _ = sample_properties
    store.update_user(buyer.id, {"saved_properties": "{{corrupt"})

    user = set_favorite(store, buyer.id, p1.id, add=True)

    assert parse_saved_properties(user.saved_properties) == [p1.id]


@pytest.mark.unit
def test_unknown_user(store, sample_properties):
    p1, _ = sample_properties
    with pytest.raises(NotFoundError):
        set_favorite(store, 999, p1.id, add=True)


@pytest.mark.unit
def test_add_unknown_property(store, buyer_ctx):
    with pytest.raises(NotFoundError):
        set_favorite(store, buyer_ctx, 999, add=True)


@pytest.mark.unit
def test_remove_deleted_property(store, sample_properties, buyer_ctx):
    """Stale IDs can still be removed after the property is gone."""
    p1, _ = sample_properties
    set_favorite(store, buyer_ctx, p1.id, add=True)
    store.delete_property(p1.id)

    user = set_favorite(store, buyer_ctx, p1.id, add=False)

    assert parse_saved_properties(user.saved_properties) == []


@pytest.mark.unit
def test_get_saved_properties_skips_deleted(store, sample_properties, buyer_ctx):
    p1, p2 = sample_properties
    set_favorite(store, buyer_ctx, p2.id, add=True)
    set_favorite(store, buyer_ctx, p1.id, add=True)
    store.delete_property(p2.id)

    assert [p.id for p in get_saved_properties(store, buyer_ctx)] == [p1.id]
