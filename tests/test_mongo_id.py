from datetime import datetime, timezone

import pytest
from bson import ObjectId

from insound.mongo_id import Id


def test_empty_id_is_falsy():
    empty = Id()
    assert not empty
    assert str(empty) == ""
    assert empty.oid is None


def test_empty_created_at_is_minus_one():
    assert Id().created_at() == -1


def test_from_hex_string_round_trip():
    oid = ObjectId()
    ident = Id(str(oid))
    assert ident
    assert str(ident) == str(oid)
    assert ident.oid == oid


def test_invalid_string_raises():
    with pytest.raises(ValueError):
        Id("not-an-id")


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        Id(42)


def test_created_at_matches_generation_time():
    moment = datetime(2021, 6, 1, 12, 0, tzinfo=timezone.utc)
    ident = Id(ObjectId.from_datetime(moment))
    assert ident.created_at() == int(moment.timestamp())


def test_from_bson_document():
    oid = ObjectId()
    ident = Id.from_bson_document({"_id": oid, "name": "Bob"})
    assert ident == oid


def test_from_bson_document_requires_object_id():
    with pytest.raises(TypeError):
        Id.from_bson_document({"_id": "plain"})
    with pytest.raises(KeyError):
        Id.from_bson_document({"name": "Bob"})


def test_equality_with_ids():
    oid = ObjectId()
    assert Id(oid) == Id(oid)
    assert Id() == Id()
    assert not (Id(oid) == Id(ObjectId()))
    assert not (Id(oid) == Id())


def test_equality_with_strings_and_oids():
    oid = ObjectId()
    ident = Id(oid)
    assert ident == str(oid)
    assert str(oid) == ident
    assert ident == oid
    assert oid == ident
    assert not (Id() == "")
    assert not (Id() == oid)


def test_hash_consistent_with_equality():
    oid = ObjectId()
    assert {Id(oid), Id(oid)} == {Id(oid)}


def test_copy_constructor():
    oid = ObjectId()
    assert Id(Id(oid)).oid == oid