"""
Tests for the ObjectId codec.
"""

import pytest
from bson import ObjectId

from services.identifiers import InvalidIdentifier, decode_object_id


def test_decode_valid_id():
    raw = "64f1c2a9e4b0a1b2c3d4e5f6"

    assert decode_object_id(raw) == ObjectId(raw)


def test_decode_uppercase_hex():
    assert decode_object_id("64F1C2A9E4B0A1B2C3D4E5F6") == ObjectId("64f1c2a9e4b0a1b2c3d4e5f6")


@pytest.mark.parametrize(
    "raw",
    [
        "not-an-id",
        "",
        "64f1c2a9e4b0a1b2c3d4e5f",
        "64f1c2a9e4b0a1b2c3d4e5f60",
        " 64f1c2a9e4b0a1b2c3d4e5f6",
        "64f1c2a9e4b0a1b2c3d4e5f6\n",
        "g4f1c2a9e4b0a1b2c3d4e5f6",
        "abcdefghijkl",
    ],
)
def test_decode_rejects_malformed(raw):
    with pytest.raises(InvalidIdentifier):
        decode_object_id(raw)


def test_invalid_identifier_is_value_error():
    with pytest.raises(ValueError):
        decode_object_id("nope")
