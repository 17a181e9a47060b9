"""Tests for entity record models and the payload codec."""

import json

import pytest

from farm_ledger.core.exceptions import RecordDecodeError
from farm_ledger.core.models import (
    ENTITY_SCHEMAS,
    Consumer,
    EntityKind,
    Farmer,
    Product,
    Transaction,
    decode_record,
    encode_record,
)


class TestEntitySchemas:
    """Tests for the kind -> schema table."""

    def test_all_kinds_defined(self) -> None:
        """Every entity kind has a schema."""
        assert set(ENTITY_SCHEMAS) == set(EntityKind)

    def test_prefixes(self) -> None:
        """Each kind uses its fixed prefix."""
        prefixes = {kind.value: schema.prefix for kind, schema in ENTITY_SCHEMAS.items()}
        assert prefixes == {
            "farmer": "farmer-",
            "consumer": "consumer-",
            "product": "product-",
            "transaction": "transaction-",
        }

    def test_attributes_exclude_id(self) -> None:
        """Schema attributes list everything a caller supplies."""
        assert ENTITY_SCHEMAS[EntityKind.PRODUCT].attributes == ("farmer_id", "name", "price")
        assert ENTITY_SCHEMAS[EntityKind.TRANSACTION].attributes == (
            "farmer_id",
            "consumer_id",
            "amount",
            "timestamp",
        )


class TestEncodeRecord:
    """Tests for encode_record."""

    def test_farmer_payload_is_field_named_json(self) -> None:
        """Unset optional fields are left out of the payload."""
        farmer = Farmer(id="farmer-1", name="Alice", email="alice@example.com")
        payload = encode_record(farmer)
        assert json.loads(payload) == {
            "id": "farmer-1",
            "name": "Alice",
            "email": "alice@example.com",
        }

    def test_price_stays_text(self) -> None:
        """Numeric-looking fields are stored as strings."""
        product = Product(id="product-10", farmer_id="1", name="Tomatoes", price="3.50")
        assert json.loads(encode_record(product))["price"] == "3.50"


class TestDecodeRecord:
    """Tests for decode_record."""

    def test_decodes_valid_payload(self) -> None:
        """A valid payload decodes to the record."""
        payload = b'{"id":"consumer-7","name":"Bob","location":"Lyon"}'
        consumer = decode_record(Consumer, payload, key="consumer-7")
        assert consumer == Consumer(id="consumer-7", name="Bob", location="Lyon")

    def test_transaction_round_trip(self) -> None:
        """Encoded transactions decode to an equal record."""
        txn = Transaction(
            id="transaction-1",
            farmer_id="1",
            consumer_id="7",
            amount="12.00",
            timestamp="2024-05-01T10:00:00Z",
        )
        assert decode_record(Transaction, encode_record(txn)) == txn

    @pytest.mark.parametrize(
        "payload",
        [
            b"",
            b"not json",
            b"\xff\xfe\x00",
            b"[]",
            b'{"id":"consumer-7","name":"Bob"}',
            b'{"id":"consumer-7","name":"Bob","location":"Lyon","extra":"x"}',
            b'{"id":"consumer-7","name":"Bob","location":42}',
        ],
    )
    def test_malformed_payload_raises(self, payload: bytes) -> None:
        """Corrupt or wrong-shaped payloads raise RecordDecodeError."""
        with pytest.raises(RecordDecodeError) as exc_info:
            decode_record(Consumer, payload, key="consumer-7", entity_type="consumer")
        assert exc_info.value.entity_id == "consumer-7"
        assert exc_info.value.entity_type == "consumer"

    def test_other_kind_payload_raises(self) -> None:
        """A product payload does not decode as a farmer."""
        product = Product(id="product-1", farmer_id="1", name="Kale", price="2.00")
        with pytest.raises(RecordDecodeError):
            decode_record(Farmer, encode_record(product))

    def test_farmer_without_contact_field_raises(self) -> None:
        """A stored farmer with neither email nor location is corrupt."""
        with pytest.raises(RecordDecodeError) as exc_info:
            decode_record(Farmer, b'{"id":"farmer-1","name":"Alice"}', key="farmer-1")
        assert any("email or location" in message for message in exc_info.value.errors)

    def test_error_lists_field_messages(self) -> None:
        """Decode errors carry the failing fields."""
        with pytest.raises(RecordDecodeError) as exc_info:
            decode_record(Product, b'{"id":"product-1"}', key="product-1")
        assert any("price" in message for message in exc_info.value.errors)
