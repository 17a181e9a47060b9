"""Tests for the key codec."""

import pytest

from farm_ledger.core.exceptions import InvalidIdentifierError
from farm_ledger.core.keys import (
    CONSUMER_PREFIX,
    FARMER_PREFIX,
    PRODUCT_PREFIX,
    SCAN_SENTINEL,
    TRANSACTION_PREFIX,
    make_key,
    scan_range,
    validate_identifier,
)


class TestMakeKey:
    """Tests for make_key."""

    def test_concatenates_prefix_and_id(self) -> None:
        """Key is the prefix followed by the identifier."""
        assert make_key(FARMER_PREFIX, "1") == "farmer-1"
        assert make_key(PRODUCT_PREFIX, "10") == "product-10"

    def test_no_normalization(self) -> None:
        """Identifiers are used verbatim."""
        assert make_key(CONSUMER_PREFIX, " Bob ") == "consumer- Bob "

    def test_same_id_different_prefix_gives_distinct_keys(self) -> None:
        """Prefixes keep kinds apart."""
        assert make_key(FARMER_PREFIX, "1") != make_key(PRODUCT_PREFIX, "1")


class TestScanRange:
    """Tests for scan_range."""

    def test_range_bounds(self) -> None:
        """Range runs from the prefix to prefix plus sentinel."""
        assert scan_range(FARMER_PREFIX) == ("farmer-", "farmer-~")

    def test_every_valid_key_falls_inside(self) -> None:
        """Keys built from valid identifiers sort inside [lo, hi)."""
        lo, hi = scan_range(PRODUCT_PREFIX)
        for identifier in ("0", "a", "zzz", "}" * 5, "A-b_c.d"):
            key = make_key(PRODUCT_PREFIX, identifier)
            assert lo <= key < hi

    def test_other_prefixes_fall_outside(self) -> None:
        """Keys of other kinds never fall inside a prefix range."""
        lo, hi = scan_range(FARMER_PREFIX)
        for prefix in (CONSUMER_PREFIX, PRODUCT_PREFIX, TRANSACTION_PREFIX):
            key = make_key(prefix, "1")
            assert not (lo <= key < hi)

    def test_no_prefix_is_a_prefix_of_another(self) -> None:
        """The fixed prefix set is prefix-free."""
        prefixes = [FARMER_PREFIX, CONSUMER_PREFIX, PRODUCT_PREFIX, TRANSACTION_PREFIX]
        for a in prefixes:
            for b in prefixes:
                if a != b:
                    assert not b.startswith(a)


class TestValidateIdentifier:
    """Tests for validate_identifier."""

    @pytest.mark.parametrize("identifier", ["1", "abc", "LOT-001", "a b", "}"])
    def test_accepts_valid_identifiers(self, identifier: str) -> None:
        """Printable ASCII below the sentinel is accepted."""
        validate_identifier(identifier)

    def test_rejects_empty(self) -> None:
        """Empty identifiers are rejected."""
        with pytest.raises(InvalidIdentifierError, match="empty"):
            validate_identifier("")

    def test_rejects_sentinel(self) -> None:
        """The sentinel itself is rejected."""
        with pytest.raises(InvalidIdentifierError, match="reserved"):
            validate_identifier(f"a{SCAN_SENTINEL}b")

    @pytest.mark.parametrize("identifier", ["\x7f", "café", "農家"])
    def test_rejects_characters_after_sentinel(self, identifier: str) -> None:
        """DEL and non-ASCII characters sort after the sentinel."""
        with pytest.raises(InvalidIdentifierError):
            validate_identifier(identifier)

    def test_rejects_non_string(self) -> None:
        """Non-string identifiers are rejected."""
        with pytest.raises(InvalidIdentifierError, match="string"):
            validate_identifier(42)  # type: ignore[arg-type]

    def test_error_carries_entity_type(self) -> None:
        """Error details name the entity kind."""
        with pytest.raises(InvalidIdentifierError) as exc_info:
            validate_identifier("", entity_type="farmer")
        assert exc_info.value.entity_type == "farmer"
        assert exc_info.value.details["reason"] == "empty"
