"""Unit tests for row mapping."""

from summit.domain.value import Address, DelegateStatus
from summit.persistence.mappers import delegate_to_dict, row_to_delegate
from tests.conftest import make_delegate


class TestDelegateMapping:
    """Tests for delegate <-> row conversion."""

    def test_to_dict_stores_enum_values_and_json(self):
        delegate = make_delegate(
            address=Address(city="Nairobi", country="Kenya"),
            password_hash="hashed",
            push_tokens=["ExpoPushToken[a]"],
        )

        row = delegate_to_dict(delegate)

        assert row["status"] == "pending"
        assert row["title"] == "Dr."
        assert row["identification"]["expiry_date"] == "2030-01-01"
        assert row["address"]["city"] == "Nairobi"
        assert row["password_hash"] == "hashed"
        assert row["push_tokens"] == ["ExpoPushToken[a]"]

    def test_row_restores_credentials_and_value_objects(self):
        delegate = make_delegate(
            address=Address(city="Nairobi"),
            password_hash="hashed",
            status=DelegateStatus.APPROVED,
        )
        row = delegate_to_dict(delegate)
        row["id"] = str(row["id"])

        restored = row_to_delegate(row)

        assert restored.model_dump() == delegate.model_dump()
        assert restored.password_hash == "hashed"
        assert isinstance(restored.address, Address)
