"""Integration tests for BcryptPasswordService (real bcrypt, cost factor 4)."""

import pytest

from src.infrastructure.security import BcryptPasswordService


@pytest.mark.integration
class TestBcryptPasswordService:
    def test_hash_and_verify(self, password_service):
        password_hash = password_service.hash_password("SecurePass123!")

        assert password_hash.startswith("$2b$04$")
        assert password_service.verify_password("SecurePass123!", password_hash)
        assert not password_service.verify_password("WrongPass123!", password_hash)

    def test_same_password_hashes_differently(self, password_service):
        first = password_service.hash_password("SecurePass123!")
        second = password_service.hash_password("SecurePass123!")

        assert first != second

    def test_malformed_hash_returns_false(self, password_service):
        assert password_service.verify_password("anything", "not-a-bcrypt-hash") is False

    @pytest.mark.parametrize("cost", [3, 32])
    def test_cost_factor_out_of_range_rejected(self, cost):
        with pytest.raises(ValueError, match="between 4 and 31"):
            BcryptPasswordService(cost_factor=cost)
