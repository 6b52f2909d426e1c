"""Tests for wallet registration."""

import pytest

from walletscore.core.modules.user.models import SignedProof, SkippedProof
from walletscore.errors import InvalidSignatureError, MissingFieldsError, ValidationError


@pytest.fixture
def users(core):
    return core.services.user


@pytest.fixture
def users_collection(database):
    return database.get_collection("users")


class TestRegisterSkipped:
    """Tests for registration without proof of key ownership."""

    async def test_creates_user(self, users, users_collection, wallet):
        """Test that a new wallet is stored with its name."""
        user = await users.register(wallet, "Ann", SkippedProof())
        assert user.wallet == wallet
        assert user.name == "Ann"
        assert len(users_collection.docs) == 1

    async def test_name_defaults_to_empty(self, users, wallet):
        user = await users.register(wallet, None, SkippedProof())
        assert user.name == ""

    async def test_skip_accepts_any_wallet_string(self, users):
        """Test that skipped registration does not decode the wallet."""
        user = await users.register("not-a-real-key", "Bob", SkippedProof())
        assert user.wallet == "not-a-real-key"

    async def test_missing_wallet(self, users):
        with pytest.raises(MissingFieldsError, match="Missing wallet"):
            await users.register("", "Ann", SkippedProof())

    async def test_name_too_long(self, users, users_collection, wallet):
        """Test that an overlong name is rejected and nothing is stored."""
        with pytest.raises(ValidationError, match="at most 10"):
            await users.register(wallet, "x" * 11, SkippedProof())
        assert users_collection.docs == []


class TestRegisterSigned:
    """Tests for registration proven by a wallet signature."""

    async def test_valid_signature(self, users, wallet, sign):
        user = await users.register(wallet, "Ann", SignedProof(message="hello", signature=sign("hello")))
        assert user.name == "Ann"

    async def test_invalid_signature(self, users, users_collection, wallet, sign):
        """Test that a signature over a different message is rejected."""
        proof = SignedProof(message="hello", signature=sign("goodbye"))
        with pytest.raises(InvalidSignatureError):
            await users.register(wallet, "Ann", proof)
        assert users_collection.docs == []

    async def test_malformed_signature(self, users, wallet):
        with pytest.raises(InvalidSignatureError):
            await users.register(wallet, "Ann", SignedProof(message="hello", signature="###"))

    async def test_unencodable_message(self, users, users_collection, wallet, sign):
        """Test that a lone surrogate in the message fails verification instead of crashing."""
        proof = SignedProof(message="hi\ud800", signature=sign("hello"))
        with pytest.raises(InvalidSignatureError):
            await users.register(wallet, "Ann", proof)
        assert users_collection.docs == []

    @pytest.mark.parametrize(("message", "signature"), [("", "sig"), ("hello", ""), ("", "")])
    async def test_missing_proof_fields(self, users, wallet, message, signature):
        """Test that a signed proof needs both message and signature."""
        with pytest.raises(MissingFieldsError):
            await users.register(wallet, "Ann", SignedProof(message=message, signature=signature))


class TestIdempotency:
    """Tests for repeated registration of the same wallet."""

    async def test_register_twice_returns_same_user(self, users, users_collection, wallet):
        """Test that a second registration returns the stored user and keeps its name."""
        first = await users.register(wallet, "Ann", SkippedProof())
        second = await users.register(wallet, "Zed", SkippedProof())
        assert second.id == first.id
        assert second.name == "Ann"
        assert len(users_collection.docs) == 1

    async def test_duplicate_insert_resolves_to_stored_user(self, users, users_collection, wallet, monkeypatch):
        """Test that losing an insert race returns the already stored user."""
        stored = await users.register(wallet, "Ann", SkippedProof())

        # First lookup misses, as if another request inserted in between
        original = users.find_user_by_wallet
        calls = {"n": 0}

        async def racing_lookup(w):
            calls["n"] += 1
            if calls["n"] == 1:
                return None
            return await original(w)

        monkeypatch.setattr(users, "find_user_by_wallet", racing_lookup)
        result = await users.register(wallet, "Zed", SkippedProof())
        assert result.id == stored.id
        assert len(users_collection.docs) == 1


class TestUserStatus:
    """Tests for registration status lookup."""

    async def test_unregistered(self, users, wallet):
        status = await users.get_user_status(wallet)
        assert status.registered is False
        assert status.name is None

    async def test_registered(self, users, wallet):
        await users.register(wallet, "Ann", SkippedProof())
        status = await users.get_user_status(wallet)
        assert status.registered is True
        assert status.name == "Ann"

    async def test_missing_wallet(self, users):
        with pytest.raises(MissingFieldsError):
            await users.get_user_status("")
