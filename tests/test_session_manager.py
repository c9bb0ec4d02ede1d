"""Tests for SessionManager: registration, login and single-session invalidation."""

from unittest.mock import AsyncMock, patch

import pytest
from bson import ObjectId

from common.auth import JWTCodec
from noticeboard.errors import (
    DuplicateEmail,
    ErrorCode,
    InvalidCredentials,
    Unauthenticated,
    UserNotFound,
)


# ─────────────────────────────────────────────────────────────────
# register
# ─────────────────────────────────────────────────────────────────


class TestRegister:
    @pytest.mark.asyncio
    async def test_returns_email_and_stores_logged_out_user(self, session_manager, users_collection):
        result = await session_manager.register("alice@example.com", "pw123", {"name": "Alice"})

        assert result == {"email": "alice@example.com"}
        stored = users_collection.docs[0]
        assert stored["token"] is None
        assert stored["name"] == "Alice"
        assert stored["favorite_notices"] == []

    @pytest.mark.asyncio
    async def test_never_stores_plaintext_password(self, session_manager, users_collection):
        await session_manager.register("alice@example.com", "pw123")

        stored = users_collection.docs[0]
        assert "password" not in stored
        assert stored["password_hash"] != "pw123"

    @pytest.mark.asyncio
    async def test_duplicate_email_fails_regardless_of_password(self, session_manager):
        await session_manager.register("alice@example.com", "pw123")

        with pytest.raises(DuplicateEmail) as exc_info:
            await session_manager.register("alice@example.com", "something-else")

        assert exc_info.value.status_code == 409
        assert exc_info.value.code == ErrorCode.DUPLICATE_EMAIL.value

    @pytest.mark.asyncio
    async def test_email_is_case_insensitive(self, session_manager):
        await session_manager.register("Alice@Example.com", "pw123")

        with pytest.raises(DuplicateEmail):
            await session_manager.register("alice@example.com", "pw123")


# ─────────────────────────────────────────────────────────────────
# login
# ─────────────────────────────────────────────────────────────────


class TestLogin:
    @pytest.mark.asyncio
    async def test_register_then_login_yields_token(self, session_manager, users_collection):
        await session_manager.register("alice@example.com", "pw123")

        result = await session_manager.login("alice@example.com", "pw123")

        assert result["token"]
        assert result["userId"] == str(users_collection.docs[0]["_id"])
        assert users_collection.docs[0]["token"] == result["token"]

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_are_indistinguishable(self, session_manager):
        await session_manager.register("alice@example.com", "pw123")

        with pytest.raises(InvalidCredentials) as wrong_password:
            await session_manager.login("alice@example.com", "nope")
        with pytest.raises(InvalidCredentials) as unknown_email:
            await session_manager.login("bob@example.com", "pw123")

        assert type(wrong_password.value) is type(unknown_email.value)
        assert wrong_password.value.status_code == unknown_email.value.status_code == 401
        assert wrong_password.value.detail == unknown_email.value.detail

    @pytest.mark.asyncio
    async def test_unknown_email_still_runs_password_check(self, session_manager, password_hasher):
        with patch.object(
            password_hasher, "verify_password", wraps=password_hasher.verify_password,
        ) as verify:
            with pytest.raises(InvalidCredentials):
                await session_manager.login("nobody@example.com", "pw123")

        verify.assert_called_once()
        password, hashed = verify.call_args[0]
        assert password == "pw123"
        assert hashed.startswith("$2")

    @pytest.mark.asyncio
    async def test_user_deleted_before_token_write(self, session_manager, user_service):
        await session_manager.register("alice@example.com", "pw123")

        with patch.object(user_service, "update_user", new=AsyncMock(return_value=False)):
            with pytest.raises(InvalidCredentials):
                await session_manager.login("alice@example.com", "pw123")

    @pytest.mark.asyncio
    async def test_second_login_invalidates_first_token(self, session_manager):
        await session_manager.register("alice@example.com", "pw123")

        first = await session_manager.login("alice@example.com", "pw123")
        second = await session_manager.login("alice@example.com", "pw123")

        assert first["token"] != second["token"]
        with pytest.raises(Unauthenticated):
            await session_manager.validate_token(first["token"])
        user = await session_manager.validate_token(second["token"])
        assert str(user["_id"]) == second["userId"]


# ─────────────────────────────────────────────────────────────────
# validate_token
# ─────────────────────────────────────────────────────────────────


class TestValidateToken:
    @pytest.mark.asyncio
    async def test_rejects_garbage(self, session_manager):
        with pytest.raises(Unauthenticated):
            await session_manager.validate_token("not-a-jwt")

    @pytest.mark.asyncio
    async def test_rejects_token_signed_with_other_secret(self, session_manager):
        await session_manager.register("alice@example.com", "pw123")
        login = await session_manager.login("alice@example.com", "pw123")

        forged = JWTCodec(secret="other-secret").sign(login["userId"])

        with pytest.raises(Unauthenticated):
            await session_manager.validate_token(forged)

    @pytest.mark.asyncio
    async def test_rejects_well_signed_token_that_was_never_stored(self, session_manager, token_codec):
        await session_manager.register("alice@example.com", "pw123")
        login = await session_manager.login("alice@example.com", "pw123")

        unstored = token_codec.sign(login["userId"])

        with pytest.raises(Unauthenticated):
            await session_manager.validate_token(unstored)

    @pytest.mark.asyncio
    async def test_rejects_token_of_deleted_user(self, session_manager, users_collection):
        await session_manager.register("alice@example.com", "pw123")
        login = await session_manager.login("alice@example.com", "pw123")
        users_collection.docs.clear()

        with pytest.raises(Unauthenticated):
            await session_manager.validate_token(login["token"])


# ─────────────────────────────────────────────────────────────────
# refresh / logout
# ─────────────────────────────────────────────────────────────────


class TestRefreshAndLogout:
    @pytest.mark.asyncio
    async def test_refresh_returns_same_user_without_rotating(self, session_manager, users_collection):
        await session_manager.register("alice@example.com", "pw123")
        login = await session_manager.login("alice@example.com", "pw123")

        result = await session_manager.refresh(login["userId"])

        assert result == {"userId": login["userId"]}
        assert users_collection.docs[0]["token"] == login["token"]

    @pytest.mark.asyncio
    async def test_refresh_unknown_user(self, session_manager):
        with pytest.raises(UserNotFound):
            await session_manager.refresh(str(ObjectId()))

    @pytest.mark.asyncio
    async def test_logout_invalidates_token(self, session_manager, users_collection):
        await session_manager.register("alice@example.com", "pw123")
        login = await session_manager.login("alice@example.com", "pw123")

        await session_manager.logout(login["userId"])

        assert users_collection.docs[0]["token"] is None
        with pytest.raises(Unauthenticated):
            await session_manager.validate_token(login["token"])

    @pytest.mark.asyncio
    async def test_logout_twice_is_harmless(self, session_manager):
        await session_manager.register("alice@example.com", "pw123")
        login = await session_manager.login("alice@example.com", "pw123")

        await session_manager.logout(login["userId"])
        await session_manager.logout(login["userId"])

    @pytest.mark.asyncio
    async def test_logout_vanished_user(self, session_manager):
        with pytest.raises(UserNotFound):
            await session_manager.logout(str(ObjectId()))

    @pytest.mark.asyncio
    async def test_login_after_logout_starts_new_session(self, session_manager):
        await session_manager.register("alice@example.com", "pw123")
        first = await session_manager.login("alice@example.com", "pw123")
        await session_manager.logout(first["userId"])

        second = await session_manager.login("alice@example.com", "pw123")

        user = await session_manager.validate_token(second["token"])
        assert str(user["_id"]) == first["userId"]
