import pytest

from backend.app.core.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)


def test_password_hashing_not_plain():
    plain = "password123"
    hashed = get_password_hash(plain)
    assert hashed and hashed != plain


def test_verify_password():
    hashed = get_password_hash("secret")
    assert verify_password("secret", hashed)
    assert not verify_password("wrong", hashed)


def test_verify_password_without_hash_is_false():
    assert not verify_password("secret", None)
    assert not verify_password("secret", "")


def test_token_carries_sub_jti_and_exp():
    token = create_access_token(user_id=123, jti="abc123", expires_minutes=30)
    assert isinstance(token, str) and token
    payload = decode_access_token(token)
    assert payload.get("sub") == "123"
    assert payload.get("jti") == "abc123"
    assert "exp" in payload


def test_tokens_get_distinct_jti_by_default():
    first = decode_access_token(create_access_token(user_id=1))
    second = decode_access_token(create_access_token(user_id=1))
    assert first["jti"] != second["jti"]


def test_expired_token_raises_value_error():
    expired_token = create_access_token(user_id=1, expires_minutes=-1)
    with pytest.raises(ValueError):
        decode_access_token(expired_token)


def test_invalid_token_raises_value_error():
    with pytest.raises(ValueError):
        decode_access_token("invalid.token.value")


def test_token_without_expiry_has_no_exp_claim():
    payload = decode_access_token(create_access_token(user_id=7))
    assert payload["sub"] == "7"
    assert "exp" not in payload


def test_explicit_expiry_sets_exp_claim():
    payload = decode_access_token(create_access_token(user_id=7, expires_minutes=5))
    assert "exp" in payload
