# /tests/test_security.py

import logging
import time
from datetime import timedelta

import jwt
import pytest

from app.core import config, security
from app.core.exceptions import AuthenticationError


def test_password_hash_round_trip():
    hashed = security.hash_password("correct horse")
    assert hashed != "correct horse"
    assert security.verify_password("correct horse", hashed)
    assert not security.verify_password("wrong horse", hashed)


def test_malformed_hash_never_matches():
    assert not security.verify_password("anything", "not-a-bcrypt-hash")


def test_token_carries_student_identity():
    token = security.create_access_token(subject="stu_123", email="a@b.c")
    assert security.decode_access_token(token) == "stu_123"
    claims = jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
    assert claims["email"] == "a@b.c"


def test_token_is_valid_for_seven_days():
    token = security.create_access_token(subject="stu_123")
    claims = jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
    seven_days = 7 * 24 * 60 * 60
    assert abs(claims["exp"] - (time.time() + seven_days)) < 60


def test_expired_token_is_rejected():
    token = security.create_access_token(subject="stu_123", expires_delta=timedelta(seconds=-1))
    with pytest.raises(AuthenticationError):
        security.decode_access_token(token)


def test_tampered_token_is_rejected():
    token = jwt.encode({"sub": "stu_123"}, "some-other-secret", algorithm="HS256")
    with pytest.raises(AuthenticationError):
        security.decode_access_token(token)


def test_default_secret_logs_a_warning(monkeypatch, caplog):
    monkeypatch.setattr(config, "JWT_SECRET", config.DEFAULT_JWT_SECRET)
    with caplog.at_level(logging.WARNING, logger="app.core.security"):
        assert security.warn_if_default_secret() is True
    assert "JWT_SECRET is not set" in caplog.text


def test_configured_secret_is_quiet(monkeypatch, caplog):
    monkeypatch.setattr(config, "JWT_SECRET", "a-real-deployment-secret")
    with caplog.at_level(logging.WARNING, logger="app.core.security"):
        assert security.warn_if_default_secret() is False
    assert "JWT_SECRET" not in caplog.text
