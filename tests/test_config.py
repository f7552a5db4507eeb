# File: tests/test_config.py

import pytest
from pydantic import ValidationError

from app.core.config import Settings


def test_cors_origins_split_from_string():
    s = Settings(backend_cors_origins="http://a.test, http://b.test,")
    assert s.backend_cors_origins == ["http://a.test", "http://b.test"]


def test_credential_store_is_normalised():
    assert Settings(credential_store=" SQL ").credential_store == "sql"


def test_unknown_credential_store_rejected():
    with pytest.raises(ValidationError):
        Settings(credential_store="redis")
