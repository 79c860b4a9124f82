"""
Tests for the client configuration system.

Validates that configuration classes work correctly with proper defaults
and translate into httpx client settings.
"""

import httpx
import pytest
from pydantic import ValidationError

from easyhttp.config import ClientConfig, LoggingConfig, TimeoutConfig


class TestTimeoutConfig:
    """Test timeout configuration."""

    def test_default_timeouts(self):
        """Test default timeout values."""
        config = TimeoutConfig()
        assert config.connect == 10.0
        assert config.read == 30.0
        assert config.write == 30.0
        assert config.pool == 5.0

    def test_to_httpx_timeout(self):
        """Test conversion to httpx.Timeout object."""
        config = TimeoutConfig(connect=30.0, read=10.0, write=10.0, pool=2.0)
        httpx_timeout = config.to_httpx_timeout()

        assert isinstance(httpx_timeout, httpx.Timeout)
        assert httpx_timeout.connect == 30.0
        assert httpx_timeout.read == 10.0
        assert httpx_timeout.write == 10.0
        assert httpx_timeout.pool == 2.0


class TestLoggingConfig:
    """Test logging configuration."""

    def test_default_logging_config(self):
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.format == "console"
        assert config.logger_name == "easyhttp"


class TestClientConfig:
    """Test complete client configuration."""

    def test_defaults(self):
        config = ClientConfig()

        assert config.base_url == ""
        assert config.follow_redirects is False
        assert config.verify_ssl is True
        assert config.user_agent is None
        assert config.headers == {}
        assert isinstance(config.timeout, TimeoutConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_extra_fields_forbidden(self):
        """Test that typos in field names are rejected."""
        with pytest.raises(ValidationError):
            ClientConfig(base_url="http://localhost", retries=3)

    def test_to_httpx_kwargs(self):
        config = ClientConfig(
            base_url="http://localhost:8000",
            follow_redirects=True,
            verify_ssl=False,
            user_agent="easyhttp/1.0",
            headers={"Accept": "application/json"},
        )

        kwargs = config.to_httpx_kwargs()

        assert kwargs["base_url"] == "http://localhost:8000"
        assert kwargs["follow_redirects"] is True
        assert kwargs["verify"] is False
        assert kwargs["headers"] == {
            "Accept": "application/json",
            "User-Agent": "easyhttp/1.0",
        }
        assert isinstance(kwargs["timeout"], httpx.Timeout)

    def test_to_httpx_kwargs_without_headers(self):
        assert ClientConfig().to_httpx_kwargs()["headers"] is None

    def test_config_serialization(self):
        """Test that configuration can round trip through a dict."""
        config = ClientConfig(base_url="http://localhost:8000", user_agent="x")

        restored = ClientConfig(**config.model_dump())

        assert restored == config
