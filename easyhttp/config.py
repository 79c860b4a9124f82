"""
Configuration system for the easyhttp library.

Provides Pydantic-based configuration with sensible defaults for the httpx
clients owned by the transport and for library logging.
"""

from typing import Any, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field


class TimeoutConfig(BaseModel):
    """HTTP timeout configuration."""

    connect: float = Field(default=10.0, description="Connection timeout in seconds")
    read: float = Field(default=30.0, description="Read timeout in seconds")
    write: float = Field(default=30.0, description="Write timeout in seconds")
    pool: float = Field(default=5.0, description="Pool timeout in seconds")

    def to_httpx_timeout(self) -> httpx.Timeout:
        """Convert to httpx.Timeout object."""
        return httpx.Timeout(
            connect=self.connect, read=self.read, write=self.write, pool=self.pool
        )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)"
    )
    format: str = Field(
        default="console", description="Renderer: 'json' or 'console'"
    )
    logger_name: str = Field(default="easyhttp", description="Logger name")


class ClientConfig(BaseModel):
    """
    Configuration of the httpx clients used by the default transport.

    Connection pooling, TLS and redirect following are handled entirely by
    httpx; this configuration only forwards the relevant settings.

    ```python
    config = ClientConfig(
        base_url="https://api.example.com",
        timeout=TimeoutConfig(connect=2.0, read=5.0),
        follow_redirects=True,
    )
    client = new_client(config=config)
    ```

    Attributes:
        base_url: Base URL prepended to relative request URLs
        timeout: HTTP timeout configuration for all request phases
        logging: Observability configuration
        follow_redirects: Whether httpx follows HTTP redirects
        verify_ssl: Whether to verify SSL certificates (disable only for testing)
        user_agent: Custom User-Agent header for request identification
        headers: Default headers sent with every request
    """

    base_url: str = Field(default="", description="Base URL for the API")
    timeout: TimeoutConfig = Field(default_factory=TimeoutConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    follow_redirects: bool = Field(default=False, description="Follow HTTP redirects")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    user_agent: Optional[str] = Field(
        default=None, description="Custom User-Agent header"
    )
    headers: dict[str, str] = Field(
        default_factory=dict, description="Default request headers"
    )

    model_config = ConfigDict(extra="forbid")

    def to_httpx_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``httpx.Client`` and ``httpx.AsyncClient``."""
        headers = dict(self.headers)
        if self.user_agent:
            headers["User-Agent"] = self.user_agent

        return {
            "base_url": self.base_url,
            "timeout": self.timeout.to_httpx_timeout(),
            "follow_redirects": self.follow_redirects,
            "verify": self.verify_ssl,
            "headers": headers or None,
        }
