"""
easyhttp: recoverable HTTP exchanges on top of httpx

Wraps request/response exchanges so callers get ``Result`` values instead of
raised faults, with helpers for status classification, replaying the original
exchange and decoding response bodies into typed values whatever
representation the body was materialized into.
"""

from .body import BodyKind, BodyStrategy
from .client import EasyHttpClient, acreate_client, create_client, new_client
from .config import ClientConfig, LoggingConfig, TimeoutConfig
from .exceptions import (
    DecodeError,
    DeserializationError,
    EasyHttpError,
    MappingError,
    NullBodyError,
    SerializationError,
    TransportConnectionError,
    TransportError,
    TransportTimeoutError,
    UnsupportedBodyError,
)
from .logging_config import setup_logging
from .mapper import Deserializer, ObjectMapper
from .response import EasyHttpResponse, HttpResponse
from .result import Failure, Result, Success, attempt, attempt_async
from .transport import Transport

__all__ = [
    "EasyHttpClient",
    "EasyHttpResponse",
    "HttpResponse",
    "Transport",
    "new_client",
    "create_client",
    "acreate_client",
    "BodyKind",
    "BodyStrategy",
    "Deserializer",
    "ObjectMapper",
    "Result",
    "Success",
    "Failure",
    "attempt",
    "attempt_async",
    "ClientConfig",
    "TimeoutConfig",
    "LoggingConfig",
    "setup_logging",
    "EasyHttpError",
    "TransportError",
    "TransportConnectionError",
    "TransportTimeoutError",
    "DecodeError",
    "NullBodyError",
    "UnsupportedBodyError",
    "MappingError",
    "SerializationError",
    "DeserializationError",
]

__version__ = "1.0.0"
