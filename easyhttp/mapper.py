"""
JSON object mapping backed by pydantic.

``ObjectMapper`` is the default ``Deserializer`` used by ``EasyHttpClient``.
It turns JSON payloads into any type pydantic can validate (models,
dataclasses, typed collections, ``Optional`` values and ISO-8601
``datetime``/``date``/``time``/``timedelta`` values) and serializes values
back into JSON text.
"""

from typing import Any, Protocol, Union, runtime_checkable

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .exceptions import DeserializationError, SerializationError


@runtime_checkable
class Deserializer(Protocol):
    """Contract of the collaborator that converts payloads to and from values."""

    def deserialize(self, payload: Union[str, bytes], target: Any) -> Any: ...

    def serialize(self, value: Any) -> str: ...

    def can_serialize(self, value_type: type) -> bool: ...


class ObjectMapper:
    """
    pydantic based implementation of ``Deserializer``.

    Type adapters are built once per target type and reused.
    """

    def __init__(self) -> None:
        self._adapters: dict[Any, TypeAdapter[Any]] = {}

    def __repr__(self) -> str:
        return f"ObjectMapper(adapters={len(self._adapters)})"

    def _adapter(self, target: Any) -> TypeAdapter[Any]:
        try:
            return self._adapters[target]
        except KeyError:
            adapter = TypeAdapter(target)
            self._adapters[target] = adapter
            return adapter
        except TypeError:
            # unhashable type expressions
            return TypeAdapter(target)

    def deserialize(self, payload: Union[str, bytes], target: Any) -> Any:
        """
        Deserialize a JSON payload into an instance of ``target``.

        Raises:
            DeserializationError: If the payload is not valid JSON for the
                target type or no schema can be built for the target type
        """
        try:
            return self._adapter(target).validate_json(payload)
        except (ValidationError, PydanticSchemaGenerationError) as e:
            raise DeserializationError(
                f"Unable to deserialize payload into {target!r}", cause=e
            ) from e

    def serialize(self, value: Any) -> str:
        """
        Serialize ``value`` into JSON text.

        Raises:
            SerializationError: If the value cannot be serialized
        """
        try:
            return self._adapter(type(value)).dump_json(value).decode("utf-8")
        except (PydanticSerializationError, PydanticSchemaGenerationError) as e:
            raise SerializationError(
                f"Unable to serialize value of type {type(value).__name__}", cause=e
            ) from e

    def can_serialize(self, value_type: type) -> bool:
        """Return True when a schema can be built for ``value_type``."""
        try:
            self._adapter(value_type)
        except PydanticSchemaGenerationError:
            return False
        return True
