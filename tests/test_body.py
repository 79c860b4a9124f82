"""Tests for body-handling strategies and body classification."""

import io
from pathlib import Path, PurePosixPath

import httpx
import pytest

from easyhttp.body import BodyKind, BodyStrategy, amaterialize, materialize


class TestBodyStrategy:
    """Test strategy construction."""

    @pytest.mark.parametrize(
        "factory,kind",
        [
            (BodyStrategy.of_text, BodyKind.TEXT),
            (BodyStrategy.of_bytes, BodyKind.BYTES),
            (BodyStrategy.of_stream, BodyKind.STREAM),
            (BodyStrategy.of_lines, BodyKind.LINES),
            (BodyStrategy.discarding, BodyKind.DISCARD),
        ],
    )
    def test_factories(self, factory, kind):
        strategy = factory()

        assert strategy.kind is kind
        assert strategy.path is None

    def test_file_strategy_keeps_path(self, tmp_path):
        strategy = BodyStrategy.of_file(str(tmp_path / "out.json"))

        assert strategy.kind is BodyKind.FILE
        assert strategy.path == tmp_path / "out.json"
        assert isinstance(strategy.path, Path)

    def test_file_strategy_requires_path(self):
        with pytest.raises(TypeError):
            BodyStrategy.of_file(None)

        with pytest.raises(ValueError):
            BodyStrategy(BodyKind.FILE)

    def test_text_encoding(self):
        assert BodyStrategy.of_text("latin-1").encoding == "latin-1"
        assert BodyStrategy.of_lines("utf-16").encoding == "utf-16"

    def test_strategies_are_immutable_values(self):
        strategy = BodyStrategy.of_text()

        with pytest.raises(AttributeError):
            strategy.kind = BodyKind.BYTES

        assert strategy == BodyStrategy.of_text()
        assert hash(strategy) == hash(BodyStrategy.of_text())


class TestClassify:
    """Test classification of already materialized values."""

    @pytest.mark.parametrize(
        "value,kind",
        [
            ("text", BodyKind.TEXT),
            ("", BodyKind.TEXT),
            (Path("body.json"), BodyKind.FILE),
            (PurePosixPath("body.json"), BodyKind.FILE),
            (io.BytesIO(b"{}"), BodyKind.STREAM),
            (io.StringIO("{}"), BodyKind.STREAM),
            (b"{}", BodyKind.BYTES),
            (bytearray(b"{}"), BodyKind.BYTES),
            (iter(["{", "}"]), BodyKind.LINES),
            (["{", "}"], BodyKind.LINES),
            ((line for line in ["{}"]), BodyKind.LINES),
            (None, BodyKind.DISCARD),
        ],
    )
    def test_supported_values(self, value, kind):
        assert BodyKind.classify(value) is kind

    @pytest.mark.parametrize("value", [42, 1.5, {"a": 1}, object()])
    def test_unsupported_values(self, value):
        assert BodyKind.classify(value) is None


class TestMaterialize:
    """Test reading a response into the strategy's representation."""

    def test_file_body_is_written_to_path(self, tmp_path):
        target = tmp_path / "body.json"
        response = httpx.Response(200, content=b'{"value":200}')

        body = materialize(response, BodyStrategy.of_file(target))

        assert body == target
        assert target.read_bytes() == b'{"value":200}'

    async def test_file_body_is_written_to_path_async(self, tmp_path):
        target = tmp_path / "body.json"
        response = httpx.Response(200, content=b'{"value":200}')

        body = await amaterialize(response, BodyStrategy.of_file(str(target)))

        assert body == target
        assert target.read_bytes() == b'{"value":200}'
