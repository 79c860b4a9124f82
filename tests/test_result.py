"""Tests for Success/Failure result values."""

import pytest

from easyhttp.result import Failure, Success, attempt, attempt_async


class TestSuccess:
    """Test the successful branch."""

    def test_accessors(self):
        result = Success(3)

        assert result.is_success
        assert not result.is_failure
        assert result.get() == 3
        assert result.get_or_else(0) == 3

    def test_map(self):
        assert Success(3).map(lambda v: v * 2) == Success(6)

    def test_map_captures_exceptions(self):
        result = Success(0).map(lambda v: 1 / v)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ZeroDivisionError)

    def test_flat_map(self):
        assert Success(3).flat_map(lambda v: Success(v + 1)) == Success(4)
        error = ValueError("no")
        assert Success(3).flat_map(lambda v: Failure(error)) == Failure(error)

    def test_flat_map_captures_exceptions(self):
        def explode(value):
            raise KeyError(value)

        assert isinstance(Success(3).flat_map(explode).error, KeyError)

    def test_failure_handlers_are_skipped(self):
        result = Success(3)
        seen = []

        assert result.map_failure(lambda e: RuntimeError()) is result
        assert result.on_failure(seen.append) is result
        assert result.on_success(seen.append) is result
        assert seen == [3]


class TestFailure:
    """Test the failed branch."""

    def test_accessors(self):
        error = ValueError("bad")
        result = Failure(error)

        assert result.is_failure
        assert not result.is_success
        assert result.get_or_else("default") == "default"
        with pytest.raises(ValueError):
            result.get()

    def test_value_operations_are_skipped(self):
        result = Failure(ValueError("bad"))
        seen = []

        assert result.map(lambda v: v) is result
        assert result.flat_map(lambda v: Success(v)) is result
        assert result.on_success(seen.append) is result
        assert seen == []

    def test_map_failure(self):
        result = Failure(ValueError("bad")).map_failure(
            lambda e: RuntimeError(f"wrapped: {e}")
        )

        assert isinstance(result.error, RuntimeError)
        assert str(result.error) == "wrapped: bad"

    def test_on_failure(self):
        error = ValueError("bad")
        seen = []

        Failure(error).on_failure(seen.append)

        assert seen == [error]


class TestAttempt:
    """Test capturing callables into results."""

    def test_attempt_success(self):
        assert attempt(int, "42") == Success(42)

    def test_attempt_failure(self):
        result = attempt(int, "x")

        assert isinstance(result.error, ValueError)

    def test_attempt_does_not_capture_base_exceptions(self):
        def interrupt():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            attempt(interrupt)

    async def test_attempt_async(self):
        async def value():
            return 1

        async def fail():
            raise OSError("disk")

        assert await attempt_async(value) == Success(1)
        assert isinstance((await attempt_async(fail)).error, OSError)
