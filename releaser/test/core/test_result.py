"""Tests for releaser.core.result module."""

import pytest

from releaser.core.result import Err, Ok, Result


def half(x: int) -> Result[int, str]:
    return Ok(x // 2) if x % 2 == 0 else Err("odd")


class TestOk:
    def test_unwrap(self) -> None:
        assert Ok(42).unwrap() == 42

    def test_unwrap_err_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap_err on Ok"):
            Ok(42).unwrap_err()

    def test_and_then_chains(self) -> None:
        assert Ok(8).and_then(half) == Ok(4)
        assert Ok(3).and_then(half) == Err("odd")

    def test_chain_stops_at_first_error(self) -> None:
        assert Ok(12).and_then(half).and_then(half).and_then(half) == Err("odd")


class TestErr:
    def test_unwrap_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap on Err"):
            Err("boom").unwrap()

    def test_unwrap_err(self) -> None:
        assert Err("boom").unwrap_err() == "boom"

    def test_and_then_short_circuits(self) -> None:
        called: list[int] = []

        def record(x: int) -> Result[int, str]:
            called.append(x)
            return Ok(x)

        err: Err[str] = Err("boom")
        assert err.and_then(record) == err
        assert called == []


def test_pattern_matching() -> None:
    match Ok("value"):
        case Ok(value):
            assert value == "value"
        case Err(_):
            pytest.fail("expected Ok")
