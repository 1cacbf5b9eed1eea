"""Tests for monorel.core.result module."""

import pytest

from monorel.core.result import Err, Ok, Result, is_err, is_ok


class TestOk:
    def test_holds_value(self) -> None:
        result = Ok(42)
        assert result.value == 42
        assert result.is_ok() is True
        assert result.is_err() is False

    def test_unwrap(self) -> None:
        assert Ok("x").unwrap() == "x"
        assert Ok(1).unwrap_or(0) == 1

    def test_map_transforms_value(self) -> None:
        assert Ok(21).map(lambda x: x * 2) == Ok(42)

    def test_map_err_is_noop(self) -> None:
        assert Ok(1).map_err(lambda e: f"wrapped {e}") == Ok(1)

    def test_and_then_chains(self) -> None:
        result: Result[int, str] = Ok(2)
        assert result.and_then(lambda x: Ok(x + 1)) == Ok(3)
        assert result.and_then(lambda _: Err("boom")) == Err("boom")


class TestErr:
    def test_holds_error(self) -> None:
        result = Err("bad")
        assert result.error == "bad"
        assert result.is_err() is True
        assert result.is_ok() is False

    def test_unwrap_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap on Err"):
            Err("bad").unwrap()

    def test_unwrap_or_returns_default(self) -> None:
        assert Err("bad").unwrap_or(7) == 7

    def test_map_err_transforms_error(self) -> None:
        assert Err("bad").map_err(str.upper) == Err("BAD")

    def test_and_then_short_circuits(self) -> None:
        calls: list[int] = []

        def step(x: int) -> Result[int, str]:
            calls.append(x)
            return Ok(x)

        result: Result[int, str] = Err("bad")
        assert result.and_then(step) == Err("bad")
        assert calls == []


def test_type_guards() -> None:
    assert is_ok(Ok(1))
    assert not is_ok(Err(1))
    assert is_err(Err(1))
    assert not is_err(Ok(1))


def test_pattern_matching() -> None:
    match Ok(5):
        case Ok(value):
            assert value == 5
        case Err():
            pytest.fail("expected Ok")
