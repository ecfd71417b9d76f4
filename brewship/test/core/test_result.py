"""Tests for brewship.core.result module."""

import pytest

from brewship.core.result import Err, Ok, Result


class TestOk:
    """Tests for Ok type."""

    def test_carries_value(self) -> None:
        assert Ok(42).value == 42

    def test_ok_map(self) -> None:
        assert Ok(21).map(lambda x: x * 2) == Ok(42)

    def test_ok_frozen(self) -> None:
        result = Ok(1)
        with pytest.raises(AttributeError):
            result.value = 2  # type: ignore[misc]

    def test_repr(self) -> None:
        assert repr(Ok("v1.2.3")) == "Ok('v1.2.3')"


class TestErr:
    """Tests for Err type."""

    def test_carries_error(self) -> None:
        assert Err("boom").error == "boom"

    def test_err_map_passes_through(self) -> None:
        result = Err("boom")
        assert result.map(lambda x: x * 2) is result

    def test_repr(self) -> None:
        assert repr(Err("boom")) == "Err('boom')"


def test_isinstance_narrowing() -> None:
    ok: Result[int, str] = Ok(1)
    err: Result[int, str] = Err("x")
    assert isinstance(ok, Ok) and not isinstance(ok, Err)
    assert isinstance(err, Err) and not isinstance(err, Ok)


def test_pattern_matching() -> None:
    """Results destructure in match statements."""

    def describe(result: Result[int, str]) -> str:
        match result:
            case Ok(value):
                return f"ok {value}"
            case Err(error):
                return f"err {error}"

    assert describe(Ok(3)) == "ok 3"
    assert describe(Err("bad")) == "err bad"


def test_public_surface_is_minimal() -> None:
    for cls in (Ok, Err):
        public = {name for name in vars(cls) if not name.startswith("_")}
        assert public - {"value", "error"} == {"map"}
