#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for Ok/Err results."""
import pytest

from mdfold.exceptions import MdfoldError, UnwrapError
from mdfold.result import Err, Ok


@pytest.mark.unit
class TestResult:
    """Test the shared result interface."""

    def test_ok(self) -> None:
        """Test the success case."""
        result = Ok(2)
        assert result.is_ok()
        assert result.map(lambda v: v * 3) == Ok(6)
        assert result.bind(lambda v: Ok(v + 1)) == Ok(3)
        assert result.unwrap() == 2
        assert result.unwrap_or(0) == 2

    def test_err(self) -> None:
        """Test the failure case."""
        result = Err("boom")
        assert not result.is_ok()
        assert result.map(lambda v: v * 3) is result
        assert result.bind(lambda v: Ok(v)) is result
        assert result.unwrap_or(0) == 0

    def test_bind_can_fail(self) -> None:
        """Test chaining into a failure."""
        assert Ok(2).bind(lambda v: Err(f"bad {v}")) == Err("bad 2")

    def test_unwrap_err_raises(self) -> None:
        """Test that unwrapping an error raises UnwrapError."""
        with pytest.raises(UnwrapError) as exc_info:
            Err("boom").unwrap()
        assert exc_info.value.error == "boom"
        assert isinstance(exc_info.value, MdfoldError)
        assert "boom" in str(exc_info.value)

    def test_frozen(self) -> None:
        """Test that results are immutable."""
        with pytest.raises(AttributeError):
            Ok(1).value = 2
