"""Tests for lib/result.py - Result type."""

from dataclasses import FrozenInstanceError

import pytest

from certctl.lib.result import Err, Ok


class TestOkErr:
    def test_ok_holds_value(self) -> None:
        assert Ok(42).value == 42

    def test_err_holds_error(self) -> None:
        assert Err("boom").error == "boom"

    def test_ok_is_immutable(self) -> None:
        with pytest.raises(FrozenInstanceError):
            Ok(1).value = 2  # type: ignore[misc]

    def test_pattern_matching(self) -> None:
        match Err("boom"):
            case Ok(_):
                pytest.fail("expected Err")
            case Err(error):
                assert error == "boom"
