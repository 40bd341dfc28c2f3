"""Unit tests for the Result type."""

import pytest
from treelens.core.result import Err, Ok


class TestResult:
    def test_ok(self):
        result = Ok(3)
        assert result.is_ok() and not result.is_err()
        assert result.unwrap() == 3

    def test_err(self):
        result = Err("boom")
        assert result.is_err() and not result.is_ok()
        with pytest.raises(ValueError, match="boom"):
            result.unwrap()

    def test_results_are_immutable(self):
        with pytest.raises(AttributeError):
            Ok(1).value = 2
