"""Tests for ValidationReport."""

# pylint: disable=missing-function-docstring

import pytest

from serverless_predeploy.exceptions import ValidationFailedError
from serverless_predeploy.validation.report import ValidationIssue, ValidationReport


class TestValidationReport:
    """Tests for error collection."""

    def test_empty_report_is_ok(self):
        report = ValidationReport()

        assert report.ok
        assert report.errors == []
        report.raise_for_errors()

    def test_errors_keep_insertion_order(self):
        report = ValidationReport()
        report.add_error("first")
        report.extend(["second", "third"], yaml_path="/provider/env")

        assert not report.ok
        assert len(report) == 3
        assert report.errors == ["first", "second", "third"]
        assert report.issues[1] == ValidationIssue(message="second", yaml_path="/provider/env")

    def test_raise_for_errors_carries_every_message(self):
        report = ValidationReport()
        report.extend(["first", "second"])

        with pytest.raises(ValidationFailedError) as exc_info:
            report.raise_for_errors()

        assert exc_info.value.errors == ["first", "second"]
        assert str(exc_info.value) == "first\nsecond"
