from prcheck.models.validation import ValidationReport, ValidationState, ValidationStep


class TestValidationReport:
    def test_passed_only_when_completed_passed(self) -> None:
        report = ValidationReport(
            pull_number=3,
            state=ValidationState.COMPLETED_PASSED,
            steps=[ValidationStep(name="Labels", passed=True)],
        )
        assert report.overall_passed
        assert report.summary_lines() == ["PASSED Labels"]

    def test_aborted_report(self) -> None:
        report = ValidationReport.aborted("This action can only be run on pull request events")
        assert report.state == ValidationState.ABORTED
        assert not report.overall_passed
        assert report.errors == ["This action can only be run on pull request events"]
        assert report.steps == []
