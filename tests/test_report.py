"""
Tests for the ValidationReport presentation layer.
"""

from ruleval import ValidationReport, run


class TestValidationReport:

    def test_clean_run(self, signup_data, signup_rules):
        report = ValidationReport('signup', run(signup_data, signup_rules))
        assert report.passed is True
        assert report.fail_count == 0
        assert report.valid_count == len(signup_data)

    def test_to_dict_structure(self, broken_form, broken_rules):
        report = ValidationReport('broken', run(broken_form, broken_rules))
        d = report.to_dict()
        assert d['name'] == 'broken'
        assert d['passed'] is False
        assert d['summary'] == {'fields_received': 2, 'valid_fields': 0, 'failures': 2}
        assert d['errors'] == report.failures

    def test_print_summary(self, broken_form, broken_rules, capsys):
        ValidationReport('demo', run(broken_form, broken_rules)).print_summary()
        captured = capsys.readouterr()
        assert 'FAILED' in captured.out
        assert 'Failures:   2' in captured.out

    def test_print_failures(self, broken_form, broken_rules, capsys):
        ValidationReport('demo', run(broken_form, broken_rules)).print_failures()
        captured = capsys.readouterr()
        assert 'FAIL  The name field is required' in captured.out

    def test_print_failures_when_none(self, signup_data, signup_rules, capsys):
        ValidationReport('demo', run(signup_data, signup_rules)).print_failures()
        captured = capsys.readouterr()
        assert 'No failures' in captured.out
