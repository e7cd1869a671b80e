"""
Tests for row-wise DataFrame validation.
"""

import pandas as pd
import pytest

from ruleval import UnknownRuleError, validate_frame

MEMBER_RULES = {
    'name': 'required|max:10',
    'email': 'email',
    'age': 'numeric',
}


class TestValidateFrame:

    def test_failed_rows(self, members_df):
        report = validate_frame(members_df, MEMBER_RULES)
        assert report.passed is False
        assert report.failed_rows == [2, 3]

    def test_missing_value_is_skipped(self, members_df):
        report = validate_frame(members_df, MEMBER_RULES)
        assert report.results[1].fails() is False
        assert 'age' not in report.results[1].valid()

    def test_to_frame(self, members_df):
        out = validate_frame(members_df, MEMBER_RULES).to_frame()
        assert list(out.columns) == ['row', 'passed', 'error_count', 'errors']
        assert out['error_count'].tolist() == [0, 0, 1, 1]
        assert out.loc[2, 'errors'] == ['The name field is required']

    def test_valid_frame(self, members_df):
        valid = validate_frame(members_df, MEMBER_RULES).valid_frame()
        assert valid['name'].tolist() == ['Alpha', 'Bravo']

    def test_messages_applied_per_row(self, members_df):
        report = validate_frame(members_df, MEMBER_RULES, {'email.email': 'bad email'})
        assert report.results[3].failed() == ['bad email']

    def test_clean_frame(self):
        df = pd.DataFrame({'name': ['A', 'B']})
        report = validate_frame(df, {'name': 'required'})
        assert report.passed is True
        assert report.failed_rows == []

    def test_unknown_rule_on_empty_frame(self):
        with pytest.raises(UnknownRuleError):
            validate_frame(pd.DataFrame({'name': []}), {'name': 'nope'})

    def test_integer_column_with_gap_keeps_ints(self, members_df):
        report = validate_frame(members_df, {'age': 'integer|max:2'})
        assert report.passed is True
        assert report.results[0].valid() == {'age': 31}
        assert 'age' not in report.results[1].valid()
