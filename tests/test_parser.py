"""
Tests for rule expression parsing.
"""

import pytest

from ruleval.parser import RuleInstruction, parse_instruction, parse_rules


class TestParseInstruction:

    def test_name_only(self):
        assert parse_instruction('required') == RuleInstruction('required', ())

    def test_params_split_on_comma(self):
        assert parse_instruction('length:3,20') == RuleInstruction('length', ('3', '20'))

    def test_only_first_colon_separates_name(self):
        ins = parse_instruction('regex:^a:b$')
        assert ins.name == 'regex'
        assert ins.params == ('^a:b$',)

    def test_empty_params_blob(self):
        assert parse_instruction('max:').params == ()

    def test_params_stay_strings(self):
        assert parse_instruction('max:10').params == ('10',)


class TestParseRules:

    def test_string_spec_keeps_order(self):
        rules = parse_rules('required|min:2|max:5')
        assert [r.name for r in rules] == ['required', 'min', 'max']
        assert rules[1].params == ('2',)

    @pytest.mark.parametrize('spec', ['', None, []])
    def test_empty_spec_yields_nothing(self, spec):
        assert parse_rules(spec) == []

    def test_list_items_are_not_split_on_pipe(self):
        rules = parse_rules(['in:a|b,c'])
        assert len(rules) == 1
        assert rules[0].params == ('a|b', 'c')

    def test_mixed_list_spec(self):
        rules = parse_rules([
            'required',
            RuleInstruction('regex', (r'\d{2,3}',)),
            ('in', ['x', 'y']),
        ])
        assert rules == [
            RuleInstruction('required', ()),
            RuleInstruction('regex', (r'\d{2,3}',)),
            RuleInstruction('in', ('x', 'y')),
        ]

    def test_tuple_with_single_string_param(self):
        assert parse_rules([('max', '4')]) == [RuleInstruction('max', ('4',))]

    def test_unsupported_item_raises(self):
        with pytest.raises(TypeError):
            parse_rules([42])
