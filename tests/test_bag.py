"""
Tests for the ErrorBag container.
"""

from ruleval import ErrorBag


class TestErrorBag:

    def test_new_bag_is_empty(self):
        bag = ErrorBag()
        assert bag.is_empty() is True
        assert bag.first() is None
        assert bag.all() == []
        assert len(bag) == 0

    def test_push_keeps_insertion_order(self):
        bag = ErrorBag()
        bag.push('second').push('first').push('second')
        assert bag.all() == ['second', 'first', 'second']
        assert bag.first() == 'second'
        assert list(bag) == ['second', 'first', 'second']

    def test_all_returns_a_copy(self):
        bag = ErrorBag().push('boom')
        bag.all().append('extra')
        assert len(bag) == 1
