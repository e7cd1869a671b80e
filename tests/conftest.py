"""Shared test fixtures and path setup."""
import sys
from pathlib import Path

# Add src/ to sys.path so tests run without installing the package
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

import pytest
import pandas as pd

from ruleval import RuleRegistry


# --- Session fixtures ---

@pytest.fixture
def registry():
    """Fresh registry with the built-in checks."""
    return RuleRegistry()


@pytest.fixture
def signup_data():
    """A clean sign-up form."""
    return {
        'username': 'ada_lovelace',
        'email': 'ada.lovelace@gmail.com',
        'password': 's3cret-pass',
        'password_confirmation': 's3cret-pass',
        'age': 36,
        'newsletter': 'yes',
        'plan': 'pro',
        'address': {'street': '12 St James Sq', 'city': 'London'},
    }


@pytest.fixture
def signup_rules():
    """Rules that pass against ``signup_data``."""
    return {
        'username': 'required|min:3|max:20|regex:[a-z_]+',
        'email': 'required|email',
        'password': 'required|length:7,64',
        'password_confirmation': 'required|confirm:password',
        'age': 'required|integer|numeric',
        'newsletter': 'bool',
        'plan': 'in:free,pro,team',
        'address': 'required|array|isset:street,city',
    }


@pytest.fixture
def broken_form():
    """Two failing fields: empty name, non-integer age."""
    return {'name': '', 'age': 'x'}


@pytest.fixture
def broken_rules():
    return {'name': 'required', 'age': 'integer'}


# --- DataFrame fixtures ---

@pytest.fixture
def members_df():
    """Member rows with one empty name and one missing age."""
    return pd.DataFrame({
        'name': ['Alpha', 'Bravo', '', 'Delta'],
        'email': ['a@gmail.com', 'b@gmail.com', 'c@gmail.com', 'not-an-email'],
        'age': [31, None, 45, 28],
    })
