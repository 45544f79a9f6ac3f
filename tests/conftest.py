"""
Pytest Configuration and Shared Fixtures

This file contains pytest configuration and fixtures that are available
to all test modules. MRZ fixtures are the ICAO 9303 specimen documents
(fictional state "UTO"), with check digits as printed in the standard.
"""

import pytest


@pytest.fixture
def td3_lines():
    """Fixture providing the ICAO TD3 (passport) specimen MRZ as printed."""
    return [
        "P<UTOERIKSSON<<ANNA<MARIA<<<<<<<<<<<<<<<<<<<",
        "L898902C36UTO7408122F1204159ZE184226B<<<<<10",
    ]


@pytest.fixture
def td3_normalized():
    """Fixture providing the TD3 specimen after O -> 0 normalization."""
    return [
        "P<UT0ERIKSS0N<<ANNA<MARIA<<<<<<<<<<<<<<<<<<<",
        "L898902C36UT07408122F1204159ZE184226B<<<<<10",
    ]


@pytest.fixture
def td2_lines():
    """Fixture providing the ICAO TD2 specimen MRZ as printed."""
    return [
        "I<UTOERIKSSON<<ANNA<MARIA<<<<<<<<<<<",
        "D231458907UTO7408122F1204159<<<<<<<6",
    ]


@pytest.fixture
def td1_lines():
    """Fixture providing the ICAO TD1 (ID card) specimen MRZ as printed."""
    return [
        "I<UTOD231458907<<<<<<<<<<<<<<<",
        "7408122F1204159UTO<<<<<<<<<<<6",
        "ERIKSSON<<ANNA<MARIA<<<<<<<<<<",
    ]


@pytest.fixture
def td1_normalized():
    """Fixture providing the TD1 specimen after O -> 0 normalization."""
    return [
        "I<UT0D231458907<<<<<<<<<<<<<<<",
        "7408122F1204159UT0<<<<<<<<<<<6",
        "ERIKSS0N<<ANNA<MARIA<<<<<<<<<<",
    ]


@pytest.fixture
def td1_long_number_lines():
    """Fixture providing a TD1 card whose document number spills into optional data.

    Document number D23145890AB12 (check digit 5) continues after the
    filler at position 15.
    """
    return [
        "C<NLDD23145890<AB125<<<<<<<<<<",
        "8501019M2906151NLD<<<<<<<<<<<6",
        "DE<VRIES<<JAN<<<<<<<<<<<<<<<<<",
    ]
