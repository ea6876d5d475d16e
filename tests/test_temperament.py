"""Tests for the temperament classifier."""

import pytest

from typology.core.dichotomies import all_type_codes
from typology.core.errors import InvalidTypeCodeError
from typology.core.models import Temperament
from typology.engine.profile import derive_profile
from typology.engine.temperament import classify_temperament


@pytest.mark.parametrize(
    "code, expected",
    [
        ("ISTJ", Temperament.GUARDIAN),
        ("ESFJ", Temperament.GUARDIAN),
        ("ISFP", Temperament.ARTISAN),
        ("ESTP", Temperament.ARTISAN),
        ("INFJ", Temperament.IDEALIST),
        ("ENFP", Temperament.IDEALIST),
        ("INTP", Temperament.RATIONAL),
        ("ENTJ", Temperament.RATIONAL),
    ],
)
def test_classify_temperament(code, expected):
    assert classify_temperament(code) is expected


def test_four_codes_per_temperament():
    counts: dict[Temperament, int] = {}
    for code in all_type_codes():
        temperament = classify_temperament(code)
        counts[temperament] = counts.get(temperament, 0) + 1
    assert counts == {t: 4 for t in Temperament}


@pytest.mark.parametrize("code", all_type_codes())
def test_rule_matches_classifier(code):
    assert derive_profile(code)["temperament"] is classify_temperament(code)


def test_invalid_code_rejected():
    with pytest.raises(InvalidTypeCodeError):
        classify_temperament("XNTP")


def test_temperament_is_a_string_label():
    assert Temperament.GUARDIAN == "Guardian"
    assert Temperament("Rational") is Temperament.RATIONAL
