import pytest

from src.matchers.name_variations import (
    extract_meaningful_words,
    generate_name_variations,
    looks_like_brand,
    strip_corporate_suffix,
)
from src.matchers.similarity import round_half_up, similarity


@pytest.mark.parametrize("name,expected", [
    ("Acme Corp.", "Acme"),
    ("Acme Co", "Acme"),
    ("McDonald's Corporation", "McDonald's"),
    ("Widget solutions", "Widget"),
    ("Costco", "Costco"),
    ("Acme Holdings", "Acme Holdings"),
    ("Acme Inc Ventures", "Acme Inc Ventures"),
])
def test_strip_corporate_suffix(name, expected):
    assert strip_corporate_suffix(name) == expected


def test_variations_for_two_word_name():
    assert generate_name_variations("JPMorgan Chase") == [
        "JPMorganChase", "JPMorgan-Chase", "JPMorgan_Chase", "JPMorgan", "Chase",
    ]


def test_variations_start_with_suffix_stripped_name_and_drop_duplicates():
    assert generate_name_variations("Tesla Inc") == ["Tesla", "TeslaInc", "Tesla-Inc", "Tesla_Inc", "Inc"]


def test_variations_drop_short_words():
    assert generate_name_variations("AB CD") == ["ABCD", "AB-CD", "AB_CD"]


def test_three_word_name_has_no_single_word_variations():
    assert generate_name_variations("Acme Rocket Works") == [
        "AcmeRocketWorks", "Acme-Rocket-Works", "Acme_Rocket_Works",
    ]


def test_meaningful_words_skip_generic_short_and_numeric_tokens():
    assert extract_meaningful_words("The 2024 Tesla Motors Company of USA") == ["Tesla", "Motors"]
    assert extract_meaningful_words("JPMorgan Chase") == ["Jpmorgan", "Chase"]
    assert extract_meaningful_words("Bank of America") == []


@pytest.mark.parametrize("word,expected", [
    ("Chase", True),
    ("Blue", False),
    ("IBM", True),
    ("McD", True),
    ("Jo's", True),
    ("Acme", False),
])
def test_looks_like_brand(word, expected):
    assert looks_like_brand(word) is expected


def test_similarity():
    assert similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)
    assert similarity("ABC", "abc") == 1.0
    assert similarity("", "") == 1.0
    assert similarity("abc", "") == 0.0


@pytest.mark.parametrize("value,expected", [(2.5, 3), (84.5, 85), (84.4, 84), (0.0, 0)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected
