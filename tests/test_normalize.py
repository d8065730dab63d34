import re

import pytest

from mop.normalize import clean_headers, clean_name, to_ascii

VALID = re.compile(r"^[a-z0-9_]+$")


def test_headers_with_whitespace():
    assert clean_headers(["  Name  ", "  Age", "Location  ", "  "]) == ["name", "age", "location", "x_1"]


def test_headers_clean_to_same_name():
    assert clean_headers(["Name", "name", "NAME"]) == ["name", "name_2", "name_3"]


def test_headers_with_numbers():
    headers = ["123", "456abc", "abc123", "123abc456"]
    assert clean_headers(headers) == headers


def test_headers_unicode_normalization():
    # second "Café" uses a combining acute accent
    headers = ["Café", "Café", "München", "Munchen"]
    assert clean_headers(headers) == ["cafe", "cafe_2", "munchen", "munchen_2"]


def test_headers_clean_to_empty():
    assert clean_headers(["!!!", "###", "$$$"]) == ["x", "x_2", "x_3"]


def test_headers_duplicates_after_cleaning():
    assert clean_headers(["First Name", "First-Name", "First@Name"]) == [
        "first_name", "first_name_2", "first_name_3",
    ]


def test_headers_mixed_case_numbers():
    assert clean_headers(["ID", "userID", "User_id", "userID1"]) == ["id", "userid", "user_id", "userid1"]


def test_headers_accented_characters():
    assert clean_headers(["à", "á", "â", "ä", "ã"]) == ["a", "a_2", "a_3", "a_4", "a_5"]


def test_blank_headers_number_independently():
    assert clean_headers(["", "id", " ", "\t"]) == ["x_1", "id", "x_2", "x_3"]


def test_placeholder_collides_with_real_header():
    assert clean_headers(["x_1", ""]) == ["x_1", "x_1_2"]


def test_suffix_built_on_original_candidate():
    # "a_2" is taken by a real column, so the second "a" probes a_2 then a_3
    assert clean_headers(["a", "a_2", "a"]) == ["a", "a_2", "a_3"]


def test_empty_header_list():
    assert clean_headers([]) == []


@pytest.mark.parametrize("raw, expected", [
    ("  Total Amount (USD) ", "total_amount_usd"),
    ("__private__", "private"),
    ("Straße", "strasse"),
    ("Ærøskøbing", "aeroskobing"),
    ("Łódź", "lodz"),
    ("Москва", "moskva"),
    ("Αθήνα", "athena"),
    ("ﬁeld", "field"),
    ("数据", "shu_ju"),
    ("北京", "bei_jing"),
    ("서울", "seoul"),
    ("Београд Ђурђевак", "beograd_djurdjevak"),
    ("€ price", "eur_price"),
    ("a--b  c", "a_b_c"),
])
def test_clean_name(raw, expected):
    assert clean_name(raw) == expected


def test_to_ascii_folds_accents():
    assert to_ascii("Café") == "Cafe"
    assert to_ascii("Cafe\u0301") == "Cafe"
    assert to_ascii("plain ascii!") == "plain ascii!"


SAMPLES = [
    ["  Name  ", "  Age", "Location  ", "  "],
    ["", "", "", "x_1", "x_2"],
    ["Café", "cafe", "CAFÉ", "café_2"],
    ["!!!", "", "x", "x_1", "__"],
    ["日本", "中文", "한국어"],
    ["a b", "a_b", "a-b", "A B", "a_b_2"],
]


@pytest.mark.parametrize("headers", SAMPLES)
def test_output_is_valid_and_unique(headers):
    cleaned = clean_headers(headers)
    assert len(cleaned) == len(headers)
    assert all(VALID.match(name) for name in cleaned)
    assert len(set(cleaned)) == len(cleaned)


@pytest.mark.parametrize("headers", SAMPLES)
def test_cleaning_is_idempotent(headers):
    once = clean_headers(headers)
    assert clean_headers(once) == once


def test_non_latin_scripts_keep_distinct_names():
    headers = ["北京", "東京", "서울", "القاهرة", "שלום"]
    cleaned = clean_headers(headers)
    assert all(VALID.match(name) for name in cleaned)
    assert not any(name == "x" or name.startswith("x_") for name in cleaned)
