import pytest

from blogapi.utils.content_rules import (
    base_slug,
    is_valid_slug,
    make_excerpt,
    parse_bool,
    parse_tags,
    reading_time,
)
from blogapi.utils.pagination import page_count
from blogapi.utils.validators import check_password_strength, validate_email, validate_username


@pytest.mark.parametrize("length", [0, 1, 199, 200])
def test_short_content_is_its_own_excerpt(length):
    content = "a" * length
    assert make_excerpt(content) == content


@pytest.mark.parametrize("length", [201, 500])
def test_long_content_is_truncated_with_marker(length):
    content = "".join(chr(97 + i % 26) for i in range(length))
    assert make_excerpt(content) == content[:200] + "..."


def test_parse_tags():
    assert parse_tags("react, javascript") == ["react", "javascript"]
    assert parse_tags(" a,,b ,a ") == ["a", "b", "a"]
    assert parse_tags(["x ", " ", "y"]) == ["x", "y"]
    assert parse_tags("") == []
    assert parse_tags(None) == []


@pytest.mark.parametrize("value,expected", [
    ("true", True), ("True", True), ("1", True), ("on", True), (True, True),
    ("false", False), ("", False), (None, False), ("nope", False), (False, False),
])
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected


def test_base_slug():
    assert base_slug("My First Post") == "my-first-post"
    assert base_slug("¿Qué tal?") == "que-tal"
    assert base_slug("2024") == "post-2024"
    assert base_slug("!!!") == "post"


def test_is_valid_slug():
    assert is_valid_slug("hello-world-2")
    assert not is_valid_slug("Hello")
    assert not is_valid_slug("123")
    assert not is_valid_slug("search")


def test_reading_time():
    assert reading_time(0) == 0
    assert reading_time(1) == 1
    assert reading_time(200) == 1
    assert reading_time(201) == 2


@pytest.mark.parametrize("total,limit,pages", [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 7, 4)])
def test_page_count(total, limit, pages):
    assert page_count(total, limit) == pages


def test_validate_username():
    assert validate_username("john_doe") is None
    assert validate_username("jo") == "Username must be at least 3 characters"
    assert validate_username("j" * 31) == "Username cannot exceed 30 characters"
    assert validate_username("john doe") == "Username can only contain letters, numbers, and underscores"


def test_validate_email():
    assert validate_email("john@example.com") is None
    assert validate_email("john@example") is not None
    assert validate_email("") == "Email is required"


def test_password_strength():
    weak = check_password_strength("abc")
    assert weak["score"] == 1
    assert weak["label"] == "Weak"
    assert "At least 8 characters" in weak["feedback"]

    assert check_password_strength("")["label"] == "Very Weak"
    assert check_password_strength("Abcdef1!")["label"] == "Very Strong"
