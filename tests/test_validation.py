from __future__ import annotations

import pytest

from tubeflow.utils.validation import InvalidVideoKeyError, category_slug, sanitize_name


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("My Video", "my-video"),
        ("  Padded  ", "padded"),
        ("My Video: Part 1?", "my-video-part-1"),
        ("a/b\\c", "a-b-c"),
        ('quotes"and<angles>', "quotesandangles"),
    ],
)
def test_sanitize_name(name, expected):
    assert sanitize_name(name) == expected


@pytest.mark.parametrize("name", ["", "   ", "???", ".."])
def test_sanitize_name_rejects_unusable_names(name):
    with pytest.raises(InvalidVideoKeyError):
        sanitize_name(name)


def test_category_slug():
    assert category_slug("DevOps Tools") == "devops-tools"
    assert category_slug(" ai ") == "ai"


@pytest.mark.parametrize("category", ["", "  ", ".", "..", "../etc", "a/b", "c:\\temp"])
def test_category_slug_rejects_paths(category):
    with pytest.raises(InvalidVideoKeyError):
        category_slug(category)
