"""Tests for the keyword moderation filter."""

import pytest

from competition_hub.domain.errors import ContentBlockedError, ValidationError
from competition_hub.domain.moderation import detect_abuse, ensure_clean_content


def test_clean_text_has_no_matches():
    assert detect_abuse("Great prompt engineering entry, well done!") == []
    ensure_clean_content("Looking forward to the results")


def test_matching_is_case_insensitive():
    assert detect_abuse("I HATE this") == ["hate"]


def test_matches_substrings_in_list_order():
    assert detect_abuse("Stop the harassment and abuse") == ["abuse", "harass"]


def test_devanagari_terms_are_detected():
    assert detect_abuse("तुम मूर्ख हो") == ["मूर्ख"]


def test_ensure_clean_content_reports_blocked_terms():
    with pytest.raises(ContentBlockedError) as excinfo:
        ensure_clean_content("this is shit")

    assert excinfo.value.blocked == ["shit"]
    assert isinstance(excinfo.value, ValidationError)
