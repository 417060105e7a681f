"""
Tests for helper utilities.
"""

import re

from astrax.utils.helpers import extract_emails, extract_phones, new_id, parse_llm_json, today_iso


class TestParseLLMJson:
    def test_plain_object(self):
        assert parse_llm_json('{"a": 1}') == {"a": 1}

    def test_code_fence(self):
        assert parse_llm_json('```json\n{"a": [1, 2]}\n```') == {"a": [1, 2]}

    def test_bare_array(self):
        assert parse_llm_json('[{"id": "1"}]') == [{"id": "1"}]

    def test_object_inside_prose(self):
        assert parse_llm_json('Here you go: {"name": "Asha"} Hope this helps!') == {"name": "Asha"}

    def test_garbage(self):
        assert parse_llm_json("no json here") is None

    def test_empty(self):
        assert parse_llm_json("") is None
        assert parse_llm_json(None) is None


class TestExtraction:
    def test_emails_deduplicated(self):
        text = "Mail asha@example.com or asha@example.com, cc ravi.k@uni.ac.in"
        assert extract_emails(text) == ["asha@example.com", "ravi.k@uni.ac.in"]

    def test_phone(self):
        assert extract_phones("Phone: 987-654-3210") == ["987-654-3210"]

    def test_no_matches(self):
        assert extract_emails("") == []
        assert extract_phones("no digits") == []


def test_new_id_length():
    assert len(new_id()) == 9
    assert new_id() != new_id()


def test_today_iso_format():
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", today_iso())
