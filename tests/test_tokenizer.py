"""Tests for the search tokenizer."""

import re

import pytest

from codeops.engine.scoring import STOP_WORDS, tokenize

TOKEN_RE = re.compile(r"[a-z0-9-]+")


class TestTokenize:
    def test_lowercases_and_splits(self):
        assert tokenize("Hello World") == ["hello", "world"]

    def test_code_fences_are_dropped(self):
        text = "before\n```python\nsecretterm = compute()\n```\nafter"
        tokens = tokenize(text)
        assert tokens == ["before", "after"]
        assert "secretterm" not in tokens

    def test_inline_code_is_dropped(self):
        assert tokenize("use `hiddenterm` here") == ["use", "here"]

    def test_markdown_link_keeps_text_only(self):
        tokens = tokenize("[Guide Text](https://example.com/path)")
        assert tokens == ["guide", "text"]
        assert "https" not in tokens

    def test_formatting_characters_are_separators(self):
        assert tokenize("**bold**_under_~strike~#tag>quote|pipe") == [
            "bold",
            "under",
            "strike",
            "tag",
            "quote",
            "pipe",
        ]

    def test_short_tokens_and_stop_words_removed(self):
        assert tokenize("a I to be or x go") == ["go"]

    def test_hyphens_kept_underscores_split(self):
        assert tokenize("git-commands and make_plan") == ["git-commands", "make", "plan"]

    def test_duplicates_retained(self):
        assert tokenize("test test") == ["test", "test"]

    def test_all_stop_words_yield_nothing(self):
        assert tokenize("the and of") == []

    @pytest.mark.parametrize("value", [None, 42, "", "   "])
    def test_empty_or_non_string_input(self, value):
        assert tokenize(value) == []

    @pytest.mark.parametrize(
        "text",
        [
            "## Rule 1: Run the Full Suite Before Every Commit!",
            "- ✅ Extract shared validation into one helper (see `helper.py`)",
            "| Workflow | Command |\n|---|---|\n| Commit | `gitcm` |",
            "Mixed: UPPER lower 123 a-b c_d e.f  [link](http://x.y) ~~strike~~",
        ],
    )
    def test_token_invariants(self, text):
        for token in tokenize(text):
            assert len(token) >= 2
            assert TOKEN_RE.fullmatch(token)
            assert token not in STOP_WORDS

    def test_deterministic(self):
        text = "Context window management for multi-session agents"
        assert tokenize(text) == tokenize(text)
