"""Tests for the selection prompts."""

import pytest

from llm_docs.doc_catalog import Variant
from llm_docs.prompts import (
    AutoPrompt,
    ConsolePrompt,
    PromptCancelled,
    Selection,
    collect_selections,
)


def scripted(*answers):
    """Return an input() replacement that replays answers, then hits EOF."""
    replies = iter(answers)

    def fake_input(message):
        try:
            return next(replies)
        except StopIteration:
            raise EOFError

    return fake_input


class TestAutoPrompt:
    """Tests for the non-interactive prompt."""

    def test_selects_everything(self):
        prompt = AutoPrompt(Variant.TINY)
        assert prompt.choose_many(["zod", "dayjs"]) == ["zod", "dayjs"]
        assert prompt.choose_one("zod", list(Variant)) is Variant.TINY

    def test_collect_selections(self):
        selections = collect_selections(AutoPrompt(), ["zod", "dayjs"])
        assert selections == [
            Selection("zod", Variant.FULL),
            Selection("dayjs", Variant.FULL),
        ]


class TestConsolePrompt:
    """Tests for the interactive prompt."""

    def test_enter_accepts_all(self, capsys):
        """All candidates are pre-checked."""
        prompt = ConsolePrompt(scripted(""))
        assert prompt.choose_many(["zod", "dayjs"]) == ["zod", "dayjs"]
        assert "[x] 1) zod" in capsys.readouterr().out

    def test_pick_subset_keeps_candidate_order(self):
        prompt = ConsolePrompt(scripted("3, 1"))
        assert prompt.choose_many(["a", "b", "c"]) == ["a", "c"]

    def test_none_selects_nothing(self):
        prompt = ConsolePrompt(scripted("none"))
        assert prompt.choose_many(["a", "b"]) == []

    def test_invalid_numbers_reprompt(self, capsys):
        """Out-of-range input asks again."""
        prompt = ConsolePrompt(scripted("7", "x", "\u00b2", "2"))
        assert prompt.choose_many(["a", "b"]) == ["b"]
        assert "between 1 and 2" in capsys.readouterr().out

    def test_empty_candidates_do_not_prompt(self):
        prompt = ConsolePrompt(scripted())
        assert prompt.choose_many([]) == []

    @pytest.mark.parametrize("answer,expected", [
        ("1", Variant.FULL),
        ("2", Variant.TINY),
        ("tiny", Variant.TINY),
        ("FULL", Variant.FULL),
    ])
    def test_choose_one(self, answer, expected):
        prompt = ConsolePrompt(scripted(answer))
        assert prompt.choose_one("zod", list(Variant)) is expected

    def test_choose_one_requires_an_answer(self, capsys):
        """No default: empty input re-prompts."""
        prompt = ConsolePrompt(scripted("", "3", "2"))
        assert prompt.choose_one("zod", list(Variant)) is Variant.TINY
        out = capsys.readouterr().out
        assert "Select documentation version for zod" in out
        assert "Tiny Documentation" in out

    def test_eof_cancels(self):
        prompt = ConsolePrompt(scripted())
        with pytest.raises(PromptCancelled):
            prompt.choose_one("zod", list(Variant))


class TestCollectSelections:
    """Tests for collect_selections."""

    def test_one_variant_per_package(self):
        prompt = ConsolePrompt(scripted("", "2", "1"))
        assert collect_selections(prompt, ["zod", "dayjs"]) == [
            Selection("zod", Variant.TINY),
            Selection("dayjs", Variant.FULL),
        ]

    def test_duplicate_choices_collapsed(self):
        class Repeating(AutoPrompt):
            def choose_many(self, candidates):
                return ["zod", "zod"]

        assert collect_selections(Repeating(), ["zod"]) == [Selection("zod", Variant.FULL)]

    def test_empty_choice_asks_no_variants(self):
        prompt = ConsolePrompt(scripted("none"))
        assert collect_selections(prompt, ["zod"]) == []
