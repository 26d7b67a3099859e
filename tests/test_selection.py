"""Tests for static model selection."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from model_selection.models import DEFAULT_GEMINI_MODEL
from model_selection.selection import candidate_sources, select_model


class TestSelectModel:
    """Test select_model precedence and rejection logging."""

    def test_cli_model_wins(self):
        result = select_model("gemini-1.5-pro", "gemini-2.5-pro", "gemini-1.5-flash")

        assert result.model == "gemini-1.5-pro"
        assert result.had_failure is False
        assert result.logs == ["Using model gemini-1.5-pro"]

    def test_invalid_cli_model_falls_back_to_default(self):
        result = select_model("invalid-model-name")

        assert result.model == DEFAULT_GEMINI_MODEL
        assert result.had_failure is True
        assert result.logs == [
            'Loading --model "invalid-model-name" failed, not a valid model name.',
            f"Using model {DEFAULT_GEMINI_MODEL}",
        ]

    def test_settings_used_after_invalid_cli(self):
        result = select_model("nope", "gemini-2.5-flash", "gemini-1.5-flash")

        assert result.model == "gemini-2.5-flash"
        assert result.had_failure is True
        assert result.logs == [
            'Loading --model "nope" failed, not a valid model name.',
            "Using model gemini-2.5-flash",
        ]

    def test_env_used_after_invalid_cli_and_settings(self):
        result = select_model("bad-cli", "bad-settings", "gemini-1.5-flash")

        assert result.model == "gemini-1.5-flash"
        assert result.logs == [
            'Loading --model "bad-cli" failed, not a valid model name.',
            'Loading settings.json "bad-settings" failed, not a valid model name.',
            "Using model gemini-1.5-flash",
        ]

    def test_all_invalid_uses_custom_default(self):
        result = select_model("a", "b", "c", default_model="gemini-2.5-flash-lite")

        assert result.model == "gemini-2.5-flash-lite"
        assert result.had_failure is True
        assert result.logs[2] == 'Loading $GEMINI_MODEL "c" failed, not a valid model name.'
        assert result.logs[-1] == "Using model gemini-2.5-flash-lite"

    def test_absent_and_blank_candidates_are_skipped_silently(self):
        result = select_model(None, "", "   ")

        assert result.model == DEFAULT_GEMINI_MODEL
        assert result.had_failure is False
        assert result.logs == [f"Using model {DEFAULT_GEMINI_MODEL}"]

    def test_surrounding_whitespace_is_ignored(self):
        result = select_model(" gemini-2.5-flash ")

        assert result.model == "gemini-2.5-flash"
        assert result.had_failure is False

    def test_default_is_not_validated(self):
        result = select_model(default_model="my-custom-model")

        assert result.model == "my-custom-model"
        assert result.logs == ["Using model my-custom-model"]

    def test_last_log_is_always_the_choice(self):
        cases = [
            (None, None, None),
            ("gemini-2.5-pro", None, None),
            ("x", "gemini-1.5-pro", None),
            ("x", "y", "z"),
        ]
        for cli, stored, env in cases:
            result = select_model(cli, stored, env)
            assert result.model in {cli, stored, env, DEFAULT_GEMINI_MODEL}
            assert result.logs[-1] == f"Using model {result.model}"


class TestCandidateSources:
    """Test candidate source ordering."""

    def test_priority_order_and_labels(self):
        sources = candidate_sources("a", "b", "c")

        assert [s.label for s in sources] == ["--model", "settings.json", "$GEMINI_MODEL"]
        assert [s.hint for s in sources] == [
            "model name",
            "settings.json",
            "environment variable",
        ]
        assert [s.candidate for s in sources] == ["a", "b", "c"]
