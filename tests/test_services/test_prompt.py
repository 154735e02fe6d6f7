"""Tests for prompt construction."""

import pytest

from models import Tone
from services.prompt import INSTRUCTION, SEPARATOR, build_prompt


class TestBuildPrompt:
    def test_starts_with_reply_instruction(self) -> None:
        prompt = build_prompt("Hello there")
        assert prompt.startswith(INSTRUCTION)
        assert "Don't include a subject" in prompt

    def test_exact_text_with_tone(self) -> None:
        prompt = build_prompt("Hi, reschedule?", "formal")
        assert prompt == (
            "Generate a professional email reply for the following email content. "
            "Don't include a subject, just keep the body."
            " Keep the tone formal to write the email."
            "\nOriginal Email:\n"
            "Hi, reschedule?"
        )

    @pytest.mark.parametrize("tone", [t.value for t in Tone])
    def test_tone_appears_exactly_once(self, tone: str) -> None:
        prompt = build_prompt("Can we talk on Monday?", tone)
        assert prompt.count(f"Keep the tone {tone} ") == 1

    def test_accepts_tone_enum(self) -> None:
        assert "Keep the tone casual" in build_prompt("hey", Tone.CASUAL)

    @pytest.mark.parametrize("tone", [None, ""])
    def test_no_tone_clause_when_absent(self, tone) -> None:
        prompt = build_prompt("Body", tone)
        assert "Keep the tone" not in prompt
        assert prompt == INSTRUCTION + SEPARATOR + "Body"

    def test_email_content_kept_verbatim(self) -> None:
        content = "  Line one\n\tLine two with {braces} and %s  \n"
        prompt = build_prompt(content, "friendly")
        assert prompt.endswith(SEPARATOR + content)

    def test_deterministic(self) -> None:
        assert build_prompt("x", "formal") == build_prompt("x", "formal")
