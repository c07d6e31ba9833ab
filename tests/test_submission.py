"""Tests for share and submission payloads."""

import pytest

from ohcraps.config import settings
from ohcraps.models.user_strategy import UserStrategy
from ohcraps.parsers.strategy_document import parse_strategy_document
from ohcraps.services.share_formatter import share_text
from ohcraps.services.submission import (
    build_share_payload,
    build_submission_email,
    sanitized_filename,
    share_filename,
)


class TestFilenames:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Iron Cross", "Iron Cross"),
            ("Odds/Evens: 2?", "Odds_Evens_ 2_"),
            ('a\\b*c|d"e<f>g%', "a_b_c_d_e_f_g_"),
            ("  padded  ", "padded"),
            ("", "Strategy"),
            ("   ", "Strategy"),
        ],
    )
    def test_sanitized_filename(self, name: str, expected: str) -> None:
        assert sanitized_filename(name) == expected

    def test_share_filename(self) -> None:
        assert share_filename("Iron Cross") == "Iron Cross_OhCraps.txt"
        assert share_filename("") == "Strategy_OhCraps.txt"


class TestSharePayload:
    def test_parsed_strategy(self, iron_cross_document: str) -> None:
        strategy = parse_strategy_document(iron_cross_document)

        payload = build_share_payload(strategy)

        assert payload.subject == "Oh Craps! Strategy - Iron Cross"
        assert payload.filename == "Iron Cross_OhCraps.txt"
        assert payload.text == share_text(strategy)

    def test_user_strategy(self) -> None:
        payload = build_share_payload(UserStrategy(name="Mine", steps="1. Go"))

        assert payload.subject == "Oh Craps! Strategy - Mine"
        assert "1. Go" in payload.text


class TestSubmissionEmail:
    def test_explicit_recipient(self) -> None:
        strategy = UserStrategy(name="Mine", steps="1. Go")

        email = build_submission_email(strategy, recipient="team@example.com")

        assert email.recipient == "team@example.com"
        assert email.subject == "Oh Craps! Strategy Submission - Mine"
        assert email.body == share_text(strategy)

    def test_configured_recipient(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "submission_email", "submit@example.com")

        email = build_submission_email(UserStrategy(name="Mine"))

        assert email.recipient == "submit@example.com"
