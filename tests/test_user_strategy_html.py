"""Tests for rendering user strategies as strategy documents."""

from ohcraps.models.content_block import ContentBlock
from ohcraps.models.user_strategy import UserStrategy
from ohcraps.services.user_strategy_html import (
    escape_html,
    make_strategy_html,
    user_strategy_html,
    user_strategy_to_strategy,
)


class TestEscapeHtml:
    def test_escapes_markup(self) -> None:
        assert escape_html("<b> & </b>") == "&lt;b&gt; &amp; &lt;/b&gt;"


class TestMakeStrategyHtml:
    def test_document_layout(self) -> None:
        html = make_strategy_html(
            name="Mine",
            buy_in_text="$100",
            table_min_text="$5",
            notes="",
            credit="Me",
            steps=["Pass Line", "  ", "Odds"],
        )

        assert html == (
            "<h3>Mine</h3>\n"
            "<p>Buy-in: $100</p>\n"
            "<p>Table Minimum: $5</p>\n"
            "<p>Credit: Me</p>\n"
            "<ol>\n"
            "<li>Pass Line</li>\n"
            "<li>Odds</li>\n"
            "</ol>\n"
        )

    def test_notes_included_when_present(self) -> None:
        html = make_strategy_html("N", "$1", "$1", "Go slow", "", [])

        assert "<p>Notes: Go slow</p>" in html
        assert "Credit:" not in html


class TestUserStrategyToStrategy:
    def test_fields_survive_parsing(self) -> None:
        user = UserStrategy(
            name="Six & Eight",
            buy_in="$100-$300",
            table_minimum="$10",
            steps="Place the 6 and 8\n\nPress after a hit",
            notes="Cold tables only",
            credit="Me",
        )

        strategy = user_strategy_to_strategy(user)

        assert strategy.id == user.id
        assert strategy.name == "Six & Eight"
        assert (strategy.buy_in_min, strategy.buy_in_max) == (100, 300)
        assert (strategy.table_min_min, strategy.table_min_max) == (10, 10)
        assert strategy.notes == "Cold tables only"
        assert strategy.credit == "Me"
        assert list(strategy.blocks) == [
            ContentBlock.step("Place the 6 and 8"),
            ContentBlock.step("Press after a hit"),
        ]

    def test_blank_amounts_parse_to_zero(self) -> None:
        strategy = user_strategy_to_strategy(UserStrategy(name="Bare", steps="Go"))

        assert strategy.buy_in_text == ""
        assert (strategy.buy_in_min, strategy.buy_in_max) == (0, 0)

    def test_angle_brackets_stay_escaped(self) -> None:
        strategy = user_strategy_to_strategy(UserStrategy(name="x", steps="Bet <= $10"))

        assert strategy.steps == ["§STEP§Bet &lt;= $10"]

    def test_user_strategy_html_one_item_per_line(self) -> None:
        html = user_strategy_html(UserStrategy(name="x", steps="a\nb\r\nc"))

        assert html.count("<li>") == 3
