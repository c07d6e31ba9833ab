"""Tests for HTML fragment helpers."""

from ohcraps.parsers.html_fragments import (
    find_ci,
    first_element_text,
    iter_elements,
    mask_span,
    mask_tables,
    strip_html,
)


class TestStripHtml:
    def test_removes_tags(self) -> None:
        assert strip_html("<b>Bold</b> text") == "Bold text"

    def test_decodes_entities(self) -> None:
        assert strip_html("Odds&nbsp;&amp;&nbsp;Ends") == "Odds & Ends"

    def test_trims_whitespace(self) -> None:
        assert strip_html("\n   Place the 6  \n") == "Place the 6"

    def test_unclosed_bracket_hides_remainder(self) -> None:
        """A stray '<' swallows everything after it."""
        assert strip_html("Bet less < than you win") == "Bet less"

    def test_empty_after_stripping(self) -> None:
        assert strip_html("<br/>  <span></span>") == ""

    def test_other_entities_left_alone(self) -> None:
        assert strip_html("5 &lt; 6") == "5 &lt; 6"


class TestMasking:
    def test_mask_span_preserves_length(self) -> None:
        text = "abc<table>x</table>def"
        masked = mask_span(text, 3, 19)

        assert len(masked) == len(text)
        assert masked == "abc" + " " * 16 + "def"

    def test_mask_tables_preserves_offsets(self) -> None:
        text = "<p>A</p><table><tr><td>x</td></tr></table><p>B</p>"
        masked = mask_tables(text)

        assert len(masked) == len(text)
        assert "<table" not in masked
        assert masked.index("<p>B</p>") == text.index("<p>B</p>")

    def test_mask_tables_is_case_insensitive(self) -> None:
        masked = mask_tables("<TABLE><tr></tr></Table>after")
        assert masked.strip() == "after"

    def test_unterminated_table_left_in_place(self) -> None:
        text = "<p>A</p><table><tr>"
        assert mask_tables(text) == text


class TestFindAndIterate:
    def test_find_ci(self) -> None:
        assert find_ci("abc<OL>", "<ol") == 3
        assert find_ci("abc", "<ol") == -1

    def test_find_ci_respects_bounds(self) -> None:
        assert find_ci("<li>a</li><li>b</li>", "<li", 1, 10) == -1

    def test_iter_elements_offsets(self) -> None:
        text = "<p class='x'>Hello</p>"
        (element,) = list(iter_elements(text, "p"))

        assert element.start == 0
        assert text[element.content_start : element.content_end] == "Hello"
        assert element.end == len(text)

    def test_iter_elements_stops_at_unterminated(self) -> None:
        text = "<p>One</p><p>Two<p>Three</p>"
        contents = [text[e.content_start : e.content_end] for e in iter_elements(text, "p")]

        # The second <p> runs to the only remaining </p>
        assert contents == ["One", "Two<p>Three"]

    def test_iter_elements_missing_close(self) -> None:
        assert list(iter_elements("<h4>Heading", "h4")) == []

    def test_first_element_text(self) -> None:
        assert first_element_text("<h3> <em>Iron</em> Cross </h3>", "h3") == "Iron Cross"
        assert first_element_text("<p>No heading</p>", "h3") == ""
