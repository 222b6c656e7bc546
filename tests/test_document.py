"""
Unit tests for the BeautifulSoup-backed document.
"""
from src.sce.document import compile_selector, parse_document


class TestSelect:
    """Test selector queries."""

    def test_selector_group_in_document_order(self):
        """A selector group returns matches in document order, not alternative order."""
        doc = parse_document("<h1>one</h1><h2>two</h2><h1>three</h1>")
        matches = doc.select(compile_selector("h2, h1"))
        assert [m.text() for m in matches] == ["one", "two", "three"]

    def test_scoped_select_excludes_scope(self):
        """Selecting from an element only returns its descendants."""
        doc = parse_document('<div class="a"><div class="a">inner</div></div>')
        outer = doc.select(compile_selector("div.a"))[0]
        inner = outer.select(compile_selector("div.a"))
        assert [m.text() for m in inner] == ["inner"]

    def test_no_match(self):
        """No match returns an empty list."""
        doc = parse_document("<p>text</p>")
        assert doc.select(compile_selector("img")) == []


class TestElement:
    """Test element text and attributes."""

    def test_text_concatenates_descendants(self):
        """Text joins all descendant text nodes without separators."""
        doc = parse_document("<p>Half-<b>Life</b> 2</p>")
        assert doc.select(compile_selector("p"))[0].text() == "Half-Life 2"

    def test_attribute(self):
        """Attributes are returned as strings, missing ones as None."""
        img = parse_document('<img src="card.png">').select(compile_selector("img"))[0]
        assert img.attribute("src") == "card.png"
        assert img.attribute("alt") is None

    def test_multi_valued_attribute(self):
        """Multi-valued attributes are joined with a space."""
        div = parse_document('<div class="credit_value big"></div>').select(compile_selector("div"))[0]
        assert div.attribute("class") == "credit_value big"

    def test_text_includes_script_and_style(self):
        """Script and style contents count as descendant text."""
        doc = parse_document("<h1>A<script>B</script><style>C</style>D</h1>")
        assert doc.select(compile_selector("h1"))[0].text() == "ABCD"

    def test_text_skips_comments(self):
        """Comments are not text."""
        doc = parse_document("<p>Half<!-- hidden -->-Life</p>")
        assert doc.select(compile_selector("p"))[0].text() == "Half-Life"
