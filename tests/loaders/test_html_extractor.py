# tests/loaders/test_html_extractor.py
"""Tests for HTML article extraction."""

from quizprep.loaders import (
    ArticleExtractor,
    ArticleResult,
    HTMLArticleExtractor,
    document_title,
    extract_body_text,
)


class TestHTMLArticleExtractor:
    def test_is_article_extractor(self):
        assert isinstance(HTMLArticleExtractor(), ArticleExtractor)

    def test_extracts_article(self, article_html):
        result = HTMLArticleExtractor().extract(article_html, "https://example.com/bio")
        assert isinstance(result, ArticleResult)
        assert "chlorophyll absorbs light" in result.text
        assert result.length == len(result.text)

    def test_strips_chrome(self, article_html):
        result = HTMLArticleExtractor().extract(article_html)
        assert "Home | About" not in result.text
        assert "trackVisitor" not in result.text
        assert "Copyright" not in result.text

    def test_heading_becomes_title(self, article_html):
        result = HTMLArticleExtractor().extract(article_html)
        assert result.title == "Photosynthesis"

    def test_keeps_headings_as_markdown(self, article_html):
        result = HTMLArticleExtractor().extract(article_html)
        assert "# Photosynthesis" in result.text

    def test_byline_from_meta(self, article_html):
        result = HTMLArticleExtractor().extract(article_html)
        assert result.byline == "Ada Lovelace"

    def test_document_title_without_heading(self):
        body = "<p>" + "Cells divide by mitosis. " * 20 + "</p>"
        html = (
            "<html><head><title>Cell Biology</title></head>"
            f"<body><main>{body}</main></body></html>"
        )
        result = HTMLArticleExtractor().extract(html)
        assert result.title == "Cell Biology"

    def test_short_article_returns_none(self):
        html = "<html><body><article><p>Too short.</p></article></body></html>"
        assert HTMLArticleExtractor().extract(html) is None

    def test_min_length_is_configurable(self):
        html = "<html><body><article><p>Too short.</p></article></body></html>"
        result = HTMLArticleExtractor(min_length=5).extract(html)
        assert result is not None
        assert "Too short." in result.text

    def test_no_container_returns_none(self):
        html = "<html><body><div>" + "Loose text. " * 50 + "</div></body></html>"
        assert HTMLArticleExtractor().extract(html) is None

    def test_empty_html_returns_none(self):
        assert HTMLArticleExtractor().extract("") is None
        assert HTMLArticleExtractor().extract("   ") is None

    def test_role_main_container(self):
        html = '<html><body><div role="main">' + "<p>Enzymes lower activation energy.</p>" * 10
        html += "</div></body></html>"
        result = HTMLArticleExtractor().extract(html)
        assert result is not None
        assert "Enzymes lower activation energy." in result.text


class TestDocumentTitle:
    def test_reads_title(self):
        assert document_title("<html><head><title> My Page </title></head></html>") == "My Page"

    def test_missing_title(self):
        assert document_title("<html><body>No title</body></html>") == ""
        assert document_title("") == ""


class TestExtractBodyText:
    def test_body_text_without_scripts(self):
        html = (
            "<html><body><p>Hello world</p><script>var x = 1;</script>"
            "<style>p {color: red}</style><p>Second line</p></body></html>"
        )
        text = extract_body_text(html)
        assert "Hello world" in text
        assert "Second line" in text
        assert "var x" not in text
        assert "color" not in text

    def test_prefers_main_container(self):
        html = "<html><body><div>Outside</div><main><p>Inside</p></main></body></html>"
        assert extract_body_text(html) == "Inside"

    def test_empty_document(self):
        assert extract_body_text("") == ""
