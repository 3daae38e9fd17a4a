import pytest

from typing import Optional

from mdpreview.document import assemble_document


class TestAssembleDocument:
    def test_skeleton(self) -> None:
        html = assemble_document("<p>Hello</p>", "My page")
        assert html.startswith("<!doctype html>\n<html>")
        assert html.rstrip().endswith("</html>")
        assert "<title>My page</title>" in html
        assert '<meta charset="utf-8" />' in html
        assert "<body>\n    <p>Hello</p>\n  </body>" in html

    def test_stylesheet_uses_theme_variables(self) -> None:
        html = assemble_document("")
        assert "<style>" in html
        for variable in ["--text", "--card", "--border", "--accent"]:
            assert f"var({variable})" in html

    def test_table_rows_not_striped(self) -> None:
        html = assemble_document("")
        assert "table.md-table tr:nth-child(even) td {" in html

    def test_body_inserted_verbatim(self) -> None:
        body = '<a href="x?a=1&amp;b=2">&lt;tag&gt;</a>'
        assert body in assemble_document(body)

    def test_title_escaped(self) -> None:
        html = assemble_document("", "<Tom & Jerry>")
        assert "<title>&lt;Tom &amp; Jerry&gt;</title>" in html

    @pytest.mark.parametrize("title", [None, ""])
    def test_default_title(self, title: Optional[str]) -> None:
        assert "<title>Preview</title>" in assemble_document("", title)
        assert "<title>Preview</title>" in assemble_document("")
