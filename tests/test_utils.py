from core.utils import current_timestamp, render_markdown


def test_render_heading():
    assert render_markdown("# Hi") == "<h1>Hi</h1>"


def test_render_inline_and_lists():
    html = render_markdown("Some *emphasis* and `code`\n\n- one\n- two\n")
    assert "<em>emphasis</em>" in html
    assert "<code>code</code>" in html
    assert "<li>one</li>" in html


def test_render_link():
    html = render_markdown("[home](/)")
    assert '<a href="/">home</a>' in html


def test_render_malformed_is_literal():
    assert "**unclosed" in render_markdown("**unclosed")


def test_render_empty():
    assert render_markdown("") == ""


def test_current_timestamp():
    assert current_timestamp()
