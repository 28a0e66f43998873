"""HTML stripping for user-supplied text (workflow comments)."""

from app.shared.utils import strip_html


def test_strip_html_removes_tags_keeps_text() -> None:
    assert strip_html("<b>Escalated</b> to <i>ops</i>") == "Escalated to ops"


def test_strip_html_drops_script_content() -> None:
    assert "alert" not in strip_html("ok<script>alert(1)</script>")


def test_strip_html_leaves_plain_text() -> None:
    assert strip_html("Due tomorrow") == "Due tomorrow"
