"""
Unit tests for free text scrubbing.
"""
from core.infrastructure.scrubber import scrub


class TestScrub:
    """Tests for scrub."""

    def test_trims(self):
        assert scrub("  web servers \n") == "web servers"

    def test_escapes_html(self):
        assert scrub('<script>alert("x")</script>') == (
            "&lt;script&gt;alert(&quot;x&quot;)&lt;/script&gt;"
        )

    def test_none(self):
        assert scrub(None) is None

    def test_plain_text_unchanged(self):
        assert scrub("None") == "None"
