"""Tests for dracolor.palette.query — free-text input parsing."""

from dracolor.palette.query import Query, parse


class TestParse:
    def test_palette_only(self):
        assert parse("blue") == Query(palette_name="blue", shade_key="")

    def test_palette_and_shade(self):
        assert parse("blue,500") == Query(palette_name="blue", shade_key="500")

    def test_trims_spaces(self):
        assert parse("  blue , 500 ") == Query(palette_name="blue", shade_key="500")

    def test_trims_spaces_without_comma(self):
        assert parse("   pink  ").palette_name == "pink"

    def test_keeps_tabs(self):
        q = parse("\tblue\t")
        assert q.palette_name == "\tblue\t"

    def test_extra_segments_ignored(self):
        assert parse("blue,500,whatever,else") == Query(palette_name="blue", shade_key="500")

    def test_trailing_comma_means_no_shade(self):
        assert parse("blue,") == Query(palette_name="blue", shade_key="")

    def test_empty_input(self):
        assert parse("") == Query(palette_name="", shade_key="")

    def test_leading_comma(self):
        assert parse(",500") == Query(palette_name="", shade_key="500")

    def test_never_fails_on_garbage(self):
        q = parse(",,, ,")
        assert q.palette_name == ""
        assert q.shade_key == ""
