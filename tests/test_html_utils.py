"""Tests for the regex helpers that detect, strip and insert canonical tags."""

import pytest

from canonical_tagger.errors import MissingTitleError
from canonical_tagger.utils.html import (
    canonical_hrefs, count_canonical, has_canonical, insert_canonical,
    strip_canonical, strip_inserted,
)


class TestDetect:
    def test_double_quoted(self):
        assert has_canonical('<link rel="canonical" href="https://a.com/x.html">')

    def test_single_quoted(self):
        assert has_canonical("<link rel='canonical' href='https://a.com/x.html'>")

    def test_href_before_rel(self):
        assert has_canonical('<link href="https://a.com/x.html" rel="canonical" />')

    def test_other_rel_values_ignored(self):
        assert not has_canonical('<link rel="stylesheet" href="a.css">')
        assert not has_canonical('<link rel="canonicalish" href="x">')

    def test_prefixed_rel_attribute_ignored(self):
        assert not has_canonical('<link data-rel="canonical" rel="stylesheet" href="site.css">')
        assert not has_canonical("<link x-rel='canonical' href='site.css'>")

    def test_standalone_rel_after_prefixed_one(self):
        assert has_canonical('<link data-rel="x" rel="canonical" href="u">')

    def test_value_is_case_sensitive(self):
        assert not has_canonical('<link rel="CANONICAL" href="x">')
        assert not has_canonical('<link rel="Canonical" href="x">')

    def test_tag_name_case_insensitive(self):
        assert has_canonical('<LINK REL="canonical" HREF="x">')

    def test_multi_value_rel_ignored(self):
        assert not has_canonical('<link rel="canonical alternate" href="x">')

    def test_mixed_quotes_not_matched(self):
        assert not has_canonical("""<link rel="canonical' href="x">""")

    def test_count_and_hrefs(self):
        html = ('<link rel="canonical" href="https://a.com/1.html">\n'
                "<link href='https://a.com/2.html' rel='canonical'>")
        assert count_canonical(html) == 2
        assert canonical_hrefs(html) == ["https://a.com/1.html", "https://a.com/2.html"]


class TestStrip:
    def test_whole_line_removed_without_blank_line(self):
        html = "<head>\n<title>A</title>\n<link rel='canonical' href=\"https://old.com/x.html\">\n</head>"
        assert strip_canonical(html) == "<head>\n<title>A</title>\n</head>"

    def test_indented_line_removed(self):
        html = '  <title>A</title>\n    <link rel="canonical" href="x">\n  </head>\n'
        assert strip_canonical(html) == "  <title>A</title>\n  </head>\n"

    def test_inline_tag_removed_in_place(self):
        html = '<title>A</title><link rel="canonical" href="x"><meta charset="utf-8">'
        assert strip_canonical(html) == '<title>A</title><meta charset="utf-8">'

    def test_all_tags_removed(self):
        html = ('<title>A</title>\n<link rel="canonical" href="1">\n'
                '<link href="2" rel="canonical">\n</head>')
        out = strip_canonical(html)
        assert not has_canonical(out)
        assert out == "<title>A</title>\n</head>"

    def test_crlf_line_removed(self):
        html = '<title>A</title>\r\n<link rel="canonical" href="x">\r\n</head>'
        assert strip_canonical(html) == "<title>A</title>\r\n</head>"

    def test_no_tag_is_unchanged(self):
        html = "<title>A</title>\n</head>\n"
        assert strip_canonical(html) == html


class TestInsert:
    def test_inserted_on_next_line_after_title(self):
        html = "<head>\n<title>A</title>\n</head>"
        out = insert_canonical(html, "https://example.com/a.html")
        lines = out.split("\n")
        assert lines[1] == "<title>A</title>"
        assert lines[2] == '    <link rel="canonical" href="https://example.com/a.html">'
        assert lines[3] == "</head>"

    def test_only_first_title_used(self):
        html = "<title>A</title>\n<svg><title>icon</title></svg>"
        out = insert_canonical(html, "u")
        assert count_canonical(out) == 1
        assert out.index("canonical") < out.index("icon")

    def test_keeps_crlf(self):
        out = insert_canonical("<title>A</title>\r\n</head>", "u")
        assert out == '<title>A</title>\r\n    <link rel="canonical" href="u">\r\n</head>'

    def test_case_insensitive_title(self):
        out = insert_canonical("<TITLE>A</TITLE>\n", "u")
        assert out.startswith('<TITLE>A</TITLE>\n    <link rel="canonical"')

    def test_missing_title_raises(self):
        with pytest.raises(MissingTitleError):
            insert_canonical("<head></head>", "u")


class TestStripInserted:
    def test_restores_original(self):
        original = "<head>\n<title>A</title>\n</head>\n"
        tagged = insert_canonical(original, "https://example.com/a.html")
        assert strip_inserted(tagged, "example.com") == original

    def test_leaves_foreign_tags(self):
        html = "<title>A</title>\n<link rel='canonical' href='https://example.com/a.html'>\n"
        assert strip_inserted(html, "example.com") == html

    def test_leaves_other_domains(self):
        html = '<title>A</title>\n    <link rel="canonical" href="https://other.com/a.html">'
        assert strip_inserted(html, "example.com") == html
