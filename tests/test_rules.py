"""
Single-line rule tests

Tests each rewrite rule on its own: headings, lists, emphasis, links,
HTML line breaks, quote content and table headers.
"""

import pytest

from md2backlog.lib.rules import (
    heading_convert,
    heading_is,
    nestedList_convert,
    numberedList_convert,
    bold_convert,
    italic_convert,
    strikethrough_convert,
    decorations_convert,
    quoteContent_convert,
    tableHeader_convert,
    links_convert,
    htmlBreaks_convert,
    carriageReturn_strip,
)
from md2backlog.lib.patterns import CARRIAGE_RETURN


class TestHeading:
    """Test '#' → '*' heading rewrite"""

    @pytest.mark.parametrize("level", [1, 2, 3, 6])
    def test_level_preserved(self, level):
        """Hash count maps 1:1 onto asterisk count"""
        assert heading_convert("#" * level + " Title") == "*" * level + " Title"

    def test_tab_after_hashes(self):
        """Any whitespace separates the hashes from the text"""
        assert heading_convert("##\tSetup") == "** Setup"

    def test_no_space_is_not_heading(self):
        """'#tag' is left alone"""
        assert heading_convert("#hashtag") == "#hashtag"

    def test_hash_mid_line(self):
        """Hashes not at line start are left alone"""
        assert heading_convert("issue # 12") == "issue # 12"

    def test_heading_is_recognizes_target_shape(self):
        """Structural check on '*' run + whitespace"""
        assert heading_is("** Section")
        assert heading_is("* item")
        assert not heading_is("*italic*")
        assert not heading_is("plain")


class TestNestedList:
    """Test indented bullet rewrite"""

    @pytest.mark.parametrize("tabs", [1, 2, 3])
    def test_tabs(self, tabs):
        """k tabs → k+1 dashes"""
        assert nestedList_convert("\t" * tabs + "- item") == "-" * (tabs + 1) + " item"

    @pytest.mark.parametrize("spaces,dashes", [(1, 1), (2, 2), (3, 2), (4, 3), (6, 4)])
    def test_spaces_default_indent(self, spaces, dashes):
        """s spaces → floor(s/2)+1 dashes"""
        assert nestedList_convert(" " * spaces + "- item") == "-" * dashes + " item"

    def test_spaces_custom_indent(self):
        """Indent size 4 halves the nesting depth"""
        assert nestedList_convert("    - item", indent_size=4) == "-- item"
        assert nestedList_convert("        - item", indent_size=4) == "--- item"

    def test_unindented_bullet_unchanged(self):
        """Top-level bullets already match Backlog syntax"""
        assert nestedList_convert("- item") == "- item"

    def test_mixed_indentation_unchanged(self):
        """Tabs followed by spaces match neither rule"""
        assert nestedList_convert("\t  - item") == "\t  - item"

    def test_dash_without_space_unchanged(self):
        """'-item' is not a bullet"""
        assert nestedList_convert("  -item") == "  -item"


class TestNumberedList:
    """Test '1.' → '+' rewrite"""

    def test_single_digit(self):
        assert numberedList_convert("1. first") == "+ first"

    def test_number_discarded(self):
        """No renumbering: the value is simply dropped"""
        assert numberedList_convert("42. answer") == "+ answer"

    def test_no_space_after_period(self):
        assert numberedList_convert("1.5 is a number") == "1.5 is a number"

    def test_indented_number_unchanged(self):
        assert numberedList_convert("  1. nested") == "  1. nested"


class TestEmphasis:
    """Test bold, italic and strikethrough rewrites"""

    def test_bold(self):
        assert bold_convert("**bold**") == "''bold''"

    def test_bold_multiple_spans(self):
        """Each span matched independently"""
        assert bold_convert("**a** and **b**") == "''a'' and ''b''"

    def test_italic(self):
        assert italic_convert("*italic*") == "'''italic'''"

    def test_strikethrough(self):
        assert strikethrough_convert("~~gone~~") == "%%gone%%"

    def test_bold_before_italic(self):
        """Bold consumes '**' so italic never sees empty spans"""
        result = decorations_convert("**bold** and *italic*")
        assert result == "''bold'' and '''italic'''"
        assert "*" not in result

    def test_all_three(self):
        assert decorations_convert("**b** *i* ~~s~~") == "''b'' '''i''' %%s%%"

    def test_unmatched_delimiter_left_alone(self):
        assert decorations_convert("2 * 3 = 6") == "2 * 3 = 6"


class TestQuoteContent:
    """Test stripping and rewriting of quoted lines"""

    def test_prefix_with_space(self):
        assert quoteContent_convert("> text") == "text"

    def test_prefix_without_space(self):
        assert quoteContent_convert(">text") == "text"

    def test_only_one_space_removed(self):
        assert quoteContent_convert(">  two") == " two"

    def test_decorated(self):
        assert quoteContent_convert("> **hi** ~~no~~") == "''hi'' %%no%%"

    def test_nested_list_inside_quote(self):
        assert quoteContent_convert("> \t- item") == "-- item"


class TestTableHeader:
    """Test trailing pipe → ' |h'"""

    def test_simple(self):
        assert tableHeader_convert("| a | b |") == "| a | b |h"

    def test_trailing_whitespace_normalized(self):
        assert tableHeader_convert("| a | b |   ") == "| a | b |h"

    def test_space_before_pipe_normalized(self):
        assert tableHeader_convert("| a | b|") == "| a | b |h"


class TestLinks:
    """Test inline link and bare URL rewrite"""

    def test_inline_link(self):
        """Link target is not wrapped a second time"""
        assert links_convert("[Example](http://example.com)") == "[[Example>http://example.com]]"

    def test_bare_url(self):
        assert links_convert("see https://x.io/a?b=1 now") == "see [[https://x.io/a?b=1]] now"

    def test_bare_url_at_start(self):
        assert links_convert("http://x.com") == "[[http://x.com]]"

    def test_link_and_bare_url(self):
        result = links_convert("[a](http://a.com) and http://b.com")
        assert result == "[[a>http://a.com]] and [[http://b.com]]"

    def test_no_url(self):
        assert links_convert("nothing here") == "nothing here"


class TestMisc:
    """HTML breaks and carriage returns"""

    def test_html_break(self):
        assert htmlBreaks_convert("a<br>b<br>") == "a&br;b&br;"

    def test_other_html_untouched(self):
        assert htmlBreaks_convert("<br/><b>x</b>") == "<br/><b>x</b>"

    def test_carriage_return_stripped_once(self):
        assert carriageReturn_strip("line\r") == "line"
        assert carriageReturn_strip("line") == "line"

    def test_carriage_return_only_at_line_end(self):
        """Interior CRs and all but the last trailing CR are kept"""
        assert carriageReturn_strip("a\rb") == "a\rb"
        assert carriageReturn_strip("line\r\r") == "line\r"

    def test_carriage_return_pattern_in_catalogue(self):
        assert CARRIAGE_RETURN.search("x\r")
        assert not CARRIAGE_RETURN.search("x\ry")
