"""Unit tests for HTML normalization."""

import re

import pytest
import pytest_check as check

from docpress.parsing.normalizer import (
    ALLOWED_TAGS,
    clean_google_docs_html,
    clean_html,
    filter_tags,
    normalize_whitespace,
    truncate_meta_sections,
)

_ANY_TAG = re.compile(r"<(/?)([a-zA-Z][a-zA-Z0-9]*)([^>]*)>")

MESSY_INPUTS = [
    '<p class="c1" style="margin:0"><span style="font-weight:700">Bold</span> start</p>',
    '<div id="main"><p>Inside <font color="red">red</font></p></div>',
    '<p>See <a class="link" href="https://example.com/a" target="_blank">this</a></p>',
    '<a name="top" id="t">Anchor</a><table><tr><td>Cell</td></tr></table>',
    "<p>Keep</p><script>alert(1)</script><style>p{color:red}</style><!-- note -->",
    "<!DOCTYPE html><html><body><p>Doc</p></body></html>",
    '<H2 CLASS="x">Shout</H2><P>Text</P><img src="x.png" alt="x">',
    "stray preamble <p>Body</p><p> </p><p>A<br/><br><br /><br>B</p>",
    "<p>Body</p><hr><p>SEO Title: hidden</p>",
    "<ul><li>One</li><li>Two</li></ul><ol><li>Three</li></ol>",
    "<<x>img src=x onerror=alert(1)>",
    "<p>Body</p><p>Notes</p ><p>secret</p>",
    "<p>Body</p><p><b >SEO</b> kw</p>",
    "<p>Body</p><p><span>Tags</span></p><p>budget</p>",
]


def assert_allow_listed(html: str) -> None:
    for closing, name, attrs in _ANY_TAG.findall(html):
        assert name in ALLOWED_TAGS, f"disallowed tag <{name}> in {html!r}"
        if name == "a" and not closing and attrs:
            assert re.fullmatch(r' href="[^"]*"', attrs), f"bad anchor attrs {attrs!r}"
        else:
            assert attrs == "", f"attributes left on <{name}>: {attrs!r}"


class TestTruncateMetaSections:
    """Tests for trailing meta-section removal."""

    def test_truncates_at_horizontal_rule(self) -> None:
        """Everything from an <hr> onward is removed."""
        result = clean_html("<p>Intro</p><hr><p>SEO Title: X</p>")

        check.equal(result, "<p>Intro</p>")
        check.is_not_in("SEO Title", result)

    def test_truncates_at_hr_with_attributes(self) -> None:
        result = truncate_meta_sections('<p>Intro</p><hr class="sep" /><p>Notes</p>')

        check.equal(result, "<p>Intro</p>")

    @pytest.mark.parametrize(
        "marker",
        [
            "<p>Meta Information</p>",
            "<p>SEO:</p>",
            "<p class=\"c1\"> Keywords : </p>",
            "<h2>Tags</h2>",
            "<h3 id=\"x\">Internal Notes:</h3>",
            "<p><strong>SEO Details</strong></p>",
            "<p><b>Editor notes:</b> see below</p>",
            "<p>meta    data</p>",
            "<p>---</p>",
        ],
    )
    def test_truncates_at_meta_label(self, marker: str) -> None:
        """Paragraphs, headings and bold runs holding a meta label start the cut."""
        html = f"<p>Article body.</p>{marker}<p>primary keyword: budgeting</p>"

        result = clean_html(html)

        check.equal(result, "<p>Article body.</p>")

    @pytest.mark.parametrize("separator", ["***", "___", "===", "-----"])
    def test_truncates_at_separator_run(self, separator: str) -> None:
        result = clean_html(f"<p>Article body.</p><p>{separator}</p><p>internal</p>")

        check.is_in("Article body.", result)
        check.is_not_in("internal", result)

    def test_earliest_marker_wins(self) -> None:
        """A label before an <hr> cuts at the label, not the rule."""
        html = "<p>Body</p><h2>Categories</h2><p>Finance</p><hr><p>More</p>"

        check.equal(truncate_meta_sections(html), "<p>Body</p>")

    def test_label_inside_sentence_is_kept(self) -> None:
        """Labels only count when they are the whole element text."""
        html = "<p>Notes on budgeting are below.</p><p>Tags help readers.</p>"

        check.equal(truncate_meta_sections(html), html)

    def test_unknown_label_is_published(self) -> None:
        """Synonyms outside the fixed label list stay in the body."""
        result = clean_html("<p>Body</p><p>Author bio</p><p>Jane writes about money.</p>")

        check.is_in("Author bio", result)
        check.is_in("Jane writes about money.", result)

    @pytest.mark.parametrize(
        "marker",
        [
            "<p>Notes</p >",
            "<h2>Tags</H2 >",
            "<p><b >SEO</b> kw</p>",
            '<p><strong class="x">Keywords:</strong></p>',
        ],
    )
    def test_loose_tag_spacing_is_still_a_marker(self, marker: str) -> None:
        check.equal(truncate_meta_sections(f"<p>Body</p>{marker}<p>secret</p>"), "<p>Body</p>")

    def test_label_wrapped_in_span_is_cut_after_unwrapping(self) -> None:
        """A label only visible once inline wrappers are removed still starts the cut."""
        result = clean_html("<p>Body</p><p><span class=\"c2\">Internal notes</span></p><p>secret</p>")

        check.equal(result, "<p>Body</p>")

    def test_break_tag_is_not_a_bold_marker(self) -> None:
        html = "<p><br>Notes</p>"

        check.equal(truncate_meta_sections(html), html)

    def test_no_marker_keeps_everything(self) -> None:
        html = "<p>One</p><p>Two</p>"

        check.equal(truncate_meta_sections(html), html)


class TestFilterTags:
    """Tests for tag and attribute allow-listing."""

    def test_strips_attributes_from_allowed_tags(self) -> None:
        result = filter_tags('<p class="c1" style="margin:0">Text</p>')

        check.equal(result, "<p>Text</p>")

    def test_anchor_keeps_only_href(self) -> None:
        result = filter_tags('<a class="link" href="https://example.com/a" target="_blank">this</a>')

        check.equal(result, '<a href="https://example.com/a">this</a>')

    def test_anchor_without_href_loses_all_attributes(self) -> None:
        result = filter_tags('<a name="top" id="t">Anchor</a>')

        check.equal(result, "<a>Anchor</a>")

    def test_div_becomes_paragraph(self) -> None:
        result = filter_tags('<div class="x">One</div><div>Two</div>')

        check.equal(result, "<p>One</p><p>Two</p>")

    def test_span_is_unwrapped(self) -> None:
        result = filter_tags('<p>Hello <span style="font-weight:700">world</span></p>')

        check.equal(result, "<p>Hello world</p>")

    def test_disallowed_tags_keep_their_text(self) -> None:
        result = filter_tags("<table><tr><td>Cell</td></tr></table><img src='x.png'>")

        check.equal(result, "Cell")

    def test_removes_script_style_and_comments(self) -> None:
        html = "<p>Keep</p><script>alert(1)</script><STYLE>p{}</STYLE><!-- note -->"

        check.equal(filter_tags(html), "<p>Keep</p>")

    def test_tag_joined_by_removal_is_filtered(self) -> None:
        """Removing a tag can splice its neighbours into a new tag."""
        result = filter_tags("<p>Hi</p><<x>img src=x onerror=alert(1)>there")

        check.equal(result, "<p>Hi</p>there")

    def test_nested_splices_are_filtered(self) -> None:
        check.equal(filter_tags("<<<y>x>img onerror=alert(1)>"), "")

    def test_lowercases_tag_names(self) -> None:
        check.equal(filter_tags('<H2 CLASS="x">Shout</H2>'), "<h2>Shout</h2>")

    def test_self_closing_break(self) -> None:
        check.equal(filter_tags("A<br/>B<br />C"), "A<br>B<br>C")


class TestNormalizeWhitespace:
    """Tests for whitespace normalization."""

    def test_collapses_spaces_inside_text(self) -> None:
        result = normalize_whitespace("<p>  Lots   of \t space  </p>")

        check.equal(result, "<p>Lots of space</p>")

    def test_removes_empty_paragraphs(self) -> None:
        result = normalize_whitespace("<p>A</p><p> </p><p></p><p>B</p>")

        check.equal(result, "<p>A</p>\n\n<p>B</p>")

    def test_removes_nested_empty_paragraphs(self) -> None:
        check.equal(normalize_whitespace("<p>A</p><p><p></p></p>"), "<p>A</p>")

    def test_collapses_break_runs(self) -> None:
        result = normalize_whitespace("<p>A<br><br><br><br>B</p>")

        check.equal(result, "<p>A<br><br>B</p>")

    def test_two_breaks_are_kept(self) -> None:
        check.equal(normalize_whitespace("<p>A<br><br>B</p>"), "<p>A<br><br>B</p>")

    def test_separates_blocks_with_blank_line(self) -> None:
        result = normalize_whitespace("<h2>Sub</h2>\n<p>One</p>   <p>Two</p><h3>Next</h3>")

        check.equal(result, "<h2>Sub</h2>\n\n<p>One</p>\n\n<p>Two</p>\n\n<h3>Next</h3>")


class TestCleanHtml:
    """Tests for the full normalization pipeline."""

    def test_drops_leading_text(self) -> None:
        check.equal(clean_html("stray preamble <p>Body</p>"), "<p>Body</p>")

    def test_plain_text_without_tags_is_empty(self) -> None:
        check.equal(clean_html("just words"), "")

    def test_hr_only_document_is_empty(self) -> None:
        check.equal(clean_html("<hr><p>Everything below the rule</p>"), "")

    def test_meta_truncation_sees_attributes(self) -> None:
        """Labels in styled paragraphs are found before attributes are stripped."""
        html = '<p class="c1">Body</p><p class="c7" style="x">Metadata</p><p>slug: body</p>'

        check.equal(clean_html(html), "<p>Body</p>")

    def test_keeps_lists_and_emphasis(self) -> None:
        html = "<ul><li><em>One</em></li><li><strong>Two</strong></li></ul>"

        check.equal(clean_html(html), html)

    def test_never_raises_on_malformed_markup(self) -> None:
        for html in ["", "<", "<p", "</p></p>", "<<>>", "<p><b>unclosed"]:
            check.is_instance(clean_html(html), str)

    @pytest.mark.parametrize("html", MESSY_INPUTS)
    def test_output_is_allow_listed(self, html: str) -> None:
        assert_allow_listed(clean_html(html))

    @pytest.mark.parametrize("html", MESSY_INPUTS)
    def test_second_pass_changes_nothing(self, html: str) -> None:
        once = clean_html(html)

        check.equal(clean_html(once), once)


class TestCleanGoogleDocsHtml:
    """Tests for Google Docs export pre-cleaning."""

    def test_export_is_reduced_to_article(self, google_docs_export: str) -> None:
        result = clean_google_docs_html(google_docs_export)

        check.equal(
            result,
            "<h1>Budgeting &amp; You</h1>\n\n"
            "<p>A budget is a plan for your money.</p>\n\n"
            "<p>Track every expense for a month.</p>",
        )

    def test_drops_export_title_and_styles(self, google_docs_export: str) -> None:
        result = clean_google_docs_html(google_docs_export)

        check.is_not_in("budget-guide-draft", result)
        check.is_not_in("color", result)
        check.is_not_in("SEO Title", result)

    def test_removes_doc_content_wrapper(self) -> None:
        html = '<div class="doc-content"><p>Body</p>'

        check.equal(clean_google_docs_html(html), "<p>Body</p>")

    def test_fragment_without_body(self) -> None:
        html = '<h1 class="title">Export title</h1><p>Body</p>'

        check.equal(clean_google_docs_html(html), "<p>Body</p>")
