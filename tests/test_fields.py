"""Tests for article_parser.fields module."""

from article_parser.document import ArticleDocument
from article_parser.fields import resolve_date, resolve_title


def title_of(html: str):
    return resolve_title(ArticleDocument(html))


def date_of(html: str):
    return resolve_date(ArticleDocument(html))


class TestResolveTitle:
    def test_prefers_heading_inside_article(self) -> None:
        html = "<h1>Site name</h1><article><h1>  Story title </h1></article>"
        assert title_of(html) == "Story title"

    def test_heading_inside_post_container(self) -> None:
        html = '<h1>Site name</h1><div class="post"><h1>Post title</h1></div>'
        assert title_of(html) == "Post title"

    def test_heading_inside_content_container(self) -> None:
        html = '<h1>Site name</h1><div class="content"><h1>Body title</h1></div>'
        assert title_of(html) == "Body title"

    def test_any_heading(self) -> None:
        assert title_of("<title>Doc</title><h1>Heading</h1>") == "Heading"

    def test_document_title(self) -> None:
        assert title_of("<head><title> Page title </title></head><body></body>") == "Page title"

    def test_og_title_when_no_heading(self) -> None:
        html = '<html><head><meta property="og:title" content="X"></head><body><p>text</p></body></html>'
        assert title_of(html) == "X"

    def test_skips_empty_candidates(self) -> None:
        html = '<h1>  </h1><title></title><meta property="og:title" content="Fallback">'
        assert title_of(html) == "Fallback"

    def test_none_when_missing(self) -> None:
        assert title_of("<p>no title here</p>") is None


class TestResolveDate:
    def test_time_datetime_attribute(self) -> None:
        html = '<span class="date">Yesterday</span><time datetime="2024-01-02T10:00:00Z">Jan 2</time>'
        assert date_of(html) == "2024-01-02T10:00:00Z"

    def test_attribute_returned_as_written(self) -> None:
        assert date_of('<time datetime=" 2024-01-01 ">Jan 1</time>') == " 2024-01-01 "

    def test_blank_attribute_falls_back_to_text(self) -> None:
        assert date_of('<time datetime="  "> Jan 1 </time>') == "Jan 1"

    def test_time_visible_text(self) -> None:
        assert date_of("<time> Jan 2, 2024 </time>") == "Jan 2, 2024"

    def test_date_class(self) -> None:
        assert date_of('<span class="post-date">March 3, 2024</span>') == "March 3, 2024"

    def test_class_substring(self) -> None:
        assert date_of('<div class="entry-timestamp">3 hours ago</div>') == "3 hours ago"

    def test_meta_published_time(self) -> None:
        html = '<meta property="article:published_time" content="2024-05-06T08:00:00+02:00">'
        assert date_of(html) == "2024-05-06T08:00:00+02:00"

    def test_meta_name_date(self) -> None:
        assert date_of('<meta name="date" content="2024-05-06">') == "2024-05-06"

    def test_meta_publish_date(self) -> None:
        assert date_of('<meta name="publish-date" content="06/05/2024">') == "06/05/2024"

    def test_returns_raw_string(self) -> None:
        assert date_of("<time>not really a date</time>") == "not really a date"

    def test_skips_empty_candidates(self) -> None:
        html = '<time></time><meta name="date" content="2024-05-06">'
        assert date_of(html) == "2024-05-06"

    def test_none_when_missing(self) -> None:
        assert date_of("<p>undated</p>") is None
