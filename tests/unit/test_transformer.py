"""Tests for collectionspine.transformer - DefaultTransformer."""

from __future__ import annotations

import pytest

from collectionspine.models.item import TransformedItem, TransformOptions
from collectionspine.protocols.transformer import ItemTransformer
from collectionspine.transformer import DefaultTransformer, item_url, make_excerpt


@pytest.fixture
def transformer() -> DefaultTransformer:
    return DefaultTransformer()


PLAIN = TransformOptions()
PRETTY = TransformOptions(page_path="blog/post", pretty_urls=True)


class TestDefaultTransformer:
    """Field mapping."""

    def test_implements_protocol(self, transformer: DefaultTransformer) -> None:
        """DefaultTransformer satisfies ItemTransformer."""
        assert isinstance(transformer, ItemTransformer)

    def test_standard_fields(self, transformer: DefaultTransformer) -> None:
        """Raw keys map onto the standard fields."""
        item = transformer.transform(
            {
                "slug": "hello",
                "title": "Hello",
                "excerpt": "Short",
                "date_published": "2024-01-01",
                "date_modified": "2024-01-05",
            },
            PLAIN,
            "blog",
        )
        assert item == TransformedItem(
            title="Hello",
            excerpt="Short",
            slug="hello",
            date="2024-01-01",
            date_modified="2024-01-05",
        )

    def test_empty_item(self, transformer: DefaultTransformer) -> None:
        """Empty input gives an empty item."""
        assert transformer.transform({}, PLAIN, "blog") == TransformedItem()

    def test_slug_fallbacks(self, transformer: DefaultTransformer) -> None:
        """slug falls back to id, then the file stem."""
        assert transformer.transform({"id": 7}, PLAIN, "blog").slug == "7"
        assert transformer.transform({"file": "content/blog/my-post.md"}, PLAIN, "blog").slug == "my-post"

    def test_excerpt_from_body(self, transformer: DefaultTransformer) -> None:
        """Without an excerpt the body is shortened."""
        item = transformer.transform({"body": "word " * 100}, PLAIN, "blog")
        assert item.excerpt is not None
        assert item.excerpt.endswith("...")
        assert len(item.excerpt) <= 163

    def test_date_aliases(self, transformer: DefaultTransformer) -> None:
        """date and updated are accepted as aliases."""
        item = transformer.transform({"date": "2024-01-01", "updated": "2024-01-02"}, PLAIN, "blog")
        assert item.date == "2024-01-01"
        assert item.date_modified == "2024-01-02"

    def test_extra_keys_pass_through(self, transformer: DefaultTransformer) -> None:
        """Other keys become extra fields."""
        item = transformer.transform({"slug": "a", "author": "ada", "tags": ["x"]}, PLAIN, "blog")
        assert item.author == "ada"
        assert item.tags == ["x"]


class TestUrls:
    """URL generation."""

    def test_explicit_url_wins(self, transformer: DefaultTransformer) -> None:
        """A raw url is kept."""
        item = transformer.transform({"slug": "a", "url": "https://x.com/a"}, PRETTY, "blog")
        assert item.url == "https://x.com/a"

    def test_pretty(self, transformer: DefaultTransformer) -> None:
        """Pretty URLs use path segments."""
        assert transformer.transform({"slug": "a"}, PRETTY, "blog").url == "blog/post/a"

    def test_query_string(self) -> None:
        """Plain URLs use a query parameter."""
        assert item_url("a", TransformOptions(page_path="post.php")) == "post.php?item=a"

    def test_no_page_path(self, transformer: DefaultTransformer) -> None:
        """Without a page path there is no url."""
        assert transformer.transform({"slug": "a"}, PLAIN, "blog").url is None


class TestMakeExcerpt:
    """Excerpt shortening."""

    def test_short_text_unchanged(self) -> None:
        """Short text only has whitespace collapsed."""
        assert make_excerpt("  a\n\tb  ") == "a b"

    def test_truncates(self) -> None:
        """Long text is cut and marked."""
        assert make_excerpt("abcdefghij", length=4) == "abcd..."
