#!/usr/bin/env python3
"""
CollectionSpine Quickstart Example

Shows the basic flow: load a collection, page through it, render feeds.

Usage:
    python examples/01_quickstart.py
"""

from collectionspine import CollectionBuilder, MemoryRepository


def main() -> None:
    """Query a small blog and render its feeds."""

    repo = MemoryRepository(
        {
            "blog": [
                {
                    "slug": f"post-{i}",
                    "title": f"Post {i}",
                    "body": f"Body of post {i}.",
                    "status": "published",
                    "tags": ["python"] if i % 2 else ["news"],
                    "date_published": f"2024-01-{i:02d}",
                }
                for i in range(1, 13)
            ]
        }
    )

    posts = CollectionBuilder(
        "content/blog",
        repository=repo,
        options={"page_path": "blog", "pretty_urls": True},
    )

    # Second page of published posts
    page = posts.copy().status("published").paginate(2, 5).get()
    print(f"Page {page.pagination.current_page}/{page.pagination.total_pages}")
    for item in page:
        print(f"  {item.date}  {item.title}  -> {item.url}")

    print(f"\nPython posts: {posts.copy().tags('python').count()}")

    # Feeds use absolute links
    print()
    print(posts.limit(3).rss(title="My Blog", link="https://example.com"))
    print()
    print(posts.sitemap("https://example.com", changefreq="monthly"))


if __name__ == "__main__":
    main()
