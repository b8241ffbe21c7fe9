from __future__ import annotations

import unittest
from unittest.mock import MagicMock, patch

import httpx

from pipeline import scraper

HOME = """
<html><head><title>Acme Roasters</title>
<meta name="description" content="Small-batch coffee delivered weekly.">
<script>var tracking = 1;</script></head>
<body>
<h1>Fresh coffee, every week</h1>
<p>We roast specialty coffee in small batches every morning.</p>
<p>Short one.</p>
<a href="/blog#latest">Blog</a>
<a href="/about">About</a>
<a href="/">Home</a>
<a href="https://facebook.com/acmeroasters">Facebook</a>
<a href="mailto:hello@acme.com">Email</a>
<p>Write to hello@acme.com or call 555-123-4567 today.</p>
</body></html>
"""

ABOUT = """
<html><head><title>About us</title></head><body>
<h2>Our story</h2>
<p>Founded in 2015 by two baristas who wanted better beans.</p>
</body></html>
"""

BLOG = "<html><head><title>Blog</title></head><body><p>Brewing guides and roast notes for home baristas.</p></body></html>"


def _response(url: str, html: str = "", status: int = 200) -> MagicMock:
    resp = MagicMock()
    resp.text = html
    if status >= 400:
        request = httpx.Request("GET", url)
        resp.raise_for_status.side_effect = httpx.HTTPStatusError(
            f"HTTP {status}", request=request, response=httpx.Response(status, request=request),
        )
    return resp


def _site(pages: dict[str, tuple[str, int]]):
    def fake_get(url, **kwargs):
        html, status = pages.get(url, ("", 404))
        return _response(url, html, status)
    return fake_get


class NormalizeUrlTests(unittest.TestCase):
    def test_scheme_added(self):
        self.assertEqual(scraper.normalize_url(" acme.com "), "https://acme.com")
        self.assertEqual(scraper.normalize_url("http://acme.com/x"), "http://acme.com/x")

    def test_invalid(self):
        with self.assertRaisesRegex(ValueError, "URL is required"):
            scraper.normalize_url("")
        with self.assertRaisesRegex(ValueError, "Invalid URL format"):
            scraper.normalize_url("localhost")


class ExtractPageTests(unittest.TestCase):
    def test_home_page(self):
        page = scraper.extract_page(HOME, "https://acme.com")
        self.assertEqual(page["title"], "Acme Roasters")
        self.assertEqual(page["description"], "Small-batch coffee delivered weekly.")
        self.assertEqual(page["headings"], ["Fresh coffee, every week"])
        self.assertIn("We roast specialty coffee in small batches every morning.", page["paragraphs"])
        self.assertNotIn("Short one.", page["paragraphs"])
        self.assertNotIn("tracking", page["content"])
        self.assertEqual(page["contactInfo"]["emails"], ["hello@acme.com"])
        self.assertEqual(page["contactInfo"]["phones"], ["555-123-4567"])
        self.assertEqual(page["contactInfo"]["socialLinks"], ["https://facebook.com/acmeroasters"])

    def test_about_page_content(self):
        page = scraper.extract_page(ABOUT, "https://acme.com/about")
        self.assertIn("Founded in 2015", page["aboutContent"])

    def test_pricing_page(self):
        html = "<html><head><title>Pricing</title></head><body><p>Starter plan costs $19.99 per month for two bags.</p></body></html>"
        page = scraper.extract_page(html, "https://acme.com/pricing")
        self.assertIn("$19.99", page["pricingInfo"])

    def test_clean_text(self):
        self.assertEqual(scraper.clean_text("  many   spaces\nhere "), "many spaces here")
        self.assertEqual(scraper.clean_text("window.dataLayer = []"), "")


class CollectLinksTests(unittest.TestCase):
    def test_same_host_without_fragments(self):
        links = scraper.collect_links(HOME, "https://acme.com")
        self.assertEqual(links, ["https://acme.com/blog", "https://acme.com/about", "https://acme.com/"])


class ScrapeWebsiteTests(unittest.TestCase):
    def test_crawl_prioritizes_about_and_merges(self):
        pages = {
            "https://acme.com": (HOME, 200),
            "https://acme.com/about": (ABOUT, 200),
            "https://acme.com/blog": (BLOG, 200),
        }
        with patch.object(scraper.httpx, "get", side_effect=_site(pages)):
            result = scraper.scrape_website("acme.com")

        self.assertEqual(
            result["subpagesScraped"],
            ["https://acme.com", "https://acme.com/about", "https://acme.com/blog"],
        )
        self.assertEqual(result["url"], "https://acme.com")
        self.assertEqual(result["title"], "Acme Roasters")
        self.assertIn("Our story", result["headings"])
        self.assertIn("Founded in 2015", result["aboutContent"])
        self.assertIn("Brewing guides", result["content"])

    def test_page_budget(self):
        pages = {"https://acme.com": (HOME, 200), "https://acme.com/about": (ABOUT, 200)}
        with patch.object(scraper.httpx, "get", side_effect=_site(pages)):
            result = scraper.scrape_website("https://acme.com", max_pages=1)
        self.assertEqual(result["subpagesScraped"], ["https://acme.com"])

    def test_failing_subpage_skipped(self):
        pages = {"https://acme.com": (HOME, 200), "https://acme.com/about": (ABOUT, 200)}
        with patch.object(scraper.httpx, "get", side_effect=_site(pages)):
            result = scraper.scrape_website("https://acme.com")
        self.assertNotIn("https://acme.com/blog", result["subpagesScraped"])
        self.assertEqual(len(result["subpagesScraped"]), 2)

    def test_start_page_http_error(self):
        pages = {"https://acme.com": ("", 503)}
        with patch.object(scraper.httpx, "get", side_effect=_site(pages)):
            with self.assertRaisesRegex(ValueError, "Website returned HTTP 503"):
                scraper.scrape_website("https://acme.com")

    def test_start_page_unreachable(self):
        with patch.object(scraper.httpx, "get", side_effect=httpx.ConnectError("refused")):
            with self.assertRaisesRegex(ValueError, "Could not connect to https://acme.com"):
                scraper.scrape_website("https://acme.com")

    def test_start_page_timeout(self):
        with patch.object(scraper.httpx, "get", side_effect=httpx.ReadTimeout("slow")):
            with self.assertRaisesRegex(ValueError, "Timeout fetching"):
                scraper.scrape_website("https://acme.com")


if __name__ == "__main__":
    unittest.main()
