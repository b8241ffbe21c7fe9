"""Website scraper: company context for research prompts.

Fetches a site with httpx, strips each page with BeautifulSoup and follows
same-domain links breadth-first (about/pricing/product pages first) up to
a page budget. The merged result feeds the research prompt builders.
"""

from __future__ import annotations

import logging
import re
from typing import Any
from urllib.parse import urljoin, urlparse, urlunparse

import httpx
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

MAX_PAGES = 10
MAX_DEPTH = 2
MAX_PAGE_CHARS = 50_000
MIN_PARAGRAPH_CHARS = 20

PRIORITY_PATHS = (
    "/about", "/about-us", "/company", "/who-we-are",
    "/pricing", "/plans", "/plans-and-pricing", "/products", "/services",
    "/contact", "/contact-us",
)

HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}

_CODE_MARKERS = (
    "function(", "var ", "window.", "document.", "@media", "@keyframes", "@font-face",
    "transform:", "-webkit-", "unicode-range:", "font-display:", "data:image/", "rgba(",
)
_SYMBOLS_ONLY_RE = re.compile(r"^[0-9\s.\-:/\\+={}\[\](),;\"'`~!@#$%^&*_|]+$")
_PRICE_RE = re.compile(r"(?:\$|€|£|USD|EUR|GBP)\s?[0-9]+(?:\.[0-9]{2})?")
_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_PHONE_RE = re.compile(r"(?:\+\d{1,3}[\s.-]?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}")
_SOCIAL_HOSTS = ("facebook", "twitter", "linkedin", "instagram", "youtube")


def normalize_url(url: str) -> str:
    """Add https:// when the scheme is missing; raise ValueError if still invalid."""
    url = (url or "").strip()
    if not url:
        raise ValueError("URL is required")
    if not url.startswith("http"):
        url = "https://" + url
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc or "." not in parsed.netloc:
        raise ValueError("Invalid URL format")
    return url


def clean_text(text: str) -> str:
    """Collapse whitespace; blank out text that looks like code, CSS or noise."""
    if not text:
        return ""
    if any(marker in text for marker in _CODE_MARKERS):
        return ""
    text = re.sub(r"\s+", " ", text).strip()
    if len(text) > 20 and _SYMBOLS_ONLY_RE.match(text):
        return ""
    if len(text) > 100 and len(text.split(" ")) < 10:
        return ""
    return text


def _fetch(url: str) -> str:
    response = httpx.get(url, headers=HEADERS, follow_redirects=True, timeout=30.0)
    response.raise_for_status()
    return response.text


def _section_text(soup: BeautifulSoup, keyword: str) -> list[str]:
    texts = []
    for el in soup.find_all(["section", "div", "article"]):
        ident = (el.get("id") or "").lower()
        classes = " ".join(el.get("class") or []).lower()
        if keyword in ident or keyword in classes:
            text = clean_text(el.get_text(" ", strip=True))
            if len(text) > MIN_PARAGRAPH_CHARS:
                texts.append(text)
    return texts


def extract_page(html: str, url: str) -> dict[str, Any]:
    """Pull title, meta description, headings, paragraphs and section hints from one page."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style", "noscript", "svg", "iframe"]):
        tag.decompose()

    title = soup.title.get_text(strip=True) if soup.title else ""
    meta = soup.find("meta", attrs={"name": "description"})
    description = (meta.get("content") or "").strip() if meta else ""

    headings = [clean_text(h.get_text(" ", strip=True)) for h in soup.find_all(["h1", "h2", "h3", "h4", "h5", "h6"])]
    headings = [h for h in headings if h]
    paragraphs = [clean_text(p.get_text(" ", strip=True)) for p in soup.find_all(["p", "li"])]
    paragraphs = [p for p in paragraphs if len(p) > MIN_PARAGRAPH_CHARS]

    body_text = soup.get_text(separator="\n", strip=True)
    lines = [line.strip() for line in body_text.splitlines() if line.strip()]
    content = "\n".join(lines)[:MAX_PAGE_CHARS]

    lowered_headings = " ".join(headings[:20]).lower()
    path = urlparse(url).path.lower()
    is_about = "/about" in path or "about" in title.lower() or "about us" in lowered_headings or "our story" in lowered_headings
    is_pricing = (
        "/pricing" in path or "/plans" in path
        or any(word in title.lower() for word in ("pricing", "plans"))
        or any(word in lowered_headings for word in ("pricing", "plans", "subscription"))
    )

    if is_about:
        about = " ".join(paragraphs)[:1500]
    else:
        about = " ".join(_section_text(soup, "about"))

    product = "\n\n".join(_section_text(soup, "product") + _section_text(soup, "service"))

    pricing = ""
    if is_pricing:
        priced = [text for text in _section_text(soup, "pric") + _section_text(soup, "plans") if _PRICE_RE.search(text)]
        if not priced:
            priced = [p for p in paragraphs if _PRICE_RE.search(p) and len(p) < 500]
        pricing = "\n\n".join(dict.fromkeys(priced))

    socials = [
        a["href"] for a in soup.find_all("a", href=True)
        if any(host in a["href"] for host in _SOCIAL_HOSTS)
    ]

    return {
        "title": title,
        "description": description,
        "headings": headings,
        "paragraphs": paragraphs,
        "content": content,
        "aboutContent": about,
        "productInfo": product,
        "pricingInfo": pricing,
        "contactInfo": {
            "emails": _EMAIL_RE.findall(body_text),
            "phones": _PHONE_RE.findall(body_text),
            "socialLinks": socials,
        },
    }


def collect_links(html: str, page_url: str) -> list[str]:
    """Same-host links on a page, fragments dropped."""
    host = urlparse(page_url).netloc
    soup = BeautifulSoup(html, "html.parser")
    links = []
    for anchor in soup.find_all("a", href=True):
        href = anchor["href"].strip()
        if not href or href.startswith(("#", "javascript:", "mailto:", "tel:")):
            continue
        absolute = urlparse(urljoin(page_url, href))
        if absolute.netloc != host or absolute.scheme not in ("http", "https"):
            continue
        links.append(urlunparse(absolute._replace(fragment="")))
    return list(dict.fromkeys(links))


def _is_priority(url: str) -> bool:
    return any(path in url for path in PRIORITY_PATHS)


def _merge(result: dict[str, Any], page: dict[str, Any]):
    for key in ("title", "description"):
        if not result[key] and page[key]:
            result[key] = page[key]
    result["headings"].extend(page["headings"])
    result["paragraphs"].extend(page["paragraphs"])
    if page["content"]:
        result["content"] = f"{result['content']}\n\n{page['content']}" if result["content"] else page["content"]
    for key in ("aboutContent", "productInfo", "pricingInfo"):
        if page[key]:
            result[key] = f"{result[key]}\n\n{page[key]}" if result[key] else page[key]
    for key, values in page["contactInfo"].items():
        result["contactInfo"][key].extend(v for v in values if v not in result["contactInfo"][key])


def scrape_website(url: str, max_pages: int = MAX_PAGES, max_depth: int = MAX_DEPTH) -> dict[str, Any]:
    """Crawl a website and return merged page data.

    Keys: url, title, description, headings, paragraphs, content,
    aboutContent, productInfo, pricingInfo, contactInfo, subpagesScraped.
    Pages that fail to load are skipped; raises ValueError when the
    starting page itself cannot be fetched.
    """
    url = normalize_url(url)
    logger.info("Scraping website: %s (max %d pages, depth %d)", url, max_pages, max_depth)

    result: dict[str, Any] = {
        "url": url,
        "title": "",
        "description": "",
        "headings": [],
        "paragraphs": [],
        "content": "",
        "aboutContent": "",
        "productInfo": "",
        "pricingInfo": "",
        "contactInfo": {"emails": [], "phones": [], "socialLinks": []},
        "subpagesScraped": [],
    }
    queue: list[tuple[str, int]] = [(url, 0)]
    visited: set[str] = set()

    while queue and len(result["subpagesScraped"]) < max_pages:
        current, depth = queue.pop(0)
        # "https://site.com" and "https://site.com/" are the same page
        key = current.rstrip("/")
        if key in visited:
            continue
        visited.add(key)

        try:
            html = _fetch(current)
        except httpx.HTTPStatusError as e:
            if current == url:
                raise ValueError(f"Website returned HTTP {e.response.status_code}") from e
            logger.warning("Skipping %s: HTTP %s", current, e.response.status_code)
            continue
        except httpx.TimeoutException as e:
            if current == url:
                raise ValueError(f"Timeout fetching {url} (30s limit)") from e
            logger.warning("Skipping %s: timeout", current)
            continue
        except httpx.HTTPError as e:
            if current == url:
                raise ValueError(f"Could not connect to {url}") from e
            logger.warning("Skipping %s: %s", current, e)
            continue

        _merge(result, extract_page(html, current))
        result["subpagesScraped"].append(current)

        if depth < max_depth:
            queued = {item for item, _ in queue}
            for link in collect_links(html, current):
                if link.rstrip("/") not in visited and link not in queued:
                    queue.append((link, depth + 1))
            queue.sort(key=lambda item: not _is_priority(item[0]))

    logger.info(
        "Scraped %d pages from %s: %d headings, %d paragraphs",
        len(result["subpagesScraped"]), url, len(result["headings"]), len(result["paragraphs"]),
    )
    return result
