"""Content type detection — suggest content types and platforms from research text.

Scores each content type by how often its vocabulary appears in the
research, picks the best platform for it the same way, nudges both by the
target audience, and returns the three most confident recommendations.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

CONTENT_PATTERNS: dict[str, list[str]] = {
    "social-media": [
        "engagement", "followers", "likes", "shares", "comments", "viral",
        "short-form", "hashtag", "Instagram", "Facebook", "Twitter", "X",
        "LinkedIn", "TikTok", "post", "social",
    ],
    "blog-post": [
        "long-form", "article", "blog", "in-depth", "comprehensive", "detailed",
        "SEO", "search ranking", "keywords", "backlinks", "content marketing",
        "website", "company blog", "Medium", "WordPress",
    ],
    "email": [
        "newsletter", "open rate", "click-through", "subject line", "email marketing",
        "customer retention", "lead nurturing", "mailing list", "subscribers",
        "inbox", "campaign", "drip campaign", "welcome email", "CRM",
    ],
    "video-script": [
        "video content", "script", "storyboard", "shot list",
        "visual content", "voiceover", "explainer video", "product demo",
        "tutorial", "video marketing", "viewers", "watch time",
    ],
    "youtube-script": [
        "YouTube", "video", "channel", "viewers", "subscribers", "comments",
        "algorithm", "thumbnail", "watch time", "YouTube SEO", "video length",
        "end screen", "cards", "monetization", "views", "video description",
        "YouTube Studio", "playlists",
    ],
    "vlog-script": [
        "vlog", "daily vlog", "video diary", "vlogger", "vlogging",
        "lifestyle content", "behind the scenes", "day in the life",
        "travel vlog", "vlog camera", "vlog setup", "vlog editing",
        "talking to camera", "documentary style", "personal content",
    ],
}

PLATFORM_PATTERNS: dict[str, list[str]] = {
    "facebook": ["Facebook", "FB", "Meta", "feed", "groups", "events", "community", "older demographics"],
    "instagram": ["Instagram", "IG", "visual", "photos", "carousel", "stories", "reels", "filters", "lifestyle"],
    "linkedin": ["LinkedIn", "professional", "B2B", "business", "corporate", "thought leadership", "recruitment"],
    "twitter": ["Twitter", "X", "tweets", "threads", "news", "trends", "real-time", "short updates"],
    "tiktok": ["TikTok", "short video", "trends", "challenges", "younger audience", "Gen Z"],
    "youtube": [
        "YouTube", "videos", "channel", "subscribe", "video content", "tutorials", "YouTube Studio",
        "watch time", "algorithm", "monetization", "views", "comments", "likes", "subscribers",
    ],
    "company-blog": ["website", "blog", "company blog", "corporate site", "branded content"],
    "medium": ["Medium", "publication", "thought leadership", "republishing"],
    "wordpress": ["WordPress", "CMS", "blog platform", "website content"],
}

AUDIENCE_PATTERNS: dict[str, list[str]] = {
    "professionals": ["LinkedIn", "email", "white papers", "case studies", "professional", "B2B"],
    "consumers": ["Instagram", "Facebook", "TikTok", "B2C", "lifestyle", "product-focused"],
    "technical": ["blog posts", "YouTube tutorials", "in-depth content", "documentation", "guides"],
    "creative": ["visual platforms", "Instagram", "TikTok", "design", "creativity", "inspiration"],
    "youth": ["TikTok", "Instagram", "short videos", "trends", "Gen Z", "younger audience"],
    "senior": ["Facebook", "email", "longer content", "traditional", "older demographics"],
}

CONTENT_TYPE_PLATFORMS: dict[str, list[str]] = {
    "social-media": ["facebook", "instagram", "linkedin", "twitter", "tiktok"],
    "blog-post": ["company-blog", "medium", "wordpress"],
    "email": ["newsletter", "marketing", "sales", "welcome"],
    "video-script": ["youtube", "explainer", "advertisement", "tutorial", "product-demo"],
    "youtube-script": ["youtube", "education", "entertainment", "how-to", "review"],
    "vlog-script": ["youtube", "lifestyle", "travel", "daily", "behind-the-scenes"],
}

DEFAULT_PLATFORMS = {
    "social-media": "linkedin",
    "blog-post": "company-blog",
    "email": "newsletter",
    "video-script": "youtube",
    "youtube-script": "youtube",
    "vlog-script": "youtube",
}

DEFAULT_RECOMMENDATIONS = [
    {
        "contentType": "social-media",
        "platform": "linkedin",
        "confidence": 60,
        "reasoning": "Social media is a versatile starting point for most content strategies.",
    },
    {
        "contentType": "blog-post",
        "platform": "company-blog",
        "confidence": 55,
        "reasoning": "Blog posts provide room for detailed content that can be repurposed for other channels.",
    },
    {
        "contentType": "email",
        "platform": "newsletter",
        "confidence": 50,
        "reasoning": "Email marketing typically has the highest ROI of all digital marketing channels.",
    },
]

PLATFORM_TO_CONTENT_TYPE = {
    "blog": "blog-post",
    "social": "social-media",
    "email": "email",
    "youtube": "youtube-script",
    "video-script": "video-script",
    "vlog": "vlog-script",
    "podcast": "podcast-script",
    "presentation": "presentation",
    "google-ads": "google-ads",
    "research-report": "research-report",
}

SUB_PLATFORM_TO_CONTENT_TYPE = {
    "medium": "blog-post", "wordpress": "blog-post", "company-blog": "blog-post",
    "facebook": "social-media", "instagram": "social-media", "twitter": "social-media",
    "linkedin": "social-media", "tiktok": "social-media",
    "newsletter": "email", "marketing": "email", "sales": "email", "welcome": "email",
    "explainer": "video-script", "advertisement": "video-script",
    "tutorial": "video-script", "product-demo": "video-script",
    "educational": "youtube-script", "entertainment": "youtube-script", "review": "youtube-script",
    "vlog-style": "youtube-script", "travel": "youtube-script", "daily": "youtube-script",
    "tutorial-vlog": "youtube-script",
    "interview": "podcast-script", "solo": "podcast-script", "panel": "podcast-script",
    "business": "presentation", "executive": "presentation", "sales-presentation": "presentation",
    "training": "presentation", "investor": "presentation",
    "search-ads": "google-ads", "display-ads": "google-ads", "video-ads": "google-ads", "shopping-ads": "google-ads",
    "market-analysis": "research-report", "competitor-analysis": "research-report",
    "industry-trends": "research-report", "consumer-insights": "research-report",
}

CONTENT_TYPE_DISPLAY_NAMES = {
    "blog-post": ("Blog Post", "Entrada de Blog"),
    "social-media": ("Social Media Post", "Publicación de Redes Sociales"),
    "social-post": ("Social Media Post", "Publicación de Redes Sociales"),
    "email": ("Email", "Correo Electrónico"),
    "youtube-script": ("YouTube Script", "Guión de YouTube"),
    "video-script": ("Video Script", "Guión de Video"),
    "vlog-script": ("Vlog Script", "Guión de Vlog"),
    "podcast-script": ("Podcast Script", "Guión de Podcast"),
    "presentation": ("Presentation", "Presentación"),
    "google-ads": ("Google Ads", "Anuncios de Google"),
    "research-report": ("Research Report", "Informe de Investigación"),
    "company-blog": ("Company Blog", "Blog de la Compañía"),
}

PLATFORM_DISPLAY_NAMES = {
    "blog": ("Blog", "Blog"),
    "social": ("Social Media", "Redes Sociales"),
    "email": ("Email", "Correo Electrónico"),
    "youtube": ("YouTube", "YouTube"),
    "video-script": ("Video", "Video"),
    "vlog": ("Vlog", "Vlog"),
    "podcast": ("Podcast", "Podcast"),
    "presentation": ("Presentation", "Presentación"),
    "google-ads": ("Google Ads", "Anuncios de Google"),
    "research-report": ("Research", "Investigación"),
    "company-blog": ("Company Blog", "Blog de la Compañía"),
    "medium": ("Medium", "Medium"),
    "wordpress": ("WordPress", "WordPress"),
    "facebook": ("Facebook", "Facebook"),
    "instagram": ("Instagram", "Instagram"),
    "twitter": ("Twitter", "Twitter"),
    "linkedin": ("LinkedIn", "LinkedIn"),
    "tiktok": ("TikTok", "TikTok"),
    "newsletter": ("Newsletter", "Boletín"),
    "marketing": ("Marketing Email", "Correo de Marketing"),
    "sales": ("Sales Email", "Correo de Ventas"),
    "welcome": ("Welcome Email", "Correo de Bienvenida"),
    "explainer": ("Explainer Video", "Video Explicativo"),
    "advertisement": ("Advertisement", "Anuncio"),
    "tutorial": ("Tutorial", "Tutorial"),
    "product-demo": ("Product Demo", "Demostración de Producto"),
    "educational": ("Educational", "Educativo"),
    "entertainment": ("Entertainment", "Entretenimiento"),
    "review": ("Review", "Reseña"),
    "vlog-style": ("Vlog Style", "Estilo Vlog"),
    "travel": ("Travel Vlog", "Vlog de Viajes"),
    "daily": ("Daily Vlog", "Vlog Diario"),
    "tutorial-vlog": ("Tutorial Vlog", "Vlog Tutorial"),
    "interview": ("Interview", "Entrevista"),
    "solo": ("Solo Episode", "Episodio Solo"),
    "panel": ("Panel Discussion", "Panel de Discusión"),
    "business": ("Business Presentation", "Presentación de Negocios"),
    "executive": ("Executive Summary", "Resumen Ejecutivo"),
    "sales-presentation": ("Sales Presentation", "Presentación de Ventas"),
    "training": ("Training Material", "Material de Capacitación"),
    "investor": ("Investor Pitch", "Presentación para Inversores"),
    "search-ads": ("Search Ads", "Anuncios de Búsqueda"),
    "display-ads": ("Display Ads", "Anuncios de Display"),
    "video-ads": ("Video Ads", "Anuncios de Video"),
    "shopping-ads": ("Shopping Ads", "Anuncios de Compras"),
    "market-analysis": ("Market Analysis", "Análisis de Mercado"),
    "competitor-analysis": ("Competitor Analysis", "Análisis de Competencia"),
    "industry-trends": ("Industry Trends", "Tendencias de la Industria"),
    "consumer-insights": ("Consumer Insights", "Insights del Consumidor"),
}

CTA_PHRASES = [
    "call us", "contact us", "get in touch", "sign up", "subscribe", "register",
    "book now", "try it", "buy now", "learn more", "find out more", "read more",
    "click here", "visit our", "follow us", "share this", "like and share",
    "leave a comment", "comment below", "download now", "get started", "join now",
    "apply now", "contact me", "email us", "dm us", "message us", "call today",
    "schedule a", "book a", "reserve your", "start your", "begin your", "check out",
    "don't miss", "don't wait", "limited time", "act now", "hurry", "while supplies last",
]

CTA_QUESTION_PATTERNS = [
    re.compile(r"what are you waiting for\?", re.IGNORECASE),
    re.compile(r"ready to get started\?", re.IGNORECASE),
    re.compile(r"interested in learning more\?", re.IGNORECASE),
    re.compile(r"want to learn more\?", re.IGNORECASE),
    re.compile(r"why not give it a try\?", re.IGNORECASE),
    re.compile(r"have questions\?", re.IGNORECASE),
]


def _count(term: str, text: str) -> int:
    return len(re.findall(rf"\b{re.escape(term.lower())}\b", text))


def analyze_research_data(research_data: str, audience: str = "") -> list[dict]:
    """Top three {contentType, platform, confidence, reasoning} recommendations."""
    if not research_data or not isinstance(research_data, str):
        return [dict(rec) for rec in DEFAULT_RECOMMENDATIONS]

    text = research_data.lower()
    audience_lower = (audience or "").lower()
    recommendations = []

    for content_type, patterns in CONTENT_PATTERNS.items():
        content_score = 0
        matched_terms = []
        for pattern in patterns:
            hits = _count(pattern, text)
            if hits:
                content_score += hits
                matched_terms.append(pattern)

        relevant_platforms = CONTENT_TYPE_PLATFORMS.get(content_type, [])
        platform_scores = {
            platform: sum(_count(p, text) for p in PLATFORM_PATTERNS.get(platform, []))
            for platform in relevant_platforms
        }

        for audience_type, audience_terms in AUDIENCE_PATTERNS.items():
            if audience_type not in audience_lower:
                continue
            for term in audience_terms:
                term_lower = term.lower()
                for platform, platform_terms in PLATFORM_PATTERNS.items():
                    if platform in platform_scores and any(t.lower() == term_lower for t in platform_terms):
                        platform_scores[platform] += 2
                if any(t.lower() == term_lower for t in patterns):
                    content_score += 2

        if content_score == 0:
            continue

        best_platform, best_score = "", -1
        for platform, score in platform_scores.items():
            if score > best_score:
                best_platform, best_score = platform, score
        if best_score == 0:
            best_platform = DEFAULT_PLATFORMS.get(content_type, "")

        max_possible = min(len(patterns), 10)
        variety = len(set(matched_terms))
        confidence = min(100, round((content_score + variety * 2) / max_possible * 50))

        label = content_type.replace("-", " ", 1)
        if matched_terms:
            shown = ", ".join(matched_terms[:3]) + ("..." if len(matched_terms) > 3 else "")
            reasoning = f"Your research mentions {shown} which suggests {label} would be effective."
        else:
            reasoning = f"Based on your target audience, {label} content typically performs well."

        recommendations.append({
            "contentType": content_type,
            "platform": best_platform,
            "confidence": confidence,
            "reasoning": reasoning,
        })

    recommendations.sort(key=lambda r: r["confidence"], reverse=True)
    logger.debug("Content recommendations: %s", [(r["contentType"], r["confidence"]) for r in recommendations])
    return recommendations[:3]


def _humanize(key: str) -> str:
    return key[:1].upper() + key[1:].replace("-", " ")


def get_display_names(content_type: str, platform: str, sub_platform: str = "", language: str = "en") -> dict:
    """Localized display names for a content type / platform pair."""
    idx = 1 if language == "es" else 0

    if sub_platform in ("medium", "wordpress") or platform == "medium":
        key = "blog-post"
    elif "company-blog" in (platform, sub_platform):
        key = "blog-post"
    elif sub_platform in ("facebook", "instagram", "twitter", "linkedin", "tiktok"):
        key = "social-media"
    elif platform == "presentation" or sub_platform in ("business", "executive", "sales-presentation", "training", "investor"):
        key = "presentation"
    elif sub_platform in ("newsletter", "marketing", "sales", "welcome") or platform == "email":
        key = "email"
    elif sub_platform:
        key = (
            SUB_PLATFORM_TO_CONTENT_TYPE.get(sub_platform)
            or PLATFORM_TO_CONTENT_TYPE.get(platform)
            or content_type
            or "social-media"
        )
    else:
        key = PLATFORM_TO_CONTENT_TYPE.get(platform) or content_type or "social-media"

    display_type = CONTENT_TYPE_DISPLAY_NAMES[key][idx] if key in CONTENT_TYPE_DISPLAY_NAMES else _humanize(key)
    platform_key = sub_platform or platform
    display_platform = (
        PLATFORM_DISPLAY_NAMES[platform_key][idx]
        if platform_key in PLATFORM_DISPLAY_NAMES
        else _humanize(platform_key)
    )
    return {"displayContentType": display_type, "displayPlatform": display_platform}


def analyze_text_for_cta(text: str) -> bool:
    """Whether the text already carries a call to action."""
    if not text:
        return False
    lower = text.lower()
    if any(phrase in lower for phrase in CTA_PHRASES):
        return True
    return any(p.search(text) for p in CTA_QUESTION_PATTERNS)


def get_content_type_from_platform(platform: str) -> str:
    if platform in ("company-blog", "medium", "wordpress"):
        return "blog-post"
    return PLATFORM_TO_CONTENT_TYPE.get(platform, "article")
