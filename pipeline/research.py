"""Research generation — Claude research briefs and Perplexity deep research.

Also holds the research quality gate that content generation runs before
spending a Claude call on thin or stale research.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime

import config
from pipeline import llm
from pipeline.llm import LLMTimeoutError
from prompts.research_prompts import (
    CLAUDE_RESEARCH_SYSTEM,
    build_claude_research_prompt,
    get_prompt_for_topic,
)

logger = logging.getLogger(__name__)

MIN_RESEARCH_LENGTH = 300
MIN_GUARDED_RESEARCH_LENGTH = 50

BEST_PRACTICES_TERMS = [
    "best practices", "Best Practices",
    "mejores prácticas", "Mejores Prácticas", "buenas prácticas", "prácticas recomendadas",
    "recommendations", "Recommendations", "recomendaciones", "Recomendaciones",
    "best strategy", "effective approach", "optimal content", "content strategy",
    "strategy for", "tips for", "tactics",
    "Mejores Prácticas Actuales", "Prácticas efectivas", "Estrategias efectivas",
]

# Older research formats without a best-practices section still pass on these
ALTERNATIVE_QUALITY_MARKERS = [
    "Tendencias", "tendencias", "Trends", "trends",
    "Key Points", "key points", "Puntos Clave", "puntos clave",
]


class ResearchQualityError(ValueError):
    """Research text failed validation before content generation."""

    def __init__(self, issues: list[str]):
        self.issues = issues
        super().__init__(f"Research quality check failed: {', '.join(issues)}")


def verify_research_quality(research_data: str, now: datetime | None = None) -> dict:
    """{valid, issues} for research about to be used as a content brief."""
    issues = []
    if len(research_data) < MIN_RESEARCH_LENGTH:
        issues.append("Research data is too short to be meaningful")

    if not any(term in research_data for term in BEST_PRACTICES_TERMS):
        if any(marker in research_data for marker in ALTERNATIVE_QUALITY_MARKERS):
            logger.debug("Research has alternative quality markers (trends/key points)")
        else:
            issues.append("Research data does not include best practices information")

    year = (now or datetime.now()).year
    if str(year) not in research_data:
        issues.append(f"Research data may not include recent information ({year})")

    return {"valid": not issues, "issues": issues}


def guard_research(data: dict) -> dict | None:
    """Request-level gate for content generation bodies.

    Returns None when the body is acceptable, otherwise an error payload
    `{error, message}` to send back with a 400.
    """
    research = data.get("researchData")
    if not research or not isinstance(research, str) or len(research) < MIN_GUARDED_RESEARCH_LENGTH:
        logger.warning("Research data missing or insufficient in content generation request")
        return {
            "error": "Research data required",
            "message": "Content generation requires research data to follow the research-driven architecture",
        }
    if not data.get("contentType") or not data.get("platform") or not data.get("audience"):
        logger.warning("Missing required parameters in content generation request")
        return {
            "error": "Missing required parameters",
            "message": "Content generation requires contentType, platform, and audience parameters",
        }
    return None


_CONTEXT_PATTERNS = {
    "audience": re.compile(r"Target Audience: ([^,]+)", re.IGNORECASE),
    "content_type": re.compile(r"Content Type: ([^,]+)", re.IGNORECASE),
    "platform": re.compile(r"(?<!Sub-)Platform: ([^,]+)", re.IGNORECASE),
    "sub_platform": re.compile(r"Sub-Platform: ([^,]+)", re.IGNORECASE),
}


def parse_research_context(context: str | None, defaults: dict | None = None) -> dict:
    """Pull audience / content type / platform / sub-platform out of a context string.

    Context looks like "Target Audience: founders, Content Type: blog-post,
    Platform: social, Sub-Platform: linkedin".
    """
    parsed = {"audience": "", "content_type": "", "platform": "", "sub_platform": ""}
    parsed.update(defaults or {})
    if context:
        for key, pattern in _CONTEXT_PATTERNS.items():
            match = pattern.search(context)
            if match:
                parsed[key] = match.group(1).strip()
    return parsed


_THINKING_PATTERNS = [
    re.compile(r"<thinking>[\s\S]*?</thinking>"),
    re.compile(r"<thinking[\s\S]*?thinking>"),
    re.compile(r"<think>[\s\S]*?</think>"),
    re.compile(r"<think[\s\S]*?think>"),
]


def remove_thinking_tags(text: str) -> str:
    if not text:
        return ""
    for pattern in _THINKING_PATTERNS:
        text = pattern.sub("", text)
    return text


# ---------------------------------------------------------------------------
# Claude research
# ---------------------------------------------------------------------------

def generate_claude_research(
    topic: str,
    context: str = "",
    language: str = "en",
    trending_topics: list | None = None,
) -> dict:
    """Five-section research brief from Claude.

    Returns {research, model, platform, subPlatform, using}. A 'social'
    platform resolves to the sub-platform, or facebook when none is given.
    """
    if not topic:
        raise ValueError("Missing required parameter: topic")

    ctx = parse_research_context(context)
    platform, sub_platform = ctx["platform"], ctx["sub_platform"]
    if platform.lower() == "social":
        platform = sub_platform or "facebook"

    prompt_ctx = parse_research_context(context, {
        "audience": "general audience",
        "content_type": "content",
        "platform": "general digital platform",
    })
    prompt_platform = prompt_ctx["platform"]
    if prompt_platform.lower() == "social" and prompt_ctx["sub_platform"]:
        prompt_platform = prompt_ctx["sub_platform"]

    prompt = build_claude_research_prompt(
        topic,
        audience=prompt_ctx["audience"],
        content_type=prompt_ctx["content_type"],
        platform=prompt_platform,
        sub_platform=prompt_ctx["sub_platform"],
        trending_topics=trending_topics,
        language=language or "en",
    )

    conf = config.get_task_llm_config("claude_research")
    logger.info("Claude research: topic=%r platform=%s sub=%s", topic, platform, sub_platform)
    research = llm.call_task("claude_research", CLAUDE_RESEARCH_SYSTEM, prompt)
    return {
        "research": remove_thinking_tags(research),
        "model": conf["model"],
        "platform": platform,
        "subPlatform": sub_platform,
        "using": "real",
    }


# ---------------------------------------------------------------------------
# Perplexity deep research
# ---------------------------------------------------------------------------

_COMPANY_RE = re.compile(r'company-specific information about "(.*?)"', re.IGNORECASE)
_TOPIC_RE = re.compile(r'topic:\s*"([^"]+)"', re.IGNORECASE)
_SHORT_NAME_RE = re.compile(r"^(\w+)(\s+\w+){0,2}$")


def extract_company_name(prompt: str) -> str:
    """Company the research prompt is about, or ''.

    Explicit company research wins; otherwise a topic of one to three words
    (and not "X for Y") is taken to be a company name.
    """
    match = _COMPANY_RE.search(prompt)
    if match:
        return match.group(1)
    match = _TOPIC_RE.search(prompt)
    if match:
        candidate = match.group(1)
        if _SHORT_NAME_RE.match(candidate) and " for " not in candidate:
            return candidate
    return ""


def _prompt_creator_type(prompt: str) -> str:
    if "COMPANY RESEARCH STRUCTURE" in prompt:
        return "business"
    if "PERSONAL BRAND RESEARCH STRUCTURE" in prompt:
        return "personal_brand"
    if "EXPERT RESEARCH STRUCTURE" in prompt:
        return "expert"
    if "CREATOR CONTENT RESEARCH STRUCTURE" in prompt:
        return "hobbyist"
    return "general"


def _company_instructions(company: str, language: str) -> str:
    slug = re.sub(r"\s+", "", company.lower())
    if language == "es":
        return f"""INSTRUCCIONES DE INVESTIGACIÓN DE EMPRESAS OBLIGATORIAS:
1. PRIMERO Y MÁS IMPORTANTE: Visita el sitio web oficial de {company} en https://www.{slug}.com (también prueba .net, .org, .co si .com no funciona)
2. SIEMPRE verifica la página de empresa en LinkedIn en https://www.linkedin.com/company/{slug}/
3. SIEMPRE revisa los perfiles de redes sociales: Facebook, Twitter/X, Instagram
4. Busca nombres específicos de productos, ingredientes, precios y características únicas
5. Encuentra artículos de noticias recientes y comunicados de prensa sobre {company}
6. Identifica a los ejecutivos clave y sus antecedentes
7. Busca reseñas y testimonios de clientes
8. Compara con 2-3 competidores para destacar los diferenciadores

Para cada sección de investigación, DEBES incluir información específica sobre {company} ANTES de analizar las tendencias generales de la industria.

REQUISITO DE CITACIÓN: Para CADA información específica de la empresa que proporciones, DEBES indicar explícitamente dónde la encontraste:
- "Según el sitio web oficial de {company}..."
- "De su página de empresa en LinkedIn..."
- "Según lo indicado en su publicación de Facebook con fecha..."
- "Según el perfil del CEO..."

PARA CADA PRODUCTO O SERVICIO de {company} mencionado, incluye al menos 3 detalles específicos como:
- Nombre exacto del producto
- Precio (si está disponible)
- Ingredientes o componentes clave
- Público objetivo
- Beneficios clave que afirma la empresa
- Propuestas únicas de venta

DEBES citar directamente de los materiales de la empresa cuando sea relevante."""

    return f"""MANDATORY COMPANY RESEARCH INSTRUCTIONS:
1. FIRST AND MOST IMPORTANT: Visit the official website of {company} at https://www.{slug}.com (also try .net, .org, .co if .com doesn't work)
2. ALWAYS check LinkedIn company page at https://www.linkedin.com/company/{slug}/
3. ALWAYS look at social media profiles: Facebook, Twitter/X, Instagram
4. Look for specific product names, ingredients, pricing, and unique features
5. Find recent news articles and press releases about {company}
6. Identify key executives and their backgrounds
7. Look for customer reviews and testimonials
8. Compare with 2-3 competitors to highlight differentiators

For each research section, you MUST include specific information about {company} BEFORE discussing general industry trends.

CRITICAL: YOU MUST PROVIDE DIRECT EVIDENCE OF CHECKING THESE SOURCES BY STATING:
- "Upon examining {company}'s official website (www.{slug}.com), I found the following specific information: [DETAILS]"
- "According to {company}'s LinkedIn company page, [SPECIFIC DETAILS]"
- "{company}'s Facebook page shows [SPECIFIC DETAILS]"

The first section of your research MUST be titled "Company-Specific Information" and contain AT LEAST 300 words of information EXCLUSIVELY from {company}'s website and social media. This is a FIRM REQUIREMENT.

CITATION REQUIREMENT: For EACH piece of company-specific information you provide, you MUST explicitly state where you found it:
- "According to {company}'s official website..."
- "From their LinkedIn company page..."
- "As stated in their Facebook post dated..."
- "According to the CEO's profile..."

FOR EVERY PRODUCT OR SERVICE from {company} mentioned, include at least 3 specific details such as:
- Exact product name
- Price point (if available)
- Key ingredients or components
- Target audience
- Key benefits claimed by the company
- Unique selling propositions

You MUST directly quote from company materials where relevant."""


_RESEARCH_KIND = {
    "business": "company",
    "personal_brand": "personal brand",
    "expert": "expert",
    "hobbyist": "creator content",
}

_PROFILE_SUBJECT = {"business": "company", "personal_brand": "creator", "expert": "expert"}

_SPECIFIC_DETAILS = {
    "business": [
        "Actual product names exactly as shown in the scraped content",
        "Pricing information from the scraped content (if available)",
        "Company history details from the scraped content",
    ],
    "personal_brand": [
        "Service offerings and methodologies from the scraped content",
        "Unique approach and philosophy from the scraped content",
        "Client outcomes or testimonials from the scraped content",
    ],
    "expert": [
        "Methodologies and frameworks from the scraped content",
        "Areas of specialized knowledge from the scraped content",
        "Key contributions or innovations from the scraped content",
    ],
}

_GENERAL_DETAILS = [
    "Techniques and approaches from the scraped content",
    "Content themes and style elements from the scraped content",
    "Creative philosophy or unique elements from the scraped content",
]

GENERAL_RESEARCH_SYSTEM = (
    "You are a research assistant that provides comprehensive, accurate, and detailed responses based on "
    "the latest available information. When provided with specific user data like scraped websites, "
    "transcripts, or image analysis, you MUST prioritize and heavily reference that information in your response."
)


def perplexity_system_prompt(prompt: str, language: str = "en") -> str:
    """System prompt for deep research, company-focused when the prompt names a company."""
    company = extract_company_name(prompt)
    if not company:
        return GENERAL_RESEARCH_SYSTEM

    kind = _prompt_creator_type(prompt)
    is_business = kind == "business"
    details = "\n".join(f"- {d}" for d in _SPECIFIC_DETAILS.get(kind, _GENERAL_DETAILS))
    owner = f"{company}'s" if is_business else "the creator's/expert's"
    return f"""You are a highly specialized research assistant focused on providing comprehensive, accurate, and detailed {_RESEARCH_KIND.get(kind, 'general')} research.

{_company_instructions(company, language)}

CRITICAL RESEARCH PROCESS: You must follow these steps IN ORDER:
1. Start by USING THE SCRAPED WEBSITE CONTENT I HAVE PROVIDED - this is your most authoritative source
2. MANDATORY: You MUST quote directly from the scraped website content I've provided
3. If I've provided website content, do NOT rely on your own knowledge of the {'company' if is_business else 'creator/expert'} - use what I've given you
4. For any analytical section, reference specific details from the scraped website content I provided

STRICT REQUIREMENT: Your response MUST begin with a section that focuses on the {_PROFILE_SUBJECT.get(kind, 'creator')} profile and information from the scraped data.

STRICT FORMAT FOR CITATIONS:
"According to the scraped content from {owner} website: [direct quote from the provided scraped content]"
"From the website content I provided: [specific details from scraped content]"

Your research MUST contain SPECIFIC DETAILS from the scraped website content including:
{details}
- Direct quotes from the scraped website paragraphs (marked as quotes)
- At least 15-20 explicit references to the scraped website content throughout your research

AT LEAST 60% of your research MUST focus specifically on {company}, using the scraped website data I've provided. Your research will be considered INCOMPLETE if it doesn't extensively cite and quote from the scraped website content."""


def generate_perplexity_research(
    topic: str,
    context: str = "",
    sources: list[str] | None = None,
    language: str = "en",
    company_name: str = "",
    website_content: dict | None = None,
) -> str:
    """Deep research from Perplexity. Retries and backoff live in pipeline.llm."""
    if not topic:
        raise ValueError("Topic is required")

    ctx = parse_research_context(context, {
        "audience": "general audience",
        "content_type": "article",
        "platform": "general",
    })
    prompt = get_prompt_for_topic(
        topic,
        audience=ctx["audience"],
        content_type=ctx["content_type"],
        platform=ctx["platform"],
        sources=sources or ["recent", "scholar"],
        language=language,
        company_name=company_name,
        website_content=website_content,
    )
    system = perplexity_system_prompt(prompt, language)
    logger.info(
        "Perplexity research: topic=%r audience=%s platform=%s company=%s website=%s",
        topic, ctx["audience"], ctx["platform"], bool(company_name), bool(website_content),
    )
    return llm.call_task("perplexity_research", system, prompt)


def research_error_response(exc: Exception) -> tuple[int, str]:
    """Map a research failure onto (status, user-facing message)."""
    message = str(exc) or "Unknown error occurred while generating research"
    lower = message.lower()
    if isinstance(exc, LLMTimeoutError) or "timeout" in lower:
        return 504, "The research generation timed out. Please try again with a more specific topic."
    if "rate limit" in lower or "429" in message:
        return 429, "Rate limit exceeded. Please try again later."
    if "authentication" in lower or "401" in message:
        return 401, "Authentication error with research service. Please check your API key."
    return 500, message
