"""Research prompts for Perplexity deep research and Claude research.

`get_prompt_for_topic` builds the long Perplexity prompt: scraped website
data first, then user-provided context, then a research structure picked
by what kind of creator the website belongs to (business, personal brand,
expert, hobbyist).
"""

from __future__ import annotations

import logging
from datetime import datetime

logger = logging.getLogger(__name__)

CREATOR_TYPES = ("business", "personal_brand", "expert", "hobbyist")

SOURCE_LABELS = {
    "recent": "recent information",
    "scholar": "scholarly articles",
    "news": "news sources",
}

RULE = "===================="


def _website_text(website: dict | None, include_title: bool = False) -> str:
    if not website:
        return ""
    parts = [website.get("title", "")] if include_title else []
    parts += list(website.get("headings") or [])
    parts += _paragraphs(website)
    parts.append(website.get("aboutContent") or "")
    return " ".join(parts).lower()


def _paragraphs(website: dict) -> list[str]:
    paragraphs = website.get("paragraphs")
    if paragraphs:
        return list(paragraphs)
    content = website.get("content") or ""
    return [line for line in content.split("\n") if len(line.strip()) > 40]


def detect_content_type(website: dict | None, company_name: str = "") -> str:
    """Classify the research subject from its website.

    Each creator type collects signal points from keyword hits; the top
    scorer wins, 'business' when nothing fires or there is no website.
    """
    if not website:
        return "business"

    text = _website_text(website)
    title = (website.get("title") or "").lower()
    signals = {"business": 0, "personal_brand": 0, "expert": 0, "hobbyist": 0}

    if any(word in title for word in ("coach", "trainer", "consultant", "expert", "specialist")):
        signals["personal_brand"] += 2
    if any(p in text for p in ("i help", "my clients", "my services", "my approach", "my philosophy")):
        signals["personal_brand"] += 3
    if any(p in text for p in ("research", "publication", "methodology", "framework", "approach")):
        signals["expert"] += 2
    if any(p in text for p in ("recipe", "craft", "diy", "hobby", "passion")):
        signals["hobbyist"] += 3
    if any(p in text for p in ("our team", "our company", "our products", "founded in", "our mission")):
        signals["business"] += 2
    if website.get("pricingInfo") or any(p in text for p in ("pricing", "subscription", "package")):
        signals["business"] += 2

    logger.debug("Content type detection signals: %s", signals)
    best = max(signals, key=lambda k: signals[k])
    return best if signals[best] > 0 else "business"


def _first_match(text: str, table: list[tuple[tuple[str, ...], str]], default: str) -> str:
    for keywords, label in table:
        if any(k in text for k in keywords):
            return label
    return default


def detect_creator_title(website: dict | None) -> str:
    if not website:
        return "professional"
    return _first_match(_website_text(website, include_title=True), [
        (("coach", "coaching"), "coach"),
        (("trainer", "training"), "trainer"),
        (("consultant",), "consultant"),
        (("therapist", "therapy"), "therapist"),
        (("designer",), "designer"),
        (("instructor",), "instructor"),
        (("mentor",), "mentor"),
        (("speaker",), "speaker"),
        (("influencer",), "influencer"),
        (("creator",), "creator"),
    ], "professional")


def detect_expert_field(website: dict | None) -> str:
    if not website:
        return "subject"
    return _first_match(_website_text(website, include_title=True), [
        (("technology", "tech", "software", "ai"), "technology"),
        (("health", "medical", "wellness"), "health and wellness"),
        (("finance", "invest", "money"), "finance"),
        (("business", "entrepreneur", "startup"), "business"),
        (("education", "learning", "teaching"), "education"),
        (("psychology", "mental health"), "psychology"),
    ], "specialized knowledge")


def detect_hobby_type(website: dict | None) -> str:
    if not website:
        return "creative"
    return _first_match(_website_text(website, include_title=True), [
        (("cook", "recipe", "food", "bake"), "cooking"),
        (("craft", "diy", "handmade"), "crafting"),
        (("travel", "destination", "journey"), "travel"),
        (("garden", "plant", "grow"), "gardening"),
        (("photography", "photo", "camera"), "photography"),
        (("art", "paint", "draw"), "art"),
        (("blog", "write", "author"), "writing"),
    ], "creative")


def _quote(text: str, limit: int) -> str:
    return f'"{text[:limit]}{"..." if len(text) > limit else ""}"'


def website_data_prompt(website: dict | None, company_name: str = "") -> str:
    """Scraped website block, the highest-priority source in the prompt."""
    if not website:
        return ""
    owner = f"{company_name}'s" if company_name else "the subject's"
    headings = website.get("headings") or []
    heading_lines = "\n".join(f"- {h}" for h in headings[:15]) or "None found"

    subpages = website.get("subpagesScraped") or []
    if len(subpages) > 1:
        pages = "\n".join(f"- {url}" for url in subpages[:10])
        coverage = f"The website was scraped across {len(subpages)} pages including:\n{pages}"
    else:
        coverage = "The main page of the website was analyzed."

    extras = []
    for key, label in (
        ("aboutContent", "About Content"),
        ("productInfo", "Product/Service Information"),
        ("pricingInfo", "Pricing Information"),
    ):
        if website.get(key):
            extras.append(f"{label}:\n{_quote(website[key], 800)}")
    if website.get("description"):
        extras.append(f"Meta Description:\n{_quote(website['description'], 800)}")

    paragraphs = _paragraphs(website)[:15]
    key_content = "\n\n".join(
        f"[Content {i}]: {_quote(p, 300)}" for i, p in enumerate(paragraphs, 1)
    ) or "None found"

    return f"""
SCRAPED WEBSITE DATA - MUST USE THIS INFORMATION - PRIORITY #1

I have performed a detailed scrape of {owner} website and collected the following information. This information is AUTHORITATIVE and MUST be used as the PRIMARY SOURCE for your research:

Website Title: "{website.get('title') or 'Not available'}"

Website Headings ({len(headings)} total):
{heading_lines}

{coverage}

{chr(10).join(extras)}

Key Content From The Website (MUST INCORPORATE THESE):
{key_content}

CRITICAL REQUIREMENT: You MUST directly quote from and cite this scraped website data in your research. For every section in your research, include at least 2-3 direct references to this website data using the format: "According to {owner} website: [direct quote]"

It is MANDATORY that you use the website content provided above as your PRIMARY SOURCE of information about {company_name or "the subject"}. This is factual data directly extracted from their official website.
"""


def _focus_block(creator_type: str, company_name: str, website: dict | None) -> str:
    """Per-creator-type requirements that open the research with a subject section."""
    if creator_type == "business":
        header = "COMPANY RESEARCH STRUCTURE REQUIREMENTS"
        focus = f'This research ABSOLUTELY MUST focus heavily on company-specific information about "{company_name}".'
        section = f"{company_name.upper()} COMPANY RESEARCH"
        contains = [
            "Company overview with founding date, mission, and leadership",
            "Specific details about 2-3 of their main products/services with exact names and pricing",
            "Direct quotes from their website (use the scraped content I provided)",
            "Information about their unique approach or differentiators",
        ]
        citation = [
            f"\"According to {company_name}'s official website...\" (include direct quotes from the scraped data)",
            f"\"Based on the scraped data from {company_name}'s website...\"",
        ]
        subject = f'"{company_name}"'
        per_item = "FOR EVERY PRODUCT OR SERVICE mentioned, include at least 3 specific details such as:"
        details = [
            "Exact product name (from the scraped website data)",
            "Price point (if available in the scraped data)",
            "Key ingredients or components (from the scraped data)",
            "Target audience (from the scraped data)",
            "Key benefits claimed by the company (from the scraped data)",
            "Unique selling propositions (from the scraped data)",
        ]
        specific = "company-specific"
    else:
        if creator_type == "personal_brand":
            header = "PERSONAL BRAND RESEARCH STRUCTURE REQUIREMENTS"
            focus = (
                "This research ABSOLUTELY MUST focus heavily on the creator's expertise, methodology, "
                f"and offerings as a {detect_creator_title(website)}."
            )
            section = "CREATOR PROFILE AND EXPERTISE"
            contains = [
                "The creator's background, philosophy, and area of expertise",
                "Specific details about their services, programs, or offerings",
                "Direct quotes from their website (use the scraped content I provided)",
                "Information about their unique methodology and approach",
            ]
            per_item = "FOR EVERY SERVICE OR OFFERING mentioned, include specific details such as:"
            details = [
                "Exact service name/title (from the scraped website data)",
                "Methodology or framework used (from the scraped data)",
                "Target client outcomes (from the scraped data)",
                "Client testimonials or results (if available in the scraped data)",
                "Unique approach or differentiation (from the scraped data)",
            ]
            subject = "this creator's work"
            specific = "creator-specific"
        elif creator_type == "expert":
            header = "EXPERT RESEARCH STRUCTURE REQUIREMENTS"
            focus = (
                "This research ABSOLUTELY MUST focus heavily on the expert's knowledge, methodology, "
                f"and contributions to the field of {detect_expert_field(website)}."
            )
            section = "EXPERT INSIGHTS AND METHODOLOGY"
            contains = [
                "The expert's background, credentials, and area of specialization",
                "Specific details about their methodologies, frameworks, or research",
                "Direct quotes from their website (use the scraped content I provided)",
                "Information about their key contributions and unique perspective",
            ]
            per_item = "FOR EVERY METHODOLOGY OR FRAMEWORK mentioned, include specific details such as:"
            details = [
                "Name of the methodology or framework (from the scraped website data)",
                "Core principles or components (from the scraped data)",
                "Application areas or use cases (from the scraped data)",
                "Evidence or results supporting it (if available in the scraped data)",
            ]
            subject = "this expert's work"
            specific = "expert-specific"
        else:
            header = "CREATOR CONTENT RESEARCH STRUCTURE REQUIREMENTS"
            focus = (
                f"This research ABSOLUTELY MUST focus heavily on the creator's {detect_hobby_type(website)} "
                "content, style, and creative approach."
            )
            section = "CREATOR STYLE AND APPROACH"
            contains = [
                "The creator's background and creative philosophy",
                "Specific details about their style, techniques, or signature elements",
                "Direct quotes from their website (use the scraped content I provided)",
                "Information about what makes their content unique or appealing",
            ]
            per_item = "FOR EVERY TECHNIQUE OR PROJECT mentioned, include specific details such as:"
            details = [
                "Materials or ingredients used (from the scraped website data)",
                "Process or methodology (from the scraped data)",
                "Visual style or presentation approach (from the scraped data)",
                "Audience engagement elements (from the scraped data)",
            ]
            subject = "this creator's work"
            specific = "creator-specific"
        citation = [
            "\"According to the creator's website...\" (include direct quotes from the scraped data)",
            "\"Based on the scraped data from the website...\"",
        ]

    contains_lines = "\n".join(f"{i}. {item}" for i, item in enumerate(contains, 1))
    citation_lines = "\n".join(f"- {item}" for item in citation)
    detail_lines = "\n".join(f"- {item}" for item in details)
    return f"""
{RULE}
{header} - FOLLOW EXACTLY
{RULE}

{focus}

YOU MUST START YOUR RESEARCH WITH A SECTION TITLED:
===== {section} =====

This first section must be AT LEAST 500 WORDS LONG and contain ONLY information derived from:
1. The scraped website data I've provided above (HIGHEST PRIORITY SOURCE)
2. Any additional user-provided data I've given you

This section must contain:
{contains_lines}

CITATION REQUIREMENT: For EACH piece of information, you MUST explicitly state its source, such as:
{citation_lines}

AT LEAST 60% of your research MUST focus specifically on {subject} - this is NON-NEGOTIABLE. For each section below, you MUST include specific information before discussing general industry trends.

{per_item}
{detail_lines}

If certain information is not available in the scraped data I provided, state this explicitly but still make your best effort to provide {specific} insights based on what IS available.

{RULE}"""


# Opening section of the structure and how later sections refer to the subject
_SUBJECT_SECTIONS = {
    "personal_brand": ("CREATOR PROFILE AND EXPERTISE", [
        "Background and qualifications (using the scraped data I provided)",
        "Service offerings and methodology (from the scraped website data)",
        "Philosophy and approach (from the scraped website data)",
    ], "the creator's approach"),
    "expert": ("EXPERT INSIGHTS AND METHODOLOGY", [
        "Background and credentials (using the scraped data I provided)",
        "Methodologies and frameworks (from the scraped website data)",
        "Key contributions to the field (from the scraped website data)",
    ], "the expert's work"),
    "hobbyist": ("CREATOR STYLE AND APPROACH", [
        "Creative background and inspiration (using the scraped data I provided)",
        "Techniques and signature elements (from the scraped website data)",
        "Content themes and subject matter (from the scraped website data)",
    ], "the creator's style"),
}


def research_structure(creator_type: str, name: str, platform: str, now: datetime) -> str:
    """Numbered REQUIRED sections plus the currency verification rules."""
    month, year = now.strftime("%B"), now.year
    formatted_date = f"{month} {now.day}, {year}"

    sections: list[tuple[str, list[str]]] = []
    subject_ref = ""
    if creator_type == "business" and name:
        sections.append((f"{name.upper()} COMPANY RESEARCH", [
            "Direct findings from their website (using the scraped data I provided)",
            "Specific products and services offered (from the scraped website data)",
            "Company history, mission, and executives (from the scraped website data)",
            "Direct quotes and specific details with citations (from the scraped website data)",
        ]))
        subject_ref = f"{name}'s current position and products"
    elif creator_type in _SUBJECT_SECTIONS:
        title, bullets, subject_ref = _SUBJECT_SECTIONS[creator_type]
        sections.append((title, bullets + ["Direct quotes and specific details with citations (from the scraped website data)"]))

    tail = f" (reference the scraped website data)" if subject_ref else ""

    def with_subject(bullets: list[str], extra: str) -> list[str]:
        return bullets + ([extra + tail] if subject_ref else [])

    sections += [
        (f"Current Significance ({month} {year})", with_subject([
            "Explain why this topic matters RIGHT NOW",
            "Highlight any major developments in the past 30-60 days",
            "Include 3-5 current statistics WITH PUBLICATION DATES",
        ], f"Specifically address how this relates to {subject_ref}")),
        ("Latest Trends and Developments (Past 90 Days)", with_subject([
            "Focus EXCLUSIVELY on trends that emerged or evolved in the past quarter",
            "Include exact figures and percentages from the most recent studies",
            "Note any significant shifts from previous industry assumptions",
        ], f"Identify how {subject_ref} aligns with these trends")),
        (f"Current Best Practices (As of {formatted_date})", with_subject([
            f"Detail what is working RIGHT NOW on {platform} for this type of content",
            "Specify which practices are newly effective (past 30-60 days)",
            "Highlight which older tactics have declined in effectiveness recently",
        ], f"Analyze whether {subject_ref} aligns with these best practices")),
        ("Actionable Recommendations", with_subject([
            "Provide specific tactics based ONLY on current research",
            "Include implementation guidance with expected outcomes",
            "Prioritize recommendations by potential impact",
        ], f"Tailor recommendations specifically for {subject_ref}")),
        ("Sources and Citations", with_subject([
            "List 5-8 high-quality sources WITH PUBLICATION DATES",
            "Focus heavily on sources published in the past 90 days",
            "Format citations properly with titles, authors, and dates",
        ], "Include specific citations of the website content")),
    ]

    body = "\n\n".join(
        f"### {i}. {title}\n" + "\n".join(f"- {b}" for b in bullets)
        for i, (title, bullets) in enumerate(sections, 1)
    )
    return f"""Structure the research with these REQUIRED sections:

{body}

{RULE}
CURRENCY VERIFICATION REQUIREMENT:
- EVERY statistic must include its publication date (Month Year)
- ALL best practices must indicate when they became effective or were last verified
- ANY information older than 6 months must be clearly flagged as potentially outdated
- Include a currency note at the beginning: "This research is current as of {formatted_date}"
- For any claim that cannot be verified with recent data, explicitly note this limitation"""


def language_instruction(language: str, what: str = "Your entire response") -> str:
    if language == "es":
        return "\n\nIMPORTANTE: Tu respuesta COMPLETA debe estar escrita en español. No uses inglés en absoluto. Esto incluye TODOS los encabezados, datos, estadísticas, citas y texto explicativo."
    if language != "en":
        return f"\n\nIMPORTANT: {what} MUST be written in {language}. Do not use English at all. This includes ALL headings, data points, citations, and explanatory text."
    return ""


def get_prompt_for_topic(
    topic: str,
    audience: str = "general audience",
    content_type: str = "article",
    platform: str = "general",
    depth: str = "comprehensive",
    sources: list[str] | None = None,
    additional_context: str = "",
    language: str = "en",
    company_name: str = "",
    website_content: dict | None = None,
    now: datetime | None = None,
) -> str:
    """Full deep-research prompt for Perplexity."""
    now = now or datetime.now()
    formatted_date = f"{now.strftime('%B')} {now.day}, {now.year}"
    sources_text = ", ".join(SOURCE_LABELS.get(s, s) for s in (sources or ["recent"]))
    creator_type = detect_content_type(website_content, company_name)

    prompt = f"""{RULE}
CRITICAL INSTRUCTION - YOU MUST USE THE PROVIDED USER DATA - DO NOT IGNORE THESE INSTRUCTIONS
{RULE}

Your task is to conduct a {'comprehensive' if depth == 'comprehensive' else 'basic'} analysis and deep research on the topic: "{topic}".

MOST IMPORTANT: I HAVE PROVIDED YOU WITH VERIFIED DATA THAT MUST BE INCORPORATED INTO YOUR RESEARCH. This data SUPERSEDES any information you might find through your own searches, as it is authoritative and directly from the source.

TODAY'S DATE IS {formatted_date}. Your research should be tailored for {audience} who are looking for content on {platform} in the form of a {content_type}.

"""
    if website_content:
        prompt += website_data_prompt(website_content, company_name)

    if additional_context and additional_context.strip():
        prompt += f"\n{RULE}\nADDITIONAL USER-PROVIDED DATA - MUST USE THIS INFORMATION - PRIORITY #2\n{RULE}\n\n"
        if "Q:" in additional_context and "A:" in additional_context:
            prompt += (
                f"FOLLOW-UP QUESTION ANSWERS (HIGHLY IMPORTANT USER INPUT):\n{additional_context}\n\n"
                "These follow-up answers represent direct input from the user about their specific needs and goals. "
                "This information is critical for tailoring the research and MUST be incorporated into your analysis "
                "and recommendations.\n"
            )
        else:
            prompt += additional_context
        prompt += (
            "\n\nThe information above comes directly from the user and must be considered authoritative. "
            f"You MUST incorporate insights from these inputs throughout your research.\n\n{RULE}"
        )

    if company_name or website_content:
        prompt += _focus_block(creator_type, company_name, website_content)

    prompt += f"""
{RULE}
RESEARCH REQUIREMENTS - FOLLOW EXACTLY
{RULE}

Ensure ALL information reflects current best practices and trends as of TODAY ({formatted_date}). Any information or best practices from even 3-4 months ago should be clearly labeled as potentially outdated.

Use {sources_text} to ensure accuracy and relevance, STRICTLY PRIORITIZING data sources published within the last 90 days. For ALL statistics or platform-specific information, you MUST include the publication date (month/year) to verify recency.

CRITICAL REMINDER: THE USER-PROVIDED DATA (website content, transcript, image analysis, document content, follow-up answers) MUST BE YOUR PRIMARY SOURCES. They are verified, current, and directly relevant to the research needs.

YOUR RESEARCH MUST BE BASED ON AND DIRECTLY CITE:
1. The scraped website data I've provided above (HIGHEST PRIORITY SOURCE)
2. YouTube transcript (if provided)
3. Direct quotes from their website (use the scraped content I provided)
4. Document content analysis (if provided)
5. Image analysis insights (if provided)
6. Answers to follow-up questions (if provided)

"""
    structure_type = creator_type if (company_name or website_content) else "generic"
    prompt += research_structure(structure_type, company_name, platform, now)
    prompt += language_instruction(language)

    if company_name:
        logger.info("Research prompt for %r as %s (%d chars)", company_name, creator_type, len(prompt))
    return prompt


def get_questions_prompt(
    topic: str,
    audience: str = "general audience",
    content_type: str = "article",
    platform: str = "general",
    language: str = "en",
    now: datetime | None = None,
) -> str:
    now = now or datetime.now()
    formatted_date = f"{now.strftime('%B')} {now.day}, {now.year}"
    prompt = f"""Generate 3 specific follow-up questions about the topic "{topic}" that would help create better {content_type} content for {audience} on {platform}.

These questions should:
1. Focus on CURRENT aspects of the topic as of {formatted_date}
2. Help uncover unique insights or perspectives relevant TODAY
3. Lead to information that would make the content more valuable to the audience
4. Specifically address recent developments or changes in the past 90 days

Format the response as a JSON array of strings containing only the questions."""
    if language == "es":
        prompt += "\n\nIMPORTANTE: Tus preguntas DEBEN estar escritas en español. No uses inglés en absoluto."
    elif language != "en":
        prompt += f"\n\nIMPORTANT: Your questions MUST be written in {language}. Do not use English at all."
    return prompt


def get_refinement_prompt(
    topic: str,
    research: str,
    questions: list[str],
    language: str = "en",
    now: datetime | None = None,
) -> str:
    """Ask for additional insights answering follow-up questions about existing research."""
    now = now or datetime.now()
    formatted_date = f"{now.strftime('%B')} {now.day}, {now.year}"
    questions_text = "\n".join(f"{i}. {q}" for i, q in enumerate(questions, 1))
    prompt = f'''Based on the following research about "{topic}", provide additional insights that specifically address these follow-up questions:

{questions_text}

Original Research:
"""
{research[:2000]}...
[truncated for brevity]
"""

Provide a concise, focused response to each question, drawing connections to the original research where relevant.

IMPORTANT: Ensure ALL information reflects current practices and trends as of {formatted_date}. Include publication dates for any statistics or data you reference.'''
    if language == "es":
        prompt += "\n\nIMPORTANTE: Tu respuesta COMPLETA debe estar escrita en español. No uses inglés en absoluto."
    elif language != "en":
        prompt += f"\n\nIMPORTANT: Your entire response MUST be written in {language}. Do not use English at all."
    return prompt


# ---------------------------------------------------------------------------
# Claude research
# ---------------------------------------------------------------------------

CLAUDE_RESEARCH_SYSTEM = (
    "You are a highly skilled research analyst who specializes in finding valuable insights and "
    "best practices for content creation based on trends and data. Your research is comprehensive, "
    "accurate, and designed to help content creators make data-driven decisions."
)

MAX_TRENDING_IN_PROMPT = 5


def _trending_section(trending_topics: list, date_string: str) -> str:
    topics = trending_topics[:MAX_TRENDING_IN_PROMPT]
    if not topics:
        return ""
    lines = [f"\nRELATED TRENDING TOPICS ({date_string}):"]
    for i, topic in enumerate(topics, 1):
        if isinstance(topic, dict):
            title, categories, summary = topic.get("title"), topic.get("categories"), topic.get("summary")
        else:
            title, categories, summary = topic.title, topic.categories, topic.summary
        # Request bodies may carry null, a bare string or non-string categories
        if isinstance(categories, str):
            categories = [categories]
        category_text = ", ".join(str(c) for c in categories or [] if c is not None)
        lines.append(f'{i}. "{title or ""}" - {category_text}')
        if summary:
            lines.append(f"   {summary}")
    lines.append("\nIncorporate insights from these trending topics where relevant.\n")
    return "\n".join(lines)


def build_claude_research_prompt(
    topic: str,
    audience: str = "general audience",
    content_type: str = "content",
    platform: str = "general digital platform",
    sub_platform: str = "",
    trending_topics: list | None = None,
    language: str = "en",
    now: datetime | None = None,
) -> str:
    """Five-section research brief prompt, English or Spanish."""
    now = now or datetime.now()
    date_string = now.strftime("%m/%d/%Y")
    month, year = now.strftime("%B"), now.year
    trending = _trending_section(trending_topics or [], date_string)

    if language == "es":
        specifically = f" (específicamente {sub_platform})" if sub_platform else ""
        return f"""Generar una investigación exhaustiva sobre "{topic}" para crear contenido digital.

FECHA: {date_string}
AUDIENCIA OBJETIVO: {audience}
TIPO DE CONTENIDO: {content_type}
PLATAFORMA: {platform}{specifically}

{trending}

Tu investigación debe incluir:

1. IMPORTANCIA ACTUAL ({month} {year}):
   - Por qué "{topic}" es relevante ahora
   - Tendencias actuales y datos relacionados
   - Contexto del mercado para {platform}

2. TENDENCIAS Y DESARROLLOS RECIENTES (Últimos 90 días):
   - Tendencias relevantes de la industria
   - Desarrollos recientes en la industria
   - Cambios en las suposiciones del consumidor

3. MEJORES PRÁCTICAS ACTUALES (A partir de {month} {year}):
   - Estrategias efectivas para {platform}
   - Ejemplos de contenido exitoso
   - Formatos que están funcionando bien

4. RECOMENDACIONES PROCESABLES:
   - Tácticas prioritarias para implementar
   - Temas específicos a cubrir
   - Elementos a evitar

5. FUENTES Y CITAS:
   - Fuentes confiables utilizadas para esta investigación
   - Informes o estudios específicos consultados

Prioriza insights específicos para {platform} y contenido optimizado para {audience}. Incluye datos y estadísticas actuales siempre que sea posible. Esta investigación se utilizará para crear contenido digital efectivo y actualizado."""

    specifically = f" (specifically {sub_platform})" if sub_platform else ""
    return f"""Generate comprehensive research on "{topic}" for digital content creation.

DATE: {date_string}
TARGET AUDIENCE: {audience}
CONTENT TYPE: {content_type}
PLATFORM: {platform}{specifically}

{trending}

Your research should include:

1. CURRENT SIGNIFICANCE ({month} {year}):
   - Why "{topic}" matters now
   - Current trends and related data
   - Market context for {platform}

2. RECENT TRENDS AND DEVELOPMENTS (Past 90 Days):
   - Relevant industry trends
   - Recent developments
   - Shifts in consumer assumptions

3. CURRENT BEST PRACTICES (As of {month} {year}):
   - Effective strategies for {platform}
   - Examples of successful content
   - Formats that are performing well

4. ACTIONABLE RECOMMENDATIONS:
   - Priority tactics to implement
   - Specific topics to cover
   - Elements to avoid

5. SOURCES AND CITATIONS:
   - Reliable sources used for this research
   - Specific reports or studies consulted

Prioritize platform-specific insights for {platform} and content optimized for {audience}. Include current data and statistics whenever possible. This research will be used to create effective, up-to-date digital content."""
