"""Content generation — drafts, persona switches, follow-up Q&A and refinement.

All writing goes to Claude through pipeline.llm. Drafts are post-processed:
persona names that belong to other personas are replaced, then the
selected persona's phrases and a statistic are spliced in.
"""

from __future__ import annotations

import json
import logging
import re

import config
from pipeline import llm
from pipeline.llm import LLMError, LLMTimeoutError
from pipeline.personas import (
    DEFAULT_STYLE,
    enhance_with_persona_traits,
    get_persona_display_name,
)
from pipeline.research import ResearchQualityError, verify_research_quality
from prompts.content_prompts import (
    FOLLOW_UP_SYSTEM,
    answer_system_prompt,
    build_answer_prompt,
    build_follow_up_prompt,
    build_persona_change_prompt,
    build_prompt,
    build_refinement_prompt,
    content_system_prompt,
    refinement_system_prompt,
)
from schemas.content import AnswerQuestionRequest, ContentDetails, FollowUpRequest, RefineRequest

logger = logging.getLogger(__name__)

MAX_PROMPT_LENGTH = 85_000
MAX_RESEARCH_LENGTH = 40_000
RESEARCH_KEEP = 15_000
CONDENSED_NOTE = "\n\n[NOTE: Research data has been condensed for length. Using beginning and end sections.]\n\n"

REFINE_INTENSITY = 1.5

TIMEOUT_MESSAGE = (
    "Claude API request timed out. This is likely due to the large size of research data. "
    "Please try again with more concise research or try breaking it into smaller sections."
)

PERSONA_NAME_RE = re.compile(
    r"\b(AriaStar|MentorPro|AIInsight|EcoEssence|DataStory|NexusVerse|TechTranslate|CommunityForge|SynthesisSage)\b",
    re.IGNORECASE,
)

DEFAULT_QUESTIONS = {
    "en": [
        "Could you provide more details about this topic?",
        "What are the most important implications of this content?",
        "How does this relate to current trends?",
        "What strategies would you recommend based on this information?",
        "How would you measure the success of these initiatives?",
    ],
    "es": [
        "¿Podría proporcionar más detalles sobre este tema?",
        "¿Cuáles son las implicaciones más importantes de este contenido?",
        "¿Cómo se relaciona esto con las tendencias actuales?",
        "¿Qué estrategias recomendaría basadas en esta información?",
        "¿Cómo mediría el éxito de estas iniciativas?",
    ],
}

# Used when the model returned something that looked like JSON but wasn't
FALLBACK_QUESTIONS = {
    "en": [
        "Could you elaborate more on this topic?",
        "What are the key takeaways from this content?",
        "How would you apply this information in a practical context?",
        "What challenges do you anticipate when implementing these ideas?",
        "What next steps would you recommend based on this information?",
    ],
    "es": [
        "¿Podría elaborar más sobre este tema?",
        "¿Cuáles son las principales conclusiones de este contenido?",
        "¿Cómo aplicaría esta información en un contexto práctico?",
        "¿Qué desafíos anticipa al implementar estas ideas?",
        "¿Qué pasos siguientes recomendaría basados en esta información?",
    ],
}

_JSON_ARRAY_RE = re.compile(r'\[\s*"[\s\S]*"\s*\]')
_NEXT_SECTION_RE = re.compile(r"\n\n[A-Z\s]+:")


class ContentValidationError(ValueError):
    """A content request is missing something it needs."""


def _require_api_key(message: str = "API key is not configured"):
    if not config.ANTHROPIC_API_KEY:
        raise LLMError(message, provider="anthropic")


def condense_research_in_prompt(prompt: str) -> str:
    """Shrink the RESEARCH DATA section of an oversized prompt.

    Only prompts over MAX_PROMPT_LENGTH are touched, and only when the
    research section itself exceeds MAX_RESEARCH_LENGTH; its first and last
    RESEARCH_KEEP characters are kept around a note.
    """
    if len(prompt) <= MAX_PROMPT_LENGTH:
        return prompt

    start_match = re.search(r"RESEARCH DATA:\s+", prompt)
    if not start_match:
        return prompt
    start = start_match.end()

    next_section = _NEXT_SECTION_RE.search(prompt, start)
    if not next_section:
        return prompt
    end = next_section.start()

    research = prompt[start:end]
    if len(research) <= MAX_RESEARCH_LENGTH:
        return prompt

    condensed = research[:RESEARCH_KEEP] + CONDENSED_NOTE + research[-RESEARCH_KEEP:]
    logger.info("Condensed research data from %d to %d characters", len(research), len(condensed))
    return prompt[:start] + condensed + prompt[end:]


def replace_foreign_persona_names(text: str, style: str) -> str:
    """Swap other personas' names for the selected persona's first name."""
    first_name = get_persona_display_name(style).split(" ")[0]

    def _swap(match: re.Match) -> str:
        name = match.group(0)
        if name.lower() == first_name.lower():
            return name
        logger.debug("Replacing persona name %s with %s", name, first_name)
        return first_name

    return PERSONA_NAME_RE.sub(_swap, text)


def validate_content_request(details: ContentDetails):
    if not details.content_type:
        raise ContentValidationError("Missing contentType in request")
    if not details.platform:
        raise ContentValidationError("Missing platform in request")
    if details.content_type != "transcription" and not details.research_data and not details.youtube_transcript:
        raise ContentValidationError(
            "Missing research data. For most content types, either researchData or youtubeTranscript is required."
        )
    if details.research_data and not details.youtube_transcript:
        check = verify_research_quality(details.research_data)
        if not check["valid"]:
            logger.warning("Research quality check failed: %s", check["issues"])
            raise ResearchQualityError(check["issues"])


def generate_content(details: ContentDetails) -> str:
    """Draft content (or re-voice existing content) and apply persona traits."""
    validate_content_request(details)
    _require_api_key()

    style = details.style or DEFAULT_STYLE
    if details.is_persona_change and details.previous_persona and details.previous_content:
        logger.info("Persona change: %s -> %s", details.previous_persona, style or details.persona)
        prompt = build_persona_change_prompt(details)
    else:
        prompt = build_prompt(details, details.research_data, details.youtube_transcript)

    prompt = condense_research_in_prompt(prompt)
    system = content_system_prompt(style, details.language)
    logger.info(
        "Generating content: type=%s platform=%s style=%s language=%s prompt=%d chars",
        details.content_type, details.platform, style, details.language, len(prompt),
    )

    try:
        text = llm.call_task("content", system, prompt)
    except LLMTimeoutError as exc:
        raise LLMTimeoutError(TIMEOUT_MESSAGE, provider=exc.provider, model=exc.model, cause=exc) from exc
    if not text:
        raise LLMError("Claude API returned empty content", provider="anthropic")

    text = replace_foreign_persona_names(text, style)
    return enhance_with_persona_traits(text, style, details.style_intensity, details.language)


def parse_questions(response: str, language: str = "en") -> list[str]:
    """Questions from a model reply: a JSON array, else lines ending in '?'."""
    lang = "es" if language == "es" else "en"
    match = _JSON_ARRAY_RE.search(response or "")
    if match:
        try:
            return json.loads(match.group(0))
        except json.JSONDecodeError as exc:
            logger.warning("Could not parse questions JSON: %s", exc)
            return list(FALLBACK_QUESTIONS[lang])

    questions = [line.strip() for line in (response or "").split("\n") if line.strip().endswith("?")]
    if questions:
        return questions[:5]
    return list(DEFAULT_QUESTIONS[lang])


def generate_follow_up_questions(req: FollowUpRequest) -> dict:
    if not req.content:
        raise ContentValidationError("Missing required field: content")
    _require_api_key("Anthropic API key not configured")
    system = FOLLOW_UP_SYSTEM["es" if req.language == "es" else "en"]
    response = llm.call_task("follow_up_questions", system, build_follow_up_prompt(req))
    questions = parse_questions(response, req.language)
    logger.info("Generated %d follow-up questions", len(questions))
    return {"questions": questions, "model": config.get_task_llm_config("follow_up_questions")["model"]}


def answer_question(req: AnswerQuestionRequest) -> dict:
    if not req.question:
        raise ContentValidationError("Missing required field: question")
    _require_api_key("Anthropic API key not configured")
    system = answer_system_prompt(req.language, has_content=bool(req.content))
    answer = llm.call_task("answer_question", system, build_answer_prompt(req))
    return {"answer": answer.strip(), "model": config.get_task_llm_config("answer_question")["model"]}


def refine_content(req: RefineRequest) -> str:
    """Revise content per user feedback, keeping the persona voice."""
    if not req.original_content:
        raise ContentValidationError("Missing originalContent in request")
    if not req.feedback:
        raise ContentValidationError("Missing feedback in request")
    _require_api_key()

    style = req.style or DEFAULT_STYLE
    spanish = req.is_spanish_mode
    prompt = build_refinement_prompt(
        req.original_content, req.feedback, req.content_type, style, spanish=spanish,
    )
    text = llm.call_task("refine_content", refinement_system_prompt(spanish), prompt)
    if not text:
        raise LLMError("No response text found in Claude API response", provider="anthropic")

    language = "es" if spanish else req.language
    return enhance_with_persona_traits(text, style, REFINE_INTENSITY, language)
