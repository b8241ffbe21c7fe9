"""DeepContent — Web Server.

FastAPI backend exposing the research, content, image, trending and
content-library routes used by the browser client.

Usage:
    python server.py
    # Then call http://localhost:8000/api/...
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

import config
from pipeline import content as content_pipeline
from pipeline import images, scraper, storage
from pipeline.content_detection import analyze_research_data, analyze_text_for_cta
from pipeline.llm import LLMError
from pipeline.relevance import rank_topics
from pipeline.research import (
    generate_claude_research,
    generate_perplexity_research,
    guard_research,
    research_error_response,
)
from pipeline.trending import ALL_SOURCES, get_trending_topics
from prompts.best_practices import (
    format_content_type_best_practices,
    format_platform_best_practices,
    get_content_type_best_practices,
    get_content_type_quick_tips,
    get_platform_best_practices,
    get_platform_quick_tips,
)
from schemas.content import AnswerQuestionRequest, ContentDetails, FollowUpRequest, RefineRequest
from schemas.trending import TrendingResult

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)


def _check_api_keys() -> list[str]:
    """Check which provider keys are configured. Returns list of warnings."""
    warnings = []
    if not config.ANTHROPIC_API_KEY:
        warnings.append("ANTHROPIC_API_KEY is not set — content generation and Claude research will fail!")
    if not config.PERPLEXITY_API_KEY:
        warnings.append("PERPLEXITY_API_KEY is not set — deep research is unavailable")
    if not config.GEMINI_API_KEY:
        warnings.append("GEMINI_API_KEY is not set — image generation is unavailable")
    if not (config.REDDIT_CLIENT_ID and config.REDDIT_CLIENT_SECRET):
        warnings.append("REDDIT_CLIENT_ID / REDDIT_CLIENT_SECRET are not set — Reddit trending is skipped")
    if not (config.TWITTER_API_KEY and config.TWITTER_API_SECRET):
        warnings.append("TWITTER_API_KEY / TWITTER_API_SECRET are not set — X trending is skipped")
    if not config.RSS_FEED_URLS:
        warnings.append("RSS_FEED_URLS is not set — RSS trending is skipped")
    return warnings


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    storage.init_db()
    key_warnings = _check_api_keys()
    if key_warnings:
        logger.warning("=" * 60)
        logger.warning("API KEY WARNINGS:")
        for w in key_warnings:
            logger.warning("  • %s", w)
        logger.warning("Copy .env.example to .env and add your keys:")
        logger.warning("  cp .env.example .env")
        logger.warning("=" * 60)
    else:
        logger.info("API keys: all providers configured")
    yield


app = FastAPI(title="DeepContent", version="1.0.0", lifespan=lifespan)


class _CamelRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


async def _run_blocking(fn, *args, **kwargs):
    loop = asyncio.get_event_loop()
    return await loop.run_in_executor(None, lambda: fn(*args, **kwargs))


def _error(error: str, status_code: int, **extra) -> JSONResponse:
    return JSONResponse({"error": error, **extra}, status_code=status_code)


# ---------------------------------------------------------------------------
# Trending
# ---------------------------------------------------------------------------

class TrendingRequest(_CamelRequest):
    business_type: str = ""
    sources: list[str] = Field(default_factory=lambda: list(ALL_SOURCES))
    limit: int = 10


def _trending_payload(result: TrendingResult) -> dict:
    return {
        "topics": [t.to_api() for t in result.topics],
        "sources": result.sources.model_dump(),
        "timestamp": result.timestamp.isoformat(),
    }


async def _trending(business_type: str, sources, limit: int):
    try:
        result = await _run_blocking(
            get_trending_topics, business_type, limit=config.TRENDING_FETCH_LIMIT, sources=sources,
        )
    except Exception as e:
        logger.exception("Trending request failed")
        return _error(f"Failed to process trending request: {e}", 500, topics=[])

    if not result.topics:
        payload = _trending_payload(result)
        payload["error"] = "No trending topics found from any source"
        return JSONResponse(payload, status_code=404)

    result.topics = rank_topics(result.topics, business_type, limit=limit)
    logger.info("Returning %d trending topics for %r", len(result.topics), business_type)
    return _trending_payload(result)


@app.get("/api/trending")
async def api_trending(businessType: str = "", sources: str = ",".join(ALL_SOURCES), limit: int = 10):
    """Trending topics ranked by relevance. ?businessType=...&sources=reddit,rss,x"""
    return await _trending(businessType, sources, limit)


@app.post("/api/trending")
async def api_trending_post(req: TrendingRequest):
    return await _trending(req.business_type, req.sources, req.limit)


# ---------------------------------------------------------------------------
# Claude: content, questions, refinement
# ---------------------------------------------------------------------------

@app.post("/api/claude/content")
async def api_claude_content(req: ContentDetails):
    """Generate platform content from research data or a transcript."""
    if config.ENFORCE_RESEARCH_GUARD:
        rejection = guard_research(req.model_dump(by_alias=True))
        if rejection:
            return JSONResponse(rejection, status_code=400)

    try:
        text = await _run_blocking(content_pipeline.generate_content, req)
    except ValueError as e:
        return _error(str(e), 400)
    except LLMError as e:
        logger.error("Content generation failed: %s", e)
        return _error(str(e), 500)
    return {"content": text}


@app.post("/api/claude/follow-up-questions")
async def api_follow_up_questions(req: FollowUpRequest):
    try:
        return await _run_blocking(content_pipeline.generate_follow_up_questions, req)
    except ValueError as e:
        return _error(str(e), 400)
    except LLMError as e:
        logger.error("Follow-up questions failed: %s", e)
        return _error(str(e), 500)


@app.post("/api/claude/answer-question")
async def api_answer_question(req: AnswerQuestionRequest):
    try:
        return await _run_blocking(content_pipeline.answer_question, req)
    except ValueError as e:
        return _error(str(e), 400)
    except LLMError as e:
        logger.error("Answer question failed: %s", e)
        return _error(str(e), 500)


@app.post("/api/claude/refine-content")
async def api_refine_content(req: RefineRequest):
    try:
        text = await _run_blocking(content_pipeline.refine_content, req)
    except ValueError as e:
        return _error(str(e), 400)
    except LLMError as e:
        logger.error("Refinement failed: %s", e)
        return _error(str(e), 500)
    return {"content": text}


# ---------------------------------------------------------------------------
# Research
# ---------------------------------------------------------------------------

class ClaudeResearchRequest(_CamelRequest):
    topic: str = ""
    context: str = ""
    trending_topics: list[dict[str, Any]] = Field(default_factory=list)
    language: str = "en"


@app.post("/api/claude/research")
async def api_claude_research(req: ClaudeResearchRequest):
    if not req.topic:
        return _error(
            "Missing required parameter: topic", 400,
            message="A topic must be provided for research generation",
        )
    if not config.ANTHROPIC_API_KEY:
        return _error(
            "No Claude API key configured", 500,
            message="Please set the ANTHROPIC_API_KEY environment variable to use Claude research generation",
        )

    try:
        return await _run_blocking(
            generate_claude_research, req.topic, req.context, req.language, req.trending_topics,
        )
    except LLMError as e:
        logger.error("Claude research failed: %s", e)
        return _error(
            f"Claude API error: {e}", 500,
            message="Failed to generate research with Claude API. Please check your API key and try again.",
        )


class PerplexityResearchRequest(_CamelRequest):
    topic: str = ""
    context: str = ""
    sources: list[str] = Field(default_factory=lambda: ["recent", "scholar"])
    language: str = "en"
    company_name: str = ""
    website_content: Optional[dict[str, Any]] = None


@app.post("/api/perplexity/research")
async def api_perplexity_research(req: PerplexityResearchRequest):
    """Deep research. Slow: the upstream call may take several minutes."""
    if not req.topic:
        return _error("Topic is required", 400)
    if not config.PERPLEXITY_API_KEY:
        return _error("Perplexity API key not configured. Please contact support.", 500)

    try:
        research = await _run_blocking(
            generate_perplexity_research,
            req.topic,
            req.context,
            sources=req.sources,
            language=req.language,
            company_name=req.company_name,
            website_content=req.website_content,
        )
    except Exception as e:
        logger.error("Perplexity research failed: %s", e)
        status, message = research_error_response(e)
        return _error(message, status)
    return {"research": research}


class AnalyzeRequest(_CamelRequest):
    research_data: str = ""
    audience: str = ""


@app.post("/api/research/analyze")
async def api_research_analyze(req: AnalyzeRequest):
    """Recommend content types and platforms for a piece of research."""
    return {
        "recommendations": analyze_research_data(req.research_data, req.audience),
        "hasCallToAction": analyze_text_for_cta(req.research_data),
    }


@app.get("/api/best-practices")
async def api_best_practices(platform: str = "", contentType: str = ""):
    if not platform and not contentType:
        return _error("platform or contentType is required", 400)
    result: dict[str, Any] = {}
    if platform:
        result["platform"] = {
            "name": platform,
            "practices": get_platform_best_practices(platform),
            "quickTips": get_platform_quick_tips(platform),
            "markdown": format_platform_best_practices(platform),
        }
    if contentType:
        result["contentType"] = {
            "name": contentType,
            "practices": get_content_type_best_practices(contentType),
            "quickTips": get_content_type_quick_tips(contentType),
            "markdown": format_content_type_best_practices(contentType),
        }
    return result


class ScrapeRequest(_CamelRequest):
    url: str = ""
    max_pages: int = scraper.MAX_PAGES
    max_depth: int = scraper.MAX_DEPTH


@app.post("/api/scrape-website")
async def api_scrape_website(req: ScrapeRequest):
    """Crawl a company website for research context."""
    try:
        url = scraper.normalize_url(req.url)
    except ValueError as e:
        return _error(str(e), 400, success=False)

    try:
        data = await _run_blocking(scraper.scrape_website, url, req.max_pages, req.max_depth)
    except ValueError as e:
        return _error(str(e), 500, success=False, url=url)
    return {"success": True, "url": url, "data": data}


# ---------------------------------------------------------------------------
# Gemini images
# ---------------------------------------------------------------------------

class GenerateImageRequest(_CamelRequest):
    prompt: str = ""
    language: str = "en"


@app.post("/api/gemini/generate-image")
async def api_generate_image(req: GenerateImageRequest):
    try:
        return await _run_blocking(images.generate_image, req.prompt, req.language)
    except ValueError as e:
        return _error(str(e), 400)
    except LLMError as e:
        logger.error("Image generation failed: %s", e)
        prefix = "Error al generar la imagen" if req.language == "es" else "Error generating image"
        return _error(f"{prefix}: {e}", 500)


class EditImageRequest(_CamelRequest):
    source_image: str = ""
    target_image: str = ""
    prompt: str = ""


@app.post("/api/gemini/edit-image")
async def api_edit_image(req: EditImageRequest):
    """Edit an uploaded image. API limitations come back as 200 with apiLimited."""
    if not config.GEMINI_API_KEY:
        return _error("GEMINI_API_KEY environment variable is not set", 500)
    try:
        return await _run_blocking(images.edit_image, req.source_image, req.prompt, req.target_image)
    except ValueError as e:
        return _error(str(e), 400)
    except Exception as e:
        logger.exception("Image edit failed")
        message = str(e)
        limited = any(marker in message for marker in ("permission", "region", "NOT_FOUND", "API key"))
        return _error(f"Gemini AI Error: {message}", 500, apiLimited=limited)


# ---------------------------------------------------------------------------
# Content library (SQLite-backed)
# ---------------------------------------------------------------------------

def _item_payload(item) -> dict:
    return item.model_dump(by_alias=True, mode="json")


@app.post("/api/content")
async def api_save_content(body: dict[str, Any]):
    try:
        content_id = storage.save_content(body)
    except ValueError as e:
        return _error(str(e), 400)
    return {"ok": True, "id": content_id}


@app.get("/api/content")
async def api_list_content(
    userId: str = "",
    status: Optional[str] = None,
    contentType: Optional[str] = None,
    limit: Optional[int] = None,
):
    """A user's content, most recently updated first."""
    if not userId:
        return _error("userId is required", 400)
    items = storage.get_user_content(userId, status=status, content_type=contentType, limit=limit)
    return [_item_payload(i) for i in items]


@app.get("/api/content/search")
async def api_search_content(userId: str = "", q: str = ""):
    if not userId:
        return _error("userId is required", 400)
    return [_item_payload(i) for i in storage.search_user_content(userId, q)]


@app.get("/api/content/stats")
async def api_content_stats(userId: str = ""):
    if not userId:
        return _error("userId is required", 400)
    return storage.get_user_content_stats(userId)


@app.get("/api/content/{content_id}")
async def api_get_content(content_id: str):
    item = storage.get_content_by_id(content_id)
    if item is None:
        return _error(f"Content {content_id} not found", 404)
    return _item_payload(item)


@app.patch("/api/content/{content_id}")
async def api_update_content(content_id: str, body: dict[str, Any]):
    try:
        found = storage.update_content(content_id, body)
    except ValueError as e:
        return _error(str(e), 400)
    if not found:
        return _error(f"Content {content_id} not found", 404)
    return {"ok": True, "id": content_id}


@app.post("/api/content/{content_id}/archive")
async def api_archive_content(content_id: str):
    if not storage.archive_content(content_id):
        return _error(f"Content {content_id} not found", 404)
    return {"ok": True, "id": content_id, "status": "archived"}


@app.post("/api/content/{content_id}/restore")
async def api_restore_content(content_id: str):
    if not storage.restore_content(content_id):
        return _error(f"Content {content_id} not found", 404)
    return {"ok": True, "id": content_id, "status": "draft"}


@app.delete("/api/content/{content_id}")
async def api_delete_content(content_id: str):
    if not storage.delete_content(content_id):
        return _error(f"Content {content_id} not found", 404)
    return {"ok": True, "deleted": content_id}


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------

@app.get("/api/health")
async def api_health():
    """Check system health — API keys, trending sources, etc."""
    providers = {
        "anthropic": bool(config.ANTHROPIC_API_KEY),
        "perplexity": bool(config.PERPLEXITY_API_KEY),
        "google": bool(config.GEMINI_API_KEY),
    }
    trending = {
        "reddit": bool(config.REDDIT_CLIENT_ID and config.REDDIT_CLIENT_SECRET),
        "x": bool(config.TWITTER_API_KEY and config.TWITTER_API_SECRET),
        "rss": bool(config.RSS_FEED_URLS),
    }
    return {
        "ok": providers["anthropic"],
        "content_model": config.get_task_llm_config("content")["model"],
        "research_model": config.get_task_llm_config("perplexity_research")["model"],
        "providers": providers,
        "trending_sources": trending,
        "warnings": _check_api_keys(),
    }


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    import uvicorn
    print("\n  DeepContent API")
    print(f"  http://localhost:{config.SERVER_PORT}\n")
    uvicorn.run(app, host=config.SERVER_HOST, port=config.SERVER_PORT, log_level="info")
