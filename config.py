"""DeepContent configuration — API keys, per-task model assignments, trending sources, paths."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
ROOT_DIR = Path(__file__).parent
OUTPUT_DIR = ROOT_DIR / os.getenv("OUTPUT_DIR", "outputs")
CONTENT_DB_PATH = ROOT_DIR / os.getenv("CONTENT_DB", "deepcontent.db")

# ---------------------------------------------------------------------------
# Vendor API Keys
# ---------------------------------------------------------------------------
ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY", "")
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "") or os.getenv("GOOGLE_API_KEY", "")
PERPLEXITY_API_KEY = os.getenv("PERPLEXITY_API_KEY", "")

# Trending sources
REDDIT_CLIENT_ID = os.getenv("REDDIT_CLIENT_ID", "")
REDDIT_CLIENT_SECRET = os.getenv("REDDIT_CLIENT_SECRET", "")
TWITTER_API_KEY = os.getenv("TWITTER_API_KEY", "")
TWITTER_API_SECRET = os.getenv("TWITTER_API_SECRET", "")
RSS_FEED_URLS = os.getenv("RSS_FEED_URLS", "")

# ---------------------------------------------------------------------------
# Model names (centralized so they're easy to update)
# ---------------------------------------------------------------------------
CLAUDE_MODEL = os.getenv("CLAUDE_MODEL", "claude-3-7-sonnet-20250219")
PERPLEXITY_MODEL = os.getenv("PERPLEXITY_MODEL", "sonar-deep-research")
GEMINI_IMAGE_MODEL = os.getenv("GEMINI_IMAGE_MODEL", "gemini-2.0-flash-exp-image-generation")

DEFAULT_PROVIDER = os.getenv("DEFAULT_PROVIDER", "anthropic")
DEFAULT_MODEL = os.getenv("DEFAULT_MODEL", CLAUDE_MODEL)

# ---------------------------------------------------------------------------
# Per-Task Model Assignments
#
# Each task can specify: provider, model, temperature, max_tokens, timeout.
# Providers: "anthropic", "perplexity"
# Override any task via env: CONTENT_PROVIDER=anthropic
#                            CONTENT_MODEL=claude-sonnet-4-20250514
# ---------------------------------------------------------------------------

TASK_LLM_CONFIG: dict[str, dict] = {
    # Main content draft: long research prompts, long output
    "content": {
        "provider": os.getenv("CONTENT_PROVIDER", DEFAULT_PROVIDER),
        "model": os.getenv("CONTENT_MODEL", CLAUDE_MODEL),
        "temperature": 0.7,
        "max_tokens": 4_000,
        "timeout": 180,
    },
    "follow_up_questions": {
        "provider": os.getenv("FOLLOW_UP_QUESTIONS_PROVIDER", DEFAULT_PROVIDER),
        "model": os.getenv("FOLLOW_UP_QUESTIONS_MODEL", CLAUDE_MODEL),
        "temperature": 0.7,
        "max_tokens": 1_000,
        "timeout": 60,
    },
    "answer_question": {
        "provider": os.getenv("ANSWER_QUESTION_PROVIDER", DEFAULT_PROVIDER),
        "model": os.getenv("ANSWER_QUESTION_MODEL", CLAUDE_MODEL),
        "temperature": 0.7,
        "max_tokens": 1_000,
        "timeout": 60,
    },
    "refine_content": {
        "provider": os.getenv("REFINE_CONTENT_PROVIDER", DEFAULT_PROVIDER),
        "model": os.getenv("REFINE_CONTENT_MODEL", CLAUDE_MODEL),
        "temperature": 0.7,
        "max_tokens": 4_000,
        "timeout": 180,
    },
    # Research reports: factual, structured
    "claude_research": {
        "provider": os.getenv("CLAUDE_RESEARCH_PROVIDER", DEFAULT_PROVIDER),
        "model": os.getenv("CLAUDE_RESEARCH_MODEL", CLAUDE_MODEL),
        "temperature": 0.5,
        "max_tokens": 4_000,
        "timeout": 180,
    },
    # Deep research: slow, web-grounded
    "perplexity_research": {
        "provider": "perplexity",
        "model": os.getenv("PERPLEXITY_RESEARCH_MODEL", PERPLEXITY_MODEL),
        "temperature": 0.2,
        "max_tokens": 4_000,
        "timeout": 360,
    },
}


def get_task_llm_config(task: str) -> dict:
    """Return the LLM config for a specific task, with defaults."""
    defaults = {
        "provider": DEFAULT_PROVIDER,
        "model": DEFAULT_MODEL,
        "temperature": 0.7,
        "max_tokens": 4_000,
        "timeout": 180,
    }
    task_conf = TASK_LLM_CONFIG.get(task, {})
    return {**defaults, **task_conf}


# ---------------------------------------------------------------------------
# Server
# ---------------------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
# Reject content requests without ≥50 chars of research or without contentType/platform/audience
ENFORCE_RESEARCH_GUARD = os.getenv("ENFORCE_RESEARCH_GUARD", "false").lower() in ("1", "true", "yes")
# Topics pulled from the sources before relevance ranking trims to the response size
TRENDING_FETCH_LIMIT = int(os.getenv("TRENDING_FETCH_LIMIT", "50"))
SERVER_HOST = os.getenv("SERVER_HOST", "0.0.0.0")
SERVER_PORT = int(os.getenv("SERVER_PORT", "8000"))

# Ensure output dir exists
OUTPUT_DIR.mkdir(exist_ok=True)
