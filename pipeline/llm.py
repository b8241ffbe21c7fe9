"""LLM client — Anthropic (Claude) for writing, Perplexity for deep research, Gemini for images.

Each task (content, follow-up questions, research, ...) gets its provider,
model, temperature, token cap and timeout from config.TASK_LLM_CONFIG.

Includes built-in cost tracking: every LLM call records token usage and
calculates cost based on per-model pricing. Use reset_usage(), get_usage_log(),
and get_usage_summary() to access the accumulated data.

Error handling:
  - 400-level errors (bad request, auth) are NOT retried — they won't fix themselves.
  - 429 (rate limit), 5xx and connection errors ARE retried with exponential backoff.
  - Claude timeouts surface immediately as LLMTimeoutError; Perplexity timeouts
    are retried (deep research calls are long and flaky).
  - All errors are extracted into clean, readable messages.
"""

from __future__ import annotations

import logging
import threading
import time as _time
from typing import Any

import httpx
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

import config

logger = logging.getLogger(__name__)

PERPLEXITY_URL = "https://api.perplexity.ai/chat/completions"

# ---------------------------------------------------------------------------
# Cost tracking
# ---------------------------------------------------------------------------

# Pricing per 1M tokens: { model_prefix: (input_$/1M, output_$/1M) }
# Models are matched longest-prefix-first, so "claude-3-7-sonnet" matches before "claude-3".
MODEL_PRICING: dict[str, tuple[float, float]] = {
    # Anthropic
    "claude-opus-4":      (15.00,  75.00),
    "claude-sonnet-4":    (3.00,   15.00),
    "claude-3-7-sonnet":  (3.00,   15.00),
    "claude-3-5-sonnet":  (3.00,   15.00),
    "claude-3-5-haiku":   (0.80,    4.00),
    "claude-3-haiku":     (0.25,    1.25),
    # Perplexity
    "sonar-deep-research": (2.00,   8.00),
    "sonar-pro":          (3.00,   15.00),
    "sonar":              (1.00,    1.00),
    # Google
    "gemini-2.0-flash":   (0.10,    0.40),
}

# Fallback pricing if a model isn't in the table (conservative estimate)
_FALLBACK_PRICING = (3.00, 15.00)

_usage_lock = threading.Lock()
_usage_log: list[dict[str, Any]] = []


def _get_pricing(model: str) -> tuple[float, float]:
    """Find pricing for a model by longest-prefix match."""
    best_match = ""
    for prefix in MODEL_PRICING:
        if model.startswith(prefix) and len(prefix) > len(best_match):
            best_match = prefix
    if best_match:
        return MODEL_PRICING[best_match]
    logger.warning("No pricing found for model '%s' — using fallback $%.2f/$%.2f per 1M", model, *_FALLBACK_PRICING)
    return _FALLBACK_PRICING


def _record_usage(provider: str, model: str, input_tokens: int, output_tokens: int):
    """Record a single LLM call's token usage and cost."""
    in_price, out_price = _get_pricing(model)
    cost = (input_tokens * in_price + output_tokens * out_price) / 1_000_000
    entry = {
        "provider": provider,
        "model": model,
        "input_tokens": input_tokens,
        "output_tokens": output_tokens,
        "cost": cost,
        "timestamp": _time.time(),
    }
    with _usage_lock:
        _usage_log.append(entry)
    logger.info(
        "Token usage: %s/%s — in=%d out=%d cost=$%.4f",
        provider, model, input_tokens, output_tokens, cost,
    )


def reset_usage():
    """Clear all accumulated usage data."""
    with _usage_lock:
        _usage_log.clear()


def get_usage_log() -> list[dict[str, Any]]:
    """Return a copy of the full usage log."""
    with _usage_lock:
        return list(_usage_log)


def get_usage_summary() -> dict[str, Any]:
    """Return aggregated cost and token totals."""
    with _usage_lock:
        entries = list(_usage_log)
    total_input = sum(e["input_tokens"] for e in entries)
    total_output = sum(e["output_tokens"] for e in entries)
    total_cost = sum(e["cost"] for e in entries)
    return {
        "total_input_tokens": total_input,
        "total_output_tokens": total_output,
        "total_tokens": total_input + total_output,
        "total_cost": round(total_cost, 4),
        "calls": len(entries),
    }


# ---------------------------------------------------------------------------
# Error helpers
# ---------------------------------------------------------------------------

class LLMError(Exception):
    """Clean error from an LLM call with a human-readable message."""

    def __init__(self, message: str, provider: str = "", model: str = "", cause: Exception | None = None):
        self.provider = provider
        self.model = model
        self.cause = cause
        super().__init__(message)


class LLMTimeoutError(LLMError):
    """The provider did not answer within the task's timeout."""


def _is_retryable(exc: BaseException) -> bool:
    """Return True if the error is transient and worth retrying.

    We retry on:
      - Rate limits (429)
      - Server errors (500, 502, 503, 529)
      - Connection errors
    We do NOT retry on:
      - Claude timeouts (the caller reports them to the user instead)
      - 400 Bad Request (invalid params, won't fix itself)
      - 401/403 Auth errors (key is wrong)
      - 404 (model doesn't exist)
    """
    from anthropic import (
        APIConnectionError as AnthropicConnError,
        APITimeoutError as AnthropicTimeout,
        InternalServerError as AnthropicInternal,
        RateLimitError as AnthropicRateLimit,
    )

    # APITimeoutError subclasses APIConnectionError, so check it first
    if isinstance(exc, AnthropicTimeout):
        return False
    if isinstance(exc, (AnthropicRateLimit, AnthropicInternal, AnthropicConnError)):
        return True

    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        return status == 429 or status >= 500
    if isinstance(exc, httpx.TimeoutException):
        return False
    if isinstance(exc, httpx.TransportError):
        return True

    if isinstance(exc, ConnectionError):
        return True

    return False


def _is_perplexity_retryable(exc: BaseException) -> bool:
    """Perplexity retries network failures and timeouts as well as 429/5xx."""
    if isinstance(exc, httpx.TransportError):
        return True
    return _is_retryable(exc)


def _is_timeout(exc: BaseException) -> bool:
    from anthropic import APITimeoutError as AnthropicTimeout

    return isinstance(exc, (AnthropicTimeout, httpx.TimeoutException, TimeoutError))


def _extract_error_message(exc: Exception, provider: str, model: str) -> str:
    """Pull out a clean, human-readable error message from an API exception."""

    msg = str(exc)

    from anthropic import (
        AuthenticationError as AnthropicAuth,
        BadRequestError as AnthropicBadReq,
        NotFoundError as AnthropicNotFound,
        RateLimitError as AnthropicRateLimit,
    )
    if isinstance(exc, AnthropicBadReq):
        return f"[{provider}/{model}] Bad request: {msg}"
    if isinstance(exc, AnthropicAuth):
        return f"[{provider}] Authentication failed — check your ANTHROPIC_API_KEY."
    if isinstance(exc, AnthropicNotFound):
        return f"[{provider}] Model '{model}' not found."
    if isinstance(exc, AnthropicRateLimit):
        return f"[{provider}/{model}] Rate limit exceeded (429)."

    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        body = exc.response.text[:300]
        if status == 401:
            return f"[{provider}] Authentication failed (401) — check your API key."
        if status == 429:
            return f"[{provider}/{model}] Rate limit exceeded (429)."
        return f"[{provider}/{model}] API error: {status} - {body}"

    if _is_timeout(exc):
        return f"[{provider}/{model}] Request timeout"

    # Generic fallback: truncate very long messages
    if len(msg) > 300:
        msg = msg[:300] + "..."
    return f"[{provider}/{model}] {msg}"


# ---------------------------------------------------------------------------
# Provider clients (lazy-init singletons)
# ---------------------------------------------------------------------------

_anthropic_client = None
_google_client = None


def _get_anthropic():
    global _anthropic_client
    if _anthropic_client is None:
        if not config.ANTHROPIC_API_KEY:
            raise LLMError(
                "ANTHROPIC_API_KEY is not set. Add it to your .env file.",
                provider="anthropic",
            )
        import anthropic
        _anthropic_client = anthropic.Anthropic(api_key=config.ANTHROPIC_API_KEY)
    return _anthropic_client


def get_google_client():
    """Return the shared google-genai client used for image generation."""
    global _google_client
    if _google_client is None:
        if not config.GEMINI_API_KEY:
            raise LLMError(
                "GEMINI_API_KEY environment variable is not set",
                provider="google",
            )
        from google import genai
        _google_client = genai.Client(api_key=config.GEMINI_API_KEY)
    return _google_client


# ---------------------------------------------------------------------------
# Provider-specific call implementations
# ---------------------------------------------------------------------------

def _call_anthropic(
    system_prompt: str,
    user_prompt: str,
    model: str,
    temperature: float,
    max_tokens: int,
    timeout: float,
) -> str:
    client = _get_anthropic()

    started = _time.time()
    response = client.messages.create(
        model=model,
        max_tokens=max_tokens,
        temperature=temperature,
        system=system_prompt,
        messages=[{"role": "user", "content": user_prompt}],
        timeout=timeout,
    )

    content = "".join(
        block.text for block in response.content if getattr(block, "type", "text") == "text"
    )
    in_tok = response.usage.input_tokens or 0
    out_tok = response.usage.output_tokens or 0
    _record_usage("anthropic", model, in_tok, out_tok)
    logger.info(
        "Anthropic [%s]: %d chars in %.1fs, in=%d out=%d",
        model, len(content), _time.time() - started, in_tok, out_tok,
    )
    return content


def _call_perplexity(
    system_prompt: str,
    user_prompt: str,
    model: str,
    temperature: float,
    max_tokens: int,
    timeout: float,
) -> str:
    if not config.PERPLEXITY_API_KEY:
        raise LLMError(
            "Perplexity API key not configured. Please contact support.",
            provider="perplexity",
            model=model,
        )

    started = _time.time()
    response = httpx.post(
        PERPLEXITY_URL,
        headers={
            "Content-Type": "application/json",
            "Authorization": f"Bearer {config.PERPLEXITY_API_KEY}",
        },
        json={
            "model": model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "max_tokens": max_tokens,
            "temperature": temperature,
        },
        timeout=timeout,
    )
    response.raise_for_status()
    data = response.json()

    choices = data.get("choices") or []
    content = ""
    if choices and choices[0].get("message"):
        content = choices[0]["message"].get("content") or ""
    if not content:
        raise LLMError(
            "No research content found in API response",
            provider="perplexity",
            model=model,
        )

    usage = data.get("usage") or {}
    _record_usage("perplexity", model, usage.get("prompt_tokens", 0) or 0, usage.get("completion_tokens", 0) or 0)
    logger.info("Perplexity [%s]: %d chars in %.1fs", model, len(content), _time.time() - started)
    return content


# Provider dispatch
_PROVIDERS = {
    "anthropic": _call_anthropic,
    "perplexity": _call_perplexity,
}


@retry(
    retry=retry_if_exception(_is_retryable),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=2, max=30),
    reraise=True,
)
def _call_with_retry(call_fn, *args) -> str:
    return call_fn(*args)


# Perplexity backoff: three retries after 1s, 2s, 4s (capped at 8s)
@retry(
    retry=retry_if_exception(_is_perplexity_retryable),
    stop=stop_after_attempt(4),
    wait=wait_exponential(multiplier=1, min=1, max=8),
    reraise=True,
)
def _call_with_research_retry(call_fn, *args) -> str:
    return call_fn(*args)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def call_llm(
    system_prompt: str,
    user_prompt: str,
    provider: str = "anthropic",
    model: str | None = None,
    temperature: float = 0.7,
    max_tokens: int = 4_000,
    timeout: float = 180,
) -> str:
    """Call an LLM and return raw text. Provider-agnostic.

    Retries on transient errors (rate limits, server errors).
    Raises LLMTimeoutError when the provider does not answer in time and
    LLMError for everything else.
    """
    model = model or config.DEFAULT_MODEL
    call_fn = _PROVIDERS.get(provider)
    if not call_fn:
        raise LLMError(
            f"Unknown provider: '{provider}'. Available: {list(_PROVIDERS.keys())}",
            provider=provider,
            model=model,
        )

    runner = _call_with_research_retry if provider == "perplexity" else _call_with_retry
    logger.info("LLM call: provider=%s, model=%s, temp=%.1f, timeout=%ss", provider, model, temperature, timeout)
    try:
        return runner(call_fn, system_prompt, user_prompt, model, temperature, max_tokens, timeout)
    except LLMError:
        raise
    except Exception as exc:
        clean_msg = _extract_error_message(exc, provider, model)
        logger.error("LLM call failed: %s", clean_msg)
        if _is_timeout(exc):
            raise LLMTimeoutError(clean_msg, provider=provider, model=model, cause=exc) from exc
        raise LLMError(clean_msg, provider=provider, model=model, cause=exc) from exc


def call_task(task: str, system_prompt: str, user_prompt: str, **overrides) -> str:
    """Call the LLM configured for a task in config.TASK_LLM_CONFIG."""
    conf = {**config.get_task_llm_config(task), **overrides}
    return call_llm(
        system_prompt,
        user_prompt,
        provider=conf["provider"],
        model=conf["model"],
        temperature=conf["temperature"],
        max_tokens=conf["max_tokens"],
        timeout=conf["timeout"],
    )
