from __future__ import annotations

import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import httpx

import config
from pipeline import llm


def _perplexity_response(content="Deep report", status=200) -> MagicMock:
    resp = MagicMock()
    if status >= 400:
        request = httpx.Request("POST", llm.PERPLEXITY_URL)
        resp.raise_for_status.side_effect = httpx.HTTPStatusError(
            f"HTTP {status}", request=request, response=httpx.Response(status, request=request, text="bad"),
        )
    resp.json.return_value = {
        "choices": [{"message": {"content": content}}],
        "usage": {"prompt_tokens": 1000, "completion_tokens": 500},
    }
    return resp


class PricingTests(unittest.TestCase):
    def test_longest_prefix_wins(self):
        self.assertEqual(llm._get_pricing("claude-3-5-haiku-20241022"), (0.80, 4.00))
        self.assertEqual(llm._get_pricing("sonar-deep-research"), (2.00, 8.00))

    def test_unknown_model_falls_back(self):
        self.assertEqual(llm._get_pricing("mystery-model"), llm._FALLBACK_PRICING)


class RetryClassificationTests(unittest.TestCase):
    def _status_error(self, status: int) -> httpx.HTTPStatusError:
        request = httpx.Request("POST", llm.PERPLEXITY_URL)
        return httpx.HTTPStatusError("x", request=request, response=httpx.Response(status, request=request))

    def test_status_codes(self):
        self.assertTrue(llm._is_retryable(self._status_error(429)))
        self.assertTrue(llm._is_retryable(self._status_error(503)))
        self.assertFalse(llm._is_retryable(self._status_error(400)))

    def test_timeouts(self):
        timeout = httpx.ReadTimeout("slow")
        self.assertFalse(llm._is_retryable(timeout))
        self.assertTrue(llm._is_perplexity_retryable(timeout))


class PerplexityCallTests(unittest.TestCase):
    def setUp(self):
        llm.reset_usage()
        self.key = patch.object(config, "PERPLEXITY_API_KEY", "test-key")
        self.key.start()
        self.no_sleep = patch.object(llm._call_with_research_retry.retry, "sleep", lambda seconds: None)
        self.no_sleep.start()

    def tearDown(self):
        self.no_sleep.stop()
        self.key.stop()
        llm.reset_usage()

    def test_success_records_usage(self):
        with patch.object(llm.httpx, "post", return_value=_perplexity_response()) as post:
            text = llm.call_task("perplexity_research", "system", "user")
        self.assertEqual(text, "Deep report")
        payload = post.call_args.kwargs["json"]
        self.assertEqual(payload["messages"][0], {"role": "system", "content": "system"})
        self.assertEqual(post.call_args.kwargs["headers"]["Authorization"], "Bearer test-key")
        summary = llm.get_usage_summary()
        self.assertEqual(summary["calls"], 1)
        self.assertEqual(summary["total_cost"], 0.006)

    def test_bad_request_not_retried(self):
        with patch.object(llm.httpx, "post", return_value=_perplexity_response(status=400)) as post:
            with self.assertRaisesRegex(llm.LLMError, "API error: 400"):
                llm.call_task("perplexity_research", "system", "user")
        self.assertEqual(post.call_count, 1)

    def test_server_error_retried(self):
        responses = [_perplexity_response(status=503), _perplexity_response(content="Second try")]
        with patch.object(llm.httpx, "post", side_effect=responses) as post:
            self.assertEqual(llm.call_task("perplexity_research", "system", "user"), "Second try")
        self.assertEqual(post.call_count, 2)

    def test_repeated_timeouts_raise_timeout_error(self):
        with patch.object(llm.httpx, "post", side_effect=httpx.ReadTimeout("slow")) as post:
            with self.assertRaises(llm.LLMTimeoutError):
                llm.call_task("perplexity_research", "system", "user")
        self.assertEqual(post.call_count, 4)

    def test_empty_content(self):
        with patch.object(llm.httpx, "post", return_value=_perplexity_response(content="")):
            with self.assertRaisesRegex(llm.LLMError, "No research content found"):
                llm.call_task("perplexity_research", "system", "user")

    def test_missing_key(self):
        with patch.object(config, "PERPLEXITY_API_KEY", ""), patch.object(llm.httpx, "post") as post:
            with self.assertRaisesRegex(llm.LLMError, "Perplexity API key not configured"):
                llm.call_task("perplexity_research", "system", "user")
        post.assert_not_called()


class AnthropicCallTests(unittest.TestCase):
    def setUp(self):
        llm.reset_usage()

    def tearDown(self):
        llm.reset_usage()

    def test_text_blocks_joined_and_task_settings_used(self):
        client = MagicMock()
        client.messages.create.return_value = SimpleNamespace(
            content=[SimpleNamespace(type="text", text="Hello "), SimpleNamespace(type="text", text="world")],
            usage=SimpleNamespace(input_tokens=10, output_tokens=5),
        )
        with patch.object(llm, "_get_anthropic", return_value=client):
            text = llm.call_llm("system", "user", provider="anthropic", model="claude-3-7-sonnet-20250219",
                                temperature=0.5, max_tokens=1_000, timeout=60)
        self.assertEqual(text, "Hello world")
        kwargs = client.messages.create.call_args.kwargs
        self.assertEqual(kwargs["system"], "system")
        self.assertEqual(kwargs["temperature"], 0.5)
        self.assertEqual(kwargs["max_tokens"], 1_000)
        self.assertEqual(llm.get_usage_log()[0]["input_tokens"], 10)

    def test_unknown_provider(self):
        with self.assertRaisesRegex(llm.LLMError, "Unknown provider"):
            llm.call_llm("system", "user", provider="nobody")

    def test_task_config_defaults(self):
        conf = config.get_task_llm_config("not-a-task")
        self.assertEqual(conf["max_tokens"], 4_000)
        self.assertEqual(config.get_task_llm_config("perplexity_research")["provider"], "perplexity")


if __name__ == "__main__":
    unittest.main()
