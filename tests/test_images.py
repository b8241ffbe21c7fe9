from __future__ import annotations

import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

from pipeline import images
from pipeline.llm import LLMError

SOURCE = "aGVsbG8="  # base64 of b"hello"


def _part(text=None, mime_type=None, data=None):
    inline = SimpleNamespace(mime_type=mime_type, data=data) if mime_type else None
    return SimpleNamespace(text=text, inline_data=inline)


def _response(*parts):
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=list(parts)))])


def _client(response=None, error=None) -> MagicMock:
    client = MagicMock()
    if error is not None:
        client.models.generate_content.side_effect = error
    else:
        client.models.generate_content.return_value = response
    return client


class GenerateImageTests(unittest.TestCase):
    def test_returns_data_url(self):
        client = _client(_response(_part(text="Here you go"), _part(mime_type="image/png", data=b"\x89PNG")))
        with patch.object(images, "get_google_client", return_value=client):
            result = images.generate_image("a red bicycle")
        self.assertEqual(result["image"], "data:image/png;base64,iVBORw==")
        self.assertEqual(result["modelUsed"], images.GENERATE_MODEL_LABEL)
        self.assertTrue(result["prompt"].startswith("Generate a high quality, detailed image of: a red bicycle."))
        request_config = client.models.generate_content.call_args.kwargs["config"]
        self.assertEqual(request_config.temperature, 0.4)
        self.assertEqual(len(request_config.safety_settings), len(images.SAFETY_CATEGORIES))

    def test_prompt_required_in_spanish(self):
        with self.assertRaisesRegex(ValueError, "Se requiere un prompt"):
            images.generate_image("", language="es")

    def test_sdk_failure_wrapped(self):
        with patch.object(images, "get_google_client", return_value=_client(error=RuntimeError("quota"))):
            with self.assertRaisesRegex(LLMError, "quota"):
                images.generate_image("a red bicycle")

    def test_text_only_reply(self):
        with patch.object(images, "get_google_client", return_value=_client(_response(_part(text="I can't")))):
            with self.assertRaisesRegex(images.ImageGenerationError, "No image data"):
                images.generate_image("a red bicycle")

    def test_no_candidates(self):
        with patch.object(images, "get_google_client", return_value=_client(SimpleNamespace(candidates=[]))):
            with self.assertRaisesRegex(images.ImageGenerationError, "No content received"):
                images.generate_image("a red bicycle")


class EditImageTests(unittest.TestCase):
    def test_edited_image(self):
        client = _client(_response(_part(mime_type="image/jpeg", data=b"\xff\xd8")))
        with patch.object(images, "get_google_client", return_value=client):
            result = images.edit_image(SOURCE, "make it blue")
        self.assertEqual(result["textResponse"], "Image edited successfully.")
        self.assertEqual(result["image"], "data:image/jpeg;base64,/9g=")
        self.assertEqual(result["modelUsed"], images.EDIT_MODEL_LABEL)
        contents = client.models.generate_content.call_args.kwargs["contents"]
        self.assertEqual(len(contents), 2)
        self.assertIn("Look at this image of a scene", contents[0].text)

    def test_target_image_added(self):
        client = _client(_response(_part(mime_type="image/jpeg", data=b"\xff\xd8")))
        with patch.object(images, "get_google_client", return_value=client):
            images.edit_image(SOURCE, "swap backgrounds", target_image=SOURCE)
        contents = client.models.generate_content.call_args.kwargs["contents"]
        self.assertEqual(len(contents), 3)
        self.assertIn("Look at these images", contents[0].text)

    def test_text_only_echoes_source(self):
        client = _client(_response(_part(text="That would violate our policy.")))
        with patch.object(images, "get_google_client", return_value=client):
            result = images.edit_image(SOURCE, "make it blue")
        self.assertTrue(result["apiLimited"])
        self.assertEqual(result["image"], f"data:image/jpeg;base64,{SOURCE}")
        self.assertTrue(result["textResponse"].startswith("The requested edit may not be possible"))
        self.assertEqual(result["modelUsed"], images.TEXT_ONLY_MODEL_LABEL)

    def test_permission_error_is_api_limited(self):
        with patch.object(images, "get_google_client", return_value=_client(error=RuntimeError("403 PERMISSION_DENIED"))):
            result = images.edit_image(SOURCE, "make it blue")
        self.assertTrue(result["apiLimited"])
        self.assertIn("paid tier API key", result["error"])
        self.assertEqual(result["prompt"], "make it blue")

    def test_missing_fields(self):
        with self.assertRaisesRegex(ValueError, "sourceImage and prompt"):
            images.edit_image("", "make it blue")


if __name__ == "__main__":
    unittest.main()
