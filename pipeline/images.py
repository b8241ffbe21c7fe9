"""Gemini image generation and editing.

Images travel as base64: callers send raw base64 (no data: prefix) for
edits and get `data:<mime>;base64,...` URLs back.
"""

from __future__ import annotations

import base64
import logging
from typing import Any

import config
from pipeline.llm import LLMError, get_google_client

logger = logging.getLogger(__name__)

GENERATE_MODEL_LABEL = "Gemini 2.0 Flash Experimental"
EDIT_MODEL_LABEL = "Gemini 2.0 Flash Image Generation"
TEXT_ONLY_MODEL_LABEL = "Gemini 2.0 Flash (text only)"

# Base64 payloads above this size are described to the model as food photos
LARGE_SOURCE_IMAGE = 50_000

SAFETY_CATEGORIES = (
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
)

TEXT_ONLY_FEEDBACK = (
    "The image generation API returned only text, not an edited image. This might be because:\n\n"
    "1. Your API key may not have access to image generation capabilities (paid tier required)\n"
    "2. Your API access region may not support image generation\n"
    "3. The specific edit requested may not be supported by the model\n"
    "4. Image generation is still experimental and may not work for all prompts"
)


class ImageGenerationError(LLMError):
    """Gemini answered but produced no usable image."""


def _image_parts(response) -> tuple[list, list[str]]:
    """(inline image parts, text parts) of the first candidate."""
    candidates = response.candidates if response is not None and response.candidates else []
    content = candidates[0].content if candidates else None
    parts = content.parts if content is not None and content.parts else []
    images = []
    texts = []
    for part in parts:
        inline = getattr(part, "inline_data", None)
        mime = getattr(inline, "mime_type", "") or ""
        if inline is not None and mime.startswith("image/") and getattr(inline, "data", None):
            images.append(inline)
        elif getattr(part, "text", None):
            texts.append(part.text)
    return images, texts


def _data_url(mime_type: str, data: bytes | str) -> str:
    if isinstance(data, bytes):
        data = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{data}"


def generate_image(prompt: str, language: str = "en") -> dict[str, Any]:
    """Text-to-image. Returns {image, prompt, modelUsed}."""
    from google.genai import types

    if not prompt:
        raise ValueError("Se requiere un prompt" if language == "es" else "Prompt is required")

    formatted = (
        f"Generate a high quality, detailed image of: {prompt}. "
        "The image should be visually appealing and suitable for professional use."
    )
    client = get_google_client()
    logger.info("Gemini image generation: %d char prompt", len(prompt))
    try:
        response = client.models.generate_content(
            model=config.GEMINI_IMAGE_MODEL,
            contents=[types.Part.from_text(text=formatted)],
            config=types.GenerateContentConfig(
                temperature=0.4,
                top_p=1,
                top_k=32,
                max_output_tokens=4096,
                response_modalities=["TEXT", "IMAGE"],
                safety_settings=[
                    types.SafetySetting(category=category, threshold="BLOCK_MEDIUM_AND_ABOVE")
                    for category in SAFETY_CATEGORIES
                ],
            ),
        )
    except Exception as exc:
        logger.error("Gemini image generation failed: %s", exc)
        raise LLMError(str(exc), provider="google", model=config.GEMINI_IMAGE_MODEL, cause=exc) from exc

    if response is None:
        raise ImageGenerationError("No response received from Gemini", provider="google")
    if not response.candidates:
        raise ImageGenerationError("No content received from Gemini", provider="google")
    images, _ = _image_parts(response)
    if not images:
        raise ImageGenerationError("No image data received from Gemini", provider="google")

    return {
        "image": _data_url(images[0].mime_type, images[0].data),
        "prompt": formatted,
        "modelUsed": GENERATE_MODEL_LABEL,
    }


def _edit_error_message(message: str) -> str:
    if "PERMISSION_DENIED" in message or "insufficient permission" in message or "not available in your region" in message:
        return f"Gemini image generation requires a paid tier API key and supported region. Error: {message}"
    if "NOT_FOUND" in message:
        return (
            f"The requested model ({config.GEMINI_IMAGE_MODEL}) was not found. "
            "This is an experimental model and may require special access."
        )
    return f"Gemini image generation API error: {message}"


def edit_image(source_image: str, prompt: str, target_image: str = "") -> dict[str, Any]:
    """Edit a base64 JPEG according to `prompt`, optionally guided by a second image.

    When Gemini answers with text only (or fails), the source image is
    echoed back with `apiLimited: True` and an explanation.
    """
    from google.genai import types

    if not source_image or not prompt:
        raise ValueError("Missing required fields: sourceImage and prompt")

    client = get_google_client()
    if target_image:
        formatted = (
            f"Look at these images. I want you to edit them according to these instructions: {prompt}. "
            "Create a new image that applies these changes visually. Be creative and make the edits visible and realistic."
        )
    else:
        subject = "food" if len(source_image) > LARGE_SOURCE_IMAGE else "a scene"
        formatted = (
            f'Look at this image of {subject}. I want you to edit it according to these instructions: "{prompt}". '
            "Create a new version of this image that applies these changes visually. The edits should be obvious "
            "and realistic. Your task is to generate an edited image, not just describe how you would edit it."
        )

    parts = [
        types.Part.from_text(text=formatted),
        types.Part.from_bytes(data=base64.b64decode(source_image), mime_type="image/jpeg"),
    ]
    if target_image:
        parts.append(types.Part.from_bytes(data=base64.b64decode(target_image), mime_type="image/jpeg"))

    source_url = _data_url("image/jpeg", source_image)
    try:
        response = client.models.generate_content(
            model=config.GEMINI_IMAGE_MODEL,
            contents=parts,
            config=types.GenerateContentConfig(response_modalities=["TEXT", "IMAGE"]),
        )
        if response is None:
            raise ImageGenerationError("No response received from Gemini", provider="google")
    except Exception as exc:
        logger.error("Gemini image edit failed: %s", exc)
        return {
            "error": _edit_error_message(str(exc)),
            "prompt": prompt,
            "image": source_url,
            "apiLimited": True,
        }

    images, texts = _image_parts(response)
    text_response = "\n".join(texts)
    if images:
        return {
            "textResponse": text_response or "Image edited successfully.",
            "prompt": prompt,
            "image": _data_url(images[0].mime_type, images[0].data),
            "modelUsed": EDIT_MODEL_LABEL,
        }

    logger.warning("Gemini image edit returned text only")
    feedback = TEXT_ONLY_FEEDBACK
    if text_response:
        feedback += "\n\nAPI Response: " + text_response
        lower = text_response.lower()
        if "policy" in lower or "violate" in lower or "cannot generate" in lower:
            feedback = (
                "The requested edit may not be possible due to content policy restrictions. "
                "Please try a different edit or image.\n\nAPI Response: " + text_response
            )
    return {
        "textResponse": feedback,
        "prompt": prompt,
        "image": source_url,
        "modelUsed": TEXT_ONLY_MODEL_LABEL,
        "apiLimited": True,
    }
