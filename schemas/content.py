"""Content schemas — generation requests and stored content items.

Request models accept the camelCase keys the browser client sends
(contentType, researchData, ...) as well as snake_case field names.
Required-field checks happen in pipeline.content so the API can return
its own error messages instead of pydantic's.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ContentStatus = Literal["draft", "published", "archived"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ContentDetails(_CamelModel):
    """Body of a content-generation call."""

    content_type: str = ""
    platform: str = ""
    audience: str = ""
    prompt: str = ""
    context: str = ""
    research_data: str = ""
    youtube_transcript: str = ""
    youtube_url: str = ""
    style: str = "professional"
    language: str = "en"
    style_intensity: float = 1
    sub_platform: str = ""
    is_persona_change: bool = False
    previous_persona: str = ""
    previous_content: str = ""
    length: str = ""
    include_cta: bool = Field(default=False, alias="includeCTA")
    include_hashtags: bool = False
    business_type: str = ""
    business_name: str = ""
    research_topic: str = ""
    persona: str = ""


class FollowUpRequest(_CamelModel):
    content: str = ""
    research: str = ""
    transcript: str = ""
    content_type: str = "generic"
    platform: str = "generic"
    audience: str = "general audience"
    topic: str = ""
    language: str = "en"
    style: str = "professional"


class AnswerQuestionRequest(FollowUpRequest):
    question: str = ""


class RefineRequest(_CamelModel):
    original_content: str = ""
    feedback: str = ""
    content_type: str = ""
    platform: str = ""
    style: str = "professional"
    research_data: str = ""
    language: str = "en"
    is_spanish_mode: bool = False


class ContentItem(_CamelModel):
    """A piece of generated content saved to the repository."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    title: str
    content: str
    content_type: str = "general"
    platform: str = "other"
    sub_platform: str = ""
    persona: str = ""
    user_id: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    tags: list[str] = Field(default_factory=list)
    research_data: str = ""
    status: ContentStatus = "draft"
    media_urls: list[str] = Field(default_factory=list)
    style: str = ""
    length: str = ""
    language: str = "en"
    metadata: Optional[dict] = None
