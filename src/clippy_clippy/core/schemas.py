#!/usr/bin/env python3
"""
Wire Schemas for the Chat-Completion Endpoint

This module defines Pydantic models for the multimodal request body sent to an
OpenAI-compatible chat-completion endpoint and for the response documents it
may return, including the embedded error object.

This module is part of the Core Layer and should have no dependencies on
Presentation layer components.

Sample input:
- CompletionRequest(model="gpt-4-vision-preview", messages=[...], max_tokens=1024)
- '{"choices": [{"message": {"content": "HELLO"}, "finish_reason": "stop"}]}'

Expected output:
- {"model": ..., "messages": [{"role": "user", "content": [...]}], "max_tokens": 1024}
- CompletionResponse(choices=[Choice(...)], usage=None, error=None)
"""

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# Request

class TextPart(BaseModel):
    """Instruction text part of a user message."""
    type: Literal["text"] = "text"
    text: str


class ImageUrl(BaseModel):
    """Image reference; here always a data URI."""
    url: str
    detail: Optional[str] = Field(None, description="Image detail level: low, high or auto")


class ImagePart(BaseModel):
    """Image part of a user message."""
    type: Literal["image_url"] = "image_url"
    image_url: ImageUrl


class ChatMessage(BaseModel):
    role: str = "user"
    content: List[Union[TextPart, ImagePart]]


class CompletionRequest(BaseModel):
    """Schema for the chat-completion request body."""
    model: str = Field(..., description="Model identifier")
    messages: List[ChatMessage]
    max_tokens: int = Field(..., gt=0, description="Token budget for the reply")

    def to_payload(self) -> dict:
        """Return the JSON-ready body, omitting unset optional fields."""
        return self.model_dump(exclude_none=True)


# Response

class ResponseMessage(BaseModel):
    content: Optional[str] = None


class Choice(BaseModel):
    message: ResponseMessage
    finish_reason: Optional[str] = None


class Usage(BaseModel):
    """Token accounting reported by the endpoint."""
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class ApiErrorRecord(BaseModel):
    """Error object embedded in a response body."""
    model_config = ConfigDict(populate_by_name=True)

    message: str
    kind: Optional[str] = Field(None, alias="type")


class CompletionResponse(BaseModel):
    """
    Schema for a chat-completion response document.

    `choices` defaults to an empty list so that an error-only body such as
    {"error": {...}} still parses and its error record can be reported.
    """
    choices: List[Choice] = Field(default_factory=list)
    usage: Optional[Usage] = None
    error: Optional[ApiErrorRecord] = None
