"""
Request assembly for the vision endpoint.

Builds a single user message whose content is the instruction text followed
by the image, so the model always reads the task before the data.
"""

from clippy_clippy.core.constants import IMAGE_DETAIL, MARKDOWN_PROMPT, PLAIN_TEXT_PROMPT
from clippy_clippy.core.schemas import ChatMessage, CompletionRequest, ImagePart, ImageUrl, TextPart


def select_prompt(markdown: bool) -> str:
    """Return the markdown or plain-text instruction prompt."""
    return MARKDOWN_PROMPT if markdown else PLAIN_TEXT_PROMPT


def build_completion_request(
    encoded_image: str,
    markdown: bool,
    model: str,
    max_tokens: int
) -> CompletionRequest:
    """
    Assembles the multimodal chat-completion request.

    Args:
        encoded_image: PNG data URI
        markdown: Whether to ask for GitHub Flavored Markdown output
        model: Model identifier
        max_tokens: Token budget for the reply

    Returns:
        CompletionRequest: Request with text part first and image part second
    """
    return CompletionRequest(
        model=model,
        messages=[
            ChatMessage(
                role="user",
                content=[
                    TextPart(text=select_prompt(markdown)),
                    ImagePart(image_url=ImageUrl(url=encoded_image, detail=IMAGE_DETAIL)),
                ],
            )
        ],
        max_tokens=max_tokens,
    )
