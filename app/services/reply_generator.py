import logging
from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from app.config import get_settings
from app.models.reply import ReplyRequest

logger = logging.getLogger(__name__)

TEMPERATURE = 0.8

_generator: "ReplyGenerator | None" = None


class ReplyGeneratorError(Exception):
    """Base error for failures reported by the completion endpoint."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ApiError(ReplyGeneratorError):
    """Raised when the endpoint answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(ReplyGeneratorError):
    """Raised when a 2xx body carries neither output.text nor result."""

    def __init__(self, message: str = "Malformed API response"):
        super().__init__(message)


@dataclass(frozen=True)
class ReplyGeneratorConfig:
    api_key: str
    app_id: str
    base_url: str
    timeout_seconds: float = 60.0


class CompletionBody(BaseModel):
    # Either field may hold anything; only non-empty strings count as text.
    output: Any = None
    result: Any = None

    @property
    def output_text(self) -> str | None:
        if isinstance(self.output, dict):
            text = self.output.get("text")
            if isinstance(text, str) and text:
                return text
        return None

    @property
    def result_text(self) -> str | None:
        if isinstance(self.result, str) and self.result:
            return self.result
        return None


@dataclass(frozen=True)
class CompletionText:
    source: str  # "output" or "result"
    text: str


def decode_completion(data: Any) -> CompletionText:
    """
    Pick the generated text out of a completion body.

    output.text is preferred, result is the fallback. Empty strings count as
    missing.

    Raises:
        MalformedResponseError: If neither field holds text.
    """
    try:
        body = CompletionBody.model_validate(data)
    except ValidationError as exc:
        raise MalformedResponseError() from exc

    output_text = body.output_text
    if output_text is not None:
        return CompletionText(source="output", text=output_text.strip())
    result_text = body.result_text
    if result_text is not None:
        return CompletionText(source="result", text=result_text.strip())
    raise MalformedResponseError()


def build_prompt(request: ReplyRequest) -> str:
    return f"""You are an expert at replying to customer reviews on behalf of merchants. Write one high-quality reply to the review below.

[Business information]
- Brand name: {request.brand_name}
- Category: {request.category}
- Brand features: {request.features}

[Customer review]
{request.review}

[Reply requirements]
- Tone: {request.tone.value}
- Length: about {int(request.word_count)} characters
- Draw on both the brand features and what the customer actually wrote
- Be sincere and friendly, and show the merchant's professionalism
- Stay specific to this review; do not use template phrases
- If the customer raises a question or complaint, respond positively and offer a solution

Output only the reply itself, without any prefix or explanation."""


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        logger.warning("Could not parse error body (status=%d)", response.status_code)
        body = {}

    message = body.get("message") if isinstance(body, dict) else None
    if isinstance(message, str) and message:
        return message
    return f"API request failed: {response.status_code}"


class ReplyGenerator:
    """Drafts review replies through a DashScope application completion endpoint."""

    def __init__(self, *, config: ReplyGeneratorConfig, transport: httpx.AsyncBaseTransport | None = None):
        self._config = config
        self._transport = transport

    @property
    def url(self) -> str:
        return f"{self._config.base_url.rstrip('/')}/{self._config.app_id}/completion"

    def build_payload(self, request: ReplyRequest) -> dict[str, Any]:
        return {
            "input": {
                "prompt": build_prompt(request),
                "parameters": {
                    "max_tokens": int(request.word_count) * 2,
                    "temperature": TEMPERATURE,
                },
            }
        }

    async def generate_reply(self, request: ReplyRequest) -> str:
        """
        Request one reply and return its trimmed text.

        Raises:
            ApiError: On a non-2xx status.
            MalformedResponseError: When the 2xx body has no usable text.
            httpx.HTTPError: On network failures, unchanged.
        """
        try:
            reply = await self._complete(request)
        except (ReplyGeneratorError, httpx.HTTPError) as exc:
            logger.error("Reply generation failed: %s", exc)
            raise

        logger.info(
            "Generated reply | app_id=%s | tone=%s | word_count=%d | length=%d",
            self._config.app_id,
            request.tone.value,
            int(request.word_count),
            len(reply),
        )
        return reply

    async def _complete(self, request: ReplyRequest) -> str:
        headers = {
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
        }

        async with httpx.AsyncClient(timeout=self._config.timeout_seconds, transport=self._transport) as client:
            resp = await client.post(self.url, headers=headers, json=self.build_payload(request))

        if not resp.is_success:
            raise ApiError(resp.status_code, _error_message(resp))

        try:
            data = resp.json()
        except ValueError as exc:
            raise MalformedResponseError() from exc

        return decode_completion(data).text


def get_reply_generator() -> ReplyGenerator:
    global _generator
    if _generator is None:
        settings = get_settings()
        _generator = ReplyGenerator(
            config=ReplyGeneratorConfig(
                api_key=settings.dashscope_api_key,
                app_id=settings.dashscope_app_id,
                base_url=settings.dashscope_base_url,
                timeout_seconds=settings.request_timeout,
            )
        )
    return _generator
