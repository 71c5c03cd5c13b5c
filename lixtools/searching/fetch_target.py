import json
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Dict, Optional

from bs4 import BeautifulSoup
from loguru import logger

from lixtools.commons.httpClient import ToolResponse
from lixtools.searching.utils import validate_url_for_fetch
from lixtools.pipeline.config import (
    TRANSCRIPT_ENDPOINT_PATH,
    VISIT_LINKS_ENDPOINT_PATH,
    VISIT_LINKS_HTML_ENDPOINT_PATH,
    INVALID_URL_MESSAGE,
    NO_CONTENT_MESSAGE,
    FETCH_FALLBACK_ERROR,
    ERROR_MESSAGE_TRUNCATE,
)

PostFunc = Callable[[str, dict], Awaitable[ToolResponse]]


class DecodeMode(str, Enum):
    JSON_TRANSCRIPT = "json-transcript"
    TEXT = "text"
    HTML = "html"


@dataclass(frozen=True)
class Endpoint:
    path: str
    failure_message: str

    def failure(self, target: str, reason: str) -> str:
        return self.failure_message.format(target=target, reason=reason)


TRANSCRIPT_ENDPOINT = Endpoint(
    TRANSCRIPT_ENDPOINT_PATH,
    "Failed to fetch YouTube video transcript for {target}: {reason}",
)
VISIT_LINKS_ENDPOINT = Endpoint(
    VISIT_LINKS_ENDPOINT_PATH,
    "Failed to fetch content for {target}: {reason}",
)
VISIT_LINKS_HTML_ENDPOINT = Endpoint(
    VISIT_LINKS_HTML_ENDPOINT_PATH,
    "Failed to fetch content for {target}: {reason}",
)

# (output key, tag, itemprop)
YOUTUBE_METADATA_FIELDS = [
    ("title", "meta", "name"),
    ("date", "meta", "uploadDate"),
    ("views", "meta", "interactionCount"),
    ("author", "link", "name"),
    ("description", "meta", "description"),
]


class FetchError(Exception):
    pass


def decode_text(text: str) -> Dict[str, str]:
    data = json.loads(text)
    content = data.get("content") if isinstance(data, dict) else None
    return {"content": content or NO_CONTENT_MESSAGE}


def decode_html(text: str) -> Dict[str, str]:
    return {"html": text or ""}


def parse_youtube_metadata(html: str) -> Dict[str, str]:
    soup = BeautifulSoup(html or "", "html.parser")
    metadata = {}
    for key, tag, itemprop in YOUTUBE_METADATA_FIELDS:
        element = soup.find(tag, attrs={"itemprop": itemprop})
        if element is not None and element.get("content") is not None:
            metadata[key] = element.get("content")
    return metadata


def decode_transcript(text: str) -> dict:
    """Decode the ``{transcript, html}`` envelope.

    Metadata is best effort: when the envelope cannot be decoded the raw body
    is returned as the transcript instead of failing the call.
    """
    try:
        data = json.loads(text)
        if not isinstance(data, dict) or "transcript" not in data:
            raise ValueError("transcript envelope missing 'transcript'")
        result = parse_youtube_metadata(data.get("html") or "")
        result["transcript"] = data["transcript"]
        return result
    except Exception as e:
        logger.error(f"[YoutubeDetails] Error parsing YouTube metadata: {e}")
        return {"transcript": text}


DECODERS = {
    DecodeMode.JSON_TRANSCRIPT: decode_transcript,
    DecodeMode.TEXT: decode_text,
    DecodeMode.HTML: decode_html,
}


async def fetch_one(
    target: str,
    endpoint: Endpoint,
    body: dict,
    decode: DecodeMode,
    post: PostFunc,
    validator: Optional[Callable[[str], bool]] = validate_url_for_fetch,
) -> dict:
    """Fetch one target and settle it into an outcome dict. Never raises."""
    if validator is not None and not validator(target):
        logger.error(f"[Fetch] URL validation failed: {target}")
        return {"error": INVALID_URL_MESSAGE}

    try:
        response = await post(endpoint.path, body)
        if not response.ok:
            raise FetchError(endpoint.failure(target, response.reason or str(response.status)))
        outcome = DECODERS[DecodeMode(decode)](response.text)
        logger.debug(f"[Fetch] {target} settled via {endpoint.path}")
        return outcome
    except Exception as e:
        logger.error(f"[Fetch] Error visiting {target}: {type(e).__name__}: {str(e)[:ERROR_MESSAGE_TRUNCATE]}")
        return {"error": str(e) or FETCH_FALLBACK_ERROR}
