import re
from typing import Optional

from loguru import logger

from lixtools.commons.errors import ToolArgumentError
from lixtools.commons.httpClient import client_scope
from lixtools.searching.fetch_target import fetch_one, DecodeMode, TRANSCRIPT_ENDPOINT
from lixtools.searching.utils import validate_url_for_fetch
from lixtools.pipeline.config import URL_REQUIRED_MESSAGE, INVALID_VIDEO_URL_MESSAGE

VIDEO_ID_PATTERN = re.compile(r"[a-zA-Z0-9_-]{11}")
VIDEO_URL_PATTERN = re.compile(
    r'^.*(?:(?:youtu\.be/|v/|vi/|u/\w/|embed/|shorts/)|(?:(?:watch)?\?v(?:i)?=|&v(?:i)?=))([^#&?]*).*'
)


def is_video_id(value) -> bool:
    return isinstance(value, str) and bool(VIDEO_ID_PATTERN.fullmatch(value))


def parse_id(url: str) -> str:
    # A bare 11-character id is returned before any URL matching
    if is_video_id(url):
        return url

    match = VIDEO_URL_PATTERN.match(url)
    if match and match.group(1):
        return match.group(1)
    return url


async def get_youtube_video_script(url: Optional[str] = None, *, client=None) -> dict:
    if not url:
        raise ToolArgumentError(URL_REQUIRED_MESSAGE)
    if not isinstance(url, str) or not (is_video_id(url) or validate_url_for_fetch(url)):
        raise ToolArgumentError(INVALID_VIDEO_URL_MESSAGE)

    video_id = parse_id(url)
    logger.info(f"[YoutubeDetails] Requesting transcript for video {video_id}")

    async with client_scope(client) as active:
        return await fetch_one(
            url,
            TRANSCRIPT_ENDPOINT,
            {"id": video_id, "lang": "", "json": True},
            DecodeMode.JSON_TRANSCRIPT,
            active.post,
            validator=None,
        )


def format_video_script_message(args=None) -> str:
    url = args.get("url") if isinstance(args, dict) else None
    if url and isinstance(url, str):
        return f"Getting video script for {parse_id(url)}..."
    return "Getting video script..."
