from typing import Dict, List, Optional

from lixtools.commons.httpClient import client_scope
from lixtools.commons.searching_based import ensure_target_list, fetch_all
from lixtools.searching.fetch_target import (
    fetch_one,
    DecodeMode,
    VISIT_LINKS_ENDPOINT,
    VISIT_LINKS_HTML_ENDPOINT,
)


async def visit_links(links: Optional[List[str]] = None, *, client=None) -> Dict[str, dict]:
    links = ensure_target_list(links)
    async with client_scope(client) as active:
        return await fetch_all(
            links,
            lambda url: fetch_one(url, VISIT_LINKS_ENDPOINT, {"url": url}, DecodeMode.TEXT, active.post),
        )


async def visit_links_html(links: Optional[List[str]] = None, *, client=None) -> Dict[str, dict]:
    links = ensure_target_list(links)
    async with client_scope(client) as active:
        return await fetch_all(
            links,
            lambda url: fetch_one(url, VISIT_LINKS_HTML_ENDPOINT, {"url": url, "html": True}, DecodeMode.HTML, active.post),
        )


def _link_count(args) -> int:
    links = args.get("links") if isinstance(args, dict) else None
    if isinstance(links, (list, tuple)):
        return len(links)
    return 0


def format_visit_links_message(args=None) -> str:
    count = _link_count(args)
    if count == 1:
        return "Visiting 1 link..."
    if count > 1:
        return f"Visiting {count} links..."
    return "Preparing to visit links..."


def format_visit_links_html_message(args=None) -> str:
    count = _link_count(args)
    if count == 1:
        return "Visiting 1 link to get HTML..."
    if count > 1:
        return f"Visiting {count} links to get HTML..."
    return "Preparing to visit links to get HTML..."
