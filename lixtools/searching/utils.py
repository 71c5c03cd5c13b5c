from loguru import logger
from urllib.parse import urlparse
import ipaddress
from lixtools.pipeline.config import BLOCK_PRIVATE_TARGETS, RESTRICTED_PORTS, MAX_URL_LENGTH


def _is_blocked_target(url: str, hostname: str, port) -> bool:
    if len(url) > MAX_URL_LENGTH:
        logger.warning(f"[Fetch] URL exceeds {MAX_URL_LENGTH} characters")
        return True

    try:
        ip = ipaddress.ip_address(hostname)
        if ip.is_private or ip.is_loopback or ip.is_link_local:
            logger.warning(f"[Fetch] URL targets private/loopback IP: {hostname}")
            return True
    except ValueError:
        pass

    if hostname in ['localhost', '127.0.0.1', '0.0.0.0']:
        logger.warning(f"[Fetch] URL targets localhost: {hostname}")
        return True

    if port and port in RESTRICTED_PORTS:
        logger.warning(f"[Fetch] URL targets restricted port: {port}")
        return True

    return False


def validate_url_for_fetch(url, block_private: bool = None) -> bool:
    """Syntax check: a scheme and a network location. Host/port blocking is opt-in."""
    if block_private is None:
        block_private = BLOCK_PRIVATE_TARGETS
    if not url or not isinstance(url, str):
        return False

    try:
        parsed = urlparse(url.strip())

        if not parsed.scheme:
            logger.warning(f"[Fetch] URL has no scheme: {url[:80]}")
            return False

        if not parsed.netloc or not parsed.hostname:
            logger.warning("[Fetch] No network location in URL")
            return False

        # Accessing .port raises ValueError on out-of-range or non-numeric ports
        port = parsed.port

        if block_private and _is_blocked_target(url, parsed.hostname, port):
            return False

        return True
    except ValueError as e:
        logger.warning(f"[Fetch] URL validation error: {e}")
        return False
