import logging
import sys


def setup_logger(name: str) -> logging.Logger:
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )
    return logging.getLogger(name)


def request_arguments(data) -> dict:
    """Pull the tool arguments out of a request body (``{"arguments": {...}}`` or a bare object)."""
    if not isinstance(data, dict):
        return {}
    if "arguments" in data:
        arguments = data.get("arguments")
        return arguments if isinstance(arguments, dict) else {}
    return data
