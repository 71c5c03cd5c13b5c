from typing import Dict, Optional
from lixtools.pipeline.config import TOKEN, CSRF_TOKEN


def get_request_headers(token: Optional[str] = None, csrf_token: Optional[str] = None) -> Dict[str, str]:
    token = token if token is not None else TOKEN
    csrf_token = csrf_token if csrf_token is not None else CSRF_TOKEN
    headers = {"Content-Type": "application/json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    if csrf_token:
        headers["X-CSRF-Token"] = csrf_token
    return headers
