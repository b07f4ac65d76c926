from typing import Optional

import httpx
from openai import OpenAI

from prompt_improver_api.core.constants import PERPLEXITY_BASE_URL
from prompt_improver_api.core.errors import MissingCredentialError


def build_openai_client(api_key: Optional[str], http_client: Optional[httpx.Client] = None) -> OpenAI:
    """
    Build an OpenAI client against the Perplexity endpoint.

    A fresh client is built per request because every caller brings its own
    key. Retries are disabled so one improvement is exactly one HTTP call.
    """
    key = (api_key or "").strip()
    if not key:
        raise MissingCredentialError()

    return OpenAI(api_key=key, base_url=PERPLEXITY_BASE_URL, max_retries=0, http_client=http_client)
