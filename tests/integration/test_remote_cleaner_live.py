"""Integration test -- remote cleaning against a real OpenAI-compatible API.

Requires: valid OPENAI_API_KEY in .env (and OPENAI_BASE_URL for other providers).
"""

import pytest

from markup_cleaner.converter import to_markdown_output
from markup_cleaner.llm.remote_cleaner import RemoteCleaner
from markup_cleaner.utils.config import settings


@pytest.mark.integration
def test_remote_clean_strips_scripts_and_chrome():
    if not settings.openai_api_key:
        pytest.skip("OPENAI_API_KEY not set")

    raw = (
        "<html><head><style>body{color:red}</style></head><body>"
        "<nav><a href='/'>Home</a></nav>"
        "<article><h1 class='title'>Release notes</h1>"
        "<p onclick='track()'>Version 2 ships today.</p></article>"
        "<script>track()</script><footer>(c) 2024</footer></body></html>"
    )
    resp = RemoteCleaner().clean(raw)

    assert "<script" not in resp.cleaned_html
    assert "onclick" not in resp.cleaned_html
    assert "Release notes" in to_markdown_output(resp.cleaned_html)
