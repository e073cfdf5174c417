"""Remote cleaner -- asks a chat model to extract the main content as HTML.

Default model: gpt-4o-mini (configurable via OPENAI_CLEANER_MODEL).
"""

import re

from markup_cleaner.cleaning.base import CleanerResponse, ContentCleaner
from markup_cleaner.errors import EmptyInputError, RemoteCleanError
from markup_cleaner.llm.base import BaseLLM
from markup_cleaner.utils.config import settings
from markup_cleaner.utils.logger import get_logger

log = get_logger(__name__)

CLEANING_PROMPT = """You are an expert in web data extraction and cleaning.

Analyze the following block of code (it may mix HTML, CSS and JavaScript) and return ONLY the main content (text and images).

Strict rules:
1. Remove all CSS (<style> tags, inline style attributes, stylesheet links).
2. Remove all JavaScript (<script> tags, event attributes such as onclick).
3. Remove structural elements unrelated to the content: navigation menus (<nav>), footers (<footer>), sidebars, ads, modals and contact forms.
4. Keep the semantic hierarchy of the main text using ONLY these tags: <h1>, <h2>, <h3>, <p>, <ul>, <ol>, <li>, <blockquote>, <strong>, <em>, <br>.
5. Keep images (<img>) but remove their classes and IDs. Keep the 'src' and 'alt' attributes.
6. Leave relative image URLs as they are.
7. The output must be ONLY the cleaned HTML code, without markdown (no ```html).
8. Do not include <html>, <head> or <body>. Only the content fragment.

Code to clean:
{raw}"""

_LEADING_FENCE = re.compile(r"^```html\n?")
_TRAILING_FENCE = re.compile(r"\n?```$")


class RemoteCleaner(BaseLLM, ContentCleaner):
    """Model-based cleaning; an alternative to ``LocalCleaner``, not a fallback."""

    def __init__(self, model: str | None = None, **kwargs):
        super().__init__(model=model or settings.cleaner_model, **kwargs)

    def clean(self, raw: str) -> CleanerResponse:
        """Return the model's HTML fragment for *raw*."""
        if not raw or not raw.strip():
            raise EmptyInputError()
        messages = [{"role": "user", "content": CLEANING_PROMPT.format(raw=raw)}]
        text = self.complete(messages)
        if not text:
            raise RemoteCleanError(f"The model {self.model} returned no content.")
        log.debug("Remote cleaner returned %d chars", len(text))
        return CleanerResponse(cleaned_html=strip_code_fence(text))


def strip_code_fence(text: str) -> str:
    """Drop a ```html fence the model added despite being told not to."""
    return _TRAILING_FENCE.sub("", _LEADING_FENCE.sub("", text))
