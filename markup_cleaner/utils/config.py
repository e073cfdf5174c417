"""Configuration management -- reads from environment with sensible defaults."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Centralised settings read once from env vars."""

    # --- OpenAI (remote cleaning) -----------------------------------------
    openai_api_key: str = field(default_factory=lambda: os.getenv("OPENAI_API_KEY", ""))
    openai_base_url: str = field(default_factory=lambda: os.getenv("OPENAI_BASE_URL", ""))
    cleaner_model: str = field(
        default_factory=lambda: os.getenv("OPENAI_CLEANER_MODEL", "gpt-4o-mini")
    )

    # --- Parsing -----------------------------------------------------------
    html_parser: str = field(default_factory=lambda: os.getenv("HTML_PARSER", "html.parser"))
    max_nesting_depth: int = field(
        default_factory=lambda: int(os.getenv("MAX_NESTING_DEPTH", "2000"))
    )

    # --- Input / output ----------------------------------------------------
    fetch_timeout: float = field(
        default_factory=lambda: float(os.getenv("FETCH_TIMEOUT", "10.0"))
    )
    output_file: str = field(
        default_factory=lambda: os.getenv("OUTPUT_FILE", "cleaned-content.md")
    )

    # --- Logging -----------------------------------------------------------
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))


# Module-level singleton -- import this everywhere.
settings = Settings()
