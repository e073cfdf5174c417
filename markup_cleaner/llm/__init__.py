"""LLM module -- model-agnostic chat wrapper and the remote cleaner."""

from markup_cleaner.llm.base import BaseLLM
from markup_cleaner.llm.remote_cleaner import RemoteCleaner

__all__ = ["BaseLLM", "RemoteCleaner"]
