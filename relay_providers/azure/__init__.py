"""Azure OpenAI provider package."""

from .client import AzureOpenAIProvider

__all__ = ["AzureOpenAIProvider"]
