"""Chat, coder and tweeting agents for OpenAI-style chat completion endpoints."""

__version__ = "1.0.0"
__all__ = ["agent", "cli", "examples", "models", "providers", "twitter"]