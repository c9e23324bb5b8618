"""Data models for LLM provider APIs, a WebSocket wrapper and a realtime session client."""

__version__ = "0.1.0"