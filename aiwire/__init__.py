"""Typed JSON models and server-sent event stream parsing for OpenAI-style HTTP APIs."""

__version__ = "9.0.0"