"""Adapters for CLIs and user interfaces."""

__all__ = []
