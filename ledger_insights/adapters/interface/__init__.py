"""Interface adapters (UI layers)."""

__all__ = []
