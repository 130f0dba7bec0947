"""Objtasks model layer -- public type re-exports."""

from objtasks.model.rectangle import Rectangle

__all__ = ["Rectangle"]
