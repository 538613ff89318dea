"""Streamlit presentation layer for the Aura Gold console."""

from .main import main

__all__ = ["main"]
