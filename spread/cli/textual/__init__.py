"""Textual-powered interactive front-end."""

from .app import SpreadTextualApp, run_textual_app

__all__ = ["SpreadTextualApp", "run_textual_app"]
