"""Shared utilities module."""

from .utils import load_json, save_json, to_json, to_jsonable

__all__ = ["save_json", "load_json", "to_json", "to_jsonable"]
