"""Pydantic schemas for packaged resources."""

from .size_schema import SizeTableSchema

__all__ = ["SizeTableSchema"]
