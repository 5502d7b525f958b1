"""Utility modules for appstorehub."""

from .data_prep import export_to_json, prepare_export

__all__ = [
    "export_to_json",
    "prepare_export",
]
