"""Filesystem input/output helpers for cleaning runs."""

from .storage import load_input_text, save_output_text, validate_output_path

__all__ = ["load_input_text", "save_output_text", "validate_output_path"]
