"""Preprocessing of text destined for Jira rich-text fields."""

from .adf import is_adf_document, text_to_adf

__all__ = ["is_adf_document", "text_to_adf"]
