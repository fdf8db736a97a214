"""Rendering events to Word documents and plain text."""

from bulletin.output.base import DocumentWriter
from bulletin.output.docx_writer import BulletinDocxWriter, DigestDocxWriter
from bulletin.output.formatter import EventFormatter
from bulletin.output.text_writer import render_bulletin_text, render_digest_text

__all__ = [
    "BulletinDocxWriter",
    "DocumentWriter",
    "DigestDocxWriter",
    "EventFormatter",
    "render_bulletin_text",
    "render_digest_text",
]
