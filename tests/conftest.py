import logging
from datetime import date
from pathlib import Path

import pytest
from docx import Document

from bulletin.models.session import Punctuation, RunContext
from bulletin.models.window import ReportingWindow


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handler changes made by setup_logging during a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def make_docx(tmp_path):
    """Create a Word document with one paragraph per line."""

    def _make(lines: list[str], name: str = "Calendar Data.docx") -> Path:
        path = tmp_path / name
        doc = Document()
        for line in lines:
            doc.add_paragraph(line)
        doc.save(str(path))
        return path

    return _make


@pytest.fixture
def december_context():
    """Word-format run context for the two weeks starting Thursday 12/7/2023."""
    return RunContext(window=ReportingWindow.starting(date(2023, 12, 7)))


@pytest.fixture
def plain_context():
    """Plain-text run context for the two weeks starting Thursday 12/7/2023."""
    return RunContext(
        window=ReportingWindow.starting(date(2023, 12, 7)),
        punctuation=Punctuation.PLAIN,
    )
