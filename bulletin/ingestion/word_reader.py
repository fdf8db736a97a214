"""Word document reader for pasted calendar data."""

import logging
import os
import shutil
import subprocess
import tempfile
from pathlib import Path

from docx import Document

from bulletin.exceptions import IngestionError

logger = logging.getLogger(__name__)


def normalize_to_docx(path: str | Path) -> str:
    """Convert .doc to .docx if needed."""
    path = str(path)
    root, ext = os.path.splitext(path)
    if ext.lower() == ".doc":
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_doc = os.path.join(temp_dir, os.path.basename(path))
            shutil.copy2(path, temp_doc)

            subprocess.run(
                [
                    "soffice",
                    "--headless",
                    "--convert-to",
                    "docx",
                    "--outdir",
                    temp_dir,
                    temp_doc,
                ],
                check=True,
            )

            temp_docx = os.path.splitext(temp_doc)[0] + ".docx"

            with tempfile.NamedTemporaryFile(
                suffix=".docx", delete=False
            ) as final_docx:
                shutil.copy2(temp_docx, final_docx.name)
                return final_docx.name
    elif ext.lower() == ".docx":
        return path
    else:
        raise ValueError(f"Unsupported extension: {ext}")


class WordReader:
    """Reader returning the paragraphs of a Word document as fragments."""

    def read(self, path: Path) -> list[str]:
        """Read paragraph text from a Word document, in document order."""
        try:
            docx_path = normalize_to_docx(path)
            try:
                return self._read_docx(docx_path)
            finally:
                # Clean up temporary docx file if it was created
                if docx_path != str(path):
                    try:
                        os.unlink(docx_path)
                    except OSError:
                        pass
        except Exception as e:
            raise IngestionError(f"Failed to read Word document: {e}") from e

    def _read_docx(self, docx_path: str) -> list[str]:
        logger.info(f"Reading Word document: {docx_path}")
        doc = Document(docx_path)
        fragments = [p.text for p in doc.paragraphs]
        logger.info(f"Read {len(fragments)} paragraphs from Word document")
        return fragments
