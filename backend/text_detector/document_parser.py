"""
VisioNova Document Parser
Extracts text from PDF, DOCX and TXT uploads for linguistic analysis.
"""
import logging
import os
from io import BytesIO
from typing import Dict, List, Tuple

logger = logging.getLogger(__name__)


class DocumentParser:
    """
    Extract text from various document formats.

    Supported formats:
    - PDF (.pdf) using PyMuPDF
    - Word (.docx, .doc) using python-docx
    - Plain text (.txt)
    """

    SUPPORTED_EXTENSIONS = {'.pdf', '.docx', '.txt', '.doc'}

    def parse_file(self, file_path: str) -> Dict:
        """
        Parse a file on disk and extract text.

        Returns:
            dict with 'text', 'metadata', 'error'
        """
        if not os.path.exists(file_path):
            return {"error": f"File not found: {file_path}"}

        with open(file_path, 'rb') as f:
            return self.parse_bytes(f.read(), os.path.basename(file_path))

    def parse_bytes(self, file_bytes: bytes, filename: str) -> Dict:
        """
        Parse file from bytes (for file uploads).

        Args:
            file_bytes: File content as bytes
            filename: Original filename (for extension detection)

        Returns:
            dict with 'text', 'metadata', 'error'
        """
        ext = os.path.splitext(filename)[1].lower()

        if ext not in self.SUPPORTED_EXTENSIONS:
            return {"error": f"Unsupported file format: {ext}"}

        try:
            if ext == '.pdf':
                text, metadata = self._extract_pdf_bytes(file_bytes)
            elif ext in ['.docx', '.doc']:
                text, metadata = self._extract_docx_bytes(file_bytes)
            else:  # .txt
                text, metadata = self._extract_txt_bytes(file_bytes)
        except Exception as e:
            logger.warning(f"Text extraction failed for {filename}: {e}")
            return {"error": f"Failed to parse file: {str(e)}"}

        if not text or not text.strip():
            return {"error": "No text content found in file"}

        return {
            "text": text,
            "metadata": metadata,
            "error": None
        }

    def _extract_pdf_bytes(self, file_bytes: bytes) -> Tuple[str, Dict]:
        """Extract text from PDF bytes."""
        try:
            import fitz  # PyMuPDF
        except ImportError:
            raise ImportError("PyMuPDF not installed. Run: pip install PyMuPDF")

        doc = fitz.open(stream=file_bytes, filetype="pdf")
        try:
            # sort=True gives natural reading order
            text_parts = [page.get_text(sort=True) for page in doc]
            pdf_meta = doc.metadata or {}
        finally:
            doc.close()

        full_text = "\n\n".join(text_parts)
        metadata = {
            "format": "pdf",
            "pages": len(text_parts),
            "char_count": len(full_text),
            "author": pdf_meta.get("author") or None,
            "producer": pdf_meta.get("producer") or None,
            "creator": pdf_meta.get("creator") or None,
        }

        return full_text, metadata

    def _extract_docx_bytes(self, file_bytes: bytes) -> Tuple[str, Dict]:
        """Extract text from DOCX bytes."""
        try:
            from docx import Document
        except ImportError:
            raise ImportError("python-docx not installed. Run: pip install python-docx")

        doc = Document(BytesIO(file_bytes))
        paragraphs = [p.text for p in doc.paragraphs if p.text.strip()]
        props = doc.core_properties

        full_text = "\n\n".join(paragraphs)
        metadata = {
            "format": "docx",
            "paragraphs": len(paragraphs),
            "char_count": len(full_text),
            "author": props.author or None,
        }

        return full_text, metadata

    def _extract_txt_bytes(self, file_bytes: bytes) -> Tuple[str, Dict]:
        text = file_bytes.decode('utf-8', errors='ignore')
        metadata = {
            "format": "txt",
            "char_count": len(text)
        }
        return text, metadata

    @staticmethod
    def is_supported(filename: str) -> bool:
        """Check if file format is supported."""
        ext = os.path.splitext(filename)[1].lower()
        return ext in DocumentParser.SUPPORTED_EXTENSIONS

    @staticmethod
    def get_supported_formats() -> List[str]:
        """Get list of supported file extensions."""
        return sorted(DocumentParser.SUPPORTED_EXTENSIONS)
