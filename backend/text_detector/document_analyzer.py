"""
Document analysis: metadata sniffing blended with linguistic analysis of the
extracted text.

Plain-text uploads go straight through the text detector. Binary documents
are scanned for AI writing-tool signatures and authoring metadata; when
enough text can be extracted, the metadata estimate is blended 30/70 with
the text verdict.
"""
import logging
import os
import re
from typing import Dict, Optional

from .config import Confidence
from .document_parser import DocumentParser
from .ensemble import verdict_for_percent
from .statistics import clamp, round_half_up
from .text_detector_service import AIContentDetector, get_detector

logger = logging.getLogger(__name__)

SNIFF_BYTES = 1024 * 1024
MIN_EXTRACTED_CHARS = 100

METADATA_BASELINE = 0.40
AI_SIGNATURE_SHIFT = 0.35
AUTHOR_SHIFT = -0.10
OFFICE_SHIFT = -0.05
METADATA_BLEND = 0.3
TEXT_BLEND = 0.7

# Checked in order; the first match names the tool.
AI_TOOL_SIGNATURES = (
    ('ChatGPT', re.compile(r'chatgpt|gpt-4|gpt-3\.5|gpt-4o', re.IGNORECASE)),
    ('Claude', re.compile(r'claude|anthropic', re.IGNORECASE)),
    ('Gemini', re.compile(r'gemini|bard|google.?ai', re.IGNORECASE)),
    ('Copilot', re.compile(r'copilot|bing.?ai', re.IGNORECASE)),
    ('Jasper', re.compile(r'jasper\.ai|jasper', re.IGNORECASE)),
    ('WriteSonic', re.compile(r'writesonic', re.IGNORECASE)),
    ('Grammarly AI', re.compile(r'grammarly', re.IGNORECASE)),
    ('QuillBot', re.compile(r'quillbot', re.IGNORECASE)),
    ('Copy.ai', re.compile(r'copy\.ai', re.IGNORECASE)),
    ('Notion AI', re.compile(r'notion.?ai', re.IGNORECASE)),
    ('Rytr', re.compile(r'rytr', re.IGNORECASE)),
    ('Wordtune', re.compile(r'wordtune', re.IGNORECASE)),
    ('Sudowrite', re.compile(r'sudowrite', re.IGNORECASE)),
    ('Perplexity', re.compile(r'perplexity', re.IGNORECASE)),
)
AUTHOR_RE = re.compile(r'author|creator|producer', re.IGNORECASE)
OFFICE_RE = re.compile(
    r'microsoft|word|excel|powerpoint|libreoffice|google.?docs|pages|keynote',
    re.IGNORECASE,
)

NOTE_WITH_TEXT = 'Document analyzed with both metadata inspection and linguistic analysis of extracted text.'
NOTE_METADATA_ONLY = 'For more accurate analysis, paste the document text directly in the Text Analysis tab.'


def detect_ai_tool(head: str) -> Optional[str]:
    for name, pattern in AI_TOOL_SIGNATURES:
        if pattern.search(head):
            return name
    return None


class DocumentAnalyzer:
    """
    Analyze uploaded documents.

    .txt goes straight to text analysis. .pdf, .docx and .doc are scored on
    metadata and blended with their extracted text; .rtf is scored on
    metadata only.
    """

    def __init__(self, detector: Optional[AIContentDetector] = None,
                 parser: Optional[DocumentParser] = None):
        self.detector = detector or get_detector()
        self.parser = parser or DocumentParser()

    def analyze_bytes(self, file_bytes: bytes, filename: str, file_info: Optional[Dict] = None) -> Dict:
        file_info = dict(file_info or {})
        ext = os.path.splitext(filename)[1].lower()

        if ext == '.txt':
            return self._analyze_plain_text(file_bytes, file_info)
        return self._analyze_binary(file_bytes, filename, file_info)

    def _analyze_plain_text(self, file_bytes: bytes, file_info: Dict) -> Dict:
        text = file_bytes.decode('utf-8', errors='ignore')
        result = self.detector.analyze(text)
        if "error" in result:
            return {**file_info, "type": "document", **result}
        return {**file_info, **result, "type": "document"}

    def _extract_and_analyze(self, file_bytes: bytes, filename: str) -> Optional[Dict]:
        if not self.parser.is_supported(filename):
            return None
        parsed = self.parser.parse_bytes(file_bytes, filename)
        if parsed.get("error"):
            logger.info(f"No text extracted from {filename}: {parsed['error']}")
            return None
        text = parsed["text"].strip()
        if len(text) < MIN_EXTRACTED_CHARS:
            return None
        result = self.detector.analyze(text)
        if "error" in result:
            return None
        return result

    def _analyze_binary(self, file_bytes: bytes, filename: str, file_info: Dict) -> Dict:
        head = file_bytes[:SNIFF_BYTES].decode('latin-1')

        ai_tool = detect_ai_tool(head)
        has_author = AUTHOR_RE.search(head) is not None
        has_office = OFFICE_RE.search(head) is not None

        probability = METADATA_BASELINE
        if ai_tool:
            probability += AI_SIGNATURE_SHIFT
        if has_author:
            probability += AUTHOR_SHIFT
        if has_office:
            probability += OFFICE_SHIFT

        text_result = self._extract_and_analyze(file_bytes, filename)
        if text_result is not None:
            text_probability = text_result["aiProbability"] / 100
            probability = probability * METADATA_BLEND + text_probability * TEXT_BLEND

        ai_percent = round_half_up(clamp(probability) * 100)
        verdict, color = verdict_for_percent(ai_percent)

        details = [
            {
                "name": "AI Tool Signatures",
                "found": ai_tool is not None,
                "score": 90 if ai_tool else 18,
                "description": f"{ai_tool} signature detected in metadata" if ai_tool
                else "No AI tool signatures found",
                "icon": "cpu",
            },
            {
                "name": "Author Metadata",
                "found": has_author,
                "score": 22 if has_author else 52,
                "description": "Author information found in document" if has_author
                else "No author metadata",
                "icon": "user",
            },
            {
                "name": "Application Info",
                "found": has_office,
                "score": 22 if has_office else 50,
                "description": "Office application metadata detected" if has_office
                else "No application metadata",
                "icon": "file",
            },
        ]

        if text_result is not None:
            details.append({
                "name": "Extracted Text Analysis",
                "found": True,
                "score": text_result["aiProbability"],
                "description": (
                    f"Linguistic analysis of extracted text: {text_result['verdict']} "
                    f"({text_result['aiProbability']}% AI probability)"
                ),
                "icon": "edit",
            })

        if ai_tool:
            confidence = Confidence.HIGH
        elif text_result is not None:
            confidence = Confidence.MEDIUM
        else:
            confidence = Confidence.LOW

        result = {
            "type": "document",
            **file_info,
            "aiProbability": ai_percent,
            "humanProbability": 100 - ai_percent,
            "verdict": verdict,
            "verdictColor": color,
            "confidence": confidence,
            "details": details,
            "note": NOTE_WITH_TEXT if text_result is not None else NOTE_METADATA_ONLY,
        }
        if text_result is not None:
            result["textAnalysisDetails"] = text_result["details"]

        logger.debug(f"Document {filename}: tool={ai_tool} author={has_author} "
                     f"office={has_office} text={text_result is not None} -> {ai_percent}%")
        return result
