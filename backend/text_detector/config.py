"""
Configuration for the Text Detector module.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


# Server settings
HOST = os.getenv('HOST', '0.0.0.0')
PORT = int(os.getenv('PORT', '5001'))
DEBUG = _env_bool('DEBUG', False)
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

# Upload / input limits
MAX_FILE_SIZE = int(os.getenv('MAX_FILE_SIZE', str(10 * 1024 * 1024)))  # 10MB
MAX_TEXT_LENGTH = int(os.getenv('MAX_TEXT_LENGTH', '100000'))
ALLOWED_DOCUMENT_EXTENSIONS = {'.pdf', '.docx', '.doc', '.txt', '.rtf'}

# Rate limiting
RATE_LIMIT_ENABLED = _env_bool('RATE_LIMIT_ENABLED', True)
RATE_LIMIT_DEFAULT = os.getenv('RATE_LIMIT_DEFAULT', '100 per hour')
RATE_LIMIT_ANALYZE = os.getenv('RATE_LIMIT_ANALYZE', '20 per minute')

# Input gate
MIN_TEXT_CHARS = 50
MIN_TEXT_WORDS = 10

INPUT_TOO_SHORT_MESSAGE = 'Please provide at least 50 characters for meaningful analysis.'
INSUFFICIENT_WORDS_MESSAGE = 'Please provide at least 10 words for accurate analysis.'
ANALYSIS_FAILED_PREFIX = 'Analysis failed: '

# Final probability bounds (fractions)
PROBABILITY_FLOOR = 0.05
PROBABILITY_CEILING = 0.95


# Verdict labels
class Verdict:
    LIKELY_AI = "Likely AI-Generated"
    POSSIBLY_AI = "Possibly AI-Generated"
    UNCERTAIN = "Uncertain"
    LIKELY_HUMAN = "Likely Human-Written"


class VerdictColor:
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"


class Confidence:
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
