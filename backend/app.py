"""
VisioNova Backend API Server
Flask application providing AI-text detection endpoints.
"""
import logging
import os
from datetime import datetime, timezone

from flask import Flask, request, jsonify
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from text_detector import (
    AIContentDetector,
    BehaviorMetrics,
    DocumentAnalyzer,
    InvalidBehaviorError,
    apply_behavior,
    config,
)

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)
logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)  # Enable CORS for frontend requests

# Initialize rate limiter
limiter = Limiter(
    app=app,
    key_func=get_remote_address,
    default_limits=[config.RATE_LIMIT_DEFAULT],
    storage_uri="memory://",
    enabled=config.RATE_LIMIT_ENABLED,
)

ai_detector = AIContentDetector()
document_analyzer = DocumentAnalyzer(detector=ai_detector)


def _error(message: str, error_code: str, status: int, **extra):
    body = {'success': False, 'error': message, 'error_code': error_code}
    body.update(extra)
    return jsonify(body), status


@app.route('/api/health')
def health_check():
    """Health check endpoint."""
    return jsonify({
        'status': 'ok',
        'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
    })


@app.route('/api/analyze/text', methods=['POST'])
@limiter.limit(config.RATE_LIMIT_ANALYZE)
def analyze_text():
    """
    Analyze pasted text.

    Request body:
        {
            "text": "text to analyze",
            "behavior": {"pasteRatio": 0.9, "avgCharsPerSecond": 60,
                         "editCount": 0, "typingBurstiness": 0.2}   (optional)
        }

    Response:
        Detection result ({"error": ...} for text that is too short)
    """
    try:
        data = request.get_json(silent=True)

        if not isinstance(data, dict) or 'text' not in data:
            return _error('Missing "text" field in request body', 'MISSING_INPUT', 400)

        text = data['text']
        if isinstance(text, str) and len(text) > config.MAX_TEXT_LENGTH:
            return _error(f'Input too long (max {config.MAX_TEXT_LENGTH} characters)', 'INVALID_INPUT', 400)

        metrics = None
        if data.get('behavior') is not None:
            try:
                metrics = BehaviorMetrics.from_payload(data['behavior'])
            except InvalidBehaviorError as e:
                return _error(str(e), 'INVALID_BEHAVIOR', 400)

        result = ai_detector.analyze(text)

        if 'error' not in result and metrics is not None:
            result = apply_behavior(result, metrics)

        return jsonify(result)

    except Exception as e:
        logger.exception("Text analysis request failed")
        return jsonify({'error': f'{config.ANALYSIS_FAILED_PREFIX}{str(e)}'}), 500


@app.route('/api/analyze/file', methods=['POST'])
@limiter.limit(config.RATE_LIMIT_ANALYZE)
def analyze_file():
    """
    Analyze an uploaded document (PDF, DOCX, DOC, TXT).

    Request:
        multipart/form-data with 'file' field
    """
    try:
        if 'file' not in request.files:
            return _error('No file uploaded', 'NO_FILE', 400)

        file = request.files['file']

        if file.filename == '':
            return _error('No file selected', 'NO_FILE', 400)

        file_bytes = file.read()
        file_info = {
            'fileName': file.filename,
            'fileSize': len(file_bytes),
            'mimeType': file.mimetype,
        }

        ext = os.path.splitext(file.filename)[1].lower()
        if ext not in config.ALLOWED_DOCUMENT_EXTENSIONS:
            return _error('Unsupported file type', 'INVALID_FORMAT', 400, **file_info)

        if len(file_bytes) > config.MAX_FILE_SIZE:
            return _error(
                f'File too large. Maximum size: {config.MAX_FILE_SIZE // (1024 * 1024)}MB',
                'FILE_TOO_LARGE', 400,
            )

        result = document_analyzer.analyze_bytes(file_bytes, file.filename, file_info)
        return jsonify(result)

    except Exception as e:
        logger.exception("File analysis request failed")
        return jsonify({'error': f'{config.ANALYSIS_FAILED_PREFIX}{str(e)}'}), 500


if __name__ == '__main__':
    print("Starting VisioNova Text Detection API Server...")
    print(f"API available at: http://localhost:{config.PORT}")
    print("\nEndpoints:")
    print("  GET  /api/health          - Health check")
    print("  POST /api/analyze/text    - Analyze pasted text")
    print("  POST /api/analyze/file    - Analyze an uploaded document")
    print()

    app.run(debug=config.DEBUG, host=config.HOST, port=config.PORT)
