#!/usr/bin/env python
"""
Simple Flask app launcher without debug reloader
"""
import os
import sys

# Flush output immediately
os.environ['PYTHONUNBUFFERED'] = '1'
sys.stdout = os.fdopen(sys.stdout.fileno(), 'w', 1)

from app import app
from text_detector import config


def main():
    print("\n" + "="*70, flush=True)
    print("VisioNova Text Detection API Server", flush=True)
    print("="*70, flush=True)
    print(f"\n✓ Starting API server on http://{config.HOST}:{config.PORT}", flush=True)
    print(f"✓ Endpoints available:", flush=True)
    print(f"  - GET  /api/health", flush=True)
    print(f"  - POST /api/analyze/text", flush=True)
    print(f"  - POST /api/analyze/file", flush=True)
    print(f"\nPress CTRL+C to stop\n", flush=True)
    print("="*70 + "\n", flush=True)

    # Run without debug and without reloader
    app.run(
        host=config.HOST,
        port=config.PORT,
        debug=False,
        use_reloader=False,
        threaded=True
    )


if __name__ == '__main__':
    main()
