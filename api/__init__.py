"""
Checksum Service API (FastAPI)

HTTP API for the checksum service:
- GET /checksum - CRC32 of the text query parameter
- GET /hash - SHA-256 of the text query parameter
- GET /health - Health check

Usage:
    uvicorn api.app:app --reload
"""

__version__ = "0.1.0"
