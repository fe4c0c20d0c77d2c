"""
Main application entry point
The application lives in backend/laborconnect/main.py
"""
import sys
import os

# Add backend to path when running from a checkout without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "backend"))

from laborconnect.core.config import settings
from laborconnect.main import app
import uvicorn

if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
