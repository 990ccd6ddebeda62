# app.py
"""
Thin entrypoint for the dashboard API.

Usage example:
    uvicorn app:app --reload
"""

from dashboard.main import app  # re-export FastAPI instance
