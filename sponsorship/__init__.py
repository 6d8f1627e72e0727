"""Sponsorship reservation backend (FastAPI)."""
