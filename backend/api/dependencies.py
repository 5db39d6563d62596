"""Shared dependencies for API routes."""

from services.torre_client import TorreClient, get_client


def get_torre_client() -> TorreClient:
    return get_client()
