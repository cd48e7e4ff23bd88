# mcqbank/utils/dependencies.py
import random

from fastapi import Request

from mcqbank.services.repository import RepositoryIndex

def get_repository(request: Request) -> RepositoryIndex:
    """
    Dependency returning the repository index built at startup.
    The index is read-only, so every request shares the same instance.
    """
    return request.app.state.repository

def get_rng() -> random.Random:
    """Dependency providing a fresh, OS-seeded random source per request."""
    return random.Random()
