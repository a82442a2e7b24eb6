"""
Small identifier helpers.
"""

from __future__ import annotations

import uuid


def generate_unique_id(name: str) -> str:
    """Return ``name`` followed by a random hex suffix, e.g. ``John-Doe-3f9a1c2b7e4d``."""
    return f"{name}-{uuid.uuid4().hex[:12]}"
