"""
Application services.

Contains the session-level network service:
- network_service: owns the recruiter tree and exposes commission queries
"""

from app.services.network_service import NetworkService

__all__ = ["NetworkService"]
