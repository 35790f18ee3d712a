"""Voting Gateway Service clients module.

Contains the HTTP client for the voting backend.
"""

from services.voting_gateway_service.clients.backend_client import VotingBackendClientImpl

__all__ = ["VotingBackendClientImpl"]
