"""Interfaces to collaborators supplied by the hosting environment.

The oracle does not verify identities or swap its own code.  The host
provides both through these narrow abstractions, wired at the application
boundary.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .errors import Unauthorized


class Authorizer(ABC):
    """Host-supplied identity verification."""

    @abstractmethod
    async def require_auth(self, principal: str) -> None:
        """Return if the current call is signed by principal; raise Unauthorized otherwise."""


class TrustedAuthorizer(Authorizer):
    """Accepts every principal.

    For hosts that authenticate the caller before the call reaches the
    oracle, so the caller argument is already a verified identity.
    """

    async def require_auth(self, principal: str) -> None:
        if not principal:
            raise Unauthorized("empty principal")


class Deployer(ABC):
    """Host-supplied code upgrade mechanism."""

    @abstractmethod
    async def update_current_code(self, code_hash: bytes) -> None:
        """Replace the running oracle code with the build identified by code_hash."""
