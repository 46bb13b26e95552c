from __future__ import annotations

from typing import Optional, Protocol

from .model import Policy, PolicyOverride


class PolicyRepository(Protocol):
    def get_default(self) -> Optional[Policy]:
        raise NotImplementedError

    def get_override(self, user_id: int) -> Optional[PolicyOverride]:
        raise NotImplementedError

    def save_default(self, policy: Policy) -> None:
        raise NotImplementedError
