from __future__ import annotations

import logging

from ..core.enums import Role
from ..core.exceptions import AuthorizationError, PolicyMissingError
from .model import Policy, merge_policy
from .repository import PolicyRepository
from .validation import validate_policy

logger = logging.getLogger(__name__)


class PolicyService:
    def __init__(self, policies: PolicyRepository):
        self._policies = policies

    def get_default(self) -> Policy:
        policy = self._policies.get_default()
        if policy is None:
            raise PolicyMissingError("Global settings not configured")
        return policy

    def resolve(self, user_id: int) -> Policy:
        """Effective policy for an employee (organization default merged with any override)."""
        default = self.get_default()
        return merge_policy(default, self._policies.get_override(int(user_id)))

    def update_default(self, *, current_role: Role, policy: Policy) -> Policy:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only administrators can change settings")

        validate_policy(policy)
        self._policies.save_default(policy)
        logger.info("Organization policy updated: check-in %s, check-out %s", policy.check_in_time, policy.check_out_time)
        return policy
