"""Correction policy implementations."""

from typing import Optional

from ..utils.config import CorrectionSettings
from .base import CorrectionPolicy
from .fixed import FixedPolicy
from .weighted_decay import WeightedDecayPolicy

POLICIES = {
    'weighted-decay': WeightedDecayPolicy,
    'fixed': FixedPolicy,
}


def create_policy(name: str, settings: Optional[CorrectionSettings] = None) -> CorrectionPolicy:
    """Instantiate a policy by its config name."""
    policy_cls = POLICIES.get(name.lower())
    if policy_cls is None:
        raise ValueError(f"Unknown policy: {name}")
    return policy_cls(settings)


__all__ = ['CorrectionPolicy', 'FixedPolicy', 'WeightedDecayPolicy', 'create_policy']
