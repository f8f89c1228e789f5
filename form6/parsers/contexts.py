"""
Current-context selection policy.

Form 6 instance documents repeat the same tag once per reporting context
(current year, prior year, one per pipeline segment, ...). The vendor dialect
names its contexts with short opaque ids, so instead of resolving the period
definitions we recognise the current period by a small allow-list of tokens.
"""

from typing import Optional

from ..core.base_types import ContextRef
from ..utils.config import ContextPolicyConfig, get_settings


class CurrentContextPolicy:
    """
    Decides whether a context identifier denotes the current reporting period.

    A context is current when its id equals the primary or secondary token,
    or contains the current-period marker or the current filing year.

    Instances are callable so they can be passed wherever a
    ``ContextPredicate`` is expected.
    """

    def __init__(
        self,
        primary_context: str = "C1",
        secondary_context: str = "C2",
        current_marker: str = "Current",
        current_year: str = "2024",
    ) -> None:
        self.primary_context = primary_context
        self.secondary_context = secondary_context
        self.current_marker = current_marker
        self.current_year = str(current_year)

    @classmethod
    def from_config(cls, config: Optional[ContextPolicyConfig] = None) -> "CurrentContextPolicy":
        """Build the policy from configuration (defaults to global settings)."""
        config = config or get_settings().context_policy
        return cls(
            primary_context=config.primary_context,
            secondary_context=config.secondary_context,
            current_marker=config.current_marker,
            current_year=config.current_year,
        )

    def is_current(self, context_ref: Optional[ContextRef]) -> bool:
        """Return True if ``context_ref`` matches the current-period allow-list."""
        if not context_ref:
            return False
        return (
            context_ref == self.primary_context
            or context_ref == self.secondary_context
            or (bool(self.current_marker) and self.current_marker in context_ref)
            or (bool(self.current_year) and self.current_year in context_ref)
        )

    def __call__(self, context_ref: Optional[ContextRef]) -> bool:
        return self.is_current(context_ref)

    def __repr__(self) -> str:
        return (
            f"CurrentContextPolicy(primary={self.primary_context!r}, "
            f"secondary={self.secondary_context!r}, marker={self.current_marker!r}, "
            f"year={self.current_year!r})"
        )
