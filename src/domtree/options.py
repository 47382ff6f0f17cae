#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for grammar validation.

Options are immutable dataclasses; use ``create_updated`` to derive a
modified copy.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from domtree.constants import DEFAULT_CHECK_HEADING_LEVELS, DEFAULT_STRICT_VALIDATION
from domtree.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class ValidationOptions(CloneFrozenMixin):
    """Options controlling how a document tree is validated.

    With the defaults, validation follows the containment grammar exactly and
    reports its verdict as a boolean.

    Parameters
    ----------
    strict : bool, default = False
        Whether ``validate`` raises GrammarError instead of returning False
    check_heading_levels : bool, default = False
        Whether a Header whose level falls outside 1-6 is rejected as a block

    """

    strict: bool = field(
        default=DEFAULT_STRICT_VALIDATION,
        metadata={"help": "Raise GrammarError when the tree is not well-formed"},
    )
    check_heading_levels: bool = field(
        default=DEFAULT_CHECK_HEADING_LEVELS,
        metadata={"help": "Reject Header nodes whose level is outside 1-6"},
    )

    def __post_init__(self) -> None:
        """Validate option types.

        Raises
        ------
        ValidationError
            If a flag is not a bool

        """
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, bool):
                raise ValidationError(
                    f"{f.name} must be a bool, got {type(value).__name__}",
                    parameter_name=f.name,
                    parameter_value=value,
                )
