"""Construction modes for validated entities."""

from __future__ import annotations

from enum import Enum


class ConstructionMode(str, Enum):
    """How an entity constructor treats its validator hooks.

    VALIDATED runs pre- and post-construction hooks. TRUSTED skips both and
    is meant for data that was validated before it was persisted.
    """

    VALIDATED = "validated"
    TRUSTED = "trusted"
