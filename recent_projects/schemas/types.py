"""
Shared type definitions for schemas.

Centralizes the base models and aliases used across the project.

Layering:
- This module provides FOUNDATION types (BaseStrictModel, PermissiveModel, Platform)
- schemas/models.py defines the pipeline records on top of them
- schemas/storage.py models the IDE storage.json fragments
"""

from __future__ import annotations

from typing import Literal

import pydantic

# ==============================================================================
# Base Strict Model (Foundation)
# ==============================================================================


class BaseStrictModel(pydantic.BaseModel):
    """
    Foundation strict model - every pipeline record inherits from this.

    Uses extra='forbid' to reject unknown fields - any field not modeled
    causes immediate validation failure (fail-fast).
    """

    model_config = pydantic.ConfigDict(
        extra='forbid',  # Reject unknown fields (fail-fast)
        strict=True,  # Strict type coercion
        frozen=True,  # Immutable after creation
    )


# ==============================================================================
# Permissive Model (Foundation)
# ==============================================================================


class PermissiveModel(pydantic.BaseModel):
    """
    Foundation permissive model for structures we do not own.

    Symmetry with BaseStrictModel:
    - BaseStrictModel: extra='forbid' (rejects unknown fields)
    - PermissiveModel: extra='allow' (accepts unknown fields)

    IDE storage files carry many keys we never read, so the fragments we do
    read are modeled permissively while still type-checking the known fields.
    """

    model_config = pydantic.ConfigDict(
        extra='allow',  # Accept unknown fields (graceful fallback)
        strict=True,  # Strict type coercion for known fields
        frozen=True,  # Immutable after creation
    )


# ==============================================================================
# Platform identifiers
# ==============================================================================

# Values of sys.platform we know how to probe. Anything else degrades to zero results.
Platform = Literal['darwin', 'linux', 'win32']

SUPPORTED_PLATFORMS: tuple[Platform, ...] = ('darwin', 'linux', 'win32')

# Which parser produced a ParseResult
ParseStrategy = Literal['menubar', 'backup_workspaces', 'none']
