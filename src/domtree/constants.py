#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the domtree library.

Constants are organized by category:
1. Node Constraints - Bounds used by optional node checks
2. Validation Defaults - Default values for ValidationOptions
3. Text Extraction - Defaults for plain-text helpers
"""

from __future__ import annotations

# =============================================================================
# Node Constraints
# =============================================================================

MIN_HEADER_LEVEL = 1
MAX_HEADER_LEVEL = 6

# =============================================================================
# Validation Defaults
# =============================================================================

DEFAULT_STRICT_VALIDATION = False
DEFAULT_CHECK_HEADING_LEVELS = False

# =============================================================================
# Text Extraction
# =============================================================================

DEFAULT_TEXT_JOINER = " "
