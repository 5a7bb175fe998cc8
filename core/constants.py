"""
Shared constants for workout generation.

This module has no dependencies on models or services to avoid circular imports.
"""

# Level assigned when no progression data exists for a domain
DEFAULT_LEVEL = 1

# Estimated duration of a generated workout when the caller supplies none
DEFAULT_WORKOUT_MINUTES = 45

# Safety margin: an exercise may require at most this many levels above the user
MAX_LEVEL_STEP_ABOVE = 1

# Sub-levels above this are considered "advanced" for display purposes
BEGINNER_DISPLAY_LEVEL_CEILING = 5

# Replacement candidates must sit within this many levels of the current one
SWAP_LEVEL_WINDOW = 1

DEFAULT_PLAN_NAME = "Default Workout"
DEFAULT_MASTER_PLAN_NAME = "Full Body Workout"
DEFAULT_REGULAR_PLAN_NAME = "Workout"
