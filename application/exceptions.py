"""
Application-layer exceptions.

These exceptions are used across the application, service and
infrastructure layers. Workout generation degrades instead of failing for
missing data, so only programming errors and collaborator I/O failures
are represented here.
"""


class UnknownDomainError(ValueError):
    """A value that is not a known TrainingDomain was used.

    This is a programming error, not a user-facing condition.
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unknown training domain: {value!r}")


class WorkoutGenerationError(Exception):
    """Workout could not be generated.

    Raised at the use-case boundary when one of the catalog, profile,
    park or program reads fails. The original error is chained.
    """

    pass


class ProfileNotFoundError(Exception):
    """The requested user profile does not exist."""

    pass


class ExerciseNotFoundError(Exception):
    """The requested exercise does not exist in the catalog."""

    pass
