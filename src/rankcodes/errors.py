class RankCodeError(ValueError):
    """Base class for every error raised while ranking or unranking."""


class InvalidInputError(RankCodeError):
    """A malformed argument: duplicates, bad digits, wrong mark count, ..."""


class OutOfRangeError(RankCodeError):
    """A rank outside the valid range for the given parameters."""
