"""
Exception hierarchy for surveystats.

All exceptions inherit from SurveyStatsError so a rendering layer can catch
any library-specific failure with a single clause and show a
"data unavailable" state. Engine-specific exceptions inherit from the
closest base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class SurveyStatsError(Exception):
    """Base exception for all surveystats errors."""
    pass


class ValidationError(SurveyStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class MismatchedLengthError(DimensionError):
    """
    Paired observations have unequal lengths.

    Raised by the correlation engine when variable value arrays are not
    all the same length.

    Attributes:
        lengths: {variable name: length} for every variable supplied
    """

    def __init__(self, message: str, lengths: dict[str, int] | None = None):
        super().__init__(message)
        self.lengths = dict(lengths) if lengths is not None else {}


class EmptySampleError(ValidationError):
    """
    A statistic was requested on a sample with no finite values.

    Attributes:
        name: Name of the offending sample, if known
        n_dropped: Number of non-finite values discarded before the check
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        n_dropped: int = 0,
    ):
        super().__init__(message)
        self.name = name
        self.n_dropped = n_dropped


class InsufficientGroupsError(ValidationError):
    """
    ANOVA was requested with fewer than two groups.

    Attributes:
        n_groups: Number of groups supplied
    """

    def __init__(self, message: str, n_groups: int):
        super().__init__(message)
        self.n_groups = n_groups


class EmptyGroupError(ValidationError):
    """
    An ANOVA group has no finite values.

    Attributes:
        group: Name of the empty group
    """

    def __init__(self, message: str, group: str):
        super().__init__(message)
        self.group = group


class NumericalError(SurveyStatsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateVarianceError(NumericalError):
    """
    Within-group degrees of freedom are not positive.

    Raised when every group has exactly one observation, so the within-group
    mean square (and therefore F) is undefined.

    Attributes:
        df_within: Within-group degrees of freedom (N - k)
        n_obs: Total observations
        n_groups: Number of groups
    """

    def __init__(self, message: str, df_within: int, n_obs: int, n_groups: int):
        super().__init__(message)
        self.df_within = df_within
        self.n_obs = n_obs
        self.n_groups = n_groups


class DivisionByZeroError(NumericalError):
    """
    A ratio was requested against a zero baseline.

    Raised by the trend summarizer when the first historical value is 0.

    Attributes:
        quantity: Name of the undefined quantity
        baseline: The baseline value (always 0.0)
    """

    def __init__(self, message: str, quantity: str, baseline: float = 0.0):
        super().__init__(message)
        self.quantity = quantity
        self.baseline = baseline


class PlanError(SurveyStatsError):
    """Base class for plan-tier lookup and gating failures."""
    pass


class UnknownTierError(PlanError):
    """
    A plan tier name could not be resolved.

    Attributes:
        tier: The name that was looked up
        known: Tier identifiers that are available
    """

    def __init__(self, message: str, tier: str, known: tuple[str, ...] = ()):
        super().__init__(message)
        self.tier = tier
        self.known = known


class FeatureNotAvailableError(PlanError):
    """
    An analysis engine is not enabled for the caller's plan tier.

    Attributes:
        tier: Tier identifier
        engine: Engine name that was requested
    """

    def __init__(self, message: str, tier: str, engine: str):
        super().__init__(message)
        self.tier = tier
        self.engine = engine
