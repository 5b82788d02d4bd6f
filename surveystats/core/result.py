"""
Generic result container for all surveystats computations.

The Result class provides a standardized envelope that every engine's
result uses. This enables shared tooling for timing, logging and chart
serialization while allowing each engine to define its own parameter
structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (n_dropped, method, fence)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a render pass cannot alter its inputs
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The engine-specific parameter payload type

    Attributes:
        params: Engine-specific values (means, bounds, F statistic, ...)
        info: Structured metadata (method, filtered counts, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        engine: Identifier of the engine that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=DescriptiveParams(mean=3.0, ...),
        ...     info={'n_dropped': 1, 'quantile_method': 'nearest_rank'},
        ...     timing={'total_seconds': 0.0001},
        ...     engine='descriptive',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    engine: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
