"""Cascading error filtering for validation errors."""

from typing import FrozenSet, List, Tuple

from .models import ValidationError


# Cascade level constants
FATAL = 0  # Grid shape errors - word checks cannot run
CRITICAL = 1  # Cell alphabet errors - word letter mismatches follow from them
HIGH = 2  # Word placement errors
MEDIUM = 3  # Overlap conflicts
LOW = 4  # Word count errors

# Most severe level present -> levels still worth reporting.
# Counts never depend on cell contents, so they survive a CRITICAL.
SHOWN_WITH: Tuple[Tuple[int, FrozenSet[int]], ...] = (
    (FATAL, frozenset({FATAL})),
    (CRITICAL, frozenset({CRITICAL, LOW})),
    (HIGH, frozenset({HIGH, MEDIUM, LOW})),
)


def _summarize_overflow(errors: List[ValidationError], max_errors: int) -> List[ValidationError]:
    """Keep the first max_errors-1 errors and fold the rest into one entry."""
    if len(errors) <= max_errors:
        return errors

    kept = errors[:max_errors - 1]
    hidden = len(errors) - len(kept)
    kept.append(ValidationError(
        code="ADDITIONAL_ERRORS",
        message=f"... and {hidden} more similar errors. Fix the above first.",
        cascade_level=errors[0].cascade_level
    ))
    return kept


def filter_cascading_errors(
    errors: List[ValidationError],
    max_errors: int = 5
) -> List[ValidationError]:
    """
    Hide errors that are likely side effects of a more severe one.

    - FATAL present → only FATAL
    - CRITICAL present → CRITICAL and LOW
    - HIGH present → HIGH, MEDIUM and LOW
    - otherwise → everything

    Kept errors are grouped by level, most severe first. With no severe
    level present the input order is kept. At most max_errors entries are
    returned.
    """
    if not errors:
        return errors

    present = {err.cascade_level for err in errors}
    result = list(errors)
    for level, shown in SHOWN_WITH:
        if level in present:
            # Most severe first, stable within a level
            kept = [err for err in errors if err.cascade_level in shown]
            result = sorted(kept, key=lambda err: err.cascade_level)
            break

    return _summarize_overflow(result, max_errors)
