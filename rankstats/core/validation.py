"""
Input validation utilities for rankstats.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

from enum import Enum
from numbers import Integral, Real
from typing import Any, Mapping, TypeVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from rankstats.core.exceptions import ValidationError, DimensionError

E = TypeVar('E', bound=Enum)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Empty lists come back as float64 already; anything else must be numeric
    if result.size > 0 and not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_probabilities(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every non-NaN entry lies in [0, 1].

    NaN is allowed (it marks a missing test); Inf and values outside the
    unit interval are not.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If any non-NaN value is outside [0, 1]
    """
    values = array[~np.isnan(array)]
    bad = values[(values < 0.0) | (values > 1.0)]
    if bad.size > 0:
        raise ValidationError(
            f"{name}: values must lie in [0, 1], got {bad.size} outside "
            f"(e.g. {bad[0]!r})"
        )


def check_sample_size(n: Any, name: str, minimum: int = 1) -> int:
    """
    Verify a sample size is an integer of at least `minimum`.

    Integral floats (e.g. 10.0) are accepted; bools are not.

    Args:
        n: Value to check
        name: Parameter name for error messages
        minimum: Smallest allowed value

    Returns:
        The sample size as a Python int

    Raises:
        ValidationError: If n is not an integer or is below minimum
    """
    if isinstance(n, bool):
        raise ValidationError(f"{name}: expected an integer, got bool {n!r}")
    if isinstance(n, Integral):
        value = int(n)
    elif isinstance(n, Real) and float(n).is_integer():
        value = int(n)
    else:
        raise ValidationError(f"{name}: expected an integer, got {n!r}")

    if value < minimum:
        raise ValidationError(f"{name}: must be >= {minimum}, got {value}")
    return value


def check_open_unit_interval(value: Any, name: str) -> float:
    """
    Verify a scalar lies strictly between 0 and 1 (e.g. an alpha level).

    Raises:
        ValidationError: If value is not a real number in (0, 1)
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{name}: expected a real number, got {value!r}")
    if not 0.0 < float(value) < 1.0:
        raise ValidationError(f"{name}: must be in (0, 1), got {value!r}")
    return float(value)


def check_choice(
    value: Any,
    enum_cls: type[E],
    name: str,
    aliases: Mapping[str, E] | None = None,
) -> E:
    """
    Resolve a method name to its enum member.

    Accepts an enum member, its string value, or a registered alias.

    Args:
        value: Enum member or string
        enum_cls: The enum to resolve against
        name: Parameter name for error messages
        aliases: Extra accepted spellings

    Returns:
        The enum member

    Raises:
        ValidationError: If value names no member
    """
    if isinstance(value, enum_cls):
        return value
    if aliases and isinstance(value, str) and value in aliases:
        return aliases[value]
    try:
        return enum_cls(value)
    except ValueError:
        valid = tuple(m.value for m in enum_cls)
        if aliases:
            valid = valid + tuple(aliases)
        raise ValidationError(
            f"{name} must be one of {valid}, got {value!r}"
        ) from None
