"""
Input validation utilities for pycolstats.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages and never touch a buffer before
every check has passed.

Design principles:
    - No silent type coercion (except np.asarray on read-only inputs)
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pycolstats.core.exceptions import (
    DimensionError,
    InvalidDimensionError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype (a view when no conversion is needed)

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_dimension(value: object, name: str) -> int:
    """
    Verify a matrix dimension is a positive integer.

    Args:
        value: Candidate dimension
        name: Parameter name for error messages

    Returns:
        The dimension as a Python int

    Raises:
        InvalidDimensionError: If value is not an integer or is < 1
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidDimensionError(
            f"{name}: expected a positive integer, got {value!r}",
            name=name,
            value=value,
        )
    if value < 1:
        raise InvalidDimensionError(
            f"{name}: must be >= 1, got {value}",
            name=name,
            value=value,
        )
    return int(value)


def check_scalar(value: object, name: str) -> float:
    """
    Verify a scalar option is a real number.

    NaN and Inf are accepted and propagate like any other value.

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {value!r}"
        )
    return float(value)


def check_min_size(array: NDArray, size: int, name: str) -> None:
    """
    Verify a flat buffer holds at least `size` values.

    Raises:
        DimensionError: If the buffer is too small
    """
    if array.size < size:
        raise DimensionError(
            f"{name}: buffer holds {array.size} values, need at least {size}"
        )


def check_writable_buffer(array: object, name: str) -> NDArray[np.floating[Any]]:
    """
    Verify an in-place target is a writable, C-contiguous float ndarray.

    Writes through a copy would be silently lost, so lists and
    non-contiguous views are rejected instead of converted.

    Raises:
        ValidationError: If the target cannot be written in place
    """
    if not isinstance(array, np.ndarray):
        raise ValidationError(
            f"{name}: must be a numpy.ndarray to be written in place, "
            f"got {type(array).__name__}"
        )
    if not np.issubdtype(array.dtype, np.floating):
        raise ValidationError(
            f"{name}: must have a floating dtype, got {array.dtype}"
        )
    if not array.flags.writeable:
        raise ValidationError(f"{name}: array is read-only")
    if not array.flags.c_contiguous:
        raise ValidationError(f"{name}: array must be C-contiguous (row-major)")
    return array


def as_matrix(
    buffer: ArrayLike,
    dim_i: int,
    dim_j: int,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Interpret a row-major buffer as a (dim_i, dim_j) matrix.

    The buffer is flattened in C order and its leading dim_i * dim_j
    values are used.

    Raises:
        InvalidDimensionError: If a dimension is not a positive integer
        DimensionError: If the buffer is too small
        ValidationError: If the buffer is not numeric
    """
    dim_i = check_dimension(dim_i, 'dim_i')
    dim_j = check_dimension(dim_j, 'dim_j')
    flat = check_array(buffer, name).reshape(-1)
    check_min_size(flat, dim_i * dim_j, name)
    return flat[:dim_i * dim_j].reshape(dim_i, dim_j)


def as_writable_matrix(
    buffer: object,
    dim_i: int,
    dim_j: int,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Like as_matrix(), but returns a view that writes through to `buffer`.

    Raises:
        InvalidDimensionError, DimensionError, ValidationError
    """
    dim_i = check_dimension(dim_i, 'dim_i')
    dim_j = check_dimension(dim_j, 'dim_j')
    array = check_writable_buffer(buffer, name)
    flat = array.reshape(-1)
    check_min_size(flat, dim_i * dim_j, name)
    return flat[:dim_i * dim_j].reshape(dim_i, dim_j)


def as_vector(
    vector: ArrayLike,
    length: int,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Interpret a column statistic vector; its leading `length` values are used.

    Raises:
        DimensionError: If the vector is too short
        ValidationError: If the vector is not numeric
    """
    flat = check_array(vector, name).reshape(-1)
    check_min_size(flat, length, name)
    return flat[:length]


def as_writable_vector(vector: object, length: int, name: str) -> NDArray[np.floating[Any]]:
    """Like as_vector(), but returns a view that writes through to `vector`."""
    flat = check_writable_buffer(vector, name).reshape(-1)
    check_min_size(flat, length, name)
    return flat[:length]
