# 📄 File: domca/shared/utils/validators.py
# 🧭 Purpose (Layman Explanation):
# Small checkers that refuse empty names, empty passwords or missing values
# before they can reach a stored record.
# 🧪 Purpose (Technical Summary):
# Argument guard functions shared by the identifier generator and the entity
# behaviour methods; each raises InvalidArgumentError naming the argument.
# 🔗 Dependencies:
# typing, domca.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# domca.shared.core.identifiers, all domain models, dependency wiring

from typing import Any, Optional, Union

from domca.shared.core.exceptions import InvalidArgumentError


def is_empty_or_whitespace(value: Any) -> bool:
    """Check if value is None, empty, or only whitespace."""
    if value is None:
        return True
    if isinstance(value, str):
        return len(value.strip()) == 0
    if isinstance(value, (list, dict, tuple, set)):
        return len(value) == 0
    return False


def ensure_not_blank(value: Optional[str], argument: str) -> str:
    """
    Return value unchanged, or raise if it is None, empty or whitespace.

    Args:
        value: Candidate string
        argument: Argument name reported in the error

    Returns:
        The original value

    Raises:
        InvalidArgumentError: If the value is blank
    """
    if is_empty_or_whitespace(value):
        raise InvalidArgumentError(
            f"{argument} must not be null, empty, or consist only of whitespace.",
            argument=argument,
        )
    return value


def ensure_not_none(value: Any, argument: str) -> Any:
    if value is None:
        raise InvalidArgumentError(f"{argument} must not be None.", argument=argument)
    return value


def ensure_in_range(
    value: Union[int, float],
    argument: str,
    minimum: Optional[Union[int, float]] = None,
    maximum: Optional[Union[int, float]] = None,
    maximum_exclusive: bool = False,
) -> Union[int, float]:
    """
    Check that a number lies within [minimum, maximum] (or [minimum, maximum)).

    Raises:
        InvalidArgumentError: If the value is out of range
    """
    too_small = minimum is not None and value < minimum
    too_large = maximum is not None and (
        value >= maximum if maximum_exclusive else value > maximum
    )
    if too_small or too_large:
        upper = f"below {maximum}" if maximum_exclusive else f"at most {maximum}"
        bounds = []
        if minimum is not None:
            bounds.append(f"at least {minimum}")
        if maximum is not None:
            bounds.append(upper)
        raise InvalidArgumentError(
            f"{argument} must be {' and '.join(bounds)}.",
            argument=argument,
            value=value,
        )
    return value
