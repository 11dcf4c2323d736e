"""
Reference guards.

Mutators on reference fields call these helpers so that a value which is not
the expected model (or carries the wrong data-type category) fails loudly at
assignment time instead of at flush time.
"""
from core.base.exceptions import InvariantViolation


def require_instance(value, model_class, field_name, allow_none=False):
    """
    Ensure ``value`` is an instance of ``model_class``.

    Raises:
        InvariantViolation: value is None (and not allowed) or of a foreign class
    """
    if value is None:
        if allow_none:
            return None
        raise InvariantViolation(f"{field_name} is required")
    if not isinstance(value, model_class):
        raise InvariantViolation(
            f"{field_name} must be a {model_class.__name__} instance, "
            f"got {type(value).__name__}"
        )
    return value


def require_type(value, data_type, field_name, allow_none=False):
    """
    Ensure ``value`` is a reference Type of the given data-type category.

    Raises:
        InvariantViolation: value is not a Type, or belongs to another category
    """
    from core.reference.models import Type

    require_instance(value, Type, field_name, allow_none=allow_none)
    if value is not None and value.data_type != data_type:
        raise InvariantViolation(
            f"{field_name} requires a {data_type} type, got {value.data_type}"
        )
    return value
