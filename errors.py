# errors.py

class InvalidArgumentError(ValueError):
    """Raised when a required point or rectangle is missing or malformed."""

def check_not_none(value, name="argument"):
    """Raises InvalidArgumentError if value is None, otherwise returns it."""
    if value is None:
        raise InvalidArgumentError(f"A null {name} was passed!")
    return value
