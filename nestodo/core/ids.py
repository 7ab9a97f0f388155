"""Todo identifier generation."""

import uuid


def new_id() -> str:
    """Return a random RFC-4122 version 4 identifier.

    Shape: 36 lowercase hex chars with hyphens at 8, 13, 18 and 23, the
    version nibble fixed to ``4`` and the variant nibble one of ``89ab``.
    Collisions are not checked for.
    """
    return str(uuid.uuid4())
