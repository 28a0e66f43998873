"""ID generators for primary keys (CUID2)."""

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new collision-resistant identifier for a task, rule or log row."""
    return str(cuid_generator())
