"""
Impact Dashboard - Errors
Exceptions raised while building the reference data store.
"""


class DataIntegrityError(Exception):
    """Raised when the supplier and base-metric tables do not join one-to-one."""
