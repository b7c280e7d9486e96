def internal_only(func):
    """Decorator to mark a function as deliberately undocumented, as it is not part of the public API."""
    func.__internal_only__ = True
    return func


internal_only(internal_only)
