class ContextError(RuntimeError):
    """Raised when a collaborator is requested outside the dashboard that provides it."""
