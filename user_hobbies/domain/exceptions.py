class RepositoryError(RuntimeError):
    """Raised when the underlying store fails (connection, driver, bad document)."""
