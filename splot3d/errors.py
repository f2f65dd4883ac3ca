class ScriptWriteError(OSError):
    """Raised when the gnuplot script cannot be written to its destination."""
