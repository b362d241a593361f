class NothingToUndoError(RuntimeError):
    """Undo was requested while the history is empty."""

    pass


class CommandStateError(RuntimeError):
    """A command was executed or undone out of order."""

    pass


class ConfigError(RuntimeError):
    """An error in the roster config."""

    pass
