"""Exception types raised inside the console core.

Nothing here is fatal to a session: the controller catches exceptions at its
dispatch boundary and turns it into an error transcript entry.
"""


class ConsoleError(Exception):
    """Base class for console failures."""


class EngineNotReadyError(ConsoleError):
    """The query engine was used before it finished loading its data."""


class ConfigError(ConsoleError, ValueError):
    """An environment setting could not be parsed."""
