"""Shared CLI context with lazy-initialized dependencies."""

from calshare.config import ShareConfig
from calshare.timezones.provider import PytzTransitionTableProvider


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        table = ctx.provider.lookup("Europe/Paris")
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: ShareConfig | None = None
        self._provider: PytzTransitionTableProvider | None = None

    @property
    def config(self) -> ShareConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = ShareConfig.from_env()
        return self._config

    @property
    def provider(self) -> PytzTransitionTableProvider:
        """Get transition table provider (lazy-loaded)."""
        if self._provider is None:
            self._provider = PytzTransitionTableProvider()
        return self._provider


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Returns:
        The global CLI context instance

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context.

    Args:
        ctx: The CLI context instance to set
    """
    global _ctx
    _ctx = ctx
