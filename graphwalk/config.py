"""Configuration classes for graphwalk components."""

from dataclasses import dataclass


@dataclass
class WalkConfig:
    """Configuration for traversal diagnostics."""

    # Emit a DEBUG progress record every N elements produced by a traversal.
    # Zero disables progress records.
    progress_log_interval: int = 10_000

    def should_log_progress(self, count: int) -> bool:
        """Return True when ``count`` emitted elements warrant a progress record."""
        interval = self.progress_log_interval
        return interval > 0 and count > 0 and count % interval == 0


# Global configuration instance
WALK_CONFIG = WalkConfig()
