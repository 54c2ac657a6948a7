"""Infrastructure helpers shared by adapters and domain."""

from relay.infrastructure.log import StderrLogger

__all__ = ["StderrLogger"]
