"""Entity-component-system core, queued events and utilities for game engines."""

__version__ = "0.1.0"