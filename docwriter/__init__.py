"""docwriter: project profiling and API reference extraction."""

__version__ = "0.1.0"
