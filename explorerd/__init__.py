"""explorerd - read-only HTTP view of local directory trees."""

__version__ = "0.1.0"
