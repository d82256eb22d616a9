"""Explorer library layer.

This is the engine that sits behind explorerd (transport): it walks
directory trees and resolves file contents. It reads nothing from the
process environment; callers pass everything in explicitly.

Public Interface:
    Modules:
    - models: Shared data structures
    - tree: Recursive directory traversal
    - content: File content resolution
    - events: Failure reporting
    - utils: Identifiers and HTML escaping
"""

from .content import ContentResolver
from .events import EventReporter
from .events import LoggingEventReporter
from .models import Entry
from .models import FileContent
from .models import RootSpec
from .models import TraversalOptions
from .tree import TreeBuilder

__all__ = [
    "ContentResolver",
    "Entry",
    "EventReporter",
    "FileContent",
    "LoggingEventReporter",
    "RootSpec",
    "TraversalOptions",
    "TreeBuilder",
]
