"""
Shared type aliases and type definitions for Form6.

Centralizes commonly used types for consistency across modules.
"""

from typing import Callable, Literal, TypeAlias

# Filing identifier is the bare file name inside the source directory
FileId: TypeAlias = str

# Prefixed tag name, e.g. "ferc:TrunkRevenues"
TagName: TypeAlias = str

# Opaque reporting-context identifier taken from contextRef
ContextRef: TypeAlias = str

# Predicate deciding whether a context identifier denotes the current period
ContextPredicate: TypeAlias = Callable[[ContextRef], bool]

# Category maps in the detail report: label -> value
CategoryMap: TypeAlias = dict[str, float]

# Which mileage computation wins in the detail report
MileageSource: TypeAlias = Literal["segments", "pipelines"]
