"""Core building blocks: error codes, hashing, versions, ids and tags, types, configuration, components, process memory and sample routines."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "hashing",
    "version",
    "ids",
    "types",
    "config",
    "component",
    "osmem",
    "pt1",
    "activity",
    "perception",
]