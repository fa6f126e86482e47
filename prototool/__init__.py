"""Protobuf tooling: config scaffolding, new-file templates, diffs, descriptor ordering and command definitions."""

__version__ = "0.1.0"