"""Structure-preserving insertion of dotted translation keys into locale YAML files."""

__all__ = [
    "buffer",
    "cli",
    "config",
    "editor",
    "errors",
    "events",
    "runtime",
]

__version__ = "0.1.0"
