"""Personal information plugin for a voice assistant.

The plugin answers a small set of fixed utterances about the user's name
and preferences, backed by a JSON document on disk. Modules do not touch
the filesystem on import; the default store is created on first use.
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
