"""Payment initiation core: idempotent creation and lifecycle of bank payment orders."""

__version__ = "0.1.0"
