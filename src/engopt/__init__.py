"""engopt: design-evaluation models for black-box engineering optimization."""

__version__ = "0.1.0"
