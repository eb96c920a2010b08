"""modelgen - Java model code generation from a normalized schema."""

__version__ = "0.1.0"
