"""
Language-specific code generators.

This module contains generators for different programming languages.
"""

from .java import JavaGenerator, create_java_generator

__all__ = ["JavaGenerator", "create_java_generator"]
