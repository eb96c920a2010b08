"""
Naming utilities for safe code generation.

Handles name sanitization, case conversions, keyword conflicts,
and other naming concerns across different programming languages.
"""

import re
from typing import Set, Dict
from enum import Enum


class NamingCase(Enum):
    """Different naming case styles."""
    SNAKE_CASE = "snake"      # user_name
    CAMEL_CASE = "camel"      # userName
    PASCAL_CASE = "pascal"    # UserName
    SCREAMING_SNAKE = "screaming_snake"  # USER_NAME


class NameSanitizer:
    """Handles name sanitization and case conversion."""

    def __init__(self, reserved_words: Set[str] = None, builtin_types: Set[str] = None):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            builtin_types: Set of builtin type names that might conflict
        """
        self.reserved_words = reserved_words or set()
        self.builtin_types = builtin_types or set()
        self._name_cache: Dict[str, str] = {}
        self._used_names: Set[str] = set()

    def sanitize_name(self, name: str, target_case: NamingCase = NamingCase.PASCAL_CASE,
                      suffix_on_conflict: str = "_") -> str:
        """
        Sanitize a top-level name, keeping it unique within this sanitizer.

        The same input always returns the same output until
        ``reset_used_names`` is called.

        Args:
            name: Original name to sanitize
            target_case: Desired case style
            suffix_on_conflict: Suffix to add for conflicts

        Returns:
            Sanitized name safe for use
        """
        cache_key = f"{name}_{target_case.value}_{suffix_on_conflict}"
        if cache_key in self._name_cache:
            return self._name_cache[cache_key]

        converted = self.convert(name, target_case, suffix_on_conflict)
        final_name = self._make_unique(converted, suffix_on_conflict)

        self._name_cache[cache_key] = final_name
        self._used_names.add(final_name)

        return final_name

    def convert(self, name: str, target_case: NamingCase,
                suffix_on_conflict: str = "_") -> str:
        """
        Clean and case-convert a member-level name.

        Unlike ``sanitize_name`` this does not track uniqueness; members live in
        their own class scope. Reserved words still get the conflict suffix.
        """
        cleaned = self._clean_basic(name)
        converted = self._convert_case(cleaned, target_case)
        if converted in self.reserved_words or converted in self.builtin_types:
            converted = f"{converted}{suffix_on_conflict}"
        return converted

    def _clean_basic(self, name: str) -> str:
        """Basic name cleanup - remove invalid characters."""
        cleaned = re.sub(r'[^a-zA-Z0-9_-]', '_', name)
        cleaned = cleaned.strip('_-')

        if cleaned and cleaned[0].isdigit():
            cleaned = f"_{cleaned}"

        if not cleaned:
            cleaned = "field"

        return cleaned

    def _convert_case(self, name: str, target_case: NamingCase) -> str:
        """Convert name to target case style."""
        if target_case == NamingCase.SNAKE_CASE:
            return to_snake_case(name)
        elif target_case == NamingCase.CAMEL_CASE:
            return to_camel_case(name)
        elif target_case == NamingCase.PASCAL_CASE:
            return to_pascal_case(name)
        elif target_case == NamingCase.SCREAMING_SNAKE:
            return to_constant_case(name)
        else:
            return name

    def _make_unique(self, name: str, suffix: str) -> str:
        original_name = name
        counter = 1
        while name in self._used_names:
            name = f"{original_name}{suffix}{counter}"
            counter += 1
        return name

    def reset_used_names(self):
        """Reset the tracking of used names."""
        self._used_names.clear()
        self._name_cache.clear()


def to_snake_case(name: str) -> str:
    """Convert to snake_case."""
    name = name.replace('-', '_')

    # "URLField" -> "URL_Field", then "postId" -> "post_Id"
    name = re.sub(r'([A-Z]+)([A-Z][a-z])', r'\1_\2', name)
    name = re.sub(r'([a-z0-9])([A-Z])', r'\1_\2', name)

    name = name.lower()
    name = re.sub(r'_+', '_', name)

    return name.strip('_')


def to_camel_case(name: str) -> str:
    """Convert to camelCase."""
    parts = [p for p in to_snake_case(name).split('_') if p]
    if not parts:
        return name
    return parts[0] + ''.join(part.capitalize() for part in parts[1:])


def to_pascal_case(name: str) -> str:
    """Convert to PascalCase."""
    return ''.join(part.capitalize() for part in to_snake_case(name).split('_') if part)


def to_constant_case(name: str) -> str:
    """Convert to CONSTANT_CASE."""
    return to_snake_case(name).upper()
