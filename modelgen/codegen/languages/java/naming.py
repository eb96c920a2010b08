"""
Java-specific naming utilities.

Handles Java reserved words and the class/member naming conventions
used by the generated code.
"""

from ...core.naming import NameSanitizer

JAVA_RESERVED_WORDS = {
    "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
    "class", "const", "continue", "default", "do", "double", "else", "enum",
    "extends", "final", "finally", "float", "for", "goto", "if", "implements",
    "import", "instanceof", "int", "interface", "long", "native", "new",
    "package", "private", "protected", "public", "return", "short", "static",
    "strictfp", "super", "switch", "synchronized", "this", "throw", "throws",
    "transient", "try", "void", "volatile", "while", "true", "false", "null",
    "var", "record", "yield",
}

# Names the generated classes already use for their own members
JAVA_GENERATED_NAMES = {
    "Builder", "Model", "Object", "String", "Class",
}


def create_java_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Java."""
    return NameSanitizer(JAVA_RESERVED_WORDS, JAVA_GENERATED_NAMES)
