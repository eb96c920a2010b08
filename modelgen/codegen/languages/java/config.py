"""
Java-specific constants and type mappings.

Import lists and the scalar table used when mapping
schema types to Java types.
"""

from typing import Dict, List

BUILD_STEP_NAME = "Build"

# Empty strings render as blank separator lines in the import block
CLASS_IMPORT_PACKAGES: List[str] = [
    "java.util.List",
    "java.util.UUID",
    "java.util.Objects",
    "",
    "androidx.core.util.ObjectsCompat",
    "",
    "com.amplifyframework.AmplifyException",
    "com.amplifyframework.core.model.Model",
    "com.amplifyframework.core.model.annotations.Index",
    "com.amplifyframework.core.model.annotations.Connection",
    "com.amplifyframework.core.model.annotations.ModelConfig",
    "com.amplifyframework.core.model.annotations.ModelField",
    "com.amplifyframework.core.model.query.predicate.QueryField",
    "",
    "static com.amplifyframework.core.model.query.predicate.QueryField.field",
]

LOADER_IMPORT_PACKAGES: List[str] = [
    "com.amplifyframework.core.model.Model",
    "com.amplifyframework.core.model.ModelProvider",
    "com.amplifyframework.util.Immutable",
    "",
    "java.util.Arrays",
    "java.util.HashSet",
    "java.util.Set",
]

JAVA_SCALAR_MAP: Dict[str, str] = {
    "ID": "String",
    "String": "String",
    "Int": "Integer",
    "Float": "Float",
    "Boolean": "Boolean",
    "AWSDate": "java.util.Date",
    "AWSDateTime": "java.util.Date",
    "AWSTime": "java.sql.Time",
    "AWSTimestamp": "Long",
    "AWSEmail": "String",
    "AWSJSON": "String",
    "AWSURL": "String",
    "AWSPhone": "String",
    "AWSIPAddress": "String",
}
