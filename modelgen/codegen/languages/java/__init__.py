"""
Java code generator module.

Generates immutable model classes with step builders, enums and the
model provider from a normalized schema model.
"""

from .generator import JavaGenerator, compute_version, create_java_generator
from .naming import create_java_sanitizer
from .steps import (
    BuildContract,
    BuilderPlan,
    StepContract,
    StepPlanError,
    plan_step_builder,
    plan_step_chain,
)
from .types import FieldNames, ImportAccumulator, JavaType, JavaTypeMapper

__all__ = [
    "JavaGenerator",
    "compute_version",
    "create_java_generator",
    "create_java_sanitizer",
    # Step builder planning
    "BuildContract",
    "BuilderPlan",
    "StepContract",
    "StepPlanError",
    "plan_step_builder",
    "plan_step_chain",
    # Type system
    "FieldNames",
    "ImportAccumulator",
    "JavaType",
    "JavaTypeMapper",
]
