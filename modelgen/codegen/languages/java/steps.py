"""
Step builder planning.

A step builder forces every required field to be supplied, in declaration
order, before ``build()`` becomes reachable. Planning is independent of Java
syntax: it turns a model's field list into an ordered chain of step
contracts plus one terminal contract, and the generator renders those.
"""

from dataclasses import dataclass
from typing import Collection, Generic, List, Optional, Sequence, Tuple, TypeVar

from ...core.generator import GeneratorError
from ...core.schema import Field, Model

T = TypeVar("T")


class StepPlanError(GeneratorError):
    """Raised when a field list cannot form a simple step chain."""

    pass


@dataclass(frozen=True)
class StepContract(Generic[T]):
    """The only legal next call: set ``item``, then move to ``next_item``."""

    item: T
    next_item: Optional[T] = None

    @property
    def is_last(self) -> bool:
        """True when this step returns the terminal Build contract."""
        return self.next_item is None


@dataclass(frozen=True)
class BuildContract:
    """Terminal contract: build(), the identity setter and optional setters."""

    identity_field: Optional[Field]
    optional_fields: Tuple[Field, ...]


@dataclass(frozen=True)
class BuilderPlan:
    """Everything needed to render step interfaces and the Builder class."""

    steps: Tuple[StepContract[Field], ...]
    build: BuildContract
    slots: Tuple[Field, ...]

    @property
    def entry_field(self) -> Optional[Field]:
        """First required field, or None when the entry is the Build contract."""
        return self.steps[0].item if self.steps else None


def partition_fields(fields: Sequence[Field]) -> Tuple[List[Field], List[Field]]:
    """Split fields into (required, optional), keeping declaration order."""
    required = [f for f in fields if f.is_required]
    optional = [f for f in fields if not f.is_required]
    return required, optional


def plan_step_chain(
    items: Sequence[T], key=None, reserved: Collection = ()
) -> List[StepContract[T]]:
    """
    Build a linear chain of step contracts from an ordered item list.

    Each contract points at its successor; the last one points at nothing,
    meaning the terminal contract. ``key`` extracts the identity used to
    detect duplicates, which would make the chain reachable through more
    than one path. Keys listed in ``reserved`` belong to the terminal
    contract and may not name a step.

    Raises:
        StepPlanError: If two items share a key or a key is reserved.
    """
    key = key or (lambda item: item)
    seen = set()
    for item in items:
        item_key = key(item)
        if item_key in reserved:
            raise StepPlanError(f"Step '{item_key}' collides with the terminal build step")
        if item_key in seen:
            raise StepPlanError(f"Duplicate step '{item_key}' in builder chain")
        seen.add(item_key)

    return [
        StepContract(item=item, next_item=items[idx + 1] if idx + 1 < len(items) else None)
        for idx, item in enumerate(items)
    ]


def plan_step_builder(model: Model, key=None, reserved: Collection = ()) -> BuilderPlan:
    """
    Plan the step builder for a model.

    Required fields other than the identity field form the chain. The
    identity field gets its own setter on the terminal contract; optional
    fields get terminal setters too. Builder slots keep the model's field
    order.

    ``key`` maps a field to the name its step is rendered under and defaults
    to the schema name; ``reserved`` is forwarded to ``plan_step_chain``.
    """
    required, optional = partition_fields(model.fields)
    chain_fields = [f for f in required if not f.is_identity]
    optional_setters = tuple(f for f in optional if not f.is_identity)

    steps = plan_step_chain(chain_fields, key=key or (lambda f: f.name), reserved=reserved)

    return BuilderPlan(
        steps=tuple(steps),
        build=BuildContract(
            identity_field=model.identity_field,
            optional_fields=optional_setters,
        ),
        slots=tuple(model.fields),
    )
