# src/linecalc_core/circuit/capabilities.py
"""
Capability protocols through which the evaluation pipeline talks to line models.

A line model class does not implement a fixed list of abstract methods. Instead it
nests small implementation classes and marks each with `@provides(...)`. The circuit
model asks a line model for `IAbcdContributor`, the loss estimator asks for
`ILossContributor`; neither needs to know which topology it is dealing with.
"""

import logging
from typing import Protocol, Type, TypeVar, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from .abcd import ABCDCoefficients
    from .base import LineModelBase

logger = logging.getLogger(__name__)


@runtime_checkable
class LineModelCapability(Protocol):
    """A marker protocol for all line model capabilities."""
    pass


TCapability = TypeVar("TCapability", bound=LineModelCapability)


@runtime_checkable
class IAbcdContributor(LineModelCapability, Protocol):
    """
    Derives the two-port transmission coefficients of a line model from the
    parameters the model was instantiated with.
    """

    def get_abcd(self, model: "LineModelBase") -> "ABCDCoefficients":
        ...


@runtime_checkable
class ILossContributor(LineModelCapability, Protocol):
    """
    Estimates the resistive power loss of a line model.

    `sending_current` is the propagated sending-end current. Which of it and the raw
    input current a model squares is part of that model's formula.
    """

    def get_power_loss(self, model: "LineModelBase", sending_current: complex) -> complex:
        ...


def provides(capability_protocol: Type[LineModelCapability]):
    """
    A class decorator registering a nested class as the implementation of a capability.
    `LineModelBase.declare_capabilities` discovers it through `_implements_capability`.
    """

    def decorator(cls: Type) -> Type:
        if not issubclass(capability_protocol, LineModelCapability):
            raise TypeError(
                f"Decorator argument for @provides must be a LineModelCapability "
                f"Protocol, but got {capability_protocol}."
            )
        cls._implements_capability = capability_protocol
        logger.debug(
            f"Class '{cls.__name__}' registered as providing capability '{capability_protocol.__name__}'."
        )
        return cls

    return decorator
