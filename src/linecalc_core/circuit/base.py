# src/linecalc_core/circuit/base.py

import logging
import inspect
from typing import Any, ClassVar, Dict, Optional, Type

from ..parameters.inputs import InputParameters, LineType
from .capabilities import LineModelCapability, TCapability
from .exceptions import InvalidLineTypeError


logger = logging.getLogger(__name__)


class LineModelBase:
    """
    The base class for all lumped transmission line models.

    A line model instance binds one `InputParameters` record for the duration of a
    single evaluation. Its behavior is exposed only through capabilities (see
    `capabilities.py`), which the circuit model and the loss estimator query
    independently.
    """
    line_type: ClassVar[Optional[LineType]] = None

    def __init__(self, params: InputParameters):
        self.params: InputParameters = params
        self._capability_cache: Dict[Type[LineModelCapability], LineModelCapability] = {}
        logger.debug(f"Initialized {type(self).__name__} for {params}")

    @classmethod
    def declare_capabilities(cls) -> Dict[Type[LineModelCapability], Type]:
        """
        Discovers the nested `@provides` classes across the MRO. The most derived
        implementation of each capability wins.
        """
        discovered_capabilities = {}
        for base_class in cls.__mro__:
            for _, member_obj in inspect.getmembers(base_class):
                if hasattr(member_obj, '_implements_capability'):
                    protocol = member_obj._implements_capability
                    if protocol not in discovered_capabilities:
                        discovered_capabilities[protocol] = member_obj
        return discovered_capabilities

    def get_capability(self, capability_type: Type[TCapability]) -> Optional[TCapability]:
        """
        Returns the (lazily created, cached) implementation of a capability, or None if
        this line model does not provide it.
        """
        if capability_type in self._capability_cache:
            return self._capability_cache[capability_type]

        impl_class = type(self).declare_capabilities().get(capability_type)
        if impl_class is None:
            return None

        instance = impl_class()
        self._capability_cache[capability_type] = instance
        return instance

    def require_capability(self, capability_type: Type[TCapability]) -> TCapability:
        """Like `get_capability`, but a missing capability is a programming error."""
        capability = self.get_capability(capability_type)
        if capability is None:
            raise TypeError(
                f"Line model '{type(self).__name__}' does not provide the "
                f"'{capability_type.__name__}' capability."
            )
        return capability

    def __repr__(self) -> str:
        return f"{type(self).__name__}(params={self.params!r})"


# --- Global Line Model Registry and Decorator ---

LINE_MODEL_REGISTRY: Dict[LineType, Type[LineModelBase]] = {}


def register_line_model(line_type: LineType):
    """
    A class decorator to register a line model as the implementation of a `LineType`.
    """
    def decorator(cls: Type[LineModelBase]):
        if not issubclass(cls, LineModelBase):
            raise TypeError(f"Class {cls.__name__} must inherit from LineModelBase.")
        if not isinstance(line_type, LineType):
            raise TypeError(f"register_line_model() expects a LineType member, got {line_type!r}.")

        if line_type in LINE_MODEL_REGISTRY:
            logger.warning(f"Line model for '{line_type.label}' is being redefined/overwritten.")
        cls.line_type = line_type
        LINE_MODEL_REGISTRY[line_type] = cls
        logger.debug(f"Registered line model '{line_type.label}' -> {cls.__name__}")
        return cls
    return decorator


def resolve_line_model(line_type: Any) -> Type[LineModelBase]:
    """
    Maps a line type selector to its registered model class.

    Raises:
        InvalidLineTypeError: if the selector is not a `LineType` member (or its
                              integer value), or no model is registered for it.
    """
    if isinstance(line_type, bool) or not isinstance(line_type, int):
        raise InvalidLineTypeError(
            line_type=line_type,
            details=f"Expected a LineType member, got a value of type '{type(line_type).__name__}'."
        )
    try:
        member = LineType(line_type)
    except ValueError:
        raise InvalidLineTypeError(
            line_type=line_type,
            details=f"{line_type!r} is outside the enumerated line types {[m.value for m in LineType]}."
        ) from None

    model_cls = LINE_MODEL_REGISTRY.get(member)
    if model_cls is None:
        raise InvalidLineTypeError(
            line_type=line_type,
            details=f"No line model is registered for '{member.label}'."
        )
    return model_cls


def instantiate_line_model(params: InputParameters) -> LineModelBase:
    """Returns the line model for `params.line_type`, bound to `params`."""
    return resolve_line_model(params.line_type)(params)
