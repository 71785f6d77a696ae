from .dispatch import dispatch, raising, unpack, unpack_with, unpacking
from .events import UnpackEvent
from .outcome import Bindings, Outcome
from .policy import DEFAULT_POLICY, STRICT_POLICY, UnpackPolicy
from .trace import Traced, aunpack_w, unpack_traced
from .unpacker import Unpacker, aunpack, unpack_result
from .window import Window

__all__ = (
    # State
    "Bindings",
    "Outcome",
    "UnpackEvent",
    "Unpacker",
    "Window",
    # Config
    "DEFAULT_POLICY",
    "STRICT_POLICY",
    "UnpackPolicy",
    # Drivers
    "aunpack",
    "aunpack_w",
    "unpack_result",
    "unpack_traced",
    "Traced",
    # Dispatch
    "dispatch",
    "raising",
    "unpack",
    "unpack_with",
    "unpacking",
)
