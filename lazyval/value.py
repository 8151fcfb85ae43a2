from . import *

from dataclasses import dataclass

X = TypeVar("X", covariant=True)
Y = TypeVar("Y")

@dataclass(frozen=True)
class Immediate(Generic[X]):
    value: X

@dataclass(frozen=True)
class Computation(Generic[X]):
    thunk: Callable[[],X]

Variant = Union[Immediate[X], Computation[X]]

_ZERO_VALUES: Dict[type, Callable[[],Any]] = {
    int: int,
    float: float,
    complex: complex,
    bool: bool,
    str: str,
    bytes: bytes,
    bytearray: bytearray,
    list: list,
    dict: dict,
    set: set,
    frozenset: frozenset,
    tuple: tuple,
}

class Value(Generic[X]):

    def __init__(self, variant: "Variant[X]|None" = None) -> None:
        super().__init__()
        if variant is not None and not isinstance(variant, (Immediate, Computation)):
            raise TypeError(f"Expected Immediate or Computation variant, but got: {type(variant)}")
        self._variant = variant

    @classmethod
    def of(cls, value: Y) -> "Value[Y]":
        return cls(Immediate(value))

    @classmethod
    def lazy(cls, thunk: Callable[[],Y]) -> "Value[Y]":
        if not callable(thunk):
            raise TypeError(f"Expected thunk to be callable, but got: {type(thunk)}")
        return cls(Computation(thunk))

    @property
    def variant(self) -> "Variant[X]|None":
        return self._variant

    @property
    def is_lazy(self) -> bool:
        return isinstance(self._variant, Computation)

    def get(self) -> X:
        """Retrieve the value, running the thunk on every call if lazy.

        A container built without a variant yields the zero value of its
        type parameter, e.g. ``Value[int]().get() == 0``.
        """
        variant = self._variant
        if isinstance(variant, Computation):
            return variant.thunk()
        elif isinstance(variant, Immediate):
            return variant.value
        else:
            return self._zero_value()

    def map(self, f: Callable[[X],Y]) -> "Value[Y]":
        from .fmap import fmap
        return fmap(self, f)

    def flatmap(self, f: "Callable[[X],Value[Y]]") -> "Value[Y]":
        from .flatmap import flatmap
        return flatmap(self, f)

    def _zero_value(self) -> X:
        # Set by typing on instances created through an alias, e.g. Value[int]().
        orig_class = getattr(self, "__orig_class__", None)
        if orig_class is None:
            return cast(X, None)

        value_type, = get_args(orig_class)
        zero = _ZERO_VALUES.get(get_origin(value_type) or value_type)
        if zero is None:
            return cast(X, None)
        return cast(X, zero())

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "_variant" and "_variant" in self.__dict__:
            raise AttributeError(f"{self.__class__.__name__} variant is fixed at construction")
        super().__setattr__(name, value)

    def __call__(self) -> X:
        return self.get()

    def __repr__(self) -> str:
        if self._variant is None:
            return f"{self.__class__.__name__}()"
        return f"{self.__class__.__name__}({self._variant!r})"

def new(value: Y) -> Value[Y]:
    return Value.of(value)

def new_lazy(thunk: Callable[[],Y]) -> Value[Y]:
    return Value.lazy(thunk)
