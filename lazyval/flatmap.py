from . import *
from .value import Value, new_lazy

X = TypeVar("X")
Y = TypeVar("Y")

def flatmap(source: Value[X], f: Callable[[X],Value[Y]]) -> Value[Y]:
    if not isinstance(source, Value):
        raise TypeError(f"Expected source to be a Value, but got: {type(source)}")
    if not callable(f):
        raise TypeError(f"Expected flatmap function to be callable, but got: {type(f)}")

    def thunk() -> Y:
        inner = f(source.get())
        if not isinstance(inner, Value):
            raise TypeError(f"Expected flatmap function to return a Value, but got: {type(inner)}")
        return inner.get()

    return new_lazy(thunk)
