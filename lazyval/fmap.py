from . import *
from .value import Value, new_lazy

X = TypeVar("X")
Y = TypeVar("Y")

def fmap(source: Value[X], f: Callable[[X],Y]) -> Value[Y]:
    if not isinstance(source, Value):
        raise TypeError(f"Expected source to be a Value, but got: {type(source)}")
    if not callable(f):
        raise TypeError(f"Expected map function to be callable, but got: {type(f)}")

    return new_lazy(lambda: f(source.get()))
