from dataclasses import dataclass
from typing import Union

LAMBDA = "λ"


@dataclass(eq=True, frozen=True, unsafe_hash=True)
class LExpr:
    def __str__(self) -> str:
        return format(self)


@dataclass(eq=True, frozen=True, unsafe_hash=True)
class Variable(LExpr):
    name: str


@dataclass(eq=True, frozen=True, unsafe_hash=True)
class Application(LExpr):
    func: LExpr
    arg: LExpr


@dataclass(eq=True, frozen=True, unsafe_hash=True)
class Abstraction(LExpr):
    param: str
    body: LExpr


# pylint: disable=redefined-builtin
def format(expr: LExpr) -> str:
    """Render ``expr`` with every binding and application made explicit.

    Abstraction bodies go in square brackets and application operands in
    braces, so ``f x y`` shows as ``({({f} {x})} {y})``. The output is meant
    for reading, not for parsing back.
    """
    # Walks an explicit stack: left-folded applications nest as deep as they
    # are long.
    out: list[str] = []
    stack: list[Union[str, LExpr]] = [expr]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
        elif isinstance(item, Variable):
            out.append(item.name)
        elif isinstance(item, Abstraction):
            stack.extend(["]", item.body, f"{LAMBDA} {item.param}.["])
        elif isinstance(item, Application):
            stack.extend(["})", item.arg, "} {", item.func, "({"])
        else:
            raise TypeError(f"Unknown expression: {item!r}")
    return "".join(out)
