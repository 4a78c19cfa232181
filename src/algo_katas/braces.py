"""Shell-style brace expansion.

A template such as ``"~/{Downloads,Pictures}/*.{jpg,png}"`` is parsed into a
small tree of literal fragments and choice points, then enumerated lazily with
one cursor per choice point, odometer style.

Groups may nest to any depth: parsing, rendering and advancing walk the tree
with explicit stacks instead of Python recursion.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set, Tuple, Union

from .settings import DEFAULT_SETTINGS, KataSettings


class BraceSyntaxError(ValueError):
    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at position {position}")
        self.position = position


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Choice:
    branches: Tuple[Tuple["Node", ...], ...]


Node = Union[Literal, Choice]


@dataclass
class _OpenGroup:
    start: int
    outer: List[Node]
    branches: List[Tuple[Node, ...]] = field(default_factory=list)


class _Unclosed(Exception):
    def __init__(self, start: int) -> None:
        self.start = start


def _scan(template: str, policy: str, as_text: Set[int]) -> Tuple[Node, ...]:
    """One left-to-right pass with a stack of open groups.

    Positions in ``as_text`` are ``{`` characters to read as plain text.
    Raises ``_Unclosed`` with the outermost open group when the text ends
    inside a group.
    """
    nodes: List[Node] = []
    buf: List[str] = []
    stack: List[_OpenGroup] = []

    def flush() -> None:
        if buf:
            nodes.append(Literal("".join(buf)))
            buf.clear()

    for pos, ch in enumerate(template):
        if ch == "{" and pos not in as_text:
            flush()
            stack.append(_OpenGroup(start=pos, outer=nodes))
            nodes = []
        elif ch == "," and stack:
            flush()
            stack[-1].branches.append(tuple(nodes))
            nodes = []
        elif ch == "}" and stack:
            flush()
            group = stack.pop()
            group.branches.append(tuple(nodes))
            nodes = group.outer
            nodes.append(Choice(tuple(group.branches)))
        elif ch == "}" and policy == "reject":
            raise BraceSyntaxError("unmatched '}'", pos)
        else:
            buf.append(ch)
    if stack:
        raise _Unclosed(stack[0].start if policy == "literal" else stack[-1].start)
    flush()
    return tuple(nodes)


def parse_braces(template: str, *, settings: Optional[KataSettings] = None) -> Tuple[Node, ...]:
    """Parses ``template`` into literal and choice nodes.

    With ``brace_policy="literal"`` an unclosed ``{`` is kept as text and the
    rest of the template is read again after it, as bash does.
    """
    settings = settings or DEFAULT_SETTINGS
    settings.validate()
    as_text: Set[int] = set()
    while True:
        try:
            return _scan(template, settings.brace_policy, as_text)
        except _Unclosed as exc:
            if settings.brace_policy == "reject":
                raise BraceSyntaxError("unclosed '{'", exc.start) from None
            as_text.add(exc.start)


_Part = Union[str, "_Cursor"]


class _Cursor:
    __slots__ = ("branches", "selected")

    def __init__(self, n_branches: int) -> None:
        self.branches: List[List[_Part]] = [[] for _ in range(n_branches)]
        self.selected = 0


def _build(nodes: Tuple[Node, ...]) -> List[_Part]:
    root: List[_Part] = []
    todo: List[Tuple[Tuple[Node, ...], List[_Part]]] = [(nodes, root)]
    while todo:
        seq, target = todo.pop()
        for node in seq:
            if isinstance(node, Literal):
                target.append(node.text)
                continue
            cur = _Cursor(len(node.branches))
            target.append(cur)
            todo.extend(zip(node.branches, cur.branches))
    return root


def _render(root: List[_Part]) -> str:
    out: List[str] = []
    stack = [iter(root)]
    while stack:
        part = next(stack[-1], None)
        if part is None:
            stack.pop()
        elif isinstance(part, str):
            out.append(part)
        else:
            stack.append(iter(part.branches[part.selected]))
    return "".join(out)


def _advance(root: List[_Part]) -> bool:
    """Moves to the next combination; False once every cursor has wrapped.

    Cursors are visited left to right, innermost first: a group only moves to
    its next branch after everything inside its current branch has wrapped.
    """
    stack: List[Tuple[Iterator[_Part], Optional[_Cursor]]] = [(iter(root), None)]
    while stack:
        it, owner = stack[-1]
        part = next(it, None)
        if part is None:
            stack.pop()
            if owner is None:
                continue
            owner.selected += 1
            if owner.selected < len(owner.branches):
                return True
            owner.selected = 0
        elif not isinstance(part, str):
            stack.append((iter(part.branches[part.selected]), part))
    return False


def expand_braces(template: str, *, settings: Optional[KataSettings] = None) -> Iterator[str]:
    """Yields every expansion of ``template``.

    Order follows the leftmost innermost group first. A template without
    groups yields itself once. Parsing happens on the first ``next()``, so
    malformed templates fail when iteration starts.
    """
    root = _build(parse_braces(template, settings=settings))
    while True:
        yield _render(root)
        if not _advance(root):
            return


def _product(nodes: Tuple[Node, ...], counts: Dict[int, int]) -> int:
    total = 1
    for node in nodes:
        if isinstance(node, Choice):
            total *= counts[id(node)]
    return total


def count_expansions(template: str, *, settings: Optional[KataSettings] = None) -> int:
    """Number of strings ``expand_braces`` yields, without generating them.

    A sequence multiplies the counts of its groups; a group adds up the
    counts of its branches.
    """
    nodes = parse_braces(template, settings=settings)
    counts: Dict[int, int] = {}
    todo = [(n, False) for n in nodes if isinstance(n, Choice)]
    while todo:
        choice, ready = todo.pop()
        if ready:
            counts[id(choice)] = sum(_product(b, counts) for b in choice.branches)
            continue
        todo.append((choice, True))
        todo.extend((n, False) for b in choice.branches for n in b if isinstance(n, Choice))
    return _product(nodes, counts)
