"""Command-driven queues, heaps, sets and lookup tables."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence

_SET_RANGE = range(1, 21)


def run_queue_commands(commands: Iterable[str]) -> list[int]:
    """Run queue commands ("push X", "pop", "size", "empty", "front", "back").

    Returns what each reporting command printed; -1 stands for an empty queue.
    """
    queue: deque[int] = deque()
    output: list[int] = []
    for command in commands:
        name, *args = command.split()
        if name == "push":
            if len(args) != 1:
                raise ValueError(f"push takes one value: {command!r}")
            queue.append(int(args[0]))
        elif name == "pop":
            output.append(queue.popleft() if queue else -1)
        elif name == "size":
            output.append(len(queue))
        elif name == "empty":
            output.append(0 if queue else 1)
        elif name == "front":
            output.append(queue[0] if queue else -1)
        elif name == "back":
            output.append(queue[-1] if queue else -1)
        else:
            raise ValueError(f"unknown command {command!r}")
    return output


def absolute_heap(operations: Iterable[int]) -> list[int]:
    """Push non-zero values; on 0 pop the smallest by absolute value.

    Ties go to the negative value; popping an empty heap yields 0.
    """
    heap: list[tuple[int, int]] = []
    output: list[int] = []
    for value in operations:
        if value == 0:
            output.append(heapq.heappop(heap)[1] if heap else 0)
        else:
            heapq.heappush(heap, (abs(value), value))
    return output


def max_heap(operations: Iterable[int]) -> list[int]:
    """Push positive values; on 0 pop the largest, or yield 0 when empty.

    Negative values are ignored.
    """
    heap: list[int] = []
    output: list[int] = []
    for value in operations:
        if value == 0:
            output.append(-heapq.heappop(heap) if heap else 0)
        elif value > 0:
            heapq.heappush(heap, -value)
    return output


def print_order(priorities: Sequence[int], target: int) -> int:
    """Position (1-based) at which document ``target`` is printed.

    The printer takes the front document only if none waiting has higher
    priority; otherwise the front document moves to the back.
    """
    if not 0 <= target < len(priorities):
        raise IndexError(f"document {target} is not in the queue")
    queue = deque(enumerate(priorities))
    highest = sorted(priorities, reverse=True)
    printed = 0
    while True:
        index, priority = queue[0]
        if priority == highest[printed]:
            queue.popleft()
            printed += 1
            if index == target:
                return printed
        else:
            queue.rotate(-1)


def run_set_commands(commands: Iterable[str]) -> list[bool]:
    """Run set commands over 1..20 ("add", "remove", "check", "toggle", "all", "empty").

    Returns the answer of each "check" command.
    """
    members: set[int] = set()
    answers: list[bool] = []
    for command in commands:
        name, *args = command.split()
        if name in ("add", "remove", "check", "toggle"):
            if len(args) != 1:
                raise ValueError(f"{name} takes one value: {command!r}")
            value = int(args[0])
            if value not in _SET_RANGE:
                raise ValueError(f"{value} is outside 1..20")
            if name == "add":
                members.add(value)
            elif name == "remove":
                members.discard(value)
            elif name == "check":
                answers.append(value in members)
            else:
                members ^= {value}
        elif name == "all":
            members = set(_SET_RANGE)
        elif name == "empty":
            members = set()
        else:
            raise ValueError(f"unknown command {command!r}")
    return answers


def count_buildings(skyline: Iterable[tuple[int, int]]) -> int:
    """Fewest buildings that explain a skyline given as (x, height) change points."""
    stack = [0]
    count = 0
    for _, height in skyline:
        if height < 0:
            raise ValueError("heights must not be negative")
        while height < stack[-1]:
            stack.pop()
            count += 1
        if height > stack[-1]:
            stack.append(height)
    while stack[-1] > 0:
        stack.pop()
        count += 1
    return count


def pokedex_answers(names: Iterable[str], queries: Iterable[str]) -> list[str | int]:
    """Answer each query: a number gives the name, a name gives its 1-based number."""
    names = list(names)
    numbers = {name: number for number, name in enumerate(names, 1)}
    answers: list[str | int] = []
    for query in queries:
        if query[:1].isdigit():
            number = int(query)
            if not 1 <= number <= len(names):
                raise KeyError(query)
            answers.append(names[number - 1])
        else:
            answers.append(numbers[query])
    return answers


def lookup_passwords(entries: Iterable[tuple[str, str]], queries: Iterable[str]) -> list[str]:
    """Stored password for each queried site; later entries replace earlier ones."""
    stored = dict(entries)
    return [stored[site] for site in queries]


def outfit_combinations(items: Iterable[tuple[str, str]]) -> int:
    """Number of non-empty outfits wearing at most one item of each kind.

    Items are (name, kind) pairs; a repeated name within a kind counts once.
    """
    kinds: dict[str, set[str]] = {}
    for name, kind in items:
        kinds.setdefault(kind, set()).add(name)
    return math.prod(len(names) + 1 for names in kinds.values()) - 1