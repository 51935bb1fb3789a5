"""Random dungeon layouts: a main path of rooms, side paths, locks and keys."""

from __future__ import annotations

import logging
import random
from collections import Counter, defaultdict, deque
from dataclasses import dataclass, replace
from typing import Optional

log = logging.getLogger(__name__)

Node = tuple[int, int]

_DIRECTIONS: tuple[Node, ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))


class PathGenerationError(RuntimeError):
    """Raised when no path can be laid out with the given constraints."""


@dataclass(frozen=True)
class PathConfig:
    start: Node = (0, 0)
    path_name: str = ""
    path_length: int = 0


@dataclass(frozen=True)
class SidePathConfig:
    path_name: str = ""
    starting_path_name: str = ""
    end_path_name: str = ""
    min_path_length: int = 0
    max_path_length: int = 0


class DungeonGenerator:
    """Lays out named paths of rooms on a width x height grid."""

    def __init__(self, height: int = 0, width: int = 0, seed: Optional[int] = None) -> None:
        self.height = height
        self.width = width
        self._rng = random.Random(seed)
        self._paths: dict[str, set[Node]] = {}
        self._node_to_path: dict[Node, str] = {}
        self._graph: dict[Node, set[Node]] = defaultdict(set)
        self._ugraph: dict[Node, set[Node]] = defaultdict(set)
        self._room_count: dict[Node, int] = {}
        self._free_key = 0
        self.starting_room: Node = (0, 0)
        self.ending_room: Node = (0, 0)
        self._locks: dict[Node, int] = {}
        self._keys: dict[Node, int] = {}
        self._out_edges: Counter[Node] = Counter()
        self._enter_edges: Counter[Node] = Counter()

    @property
    def nodes(self) -> dict[Node, str]:
        """Each room and the name of the path it belongs to."""
        return dict(self._node_to_path)

    @property
    def room_count(self) -> dict[Node, int]:
        """Each room and its 1-based position along its path."""
        return dict(self._room_count)

    @property
    def graph(self) -> dict[Node, set[Node]]:
        """The undirected room graph."""
        return {node: set(neighbours) for node, neighbours in self._ugraph.items()}

    def generate_main_path(self, path_length: int) -> None:
        """Lay out the "Main" path from a random cell."""
        self._validate_main_path("Main", path_length)
        start = (self._rng.randint(0, self.width - 1), self._rng.randint(0, self.height - 1))
        self._generate_main_path(PathConfig(start, "Main", path_length))

    def _generate_main_path(self, config: PathConfig) -> None:
        path: deque[Node] = deque([config.start])
        in_path = {config.start}
        visited: dict[Node, set[Node]] = defaultdict(set)
        self.starting_room = config.start

        while len(path) < config.path_length:
            current = path[-1]
            neighbour = self._random_neighbour(
                current, in_path, visited, config.path_length, config.path_length + 1
            )
            if neighbour is not None:
                path.append(neighbour)
                in_path.add(neighbour)
                visited[current].add(neighbour)
            else:
                if current == config.start:
                    raise PathGenerationError("Path generation failed")
                if len(path) > 1:
                    visited[current].clear()
                    path.pop()
                    in_path.discard(current)

        for index, node in enumerate(path, 1):
            self._record(node, config.path_name, index)

        nodes = list(path)
        for first, second in zip(nodes, nodes[1:]):
            self._link(first, second)
            self._enter_edges[second] += 1
            self._out_edges[first] += 1

        self.ending_room = nodes[-1]

    def generate_side_path(self, config: SidePathConfig) -> None:
        """Branch a path off an existing one, ending at end_path_name or nowhere."""
        config = self._validate_and_repair(config)
        min_len = 2 + config.min_path_length
        max_len = 2 + config.max_path_length
        end_name = config.end_path_name

        candidates = sorted(self._paths.get(config.starting_path_name, ()))
        if not candidates:
            raise PathGenerationError("Starting path has no rooms")
        self._rng.shuffle(candidates)

        start = candidates[0]
        end: Optional[Node] = None
        candidates.pop()
        start_val = self._room_count.get(start, 0)
        end_val = float("inf")

        path: deque[Node] = deque([start])
        in_path = {start}
        visited: dict[Node, set[Node]] = defaultdict(set)

        while True:
            current = path[-1]
            neighbour = self._random_neighbour(current, in_path, visited, min_len, max_len, end_name)
            if neighbour is not None and len(path) <= max_len:
                path.append(neighbour)
                in_path.add(neighbour)
                visited[current].add(neighbour)
                if self._node_to_path.get(neighbour, "") == end_name and len(path) >= min_len:
                    end_val = self._room_count.get(neighbour, 0)
                    end = neighbour
                    break
            elif len(path) > 1:
                visited[current].clear()
                path.pop()
                in_path.discard(current)
            else:
                if not candidates:
                    raise PathGenerationError("Path generation failed, it is impossible")
                visited[current].clear()
                path.pop()
                in_path.discard(current)
                start = candidates.pop()
                path.appendleft(start)
                in_path.add(start)
                start_val = self._room_count.get(start, 0)

        self._link(start, path[1])

        if start_val < end_val or end_val == 0:
            if end_name:
                self._enter_edges[path[-1]] += 1
                path.pop()
                self._link(path[-1], end)
            self._out_edges[path[0]] += 1
            path.popleft()
            side = list(path)
        else:
            if end_name:
                self._enter_edges[path[0]] += 1
                path.popleft()
                self._link(path[-1], end)
            self._out_edges[path[-1]] += 1
            path.pop()
            side = list(reversed(path))

        for index, node in enumerate(side, 1):
            self._record(node, config.path_name, index)
            self._enter_edges[node] += 1
        for first, second in zip(side, side[1:]):
            self._link(first, second)
            self._out_edges[first] += 1
        if end_name and side:
            self._out_edges[side[-1]] += 1

    def make_lock_and_key(self) -> None:
        """Lock one well-connected room and hide its key somewhere reachable."""
        nodes = list(self._out_edges.items())
        self._rng.shuffle(nodes)
        nodes.sort(key=lambda item: item[1], reverse=True)
        for node, _ in nodes:
            if node in self._locks or self._room_count.get(node, 0) < 2:
                continue
            self._locks[node] = self._free_key
            self._free_key += 1
            self._find_place_for_key(node)
            return
        raise PathGenerationError("No room can be locked")

    def _find_place_for_key(self, lock: Node) -> None:
        hiding_places: list[Node] = []
        to_visit: deque[Node] = deque()
        visited = {lock}
        current_path = self._node_to_path.get(lock, "")
        lock_count = self._room_count.get(lock, 0)
        for neighbour in sorted(self._ugraph.get(lock, ())):
            if self._node_to_path.get(neighbour, "") != current_path:
                continue
            if self._room_count.get(neighbour, 0) >= lock_count:
                continue
            hiding_places.append(neighbour)
            to_visit.append(neighbour)
            visited.add(neighbour)
        while to_visit:
            current = to_visit.popleft()
            for neighbour in sorted(self._ugraph.get(current, ())):
                if neighbour in visited:
                    continue
                hiding_places.append(neighbour)
                to_visit.append(neighbour)
                visited.add(neighbour)
        if not hiding_places:
            raise PathGenerationError("No room to hide the key in")
        self._rng.shuffle(hiding_places)
        self._keys[hiding_places[0]] = self._locks[lock]

    def lock_at(self, node: Node) -> Optional[str]:
        """Return the lock letter ('A', 'B', ...) on a room, or None."""
        lock = self._locks.get(tuple(node))
        return None if lock is None else chr(ord("A") + lock)

    def key_at(self, node: Node) -> Optional[str]:
        """Return the key letter ('a', 'b', ...) in a room, or None."""
        key = self._keys.get(tuple(node))
        return None if key is None else chr(ord("a") + key)

    def boss_room(self) -> Node:
        """Return a room of the "BossRoom" path, or the starting room if none."""
        rooms = self._paths.get("BossRoom")
        if rooms:
            return min(rooms)
        log.warning('Path needs to have name "BossRoom"')
        return self.starting_room

    def is_connected(self, first: Node, second: Node) -> bool:
        neighbours = self._ugraph.get(tuple(first))
        return neighbours is not None and tuple(second) in neighbours

    def out_edges_count(self, x: int, y: int) -> int:
        return self._out_edges.get((x, y), 0)

    def _record(self, node: Node, name: str, index: int) -> None:
        self._node_to_path[node] = name
        self._paths.setdefault(name, set()).add(node)
        self._room_count[node] = index

    def _link(self, first: Node, second: Node) -> None:
        self._graph[first].add(second)
        self._ugraph[first].add(second)
        self._ugraph[second].add(first)

    def _random_neighbour(
        self,
        current: Node,
        in_path: set[Node],
        visited: dict[Node, set[Node]],
        min_l: int,
        max_l: int,
        end_path: str = "",
    ) -> Optional[Node]:
        candidates: list[Node] = []
        seen = visited.get(current, set())
        for dx, dy in _DIRECTIONS:
            neighbour = (current[0] + dx, current[1] + dy)
            if not (0 <= neighbour[0] < self.width and 0 <= neighbour[1] < self.height):
                continue
            owner = self._node_to_path.get(neighbour, "")
            if owner not in ("", end_path):
                continue
            if neighbour in in_path or neighbour in seen or len(in_path) >= max_l:
                continue
            if end_path and owner == end_path and len(in_path) < min_l:
                continue
            candidates.append(neighbour)
        return self._rng.choice(candidates) if candidates else None

    def _validate_and_repair(self, config: SidePathConfig) -> SidePathConfig:
        if config.path_name in self._paths:
            raise ValueError("Path with this name already exists")
        if config.max_path_length < config.min_path_length:
            raise ValueError("Max path length must be greater than min path length")
        if config.min_path_length < 0:
            raise ValueError("Path length can't be negative!")
        if config.starting_path_name not in self._paths:
            if not self._paths:
                raise PathGenerationError("No path exists to start from")
            names = list(self._paths)
            chosen = names[self._rng.randrange(len(names))]
            if config.path_name != "BossRoom":
                log.info(
                    'Path "%s" doesn\'t exist, choosing random path to start: "%s"',
                    config.starting_path_name,
                    chosen,
                )
            return replace(config, starting_path_name=chosen)
        return config

    def _validate_main_path(self, name: str, length: int) -> None:
        if name in self._paths:
            raise ValueError("Path with this name already exists")
        if length < 1:
            raise ValueError("Path length must be greater than 0")
        if length > self.width * self.height:
            raise ValueError("Path length is too long")