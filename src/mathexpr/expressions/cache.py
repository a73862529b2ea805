"""Cache of compiled expressions keyed by exact source text."""

import logging
import threading
from collections.abc import Callable

from mathexpr.expressions.nodes import Node
from mathexpr.expressions.parser import parse

logger = logging.getLogger(__name__)


class ExpressionCache:
    """Maps source strings to their compiled trees.

    Entries are created on first use and never evicted. Expressions in a
    UI are usually a small set fixed at design time, so growth is bounded
    in practice but not enforced.

    Keys are compared exactly: "x+1" and "x + 1" are separate entries.

    Example:
        cache = ExpressionCache()
        tree = cache.get_or_compile("x * 2")
        cache.get_or_compile("x * 2") is tree  # True, parsed once
    """

    def __init__(self, compile_fn: Callable[[str], Node] = parse):
        self._compile = compile_fn
        self._entries: dict[str, Node] = {}
        self._lock = threading.Lock()
        self.compile_count = 0
        self.hits = 0

    def get_or_compile(self, source: str) -> Node:
        """Return the compiled tree for source, parsing it on first use.

        Parsing happens under the lock, so concurrent callers for the same
        source share a single parse. Sources that fail to parse are not
        stored.

        Raises:
            ParseError: If source is not a valid expression
        """
        with self._lock:
            tree = self._entries.get(source)
            if tree is not None:
                self.hits += 1
                return tree

            tree = self._compile(source)
            self.compile_count += 1
            self._entries[source] = tree
            logger.debug("Compiled expression %r (%d cached)", source, len(self._entries))
            return tree

    def __contains__(self, source: object) -> bool:
        with self._lock:
            return source in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        """Drop all entries and reset counters."""
        with self._lock:
            self._entries.clear()
            self.compile_count = 0
            self.hits = 0
