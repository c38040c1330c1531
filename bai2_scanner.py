"""
bai2_scanner.py
Structural scanner for BAI2 files.

Reads physical lines once, top to bottom, and builds a tree of Nodes:
File header -> Group headers -> Account identifiers -> Transaction details.
Each header node owns its trailer as `sibling`; 88 continuation records are
attached to the record they extend. The scanner validates nesting only;
field decoding happens in bai2_decoder / bai2_parser.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional

from bai2_errors import StructuralError
from bai2_fields import split_fields

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# BAI2 Record Type Constants
# ---------------------------------------------------------------------------
RT_FILE_HEADER       = "01"
RT_GROUP_HEADER      = "02"
RT_ACCOUNT_HEADER    = "03"
RT_TRANSACTION       = "16"
RT_ACCOUNT_TRAILER   = "49"
RT_CONTINUATION      = "88"
RT_GROUP_TRAILER     = "98"
RT_FILE_TRAILER      = "99"


class RecordKind(str, Enum):
    FILE_HEADER = "file header"
    GROUP_HEADER = "group header"
    ACCOUNT_IDENTIFIER = "account identifier"
    TRANSACTION_DETAIL = "transaction detail"
    ACCOUNT_TRAILER = "account trailer"
    GROUP_TRAILER = "group trailer"
    FILE_TRAILER = "file trailer"
    CONTINUATION = "continuation"
    BLANK = "blank"
    UNRECOGNIZED = "unrecognized"


_RECORD_KINDS = {
    RT_FILE_HEADER:     RecordKind.FILE_HEADER,
    RT_GROUP_HEADER:    RecordKind.GROUP_HEADER,
    RT_ACCOUNT_HEADER:  RecordKind.ACCOUNT_IDENTIFIER,
    RT_TRANSACTION:     RecordKind.TRANSACTION_DETAIL,
    RT_ACCOUNT_TRAILER: RecordKind.ACCOUNT_TRAILER,
    RT_CONTINUATION:    RecordKind.CONTINUATION,
    RT_GROUP_TRAILER:   RecordKind.GROUP_TRAILER,
    RT_FILE_TRAILER:    RecordKind.FILE_TRAILER,
}

# header kind -> the only trailer kind it may own
TRAILER_FOR = {
    RecordKind.FILE_HEADER:        RecordKind.FILE_TRAILER,
    RecordKind.GROUP_HEADER:       RecordKind.GROUP_TRAILER,
    RecordKind.ACCOUNT_IDENTIFIER: RecordKind.ACCOUNT_TRAILER,
}


def classify(line: str) -> RecordKind:
    """Classify a physical line by its first two characters."""
    if len(line) < 2 or not line.strip():
        return RecordKind.BLANK
    return _RECORD_KINDS.get(line[:2], RecordKind.UNRECOGNIZED)


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
@dataclass
class Node:
    kind: RecordKind
    line: str
    line_number: int = 0
    children: List["Node"] = field(default_factory=list)
    continuations: List["Node"] = field(default_factory=list)
    sibling: Optional["Node"] = None

    def fields(self) -> List[str]:
        """Own fields followed by each continuation's fields minus its "88"."""
        fields = split_fields(self.line)
        for continuation in self.continuations:
            fields.extend(split_fields(continuation.line)[1:])
        return fields

    def sibling_fields(self) -> List[str]:
        if self.sibling is None:
            return []
        return self.sibling.fields()

    def has_continuations(self) -> bool:
        return bool(self.continuations)

    def push_child(self, node: "Node") -> None:
        self.children.append(node)

    def push_continuation(self, node: "Node") -> None:
        self.continuations.append(node)

    def set_sibling(self, node: "Node") -> None:
        expected = TRAILER_FOR.get(self.kind)
        if expected is None or node.kind != expected:
            raise StructuralError(
                f"{node.kind.value} cannot close {self.kind.value}",
                kind=node.kind.value,
                context=self.kind.value,
                line_number=node.line_number,
            )
        self.sibling = node

    def record_count(self) -> int:
        """Physical records spanned by this node, trailer included."""
        count = 1 + len(self.continuations)
        for child in self.children:
            count += child.record_count()
        if self.sibling is not None:
            count += self.sibling.record_count()
        return count


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------
class Scanner:
    """
    Stack-based scanner. The stack holds the open records, innermost last;
    it is never deeper than file > group > account > transaction.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines = lines
        self._stack: List[Node] = []
        self._last: Optional[Node] = None
        self._line_number = 0

    def scan(self) -> Node:
        """Consume the input and return the file header node."""
        logger.debug("Scanning file")
        lines = iter(self._lines)

        header = self._first_record(lines)
        self._push(header)

        for line in lines:
            self._line_number += 1
            self._handle_line(line)
            if self._stack[0].sibling is not None:
                self._drain(lines)
                break

        root = self._stack[0]
        if len(self._stack) > 1 or root.sibling is None:
            innermost = self._stack[-1]
            raise StructuralError(
                f"end of file reached with open {innermost.kind.value}",
                kind=innermost.kind.value,
                context=self._context(),
                line_number=innermost.line_number,
            )

        logger.debug("Done scanning file")
        return root

    # Private

    def _first_record(self, lines) -> Node:
        for line in lines:
            self._line_number += 1
            kind = classify(line)
            if kind == RecordKind.BLANK:
                continue
            if kind != RecordKind.FILE_HEADER:
                raise StructuralError(
                    "file header not found",
                    kind=kind.value,
                    line_number=self._line_number,
                )
            logger.debug("file header found")
            return self._node(RecordKind.FILE_HEADER, line)

        raise StructuralError("no lines found in file")

    def _handle_line(self, line: str) -> None:
        kind = classify(line)
        current = self._current_kind()

        if kind == RecordKind.BLANK:
            return

        if kind == RecordKind.UNRECOGNIZED:
            logger.debug(f"skipping unrecognized record type: {line[:2]!r}")
            return

        if kind == RecordKind.CONTINUATION:
            logger.debug("continuation found")
            self._last.push_continuation(self._node(kind, line))
            return

        if kind == RecordKind.GROUP_HEADER and current == RecordKind.FILE_HEADER:
            logger.debug("group header found")
            self._push(self._node(kind, line))

        elif kind == RecordKind.ACCOUNT_IDENTIFIER and current == RecordKind.GROUP_HEADER:
            logger.debug("account identifier found")
            self._push(self._node(kind, line))

        elif kind == RecordKind.TRANSACTION_DETAIL and current in (
            RecordKind.ACCOUNT_IDENTIFIER,
            RecordKind.TRANSACTION_DETAIL,
        ):
            if current == RecordKind.TRANSACTION_DETAIL:
                self._pop()
            logger.debug("transaction found")
            self._push(self._node(kind, line))

        elif kind == RecordKind.ACCOUNT_TRAILER and current in (
            RecordKind.ACCOUNT_IDENTIFIER,
            RecordKind.TRANSACTION_DETAIL,
        ):
            if current == RecordKind.TRANSACTION_DETAIL:
                self._pop()
            logger.debug("account trailer found")
            self._close(self._node(kind, line))

        elif kind == RecordKind.GROUP_TRAILER and current == RecordKind.GROUP_HEADER:
            logger.debug("group trailer found")
            self._close(self._node(kind, line))

        elif kind == RecordKind.FILE_TRAILER and current == RecordKind.FILE_HEADER:
            logger.debug("file trailer found")
            trailer = self._node(kind, line)
            self._stack[-1].set_sibling(trailer)
            self._last = trailer

        else:
            raise StructuralError(
                self._unexpected(kind),
                kind=kind.value,
                context=self._context(),
                line_number=self._line_number,
            )

    def _drain(self, lines) -> None:
        """
        Read what follows the file trailer. Continuations directly after it
        extend the trailer; every other record is ignored.
        """
        ignored = 0
        for line in lines:
            self._line_number += 1
            kind = classify(line)
            if kind == RecordKind.BLANK:
                continue
            if kind == RecordKind.CONTINUATION and not ignored:
                logger.debug("continuation found")
                self._last.push_continuation(self._node(kind, line))
                continue
            ignored += 1
        if ignored:
            logger.warning(f"Ignored {ignored} record(s) after the file trailer")

    def _unexpected(self, kind: RecordKind) -> str:
        if kind == RecordKind.FILE_HEADER:
            return "file header found inside an open file"
        parent = _expected_parent(kind)
        open_kinds = [node.kind for node in self._stack]
        if parent in open_kinds:
            return f"{kind.value} found inside open {self._stack[-1].kind.value}"
        return f"{kind.value} found without {parent.value}"

    def _current_kind(self) -> Optional[RecordKind]:
        if not self._stack:
            return None
        return self._stack[-1].kind

    def _context(self) -> str:
        return " > ".join(node.kind.value for node in self._stack) or "(empty)"

    def _node(self, kind: RecordKind, line: str) -> Node:
        return Node(kind=kind, line=line, line_number=self._line_number)

    def _push(self, node: Node) -> None:
        self._stack.append(node)
        self._last = node

    def _pop(self) -> None:
        child = self._stack.pop()
        self._stack[-1].push_child(child)

    def _close(self, trailer: Node) -> None:
        """Attach `trailer` to the innermost header and hand it to its parent."""
        self._stack[-1].set_sibling(trailer)
        self._pop()
        self._last = trailer


def _expected_parent(kind: RecordKind) -> RecordKind:
    return {
        RecordKind.GROUP_HEADER:       RecordKind.FILE_HEADER,
        RecordKind.ACCOUNT_IDENTIFIER: RecordKind.GROUP_HEADER,
        RecordKind.TRANSACTION_DETAIL: RecordKind.ACCOUNT_IDENTIFIER,
        RecordKind.ACCOUNT_TRAILER:    RecordKind.ACCOUNT_IDENTIFIER,
        RecordKind.GROUP_TRAILER:      RecordKind.GROUP_HEADER,
        RecordKind.FILE_TRAILER:       RecordKind.FILE_HEADER,
    }[kind]


def scan(content: str) -> Node:
    """Scan BAI2 text and return the root (file header) node."""
    return Scanner(content.splitlines()).scan()
