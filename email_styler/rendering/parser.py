"""Line-oriented block parser.

The parser walks the normalized source once, line by line, with no
backtracking. At most one multi-line construct (list, blockquote, code fence,
table) is open at a time; it is flushed into a finished block as soon as a
line of a different kind arrives, and at end of input.
"""

import enum
import re
from collections.abc import Callable
from dataclasses import dataclass, field

_FENCE = "```"
_BLANK_ARTIFACTS = frozenset({"", "\\", "\\\\"})

_HEADING_RE = re.compile(r"^(#{1,3}) (.+)$")
_BLOCKQUOTE_RE = re.compile(r"^> ?(.*)$")
_UNORDERED_RE = re.compile(r"^[-*+] (.+)$")
_ORDERED_RE = re.compile(r"^([0-9]+)\. (.+)$")
_RULE_RE = re.compile(r"^(?:-{3,}|\*{3,}|_{3,})$")
_IMAGE_TOKEN = r"!\[([^\]]*)\]\(([^)\s]+)\)"
_IMAGE_LINE_RE = re.compile(rf"^(?:{_IMAGE_TOKEN}\s*)+$")
_IMAGE_TOKEN_RE = re.compile(_IMAGE_TOKEN)
_TABLE_SEPARATOR_RE = re.compile(r"^[\s|:-]*-[\s|:-]*$")


class ListKind(enum.Enum):
    ORDERED = "ol"
    UNORDERED = "ul"


class ParserState(enum.Enum):
    DEFAULT = "default"
    IN_LIST = "list"
    IN_BLOCKQUOTE = "blockquote"
    IN_CODE_FENCE = "code_fence"
    IN_TABLE = "table"


@dataclass(frozen=True)
class Heading:
    level: int
    text: str


@dataclass(frozen=True)
class Paragraph:
    text: str


@dataclass(frozen=True)
class ListBlock:
    kind: ListKind
    items: tuple[str, ...]
    start: str = "1"


@dataclass(frozen=True)
class Blockquote:
    lines: tuple[str, ...]


@dataclass(frozen=True)
class CodeFence:
    lines: tuple[str, ...]


@dataclass(frozen=True)
class Table:
    rows: tuple[tuple[str, ...], ...]
    has_header: bool = False


@dataclass(frozen=True)
class HorizontalRule:
    pass


@dataclass(frozen=True)
class Image:
    alt: str
    src: str


Block = Heading | Paragraph | ListBlock | Blockquote | CodeFence | Table | HorizontalRule | Image


@dataclass
class BlockParser:
    """Single-pass parser from normalized markdown to Block records.

    Line handlers are tried in precedence order and the first one that
    accepts a line wins; see ``_handlers``.
    """

    blocks: list[Block] = field(default_factory=list)
    state: ParserState = ParserState.DEFAULT
    list_kind: ListKind | None = None
    list_start: str = "1"
    buffer: list[str] = field(default_factory=list)
    table_rows: list[tuple[str, ...]] = field(default_factory=list)
    table_rows_seen: int = 0
    table_has_header: bool = False

    def parse(self, text: str) -> list[Block]:
        for line in text.split("\n"):
            self.feed(line)
        self.finish()
        return self.blocks

    def feed(self, line: str) -> None:
        stripped = line.strip()
        if self.state is ParserState.IN_CODE_FENCE:
            if stripped.startswith(_FENCE):
                self.flush()
            else:
                self.buffer.append(line)
            return

        for handler in self._handlers():
            if handler(stripped):
                return

    def finish(self) -> None:
        self.flush()

    def flush(self) -> None:
        """Emit the open construct, if any, and return to the default state."""
        if self.state is ParserState.IN_LIST and self.list_kind is not None and self.buffer:
            self.blocks.append(ListBlock(self.list_kind, tuple(self.buffer), self.list_start))
        elif self.state is ParserState.IN_BLOCKQUOTE:
            self.blocks.append(Blockquote(tuple(self.buffer)))
        elif self.state is ParserState.IN_CODE_FENCE:
            self.blocks.append(CodeFence(tuple(self.buffer)))
        elif self.state is ParserState.IN_TABLE and self.table_rows:
            self.blocks.append(Table(tuple(self.table_rows), self.table_has_header))

        self.state = ParserState.DEFAULT
        self.list_kind = None
        self.list_start = "1"
        self.buffer = []
        self.table_rows = []
        self.table_rows_seen = 0
        self.table_has_header = False

    def _handlers(self) -> tuple[Callable[[str], bool], ...]:
        return (
            self._code_fence,
            self._blank,
            self._table_row,
            self._heading,
            self._blockquote,
            self._list_item,
            self._horizontal_rule,
            self._image_line,
            self._paragraph,
        )

    def _enter(self, state: ParserState) -> None:
        if self.state is not state:
            self.flush()
            self.state = state

    def _code_fence(self, stripped: str) -> bool:
        if not stripped.startswith(_FENCE):
            return False
        self._enter(ParserState.IN_CODE_FENCE)
        return True

    def _blank(self, stripped: str) -> bool:
        if stripped not in _BLANK_ARTIFACTS:
            return False
        # Lists and tables survive blank lines; blockquotes end at one.
        if self.state is ParserState.IN_BLOCKQUOTE:
            self.flush()
        return True

    def _table_row(self, stripped: str) -> bool:
        if len(stripped) < 2 or not (stripped.startswith("|") and stripped.endswith("|")):
            if self.state is ParserState.IN_TABLE:
                self.flush()
            return False

        self._enter(ParserState.IN_TABLE)
        self.table_rows_seen += 1
        if self.table_rows_seen == 2 and len(self.table_rows) == 1 and _TABLE_SEPARATOR_RE.match(stripped):
            self.table_has_header = True
            return True
        self.table_rows.append(tuple(cell.strip() for cell in stripped[1:-1].split("|")))
        return True

    def _heading(self, stripped: str) -> bool:
        match = _HEADING_RE.match(stripped)
        if not match:
            return False
        self.flush()
        self.blocks.append(Heading(len(match.group(1)), match.group(2)))
        return True

    def _blockquote(self, stripped: str) -> bool:
        match = _BLOCKQUOTE_RE.match(stripped)
        if not match:
            return False
        self._enter(ParserState.IN_BLOCKQUOTE)
        self.buffer.append(match.group(1))
        return True

    def _list_item(self, stripped: str) -> bool:
        if match := _UNORDERED_RE.match(stripped):
            kind, start, text = ListKind.UNORDERED, "1", match.group(1)
        elif match := _ORDERED_RE.match(stripped):
            kind, start, text = ListKind.ORDERED, match.group(1).lstrip("0") or "0", match.group(2)
        else:
            return False

        if self.state is not ParserState.IN_LIST or self.list_kind is not kind:
            self.flush()
            self.state = ParserState.IN_LIST
            self.list_kind = kind
            self.list_start = start
        self.buffer.append(text)
        return True

    def _horizontal_rule(self, stripped: str) -> bool:
        if not _RULE_RE.match(stripped):
            return False
        self.flush()
        self.blocks.append(HorizontalRule())
        return True

    def _image_line(self, stripped: str) -> bool:
        if not _IMAGE_LINE_RE.match(stripped):
            return False
        self.flush()
        self.blocks.extend(Image(alt, src) for alt, src in _IMAGE_TOKEN_RE.findall(stripped))
        return True

    def _paragraph(self, stripped: str) -> bool:
        self.flush()
        self.blocks.append(Paragraph(stripped))
        return True


def parse_blocks(text: str) -> list[Block]:
    """Parse normalized markdown into blocks, in source order."""
    return BlockParser().parse(text)
