import logging
from enum import Enum
from typing import Dict, List, Optional, Union

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PageElement, PreformattedString

from caltrain.constants import (
    ARRIVAL_TIME_MARKER,
    NORTHBOUND_TABLE_INDEX,
    SOUTHBOUND_TABLE_INDEX,
    SUBTABLE_MARKER,
    TRAIN_ID_MARKER,
    TRAIN_TYPE_MARKER,
)
from caltrain.document import DocumentSource, load_document
from caltrain.models import IncomingTrain, StatusSnapshot
from caltrain.records import make_incoming_train

logger = logging.getLogger(__name__)


class FieldClass(Enum):
    """Which cell of a row the next text belongs to."""

    TRAIN_ID = "id"
    TRAIN_TYPE = "type"
    ARRIVAL_TIME = "arrivaltime"


FIELD_MARKERS = (
    (TRAIN_ID_MARKER, FieldClass.TRAIN_ID),
    (TRAIN_TYPE_MARKER, FieldClass.TRAIN_TYPE),
    (ARRIVAL_TIME_MARKER, FieldClass.ARRIVAL_TIME),
)


def _class_value(tag: Tag) -> Optional[str]:
    """Raw class attribute of a tag.

    Trees parsed outside load_document may carry the class split into
    tokens; those are joined back with single spaces.
    """
    value = tag.get("class")
    if isinstance(value, list):
        return " ".join(value)
    return value


def _is_text(node: PageElement) -> bool:
    # Comments, doctypes and CDATA are PreformattedString subclasses
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


class WalkerState:
    """Accumulator threaded through a whole page walk.

    Nothing here is scoped to a subtree: a marker seen anywhere stays in
    effect for every node visited after it.
    """

    def __init__(self) -> None:
        self.current_table_no = 0
        self.last_read_class: Optional[FieldClass] = None
        self.last_text: Optional[str] = None
        self.staged: Dict[FieldClass, str] = {}
        self.northbound: List[IncomingTrain] = []
        self.southbound: List[IncomingTrain] = []

    def enter_element(self, tag: Tag) -> None:
        value = _class_value(tag)
        if value is None:
            return
        if value.endswith(SUBTABLE_MARKER):
            self.current_table_no += 1
            logger.debug(f"Entering subtable {self.current_table_no}")
        for marker, field_class in FIELD_MARKERS:
            if value.endswith(marker):
                self.last_read_class = field_class

    def read_text(self, text: str) -> None:
        self.last_text = text

    def leave_element(self) -> None:
        if self.last_read_class is not None and self.last_text is not None:
            self.staged[self.last_read_class] = self.last_text
            self.last_read_class = None
            self.last_text = None

        if len(self.staged) == len(FieldClass):
            self._finish_row()

    def _finish_row(self) -> None:
        train_id = self.staged[FieldClass.TRAIN_ID]
        train_type = self.staged[FieldClass.TRAIN_TYPE]
        arrival_time = self.staged[FieldClass.ARRIVAL_TIME]
        self.staged = {}

        if self.current_table_no == SOUTHBOUND_TABLE_INDEX:
            target = self.southbound
        elif self.current_table_no == NORTHBOUND_TABLE_INDEX:
            target = self.northbound
        else:
            logger.debug(f"Dropping row {train_id!r} outside known subtables (table {self.current_table_no})")
            return

        train = make_incoming_train(train_id, train_type, arrival_time)
        logger.debug(f"Row in table {self.current_table_no}: {train}")
        target.append(train)

    def snapshot(self) -> StatusSnapshot:
        return StatusSnapshot(
            northbound=tuple(self.northbound),
            southbound=tuple(self.southbound),
        )


def walk(root: Tag, state: WalkerState) -> None:
    """Depth-first walk in document order.

    Elements are classified on the way down and committed on the way back
    up. An explicit stack stands in for recursion so deeply nested pages
    cannot hit the interpreter's recursion limit.
    """
    stack = [(root, False)]
    while stack:
        node, leaving = stack.pop()
        if leaving:
            state.leave_element()
        elif isinstance(node, Tag):
            state.enter_element(node)
            stack.append((node, True))
            stack.extend((child, False) for child in reversed(node.contents))
        elif _is_text(node):
            state.read_text(str(node))


def extract_status(source: Union[DocumentSource, BeautifulSoup]) -> StatusSnapshot:
    """Extract northbound and southbound trains from a status page.

    ``source`` is anything load_document accepts, or an already parsed
    BeautifulSoup tree. Raises DocumentError for unreadable input and an
    ExtractionError subclass when a row cannot be parsed; there is no
    partial result.
    """
    if isinstance(source, BeautifulSoup):
        dom = source
    else:
        dom = load_document(source)

    state = WalkerState()
    walk(dom, state)
    snapshot = state.snapshot()
    logger.debug(
        f"Extracted {len(snapshot.northbound)} northbound and "
        f"{len(snapshot.southbound)} southbound trains"
    )
    return snapshot
