import abc
import enum
import html
from typing import Any, Dict, Iterable, List, Optional

VALUES_TYPE = List[List[Any]]
VALUES_STR_TYPE = List[List[str]]


class Alignment(enum.Enum):
    LEFT = "l"
    CENTER = "c"
    RIGHT = "r"


class Table:
    """
    tables are indexed by row, then column

    Each row may carry a class name that styles are free to use, e.g. to mark
    rows that need attention.
    """

    def __init__(
        self,
        _columns: List[str],
        _values: VALUES_TYPE,
        na_value: str = "",
        row_classes: Optional[List[Optional[str]]] = None,
    ) -> None:
        if row_classes is None:
            row_classes = [None] * len(_values)
        assert len(row_classes) == len(_values)
        for row in _values:
            assert len(row) == len(_columns)

        self._na: str = na_value
        self._columns: List[str] = _columns
        self._values: VALUES_TYPE = _values
        self._row_classes: List[Optional[str]] = row_classes

    @property
    def columns(self) -> List[str]:
        return self._columns.copy()

    @property
    def row_classes(self) -> List[Optional[str]]:
        return self._row_classes.copy()

    def values_as_str(self) -> VALUES_STR_TYPE:
        """
        None becomes the table's na_value, everything else goes through str().
        """
        return [
            [self._na if cell is None else str(cell) for cell in row]
            for row in self._values
        ]


class Style(abc.ABC):
    @abc.abstractmethod
    def render(
        self,
        table: Table,
        column_alignments: Optional[Dict[str, Alignment]] = None,
        default_alignment: Alignment = Alignment.LEFT,
    ) -> str:
        ...

    @staticmethod
    def _build_alignment_list(
        column_alignments: Optional[Dict[str, Alignment]],
        default_alignment: Alignment,
        columns: List[str],
        alignment_map: Dict[Alignment, str],
    ) -> List[str]:
        """
        Builds formatted alignment strings, one per column. A user selected
        alignment wins over the default.
        """

        if column_alignments is None:
            column_alignments = {}

        for column in column_alignments.keys():
            assert column in columns

        alignments = [column_alignments.get(c, default_alignment) for c in columns]
        out = [alignment_map[a] for a in alignments]
        return out


class HtmlStyle(Style):
    _ALIGNMENT_MAP: Dict[Alignment, str] = {
        Alignment.LEFT: "left",
        Alignment.CENTER: "center",
        Alignment.RIGHT: "right",
    }

    def __init__(self, table_class: Optional[str] = None) -> None:
        self._table_class: Optional[str] = table_class

    def render(
        self,
        table: Table,
        column_alignments: Optional[Dict[str, Alignment]] = None,
        default_alignment: Alignment = Alignment.LEFT,
    ) -> str:
        headers = table.columns
        values = table.values_as_str()
        alignments = self._build_alignment_list(
            column_alignments=column_alignments,
            default_alignment=default_alignment,
            columns=headers,
            alignment_map=self._ALIGNMENT_MAP,
        )

        lines = []
        lines.append(self._render_open_tag())
        lines.append(self._render_header_row(headers))
        for row, row_class in zip(values, table.row_classes):
            lines.append(self._render_row_line(row, alignments, row_class))
        lines.append("</table>")

        out = "\n".join(lines)
        out += "\n"
        return out

    def _render_open_tag(self) -> str:
        if self._table_class is None:
            return "<table>"
        return f'<table class="{html.escape(self._table_class)}">'

    def _render_header_row(self, columns: Iterable[str]) -> str:
        cells = "".join([f"<th>{html.escape(c)}</th>" for c in columns])
        return f"<tr>{cells}</tr>"

    def _render_row_line(
        self, row: Iterable[str], alignments: Iterable[str], row_class: Optional[str]
    ) -> str:
        cells = "".join([self._make_cell(c, a) for c, a in zip(row, alignments)])
        if row_class is None:
            return f"<tr>{cells}</tr>"
        return f'<tr class="{html.escape(row_class)}">{cells}</tr>'

    def _make_cell(self, cell: str, alignment: str) -> str:
        if alignment == self._ALIGNMENT_MAP[Alignment.LEFT]:
            return f"<td>{html.escape(cell)}</td>"
        return f'<td style="text-align: {alignment}">{html.escape(cell)}</td>'
