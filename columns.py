from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union

T = TypeVar("T")
RowKey = Union[str, int]

ALIGNMENTS = {"left", "center", "right"}


def read_field(row, key: str):
    """Read a single named field from a mapping or an object."""
    if isinstance(row, Mapping):
        return row.get(key)
    return getattr(row, key, None)


def path_resolver(path: str) -> Callable[[Any], Any]:
    """Build a resolver for a dotted path such as ``"insurance.provider"``.

    Dotted keys are never split implicitly; columns that need nested access
    pass the result of this helper as their ``resolve`` argument.
    """
    parts = [p for p in path.split(".") if p]

    def resolve(row):
        value = row
        for part in parts:
            if value is None:
                return None
            value = read_field(value, part)
        return value

    return resolve


@dataclass(frozen=True)
class Column(Generic[T]):
    key: str
    header: str = ""
    sortable: bool = False
    align: str = "left"
    width: Optional[str] = None
    render: Optional[Callable[[Any, T], Any]] = None
    resolve: Optional[Callable[[T], Any]] = None

    def __post_init__(self):
        if self.align not in ALIGNMENTS:
            raise ValueError(f"Unknown align '{self.align}' for column '{self.key}'")

    def value_of(self, row: T):
        if self.resolve is not None:
            return self.resolve(row)
        return read_field(row, self.key)

    def cell(self, row: T):
        value = self.value_of(row)
        if self.render is None:
            return value
        return self.render(value, row)


@dataclass(frozen=True)
class EditableColumn(Column[T]):
    # render(value, row, index, on_change) where on_change(field_key, value)
    render: Optional[Callable[[Any, T, int, Callable[[str, Any], None]], Any]] = None

    def cell(self, row: T, index: int = 0, on_change=None):
        value = self.value_of(row)
        if self.render is None:
            return value
        return self.render(value, row, index, on_change or (lambda _k, _v: None))


def find_column(columns, key: str):
    for col in columns:
        if col.key == key:
            return col
    return None


def column_keys(columns) -> list[str]:
    return [col.key for col in columns]


def row_key_accessor(row_key) -> Callable[[Any], RowKey]:
    """Accept a field name (``"id"``) or a callable and return a key accessor."""
    if callable(row_key):
        return row_key
    if isinstance(row_key, str):
        return lambda row: read_field(row, row_key)
    raise TypeError(f"row_key must be a field name or callable, got {type(row_key).__name__}")
