"""
DTO projections for select statements.

A projection selects a handful of columns and turns every result row into a
data-transfer object instead of an entity. Three binding strategies are
provided:

- ``Projections.bean``: build the DTO with no arguments, then assign each
  column through attribute setters.
- ``Projections.fields``: write the column values straight onto the DTO fields,
  skipping constructor and setter validation.
- ``Projections.constructor``: call the DTO constructor positionally, in
  column order.

Every projection is an SQLAlchemy :class:`~sqlalchemy.orm.Bundle`, so it can be
passed to ``select()`` like any other column expression::

    stmt = select(Projections.fields(MemberDto, Member.username, Member.age))
    dtos = (await session.execute(stmt)).scalars().all()

Values are bound by column key; use ``column.label("other")`` to bind a column
to a differently named attribute.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Sequence

from pydantic import BaseModel
from sqlalchemy.orm import Bundle


class DtoProjection(Bundle):
    """Base bundle turning a selected row into an instance of ``target``."""

    strategy: str = "abstract"

    def __init__(self, target: type, *exprs: Any, **kw: Any) -> None:
        super().__init__(target.__name__, *exprs, **kw)
        self.target = target

    def create_row_processor(self, query, procs, labels) -> Callable[[Any], Any]:
        def proc(row):
            return self.build_dto(labels, [p(row) for p in procs])

        return proc

    def build_dto(self, labels: Sequence[str], values: Sequence[Any]) -> Any:
        """Build one DTO from the column labels and the row values."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(target={self.target.__name__}, columns={list(self.c.keys())})"


def _has_property(dto: Any, name: str) -> bool:
    # Pydantic models expose methods and config as attributes; only declared fields are settable.
    if isinstance(dto, BaseModel):
        return name in type(dto).model_fields
    return hasattr(dto, name)


class BeanProjection(DtoProjection):
    """No-argument construction followed by one setter call per column."""

    strategy = "bean"

    def build_dto(self, labels: Sequence[str], values: Sequence[Any]) -> Any:
        dto = self.target()
        for label, value in zip(labels, values):
            if not _has_property(dto, label):
                raise AttributeError(f"{self.target.__name__} has no property '{label}'")
            setattr(dto, label, value)
        return dto


class FieldProjection(DtoProjection):
    """Direct field binding without running validation."""

    strategy = "fields"

    def __init__(self, target: type, *exprs: Any, **kw: Any) -> None:
        if not (isinstance(target, type) and issubclass(target, BaseModel)):
            raise TypeError(f"Field projection needs a pydantic model, got {target!r}")
        super().__init__(target, *exprs, **kw)
        unknown = [key for key in self.c.keys() if key not in target.model_fields]
        if unknown:
            raise ValueError(f"{target.__name__} has no field(s) {', '.join(unknown)}")

    def build_dto(self, labels: Sequence[str], values: Sequence[Any]) -> Any:
        data: Dict[str, Any] = dict(zip(labels, values))
        return self.target.model_construct(**data)


class ConstructorProjection(DtoProjection):
    """Positional constructor call in column order."""

    strategy = "constructor"

    def build_dto(self, labels: Sequence[str], values: Sequence[Any]) -> Any:
        return self.target(*values)


class Projections:
    """Factory for the DTO projection strategies."""

    @staticmethod
    def bean(target: type, *columns: Any) -> BeanProjection:
        return BeanProjection(target, *columns)

    @staticmethod
    def fields(target: type, *columns: Any) -> FieldProjection:
        return FieldProjection(target, *columns)

    @staticmethod
    def constructor(target: type, *columns: Any) -> ConstructorProjection:
        return ConstructorProjection(target, *columns)

    @staticmethod
    def of(strategy: str, target: type, *columns: Any) -> DtoProjection:
        """Build a projection by strategy name (``bean``, ``fields`` or ``constructor``)."""
        try:
            factory = _STRATEGIES[strategy]
        except KeyError:
            raise ValueError(f"Unknown projection strategy '{strategy}'") from None
        return factory(target, *columns)


_STRATEGIES: Dict[str, Callable[..., DtoProjection]] = {
    BeanProjection.strategy: BeanProjection,
    FieldProjection.strategy: FieldProjection,
    ConstructorProjection.strategy: ConstructorProjection,
}
