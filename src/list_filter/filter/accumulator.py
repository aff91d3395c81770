"""
Filter Accumulator.

Collects parameterized SQL fragments for the filter fields of a list view.
Each field's value comes from the submitted filter group, else the value
remembered in the session for the current path, else a default.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from ..utils.logging import get_logger
from .values import clean_incoming

if TYPE_CHECKING:
    from ..config.settings import FilterSettings
    from .protocol import FilterRequest, FilterSession

logger = get_logger(__name__)

@dataclass(frozen=True)
class FieldSpec:
    """Declaration of a filterable field.

    Attributes:
        name: Field name, as used in the filter form. Also the column name
            unless ``sql`` is given.
        sql: Custom fragment, e.g. ``"year >= ?"``. At most one placeholder.
        retain: Remember submitted values in the session
        default: Value used when nothing was submitted or remembered
    """

    name: str
    sql: str | None = None
    retain: bool = True
    default: Any = None


@dataclass(frozen=True)
class Conditions:
    """A WHERE-clause fragment and its bound values, in placeholder order."""

    sql: str
    values: tuple[Any, ...] = ()

    @classmethod
    def always_true(cls, sql: str = "1") -> Conditions:
        """Create the condition used when there is nothing to filter on."""
        return cls(sql)

    @property
    def params(self) -> tuple[Any, ...]:
        """Parameters for a DB-API ``execute(sql, params)`` call."""
        return self.values

    def to_list(self) -> list[Any]:
        """Return ``[sql, *values]``."""
        return [self.sql, *self.values]

    def __iter__(self) -> Iterator[Any]:
        """Allow ``sql, params = conditions``."""
        yield self.sql
        yield self.values


class FilterAccumulator:
    """Builds the conditions for one list-view request.

    Usage:
        filter_by = FilterAccumulator(request, session)
        filter_by.register("author_id")
        filter_by.register("title", sql="title LIKE ?")
        filter_by.register("min_year", sql="year >= ?")
        filter_by.register("status", default="published")

        sql, params = filter_by.conditions()
        rows = connection.execute(f"SELECT * FROM books WHERE {sql}", params).fetchall()

    Attributes:
        constraints: SQL always ANDed onto the filter, e.g. ``"group = 'x'"``
        path: Request path used to scope remembered values
    """

    dom_id = "filter"

    def __init__(
        self,
        request: FilterRequest,
        session: FilterSession,
        *,
        constraints: str = "",
        settings: FilterSettings | None = None,
    ):
        """Initialize the accumulator.

        Args:
            request: Source of the submitted filter group and request path
            session: Path-scoped store for remembered values
            constraints: SQL always applied, regardless of filter values
            settings: Filter settings (loaded settings if not given)
        """
        if settings is None:
            from ..config.settings import get_settings

            settings = get_settings().filter

        self.settings = settings
        self.session = session
        self.constraints = constraints
        self.path = request.path
        self._log = logger.bind(path=self.path)

        self._submitted: Mapping[str, Any] = request.filter_params(settings.param_group) or {}
        self._fragments: list[str] = []
        self._values: list[Any] = []
        self._resolved: dict[str, Any] = {}
        self._fields: list[str] = []

    def register(
        self,
        field: str,
        sql: str | None = None,
        *,
        retain: bool = True,
        default: Any = None,
    ) -> FilterAccumulator:
        """Set up a filter for a field (fluent interface).

        Args:
            field: Field name, matching the filter form. Unless ``sql`` is
                given this must also be the column name.
            sql: Custom SQL fragment. Defaults to ``"<field> = ?"`` and is
                then only applied when the field has a value.
            retain: Store submitted values in the session
            default: Value to use when the user has not chosen anything

        Returns:
            self

        Raises:
            ValueError: If the field name is empty or ``sql`` contains more
                than one placeholder
        """
        return self.register_spec(FieldSpec(field, sql=sql, retain=retain, default=default))

    def register_spec(self, spec: FieldSpec) -> FilterAccumulator:
        """Set up a filter from a FieldSpec.

        See `register` for the semantics.
        """
        if not spec.name:
            raise ValueError("Field name must not be empty")

        placeholder = self.settings.placeholder
        if spec.sql is not None and spec.sql.count(placeholder) > 1:
            raise ValueError(
                f"SQL for {spec.name!r} has more than one {placeholder!r} placeholder: {spec.sql!r}"
            )

        value, source = self._resolve(spec)
        self._resolved[spec.name] = value
        self._fields.append(spec.name)

        if spec.sql is not None:
            if placeholder in spec.sql:
                fragment, bound = self._bind(spec.sql, value)
            else:
                fragment, bound = spec.sql, []
        elif value is None:
            fragment, bound = None, []
        elif isinstance(value, (list, tuple)):
            fragment, bound = self._bind(f"{spec.name} IN ({placeholder})", value)
        else:
            fragment, bound = self._bind(f"{spec.name} = {placeholder}", value)

        if fragment is not None:
            self._fragments.append(fragment)
            self._values.extend(bound)

        self._log.debug(
            "filter_registered",
            field=spec.name,
            source=source,
            applied=fragment is not None,
        )

        return self

    def _resolve(self, spec: FieldSpec) -> tuple[Any, str]:
        """Pick the value for a field and remember it if it was submitted."""
        if spec.name in self._submitted:
            value = clean_incoming(self._submitted[spec.name])
            if spec.retain:
                self.session.set_value(spec.name, self.path, value)
                self._log.debug("filter_value_retained", field=spec.name)
            return value, "request"

        # A remembered None (cleared on an earlier visit) falls back to the default
        stored = self.session.get_value(spec.name, self.path)
        if stored is not None:
            return stored, "session"

        return spec.default, "default"

    def _bind(self, template: str, value: Any) -> tuple[str, list[Any]]:
        """Fill the template's placeholder, expanding it for list values.

        A list expands to one placeholder per element (an empty list to
        NULL), which only yields valid SQL inside ``IN (?)``. A list bound
        to a scalar template such as ``title LIKE ?`` is the caller's error.
        """
        placeholder = self.settings.placeholder

        if not isinstance(value, (list, tuple)):
            return template, [value]

        if not value:
            return template.replace(placeholder, "NULL"), []

        expanded = ", ".join([placeholder] * len(value))
        return template.replace(placeholder, expanded), list(value)

    def conditions(self) -> Conditions:
        """Assemble the accumulated fragments and constraints.

        Returns:
            Conditions ready for a parameterized query, e.g.
            ``Conditions("((author_id = ?) AND (group = 'x'))", (3,))``.
            The trivially-true condition if there is nothing to apply.
        """
        constraints = self.constraints.strip() if self.constraints else ""

        if not self._fragments and not constraints:
            return Conditions.always_true(self.settings.true_condition)

        parts = []
        if self._fragments:
            parts.append(f"({' AND '.join(self._fragments)})")
        if constraints:
            parts.append(f"({constraints})")

        result = Conditions(f"({' AND '.join(parts)})", tuple(self._values))

        self._log.debug(
            "conditions_built",
            fragments=len(self._fragments),
            values=len(result.values),
            constrained=bool(constraints),
        )

        return result

    def is_empty(self) -> bool:
        """True if no field contributed a fragment (constraints are ignored)."""
        return not self._fragments

    def get(self, field: str, default: Any = None) -> Any:
        """Get the resolved value of a field, e.g. to redisplay the form."""
        return self._resolved.get(field, default)

    def set(self, field: str, value: Any) -> None:
        """Override the value shown for a field.

        Only affects `get` and `values`, never the SQL. Useful for widgets
        that display something other than the submitted value, such as an
        autocomplete label for a submitted id.
        """
        self._resolved[field] = value

    @property
    def values(self) -> Mapping[str, Any]:
        """Read-only view of resolved values by field name."""
        return MappingProxyType(self._resolved)

    @property
    def fields(self) -> tuple[str, ...]:
        """Registered field names, in registration order."""
        return tuple(self._fields)

    def __getitem__(self, field: str) -> Any:
        return self._resolved.get(field)

    def __setitem__(self, field: str, value: Any) -> None:
        self.set(field, value)

    def __contains__(self, field: object) -> bool:
        return field in self._resolved

    def __repr__(self) -> str:
        return f"FilterAccumulator(path={self.path!r}, fields={list(self._fields)!r})"
