"""
==========================================
Bind-parameter accumulation for statements.
==========================================

Every ``build()`` call creates exactly one ParameterAccumulator and passes it
through each rendering step. A value is appended at the same moment its
placeholder is written, so the parameter list always lines up with the
placeholders in the statement text.

Example:
    >>> acc = ParameterAccumulator()
    >>> f"a = {acc.bind(1)} AND b = {acc.bind('x')}"
    'a = ? AND b = ?'
    >>> acc.params
    [1, 'x']
"""

from typing import Any, List, NamedTuple, Optional

# DB-API paramstyles that can be expressed with positional parameters
SUPPORTED_PARAMSTYLES = ('qmark', 'numeric', 'format', 'pyformat')


class Statement(NamedTuple):
    """A rendered statement ready to be prepared and executed.

    Attributes:
        sql: Statement text containing positional placeholders
        params: Values for the placeholders, in the order they appear
    """

    sql: str
    params: List[Any]


class ParameterAccumulator:
    """Collects bound values while emitting matching placeholders.

    Args:
        paramstyle: DB-API paramstyle used for placeholders (default 'qmark')

    Raises:
        ValueError: If the paramstyle cannot be expressed positionally
    """

    def __init__(self, paramstyle: Optional[str] = None):
        paramstyle = paramstyle or 'qmark'
        if paramstyle not in SUPPORTED_PARAMSTYLES:
            raise ValueError(
                f"Unsupported paramstyle '{paramstyle}' "
                f"(expected one of {', '.join(SUPPORTED_PARAMSTYLES)})"
            )
        self.paramstyle = paramstyle
        self._params: List[Any] = []

    def bind(self, value: Any) -> str:
        """Record a value and return the placeholder that refers to it."""
        self._params.append(value)
        if self.paramstyle == 'qmark':
            return '?'
        if self.paramstyle == 'numeric':
            return f':{len(self._params)}'
        return '%s'

    def literal(self, value: Any) -> str:
        """Text for a caller-trusted literal fragment.

        Under the format and pyformat styles the driver reads every '%' as
        a format character, so literal percent signs are doubled.
        """
        text = str(value)
        if self.paramstyle in ('format', 'pyformat'):
            return text.replace('%', '%%')
        return text

    @property
    def params(self) -> List[Any]:
        """Copy of the values bound so far."""
        return list(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def statement(self, sql: str) -> Statement:
        """Pair the rendered text with the accumulated parameters."""
        return Statement(sql, self.params)
