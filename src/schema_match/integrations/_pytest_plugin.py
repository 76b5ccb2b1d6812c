"""pytest plugin for schema-match.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from schema_match import MatchOptions, assert_matches, equal_to
from schema_match.schema import Schema


@pytest.fixture(scope="session")
def assert_schema_equal() -> Any:
    """Fixture that returns a callable structural equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (it builds a fresh matcher tree per call).

    Usage in tests::

        def test_person(assert_schema_equal):
            assert_schema_equal(actual_person, expected_person)

        def test_ignores_ids(assert_schema_equal):
            options = MatchOptions().with_excluder(exclude_fields("id"))
            assert_schema_equal(actual_person, expected_person, options=options)

    Returns:
        A callable ``_assert(actual, expected, options=None, schema=None) -> None``
        that raises ``AssertionError`` listing every path-qualified difference.
    """

    def _assert(
        actual: Any,
        expected: Any,
        options: MatchOptions | None = None,
        schema: Schema | None = None,
    ) -> None:
        """Assert that ``actual`` is structurally equal to ``expected``.

        Raises:
            AssertionError: When the values differ, with one line per mismatch.
        """
        assert_matches(actual, equal_to(expected, options, schema=schema))

    return _assert
