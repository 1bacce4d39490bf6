"""
Unit tests for the Supabase repository implementations.

The Supabase client is replaced by a MagicMock; tests check the query
chain each method builds and how results and errors are handled.
"""
from unittest.mock import MagicMock

import pytest

from infrastructure.db import SupabaseExerciseCatalog, SupabaseTemplateExerciseRepository

# All tests in this module are pure logic tests with mocks - mark as unit
pytestmark = pytest.mark.unit


def mock_client(data=None) -> MagicMock:
    """A client whose every query chain ends in execute() returning `data`."""
    client = MagicMock()
    result = MagicMock()
    result.data = data
    table = client.table.return_value
    for method in ("select", "eq", "order", "limit", "insert", "delete", "update"):
        getattr(table, method).return_value = table
    table.execute.return_value = result
    return client


# =============================================================================
# SupabaseTemplateExerciseRepository
# =============================================================================


class TestSupabaseTemplateExerciseRepository:
    """Tests for SupabaseTemplateExerciseRepository."""

    def test_list_for_template_queries_table(self):
        rows = [{"id": "e-1", "template_id": "tpl-1", "order_index": 1}]
        client = mock_client(rows)
        repo = SupabaseTemplateExerciseRepository(client)

        assert repo.list_for_template("tpl-1") == rows
        client.table.assert_called_with("workout_template_exercises")
        table = client.table.return_value
        table.eq.assert_called_with("template_id", "tpl-1")
        table.order.assert_called_with("order_index")

    def test_custom_table_name(self):
        client = mock_client([])
        SupabaseTemplateExerciseRepository(client, table="tpl_exercises_v2").list_for_template("tpl-1")
        client.table.assert_called_with("tpl_exercises_v2")

    def test_list_for_template_returns_empty_on_error(self):
        client = MagicMock()
        client.table.side_effect = RuntimeError("boom")
        assert SupabaseTemplateExerciseRepository(client).list_for_template("tpl-1") == []

    def test_replace_deletes_then_inserts(self):
        saved = [{"id": "db-1", "template_id": "tpl-1", "order_index": 1}]
        client = mock_client(saved)
        repo = SupabaseTemplateExerciseRepository(client)

        rows = [{"template_id": "tpl-1", "order_index": 1}]
        assert repo.replace_for_template("tpl-1", rows) == saved

        table = client.table.return_value
        table.delete.assert_called_once()
        table.insert.assert_called_once_with(rows)

    def test_replace_with_no_rows_only_deletes(self):
        client = mock_client([])
        repo = SupabaseTemplateExerciseRepository(client)

        assert repo.replace_for_template("tpl-1", []) == []
        client.table.return_value.insert.assert_not_called()

    def test_replace_rejects_rows_of_other_templates(self):
        client = mock_client([])
        repo = SupabaseTemplateExerciseRepository(client)

        with pytest.raises(ValueError):
            repo.replace_for_template("tpl-1", [{"template_id": "tpl-2", "order_index": 1}])
        client.table.assert_not_called()

    def test_replace_propagates_backend_errors(self):
        client = mock_client([])
        client.table.return_value.execute.side_effect = RuntimeError("connection reset")
        repo = SupabaseTemplateExerciseRepository(client)

        with pytest.raises(RuntimeError):
            repo.replace_for_template("tpl-1", [{"template_id": "tpl-1", "order_index": 1}])

    def test_delete(self):
        assert SupabaseTemplateExerciseRepository(mock_client([{"id": "e-1"}])).delete("e-1") is True
        assert SupabaseTemplateExerciseRepository(mock_client([])).delete("e-1") is False

    def test_reorder_updates_each_row(self):
        client = mock_client([{"id": "x"}])
        repo = SupabaseTemplateExerciseRepository(client)

        assert repo.reorder("tpl-1", [("e-1", 2), ("e-2", 1)]) is True
        update = client.table.return_value.update
        assert update.call_count == 2
        update.assert_any_call({"order_index": 2})

    def test_reorder_reports_missing_rows(self):
        repo = SupabaseTemplateExerciseRepository(mock_client([]))
        assert repo.reorder("tpl-1", [("e-1", 1)]) is False


# =============================================================================
# SupabaseExerciseCatalog
# =============================================================================


class TestSupabaseExerciseCatalog:
    """Tests for SupabaseExerciseCatalog."""

    def test_get_by_id(self):
        exercise = {"id": "burpee", "name": "Burpee"}
        client = mock_client([exercise])
        catalog = SupabaseExerciseCatalog(client)

        assert catalog.get_by_id("burpee") == exercise
        client.table.assert_called_with("exercises")
        client.table.return_value.eq.assert_called_with("id", "burpee")

    def test_get_by_id_is_cached(self):
        client = mock_client([{"id": "burpee", "name": "Burpee"}])
        catalog = SupabaseExerciseCatalog(client)

        catalog.get_by_id("burpee")
        catalog.get_by_id("burpee")
        assert client.table.return_value.execute.call_count == 1

    def test_get_by_id_not_found(self):
        assert SupabaseExerciseCatalog(mock_client([])).get_by_id("nope") is None

    def test_get_by_id_returns_none_on_error(self):
        client = MagicMock()
        client.table.side_effect = RuntimeError("boom")
        assert SupabaseExerciseCatalog(client).get_by_id("burpee") is None

    def test_get_all_orders_and_limits(self):
        client = mock_client([{"id": "a", "name": "A"}])
        catalog = SupabaseExerciseCatalog(client, table="exercise_library")

        assert catalog.get_all(limit=10) == [{"id": "a", "name": "A"}]
        table = client.table.return_value
        client.table.assert_called_with("exercise_library")
        table.order.assert_called_with("name")
        table.limit.assert_called_with(10)

    def test_get_all_fills_cache(self):
        client = mock_client([{"id": "a", "name": "A"}])
        catalog = SupabaseExerciseCatalog(client)

        catalog.get_all()
        assert catalog.get_by_id("a") == {"id": "a", "name": "A"}
        assert client.table.return_value.execute.call_count == 1
