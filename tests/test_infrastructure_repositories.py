"""
Tests for infrastructure repository implementations.

These tests verify that the Supabase repository implementations build the
right queries and degrade to neutral values when the client fails.
The Supabase client is replaced with a MagicMock query chain.
"""
import pytest
from datetime import date
from unittest.mock import Mock, MagicMock

from domain.models import AptitudeVector
from infrastructure.db.completion_repository import (
    MAX_STRING_LENGTH,
    SupabaseCompletionRepository,
    build_completion_event,
    validate_string_field,
)
from infrastructure.db.completed_routines_repository import (
    SupabaseCompletedRoutinesRepository,
    objective_from_row,
)
from tests.fakes import make_routine

# All tests in this module are pure logic tests with mocks - mark as unit
pytestmark = pytest.mark.unit


def _result(data):
    result = Mock()
    result.data = data
    return result


def _client_returning(*results):
    """MagicMock client whose successive execute() calls return ``results``."""
    client = MagicMock()
    client.table.return_value.select.return_value.eq.return_value.eq.return_value \
        .eq.return_value.gte.return_value.lte.return_value.execute.return_value = results[0]
    if len(results) > 1:
        client.table.return_value.select.return_value.in_.return_value \
            .execute.return_value = results[1]
    return client


# ============================================================================
# Import / Instantiation
# ============================================================================

class TestRepositoryImports:
    """Test that all repository classes can be imported."""

    def test_import_from_infrastructure_package(self):
        """All repositories should be importable from infrastructure package."""
        from infrastructure import (
            SupabaseCompletionRepository,
            SupabaseCompletedRoutinesRepository,
        )
        assert all([SupabaseCompletionRepository, SupabaseCompletedRoutinesRepository])

    def test_completion_repository_instantiation(self):
        mock_client = Mock()
        repo = SupabaseCompletionRepository(mock_client)
        assert repo._client is mock_client

    def test_completed_routines_repository_instantiation(self):
        mock_client = Mock()
        repo = SupabaseCompletedRoutinesRepository(mock_client)
        assert repo._client is mock_client


# ============================================================================
# Completion repository
# ============================================================================

class TestCompletionHelpers:

    def test_validate_string_field_truncates(self):
        assert len(validate_string_field("x" * (MAX_STRING_LENGTH + 5), "title")) == MAX_STRING_LENGTH

    def test_validate_string_field_rejects_non_string(self):
        assert validate_string_field(42, "title") is None

    def test_build_completion_event(self):
        event = build_completion_event("user-1", make_routine(), date(2024, 9, 11))
        assert event == {
            "user_id": "user-1",
            "type": "entrenamiento",
            "event_date": "2024-09-11",
            "status": "completed",
            "title": "Full body express",
            "metadata": {
                "routine_id": "routine-1",
                "routine_name": "Full body express",
                "routine_category": "Funcional",
            },
        }


class TestSupabaseCompletionRepository:

    def test_record_completion_inserts_user_event(self):
        client = MagicMock()
        client.table.return_value.insert.return_value.execute.return_value = _result([{"id": "evt-1"}])
        repo = SupabaseCompletionRepository(client)

        assert repo.record_completion("user-1", make_routine(), completed_on=date(2024, 9, 11))

        client.table.assert_called_with("user_events")
        inserted = client.table.return_value.insert.call_args[0][0]
        assert inserted["metadata"]["routine_id"] == "routine-1"

    def test_record_completion_no_data_returns_false(self):
        client = MagicMock()
        client.table.return_value.insert.return_value.execute.return_value = _result([])
        repo = SupabaseCompletionRepository(client)
        assert repo.record_completion("user-1", make_routine(), completed_on=date(2024, 9, 11)) is False

    def test_record_completion_error_returns_false(self):
        client = MagicMock()
        client.table.side_effect = Exception("connection reset")
        repo = SupabaseCompletionRepository(client)
        assert repo.record_completion("user-1", make_routine(), completed_on=date(2024, 9, 11)) is False

    def test_increment_play_count(self):
        client = MagicMock()
        client.table.return_value.update.return_value.eq.return_value.execute.return_value = \
            _result([{"id": "routine-1"}])
        repo = SupabaseCompletionRepository(client)

        assert repo.increment_play_count("routine-1", current_count=2)

        client.table.assert_called_with("routines")
        client.table.return_value.update.assert_called_with({"veces_realizada": 3})
        client.table.return_value.update.return_value.eq.assert_called_with("id", "routine-1")

    def test_increment_play_count_from_none(self):
        client = MagicMock()
        client.table.return_value.update.return_value.eq.return_value.execute.return_value = _result([{}])
        SupabaseCompletionRepository(client).increment_play_count("routine-1", current_count=None)
        client.table.return_value.update.assert_called_with({"veces_realizada": 1})

    def test_increment_play_count_error_returns_false(self):
        client = MagicMock()
        client.table.side_effect = Exception("timeout")
        assert SupabaseCompletionRepository(client).increment_play_count("routine-1") is False


# ============================================================================
# Completed routines repository
# ============================================================================

class TestObjectiveFromRow:

    def test_maps_stored_keys(self):
        vector = objective_from_row({"fuerza": 8, "movilidad": "4", "coordinacion": 5})
        assert vector.strength == 8.0
        assert vector.mobility == 4.0
        assert vector.coordination == 5.0
        assert vector.speed == 0.0

    def test_empty_objective_is_none(self):
        assert objective_from_row(None) is None
        assert objective_from_row({}) is None

    def test_non_numeric_value_reads_as_zero(self):
        assert objective_from_row({"fuerza": "alta"}).strength == 0.0


class TestSupabaseCompletedRoutinesRepository:

    def test_joins_events_with_routines(self):
        events = _result([
            {"id": "e1", "event_date": "2024-09-10", "metadata": {"routine_id": "r1"}},
            {"id": "e2", "event_date": "2024-09-12T08:00:00", "metadata": {"routine_id": "r1"}},
            {"id": "e3", "event_date": "2024-09-13", "metadata": {"routine_id": "r2"}},
        ])
        routines = _result([
            {"id": "r1", "categoria": "Funcional", "objetivo": {"fuerza": 8}},
            {"id": "r2", "categoria": "Activación", "objetivo": {"movilidad": 6}},
        ])
        client = _client_returning(events, routines)
        repo = SupabaseCompletedRoutinesRepository(client)

        completed = repo.get_completed_routines(
            "user-1", start=date(2024, 9, 9), end=date(2024, 9, 15)
        )

        assert [c.routine_id for c in completed] == ["r1", "r1", "r2"]
        assert completed[0].objective == AptitudeVector(strength=8)
        assert completed[1].completed_on == date(2024, 9, 12)
        assert completed[2].category == "Activación"
        client.table.return_value.select.return_value.in_.assert_called_with("id", ["r1", "r2"])

    def test_filters_by_range(self):
        client = _client_returning(_result([]))
        SupabaseCompletedRoutinesRepository(client).get_completed_routines(
            "user-1", start=date(2024, 9, 1), end=date(2024, 9, 30)
        )
        chain = client.table.return_value.select.return_value.eq.return_value.eq.return_value.eq.return_value
        chain.gte.assert_called_with("event_date", "2024-09-01")
        chain.gte.return_value.lte.assert_called_with("event_date", "2024-09-30")

    def test_no_events_skips_routine_query(self):
        client = _client_returning(_result([]))
        repo = SupabaseCompletedRoutinesRepository(client)
        assert repo.get_completed_routines("user-1", start=date(2024, 9, 9), end=date(2024, 9, 15)) == []
        client.table.return_value.select.return_value.in_.assert_not_called()

    def test_events_for_deleted_routines_dropped(self):
        events = _result([{"id": "e1", "event_date": "2024-09-10", "metadata": {"routine_id": "gone"}}])
        client = _client_returning(events, _result([]))
        repo = SupabaseCompletedRoutinesRepository(client)
        assert repo.get_completed_routines("user-1", start=date(2024, 9, 9), end=date(2024, 9, 15)) == []

    def test_error_returns_empty_list(self):
        client = MagicMock()
        client.table.side_effect = Exception("boom")
        repo = SupabaseCompletedRoutinesRepository(client)
        assert repo.get_completed_routines("user-1", start=date(2024, 9, 9), end=date(2024, 9, 15)) == []
