"""
Unit tests for template entry use cases.

Tests for:
- SaveTemplateEntriesUseCase with the fake repository
- LoadTemplateEntriesUseCase across structured and legacy rows
- DuplicateTemplateEntriesUseCase
- ExerciseReferenceResolver with the fake catalog
"""

import json

import pytest

from application.use_cases import (
    DuplicateTemplateEntriesUseCase,
    EntryListEditor,
    ExerciseReferenceResolver,
    LoadTemplateEntriesUseCase,
    SaveTemplateEntriesUseCase,
)
from domain.models import (
    CommonFields,
    ExerciseEntry,
    GiantSetMember,
    GiantSetPayload,
    SupersetPayload,
    VariantTag,
    new_temp_id,
)
from tests.fakes import (
    FakeExerciseCatalog,
    FakeTemplateExerciseRepository,
    create_template_exercise_repo,
    make_straight_set_row,
)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def repo() -> FakeTemplateExerciseRepository:
    """Create a fresh fake template exercise repository."""
    return FakeTemplateExerciseRepository()


@pytest.fixture
def catalog() -> FakeExerciseCatalog:
    return FakeExerciseCatalog()


@pytest.fixture
def editor_entries():
    """Three committed entries as the editor would produce them."""
    editor = EntryListEditor()
    editor.begin_add().update(primary_exercise_id="barbell-back-squat", sets="5", reps="5")
    editor.commit()
    draft = editor.begin_add(VariantTag.SUPERSET)
    draft.update(primary_exercise_id="barbell-bench-press", second_exercise_id="barbell-row", reps_b="10")
    editor.commit()
    draft = editor.begin_add(VariantTag.AMRAP)
    draft.update(primary_exercise_id="burpee", amrap_duration_minutes="10")
    editor.commit()
    return list(editor.entries)


# =============================================================================
# Save
# =============================================================================


@pytest.mark.unit
class TestSaveTemplateEntries:
    """Tests for SaveTemplateEntriesUseCase."""

    def test_save_assigns_durable_ids(self, repo, editor_entries):
        result = SaveTemplateEntriesUseCase(template_exercise_repo=repo).execute("tpl-1", editor_entries)

        assert result.success is True
        assert len(result.entries) == 3
        assert all(e.is_persisted for e in result.entries)
        assert [e.order_index for e in result.entries] == [1, 2, 3]
        assert [e.variant_tag for e in result.entries] == [
            VariantTag.STRAIGHT_SET,
            VariantTag.SUPERSET,
            VariantTag.AMRAP,
        ]

    def test_save_writes_structured_rows(self, repo, editor_entries):
        SaveTemplateEntriesUseCase(template_exercise_repo=repo).execute("tpl-1", editor_entries)

        rows = repo.list_for_template("tpl-1")
        assert rows[1]["variant_tag"] == "superset"
        assert rows[1]["details"] == {"second_exercise_id": "barbell-row", "reps_b": "10"}
        assert rows[0]["details"] == {}

    def test_save_replaces_previous_rows(self, editor_entries):
        repo = create_template_exercise_repo(template_id="tpl-1", num_entries=5)
        use_case = SaveTemplateEntriesUseCase(template_exercise_repo=repo)

        result = use_case.execute("tpl-1", editor_entries[:1])

        assert result.success is True
        assert len(repo.list_for_template("tpl-1")) == 1

    def test_save_rejects_gaps_in_order(self, repo, editor_entries):
        entries = [editor_entries[0], editor_entries[2]]
        result = SaveTemplateEntriesUseCase(template_exercise_repo=repo).execute("tpl-1", entries)

        assert result.success is False
        assert result.validation_errors
        assert repo.replace_calls == 0

    def test_save_rejects_invalid_entries(self, repo):
        entries = [
            ExerciseEntry(
                id=new_temp_id(),
                order_index=1,
                common=CommonFields(primary_exercise_id="bench"),
                payload=SupersetPayload(),
            )
        ]
        result = SaveTemplateEntriesUseCase(template_exercise_repo=repo).execute("tpl-1", entries)

        assert result.success is False
        assert result.error == "Entry validation failed"
        assert result.validation_errors == ["Entry 1: Select both exercises for your Superset"]

    def test_save_reports_repository_failure(self, repo, editor_entries):
        repo.fail_on_replace = RuntimeError("connection reset")
        result = SaveTemplateEntriesUseCase(template_exercise_repo=repo).execute("tpl-1", editor_entries)

        assert result.success is False
        assert result.error == "connection reset"
        assert result.validation_errors == []

    def test_save_empty_list_clears_template(self):
        repo = create_template_exercise_repo(template_id="tpl-1", num_entries=2)
        result = SaveTemplateEntriesUseCase(template_exercise_repo=repo).execute("tpl-1", [])

        assert result.success is True
        assert repo.list_for_template("tpl-1") == []


# =============================================================================
# Load
# =============================================================================


@pytest.mark.unit
class TestLoadTemplateEntries:
    """Tests for LoadTemplateEntriesUseCase."""

    def test_load_mixed_encodings(self, repo):
        repo.seed([
            make_straight_set_row("tpl-1", 2, exercise_id="bench"),
            {
                "id": "legacy-1",
                "template_id": "tpl-1",
                "order_index": 1,
                "exercise_id": "kb-swing",
                "notes": json.dumps({"variantTag": "emom", "mode": "time_based", "workSeconds": 30}),
            },
            {"id": "plain-1", "template_id": "tpl-1", "order_index": 3, "notes": "go heavy today"},
            make_straight_set_row("tpl-2", 1),
        ])

        result = LoadTemplateEntriesUseCase(template_exercise_repo=repo).execute("tpl-1")

        assert result.success is True
        assert result.legacy_count == 1
        assert [e.id for e in result.entries] == ["legacy-1", "tpl-1-e2", "plain-1"]
        assert result.entries[0].variant_tag == VariantTag.EMOM
        assert result.entries[2].common.notes == "go heavy today"

    def test_load_unknown_template_is_empty(self, repo):
        result = LoadTemplateEntriesUseCase(template_exercise_repo=repo).execute("nope")
        assert result.success is True
        assert result.entries == []

    def test_save_then_load_round_trip(self, repo, editor_entries):
        saved = SaveTemplateEntriesUseCase(template_exercise_repo=repo).execute("tpl-1", editor_entries)
        loaded = LoadTemplateEntriesUseCase(template_exercise_repo=repo).execute("tpl-1")

        assert loaded.entries == saved.entries


# =============================================================================
# Duplicate
# =============================================================================


@pytest.mark.unit
class TestDuplicateTemplateEntries:
    """Tests for DuplicateTemplateEntriesUseCase."""

    def test_duplicate_copies_entries_with_new_ids(self):
        repo = create_template_exercise_repo(template_id="tpl-1", num_entries=3)
        result = DuplicateTemplateEntriesUseCase(template_exercise_repo=repo).execute("tpl-1", "tpl-2")

        source_ids = {r["id"] for r in repo.list_for_template("tpl-1")}
        copies = repo.list_for_template("tpl-2")

        assert result.success is True
        assert len(copies) == 3
        assert source_ids.isdisjoint({r["id"] for r in copies})
        assert [e.order_index for e in result.entries] == [1, 2, 3]

    def test_duplicate_upgrades_legacy_rows(self, repo):
        repo.seed([{
            "id": "legacy-1",
            "template_id": "tpl-1",
            "order_index": 1,
            "notes": json.dumps({"exercise_type": "amrap", "exercise_id": "burpee", "amrap_duration": 12}),
        }])

        DuplicateTemplateEntriesUseCase(template_exercise_repo=repo).execute("tpl-1", "tpl-2")
        (copy,) = repo.list_for_template("tpl-2")

        assert copy["variant_tag"] == "amrap"
        assert copy["exercise_id"] == "burpee"
        assert copy["details"] == {"amrap_duration_minutes": 12}
        assert copy["notes"] == ""

    def test_duplicate_into_same_template_rejected(self, repo):
        result = DuplicateTemplateEntriesUseCase(template_exercise_repo=repo).execute("tpl-1", "tpl-1")
        assert result.success is False
        assert repo.replace_calls == 0


# =============================================================================
# Reference resolution
# =============================================================================


@pytest.mark.unit
class TestExerciseReferenceResolver:
    """Tests for ExerciseReferenceResolver."""

    def test_resolve_known_exercise(self, catalog):
        ref = ExerciseReferenceResolver(catalog=catalog).resolve("barbell-back-squat")
        assert ref.name == "Barbell Back Squat"

    def test_resolve_unknown_and_empty(self, catalog):
        resolver = ExerciseReferenceResolver(catalog=catalog)
        assert resolver.resolve("not-there") is None
        assert resolver.resolve("") is None
        assert resolver.resolve(None) is None
        assert catalog.lookups == 1

    def test_lookups_are_memoised(self, catalog):
        resolver = ExerciseReferenceResolver(catalog=catalog)
        resolver.resolve("burpee")
        resolver.resolve("burpee")
        resolver.resolve("missing")
        resolver.resolve("missing")
        assert catalog.lookups == 2

        resolver.clear()
        resolver.resolve("burpee")
        assert catalog.lookups == 3

    def test_resolve_many_skips_duplicates_and_unknown(self, catalog):
        refs = ExerciseReferenceResolver(catalog=catalog).resolve_many(
            ["barbell-row", "missing", "barbell-row", None, "burpee"]
        )
        assert [r.id for r in refs] == ["barbell-row", "burpee"]

    def test_describe(self, catalog):
        resolver = ExerciseReferenceResolver(catalog=catalog)
        known = ExerciseEntry(id="e-1", order_index=1, common=CommonFields(primary_exercise_id="burpee"))
        unknown = ExerciseEntry(id="e-2", order_index=2, common=CommonFields(primary_exercise_id="zercher"))
        giant = ExerciseEntry(
            id="e-3",
            order_index=3,
            payload=GiantSetPayload(members=[GiantSetMember(exercise_id="leg-extension")]),
        )
        empty = ExerciseEntry(id="e-4", order_index=4, payload=GiantSetPayload())

        assert resolver.describe(known) == "Burpee"
        assert resolver.describe(unknown) == "zercher"
        assert resolver.describe(giant) == "Leg Extension"
        assert resolver.describe(empty) == "Giant Set"
