"""
Rule-focused unit tests for the generation engine.

Each test pins one rule: label matching tables, the level gate, pool
ranking, session-length targets, title formatting and merge degradation.
Expected values are written out by hand so the tests double as a
reference for the rules.
"""

import logging

import pytest

from workout_generator.core.catalog import InMemoryCatalogProvider
from workout_generator.core.config import (
    STRENGTH_ACCESSORY_NOTES,
    STRENGTH_COMPOUND_NOTES,
    strength_split,
    target_exercise_count,
)
from workout_generator.core.filters import filter_candidates, level_allows
from workout_generator.core.formatter import build_title, format_focus_list, goal_label
from workout_generator.core.matching import (
    equipment_compatible,
    equipment_key_label,
    matches_any_focus,
    matches_focus_area,
)
from workout_generator.core.merger import fetch_candidates, merge_candidates
from workout_generator.core.composer import select_strength, strength_exercise_notes
from workout_generator.core.models import (
    CandidateExercise,
    CatalogRow,
    CompoundClass,
    GeneratedExercise,
    GeneratedPlan,
    GenerationRequest,
    SecondaryAttributes,
)

# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _cand(
    id: str,
    muscle: str | None = "chest",
    popularity: float | None = 50,
    level: str | None = "beginner",
    compound: CompoundClass = CompoundClass.COMPOUND,
    equipment: str | None = None,
    discipline: str | None = "strength",
    name: str | None = None,
) -> CandidateExercise:
    return CandidateExercise(
        id=id,
        name=name if name is not None else id.replace("-", " ").title(),
        discipline=discipline,
        popularity=popularity,
        primary_muscle=muscle,
        equipment=equipment,
        level=level,  # type: ignore[arg-type]
        compound=compound,
    )


def _request(**overrides) -> GenerationRequest:
    fields = dict(
        level="advanced",
        goal="build_muscle",
        location="gym",
        session_length_minutes=60,
        focus_areas=(),
        home_equipment=(),
    )
    fields.update(overrides)
    return GenerationRequest(**fields)


class _RecordingProvider:
    """Provider that records calls and can fail either read."""

    def __init__(self, rows, secondary=(), fail_catalog=False, fail_secondary=False):
        self.rows = list(rows)
        self.secondary = list(secondary)
        self.fail_catalog = fail_catalog
        self.fail_secondary = fail_secondary
        self.secondary_calls: list[list[str]] = []

    def fetch_catalog(self):
        if self.fail_catalog:
            raise ConnectionError("catalog view unavailable")
        return list(self.rows)

    def fetch_secondary_attributes(self, ids):
        self.secondary_calls.append(list(ids))
        if self.fail_secondary:
            raise TimeoutError("exercises table timed out")
        return list(self.secondary)


# ===========================================================================
# Focus-area matching
# ===========================================================================

class TestFocusMatching:
    """Substring keyword tables for focus areas."""

    @pytest.mark.parametrize("area", ["chest", "back", "shoulders", "biceps", "triceps"])
    def test_named_areas_match_their_own_name(self, area):
        assert matches_focus_area(f"Upper {area.title()}", area)

    def test_lower_back_counts_as_back(self):
        assert matches_focus_area("lower back", "back")

    def test_rear_delts_do_not_count_as_shoulders(self):
        """Only the literal area name is searched for upper-body areas."""
        assert not matches_focus_area("rear delts", "shoulders")

    @pytest.mark.parametrize("muscle", ["core", "Abs", "Abdominals", "lower abdomen"])
    def test_core_keywords(self, muscle):
        assert matches_focus_area(muscle, "core")

    @pytest.mark.parametrize(
        "muscle", ["glutes", "Quadriceps", "hamstrings", "calf", "legs", "Lower Leg"]
    )
    def test_legs_and_glutes_share_lower_body_keywords(self, muscle):
        assert matches_focus_area(muscle, "legs")
        assert matches_focus_area(muscle, "glutes")

    def test_calves_label_is_not_a_lower_body_match(self):
        """'calves' does not contain 'calf'; keywords are not stemmed."""
        assert not matches_focus_area("calves", "legs")

    def test_missing_muscle_never_matches(self):
        assert not matches_focus_area(None, "chest")
        assert not matches_focus_area("", "core")

    def test_unmapped_area_never_matches(self):
        assert not matches_focus_area("forearms", "forearms")

    def test_area_is_case_insensitive(self):
        assert matches_focus_area("chest", "Chest")

    def test_any_focus(self):
        assert matches_any_focus("triceps", ["chest", "triceps"])
        assert not matches_any_focus("biceps", ["chest", "triceps"])
        assert not matches_any_focus("biceps", [])


# ===========================================================================
# Equipment compatibility
# ===========================================================================

class TestEquipmentCompatibility:
    """Home-equipment gate."""

    def test_key_label_replaces_underscores(self):
        assert equipment_key_label("resistance_bands") == "resistance bands"
        assert equipment_key_label("pullup_bar") == "pullup bar"

    def test_no_equipment_and_no_preferences_passes(self):
        assert equipment_compatible(None, [])

    def test_no_equipment_needs_bodyweight_when_preferences_given(self):
        assert not equipment_compatible(None, ["dumbbells"])
        assert equipment_compatible(None, ["dumbbells", "bodyweight"])

    def test_blank_equipment_is_bodyweight(self):
        assert equipment_compatible("   ", [])
        assert not equipment_compatible("", ["kettlebell"])

    def test_recorded_equipment_must_match_a_key(self):
        assert equipment_compatible("Dumbbells", ["dumbbells"])
        assert equipment_compatible("Resistance Bands", ["resistance_bands"])
        assert not equipment_compatible("barbell", ["dumbbells", "bench"])

    def test_recorded_equipment_fails_with_no_preferences(self):
        assert not equipment_compatible("barbell", [])

    def test_substring_match(self):
        """Labels are searched, not compared: 'bench' matches 'flat bench'."""
        assert equipment_compatible("flat bench", ["bench"])


# ===========================================================================
# Level gate
# ===========================================================================

class TestLevelGate:
    """Asymmetric level gate."""

    @pytest.mark.parametrize(
        "exercise_level, user_level, allowed",
        [
            ("beginner", "beginner", True),
            ("intermediate", "beginner", False),
            ("advanced", "beginner", False),
            ("beginner", "intermediate", True),
            ("intermediate", "intermediate", True),
            ("advanced", "intermediate", False),
            ("beginner", "advanced", True),
            ("intermediate", "advanced", True),
            ("advanced", "advanced", True),
        ],
    )
    def test_known_levels(self, exercise_level, user_level, allowed):
        assert level_allows(exercise_level, user_level) is allowed

    def test_unknown_level_excluded_for_beginners(self):
        assert not level_allows(None, "beginner")

    @pytest.mark.parametrize("user_level", ["intermediate", "advanced"])
    def test_unknown_level_allowed_for_experienced(self, user_level):
        assert level_allows(None, user_level)


# ===========================================================================
# Eligibility filter
# ===========================================================================

class TestFilterCandidates:
    """Pool construction and ranking."""

    def test_only_named_strength_candidates(self):
        candidates = [
            _cand("bench", popularity=10),
            _cand("run", discipline="cardio", popularity=99),
            _cand("mystery", discipline=None, popularity=98),
            _cand("nameless", name="", popularity=97),
            _cand("fly", discipline="Strength", popularity=5),
        ]
        pool = filter_candidates(_request(), candidates)
        assert [c.id for c in pool] == ["bench", "fly"]

    def test_popularity_descending_with_stable_ties(self):
        candidates = [
            _cand("a", popularity=50),
            _cand("b", popularity=None),
            _cand("c", popularity=80),
            _cand("d", popularity=50),
            _cand("e", popularity=0),
        ]
        pool = filter_candidates(_request(), candidates)
        # None counts as 0 → b and e tie; catalog order keeps b first
        assert [c.id for c in pool] == ["c", "a", "d", "b", "e"]

    def test_duplicates_removed_first_kept(self):
        candidates = [
            _cand("a", popularity=10, name="First"),
            _cand("a", popularity=90, name="Second"),
            _cand("b", popularity=20),
        ]
        pool = filter_candidates(_request(), candidates)
        assert [c.id for c in pool] == ["b", "a"]
        assert pool[1].name == "First"

    def test_focus_filter_only_when_areas_given(self):
        candidates = [_cand("curl", muscle="biceps"), _cand("bench", muscle="chest")]
        assert len(filter_candidates(_request(), candidates)) == 2
        pool = filter_candidates(_request(focus_areas=("chest",)), candidates)
        assert [c.id for c in pool] == ["bench"]

    def test_focus_filter_drops_missing_muscle(self):
        pool = filter_candidates(
            _request(focus_areas=("chest",)), [_cand("x", muscle=None)]
        )
        assert pool == []

    def test_equipment_ignored_outside_home(self):
        candidates = [_cand("bench", equipment="barbell")]
        for location in ("gym", "both"):
            pool = filter_candidates(
                _request(location=location, home_equipment=("dumbbells",)), candidates
            )
            assert len(pool) == 1

    def test_equipment_filtered_at_home(self):
        candidates = [
            _cand("bench", equipment="barbell", popularity=90),
            _cand("db-press", equipment="dumbbells", popularity=80),
            _cand("push-up", equipment=None, popularity=70),
        ]
        pool = filter_candidates(
            _request(location="home", home_equipment=("dumbbells",)), candidates
        )
        assert [c.id for c in pool] == ["db-press"]

        pool = filter_candidates(_request(location="home"), candidates)
        assert [c.id for c in pool] == ["push-up"]

    def test_level_gate_applied(self):
        candidates = [
            _cand("easy", level="beginner"),
            _cand("hard", level="advanced"),
            _cand("unknown", level=None),
        ]
        pool = filter_candidates(_request(level="beginner"), candidates)
        assert [c.id for c in pool] == ["easy"]
        pool = filter_candidates(_request(level="intermediate"), candidates)
        assert [c.id for c in pool] == ["easy", "unknown"]


# ===========================================================================
# Session-length tables
# ===========================================================================

class TestSessionTargets:
    """Session length → exercise counts."""

    @pytest.mark.parametrize(
        "minutes, expected",
        [(10, 4), (30, 4), (31, 5), (45, 5), (46, 6), (60, 6), (120, 6)],
    )
    def test_target_exercise_count(self, minutes, expected):
        assert target_exercise_count(minutes) == expected

    @pytest.mark.parametrize(
        "minutes, compound, accessory",
        [(30, 2, 2), (45, 3, 2), (60, 3, 3), (90, 3, 3)],
    )
    def test_strength_split(self, minutes, compound, accessory):
        split = strength_split(minutes)
        assert (split.compound, split.accessory) == (compound, accessory)
        assert split.total == target_exercise_count(minutes)


# ===========================================================================
# Titles
# ===========================================================================

class TestTitles:
    """Goal labels and focus lists."""

    def test_goal_labels(self):
        assert goal_label("build_muscle") == "Build Muscle"
        assert goal_label("lose_fat") == "Lose Fat"
        assert goal_label("get_stronger") == "Get Stronger"
        assert goal_label("improve_endurance") == "Improve Endurance"
        assert goal_label("anything_else") == "Workout"

    def test_focus_list_shapes(self):
        assert format_focus_list([]) == ""
        assert format_focus_list(["chest"]) == "Chest"
        assert format_focus_list(["chest", "back"]) == "Chest & Back"
        assert format_focus_list(["chest", "back", "biceps"]) == "Chest, Back & Biceps"
        assert (
            format_focus_list(["chest", "back", "biceps", "core"])
            == "Chest, Back, Biceps & Core"
        )

    def test_title_without_focus(self):
        assert build_title("lose_fat", []) == "Lose Fat Workout"

    def test_title_with_focus_uses_en_dash(self):
        assert build_title("get_stronger", ["legs"]) == "Get Stronger – Legs"

    def test_override_prefix(self):
        assert build_title("improve_endurance", ["core"], "Conditioning") == "Conditioning – Core"
        assert build_title("lose_fat", [], "Fat Loss") == "Fat Loss Workout"


# ===========================================================================
# Merger
# ===========================================================================

class TestMerger:
    """Joining catalog rows with secondary attributes."""

    def test_missing_secondary_is_unknown(self):
        rows = [CatalogRow(id="1", name="Bench", discipline="strength", popularity=5)]
        (c,) = merge_candidates(rows, [])
        assert c.equipment is None
        assert c.level is None
        assert c.compound is CompoundClass.UNKNOWN

    def test_attributes_joined_by_id(self):
        rows = [
            CatalogRow(id="1", name="Bench", discipline="strength"),
            CatalogRow(id="2", name="Curl", discipline="strength"),
        ]
        secondary = [
            SecondaryAttributes(id="2", equipment="dumbbells", level="beginner", is_compound=False),
            SecondaryAttributes(id="1", equipment="barbell", level="intermediate", is_compound=True),
        ]
        merged = merge_candidates(rows, secondary)
        assert [c.id for c in merged] == ["1", "2"]
        assert merged[0].equipment == "barbell"
        assert merged[0].compound is CompoundClass.COMPOUND
        assert merged[1].level == "beginner"
        assert merged[1].compound is CompoundClass.ACCESSORY

    def test_level_normalized_and_unknown_values_dropped(self):
        rows = [
            CatalogRow(id="1", name="A", discipline="strength"),
            CatalogRow(id="2", name="B", discipline="strength"),
        ]
        secondary = [
            SecondaryAttributes(id="1", level=" Beginner "),
            SecondaryAttributes(id="2", level="expert"),
        ]
        merged = merge_candidates(rows, secondary)
        assert merged[0].level == "beginner"
        assert merged[1].level is None

    def test_later_secondary_row_wins(self):
        rows = [CatalogRow(id="1", name="A", discipline="strength")]
        secondary = [
            SecondaryAttributes(id="1", equipment="barbell"),
            SecondaryAttributes(id="1", equipment="dumbbells"),
        ]
        assert merge_candidates(rows, secondary)[0].equipment == "dumbbells"

    def test_compound_flag_mapping(self):
        assert CompoundClass.from_flag(True) is CompoundClass.COMPOUND
        assert CompoundClass.from_flag(False) is CompoundClass.ACCESSORY
        assert CompoundClass.from_flag(None) is CompoundClass.UNKNOWN
        assert CompoundClass.from_flag("true") is CompoundClass.UNKNOWN
        assert CompoundClass.UNKNOWN.is_accessory
        assert CompoundClass.ACCESSORY.is_accessory
        assert not CompoundClass.COMPOUND.is_accessory

    def test_catalog_failure_returns_empty(self, caplog):
        provider = _RecordingProvider([], fail_catalog=True)
        with caplog.at_level(logging.WARNING, logger="workout_generator"):
            assert fetch_candidates(provider) == []
        assert "Catalog fetch failed" in caplog.text
        assert provider.secondary_calls == []

    def test_empty_catalog_skips_secondary_lookup(self):
        provider = _RecordingProvider([])
        assert fetch_candidates(provider) == []
        assert provider.secondary_calls == []

    def test_secondary_failure_degrades_to_unknown(self, caplog):
        rows = [CatalogRow(id="1", name="Bench", discipline="strength")]
        provider = _RecordingProvider(
            rows,
            [SecondaryAttributes(id="1", level="beginner", is_compound=True)],
            fail_secondary=True,
        )
        with caplog.at_level(logging.WARNING, logger="workout_generator"):
            (c,) = fetch_candidates(provider)
        assert c.level is None
        assert c.compound is CompoundClass.UNKNOWN
        assert provider.secondary_calls == [["1"]]
        assert "Secondary attribute fetch failed" in caplog.text

    def test_in_memory_provider_filters_secondary_by_id(self):
        provider = InMemoryCatalogProvider(
            [CatalogRow(id="1", name="A", discipline="strength")],
            [SecondaryAttributes(id="1"), SecondaryAttributes(id="9")],
        )
        assert [a.id for a in provider.fetch_secondary_attributes(["1"])] == ["1"]


# ===========================================================================
# Strength selection passes
# ===========================================================================

class TestStrengthSelection:
    """Pass-by-pass behaviour of the greedy strength selector."""

    def test_coverage_pick_counts_toward_split(self):
        """
        30 min → target 4, split 2/2.

        Pool (rank order): c1 chest compound, c2 chest compound,
        a1 back accessory, c3 back compound, a2 chest accessory.
        focus = back → coverage takes a1 (first back match).
        compound deficit 2 → c1, c2; accessory deficit 1 → a2.
        """
        pool = [
            _cand("c1", muscle="chest", popularity=90),
            _cand("c2", muscle="chest", popularity=80),
            _cand("a1", muscle="back", popularity=70, compound=CompoundClass.ACCESSORY),
            _cand("c3", muscle="back", popularity=60),
            _cand("a2", muscle="chest", popularity=50, compound=CompoundClass.ACCESSORY),
        ]
        request = _request(goal="get_stronger", session_length_minutes=30, focus_areas=("back",))
        selections = select_strength(request, pool)
        assert [s.candidate.id for s in selections] == ["c1", "c2", "a1", "a2"]
        assert [s.reason for s in selections] == ["compound", "compound", "coverage", "accessory"]
        assert selections[2].focus_area == "back"

    def test_unknown_classification_fills_accessory_slots(self):
        pool = [
            _cand("c1", popularity=90),
            _cand("u1", popularity=80, compound=CompoundClass.UNKNOWN),
            _cand("c2", popularity=70),
            _cand("u2", popularity=60, compound=CompoundClass.UNKNOWN),
            _cand("c3", popularity=50),
        ]
        request = _request(goal="get_stronger", session_length_minutes=30)
        selections = select_strength(request, pool)
        assert [s.candidate.id for s in selections] == ["c1", "c2", "u1", "u2"]

    def test_fill_uses_remaining_compounds_when_accessories_run_out(self):
        pool = [_cand(f"c{i}", popularity=100 - i) for i in range(6)]
        request = _request(goal="get_stronger", session_length_minutes=60)
        selections = select_strength(request, pool)
        assert [s.reason for s in selections] == ["compound"] * 3 + ["fill"] * 3
        assert len(selections) == 6

    def test_coverage_never_exceeds_target(self):
        """More focus areas than slots: coverage stops at the target count."""
        areas = ("chest", "back", "shoulders", "biceps", "triceps", "core")
        pool = [_cand(area, muscle=area, popularity=60 - i) for i, area in enumerate(areas)]
        request = _request(goal="get_stronger", session_length_minutes=30, focus_areas=areas)
        selections = select_strength(request, pool)
        assert len(selections) == 4

    def test_exercise_notes_by_class(self):
        assert strength_exercise_notes(_cand("c")) == STRENGTH_COMPOUND_NOTES
        assert (
            strength_exercise_notes(_cand("a", compound=CompoundClass.ACCESSORY))
            == STRENGTH_ACCESSORY_NOTES
        )
        assert (
            strength_exercise_notes(_cand("u", compound=CompoundClass.UNKNOWN))
            == STRENGTH_ACCESSORY_NOTES
        )


# ===========================================================================
# Model validation
# ===========================================================================

class TestModelValidation:
    """Request and plan validation."""

    @pytest.mark.parametrize(
        "field, value",
        [
            ("level", "expert"),
            ("goal", "get_huge"),
            ("location", "park"),
            ("session_length_minutes", 0),
            ("focus_areas", ("chest", "forearms")),
            ("home_equipment", ("barbell",)),
            ("cardio_preferences", ("swimming",)),
        ],
    )
    def test_invalid_request_values_raise(self, field, value):
        with pytest.raises(ValueError):
            _request(**{field: value})

    def test_lists_are_stored_as_tuples(self):
        request = _request(focus_areas=["chest", "back"])
        assert request.focus_areas == ("chest", "back")
        assert hash(request) == hash(_request(focus_areas=("chest", "back")))

    def test_focus_area_count_not_limited(self):
        request = _request(focus_areas=("chest", "back", "legs", "core"))
        assert len(request.focus_areas) == 4

    def test_plan_rejects_gaps_in_order_index(self):
        with pytest.raises(ValueError):
            GeneratedPlan(
                title="x",
                estimated_duration_minutes=30,
                goal="lose_fat",
                location="gym",
                exercises=[GeneratedExercise("a", "A", 1)],
            )

    def test_plan_rejects_duplicate_ids(self):
        with pytest.raises(ValueError):
            GeneratedPlan(
                title="x",
                estimated_duration_minutes=30,
                goal="lose_fat",
                location="gym",
                exercises=[GeneratedExercise("a", "A", 0), GeneratedExercise("a", "A", 1)],
            )
