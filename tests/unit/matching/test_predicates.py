"""Tests for coarse-filter predicates."""

import pytest

from talent_match.directory.store import CoarseCriteria, SkillConstraint, SkillPolicy


def any_of(*names: str) -> SkillConstraint:
    return SkillConstraint(policy=SkillPolicy.ANY_OF, names=frozenset(names))


def all_of(*names: str, bonus: tuple[str, ...] = ()) -> SkillConstraint:
    return SkillConstraint(
        policy=SkillPolicy.ALL_OF, names=frozenset(names), bonus_names=frozenset(bonus)
    )


class TestMatchesLocation:
    """Test location equality."""

    def test_none_matches_everything(self, make_profile):
        """No location constraint passes every profile."""
        from talent_match.matching.predicates import matches_location

        assert matches_location(make_profile("p1", location=None), None) is True

    def test_exact_match_is_case_sensitive(self, make_profile):
        """Location equality is exact."""
        from talent_match.matching.predicates import matches_location

        profile = make_profile("p1", location="Pune")

        assert matches_location(profile, "Pune") is True
        assert matches_location(profile, "pune") is False
        assert matches_location(profile, "Pune ") is False

    def test_profile_without_location_fails_constraint(self, make_profile):
        """A missing location never equals a requested one."""
        from talent_match.matching.predicates import matches_location

        assert matches_location(make_profile("p1", location=None), "Pune") is False


class TestMeetsExperienceFloor:
    """Test the experience floor with its five-year tolerance."""

    @pytest.mark.parametrize(
        ("total", "expected"),
        [(5, True), (4, False), (10, True), (0, False)],
    )
    def test_tolerance_boundary(self, make_profile, total, expected):
        """Floor 10 admits 5 years (10 - 5) but not 4."""
        from talent_match.matching.predicates import meets_experience_floor

        profile = make_profile("p1", total_experience=total)

        assert meets_experience_floor(profile, 10) is expected

    def test_missing_total_experience_fails_when_floor_set(self, make_profile):
        """Unknown experience fails any floor, even a trivially low one."""
        from talent_match.matching.predicates import meets_experience_floor

        profile = make_profile("p1", total_experience=None)

        assert meets_experience_floor(profile, 0) is False

    def test_no_floor_passes_missing_experience(self, make_profile):
        """Without a floor, missing experience is fine."""
        from talent_match.matching.predicates import meets_experience_floor

        profile = make_profile("p1", total_experience=None)

        assert meets_experience_floor(profile, None) is True


class TestSatisfiesSkillConstraint:
    """Test ANY_OF / ALL_OF skill presence."""

    def test_any_of_requires_one_shared_name(self, make_profile, make_skill):
        """ANY_OF passes on a single overlap."""
        from talent_match.matching.predicates import satisfies_skill_constraint

        profile = make_profile("p1", skills=[make_skill("Java")])

        assert satisfies_skill_constraint(profile, any_of("Java", "Go")) is True
        assert satisfies_skill_constraint(profile, any_of("Go", "Rust")) is False

    def test_empty_names_is_a_no_op(self, make_profile):
        """An empty skill set passes everyone under both policies."""
        from talent_match.matching.predicates import satisfies_skill_constraint

        profile = make_profile("p1", skills=[])

        assert satisfies_skill_constraint(profile, any_of()) is True
        assert satisfies_skill_constraint(profile, all_of()) is True

    def test_all_of_requires_every_name(self, make_profile, make_skill):
        """ALL_OF fails when any gating name is missing."""
        from talent_match.matching.predicates import satisfies_skill_constraint

        profile = make_profile("p1", skills=[make_skill("Java"), make_skill("Java")])

        assert satisfies_skill_constraint(profile, all_of("Java")) is True
        assert satisfies_skill_constraint(profile, all_of("Java", "Spring Boot")) is False

    def test_bonus_names_do_not_gate(self, make_profile, make_skill):
        """Secondary names never affect presence."""
        from talent_match.matching.predicates import satisfies_skill_constraint

        profile = make_profile("p1", skills=[make_skill("Java")])

        assert satisfies_skill_constraint(profile, all_of("Java", bonus=("Docker",))) is True

    def test_matching_is_case_sensitive(self, make_profile, make_skill):
        """'java' does not satisfy 'Java'."""
        from talent_match.matching.predicates import satisfies_skill_constraint

        profile = make_profile("p1", skills=[make_skill("java")])

        assert satisfies_skill_constraint(profile, any_of("Java")) is False


class TestProvisionalMatchCount:
    """Test the provisional count used for coarse ordering."""

    def test_counts_distinct_names(self, make_profile, make_skill):
        """Duplicate records count once."""
        from talent_match.matching.predicates import provisional_match_count

        profile = make_profile(
            "p1", skills=[make_skill("Java"), make_skill("Java"), make_skill("SQL")]
        )

        assert provisional_match_count(profile, any_of("Java", "SQL", "Go")) == 2

    def test_adds_bonus_names(self, make_profile, make_skill):
        """Secondary names add to the count."""
        from talent_match.matching.predicates import provisional_match_count

        profile = make_profile("p1", skills=[make_skill("Java"), make_skill("Docker")])

        assert provisional_match_count(profile, all_of("Java", bonus=("Docker", "K8s"))) == 2


class TestPassesCoarseFilter:
    """Test the combined coarse predicate."""

    def test_all_constraints_must_hold(self, make_profile, make_skill):
        """Location, floor and skills are ANDed."""
        from talent_match.matching.predicates import passes_coarse_filter

        profile = make_profile(
            "p1", location="Pune", total_experience=3, skills=[make_skill("Java")]
        )
        criteria = CoarseCriteria(
            skill_constraint=any_of("Java"), location="Pune", experience_floor=8
        )

        assert passes_coarse_filter(profile, criteria) is True
        assert (
            passes_coarse_filter(
                profile,
                CoarseCriteria(skill_constraint=any_of("Java"), experience_floor=9),
            )
            is False
        )
        assert (
            passes_coarse_filter(
                profile, CoarseCriteria(skill_constraint=any_of("Java"), location="Delhi")
            )
            is False
        )
