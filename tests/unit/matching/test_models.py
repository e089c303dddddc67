"""Tests for matching query and result models."""

import pytest
from pydantic import ValidationError


class TestParseQuery:
    """Test the tagged query union."""

    def test_parses_any_skill_mode(self):
        """mode=any_skill selects AnySkillQuery."""
        from talent_match.matching.models import AnySkillQuery, parse_query

        query = parse_query({"mode": "any_skill", "skill_names": ["Go"], "page": 2})

        assert isinstance(query, AnySkillQuery)
        assert query.skill_names == ["Go"]
        assert query.page == 2

    def test_parses_primary_secondary_mode(self):
        """mode=primary_secondary selects PrimarySecondaryQuery."""
        from talent_match.matching.models import PrimarySecondaryQuery, parse_query

        query = parse_query(
            {
                "mode": "primary_secondary",
                "primary_skills": ["Java"],
                "skill_experience": {"Java": 3},
            }
        )

        assert isinstance(query, PrimarySecondaryQuery)
        assert query.skill_experience == {"Java": 3}

    def test_missing_mode_is_rejected(self):
        """The discriminator is required."""
        from talent_match.matching.models import parse_query

        with pytest.raises(ValidationError):
            parse_query({"skill_names": ["Go"]})

    def test_unknown_mode_is_rejected(self):
        """Only the two modes are accepted."""
        from talent_match.matching.models import parse_query

        with pytest.raises(ValidationError):
            parse_query({"mode": "fuzzy"})

    @pytest.mark.parametrize("blank", ["", "   "])
    def test_blank_location_means_no_constraint(self, blank):
        """Blank locations normalize to None."""
        from talent_match.matching.models import AnySkillQuery, PrimarySecondaryQuery

        assert AnySkillQuery(location=blank).location is None
        assert PrimarySecondaryQuery(primary_skills=["Java"], location=blank).location is None

    def test_location_is_not_otherwise_normalized(self):
        """Non-blank locations are kept verbatim."""
        from talent_match.matching.models import AnySkillQuery

        assert AnySkillQuery(location=" Pune").location == " Pune"


class TestResultModels:
    """Test result dataclasses."""

    def test_match_result_rejects_negative_score(self, make_profile):
        """Scores are non-negative."""
        from talent_match.matching.models import MatchResult

        with pytest.raises(ValueError):
            MatchResult(profile=make_profile("p1"), score=-1, rank=1)

    def test_match_page_to_dict(self, make_profile):
        """MatchPage serializes data and pagination."""
        from talent_match.matching.models import MatchPage, MatchResult, Pagination

        page = MatchPage(
            results=[MatchResult(profile=make_profile("p1"), score=2, rank=1)],
            pagination=Pagination(
                current_page=1, total_pages=1, total_items=1, items_per_page=1
            ),
        )

        data = page.to_dict()

        assert data["data"][0]["profile"]["id"] == "p1"
        assert data["data"][0]["score"] == 2
        assert data["pagination"] == {
            "current_page": 1,
            "total_pages": 1,
            "total_items": 1,
            "items_per_page": 1,
        }
