"""
Unit Tests for Entity Schemas
Tests for: field rules, cross-field rules, camelCase field names
"""
import pytest
from datetime import datetime, timedelta, timezone

from me_portal.core.exceptions import SchemaValidationError
from me_portal.models import AgeGroup, DisaggregatedSex, ProgressStatus
from me_portal.schemas import (
    LivelihoodCreate,
    ProjectCreate,
    StrategicObjectiveCreate,
    TeamCreate,
    WorkshopCreate,
    validate_form,
)


def objective_form(**overrides):
    form = {
        "name": "Improve food security",
        "outcome": "Households have reliable food access",
        "kpi": "Households reached",
        "targetValue": "100",
        "actualValue": "40",
        "status": "ON_TRACK",
        "teamId": "1",
        "lastUpdated": "2024-01-15",
    }
    form.update(overrides)
    return form


def project_form(**overrides):
    form = {
        "name": "Seed distribution",
        "objective": "Distribute drought-resistant seed",
        "strategicObjectiveId": "1",
        "outcome": "Farmers plant resilient crops",
        "activity": "Distribution days",
        "kpi": "Farmers supplied",
        "targetValue": "500",
        "actualValue": "125",
        "status": "AT_RISK",
        "responsibleTeamId": "2",
        "timeline": "Q1-Q2 2024",
        "lastUpdated": "2024-03-01T10:30:00",
    }
    form.update(overrides)
    return form


def livelihood_form(**overrides):
    form = {
        "projectId": "3",
        "participantName": "Amina Yusuf",
        "location": "Garissa",
        "disaggregatedSex": "FEMALE",
        "disability": "false",
        "ageGroup": "GROUP_30_44",
        "grantAmountReceived": "250.50",
        "purpose": "Poultry",
        "progress1": "Bought 20 chicks",
        "progress2": "Selling eggs weekly",
        "outcome": "Steady income",
        "subsequentGrantAmount": "0",
    }
    form.update(overrides)
    return form


def workshop_form(**overrides):
    form = {
        "projectId": "3",
        "numParticipants": "25",
        "disaggregatedSex": "MALE",
        "disability": "true",
        "ageGroup": "GROUP_18_29",
        "preEvaluation": "Low awareness",
        "postEvaluation": "Good awareness",
        "localPartner": "Community Health Network",
        "localPartnerResponsibility": "Venue and mobilisation",
        "successOfPartnership": "Strong",
        "challenges": "Transport",
        "strengths": "Local trust",
        "outcomes": "Two follow-up groups formed",
        "recommendations": "Repeat in the dry season",
    }
    form.update(overrides)
    return form


def error_paths(exc_info):
    return [error["path"] for error in exc_info.value.errors]


class TestTeamCreate:
    """Test TeamCreate schema"""

    def test_valid_team(self):
        team = validate_form(TeamCreate, {"name": "Ops"})
        assert team.name == "Ops"

    def test_name_is_trimmed(self):
        team = validate_form(TeamCreate, {"name": "  Field Ops  "})
        assert team.name == "Field Ops"

    def test_missing_name(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_form(TeamCreate, {})

        assert exc_info.value.errors == [{"path": ["name"], "message": "Team name is required"}]

    def test_blank_name_counts_as_missing(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_form(TeamCreate, {"name": "   "})

        assert exc_info.value.errors[0]["message"] == "Team name is required"

    def test_name_too_long(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_form(TeamCreate, {"name": "x" * 101})

        assert exc_info.value.errors == [
            {"path": ["name"], "message": "Team name must be 100 characters or less"}
        ]

    def test_name_at_limit(self):
        assert validate_form(TeamCreate, {"name": "x" * 100}).name == "x" * 100


class TestStrategicObjectiveCreate:
    """Test StrategicObjectiveCreate schema"""

    def test_valid_objective(self):
        objective = validate_form(StrategicObjectiveCreate, objective_form())

        assert objective.name == "Improve food security"
        assert objective.target_value == 100.0
        assert objective.actual_value == 40.0
        assert objective.status == ProgressStatus.ON_TRACK
        assert objective.team_id == 1
        assert objective.last_updated.date().isoformat() == "2024-01-15"

    def test_dump_uses_model_column_names(self):
        objective = validate_form(StrategicObjectiveCreate, objective_form())
        data = objective.model_dump()

        assert set(data) == {
            "name", "outcome", "kpi", "target_value", "actual_value",
            "status", "team_id", "last_updated",
        }

    def test_actual_greater_than_target_gives_one_error(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_form(StrategicObjectiveCreate, objective_form(targetValue="100", actualValue="150"))

        assert exc_info.value.errors == [
            {"path": ["actualValue"], "message": "Actual value cannot be greater than target value"}
        ]

    def test_actual_equal_to_target_is_accepted(self):
        objective = validate_form(StrategicObjectiveCreate, objective_form(targetValue="80", actualValue="80"))
        assert objective.actual_value == objective.target_value

    def test_invalid_status(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_form(StrategicObjectiveCreate, objective_form(status="FINISHED"))

        assert error_paths(exc_info) == [["status"]]
        assert "Status must be one of" in exc_info.value.errors[0]["message"]

    @pytest.mark.parametrize("value", ["0", "-5"])
    def test_target_must_be_positive(self, value):
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_form(StrategicObjectiveCreate, objective_form(targetValue=value, actualValue="0"))

        assert exc_info.value.errors == [
            {"path": ["targetValue"], "message": "Target value must be a positive number"}
        ]

    def test_actual_must_be_non_negative(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_form(StrategicObjectiveCreate, objective_form(actualValue="-1"))

        assert exc_info.value.errors == [
            {"path": ["actualValue"], "message": "Actual value must be non-negative"}
        ]

    @pytest.mark.parametrize("value", ["abc", "inf", "nan"])
    def test_target_must_be_a_finite_number(self, value):
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_form(StrategicObjectiveCreate, objective_form(targetValue=value))

        assert error_paths(exc_info) == [["targetValue"]]

    def test_team_must_be_positive_whole_number(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_form(StrategicObjectiveCreate, objective_form(teamId="1.5"))

        assert exc_info.value.errors == [{"path": ["teamId"], "message": "Team must be a whole number"}]

    def test_unparseable_date(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_form(StrategicObjectiveCreate, objective_form(lastUpdated="not a date"))

        assert exc_info.value.errors == [
            {"path": ["lastUpdated"], "message": "Last updated must be a valid date"}
        ]

    def test_current_instant_is_accepted(self):
        now = datetime.now(timezone.utc).isoformat()
        objective = validate_form(StrategicObjectiveCreate, objective_form(lastUpdated=now))
        assert objective.last_updated <= datetime.now(timezone.utc)

    def test_one_second_in_future_is_rejected(self):
        future = (datetime.now(timezone.utc) + timedelta(seconds=1)).isoformat()

        with pytest.raises(SchemaValidationError) as exc_info:
            validate_form(StrategicObjectiveCreate, objective_form(lastUpdated=future))

        assert exc_info.value.errors == [
            {"path": ["lastUpdated"], "message": "Last updated date cannot be in the future"}
        ]

    def test_errors_follow_field_order(self):
        form = objective_form(name="", kpi="", status="NOPE")
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_form(StrategicObjectiveCreate, form)

        assert error_paths(exc_info) == [["name"], ["kpi"], ["status"]]

    def test_cross_field_rule_reports_alongside_field_errors(self):
        form = objective_form(name="", targetValue="100", actualValue="150")
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_form(StrategicObjectiveCreate, form)

        assert error_paths(exc_info) == [["name"], ["actualValue"]]

    def test_cross_field_error_comes_after_field_errors(self):
        form = objective_form(name="", targetValue="100", actualValue="150", status="NOPE")
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_form(StrategicObjectiveCreate, form)

        assert error_paths(exc_info) == [["name"], ["status"], ["actualValue"]]
        assert exc_info.value.errors[-1]["message"] == "Actual value cannot be greater than target value"

    def test_cross_field_rule_skipped_when_target_invalid(self):
        form = objective_form(targetValue="abc", actualValue="150")
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_form(StrategicObjectiveCreate, form)

        assert error_paths(exc_info) == [["targetValue"]]

    @pytest.mark.parametrize("value", ["1_000", "٣", "0x10"])
    def test_target_rejects_non_decimal_spellings(self, value):
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_form(StrategicObjectiveCreate, objective_form(targetValue=value, actualValue="0"))

        assert exc_info.value.errors == [
            {"path": ["targetValue"], "message": "Target value must be a number"}
        ]

    def test_team_id_rejects_underscored_digits(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_form(StrategicObjectiveCreate, objective_form(teamId="1_0"))

        assert exc_info.value.errors == [{"path": ["teamId"], "message": "Team must be a whole number"}]


class TestProjectCreate:
    """Test ProjectCreate schema"""

    def test_valid_project(self):
        project = validate_form(ProjectCreate, project_form())

        assert project.strategic_objective_id == 1
        assert project.responsible_team_id == 2
        assert project.status == ProgressStatus.AT_RISK
        assert project.timeline == "Q1-Q2 2024"

    def test_actual_greater_than_target(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_form(ProjectCreate, project_form(targetValue="10", actualValue="11"))

        assert error_paths(exc_info) == [["actualValue"]]

    def test_all_missing(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_form(ProjectCreate, {})

        assert len(exc_info.value.errors) == 12
        assert exc_info.value.errors[0] == {"path": ["name"], "message": "Project name is required"}
        assert {"path": ["strategicObjectiveId"], "message": "Strategic objective is required"} in exc_info.value.errors


class TestLivelihoodCreate:
    """Test LivelihoodCreate schema"""

    def test_valid_livelihood(self):
        record = validate_form(LivelihoodCreate, livelihood_form())

        assert record.project_id == 3
        assert record.disaggregated_sex == DisaggregatedSex.FEMALE
        assert record.disability is False
        assert record.age_group == AgeGroup.GROUP_30_44
        assert record.grant_amount_received == 250.5
        assert record.subsequent_grant_amount == 0

    @pytest.mark.parametrize("raw,expected", [("on", True), ("true", True), ("off", False), ("0", False)])
    def test_disability_checkbox_values(self, raw, expected):
        assert validate_form(LivelihoodCreate, livelihood_form(disability=raw)).disability is expected

    def test_unknown_age_group(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_form(LivelihoodCreate, livelihood_form(ageGroup="18-29"))

        assert error_paths(exc_info) == [["ageGroup"]]

    def test_grant_must_be_positive(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_form(LivelihoodCreate, livelihood_form(grantAmountReceived="0"))

        assert exc_info.value.errors == [
            {"path": ["grantAmountReceived"], "message": "Grant amount must be a positive number"}
        ]


class TestWorkshopCreate:
    """Test WorkshopCreate schema"""

    def test_valid_workshop(self):
        workshop = validate_form(WorkshopCreate, workshop_form())

        assert workshop.num_participants == 25
        assert workshop.disability is True
        assert workshop.local_partner == "Community Health Network"

    def test_participants_must_be_whole_number(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_form(WorkshopCreate, workshop_form(numParticipants="2.5"))

        assert exc_info.value.errors == [
            {"path": ["numParticipants"], "message": "Number of participants must be a whole number"}
        ]

    def test_missing_text_field(self):
        form = workshop_form()
        del form["recommendations"]

        with pytest.raises(SchemaValidationError) as exc_info:
            validate_form(WorkshopCreate, form)

        assert exc_info.value.errors == [
            {"path": ["recommendations"], "message": "Recommendations is required"}
        ]
