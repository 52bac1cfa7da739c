"""Tests for the process use cases."""

import pytest

from contracts import Activity, CreateEstimateInput, ProcessCategory, TaskInput
from errors import ActivityNotFoundError, NotFoundError


class TestReads:

    def test_get_process(self, process_service):
        assert process_service.get_process("req").name == "Requirement Definition"

    def test_by_category(self, process_service):
        process = process_service.get_process_by_category(ProcessCategory.REQUIREMENT_DEFINITION)
        assert process.id == "req"

    def test_by_category_accepts_value(self, process_service):
        assert process_service.get_process_by_category("implementation").id == "dev"

    def test_unknown_category(self, process_service):
        with pytest.raises(NotFoundError):
            process_service.get_process_by_category(ProcessCategory.TESTING)

    def test_list_in_order(self, process_service):
        assert [p.id for p in process_service.list_processes()] == ["req", "dev"]


class TestUpdates:

    def test_update_process(self, process_service):
        process = process_service.get_process("dev")
        updated = process_service.update_process(
            process.model_copy(update={"description": "Coding and unit tests"})
        )

        assert updated.description == "Coding and unit tests"
        assert process_service.get_process("dev").description == "Coding and unit tests"

    def test_update_unknown_process(self, process_service):
        process = process_service.get_process("dev").model_copy(update={"id": "ops"})
        with pytest.raises(NotFoundError):
            process_service.update_process(process)

    def test_update_activity(self, process_service):
        updated = process_service.update_activity(
            "req", Activity(id="reqdoc", name="Requirements document", base_hours=32.0)
        )

        assert updated.find_activity("reqdoc").base_hours == 32.0
        assert updated.find_activity("interview").base_hours == 10.0
        assert [a.id for a in updated.activities] == ["interview", "reqdoc"]
        assert process_service.get_process("req") == updated

    def test_update_unknown_activity(self, process_service):
        before = process_service.get_process("req")
        with pytest.raises(ActivityNotFoundError) as exc_info:
            process_service.update_activity("req", Activity(id="workshop", name="Workshop", base_hours=8.0))

        assert exc_info.value.process_id == "req"
        assert process_service.get_process("req") == before

    def test_update_activity_unknown_process(self, process_service):
        with pytest.raises(NotFoundError):
            process_service.update_activity("ops", Activity(id="code", name="Coding", base_hours=1.0))

    def test_activity_change_reaches_recalculated_estimate(self, process_service, estimate_service):
        estimate = estimate_service.create_estimate(CreateEstimateInput(
            project_id="proj-1",
            project_name="Billing rewrite",
            tasks=[TaskInput(process_id="dev", activity_id="code", name="Build", complexity=1)],
        ))
        assert estimate.total_hours == pytest.approx(40.0)

        process_service.update_activity("dev", Activity(id="code", name="Coding", base_hours=60.0))

        assert estimate_service.recalculate(estimate.id).total_hours == pytest.approx(60.0)
