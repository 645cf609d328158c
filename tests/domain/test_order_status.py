"""Unit tests for the OrderStatus lifecycle."""

from itertools import product
from types import SimpleNamespace

import pytest

from rsm.domain.exceptions import (
    BusinessRuleError,
    InvalidStatusError,
    InvalidTransitionError,
)
from rsm.domain.model.status import OrderStatus as S

LEGAL_EDGES = {
    (S.RECEIVED, S.IN_DIAGNOSIS),
    (S.IN_DIAGNOSIS, S.AWAITING_APPROVAL),
    (S.AWAITING_APPROVAL, S.IN_EXECUTION),
    (S.AWAITING_APPROVAL, S.CANCELED),
    (S.IN_EXECUTION, S.FINISHED),
    (S.FINISHED, S.DELIVERED),
    (S.CANCELED, S.DELIVERED),
}


class TestReconstruct:

    def test_initial_is_received(self):
        assert S.initial() is S.RECEIVED
        assert S.initial().is_received

    @pytest.mark.parametrize("status", list(S))
    def test_round_trips_through_str(self, status):
        assert S.reconstruct(str(status)) is status

    @pytest.mark.parametrize("raw", ["", None])
    def test_missing_value_rejected(self, raw):
        with pytest.raises(InvalidStatusError, match="required"):
            S.reconstruct(raw)

    @pytest.mark.parametrize("raw", ["invalid", "RECEIVED", "Received", "in diagnosis"])
    def test_unknown_or_wrongly_cased_rejected(self, raw):
        with pytest.raises(InvalidStatusError, match=f"Invalid status: {raw}"):
            S.reconstruct(raw)


class TestQueries:

    def test_single_status_predicates(self):
        assert S.IN_DIAGNOSIS.is_in_diagnosis
        assert S.AWAITING_APPROVAL.is_awaiting_approval
        assert S.IN_EXECUTION.is_in_execution
        assert S.FINISHED.is_finished
        assert S.CANCELED.is_canceled
        assert S.DELIVERED.is_delivered
        assert not S.RECEIVED.is_delivered

    def test_in_progress_and_concluded_partition_the_statuses(self):
        in_progress = {s for s in S if s.is_in_progress}
        concluded = {s for s in S if s.is_concluded}
        assert in_progress == {S.RECEIVED, S.IN_DIAGNOSIS, S.AWAITING_APPROVAL, S.IN_EXECUTION}
        assert concluded == {S.FINISHED, S.CANCELED, S.DELIVERED}

    def test_only_diagnosis_accepts_items(self):
        assert [s for s in S if s.can_add_items] == [S.IN_DIAGNOSIS]


class TestAutomaticTransitions:

    def test_vehicle_added_moves_received_to_diagnosis(self):
        status = S.RECEIVED
        assert status.to_in_diagnosis_on_client_vehicle_added() is S.IN_DIAGNOSIS
        assert status is S.RECEIVED

    @pytest.mark.parametrize("status", [s for s in S if s is not S.RECEIVED])
    def test_vehicle_added_rejected_outside_received(self, status):
        with pytest.raises(InvalidTransitionError, match="when status is received"):
            status.to_in_diagnosis_on_client_vehicle_added()

    def test_items_added_moves_diagnosis_to_awaiting_approval(self):
        assert S.IN_DIAGNOSIS.to_awaiting_approval_on_items_added() is S.AWAITING_APPROVAL

    @pytest.mark.parametrize("status", [s for s in S if s is not S.IN_DIAGNOSIS])
    def test_items_added_rejected_outside_diagnosis(self, status):
        with pytest.raises(InvalidTransitionError, match="when status is in_diagnosis"):
            status.to_awaiting_approval_on_items_added()


class TestManualTransitions:

    @pytest.mark.parametrize("source,target", sorted(LEGAL_EDGES, key=str))
    def test_legal_edges(self, source, target):
        assert source.transition_to(target) is target

    def test_every_other_pair_is_rejected(self):
        for source, target in product(S, S):
            if (source, target) in LEGAL_EDGES:
                continue
            with pytest.raises(InvalidTransitionError) as exc_info:
                source.transition_to(target)
            assert source.value in str(exc_info.value)
            assert target.value in str(exc_info.value)

    def test_delivered_is_terminal(self):
        assert S.DELIVERED.allowed_targets == frozenset()

    def test_accepts_raw_target(self):
        assert S.RECEIVED.transition_to("in_diagnosis") is S.IN_DIAGNOSIS

    def test_raw_target_must_be_valid(self):
        with pytest.raises(InvalidStatusError):
            S.RECEIVED.transition_to("IN_DIAGNOSIS")

    def test_invalid_transition_is_a_business_rule_error(self):
        with pytest.raises(BusinessRuleError):
            S.RECEIVED.transition_to(S.FINISHED)


class TestPriority:

    def test_priority_values(self):
        assert S.IN_EXECUTION.priority == 1
        assert S.AWAITING_APPROVAL.priority == 2
        assert S.IN_DIAGNOSIS.priority == 3
        assert S.RECEIVED.priority == 4
        assert S.FINISHED.priority == S.CANCELED.priority == S.DELIVERED.priority == 999

    def test_by_priority_sorts_and_keeps_insertion_order_on_ties(self):
        entries = [
            SimpleNamespace(name="a", status=S.DELIVERED),
            SimpleNamespace(name="b", status=S.RECEIVED),
            SimpleNamespace(name="c", status=S.FINISHED),
            SimpleNamespace(name="d", status=S.IN_EXECUTION),
            SimpleNamespace(name="e", status=S.CANCELED),
            SimpleNamespace(name="f", status=S.AWAITING_APPROVAL),
        ]
        ordered = [e.name for e in S.by_priority(entries)]
        assert ordered == ["d", "f", "b", "a", "c", "e"]
