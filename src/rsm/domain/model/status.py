"""OrderStatus: the service-order lifecycle.

Each member is immutable; a transition hands back another member and
never touches the one it was called on. Two kinds of transitions exist:

- automatic ones, fired by domain events (vehicle bound, items priced);
- manual ones, requested by shop staff through ``transition_to``.

Manual edges::

    received ──> in_diagnosis ──> awaiting_approval ──> in_execution ──> finished ──> delivered
                                         │                                                ^
                                         └──────────> canceled ──────────────────────────┘
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, TypeVar

from rsm.domain.exceptions import InvalidStatusError, InvalidTransitionError

T = TypeVar("T")


class OrderStatus(Enum):
    RECEIVED = "received"
    IN_DIAGNOSIS = "in_diagnosis"
    AWAITING_APPROVAL = "awaiting_approval"
    IN_EXECUTION = "in_execution"
    FINISHED = "finished"
    CANCELED = "canceled"
    DELIVERED = "delivered"

    # --- Factories ------------------------------------------------------------

    @classmethod
    def initial(cls) -> OrderStatus:
        return cls.RECEIVED

    @classmethod
    def reconstruct(cls, raw: object) -> OrderStatus:
        """Rebuild a status from its stored value.

        Only the lowercase canonical form is accepted; ``"RECEIVED"`` is
        rejected rather than normalized.
        """
        if isinstance(raw, OrderStatus):
            return raw
        if raw is None or raw == "":
            raise InvalidStatusError("Order status is required")
        try:
            return cls(raw)
        except ValueError as exc:
            raise InvalidStatusError(f"Invalid status: {raw}") from exc

    # --- Queries --------------------------------------------------------------

    @property
    def is_received(self) -> bool:
        return self is OrderStatus.RECEIVED

    @property
    def is_in_diagnosis(self) -> bool:
        return self is OrderStatus.IN_DIAGNOSIS

    @property
    def is_awaiting_approval(self) -> bool:
        return self is OrderStatus.AWAITING_APPROVAL

    @property
    def is_in_execution(self) -> bool:
        return self is OrderStatus.IN_EXECUTION

    @property
    def is_finished(self) -> bool:
        return self is OrderStatus.FINISHED

    @property
    def is_canceled(self) -> bool:
        return self is OrderStatus.CANCELED

    @property
    def is_delivered(self) -> bool:
        return self is OrderStatus.DELIVERED

    @property
    def is_in_progress(self) -> bool:
        return self in _IN_PROGRESS

    @property
    def is_concluded(self) -> bool:
        return self in _CONCLUDED

    @property
    def can_add_items(self) -> bool:
        return self is OrderStatus.IN_DIAGNOSIS

    @property
    def priority(self) -> int:
        """Lower sorts first; concluded orders share the last slot."""
        return _PRIORITY.get(self, _CONCLUDED_PRIORITY)

    @property
    def allowed_targets(self) -> frozenset[OrderStatus]:
        return _MANUAL_TRANSITIONS.get(self, frozenset())

    # --- Automatic transitions ------------------------------------------------

    def to_in_diagnosis_on_client_vehicle_added(self) -> OrderStatus:
        if not self.is_received:
            raise InvalidTransitionError(
                "Can only move to in_diagnosis when status is received "
                f"(current: {self.value})"
            )
        return OrderStatus.IN_DIAGNOSIS

    def to_awaiting_approval_on_items_added(self) -> OrderStatus:
        if not self.is_in_diagnosis:
            raise InvalidTransitionError(
                "Can only move to awaiting_approval when status is in_diagnosis "
                f"(current: {self.value})"
            )
        return OrderStatus.AWAITING_APPROVAL

    # --- Manual transitions ---------------------------------------------------

    def transition_to(self, target: OrderStatus | str) -> OrderStatus:
        target = OrderStatus.reconstruct(target)
        if target not in self.allowed_targets:
            raise InvalidTransitionError(
                f"Invalid transition from {self.value} to {target.value}"
            )
        return target

    # --- Sorting --------------------------------------------------------------

    @staticmethod
    def by_priority(entries: Iterable[T]) -> list[T]:
        """Sort anything carrying a ``status`` by lifecycle priority.

        ``sorted`` is stable, so entries with equal priority keep the
        order they came in.
        """
        return sorted(entries, key=lambda entry: entry.status.priority)  # type: ignore[attr-defined]

    def __str__(self) -> str:
        return self.value


_IN_PROGRESS = frozenset(
    {
        OrderStatus.RECEIVED,
        OrderStatus.IN_DIAGNOSIS,
        OrderStatus.AWAITING_APPROVAL,
        OrderStatus.IN_EXECUTION,
    }
)

_CONCLUDED = frozenset(
    {OrderStatus.FINISHED, OrderStatus.CANCELED, OrderStatus.DELIVERED}
)

_MANUAL_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.RECEIVED: frozenset({OrderStatus.IN_DIAGNOSIS}),
    OrderStatus.IN_DIAGNOSIS: frozenset({OrderStatus.AWAITING_APPROVAL}),
    OrderStatus.AWAITING_APPROVAL: frozenset(
        {OrderStatus.IN_EXECUTION, OrderStatus.CANCELED}
    ),
    OrderStatus.IN_EXECUTION: frozenset({OrderStatus.FINISHED}),
    OrderStatus.FINISHED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.CANCELED: frozenset({OrderStatus.DELIVERED}),
}

_CONCLUDED_PRIORITY = 999

_PRIORITY = {
    OrderStatus.IN_EXECUTION: 1,
    OrderStatus.AWAITING_APPROVAL: 2,
    OrderStatus.IN_DIAGNOSIS: 3,
    OrderStatus.RECEIVED: 4,
}
