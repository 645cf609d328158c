"""Order aggregate: the core of the domain.

A service order binds a client and a vehicle, accumulates a priced total
and walks the lifecycle defined by ``OrderStatus``. The order itself is
mutated in place; its status and execution period are immutable values
that get replaced, never edited.

Every public method validates first and only then assigns, so a raised
error never leaves a half-updated order behind.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from rsm.domain.exceptions import BusinessRuleError, ValidationError
from rsm.domain.model.status import OrderStatus
from rsm.domain.model.value_objects import Money, new_id


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ExecutionPeriod:
    """Start/end timestamps bracketing the in_execution phase."""

    started_at: datetime | None = None
    finished_at: datetime | None = None

    @property
    def is_started(self) -> bool:
        return self.started_at is not None

    @property
    def is_finished(self) -> bool:
        return self.finished_at is not None

    def start(self, at: datetime) -> ExecutionPeriod:
        if self.is_started:
            return self
        return ExecutionPeriod(started_at=at)

    def finish(self, at: datetime) -> ExecutionPeriod:
        if not self.is_started:
            raise BusinessRuleError("Execution must be started before it can be finished")
        if self.is_finished:
            return self
        return ExecutionPeriod(started_at=self.started_at, finished_at=at)

    @property
    def duration(self) -> timedelta | None:
        if self.started_at is None or self.finished_at is None:
            return None
        return self.finished_at - self.started_at


_REMOVABLE = frozenset(
    {
        OrderStatus.RECEIVED,
        OrderStatus.IN_DIAGNOSIS,
        OrderStatus.AWAITING_APPROVAL,
        OrderStatus.CANCELED,
    }
)


@dataclass(eq=False)
class Order:
    """Aggregate root for service orders.

    Use ``Order.create()`` for new orders. The constructor is what the
    repository uses to reconstitute persisted ones; it still refuses a
    vehicle without a client, since that invariant holds for stored data
    too.
    """

    id: str
    status: OrderStatus = OrderStatus.RECEIVED
    total: Money = field(default_factory=Money.zero)
    client_id: str | None = None
    vehicle_id: str | None = None
    execution: ExecutionPeriod = field(default_factory=ExecutionPeriod)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    def __post_init__(self) -> None:
        if not self.id:
            raise BusinessRuleError("Order id is required")
        _assert_vehicle_has_client(self.client_id, self.vehicle_id)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        client_id: str | None = None,
        vehicle_id: str | None = None,
    ) -> Order:
        """Open a new order. It always starts received with a zero total."""
        _assert_vehicle_has_client(client_id, vehicle_id)
        now = _now()
        return Order(
            id=new_id(),
            status=OrderStatus.initial(),
            total=Money.zero(),
            client_id=client_id,
            vehicle_id=vehicle_id,
            created_at=now,
            updated_at=now,
        )

    # --- Client and vehicle ---------------------------------------------------

    def set_client(self, client_id: str) -> None:
        if not client_id:
            raise ValidationError("Client id is required")
        self.client_id = client_id
        self._touch()

    def set_vehicle(self, vehicle_id: str) -> None:
        """Bind the vehicle; a received order moves into diagnosis."""
        if not vehicle_id:
            raise ValidationError("Vehicle id is required")
        if not self.has_client:
            raise BusinessRuleError("Cannot set a vehicle on an order without a client")
        self.vehicle_id = vehicle_id
        if self.status.is_received:
            self.status = self.status.to_in_diagnosis_on_client_vehicle_added()
        self._touch()

    # --- State transitions ----------------------------------------------------

    def update_status_manually(self, target: OrderStatus | str) -> None:
        """Move along a manual edge of the lifecycle.

        Entering in_execution starts the execution clock, entering
        finished stops it.
        """
        new_status = self.status.transition_to(target)
        execution = self.execution
        if new_status.is_in_execution:
            execution = execution.start(_now())
        elif new_status.is_finished:
            execution = execution.finish(_now())

        self.status = new_status
        self.execution = execution
        self._touch()

    def transition_to_awaiting_approval(self) -> None:
        """Advance to awaiting_approval if items may be added; otherwise do nothing."""
        if not self.status.can_add_items:
            return
        self.status = self.status.to_awaiting_approval_on_items_added()
        self._touch()

    def approve_budget(self) -> None:
        if not self.status.is_awaiting_approval:
            raise BusinessRuleError(
                "Budget can only be approved while awaiting approval "
                f"(current: {self.status.value})"
            )
        self.status = self.status.transition_to(OrderStatus.IN_EXECUTION)
        self.execution = self.execution.start(_now())
        self._touch()

    def reject_budget(self) -> None:
        if not self.status.is_awaiting_approval:
            raise BusinessRuleError(
                "Budget can only be rejected while awaiting approval "
                f"(current: {self.status.value})"
            )
        self.status = self.status.transition_to(OrderStatus.CANCELED)
        self._touch()

    # --- Execution period -----------------------------------------------------

    def start_execution(self) -> None:
        if not self.status.is_in_execution:
            raise BusinessRuleError(
                "Order must be in_execution to start execution "
                f"(current: {self.status.value})"
            )
        if self.execution.is_started:
            return
        self.execution = self.execution.start(_now())
        self._touch()

    def finish_execution(self) -> None:
        self.execution = self.execution.finish(_now())
        self._touch()

    def execution_duration(self) -> timedelta | None:
        return self.execution.duration

    # --- Total ----------------------------------------------------------------

    def update_total(self, value: Money | str | int | float | Decimal) -> None:
        """Replace the order total.

        A positive total on an order still in diagnosis means a budget
        exists, so the order moves to awaiting_approval.
        """
        total = value if isinstance(value, Money) else Money.of(value)
        self.total = total
        if not total.is_zero and self.status.can_add_items:
            self.status = self.status.to_awaiting_approval_on_items_added()
        self._touch()

    def ensure_accepts_items(self) -> None:
        if self.status.is_in_execution or self.status.is_concluded:
            raise BusinessRuleError(
                f"Cannot add items to an order in {self.status.value} status"
            )

    # --- Computed properties --------------------------------------------------

    @property
    def has_client(self) -> bool:
        return self.client_id is not None

    @property
    def has_vehicle(self) -> bool:
        return self.vehicle_id is not None

    @property
    def has_client_and_vehicle(self) -> bool:
        return self.has_client and self.has_vehicle

    @property
    def can_add_items(self) -> bool:
        return self.status.can_add_items

    @property
    def is_in_progress(self) -> bool:
        return self.status.is_in_progress

    @property
    def is_concluded(self) -> bool:
        return self.status.is_concluded

    @property
    def is_removable(self) -> bool:
        return self.status in _REMOVABLE

    # --- Identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    # --- Internal helpers -----------------------------------------------------

    def _touch(self) -> None:
        self.updated_at = max(_now(), self.updated_at)


def _assert_vehicle_has_client(client_id: str | None, vehicle_id: str | None) -> None:
    if vehicle_id is not None and client_id is None:
        raise BusinessRuleError("Cannot have a vehicle without a client")
