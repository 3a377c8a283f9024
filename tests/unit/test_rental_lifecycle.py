from datetime import date

import pytest

from fleet_rentals.domain.entities.rental import Rental, RentalStatus, ensure_transition
from fleet_rentals.domain.errors import InvalidTransitionError


def make_rental(status: RentalStatus = RentalStatus.ACTIVE) -> Rental:
    return Rental(
        car_id=1,
        client_id=1,
        employee_id=1,
        start_date=date(2024, 6, 1),
        end_date=date(2024, 6, 5),
        status=status,
    )


@pytest.mark.parametrize("target", [RentalStatus.COMPLETED, RentalStatus.CANCELLED])
def test_active_rental_can_be_closed(target):
    rental = make_rental()

    rental.transition_to(target)

    assert rental.status is target
    assert rental.lock_version == 1
    assert not rental.is_active


@pytest.mark.parametrize("terminal", [RentalStatus.COMPLETED, RentalStatus.CANCELLED])
@pytest.mark.parametrize("target", list(RentalStatus))
def test_terminal_states_are_final(terminal, target):
    if target is terminal:
        ensure_transition(terminal, target)
        return

    with pytest.raises(InvalidTransitionError) as exc_info:
        ensure_transition(terminal, target)

    assert exc_info.value.current_status == terminal.value
    assert exc_info.value.target_status == target.value


def test_requesting_current_status_is_noop():
    rental = make_rental()

    rental.transition_to(RentalStatus.ACTIVE)

    assert rental.status is RentalStatus.ACTIVE
    assert rental.lock_version == 0


def test_cancel_and_complete_shortcuts():
    cancelled = make_rental()
    cancelled.cancel()
    completed = make_rental()
    completed.complete()

    assert cancelled.status is RentalStatus.CANCELLED
    assert completed.status is RentalStatus.COMPLETED
    with pytest.raises(InvalidTransitionError):
        cancelled.complete()


def test_only_active_status_blocks_the_car():
    assert RentalStatus.ACTIVE.is_conflict_relevant
    assert not RentalStatus.COMPLETED.is_conflict_relevant
    assert not RentalStatus.CANCELLED.is_conflict_relevant
