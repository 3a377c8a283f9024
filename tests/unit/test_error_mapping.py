import pytest

from fleet_rentals.api.errors import status_for
from fleet_rentals.domain.errors import (
    DuplicateValueError,
    InvalidIntervalError,
    InvalidTransitionError,
    NotFoundError,
    RecordInUseError,
    RentalConflictError,
    ResourceUnavailableError,
    StorageError,
    ValidationError,
)


@pytest.mark.parametrize(
    "error,status_code",
    [
        (InvalidIntervalError("bad dates"), 400),
        (ValidationError("total_cost", "must be zero or greater"), 400),
        (NotFoundError("car", 1), 404),
        (InvalidTransitionError("CANCELLED", "ACTIVE"), 409),
        (ResourceUnavailableError(1), 409),
        (RentalConflictError(1, [3]), 409),
        (DuplicateValueError("car", "license_plate"), 409),
        (RecordInUseError("car", 1, [4]), 409),
        (StorageError(), 503),
    ],
)
def test_status_for_each_domain_error(error, status_code):
    assert status_for(error) == status_code


def test_conflict_payload_lists_rental_ids():
    assert RentalConflictError(7, [2, 5]).to_dict() == {
        "detail": "Car 7 is already booked for the selected dates",
        "code": "RENTAL_CONFLICT",
        "car_id": 7,
        "conflicting_rental_ids": [2, 5],
    }
