from fastapi import APIRouter, Depends, Response, status

from fleet_rentals.api.dependencies import get_use_cases
from fleet_rentals.api.deps import PageParams, get_page_params
from fleet_rentals.api.schemas.rentals import (
    CreateRentalRequest,
    RentalPageResponse,
    RentalResponse,
    UpdateRentalRequest,
)

router = APIRouter()


@router.post(
    "/rentals",
    response_model=RentalResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_rental(
    payload: CreateRentalRequest,
    use_cases=Depends(get_use_cases),
) -> RentalResponse:
    rental = await use_cases["reserve"].reserve(payload.to_command())
    return RentalResponse.from_entity(rental)


@router.get("/rentals", response_model=RentalPageResponse)
async def list_rentals(
    params: PageParams = Depends(get_page_params),
    use_cases=Depends(get_use_cases),
) -> RentalPageResponse:
    items, total = await use_cases["rentals"].list_page(page=params.page, limit=params.limit)
    return RentalPageResponse(
        items=[RentalResponse.from_entity(r) for r in items],
        total=total,
        page=params.page,
        limit=params.limit,
    )


@router.get("/rentals/{rental_id}", response_model=RentalResponse)
async def get_rental(rental_id: int, use_cases=Depends(get_use_cases)) -> RentalResponse:
    return RentalResponse.from_entity(await use_cases["rentals"].get(rental_id))


@router.patch("/rentals/{rental_id}", response_model=RentalResponse)
async def update_rental(
    rental_id: int,
    payload: UpdateRentalRequest,
    use_cases=Depends(get_use_cases),
) -> RentalResponse:
    rental = await use_cases["reserve"].amend(rental_id, payload.to_command())
    return RentalResponse.from_entity(rental)


@router.delete("/rentals/{rental_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_rental(rental_id: int, use_cases=Depends(get_use_cases)) -> Response:
    await use_cases["rentals"].delete(rental_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
