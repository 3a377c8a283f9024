from fastapi import APIRouter, Depends, Response, status

from fleet_rentals.api.dependencies import get_use_cases
from fleet_rentals.api.deps import PageParams, get_page_params
from fleet_rentals.api.schemas.fleet import (
    CarCreate,
    CarPageResponse,
    CarResponse,
    CarUpdate,
)

router = APIRouter()


@router.post("/cars", response_model=CarResponse, status_code=status.HTTP_201_CREATED)
async def create_car(payload: CarCreate, use_cases=Depends(get_use_cases)) -> CarResponse:
    created = await use_cases["cars"].create(payload.to_entity())
    return CarResponse.model_validate(created)


@router.get("/cars", response_model=CarPageResponse)
async def list_cars(
    params: PageParams = Depends(get_page_params),
    use_cases=Depends(get_use_cases),
) -> CarPageResponse:
    items, total = await use_cases["cars"].list_page(page=params.page, limit=params.limit)
    return CarPageResponse(
        items=[CarResponse.model_validate(item) for item in items],
        total=total,
        page=params.page,
        limit=params.limit,
    )


@router.get("/cars/{car_id}", response_model=CarResponse)
async def get_car(car_id: int, use_cases=Depends(get_use_cases)) -> CarResponse:
    return CarResponse.model_validate(await use_cases["cars"].get(car_id))


@router.patch("/cars/{car_id}", response_model=CarResponse)
async def update_car(
    car_id: int,
    payload: CarUpdate,
    use_cases=Depends(get_use_cases),
) -> CarResponse:
    """Poner el vehículo en MAINTENANCE solo bloquea rentas nuevas; las existentes se conservan."""
    updated = await use_cases["cars"].update(car_id, payload.changes())
    return CarResponse.model_validate(updated)


@router.delete("/cars/{car_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_car(car_id: int, use_cases=Depends(get_use_cases)) -> Response:
    """Responde 409 si el vehículo todavía tiene rentas ACTIVE."""
    await use_cases["cars"].delete(car_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
