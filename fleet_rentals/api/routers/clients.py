from fastapi import APIRouter, Depends, Response, status

from fleet_rentals.api.dependencies import get_use_cases
from fleet_rentals.api.deps import PageParams, get_page_params
from fleet_rentals.api.schemas.fleet import (
    ClientCreate,
    ClientPageResponse,
    ClientResponse,
    ClientUpdate,
)

router = APIRouter()


@router.post("/clients", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(payload: ClientCreate, use_cases=Depends(get_use_cases)) -> ClientResponse:
    created = await use_cases["clients"].create(payload.to_entity())
    return ClientResponse.model_validate(created)


@router.get("/clients", response_model=ClientPageResponse)
async def list_clients(
    params: PageParams = Depends(get_page_params),
    use_cases=Depends(get_use_cases),
) -> ClientPageResponse:
    items, total = await use_cases["clients"].list_page(page=params.page, limit=params.limit)
    return ClientPageResponse(
        items=[ClientResponse.model_validate(item) for item in items],
        total=total,
        page=params.page,
        limit=params.limit,
    )


@router.get("/clients/{client_id}", response_model=ClientResponse)
async def get_client(client_id: int, use_cases=Depends(get_use_cases)) -> ClientResponse:
    return ClientResponse.model_validate(await use_cases["clients"].get(client_id))


@router.patch("/clients/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: int,
    payload: ClientUpdate,
    use_cases=Depends(get_use_cases),
) -> ClientResponse:
    updated = await use_cases["clients"].update(client_id, payload.changes())
    return ClientResponse.model_validate(updated)


@router.delete("/clients/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(client_id: int, use_cases=Depends(get_use_cases)) -> Response:
    await use_cases["clients"].delete(client_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
