from fastapi import APIRouter, Depends, Response, status

from fleet_rentals.api.dependencies import get_use_cases
from fleet_rentals.api.deps import PageParams, get_page_params
from fleet_rentals.api.schemas.fleet import (
    EmployeeCreate,
    EmployeePageResponse,
    EmployeeResponse,
    EmployeeUpdate,
)

router = APIRouter()


@router.post("/employees", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(payload: EmployeeCreate, use_cases=Depends(get_use_cases)) -> EmployeeResponse:
    created = await use_cases["employees"].create(payload.to_entity())
    return EmployeeResponse.model_validate(created)


@router.get("/employees", response_model=EmployeePageResponse)
async def list_employees(
    params: PageParams = Depends(get_page_params),
    use_cases=Depends(get_use_cases),
) -> EmployeePageResponse:
    items, total = await use_cases["employees"].list_page(page=params.page, limit=params.limit)
    return EmployeePageResponse(
        items=[EmployeeResponse.model_validate(item) for item in items],
        total=total,
        page=params.page,
        limit=params.limit,
    )


@router.get("/employees/{employee_id}", response_model=EmployeeResponse)
async def get_employee(employee_id: int, use_cases=Depends(get_use_cases)) -> EmployeeResponse:
    return EmployeeResponse.model_validate(await use_cases["employees"].get(employee_id))


@router.patch("/employees/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: int,
    payload: EmployeeUpdate,
    use_cases=Depends(get_use_cases),
) -> EmployeeResponse:
    updated = await use_cases["employees"].update(employee_id, payload.changes())
    return EmployeeResponse.model_validate(updated)


@router.delete("/employees/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(employee_id: int, use_cases=Depends(get_use_cases)) -> Response:
    await use_cases["employees"].delete(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
