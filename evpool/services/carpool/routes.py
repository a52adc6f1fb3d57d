from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from evpool.services.carpool.dependencies import get_carpool_service
from evpool.services.carpool.exceptions import GroupNotFound, InvalidPayload
from evpool.services.carpool.service import CarPoolService
from evpool.shared.models.fleet_dto import GroupDTO, GroupIdRequest, VehicleDTO

router = APIRouter(tags=["CarPool"])


def invalid_payload_response() -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Invalid payload"})


@router.get("/status")
async def get_status():
    return {"status": "ready"}


@router.put("/evs")
async def register_evs(
    vehicles: list[VehicleDTO],
    service: CarPoolService = Depends(get_carpool_service),
):
    try:
        await service.register_fleet(vehicles)
    except InvalidPayload:
        return invalid_payload_response()
    return {"message": "EVs registered successfully"}


@router.post("/journey")
async def request_journey(
    group: GroupDTO,
    service: CarPoolService = Depends(get_carpool_service),
):
    try:
        result = await service.request_journey(group)
    except InvalidPayload:
        return invalid_payload_response()

    if result.assigned:
        return {"message": "Journey started", "car_id": result.vehicle_id}
    return JSONResponse(
        status_code=status.HTTP_202_ACCEPTED,
        content={"message": "Added to waitlist"},
    )


@router.post("/dropoff")
async def drop_off(
    request: GroupIdRequest,
    service: CarPoolService = Depends(get_carpool_service),
):
    try:
        await service.drop_off(request)
    except GroupNotFound:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "Group not found"},
        )
    return {"message": "Group dropped off"}


@router.post("/locate")
async def locate(
    request: GroupIdRequest,
    service: CarPoolService = Depends(get_carpool_service),
):
    vehicle_id = await service.locate_group(request)
    if vehicle_id is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return {"car_id": vehicle_id}
