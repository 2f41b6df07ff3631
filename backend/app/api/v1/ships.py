"""Ships CRUD and listing API endpoints."""

from fastapi import APIRouter, Depends, Response, status

from app.api.deps import get_query_params, get_ship_service
from app.models.ship import Ship
from app.schemas.ship import ShipPayload, ShipResponse
from app.services.ship_service import ShipService

router = APIRouter(prefix="/ships", tags=["ships"])


@router.get("", response_model=list[ShipResponse])
async def list_ships(
    params: dict[str, str] = Depends(get_query_params),
    service: ShipService = Depends(get_ship_service),
) -> list[Ship]:
    """List ships with filters, optional ``order`` and ``pageNumber``/``pageSize``."""
    return await service.list_ships(params)


@router.get("/count")
async def count_ships(
    params: dict[str, str] = Depends(get_query_params),
    service: ShipService = Depends(get_ship_service),
) -> int:
    """Count ships matching the listing filters, ignoring order and paging."""
    return await service.count_ships(params)


@router.post("", response_model=ShipResponse)
async def create_ship(
    payload: ShipPayload,
    service: ShipService = Depends(get_ship_service),
) -> Ship:
    """Create a ship; ``used`` defaults to false and ``rating`` is derived."""
    return await service.create_ship(payload)


@router.get("/{ship_id}", response_model=ShipResponse)
async def get_ship(
    ship_id: str,
    service: ShipService = Depends(get_ship_service),
) -> Ship:
    """Get a single ship by ID."""
    return await service.get_ship(ship_id)


@router.post("/{ship_id}", response_model=ShipResponse)
async def update_ship(
    ship_id: str,
    payload: ShipPayload,
    service: ShipService = Depends(get_ship_service),
) -> Ship:
    """Apply the supplied fields to an existing ship."""
    return await service.update_ship(ship_id, payload)


@router.delete("/{ship_id}", status_code=status.HTTP_200_OK)
async def delete_ship(
    ship_id: str,
    service: ShipService = Depends(get_ship_service),
) -> Response:
    """Delete a ship."""
    await service.delete_ship(ship_id)
    return Response(status_code=status.HTTP_200_OK)
