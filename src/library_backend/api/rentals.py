"""Rental endpoints. Mutations are attributed to the calling principal."""

from fastapi import APIRouter, Depends, Query, status

from library_backend.api.dependencies import get_container, require_principal
from library_backend.api.schemas import (
    RentalComplete,
    RentalCreate,
    serialize_audit_record,
    serialize_rental,
)
from library_backend.containers import AppContainer

router = APIRouter(prefix="/rentals", tags=["rentals"])


@router.get("")
async def list_rentals(
    reader_id: int | None = Query(default=None),
    container: AppContainer = Depends(get_container),
    _principal: str = Depends(require_principal),
) -> dict[str, object]:
    """Return rentals, optionally filtered by reader."""
    rentals = container.rental_service.list_rentals(reader_id)
    return {"rentals": [serialize_rental(rental) for rental in rentals]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_rental(
    payload: RentalCreate,
    container: AppContainer = Depends(get_container),
    principal: str = Depends(require_principal),
) -> dict[str, object]:
    """Rent a copy to a reader."""
    rental = container.rental_service.create_rental(
        payload.copy_id,
        payload.reader_id,
        actor=principal,
        rented_from=payload.rented_from,
    )
    return serialize_rental(rental)


@router.get("/{rental_id}")
async def get_rental(
    rental_id: int,
    container: AppContainer = Depends(get_container),
    _principal: str = Depends(require_principal),
) -> dict[str, object]:
    return serialize_rental(container.rental_service.get_rental(rental_id))


@router.patch("/{rental_id}/complete")
async def complete_rental(
    rental_id: int,
    payload: RentalComplete | None = None,
    container: AppContainer = Depends(get_container),
    principal: str = Depends(require_principal),
) -> dict[str, object]:
    """Mark a rental as returned, today unless a return date is given."""
    rental = container.rental_service.return_rental(
        rental_id,
        actor=principal,
        returned_on=payload.returned_on if payload else None,
    )
    return serialize_rental(rental)


@router.delete("/{rental_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_rental(
    rental_id: int,
    container: AppContainer = Depends(get_container),
    principal: str = Depends(require_principal),
) -> None:
    container.rental_service.delete_rental(rental_id, actor=principal)


@router.get("/{rental_id}/audit")
async def rental_audit_trail(
    rental_id: int,
    container: AppContainer = Depends(get_container),
    _principal: str = Depends(require_principal),
) -> dict[str, object]:
    """Return the audit trail of a rental, including deleted ones."""
    records = container.rental_service.audit_trail(rental_id)
    return {"records": [serialize_audit_record(record) for record in records]}
