"""Location routes."""
from fastapi import APIRouter, Depends
from sqlmodel import Session

from roster.core.database import get_session
from roster.ledger import aggregation
from roster.ledger.store import EntityStore
from roster.models import Location, LocationCreate, LocationRead, LocationWithTeams

router = APIRouter(prefix="/locations", tags=["locations"])


@router.get("", response_model=list[LocationWithTeams])
async def list_locations(session: Session = Depends(get_session)):
    """List active locations, each with its active teams."""
    return aggregation.locations_with_teams(session)


@router.get("/{location_id}", response_model=LocationWithTeams)
async def get_location(location_id: int, session: Session = Depends(get_session)):
    """Get one location with its active teams. Returns 404 if it is not active."""
    return aggregation.location_with_teams(session, location_id)


@router.post("", response_model=LocationRead)
async def create_location(data: LocationCreate, session: Session = Depends(get_session)):
    """
    Create a location.

    Capacity is stored as given and never enforced when teams are added.
    """
    return EntityStore(session).create(Location.model_validate(data))


@router.put("/{location_id}", response_model=LocationRead)
async def update_location(
    location_id: int, data: LocationCreate, session: Session = Depends(get_session)
):
    """Replace every field of an active location."""
    return EntityStore(session).update(Location, location_id, data)


@router.delete("/{location_id}", response_model=LocationRead | None)
async def delete_location(location_id: int, session: Session = Depends(get_session)):
    """
    Soft-delete a location.

    Teams hosted there are left untouched and will show a null location.
    Deleting twice, or deleting an unknown id, is not an error.
    """
    return EntityStore(session).delete(Location, location_id)
