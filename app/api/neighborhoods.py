from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import IdPath, get_current_user
from app.api.serializers import neighborhood_out
from app.db.session import get_db
from app.schemas.neighborhood import NeighborhoodCreateRequest
from app.services import neighborhoods

router = APIRouter(prefix="/api/neighborhoods", tags=["Neighborhoods"])


@router.get("")
def list_neighborhoods(db: Session = Depends(get_db)):
    return [neighborhood_out(n) for n in neighborhoods.list_neighborhoods(db)]


@router.get("/{neighborhood_id}")
def get_neighborhood(neighborhood_id: IdPath, db: Session = Depends(get_db)):
    return neighborhood_out(neighborhoods.require_neighborhood(db, neighborhood_id))


@router.post("", status_code=201)
def create_neighborhood(
    data: NeighborhoodCreateRequest,
    db: Session = Depends(get_db),
    user=Depends(get_current_user),
):
    return neighborhood_out(neighborhoods.create_neighborhood(db, data))
