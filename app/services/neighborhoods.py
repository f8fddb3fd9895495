from sqlalchemy.orm import Session

from app.core.errors import NotFoundError
from app.models.neighborhood import Neighborhood
from app.schemas.neighborhood import NeighborhoodCreateRequest


def list_neighborhoods(db: Session) -> list[Neighborhood]:
    return db.query(Neighborhood).order_by(Neighborhood.id).all()


def require_neighborhood(db: Session, neighborhood_id: int) -> Neighborhood:
    neighborhood = db.get(Neighborhood, neighborhood_id)
    if not neighborhood:
        raise NotFoundError("Neighborhood not found")
    return neighborhood


def create_neighborhood(db: Session, data: NeighborhoodCreateRequest) -> Neighborhood:
    neighborhood = Neighborhood(
        name=data.name,
        city=data.city,
        description=data.description,
        image=data.image,
        property_count=0,
    )
    db.add(neighborhood)
    db.commit()
    db.refresh(neighborhood)
    return neighborhood
