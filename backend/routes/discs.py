# backend/routes/discs.py
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from database import get_disc_repo
from models.disc import Disc, DiscFilter
from repositories.disc import DiscRepository
from utils.audit import client_ip, write_log
import schemas.disc as disc_schemas

router = APIRouter(prefix="/discs", tags=["Discs"])


def _out(discs: List[Disc]) -> List[disc_schemas.DiscResponse]:
    return [disc_schemas.DiscResponse.model_validate(d) for d in discs]


# Full inventory
@router.get("", response_model=List[disc_schemas.DiscResponse])
def get_discs(discs: DiscRepository = Depends(get_disc_repo)):
    return _out(discs.get_all())


# Discs whose type contains the given text
@router.get("/", response_model=List[disc_schemas.DiscResponse])
def search_discs(
    type: str = Query(..., description="Disc type to search for"),
    discs: DiscRepository = Depends(get_disc_repo),
):
    return _out(discs.find(type, DiscFilter.TYPE))


# Discs whose selected field contains the search text
@router.get("/filter", response_model=List[disc_schemas.DiscResponse])
def filter_discs(
    search: Optional[str] = Query(None),
    mode: DiscFilter = Query(DiscFilter.ALL, description="0 all, 1 type, 2 color, 3 weight, 4 price"),
    discs: DiscRepository = Depends(get_disc_repo),
):
    return _out(discs.find(search, mode))


@router.get("/{disc_id}", response_model=disc_schemas.DiscResponse)
def get_disc(disc_id: int, discs: DiscRepository = Depends(get_disc_repo)):
    disc = discs.get(disc_id)
    if disc is None:
        raise HTTPException(status_code=404, detail="Disc not found")
    return disc_schemas.DiscResponse.model_validate(disc)


@router.post("", response_model=disc_schemas.DiscResponse, status_code=status.HTTP_201_CREATED)
def create_disc(
    payload: disc_schemas.DiscCreate,
    request: Request,
    discs: DiscRepository = Depends(get_disc_repo),
):
    new_disc = discs.create(Disc(0, **payload.model_dump()))
    if new_disc is None:
        raise HTTPException(status_code=409, detail="Disc already exists")

    write_log(
        username=None,
        action="DISC_CREATE",
        resource="disc",
        ip=client_ip(request),
        meta={"disc_id": new_disc.id, "type": new_disc.type, "quantity": new_disc.quantity},
    )
    return disc_schemas.DiscResponse.model_validate(new_disc)


@router.put("", response_model=disc_schemas.DiscResponse)
def update_disc(
    payload: disc_schemas.DiscUpdate,
    request: Request,
    discs: DiscRepository = Depends(get_disc_repo),
):
    updated = discs.update(Disc(**payload.model_dump()))
    if updated is None:
        raise HTTPException(status_code=404, detail="Disc not found")

    write_log(
        username=None,
        action="DISC_UPDATE",
        resource="disc",
        ip=client_ip(request),
        meta={"disc_id": updated.id, "quantity": updated.quantity, "price": updated.price},
    )
    return disc_schemas.DiscResponse.model_validate(updated)


@router.delete("/{disc_id}")
def delete_disc(disc_id: int, request: Request, discs: DiscRepository = Depends(get_disc_repo)):
    if not discs.delete(disc_id):
        raise HTTPException(status_code=404, detail="Disc not found")

    write_log(username=None, action="DISC_DELETE", resource="disc", ip=client_ip(request),
              meta={"disc_id": disc_id})
    return Response(status_code=status.HTTP_200_OK)
