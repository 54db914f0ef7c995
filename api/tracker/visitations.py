"""Visitation routes."""

from typing import List

from fastapi import APIRouter, HTTPException, Response

from db.models import Visitation, VisitationInput
from services.visitations.service import Service

router = APIRouter(prefix="/api/visitation", tags=["visitation"])

service = Service()


@router.get("", response_model=List[Visitation])
async def list_visitations():
    return await service.list_visitations()


@router.get("/customer/{customer_id}", response_model=List[Visitation])
async def visitations_for_customer(customer_id: int):
    return await service.for_customer(customer_id)


@router.get("/hotel/{hotel_id}", response_model=List[Visitation])
async def visitations_for_hotel(hotel_id: int):
    return await service.for_hotel(hotel_id)


@router.post("", response_model=Visitation, status_code=201)
async def create_visitation(body: VisitationInput):
    try:
        return await service.create_visitation(body)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{visitation_id}", response_model=Visitation)
async def get_visitation(visitation_id: int):
    visitation = await service.get_visitation(visitation_id)
    if not visitation:
        raise HTTPException(status_code=404, detail=f"Visitation with ID {visitation_id} not found")
    return visitation


@router.put("/{visitation_id}", response_model=Visitation)
async def update_visitation(visitation_id: int, body: VisitationInput):
    try:
        visitation = await service.update_visitation(visitation_id, body)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not visitation:
        raise HTTPException(status_code=404, detail=f"Visitation with ID {visitation_id} not found")
    return visitation


@router.delete("/{visitation_id}", status_code=204)
async def delete_visitation(visitation_id: int):
    if not await service.delete_visitation(visitation_id):
        raise HTTPException(status_code=404, detail=f"Visitation with ID {visitation_id} not found")
    return Response(status_code=204)
