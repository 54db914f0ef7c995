"""Hotel routes."""

from typing import List

from fastapi import APIRouter, HTTPException, Response

from db.models import Hotel, HotelInput
from services.hotels.service import Service

router = APIRouter(prefix="/api/hotel", tags=["hotel"])

service = Service()


@router.get("", response_model=List[Hotel])
async def list_hotels():
    return await service.list_hotels()


@router.post("", response_model=Hotel, status_code=201)
async def create_hotel(body: HotelInput):
    try:
        return await service.create_hotel(body)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{hotel_id}", response_model=Hotel)
async def get_hotel(hotel_id: int):
    hotel = await service.get_hotel(hotel_id)
    if not hotel:
        raise HTTPException(status_code=404, detail=f"Hotel with ID {hotel_id} not found")
    return hotel


@router.put("/{hotel_id}", response_model=Hotel)
async def update_hotel(hotel_id: int, body: HotelInput):
    try:
        hotel = await service.update_hotel(hotel_id, body)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not hotel:
        raise HTTPException(status_code=404, detail=f"Hotel with ID {hotel_id} not found")
    return hotel


@router.delete("/{hotel_id}", status_code=204)
async def delete_hotel(hotel_id: int):
    try:
        deleted = await service.delete_hotel(hotel_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail=f"Hotel with ID {hotel_id} not found")
    return Response(status_code=204)
