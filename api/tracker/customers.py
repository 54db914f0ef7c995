"""Customer routes, including the customer-facing loyalty analytics view."""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Response

from db.models import Customer, CustomerInput, LoyaltyAnalytics
from services.customers import repo as customer_repo
from services.customers.service import Service as CustomerService
from services.loyalty.service import Service as LoyaltyService

router = APIRouter(prefix="/api/customer", tags=["customer"])

customers = CustomerService()
loyalty = LoyaltyService()

ENDPOINTS = [
    "GET /api/customer/welcome - This endpoint",
    "GET /api/customer - Get all customers",
    "GET /api/customer/{id} - Get customer by ID",
    "POST /api/customer - Add new customer",
    "PUT /api/customer/{id} - Update customer",
    "DELETE /api/customer/{id} - Delete customer",
    "GET /api/customer/loyal - Find loyal customers at date (simple)",
    "GET /api/customer/loyalty-analytics - Advanced loyalty analytics by month/year",
    "POST /api/customer/register - Register customer at date",
    "GET /api/hotel - Get all hotels",
    "GET /api/hotel/{id} - Get hotel by ID",
    "POST /api/hotel - Add new hotel",
    "PUT /api/hotel/{id} - Update hotel",
    "DELETE /api/hotel/{id} - Delete hotel",
    "GET /api/visitation - Get all visitations",
    "GET /api/visitation/{id} - Get visitation by ID",
    "GET /api/visitation/customer/{id} - Get visitations by customer",
    "GET /api/visitation/hotel/{id} - Get visitations by hotel",
    "POST /api/visitation - Add new visitation",
    "PUT /api/visitation/{id} - Update visitation",
    "DELETE /api/visitation/{id} - Delete visitation",
    "GET /api/loyalty/monthly - Monthly loyalty analysis",
    "GET /api/loyalty/all - All loyal customers across all months",
]


# ---------------------------------------------------------------------------
# Static paths (must come before /{customer_id})
# ---------------------------------------------------------------------------


@router.get("/welcome")
async def welcome():
    return {
        "message": "Welcome to the Hotel Visit Tracker API!",
        "version": "1.0.0",
        "dataSource": "JSON files in the data folder",
        "dataStatus": await customer_repo.count_all(),
        "endpoints": ENDPOINTS,
    }


@router.get("/loyal", response_model=List[Customer])
async def loyal_customers(date: Optional[datetime] = None):
    return await customers.loyal_by_purchases(date)


@router.get("/loyalty-analytics", response_model=LoyaltyAnalytics)
async def loyalty_analytics(month: Optional[int] = None, year: Optional[int] = None):
    try:
        return await loyalty.analytics(month, year)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/register", response_model=Customer, status_code=201)
async def register_customer(body: CustomerInput):
    try:
        return await customers.register_customer(body)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# ---------------------------------------------------------------------------
# CRUD
# ---------------------------------------------------------------------------


@router.get("", response_model=List[Customer])
async def list_customers():
    return await customers.list_customers()


@router.post("", response_model=Customer, status_code=201)
async def create_customer(body: CustomerInput):
    try:
        return await customers.create_customer(body)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{customer_id}", response_model=Customer)
async def get_customer(customer_id: int):
    customer = await customers.get_customer(customer_id)
    if not customer:
        raise HTTPException(status_code=404, detail=f"Customer with ID {customer_id} not found")
    return customer


@router.put("/{customer_id}", response_model=Customer)
async def update_customer(customer_id: int, body: CustomerInput):
    try:
        customer = await customers.update_customer(customer_id, body)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not customer:
        raise HTTPException(status_code=404, detail=f"Customer with ID {customer_id} not found")
    return customer


@router.delete("/{customer_id}", status_code=204)
async def delete_customer(customer_id: int):
    if not await customers.delete_customer(customer_id):
        raise HTTPException(status_code=404, detail=f"Customer with ID {customer_id} not found")
    return Response(status_code=204)
