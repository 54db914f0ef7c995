from db.models.customer import Customer, CustomerInput
from db.models.hotel import Hotel, HotelInput
from db.models.visitation import Visitation, VisitationInput
from db.models.loyalty import LoyaltyPattern, LoyaltyReport, LoyaltyAnalytics

__all__ = [
    "Customer",
    "CustomerInput",
    "Hotel",
    "HotelInput",
    "Visitation",
    "VisitationInput",
    "LoyaltyPattern",
    "LoyaltyReport",
    "LoyaltyAnalytics",
]
