from fastapi import APIRouter

from appointment_scheduling.api.routes import appointments

api_router = APIRouter()

api_router.include_router(appointments.router)
