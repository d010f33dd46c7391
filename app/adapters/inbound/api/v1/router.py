# app/adapters/inbound/api/v1/router.py

from fastapi import APIRouter
from app.adapters.inbound.api.v1.endpoints import client_endpoint

api_router = APIRouter()

# Incluir os routers dos endpoints
api_router.include_router(client_endpoint.router, prefix="/clientes", tags=["Clientes"])
