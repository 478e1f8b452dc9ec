from fastapi import APIRouter, Depends

from call_scheduler.api.v1.schemas import ClientSchema, CreateClientRequestSchema
from call_scheduler.application.ports.booking_store import BookingStorePort
from call_scheduler.wiring.dependencies import get_booking_store

router = APIRouter()


@router.get("/clients", response_model=list[ClientSchema])
def list_clients(store: BookingStorePort = Depends(get_booking_store)):
    return [ClientSchema(id=c.id, name=c.name, phone=c.phone) for c in store.list_clients()]


@router.post("/clients", response_model=ClientSchema, status_code=201)
def create_client(req: CreateClientRequestSchema, store: BookingStorePort = Depends(get_booking_store)):
    client_id = store.add_client(req.name, req.phone)
    return ClientSchema(id=client_id, name=req.name, phone=req.phone)
