from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import ConfigDict, Field

from src.service.partier.driving_adapter.schema.base_schema import CamelModel


class EventCreateRequest(CamelModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    image_url: str
    date: datetime
    location: str = Field(..., min_length=1)
    address: str
    organized_by_id: Optional[int] = None
    featured: bool = False
    tags: List[str] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'title': 'Neon Nights',
                'description': 'Deep house until sunrise',
                'imageUrl': 'https://example.com/neon.jpg',
                'date': '2025-06-21T22:00:00Z',
                'location': 'Warehouse 9',
                'address': '9 Dock Street',
                'featured': True,
                'tags': ['house', 'techno'],
            }
        }
    )


class EventUpdateRequest(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    date: Optional[datetime] = None
    location: Optional[str] = None
    address: Optional[str] = None
    organized_by_id: Optional[int] = None
    featured: Optional[bool] = None
    tags: Optional[List[str]] = None


class EventResponse(CamelModel):
    id: int
    title: str
    description: str
    image_url: str
    date: datetime
    location: str
    address: str
    organized_by_id: int
    featured: bool
    tags: List[str]


class TicketTypeCreateRequest(CamelModel):
    event_id: int
    name: str = Field(..., min_length=1)
    description: str = ''
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    available: int = Field(..., ge=0)

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'eventId': 1,
                'name': 'General Admission',
                'description': 'Entry before 1am',
                'price': '25.00',
                'available': 200,
            }
        }
    )


class TicketTypeUpdateRequest(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    available: Optional[int] = Field(None, ge=0)


class TicketTypeResponse(CamelModel):
    id: int
    event_id: int
    name: str
    description: str
    price: Decimal
    available: int


class PerformerCreateRequest(CamelModel):
    event_id: int
    name: str = Field(..., min_length=1)
    image_url: str = ''
    time: str = ''
    is_headliner: bool = False


class PerformerResponse(CamelModel):
    id: int
    event_id: int
    name: str
    image_url: str
    time: str
    is_headliner: bool
