"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    message: str
    records: int
    headers: int
    schema_version: str


class ContactLink(BaseModel):
    kind: str  # "email" | "linkedin"
    href: str
    title: str


class InfoItem(BaseModel):
    icon: str
    label: str
    value: str


class PersonCard(BaseModel):
    name: str
    initials: str
    photo: Optional[str] = None
    contacts: list[ContactLink]
    columns: list[list[InfoItem]]


class DirectoryView(BaseModel):
    """Visible people plus the load / no-results signal."""
    status: str  # idle | ok | empty | error
    message: str
    headers: list[str]
    query: str
    total: int
    count: int
    people: list[PersonCard]


class FieldResolution(BaseModel):
    field: str
    candidates: list[str]
    header: Optional[str] = None


class HeadersResponse(BaseModel):
    headers: list[str]
    fields: list[FieldResolution]
    unmatched_headers: list[str]
