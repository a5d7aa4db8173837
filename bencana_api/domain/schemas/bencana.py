"""Pydantic schemas for disaster reports."""

from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, Field, field_validator

from bencana_api.core.validation import is_integer, one_of, required
from bencana_api.domain.models.bencana import STATUS_AKTIVITAS

StatusAktivitas = Literal["Normal", "Waspada", "Siaga", "Awas"]

# Path id for update/delete; anything that is not a base-10 integer is a 422
BencanaId = Annotated[int, BeforeValidator(lambda v: is_integer(v, "ID must be an integer"))]


class BencanaBase(BaseModel):
    # Defaults of None are validated so a missing field reports its own message
    nama_gunung: str = Field(None, validate_default=True)
    status_aktivitas: StatusAktivitas = Field(None, validate_default=True)
    rekomendasi: str = Field(None, validate_default=True)
    laporan: str = Field(None, validate_default=True)

    @field_validator("nama_gunung", mode="before")
    @classmethod
    def nama_gunung_required(cls, v):
        return required(v, "Nama Gunung is required")

    @field_validator("status_aktivitas", mode="before")
    @classmethod
    def status_aktivitas_known(cls, v):
        return one_of(v, STATUS_AKTIVITAS, "Invalid status aktivitas")

    @field_validator("rekomendasi", mode="before")
    @classmethod
    def rekomendasi_required(cls, v):
        return required(v, "Rekomendasi is required")

    @field_validator("laporan", mode="before")
    @classmethod
    def laporan_required(cls, v):
        return required(v, "Laporan is required")


class BencanaCreate(BencanaBase):
    pass


class BencanaUpdate(BencanaBase):
    pass


class BencanaRead(BencanaBase):
    id: int

    model_config = {"from_attributes": True}


class BencanaStats(BaseModel):
    total: int
    normal: int
    waspada: int
    siaga: int
    awas: int
