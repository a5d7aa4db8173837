"""Disaster report domain model — maps to the 'bencana_gunung' table."""

from sqlalchemy import Column, Integer, String, Text

from bencana_api.infrastructure.database import Base

STATUS_AKTIVITAS = ("Normal", "Waspada", "Siaga", "Awas")


class BencanaGunung(Base):
    __tablename__ = "bencana_gunung"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nama_gunung = Column(String(255), nullable=False)
    status_aktivitas = Column(String(20), nullable=False)  # Normal, Waspada, Siaga, Awas
    rekomendasi = Column(Text, nullable=False)
    laporan = Column(Text, nullable=False)

    def __repr__(self):
        return f"<BencanaGunung {self.nama_gunung} - {self.status_aktivitas}>"
