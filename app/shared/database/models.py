# app/shared/database/models.py
from sqlalchemy import (
    Column, Integer, String, Boolean, DateTime, ForeignKey,
    CheckConstraint, func
)
from sqlalchemy.orm import relationship, declarative_base

Base = declarative_base()

# =====================================================
# MIXIN DE AUDITORÍA
# =====================================================
class AuditMixin:
    """Mixin que agrega campos de creación y última actualización"""
    created_by = Column(Integer, nullable=False)
    created = Column(DateTime, nullable=False, server_default=func.current_timestamp())
    last_updated_by = Column(Integer, nullable=False)
    last_updated = Column(DateTime, nullable=False, server_default=func.current_timestamp(), onupdate=func.current_timestamp())


# =====================================================
# MODELOS DE COLMENAS (HIVES)
# =====================================================

class StoreHive(Base, AuditMixin):
    """Colmena: unidad de almacenamiento"""
    __tablename__ = "catalogue_hives"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(5), unique=True, nullable=False, index=True)
    name = Column(String(60), nullable=False)
    address = Column(String(300), nullable=False)
    is_deleted = Column(Boolean, nullable=False, default=False)

    # Relationships
    sections = relationship("StoreHiveSection", back_populates="store_hive")

    __table_args__ = (
        CheckConstraint("id >= 1", name="ck_catalogue_hives_id_positive"),
    )


class StoreHiveSection(Base, AuditMixin):
    """Sección de colmena: subdivisión que pertenece a una sola colmena"""
    __tablename__ = "catalogue_hive_sections"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(5), unique=True, nullable=False, index=True)
    name = Column(String(60), nullable=False)
    store_hive_id = Column(Integer, ForeignKey("catalogue_hives.id"), nullable=False, index=True)
    is_deleted = Column(Boolean, nullable=False, default=False)

    # Relationships
    store_hive = relationship("StoreHive", back_populates="sections")

    __table_args__ = (
        CheckConstraint("id >= 1", name="ck_catalogue_hive_sections_id_positive"),
    )
