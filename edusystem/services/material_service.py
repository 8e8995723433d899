"""
Material management.
"""
import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy.orm import Session

from edusystem.core.exceptions import ValidationFailureError
from edusystem.db.base import transaction
from edusystem.models.material import Material
from edusystem.repositories.materials_repository import MaterialsRepository
from edusystem.schemas.material import MaterialCreate, MaterialUpdate

logger = logging.getLogger(__name__)


class MaterialService:
    """Service for educational materials."""

    def __init__(self, db: Session):
        self.db = db
        self.materials = MaterialsRepository(db)

    def create_material(self, user_id: int, material_in: MaterialCreate) -> Material:
        if not material_in.text.strip():
            raise ValidationFailureError("Material text must not be empty")

        with transaction(self.db):
            material = self.materials.create_material(
                user_id=user_id,
                creation_date=datetime.now(timezone.utc),
                text=material_in.text,
                media_files=material_in.media_files,
                category=material_in.category.value,
            )
        logger.info(f"Material {material.id} created by user {user_id}")
        return material

    def get_material(self, material_id: int) -> Material:
        return self.materials.get_material_by_id(material_id)

    def material_exists(self, material_id: int) -> bool:
        return self.materials.material_exists(material_id)

    def list_materials(self) -> List[Material]:
        return self.materials.list_materials()

    def list_materials_by_user(self, user_id: int) -> List[Material]:
        return self.materials.list_materials_by_user(user_id)

    def update_content(self, material_id: int, material_in: MaterialUpdate) -> Material:
        if material_in.text is not None and not material_in.text.strip():
            raise ValidationFailureError("Material text must not be empty")

        with transaction(self.db):
            material = self.materials.update_content(
                material_id,
                text=material_in.text,
                media_files=material_in.media_files,
                category=material_in.category.value if material_in.category else None,
            )
        logger.info(f"Material {material_id} content updated")
        return material

    def delete_material(self, material_id: int) -> None:
        with transaction(self.db):
            self.materials.delete_material(material_id)
        logger.info(f"Material {material_id} deleted")
