"""
Persistence operations over materials and their content.
"""
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from edusystem.core.exceptions import ConflictError, InvalidReferenceError, NotFoundError
from edusystem.models.material import Content, Material
from edusystem.models.test import Test, TestResult
from edusystem.models.user import User


class MaterialsRepository:
    """Repository for materials."""

    def __init__(self, db: Session):
        self.db = db

    def create_material(
        self,
        user_id: int,
        creation_date: datetime,
        text: str,
        media_files: Optional[List[str]],
        category: str,
    ) -> Material:
        if not self.db.query(User.id).filter(User.id == user_id).first():
            raise InvalidReferenceError("User not found")

        material = Material(
            user_id=user_id,
            creation_date=creation_date,
            category=category,
            content=Content(text=text, media_files=list(media_files or [])),
        )
        self.db.add(material)
        self.db.flush()
        self.db.refresh(material)
        return material

    def get_material_by_id(self, material_id: int) -> Material:
        material = self.db.query(Material).filter(Material.id == material_id).first()
        if not material:
            raise NotFoundError("Material not found")
        return material

    def material_exists(self, material_id: int) -> bool:
        return self.db.query(Material.id).filter(Material.id == material_id).first() is not None

    def list_materials(self) -> List[Material]:
        return (
            self.db.query(Material)
            .order_by(Material.creation_date.desc(), Material.id.desc())
            .all()
        )

    def list_materials_by_user(self, user_id: int) -> List[Material]:
        return (
            self.db.query(Material)
            .filter(Material.user_id == user_id)
            .order_by(Material.creation_date.desc(), Material.id.desc())
            .all()
        )

    def update_content(
        self,
        material_id: int,
        text: Optional[str] = None,
        media_files: Optional[List[str]] = None,
        category: Optional[str] = None,
    ) -> Material:
        material = self.get_material_by_id(material_id)

        if text is not None:
            material.content.text = text
        if media_files is not None:
            material.content.media_files = list(media_files)
        if category is not None:
            material.category = category

        self.db.flush()
        self.db.refresh(material)
        return material

    def delete_material(self, material_id: int) -> None:
        """
        Delete a material, its content and its test.

        Raises:
            NotFoundError: If the material does not exist
            ConflictError: If the material's test has submitted results
        """
        material = self.get_material_by_id(material_id)

        has_results = (
            self.db.query(TestResult.id)
            .join(Test, Test.id == TestResult.test_id)
            .filter(Test.material_id == material_id)
            .first()
        )
        if has_results:
            raise ConflictError(
                f"Material {material_id} has a test with submitted results and cannot be deleted"
            )

        content = material.content
        self.db.delete(material)
        self.db.flush()
        if content is not None:
            self.db.delete(content)
            self.db.flush()
