"""
Material endpoints.
"""
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from edusystem.core.dependencies import get_current_active_user, get_db, is_staff, require_roles
from edusystem.models.user import User, UserRole
from edusystem.schemas.common import Message
from edusystem.schemas.material import Material as MaterialSchema, MaterialCreate, MaterialUpdate
from edusystem.services.material_service import MaterialService

router = APIRouter()

require_staff = require_roles(UserRole.TUTOR, UserRole.ADMIN)


@router.post("", response_model=MaterialSchema, status_code=status.HTTP_201_CREATED)
def create_material(
    material_in: MaterialCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_staff),
) -> Any:
    """Create a material authored by the current tutor or admin."""
    return MaterialService(db).create_material(current_user.id, material_in)


@router.get("", response_model=List[MaterialSchema])
def list_materials(db: Session = Depends(get_db)) -> Any:
    """List all materials, newest first."""
    return MaterialService(db).list_materials()


@router.get("/user/{user_id}", response_model=List[MaterialSchema])
def list_user_materials(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Any:
    if current_user.id != user_id and not is_staff(current_user):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions",
        )
    return MaterialService(db).list_materials_by_user(user_id)


@router.get("/{material_id}", response_model=MaterialSchema)
def get_material(material_id: int, db: Session = Depends(get_db)) -> Any:
    return MaterialService(db).get_material(material_id)


@router.put("/{material_id}/content", response_model=MaterialSchema)
def update_material_content(
    material_id: int,
    material_in: MaterialUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Any:
    """
    Update a material's text, media files or category.

    Allowed for the author and for any tutor or admin.
    """
    service = MaterialService(db)
    material = service.get_material(material_id)

    if material.user_id != current_user.id and not is_staff(current_user):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions",
        )

    return service.update_content(material_id, material_in)


@router.delete("/{material_id}", response_model=Message)
def delete_material(
    material_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_staff),
) -> Any:
    """Delete a material together with its test."""
    MaterialService(db).delete_material(material_id)
    return {"message": f"Material {material_id} deleted successfully"}
