"""
Entity store helpers shared by the resource services.

Every service keeps its own query logic; these helpers cover the steps that
are identical for all entities: lookup by id, merging partial updates,
committing with rollback, and the soft delete flag.
"""
from typing import Any, Dict, Type, TypeVar
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..exceptions import ConflictException, InternalServerException, ResourceNotFoundException, ValidationException

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")

# Never writable through a generic update
PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at"})


def get_or_404(db: Session, model: Type[ModelT], obj_id: int, label: str) -> ModelT:
    """
    Fetch a record by primary key.

    Raises:
        ResourceNotFoundException: If no row has that id
    """
    instance = db.get(model, obj_id)
    if instance is None:
        raise ResourceNotFoundException(f"{label} not found")
    return instance


def apply_updates(instance: Any, changes: Dict[str, Any]) -> None:
    """
    Merge a partial update into an ORM instance.

    Explicit nulls are refused for NOT NULL columns so the error is reported
    as a field error instead of a storage failure.
    """
    columns = instance.__table__.columns
    errors = []
    for field, value in changes.items():
        if field in PROTECTED_FIELDS or field not in columns:
            continue
        if value is None and not columns[field].nullable:
            errors.append({"field": field, "message": f"{field} cannot be null"})
            continue
        setattr(instance, field, value)
    if errors:
        raise ValidationException("Invalid update", errors=errors)


def commit(db: Session, instance: Any, action: str) -> Any:
    """
    Commit the session and refresh the instance.

    Uniqueness violations surface as ConflictException, any other storage
    failure as InternalServerException. The session is rolled back either way.
    """
    try:
        db.commit()
        db.refresh(instance)
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Integrity error while trying to {action}: {e.orig}")
        raise ConflictException(f"Could not {action}: conflicts with an existing record")
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error while trying to {action}: {str(e)}")
        raise InternalServerException(f"An error occurred while trying to {action}")
    return instance


def soft_delete(db: Session, model: Type[ModelT], obj_id: int, label: str) -> ModelT:
    """Mark a record inactive; the row itself is kept for audit history."""
    instance = get_or_404(db, model, obj_id, label)
    if not instance.is_active:
        return instance
    instance.is_active = False
    commit(db, instance, f"deactivate {label.lower()} {obj_id}")
    logger.info(f"{label} {obj_id} deactivated")
    return instance
