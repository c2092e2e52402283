"""
StaffDesk Backend — Employee Service
======================================

What:  Create, list, partially update and delete employees.
Why:   Keeps presence checks, password hashing, upload storage and statement
       building out of the route handlers.
How:   Each operation issues exactly one statement against the `employee` table.
       SQLAlchemy errors are wrapped in DatabaseError; zero affected rows on an
       id-addressed statement becomes NotFoundError.
Who:   Called by the employee route handlers.

Partial update (PUT /employee/{id}):
    collect_employee_changes() walks UPDATABLE_FIELDS in order and keeps every
    field whose value is truthy, producing ordered (column, value) pairs.
    build_employee_update() turns the pairs into one parameterized
    UPDATE ... SET <pairs in order> WHERE id = :id.

    Falsy values count as "not sent": salary=0, category_id=0 and "" are
    dropped, so this endpoint cannot zero a salary or blank an address.
    Creation is the opposite: missing address/salary default to "" and 0, and
    only absent or empty required fields are rejected (category_id=0 is kept).
"""

import logging
from typing import Any, List, Optional, Sequence, Tuple

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.dml import Update

from app.exceptions import DatabaseError, NotFoundError, ValidationError
from app.models.employee import Employee
from app.schemas.employee import EmployeeCreate, EmployeeRecord, EmployeeUpdate
from app.services.file_service import FileService, ImageUpload, file_service
from app.services.password_service import PasswordHasher, password_hasher

logger = logging.getLogger(__name__)

REQUIRED_CREATE_FIELDS = ("name", "email", "password", "category_id")

# SET clause order of the partial update
UPDATABLE_FIELDS = ("name", "email", "password", "address", "salary", "category_id", "image")

IMAGE_FIELD = "image"


def collect_employee_changes(
    changes: EmployeeUpdate,
    image: Optional[str] = None,
) -> List[Tuple[str, Any]]:
    """
    Ordered (field, value) pairs for the fields a partial update should touch.

    Args:
        changes: Form fields as received; unset fields are None.
        image:   Stored filename of a newly uploaded photo, if any.

    Returns:
        Pairs in UPDATABLE_FIELDS order, truthy values only. The password is
        still plaintext here; the caller hashes it.
    """
    values = changes.model_dump()
    values[IMAGE_FIELD] = image

    pairs: List[Tuple[str, Any]] = []
    for field in UPDATABLE_FIELDS:
        value = values.get(field)
        if value:
            pairs.append((field, value))
    return pairs


def build_employee_update(employee_id: int, pairs: Sequence[Tuple[str, Any]]) -> Update:
    """
    Build UPDATE employee SET ... WHERE id = :id from ordered pairs.

    Values are bound parameters; column names come from the model, never from
    client input.

    Raises:
        ValueError: pairs is empty or names an unknown field.
    """
    if not pairs:
        raise ValueError("At least one field is required to build an update")

    ordered = []
    for field, value in pairs:
        if field not in UPDATABLE_FIELDS:
            raise ValueError(f"Field '{field}' cannot be updated")
        ordered.append((getattr(Employee, field), value))

    return (
        update(Employee)
        .where(Employee.id == employee_id)
        .ordered_values(*ordered)
        .execution_options(synchronize_session=False)
    )


class EmployeeService:
    """
    Business logic layer for employee operations.

    Error Handling Strategy:
        Presence failures raise ValidationError before any file is written or
        statement issued. Store failures are logged with the operation name and
        re-raised as DatabaseError (generic 500).

    The photo writer and the hasher are injected so that an application built
    with its own Settings writes uploads where its /images mount serves them.
    """

    def __init__(
        self,
        files: Optional[FileService] = None,
        hasher: Optional[PasswordHasher] = None,
    ):
        self.files = files or file_service
        self.hasher = hasher or password_hasher

    async def create_employee(
        self,
        db: AsyncSession,
        data: EmployeeCreate,
        image: Optional[ImageUpload] = None,
    ) -> None:
        """
        Hash the password, store the photo, insert one employee row.

        Raises:
            ValidationError: any of name, email, password, category_id missing
            FileStorageError: the photo could not be written
            DatabaseError: the insert failed
        """
        # Presence only: category_id=0 is a value here, unlike on update
        missing = [
            field for field in REQUIRED_CREATE_FIELDS
            if getattr(data, field) is None or getattr(data, field) == ""
        ]
        if missing:
            raise ValidationError(
                message="Missing required fields: name, email, password, category_id.",
                fields=missing,
            )

        hashed_password = await self.hasher.hash_async(data.password)

        stored_image = ""
        if image is not None:
            stored_image = await self.files.store_upload(
                IMAGE_FIELD, image.filename, image.content
            )

        statement = insert(Employee).values(
            name=data.name,
            email=data.email,
            password=hashed_password,
            address=data.address or "",
            salary=data.salary or 0,
            image=stored_image,
            category_id=data.category_id,
        )

        try:
            await db.execute(statement)
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error creating employee %s: %s", data.email, str(e))
            raise DatabaseError(context={"operation": "create_employee"}) from e

        logger.info("Employee created: %s (image=%s)", data.email, stored_image or "-")

    async def list_employees(self, db: AsyncSession) -> List[EmployeeRecord]:
        """Every employee row, hash and raw category_id included."""
        try:
            result = await db.execute(select(Employee))
            employees = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing employees: %s", str(e))
            raise DatabaseError(context={"operation": "list_employees"}) from e

        return [EmployeeRecord.model_validate(e) for e in employees]

    async def update_employee(
        self,
        db: AsyncSession,
        employee_id: int,
        changes: EmployeeUpdate,
        image: Optional[ImageUpload] = None,
    ) -> None:
        """
        Apply a partial update built from the supplied (truthy) fields.

        Raises:
            ValidationError: no usable field supplied (no statement issued)
            NotFoundError: no row has this id
            DatabaseError: the update failed
        """
        stored_image = None
        if image is not None:
            stored_image = await self.files.store_upload(
                IMAGE_FIELD, image.filename, image.content
            )

        pairs = collect_employee_changes(changes, stored_image)
        if not pairs:
            raise ValidationError(message="No fields to update.")

        prepared: List[Tuple[str, Any]] = []
        for field, value in pairs:
            if field == "password":
                value = await self.hasher.hash_async(value)
            prepared.append((field, value))

        statement = build_employee_update(employee_id, prepared)

        try:
            result = await db.execute(statement)
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error updating employee %s: %s", employee_id, str(e))
            raise DatabaseError(
                context={"operation": "update_employee", "employee_id": employee_id},
            ) from e

        if result.rowcount == 0:
            raise NotFoundError(resource="Employee", resource_id=employee_id)

        logger.info(
            "Employee %s updated: %s",
            employee_id,
            ", ".join(field for field, _ in prepared),
        )

    async def delete_employee(self, db: AsyncSession, employee_id: int) -> None:
        """
        DELETE FROM employee WHERE id = :id

        Raises:
            NotFoundError: no row has this id
            DatabaseError: the delete failed
        """
        try:
            result = await db.execute(
                delete(Employee)
                .where(Employee.id == employee_id)
                .execution_options(synchronize_session=False)
            )
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error deleting employee %s: %s", employee_id, str(e))
            raise DatabaseError(
                context={"operation": "delete_employee", "employee_id": employee_id},
            ) from e

        if result.rowcount == 0:
            raise NotFoundError(resource="Employee", resource_id=employee_id)

        logger.info("Employee %s deleted", employee_id)


employee_service = EmployeeService()
