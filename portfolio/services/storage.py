"""Per-resource CRUD storage over SQLAlchemy sessions.

Each resource gets a small storage class bound to the request's session. The
shared ResourceStorage base implements list/get/create/update/delete; the
subclasses declare their model, schemas, label and default ordering, and add
the few entity-specific queries (by category, active only, by key, singleton).

Every mutating call commits once. Concurrent writers are not coordinated:
the last committed update to a row wins, and a delete racing an update is
reported purely from the deleted-row count.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import ColumnElement
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from portfolio.core import errors
from portfolio.models import (
    Contact,
    GithubConfig,
    PersonalInfo,
    Project,
    Skill,
    Testimonial,
    User,
    WebsiteSection,
)
from portfolio.models.base import Base, utcnow
from portfolio.schemas.contact import ContactCreate
from portfolio.schemas.github_config import GithubConfigCreate, GithubConfigUpdate
from portfolio.schemas.personal_info import PersonalInfoUpdate
from portfolio.schemas.project import ProjectCreate, ProjectUpdate
from portfolio.schemas.skill import SkillCreate, SkillUpdate
from portfolio.schemas.testimonial import TestimonialCreate, TestimonialUpdate
from portfolio.schemas.website_section import WebsiteSectionCreate, WebsiteSectionUpdate

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def _validate(
    schema: type[BaseModel],
    payload: BaseModel | Mapping[str, Any],
    label: str,
) -> BaseModel:
    """Coerce payload into schema; raise the app ValidationError on bad input."""
    if isinstance(payload, schema):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(exclude_unset=True)
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as e:
        raise errors.ValidationError(
            f"Invalid {label.lower()} data",
            details=e.errors(include_url=False),
        ) from e


def _reject_nulls(model: type[Base], values: dict[str, Any], label: str) -> None:
    """An explicit null for a NOT NULL column is a client error, not a DB error."""
    columns = model.__table__.columns
    for field, value in values.items():
        if value is None and field in columns and not columns[field].nullable:
            raise errors.ValidationError(
                f"Invalid {label.lower()} data",
                details=[{"loc": [field], "msg": "Field may not be null", "type": "null"}],
            )


class ResourceStorage(Generic[ModelT]):
    """Shared list/get/create/update/delete contract for one table."""

    model: ClassVar[type[Base]]
    create_schema: ClassVar[type[BaseModel]]
    update_schema: ClassVar[type[BaseModel]]
    label: ClassVar[str]

    def __init__(self, db: Session) -> None:
        self.db = db

    def ordering(self) -> tuple[ColumnElement, ...]:
        """Default list order: newest first."""
        return (self.model.created_at.desc(), self.model.id.desc())

    def _not_found(self) -> errors.NotFoundError:
        return errors.NotFoundError(f"{self.label} not found")

    def list(self) -> list[ModelT]:
        return self.db.query(self.model).order_by(*self.ordering()).all()

    def find(self, id: int) -> ModelT | None:
        return self.db.get(self.model, id)

    def get(self, id: int) -> ModelT:
        row = self.find(id)
        if row is None:
            raise self._not_found()
        return row

    def create(self, payload: BaseModel | Mapping[str, Any]) -> ModelT:
        """Validate payload against the create schema, then insert."""
        data = _validate(self.create_schema, payload, self.label)
        row = self.model(**data.model_dump())
        self.db.add(row)
        self._commit()
        self.db.refresh(row)
        return row

    def update(self, id: int, payload: BaseModel | Mapping[str, Any]) -> ModelT:
        """Apply only the fields present in payload; bump updated_at where the table has one."""
        data = _validate(self.update_schema, payload, self.label)
        values = data.model_dump(exclude_unset=True)
        _reject_nulls(self.model, values, self.label)
        row = self.get(id)
        for field, value in values.items():
            setattr(row, field, value)
        if hasattr(self.model, "updated_at"):
            row.updated_at = utcnow()
        self._commit()
        self.db.refresh(row)
        return row

    def delete(self, id: int) -> bool:
        """Delete by id. A missing id raises NotFoundError, so a second delete never succeeds."""
        deleted = (
            self.db.query(self.model)
            .filter(self.model.id == id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        if deleted == 0:
            raise self._not_found()
        return deleted > 0

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info(
                "Integrity error on %s write",
                self.model.__tablename__,
                extra={"table": self.model.__tablename__},
            )
            raise errors.ValidationError(
                f"Invalid {self.label.lower()} data: a record with these values already exists"
            ) from e


class ProjectStorage(ResourceStorage[Project]):
    model = Project
    create_schema = ProjectCreate
    update_schema = ProjectUpdate
    label = "Project"

    def list_by_category(self, category: str) -> list[Project]:
        return (
            self.db.query(Project)
            .filter(Project.category == category)
            .order_by(*self.ordering())
            .all()
        )


class ContactStorage(ResourceStorage[Contact]):
    model = Contact
    create_schema = ContactCreate
    label = "Contact"

    def update(self, id: int, payload: BaseModel | Mapping[str, Any]) -> Contact:
        """Submitted messages are never edited; only mark_as_read changes a row."""
        raise NotImplementedError("Contact messages cannot be edited")

    def mark_as_read(self, id: int) -> bool:
        updated = (
            self.db.query(Contact)
            .filter(Contact.id == id)
            .update({Contact.is_read: True}, synchronize_session=False)
        )
        self.db.commit()
        if updated == 0:
            raise self._not_found()
        return True


class TestimonialStorage(ResourceStorage[Testimonial]):
    __test__ = False

    model = Testimonial
    create_schema = TestimonialCreate
    update_schema = TestimonialUpdate
    label = "Testimonial"

    def list_active(self) -> list[Testimonial]:
        return (
            self.db.query(Testimonial)
            .filter(Testimonial.is_active.is_(True))
            .order_by(*self.ordering())
            .all()
        )


class SkillStorage(ResourceStorage[Skill]):
    model = Skill
    create_schema = SkillCreate
    update_schema = SkillUpdate
    label = "Skill"

    def ordering(self) -> tuple[ColumnElement, ...]:
        return (Skill.order.asc(), Skill.name.asc(), Skill.id.asc())

    def list_active(self) -> list[Skill]:
        return (
            self.db.query(Skill)
            .filter(Skill.is_active.is_(True))
            .order_by(*self.ordering())
            .all()
        )


class WebsiteSectionStorage(ResourceStorage[WebsiteSection]):
    model = WebsiteSection
    create_schema = WebsiteSectionCreate
    update_schema = WebsiteSectionUpdate
    label = "Website section"

    def ordering(self) -> tuple[ColumnElement, ...]:
        return (
            WebsiteSection.order.asc(),
            WebsiteSection.created_at.asc(),
            WebsiteSection.id.asc(),
        )

    def get_by_key(self, section_key: str) -> WebsiteSection:
        row = (
            self.db.query(WebsiteSection)
            .filter(WebsiteSection.section_key == section_key)
            .first()
        )
        if row is None:
            raise self._not_found()
        return row


class GithubConfigStorage(ResourceStorage[GithubConfig]):
    model = GithubConfig
    create_schema = GithubConfigCreate
    update_schema = GithubConfigUpdate
    label = "GitHub configuration"

    def ordering(self) -> tuple[ColumnElement, ...]:
        return (
            GithubConfig.order.asc(),
            GithubConfig.created_at.asc(),
            GithubConfig.id.asc(),
        )


class PersonalInfoStorage:
    """Singleton resource: reads at most one row; writes are upserts."""

    label = "Personal info"

    def __init__(self, db: Session) -> None:
        self.db = db

    def get(self) -> PersonalInfo | None:
        return self.db.query(PersonalInfo).order_by(PersonalInfo.id.asc()).first()

    def upsert(self, payload: BaseModel | Mapping[str, Any]) -> PersonalInfo:
        """Insert the row if the table is empty; otherwise apply only the fields present."""
        data = _validate(PersonalInfoUpdate, payload, self.label)
        row = self.get()
        if row is None:
            row = PersonalInfo(**data.model_dump())
            self.db.add(row)
        else:
            values = data.model_dump(exclude_unset=True)
            _reject_nulls(PersonalInfo, values, self.label)
            for field, value in values.items():
                setattr(row, field, value)
        row.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(row)
        return row


class UserStorage:
    """Credential store lookups. Users are only created by provisioning scripts."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get(self, id: int) -> User | None:
        return self.db.get(User, id)

    def get_by_username(self, username: str) -> User | None:
        return self.db.query(User).filter(User.username == username).first()

    def create(
        self,
        username: str,
        password_hash: str,
        email: str,
        is_admin: bool = False,
    ) -> User:
        user = User(
            username=username,
            password_hash=password_hash,
            email=email,
            is_admin=is_admin,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise errors.ValidationError("Username or email already exists") from e
        self.db.refresh(user)
        return user
