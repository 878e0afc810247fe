from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import (
    Boolean,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    MappedAsDataclass,
    mapped_column,
    relationship,
)

from core.domain.component_status import ComponentStatus
from core.domain.incident_impact import IncidentImpact
from core.domain.incident_status import IncidentStatus
from core.domain.maintenance_status import MaintenanceStatus
from core.domain.subscription_tier import SubscriptionTier
from core.domain.user_role import UserRole


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(MappedAsDataclass, DeclarativeBase):
    pass


class UserModel(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, init=False)

    email: Mapped[str] = mapped_column(String(320), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255))
    first_name: Mapped[str] = mapped_column(String(255))
    last_name: Mapped[str] = mapped_column(String(255))
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, native_enum=False, name="user_role"),
        default=UserRole.VIEWER,
    )

    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default_factory=_utcnow,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default_factory=_utcnow,
        server_default=func.now(),
    )


class OrganizationModel(Base):
    __tablename__ = "organizations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, init=False)

    name: Mapped[str] = mapped_column(String(255))
    slug: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    subscription_tier: Mapped[SubscriptionTier] = mapped_column(
        Enum(SubscriptionTier, native_enum=False, name="subscription_tier"),
        default=SubscriptionTier.FREE,
    )

    is_active: Mapped[bool] = mapped_column(Boolean, default=True, index=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default_factory=_utcnow,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default_factory=_utcnow,
        server_default=func.now(),
    )


class StatusPageModel(Base):
    __tablename__ = "status_pages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, init=False)
    organization_id: Mapped[int] = mapped_column(ForeignKey("organizations.id", ondelete="CASCADE"), index=True)

    name: Mapped[str] = mapped_column(String(255))
    description: Mapped[Optional[str]] = mapped_column(String(2000), default=None)
    domain: Mapped[Optional[str]] = mapped_column(String(255), default=None, unique=True)
    custom_css: Mapped[Optional[str]] = mapped_column(Text, default=None)
    logo_url: Mapped[Optional[str]] = mapped_column(String(1024), default=None)

    is_public: Mapped[bool] = mapped_column(Boolean, default=True, index=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default_factory=_utcnow,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default_factory=_utcnow,
        server_default=func.now(),
    )


class ComponentGroupModel(Base):
    __tablename__ = "component_groups"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, init=False)
    status_page_id: Mapped[int] = mapped_column(ForeignKey("status_pages.id", ondelete="CASCADE"), index=True)

    name: Mapped[str] = mapped_column(String(255))
    description: Mapped[Optional[str]] = mapped_column(String(2000), default=None)
    sort_order: Mapped[int] = mapped_column(Integer, default=0)
    is_collapsed: Mapped[bool] = mapped_column(Boolean, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default_factory=_utcnow,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default_factory=_utcnow,
        server_default=func.now(),
    )


class ComponentModel(Base):
    __tablename__ = "components"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, init=False)
    status_page_id: Mapped[int] = mapped_column(ForeignKey("status_pages.id", ondelete="CASCADE"), index=True)

    name: Mapped[str] = mapped_column(String(255))
    component_group_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("component_groups.id", ondelete="SET NULL"),
        default=None,
        index=True,
    )
    description: Mapped[Optional[str]] = mapped_column(String(2000), default=None)
    status: Mapped[ComponentStatus] = mapped_column(
        Enum(ComponentStatus, native_enum=False, name="component_status"),
        default=ComponentStatus.OPERATIONAL,
        index=True,
    )
    sort_order: Mapped[int] = mapped_column(Integer, default=0)
    is_visible: Mapped[bool] = mapped_column(Boolean, default=True, index=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default_factory=_utcnow,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default_factory=_utcnow,
        server_default=func.now(),
    )


class IncidentModel(Base):
    __tablename__ = "incidents"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, init=False)
    status_page_id: Mapped[int] = mapped_column(ForeignKey("status_pages.id", ondelete="CASCADE"), index=True)

    name: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text)
    status: Mapped[IncidentStatus] = mapped_column(
        Enum(IncidentStatus, native_enum=False, name="incident_status"),
        index=True,
    )
    impact: Mapped[IncidentImpact] = mapped_column(
        Enum(IncidentImpact, native_enum=False, name="incident_impact"),
    )

    started_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    resolved_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), default=None)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default_factory=_utcnow,
        server_default=func.now(),
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default_factory=_utcnow,
        server_default=func.now(),
    )

    component_links: Mapped[list["IncidentComponentModel"]] = relationship(
        back_populates="incident",
        cascade="all, delete-orphan",
        lazy="selectin",
        default_factory=list,
    )
    updates: Mapped[list["IncidentUpdateModel"]] = relationship(
        back_populates="incident",
        cascade="all, delete-orphan",
        default_factory=list,
    )


class IncidentComponentModel(Base):
    __tablename__ = "incident_components"

    incident_id: Mapped[int] = mapped_column(
        ForeignKey("incidents.id", ondelete="CASCADE"),
        primary_key=True,
        init=False,
    )
    component_id: Mapped[int] = mapped_column(
        ForeignKey("components.id", ondelete="CASCADE"),
        primary_key=True,
    )

    incident: Mapped[IncidentModel] = relationship(back_populates="component_links", init=False)


class IncidentUpdateModel(Base):
    __tablename__ = "incident_updates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, init=False)
    incident_id: Mapped[int] = mapped_column(ForeignKey("incidents.id", ondelete="CASCADE"), index=True)

    title: Mapped[str] = mapped_column(String(255))
    body: Mapped[str] = mapped_column(Text)
    status: Mapped[IncidentStatus] = mapped_column(
        Enum(IncidentStatus, native_enum=False, name="incident_status"),
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default_factory=_utcnow,
        server_default=func.now(),
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default_factory=_utcnow,
        server_default=func.now(),
    )

    incident: Mapped[IncidentModel] = relationship(back_populates="updates", init=False)


class MaintenanceWindowModel(Base):
    __tablename__ = "maintenance_windows"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, init=False)
    status_page_id: Mapped[int] = mapped_column(ForeignKey("status_pages.id", ondelete="CASCADE"), index=True)

    name: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text)
    status: Mapped[MaintenanceStatus] = mapped_column(
        Enum(MaintenanceStatus, native_enum=False, name="maintenance_status"),
        index=True,
    )

    scheduled_start: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)
    scheduled_end: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    actual_start: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), default=None)
    actual_end: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), default=None)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default_factory=_utcnow,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default_factory=_utcnow,
        server_default=func.now(),
    )

    component_links: Mapped[list["MaintenanceComponentModel"]] = relationship(
        back_populates="maintenance_window",
        cascade="all, delete-orphan",
        lazy="selectin",
        default_factory=list,
    )


class MaintenanceComponentModel(Base):
    __tablename__ = "maintenance_components"

    maintenance_window_id: Mapped[int] = mapped_column(
        ForeignKey("maintenance_windows.id", ondelete="CASCADE"),
        primary_key=True,
        init=False,
    )
    component_id: Mapped[int] = mapped_column(
        ForeignKey("components.id", ondelete="CASCADE"),
        primary_key=True,
    )

    maintenance_window: Mapped[MaintenanceWindowModel] = relationship(back_populates="component_links", init=False)


class SubscriptionModel(Base):
    __tablename__ = "subscriptions"
    __table_args__ = (
        UniqueConstraint("email", "status_page_id", name="uq_subscriptions_email_status_page_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, init=False)
    status_page_id: Mapped[int] = mapped_column(ForeignKey("status_pages.id", ondelete="CASCADE"), index=True)

    email: Mapped[str] = mapped_column(String(320), index=True)
    user_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        default=None,
        index=True,
    )

    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    subscribed_to_incidents: Mapped[bool] = mapped_column(Boolean, default=True)
    subscribed_to_maintenance: Mapped[bool] = mapped_column(Boolean, default=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default_factory=_utcnow,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default_factory=_utcnow,
        server_default=func.now(),
    )


class MetricModel(Base):
    __tablename__ = "metrics"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, init=False)
    component_id: Mapped[int] = mapped_column(ForeignKey("components.id", ondelete="CASCADE"), index=True)

    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)
    status: Mapped[ComponentStatus] = mapped_column(
        Enum(ComponentStatus, native_enum=False, name="component_status"),
    )
    response_time: Mapped[Optional[int]] = mapped_column(Integer, default=None)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default_factory=_utcnow,
        server_default=func.now(),
    )
