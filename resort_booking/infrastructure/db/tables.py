from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
)

metadata = MetaData()

rooms = Table(
    "rooms",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("number", String(20), nullable=False, unique=True),
    Column("room_type", String(50), nullable=False),
    Column("description", String(500), nullable=False, default=""),
    Column("price_per_night", Numeric(10, 2), nullable=False),
    Column("max_occupancy", Integer, nullable=False),
    Column("is_active", Boolean, nullable=False, default=True),
    CheckConstraint("price_per_night >= 0", name="ck_rooms_price_non_negative"),
    CheckConstraint("max_occupancy >= 1", name="ck_rooms_max_occupancy_positive"),
    Index("ix_rooms_type_active", "room_type", "is_active"),
)

room_reservations = Table(
    "room_reservations",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, nullable=False),
    Column("room_id", Integer, ForeignKey("rooms.id"), nullable=False),
    Column("check_in", Date, nullable=False),
    Column("check_out", Date, nullable=False),
    Column("adults", Integer, nullable=False),
    Column("children", Integer, nullable=False, default=0),
    Column("total_price", Numeric(12, 2), nullable=False),
    Column("status", String(16), nullable=False),
    Column("first_name", String(100), nullable=False),
    Column("last_name", String(100), nullable=False),
    Column("phone", String(30), nullable=False, default=""),
    Column("notes", String(400), nullable=False, default=""),
    Column("created_at", DateTime, nullable=False),
    CheckConstraint("check_in < check_out", name="ck_room_reservations_range"),
    CheckConstraint("adults >= 1", name="ck_room_reservations_adults"),
    CheckConstraint("children >= 0", name="ck_room_reservations_children"),
    Index("ix_room_reservations_room_dates", "room_id", "check_in", "check_out"),
    Index("ix_room_reservations_user", "user_id", "created_at"),
)

events = Table(
    "events",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(200), nullable=False),
    Column("description", String(1000), nullable=False, default=""),
    Column("is_active", Boolean, nullable=False, default=True),
)

event_slots = Table(
    "event_slots",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("event_id", Integer, ForeignKey("events.id"), nullable=False),
    Column("starts_at", DateTime, nullable=False),
    Column("capacity", Integer, nullable=False),
    Column("remaining", Integer, nullable=False),
    Column("is_active", Boolean, nullable=False, default=True),
    CheckConstraint("capacity >= 0", name="ck_event_slots_capacity_non_negative"),
    CheckConstraint("remaining >= 0", name="ck_event_slots_remaining_non_negative"),
    CheckConstraint("remaining <= capacity", name="ck_event_slots_remaining_le_capacity"),
    Index("ix_event_slots_event", "event_id"),
)

event_signups = Table(
    "event_signups",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, nullable=False),
    Column("event_id", Integer, ForeignKey("events.id"), nullable=False),
    Column("slot_id", Integer, ForeignKey("event_slots.id"), nullable=False),
    Column("first_name", String(60), nullable=False),
    Column("last_name", String(80), nullable=False),
    Column("party_size", Integer, nullable=False),
    Column("created_at", DateTime, nullable=False),
    CheckConstraint("party_size >= 1", name="ck_event_signups_party_size"),
    Index("ix_event_signups_user", "user_id"),
    Index("ix_event_signups_slot", "slot_id"),
)
