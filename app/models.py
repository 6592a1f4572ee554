from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base

USER_ROLES = ("customer", "vendor", "admin")
VENDOR_STATUSES = ("pending", "approved", "rejected", "suspended")
BOOKING_STATUSES = ("pending", "confirmed", "in_progress", "completed", "cancelled")
PAYMENT_STATUSES = ("pending", "partial", "paid", "refunded")
INQUIRY_STATUSES = ("pending", "replied", "closed")


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    role = Column(String(20), default="customer", nullable=False)  # customer, vendor, admin
    phone = Column(String(50), nullable=True)
    address = Column(String(500), nullable=True)
    city = Column(String(100), nullable=True)
    profile_image = Column(String(500), nullable=True)

    # Wedding details
    wedding_date = Column(DateTime, nullable=True)
    wedding_location = Column(String(255), nullable=True)
    guest_count = Column(Integer, nullable=True)
    budget = Column(Float, nullable=True)
    wedding_style = Column(String(100), nullable=True)

    preferences = Column(JSON, default=dict, nullable=True)

    is_active = Column(Boolean, default=True, nullable=False)
    is_email_verified = Column(Boolean, default=False, nullable=False)
    email_verification_token = Column(String(255), nullable=True, index=True)
    password_reset_token = Column(String(255), nullable=True, index=True)
    password_reset_expires = Column(DateTime, nullable=True)
    last_login_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    vendor = relationship("Vendor", back_populates="user", uselist=False)
    planning = relationship("Planning", back_populates="user", uselist=False)


class SuperAdmin(Base):
    """Platform operator account, kept apart from marketplace users"""

    __tablename__ = "super_admins"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    phone = Column(String(50), nullable=True)
    can_manage_vendors = Column(Boolean, default=True, nullable=False)
    can_manage_users = Column(Boolean, default=True, nullable=False)
    can_manage_content = Column(Boolean, default=True, nullable=False)
    can_view_analytics = Column(Boolean, default=True, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    last_login_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())


class Vendor(Base):
    __tablename__ = "vendors"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)
    business_name = Column(String(255), nullable=False, index=True)
    business_description = Column(Text, nullable=True)
    categories = Column(JSON, default=list, nullable=False)  # e.g. ["photography", "catering"]
    district = Column(String(100), nullable=True, index=True)
    city = Column(String(100), nullable=True)
    address = Column(String(500), nullable=True)
    phone = Column(String(50), nullable=True)
    email = Column(String(255), nullable=True)
    website = Column(String(500), nullable=True)
    whatsapp = Column(String(50), nullable=True)
    social_links = Column(JSON, default=dict, nullable=True)
    logo = Column(String(500), nullable=True)
    cover_image = Column(String(500), nullable=True)
    gallery = Column(JSON, default=list, nullable=True)

    # Approval workflow
    status = Column(String(20), default="pending", nullable=False, index=True)
    rejection_reason = Column(String(1000), nullable=True)
    approved_at = Column(DateTime, nullable=True)
    approved_by = Column(Integer, nullable=True)  # SuperAdmin id

    is_verified = Column(Boolean, default=False, nullable=False)
    is_featured = Column(Boolean, default=False, nullable=False)
    featured_at = Column(DateTime, nullable=True)

    # Aggregates (rating/review_count are derived from published reviews)
    rating = Column(Float, default=0.0, nullable=False)
    review_count = Column(Integer, default=0, nullable=False)
    view_count = Column(Integer, default=0, nullable=False)
    inquiry_count = Column(Integer, default=0, nullable=False)
    booking_count = Column(Integer, default=0, nullable=False)

    price_min = Column(Float, nullable=True)
    price_max = Column(Float, nullable=True)
    currency = Column(String(3), default="LKR", nullable=False)
    languages = Column(JSON, default=list, nullable=True)
    specializations = Column(JSON, default=list, nullable=True)
    awards = Column(JSON, default=list, nullable=True)
    experience_years = Column(Integer, nullable=True)
    team_size = Column(Integer, nullable=True)

    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="vendor")
    reviews = relationship("Review", back_populates="vendor")
    bookings = relationship("Booking", back_populates="vendor")


class Review(Base):
    __tablename__ = "reviews"
    __table_args__ = (
        UniqueConstraint("customer_id", "vendor_id", "booking_id", name="uq_review_customer_vendor_booking"),
    )

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    vendor_id = Column(Integer, ForeignKey("vendors.id"), nullable=False, index=True)
    booking_id = Column(Integer, ForeignKey("bookings.id"), nullable=False)
    rating = Column(Integer, nullable=False)  # 1..5
    title = Column(String(255), nullable=True)
    comment = Column(Text, nullable=True)
    images = Column(JSON, default=list, nullable=True)
    service_category = Column(String(100), nullable=True)
    pros = Column(JSON, default=list, nullable=True)
    cons = Column(JSON, default=list, nullable=True)
    would_recommend = Column(Boolean, default=True, nullable=False)
    value_rating = Column(Integer, nullable=True)
    communication_rating = Column(Integer, nullable=True)
    quality_rating = Column(Integer, nullable=True)
    timeliness_rating = Column(Integer, nullable=True)
    wedding_date = Column(DateTime, nullable=True)
    venue = Column(String(255), nullable=True)
    helpful_count = Column(Integer, default=0, nullable=False)
    not_helpful_count = Column(Integer, default=0, nullable=False)
    vendor_response = Column(Text, nullable=True)
    vendor_response_date = Column(DateTime, nullable=True)

    is_verified = Column(Boolean, default=False, nullable=False)
    is_published = Column(Boolean, default=True, nullable=False)
    published_at = Column(DateTime, nullable=True)
    moderated_at = Column(DateTime, nullable=True)
    moderated_by = Column(Integer, nullable=True)  # SuperAdmin id

    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    customer = relationship("User")
    vendor = relationship("Vendor", back_populates="reviews")


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    vendor_id = Column(Integer, ForeignKey("vendors.id"), nullable=False, index=True)
    service_name = Column(String(255), nullable=False)
    service_category = Column(String(100), nullable=True)
    booking_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=True)
    start_time = Column(String(10), nullable=True)
    end_time = Column(String(10), nullable=True)
    venue = Column(String(255), nullable=True)
    venue_address = Column(String(500), nullable=True)
    guest_count = Column(Integer, nullable=True)

    total_amount = Column(Float, nullable=False)
    currency = Column(String(3), default="LKR", nullable=False)
    status = Column(String(20), default="pending", nullable=False, index=True)
    payment_status = Column(String(20), default="pending", nullable=False)
    paid_amount = Column(Float, default=0.0, nullable=False)
    remaining_amount = Column(Float, default=0.0, nullable=False)
    packages = Column(JSON, default=list, nullable=True)
    special_requirements = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    vendor_notes = Column(Text, nullable=True)

    cancellation_reason = Column(String(1000), nullable=True)
    cancelled_at = Column(DateTime, nullable=True)
    cancelled_by = Column(Integer, nullable=True)
    completed_at = Column(DateTime, nullable=True)
    refund_amount = Column(Float, nullable=True)
    refund_reason = Column(String(1000), nullable=True)
    contract_url = Column(String(500), nullable=True)
    invoice_url = Column(String(500), nullable=True)
    receipt_url = Column(String(500), nullable=True)

    # Review snapshot copied from the review created through the booking
    rating = Column(Integer, nullable=True)
    review = Column(Text, nullable=True)
    review_date = Column(DateTime, nullable=True)

    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    customer = relationship("User")
    vendor = relationship("Vendor", back_populates="bookings")


class Idea(Base):
    __tablename__ = "ideas"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    excerpt = Column(String(1000), nullable=True)
    type = Column(String(50), default="blog_post", nullable=False)  # blog_post, gallery, user_story, tutorial, trend
    category = Column(String(100), nullable=False, index=True)
    tags = Column(JSON, default=list, nullable=False)
    images = Column(JSON, default=list, nullable=True)
    featured_image = Column(String(500), nullable=True)
    video_url = Column(String(500), nullable=True)

    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    author_name = Column(String(255), nullable=True)
    author_role = Column(String(20), nullable=True)

    view_count = Column(Integer, default=0, nullable=False)
    like_count = Column(Integer, default=0, nullable=False)
    share_count = Column(Integer, default=0, nullable=False)
    comment_count = Column(Integer, default=0, nullable=False)

    is_published = Column(Boolean, default=False, nullable=False)
    published_at = Column(DateTime, nullable=True)
    is_featured = Column(Boolean, default=False, nullable=False)
    featured_at = Column(DateTime, nullable=True)

    meta_title = Column(String(255), nullable=True)
    meta_description = Column(String(500), nullable=True)
    reading_time = Column(Integer, nullable=True)  # minutes
    difficulty = Column(String(20), nullable=True)
    location = Column(String(255), nullable=True)
    season = Column(String(50), nullable=True)

    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    author = relationship("User")


class Inquiry(Base):
    __tablename__ = "inquiries"

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    vendor_id = Column(Integer, ForeignKey("vendors.id"), nullable=False, index=True)
    subject = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    status = Column(String(20), default="pending", nullable=False)
    wedding_date = Column(DateTime, nullable=True)
    guest_count = Column(Integer, nullable=True)
    budget = Column(Float, nullable=True)
    venue = Column(String(255), nullable=True)
    service_category = Column(String(100), nullable=True)
    urgency = Column(String(20), default="normal", nullable=False)  # low, normal, high
    last_message_at = Column(DateTime, nullable=True)
    closed_at = Column(DateTime, nullable=True)
    closed_by = Column(Integer, nullable=True)
    close_reason = Column(String(500), nullable=True)

    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    customer = relationship("User")
    vendor = relationship("Vendor")
    messages = relationship(
        "InquiryMessage",
        back_populates="inquiry",
        cascade="all, delete-orphan",
        order_by="InquiryMessage.id",
    )


class InquiryMessage(Base):
    __tablename__ = "inquiry_messages"

    id = Column(Integer, primary_key=True, index=True)
    inquiry_id = Column(Integer, ForeignKey("inquiries.id"), nullable=False, index=True)
    sender_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    message = Column(Text, nullable=False)
    attachments = Column(JSON, default=list, nullable=True)
    is_read = Column(Boolean, default=False, nullable=False)
    read_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    inquiry = relationship("Inquiry", back_populates="messages")


class Planning(Base):
    __tablename__ = "plannings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)
    title = Column(String(255), default="My Wedding", nullable=False)
    wedding_date = Column(DateTime, nullable=True)
    venue = Column(String(255), nullable=True)
    total_budget = Column(Float, default=0.0, nullable=False)
    currency = Column(String(3), default="LKR", nullable=False)
    notes = Column(Text, nullable=True)
    vendors = Column(JSON, default=list, nullable=False)  # index-addressed list of planned vendors

    # Derived completion percentages, recomputed on every sub-list mutation
    progress_budget = Column(Integer, default=0, nullable=False)
    progress_guests = Column(Integer, default=0, nullable=False)
    progress_timeline = Column(Integer, default=0, nullable=False)
    progress_checklist = Column(Integer, default=0, nullable=False)

    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="planning")
    budget_items = relationship(
        "BudgetItem", back_populates="planning", cascade="all, delete-orphan", order_by="BudgetItem.id"
    )
    guests = relationship("Guest", back_populates="planning", cascade="all, delete-orphan", order_by="Guest.id")
    timeline_items = relationship(
        "TimelineItem", back_populates="planning", cascade="all, delete-orphan", order_by="TimelineItem.id"
    )
    checklist_items = relationship(
        "ChecklistItem", back_populates="planning", cascade="all, delete-orphan", order_by="ChecklistItem.id"
    )


class BudgetItem(Base):
    __tablename__ = "budget_items"

    id = Column(Integer, primary_key=True, index=True)
    planning_id = Column(Integer, ForeignKey("plannings.id"), nullable=False, index=True)
    category = Column(String(100), nullable=False)
    name = Column(String(255), nullable=False)
    estimated_cost = Column(Float, default=0.0, nullable=False)
    actual_cost = Column(Float, nullable=True)
    is_paid = Column(Boolean, default=False, nullable=False)
    vendor_name = Column(String(255), nullable=True)
    due_date = Column(DateTime, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    planning = relationship("Planning", back_populates="budget_items")


class Guest(Base):
    __tablename__ = "guests"

    id = Column(Integer, primary_key=True, index=True)
    planning_id = Column(Integer, ForeignKey("plannings.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    relationship_to_couple = Column(String(100), nullable=True)
    side = Column(String(20), nullable=True)  # bride, groom, both
    rsvp_status = Column(String(20), default="pending", nullable=False)  # pending, confirmed, declined
    plus_ones = Column(Integer, default=0, nullable=False)
    table_number = Column(Integer, nullable=True)
    dietary_restrictions = Column(String(500), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    planning = relationship("Planning", back_populates="guests")


class TimelineItem(Base):
    __tablename__ = "timeline_items"

    id = Column(Integer, primary_key=True, index=True)
    planning_id = Column(Integer, ForeignKey("plannings.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    due_date = Column(DateTime, nullable=True)
    status = Column(String(20), default="pending", nullable=False)  # pending, in_progress, completed
    category = Column(String(100), nullable=True)
    priority = Column(String(20), default="medium", nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    planning = relationship("Planning", back_populates="timeline_items")


class ChecklistItem(Base):
    __tablename__ = "checklist_items"

    id = Column(Integer, primary_key=True, index=True)
    planning_id = Column(Integer, ForeignKey("plannings.id"), nullable=False, index=True)
    task = Column(String(500), nullable=False)
    category = Column(String(100), nullable=True)
    due_date = Column(DateTime, nullable=True)
    is_completed = Column(Boolean, default=False, nullable=False)
    completed_at = Column(DateTime, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    planning = relationship("Planning", back_populates="checklist_items")


class Portfolio(Base):
    __tablename__ = "portfolios"

    id = Column(Integer, primary_key=True, index=True)
    vendor_id = Column(Integer, ForeignKey("vendors.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(100), nullable=True)
    tags = Column(JSON, default=list, nullable=True)
    items = Column(JSON, default=list, nullable=False)  # [{type, url, caption, thumbnail}]
    cover_image = Column(String(500), nullable=True)
    event_date = Column(DateTime, nullable=True)
    venue = Column(String(255), nullable=True)
    client_name = Column(String(255), nullable=True)
    view_count = Column(Integer, default=0, nullable=False)
    like_count = Column(Integer, default=0, nullable=False)
    is_featured = Column(Boolean, default=False, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    vendor = relationship("Vendor")


class Favorite(Base):
    __tablename__ = "favorites"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    vendor_id = Column(Integer, ForeignKey("vendors.id"), nullable=False, index=True)
    notes = Column(Text, nullable=True)
    category = Column(String(100), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    vendor = relationship("Vendor")
