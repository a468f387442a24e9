"""Tour package pricing vocabularies."""
import enum


class HotelLevel(str, enum.Enum):
    budget = "budget"
    standard = "standard"
    luxury = "luxury"
    premium = "premium"


class Season(str, enum.Enum):
    peak = "peak"  # Nov-Feb
    shoulder = "shoulder"  # Mar-May, Sep-Oct
    low = "low"  # Jun-Aug


class PackageStatus(str, enum.Enum):
    active = "active"
    inactive = "inactive"
    draft = "draft"


class BookingStatus(str, enum.Enum):
    pending = "pending"
    confirmed = "confirmed"
    in_progress = "in-progress"
    completed = "completed"
    cancelled = "cancelled"
