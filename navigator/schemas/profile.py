"""User profile: the read-only input of the rule engine and tax classifier."""
from pydantic import BaseModel, ConfigDict, Field
from navigator.models.profile import StayDuration, CurrentLocation, PurposeOfStay, VisaType


class UserProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    nationality: str  # matched case-insensitively against the country lists
    purpose_of_stay: list[PurposeOfStay]
    current_location: CurrentLocation | None = None
    current_visa_type: VisaType | None = None
    intended_stay_duration: StayDuration | None = None

    will_work_in_thailand: bool = False
    has_thai_income: bool = False
    has_foreign_income: bool = False
    monthly_income: float | None = Field(None, ge=0)  # foreign currency unit
    age: int | None = Field(None, ge=0)
    has_thai_spouse: bool = False
    days_in_thailand: int | None = Field(None, ge=0)

    needs_driving_license: bool = False
    needs_vehicle_ownership: bool = False
    needs_bank_account: bool = False

    timestamp: str | None = None

    def has_purpose(self, purpose: PurposeOfStay) -> bool:
        return purpose in self.purpose_of_stay
