from datetime import date

from pydantic import BaseModel, Field, field_validator, model_validator


class CouponRule(BaseModel):
    code: str = Field(min_length=1)
    discount: float = Field(gt=0, lt=1)


class HolidayDiscountRule(BaseModel):
    month: int = Field(default=12, ge=1, le=12)
    day: int = Field(default=25, ge=1, le=31)
    rate: float = Field(default=0.2, ge=0, lt=1)

    @model_validator(mode="after")
    def real_date(self) -> "HolidayDiscountRule":
        # Leap year so 29 February is accepted
        try:
            date(2024, self.month, self.day)
        except ValueError as e:
            raise ValueError(f"holiday {self.month}/{self.day} is not a calendar date") from e
        return self


def _default_coupons() -> list[CouponRule]:
    return [
        CouponRule(code="SAVE20", discount=0.2),
        CouponRule(code="SAVE10", discount=0.1),
    ]


class PricingRules(BaseModel):
    coupons: list[CouponRule] = Field(default_factory=_default_coupons, min_length=1)
    holiday_discount: HolidayDiscountRule = Field(default_factory=HolidayDiscountRule)
    base_currency: str = "USD"

    @field_validator("coupons")
    @classmethod
    def unique_codes(cls, coupons: list[CouponRule]) -> list[CouponRule]:
        codes = [c.code for c in coupons]
        if len(codes) != len(set(codes)):
            raise ValueError("coupon codes must be unique")
        return coupons


class EligibilityRules(BaseModel):
    driving_ages: dict[str, int] = Field(
        default_factory=lambda: {"US": 16, "UK": 17}, min_length=1
    )


class RangeRule(BaseModel):
    min: int
    max: int

    @model_validator(mode="after")
    def ordered(self) -> "RangeRule":
        if self.min > self.max:
            raise ValueError("min must not exceed max")
        return self


class UserInputRules(BaseModel):
    username_min: int = 3
    username_max: int = 15
    age_min: int = 18
    age_max: int = 100

    @model_validator(mode="after")
    def ordered(self) -> "UserInputRules":
        if self.username_min > self.username_max:
            raise ValueError("username_min must not exceed username_max")
        if self.age_min > self.age_max:
            raise ValueError("age_min must not exceed age_max")
        return self


class AccountsRules(BaseModel):
    username: RangeRule = Field(default_factory=lambda: RangeRule(min=5, max=15))
    user_input: UserInputRules = Field(default_factory=UserInputRules)


class StoreRules(BaseModel):
    opening_hour: int = Field(default=8, ge=0, le=23)
    closing_hour: int = Field(default=20, ge=1, le=24)

    @model_validator(mode="after")
    def opens_before_closing(self) -> "StoreRules":
        if self.closing_hour <= self.opening_hour:
            raise ValueError("closing_hour must be after opening_hour")
        return self


class Rules(BaseModel):
    pricing: PricingRules = Field(default_factory=PricingRules)
    eligibility: EligibilityRules = Field(default_factory=EligibilityRules)
    accounts: AccountsRules = Field(default_factory=AccountsRules)
    store: StoreRules = Field(default_factory=StoreRules)
