class PricingError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnknownCurrencyError(PricingError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown currency: {code}")


class InvalidBoundsError(PricingError):
    def __init__(self, minimum_price: float, maximum_price: float):
        self.minimum_price = minimum_price
        self.maximum_price = maximum_price
        super().__init__(
            f"Minimum price {minimum_price} is greater than maximum price {maximum_price}"
        )


class InvalidGuestCountError(PricingError):
    def __init__(self, guest_count: int):
        self.guest_count = guest_count
        super().__init__(f"Guest count must be at least 1, got {guest_count}")


class InvalidLeadTimeError(PricingError):
    def __init__(self, lead_time_days: int):
        self.lead_time_days = lead_time_days
        super().__init__(f"Lead time cannot be negative, got {lead_time_days} days")


class MissingTravelDateError(PricingError):
    def __init__(self, rule_id: str):
        self.rule_id = rule_id
        super().__init__(f"Seasonal rule {rule_id} needs a travel date to be evaluated")


class InvalidCurrencyTableError(PricingError):
    pass


class RuleNotFoundError(PricingError):
    def __init__(self, rule_id: str):
        self.rule_id = rule_id
        super().__init__(f"Pricing rule not found: {rule_id}")


class DuplicateRuleError(PricingError):
    def __init__(self, rule_id: str):
        self.rule_id = rule_id
        super().__init__(f"Pricing rule already exists: {rule_id}")


class ScenarioTooLargeError(PricingError):
    def __init__(self, cells: int, limit: int):
        self.cells = cells
        self.limit = limit
        super().__init__(f"Scenario matrix has {cells} cells, limit is {limit}")
