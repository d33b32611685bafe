from enum import Enum


class Scenario(str, Enum):
    CONSERVATIVE = "conservative"
    EXPECTED = "expected"
    STRETCH = "stretch"


class Currency(str, Enum):
    EUR = "EUR"
    GBP = "GBP"
    USD = "USD"

    @property
    def symbol(self) -> str:
        return _CURRENCY_SYMBOLS[self]


_CURRENCY_SYMBOLS = {
    Currency.EUR: "€",
    Currency.GBP: "£",
    Currency.USD: "$",
}


class FieldKind(str, Enum):
    INTEGER = "integer"
    FLOAT = "float"


class FaultKind(str, Enum):
    INVALID_NUMERIC_OPERATION = "invalid_numeric_operation"
    INVALID_INPUT_TYPE = "invalid_input_type"
    NON_FINITE_RESULT = "non_finite_result"


class Industry(str, Enum):
    MANUFACTURING = "manufacturing"
    CONSTRUCTION = "construction"
    HEALTHCARE = "healthcare"
    OFFICE = "office"


class BenchmarkIndustry(str, Enum):
    TECHNOLOGY = "technology"
    MANUFACTURING = "manufacturing"
    HEALTHCARE = "healthcare"
    FINANCE = "finance"
    RETAIL = "retail"


class CompanySize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class CalculationApproach(str, Enum):
    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    OPTIMISTIC = "optimistic"
