"""
Product record module.

Declares the raw fields of a product line and the derived fields (display
and calculator prices, unit of measure, tax rate, flag accessors) computed
from them.
"""

from decimal import Decimal
from typing import Optional

from product_feed.core.fields import Field, RecordModule, ResolutionContext

from .price import Price, format_cents

TAX_RATE = Decimal("7.775")
NO_TAX = Decimal("0")

# Flag positions (0-based); inferred from sample data
AGE_RESTRICTED_FLAG = 0
PER_WEIGHT_FLAG = 2
TAXABLE_FLAG = 4


class ProductModule(RecordModule):
    """
    Field catalog for product records.

    Each price group (regular, promotional) is a singular price, a split
    ("N for $X") price with its for-X count, or neither. Prices are whole
    cents in the raw fields and centicents in calculator prices.
    """

    record_name = "ProductRecord"

    def __init__(self):
        super().__init__()

        # Raw fields
        self.product_id = self.raw("Product Id", int)
        self.product_description = self.raw("Product Description", str)
        self.regular_singular_price = self.raw("Regular Singular Price", int)
        self.promotional_singular_price = self.raw("Promotional Singular Price", int)
        self.regular_split_price = self.raw("Regular Split Price", int)
        self.promotional_split_price = self.raw("Promotional Split Price", int)
        self.regular_for_x = self.raw("Regular For X", int)
        self.promotional_for_x = self.raw("Promotional For X", int)
        self.flags = self.raw("Flags", tuple)
        self.product_size = self.raw("Product Size", str)

        # Derived fields
        self.regular_price = self.derived(
            "Regular Price", Price,
            self._price(self.regular_singular_price, self.regular_split_price, self.regular_for_x),
        )
        self.promotional_price = self.derived(
            "Promotional Price", Price,
            self._price(self.promotional_singular_price, self.promotional_split_price, self.promotional_for_x),
        )
        self.regular_display_price = self.derived(
            "Regular Display Price", str,
            self._display_price(self.regular_singular_price, self.regular_split_price, self.regular_for_x),
        )
        self.promotional_display_price = self.derived(
            "Promotional Display Price", str,
            self._display_price(self.promotional_singular_price, self.promotional_split_price, self.promotional_for_x),
        )
        self.regular_calculator_price = self.derived(
            "Regular Calculator Price", int, self._calculator_price(self.regular_price)
        )
        self.promotional_calculator_price = self.derived(
            "Promotional Calculator Price", int, self._calculator_price(self.promotional_price)
        )
        self.unit_of_measure = self.derived(
            "Unit of Measure", str,
            lambda ctx: "Pound" if ctx.get(self.is_per_weight) else "Each",
        )
        self.tax_rate = self.derived(
            "Tax Rate", Decimal,
            lambda ctx: TAX_RATE if ctx.get(self.is_taxable) else NO_TAX,
        )

        # Semantic names for individual flags
        self.is_age_restricted = self.derived("Is Age Restricted", bool, self._flag(AGE_RESTRICTED_FLAG))
        self.is_per_weight = self.derived("Is Per-Weight", bool, self._flag(PER_WEIGHT_FLAG))
        self.is_taxable = self.derived("Is Taxable", bool, self._flag(TAXABLE_FLAG))

    def _flag(self, index: int):
        return lambda ctx: ctx.get(self.flags)[index]

    @staticmethod
    def _price(singular: Field[int], split: Field[int], for_x: Field[int]):
        def formula(ctx: ResolutionContext) -> Optional[Price]:
            if ctx.get(singular) != 0:
                return Price.from_cents(ctx.get(singular))
            if ctx.get(split) != 0:
                return Price.from_cents(ctx.get(split), ctx.get(for_x))
            return None
        return formula

    @staticmethod
    def _display_price(singular: Field[int], split: Field[int], for_x: Field[int]):
        def formula(ctx: ResolutionContext) -> str:
            if ctx.get(singular) != 0:
                return format_cents(ctx.get(singular))
            if ctx.get(split) != 0:
                return f"{ctx.get(for_x)} for {format_cents(ctx.get(split))}"
            return ""
        return formula

    @staticmethod
    def _calculator_price(price: Field[Optional[Price]]):
        def formula(ctx: ResolutionContext) -> int:
            value = ctx.get(price)
            return value.calculator if value is not None else 0
        return formula


PRODUCT_MODULE = ProductModule()
