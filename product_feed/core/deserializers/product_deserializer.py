"""
Fixed-width deserializer for product lines.

Layout (0-based, end exclusive):

    Product Id                    0 -   8
    Product Description           9 -  68  (trimmed)
    Regular Singular Price       69 -  77
    Promotional Singular Price   78 -  86
    Regular Split Price          87 -  95
    Promotional Split Price      96 - 104
    Regular For X               105 - 113
    Promotional For X           114 - 122
    Flags                       123 - 132  (9 x Y/N)
    Product Size                133 - 142  (trimmed)
"""

from typing import Any

from product_feed.core.fields import Field, Record
from product_feed.core.models.product import PRODUCT_MODULE, ProductModule

from .base_deserializer import LineBasedDeserializer
from .converters import slice_field
from .errors import ConflictingPriceError, InvalidForXError, MissingPriceError, TooShortError


class ProductRecordDeserializer(LineBasedDeserializer[Record]):
    """
    Parse product lines into records of a ProductModule.

    Validation runs in a single pass: line length, then each slice in layout
    order, then the price groups. The regular price group is required; the
    promotional one is optional.
    """

    def __init__(self, module: ProductModule = PRODUCT_MODULE):
        self.module = module
        m = module
        self.layout: tuple[tuple[int, int, Field[Any]], ...] = (
            (0, 8, m.product_id),
            (9, 68, m.product_description),
            (69, 77, m.regular_singular_price),
            (78, 86, m.promotional_singular_price),
            (87, 95, m.regular_split_price),
            (96, 104, m.promotional_split_price),
            (105, 113, m.regular_for_x),
            (114, 122, m.promotional_for_x),
            (123, 132, m.flags),
            (133, 142, m.product_size),
        )
        self.min_length = max(end for _, end, _ in self.layout)
        # (group, singular, split, for X)
        self.price_groups = (
            ("Regular", m.regular_singular_price, m.regular_split_price, m.regular_for_x),
            ("Promotional", m.promotional_singular_price, m.promotional_split_price, m.promotional_for_x),
        )

    def parse_record(self, data: str) -> Record:
        if len(data) < self.min_length:
            raise TooShortError(self.min_length, len(data))

        raw_values = dict(slice_field(data, start, end, field) for start, end, field in self.layout)

        for group, singular, split, for_x in self.price_groups:
            self._check_price_group(raw_values, group, singular, split, for_x)

        # A product must always carry a regular price
        group, singular, split, _ = self.price_groups[0]
        if raw_values[singular] == 0 and raw_values[split] == 0:
            raise MissingPriceError(group, singular.name, split.name)

        return self.module.record(raw_values)

    @staticmethod
    def _check_price_group(
        raw_values: dict[Field[Any], Any],
        group: str,
        singular: Field[int],
        split: Field[int],
        for_x: Field[int],
    ) -> None:
        """
        Validate one price group.

        Raises:
            ConflictingPriceError: Both singular and split price are non-zero
            InvalidForXError: Split price is set but its for-X count is not positive
        """
        singular_price = raw_values[singular]
        split_price = raw_values[split]

        if singular_price != 0 and split_price != 0:
            raise ConflictingPriceError(group, singular.name, split.name)
        if split_price != 0 and raw_values[for_x] <= 0:
            raise InvalidForXError(group, for_x.name, raw_values[for_x])
