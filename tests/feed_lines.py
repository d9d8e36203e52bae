"""
Builders for fixed-width product lines used across the test suite.
"""

KIMCHI_RICE_LINE = (
    "80000001 Kimchi-flavored white rice                                  "
    "00000567 00000000 00000000 00000000 00000000 00000000 NNNNNNNNN      18oz"
)
GENERIC_SODA_LINE = (
    "14963801 Generic Soda 12-pack                                        "
    "00000000 00000549 00001300 00000000 00000002 00000000 NNNNYNNNN   12x12oz"
)

LINE_LENGTH = 142


def _number(value, width=8):
    if isinstance(value, str):
        assert len(value) == width, f"raw slice {value!r} must be {width} characters"
        return value
    return f"{value:0{width}d}"


def build_line(
    product_id=1,
    description="Test product",
    regular_singular=100,
    promotional_singular=0,
    regular_split=0,
    promotional_split=0,
    regular_for_x=0,
    promotional_for_x=0,
    flags="NNNNNNNNN",
    size="each",
):
    """
    Build a product line with each slice padded to its layout width.

    Numeric arguments may be ints (zero padded) or 8-character strings
    (used verbatim, to inject malformed slices).
    """
    assert len(flags) == 9
    line = " ".join([
        _number(product_id),
        description.ljust(59),
        _number(regular_singular),
        _number(promotional_singular),
        _number(regular_split),
        _number(promotional_split),
        _number(regular_for_x),
        _number(promotional_for_x),
        flags,
        size.rjust(9),
    ])
    assert len(line) == LINE_LENGTH
    return line


def flags_string(flags):
    """Render a sequence of booleans as Y/N characters."""
    return "".join("Y" if f else "N" for f in flags)
