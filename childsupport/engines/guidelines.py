"""Statutory worksheet constants.

Multipliers, thresholds and tolerances used by Worksheets A and B. Never
hardcode these in computation functions.

Sources:
  - Md. Code, Family Law Section 12-201 (definitions, shared custody threshold)
  - Md. Code, Family Law Section 12-204 (schedule, add-ons, multifamily allowance)
"""

from decimal import Decimal

from childsupport.models.case import NIGHTS_PER_YEAR

# ---------------------------------------------------------------------------
# Overnights
# ---------------------------------------------------------------------------
NIGHTS_IN_YEAR = Decimal(NIGHTS_PER_YEAR)

# Each parent must keep the child at least 25% of overnights (~92 nights) for
# Worksheet B to apply.
SHARED_CUSTODY_THRESHOLD = Decimal("0.25")

# Shared custody uses 1.5x the basic obligation ("adjusted basic").
SHARED_CUSTODY_MULTIPLIER = Decimal("1.5")

# ---------------------------------------------------------------------------
# 92-109 overnight adjustment band
# Reduction is 100% of the theoretical obligation at 92 nights and falls
# linearly to 0% at 110 nights.
# ---------------------------------------------------------------------------
ADJUSTMENT_BAND_START = 92
ADJUSTMENT_BAND_END = 110  # exclusive
ADJUSTMENT_BAND_SPAN = Decimal(ADJUSTMENT_BAND_END - ADJUSTMENT_BAND_START)

# ---------------------------------------------------------------------------
# Multifamily allowance: 75% of the one-child basic obligation per in-home child
# ---------------------------------------------------------------------------
MULTIFAMILY_ALLOWANCE_RATE = Decimal("0.75")
MULTIFAMILY_CHILD_COUNT = 1

# ---------------------------------------------------------------------------
# Income shares
# ---------------------------------------------------------------------------
# Policy fallback when combined AAI is exactly zero.
ZERO_INCOME_SHARE = Decimal("0.5")

# ---------------------------------------------------------------------------
# Comparison tolerance for "equal" money amounts
# ---------------------------------------------------------------------------
AMOUNT_TOLERANCE = Decimal("1e-6")

ZERO = Decimal("0")
