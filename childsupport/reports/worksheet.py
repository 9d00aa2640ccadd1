"""Line-numbered worksheet report generator."""

from decimal import Decimal
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from childsupport.models.results import CaseOutputs

TEMPLATE_DIR = Path(__file__).parent / "templates"

# Human labels for the stable worksheet keys.
LINE_LABELS: dict[str, str] = {
    "line2_p1AAI": "Adjusted actual income, Parent 1",
    "line2_p2AAI": "Adjusted actual income, Parent 2",
    "line3_p1Share": "Income share, Parent 1",
    "line3_p2Share": "Income share, Parent 2",
    "line4_basic": "Basic child support obligation",
    "line4_usedRowIncome": "Schedule row used (combined income)",
    "line5_totalAddOns": "Add-on expenses",
    "line5_totalObligation": "Total child support obligation",
    "line5_adjustedBasic": "Shared custody adjusted basic (x1.5)",
    "line6_p1Obligation": "Obligation, Parent 1",
    "line6_p2Obligation": "Obligation, Parent 2",
    "line6_overnightsP1": "Overnights, Parent 1",
    "line6_overnightsP2": "Overnights, Parent 2",
    "line7_p1DirectPay": "Direct payments, Parent 1",
    "line7_p2DirectPay": "Direct payments, Parent 2",
    "line7_pctP1": "Overnight percentage, Parent 1",
    "line7_pctP2": "Overnight percentage, Parent 2",
    "line8_p1Recommended": "Recommended amount, Parent 1",
    "line8_p2Recommended": "Recommended amount, Parent 2",
    "line8_p1ShareAdjustedBasic": "Share of adjusted basic, Parent 1",
    "line8_p2ShareAdjustedBasic": "Share of adjusted basic, Parent 2",
    "line9_recommendedOrder": "Recommended child support order",
    "line9_p1Theoretical": "Theoretical obligation, Parent 1",
    "line9_p2Theoretical": "Theoretical obligation, Parent 2",
    "line10_p1Adjustment": "92-109 overnight adjustment, Parent 1",
    "line10_p2Adjustment": "92-109 overnight adjustment, Parent 2",
    "line11_p1AfterAdjustment": "Obligation after adjustment, Parent 1",
    "line11_p2AfterAdjustment": "Obligation after adjustment, Parent 2",
    "line13_totalAddOns": "Add-on expenses",
    "line13_p1Share": "Add-on share, Parent 1",
    "line13_p2Share": "Add-on share, Parent 2",
    "line14_p1Total": "Total obligation, Parent 1",
    "line14_p2Total": "Total obligation, Parent 2",
    "line15_p1DirectPay": "Direct payments, Parent 1",
    "line15_p2DirectPay": "Direct payments, Parent 2",
    "line15_p1Recommended": "Recommended amount, Parent 1",
    "line15_p2Recommended": "Recommended amount, Parent 2",
    "line16_beforeCap": "Net amount before cap",
    "line16_cappedAmount": "Net amount after primary custody cap",
}

# Keys rendered as percentages or counts rather than money.
PERCENT_KEYS = {"line3_p1Share", "line3_p2Share", "line7_pctP1", "line7_pctP2"}
COUNT_KEYS = {"line6_overnightsP1", "line6_overnightsP2"}


def line_number(key: str) -> str:
    """'line15_p1DirectPay' -> '15'."""
    return key.split("_", 1)[0].removeprefix("line")


def format_value(key: str, value: Decimal) -> str:
    if key in PERCENT_KEYS:
        return f"{value * 100:.2f}%"
    if key in COUNT_KEYS:
        return f"{value:.0f}"
    return f"${value:,.2f}"


class WorksheetReportGenerator:
    """Renders a CaseOutputs as a plain-text worksheet."""

    def __init__(self) -> None:
        self.env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)))

    def render(self, outputs: CaseOutputs) -> str:
        template = self.env.get_template("worksheet.txt")
        lines = [
            {
                "number": line_number(key),
                "label": LINE_LABELS.get(key, key),
                "value": format_value(key, value),
            }
            for key, value in outputs.worksheet.items()
        ]
        return template.render(out=outputs, lines=lines)
