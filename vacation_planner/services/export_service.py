"""
Export Service
Renders a finished trip plan as a PDF document or an Excel workbook
"""

import io
import logging
from typing import List
from xml.sax.saxutils import escape

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from vacation_planner.schemas.trip import TripPlan

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"


def summary_rows(plan: TripPlan) -> List[dict]:
    rows = [
        {"Field": "Destination", "Value": plan.destination},
        {"Field": "Start Date", "Value": plan.start_date.strftime(DATE_FORMAT)},
        {"Field": "End Date", "Value": plan.end_date.strftime(DATE_FORMAT)},
        {"Field": "Theme", "Value": plan.theme},
        {"Field": "Group Size", "Value": plan.group_size},
        {"Field": "Total Budget", "Value": f"{plan.total_budget:.2f} {plan.currency}"},
    ]

    if plan.transportation is not None:
        flight = plan.transportation
        rows.append({
            "Field": "Flight",
            "Value": f"{flight.provider} {flight.origin} -> {flight.destination} ({flight.cost:.2f})",
        })
    if plan.accommodation is not None:
        hotel = plan.accommodation
        rows.append({
            "Field": "Hotel",
            "Value": f"{hotel.name}, {hotel.nights} nights ({hotel.total_cost:.2f})",
        })
    return rows


def itinerary_rows(plan: TripPlan) -> List[dict]:
    rows = []
    for itinerary in plan.daily_itineraries:
        slots = (
            ("Morning", itinerary.morning_activities),
            ("Afternoon", itinerary.afternoon_activities),
            ("Evening", itinerary.evening_activities),
        )
        for slot, activities in slots:
            for activity in activities:
                rows.append({
                    "Day": itinerary.day,
                    "Date": itinerary.date.strftime(DATE_FORMAT),
                    "Slot": slot,
                    "Activity": activity.name,
                    "Type": activity.type,
                    "Cost": round(activity.cost, 2),
                })
    return rows


def budget_rows(plan: TripPlan) -> List[dict]:
    breakdown = plan.budget_breakdown
    return [
        {"Category": "Transportation", "Amount": round(breakdown.transportation, 2)},
        {"Category": "Accommodation", "Amount": round(breakdown.accommodation, 2)},
        {"Category": "Food", "Amount": round(breakdown.food, 2)},
        {"Category": "Activities", "Amount": round(breakdown.activities, 2)},
        {"Category": "Miscellaneous", "Amount": round(breakdown.misc, 2)},
        {"Category": "Total", "Amount": round(breakdown.total, 2)},
    ]


class ExportService:
    """Formats plans only; nothing is recalculated"""

    def render_excel(self, plan: TripPlan) -> bytes:
        """Workbook with Summary, Itinerary and Budget sheets"""
        buffer = io.BytesIO()

        itinerary = pd.DataFrame(
            itinerary_rows(plan),
            columns=["Day", "Date", "Slot", "Activity", "Type", "Cost"]
        )

        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            pd.DataFrame(summary_rows(plan)).to_excel(writer, sheet_name="Summary", index=False)
            itinerary.to_excel(writer, sheet_name="Itinerary", index=False)
            pd.DataFrame(budget_rows(plan)).to_excel(writer, sheet_name="Budget", index=False)

        logger.info("Rendered Excel export for trip to %s", plan.destination)
        return buffer.getvalue()

    def render_pdf(self, plan: TripPlan) -> bytes:
        buffer = io.BytesIO()
        styles = getSampleStyleSheet()
        document = SimpleDocTemplate(buffer, pagesize=A4, title=f"Trip to {plan.destination}")

        story = [
            Paragraph(f"Trip to {escape(plan.destination)}", styles["Title"]),
            Spacer(1, 12),
        ]
        for row in summary_rows(plan):
            story.append(Paragraph(f"<b>{row['Field']}:</b> {escape(str(row['Value']))}", styles["Normal"]))

        story.append(Spacer(1, 12))
        story.append(Paragraph("Budget", styles["Heading2"]))
        story.append(self._table(
            [["Category", "Amount"]]
            + [[row["Category"], f"{row['Amount']:.2f}"] for row in budget_rows(plan)]
        ))

        for itinerary in plan.daily_itineraries:
            story.append(Spacer(1, 12))
            story.append(Paragraph(
                f"Day {itinerary.day} - {itinerary.date.strftime(DATE_FORMAT)}", styles["Heading2"]
            ))
            rows = [["Slot", "Activity", "Cost"]]
            rows += [
                [row["Slot"], row["Activity"], f"{row['Cost']:.2f}"]
                for row in itinerary_rows(plan) if row["Day"] == itinerary.day
            ]
            story.append(self._table(rows))

        document.build(story)
        logger.info("Rendered PDF export for trip to %s", plan.destination)
        return buffer.getvalue()

    def _table(self, rows: List[list]) -> Table:
        table = Table(rows, hAlign="LEFT")
        table.setStyle(TableStyle([
            ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ]))
        return table
