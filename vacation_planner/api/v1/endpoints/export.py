"""
Trip Export API Endpoints
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from vacation_planner.api.deps import get_exporter, get_planner
from vacation_planner.services.export_service import ExportService
from vacation_planner.services.trip_planner import TripPlannerService

router = APIRouter()

PDF_MEDIA_TYPE = "application/pdf"
EXCEL_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

def attachment(content: bytes, media_type: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )

@router.get("/pdf/{trip_id}")
async def export_pdf(
    trip_id: int,
    planner: TripPlannerService = Depends(get_planner),
    exporter: ExportService = Depends(get_exporter)
):
    """
    Download a trip as PDF
    """
    plan = await planner.get_trip(trip_id)
    if not plan:
        raise HTTPException(status_code=404, detail="Trip not found")
    return attachment(exporter.render_pdf(plan), PDF_MEDIA_TYPE, f"trip_{trip_id}.pdf")

@router.get("/excel/{trip_id}")
async def export_excel(
    trip_id: int,
    planner: TripPlannerService = Depends(get_planner),
    exporter: ExportService = Depends(get_exporter)
):
    """
    Download a trip as an Excel workbook
    """
    plan = await planner.get_trip(trip_id)
    if not plan:
        raise HTTPException(status_code=404, detail="Trip not found")
    return attachment(exporter.render_excel(plan), EXCEL_MEDIA_TYPE, f"trip_{trip_id}.xlsx")
