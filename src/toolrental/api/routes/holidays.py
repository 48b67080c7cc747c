"""Holiday calendar endpoints."""

from datetime import MAXYEAR, MINYEAR

from fastapi import APIRouter, Depends, Path

from ...engine import RentalAgreementBuilder
from ..dependencies import get_builder
from ..schemas import HolidayResponse

router = APIRouter(prefix="/holidays", tags=["Holidays"])


@router.get("/{year}", response_model=list[HolidayResponse])
def list_holidays(
    year: int = Path(..., ge=MINYEAR, le=MAXYEAR, description="Calendar year"),
    builder: RentalAgreementBuilder = Depends(get_builder),
):
    """
    List the holidays observed in a year.

    Fixed holidays are shown on their observed date, after any weekend slide.
    """
    calendar = builder.calendar
    return [
        HolidayResponse(
            date=observed.isoformat(),
            weekday=observed.strftime("%A"),
            name=calendar.holiday_name(observed),
        )
        for observed in sorted(calendar.holidays_for_year(year))
    ]
