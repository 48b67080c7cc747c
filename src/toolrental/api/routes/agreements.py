"""Rental agreement endpoint."""

from fastapi import APIRouter, Depends

from ...engine import RentalAgreementBuilder
from ...formatting import format_agreement
from ..dependencies import get_builder
from ..schemas import AgreementRequest, AgreementResponse, ErrorResponse

router = APIRouter(prefix="/agreements", tags=["Agreements"])


@router.post(
    "",
    response_model=AgreementResponse,
    responses={422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def create_agreement(
    request: AgreementRequest,
    builder: RentalAgreementBuilder = Depends(get_builder),
):
    """
    Compute a rental agreement.

    Invalid input returns 422 with the error code and the offending field.
    """
    agreement = builder.compute_agreement(
        request.tool_code,
        request.checkout_date,
        request.rental_days,
        request.discount_percent,
    )
    return AgreementResponse(
        **agreement.to_dict(),
        printout=format_agreement(agreement, builder.settings),
    )
