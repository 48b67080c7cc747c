"""Access to the reference data and builder attached to the running app."""

from fastapi import Request

from ..catalog import ReferenceData
from ..engine import RentalAgreementBuilder


def get_reference_data(request: Request) -> ReferenceData:
    return request.app.state.reference_data


def get_builder(request: Request) -> RentalAgreementBuilder:
    return request.app.state.builder
