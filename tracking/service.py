"""
Tracking Number Issuing Service

Issues a tracking number for one shipment:
1. Validate the shipment metadata (countries, weight, customer)
2. Derive the shipper code from the customer slug
3. Draw the next value from the sequence source
4. Generate the tracking number
5. Return a ShipmentRecord ready for the persistence layer

Nothing is stored here. Arguments arrive already typed (UUID, datetime,
float); turning request parameters into those types belongs to the caller.
"""

import logging
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from tracking.codec import TrackingNumberGenerator
from tracking.errors import (
    InvalidCountryCodeError,
    InvalidCustomerIdError,
    InvalidCustomerNameError,
    InvalidWeightError,
    SequenceSourceError,
)
from tracking.sequence import SequenceSource
from tracking.shipper import derive_shipper_code

logger = logging.getLogger(__name__)


class ShipmentRecord(BaseModel):
    """A freshly issued tracking number plus its shipment metadata."""
    tracking_number: str = Field(..., min_length=1, max_length=16)
    shipper_code: str = Field(..., min_length=4, max_length=4)
    created_at: str = Field(..., description="ISO 8601 timestamp with offset")
    weight: float = Field(..., gt=0, description="Weight in kg")
    source_country_code: str = Field(..., min_length=2, max_length=2)
    destination_country_code: str = Field(..., min_length=2, max_length=2)
    customer_id: UUID
    customer_name: str

    class Config:
        frozen = True


def _country_code(value, label: str) -> str:
    if not isinstance(value, str) or len(value) != 2 or not value.isalpha():
        raise InvalidCountryCodeError(
            f"{label} country code must be in ISO 3166-1 alpha-2 format, got {value!r}"
        )
    return value.upper()


class TrackingNumberService:
    """Combines a generator and a sequence source to issue tracking numbers."""

    def __init__(self, generator: TrackingNumberGenerator, sequence_source: SequenceSource):
        self.generator = generator
        self.sequence_source = sequence_source

    def issue_tracking_number(
        self,
        origin_country_id: str,
        destination_country_id: str,
        weight: float,
        customer_id: UUID,
        customer_name: str,
        customer_slug: Optional[str] = None,
        created_at: Optional[datetime] = None
    ) -> ShipmentRecord:
        """
        Issue a new tracking number for a shipment.

        Args:
            origin_country_id: Origin country (ISO 3166-1 alpha-2)
            destination_country_id: Destination country (ISO 3166-1 alpha-2)
            weight: Shipment weight in kilograms, must be positive
            customer_id: Customer UUID
            customer_name: Customer display name
            customer_slug: Customer name in kebab-case, source of the shipper code
            created_at: Shipment creation time (defaults to now, UTC)

        Returns:
            ShipmentRecord

        Raises:
            InvalidCountryCodeError, InvalidWeightError, InvalidCustomerIdError,
            InvalidCustomerNameError: Metadata failed validation
            SequenceSourceError: The sequence source failed
            InvalidShipperCodeError: The slug produced an illegal shipper code
            SequenceOverflowError: The sequence no longer fits 8 base-36 characters
        """
        source_country = _country_code(origin_country_id, "Origin")
        destination_country = _country_code(destination_country_id, "Destination")

        if isinstance(weight, bool) or not isinstance(weight, (int, float)) or not weight > 0:
            raise InvalidWeightError(f"Weight must be a positive number, got {weight!r}")

        if not isinstance(customer_id, UUID):
            raise InvalidCustomerIdError(f"Customer ID must be a UUID, got {customer_id!r}")

        if not isinstance(customer_name, str) or not customer_name.strip():
            raise InvalidCustomerNameError("Customer name cannot be null or empty")

        shipper_code = derive_shipper_code(customer_slug)

        try:
            sequence_value = self.sequence_source.next_value()
        except Exception as e:
            logger.error("Error getting next sequence value: %s", e)
            raise SequenceSourceError("Failed to generate sequence for tracking number") from e
        logger.debug("Generated sequence value: %s", sequence_value)

        tracking_number = self.generator.next_tracking_number(shipper_code, sequence_value)

        if created_at is None:
            created_at = datetime.now(timezone.utc)

        record = ShipmentRecord(
            tracking_number=str(tracking_number),
            shipper_code=shipper_code,
            created_at=created_at.isoformat(),
            weight=float(weight),
            source_country_code=source_country,
            destination_country_code=destination_country,
            customer_id=customer_id,
            customer_name=customer_name,
        )
        logger.info("Issued tracking number %s for customer %s", record.tracking_number, customer_id)
        return record

    def check_tracking_number(self, identifier: Optional[str]) -> bool:
        """True if the tracking number's check character is correct."""
        return self.generator.validate(identifier)
