from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..common.schemas import PayloadSchema


class PlansetCreate(PayloadSchema):
    project_id: str = Field(min_length=1)

    timezone: Optional[str] = None
    received_time: Optional[str] = None
    portal_name: Optional[str] = None
    company_name: str = Field(min_length=1)

    customer_name: str = Field(min_length=1)
    customer_email: str = Field(min_length=3)
    customer_phone: Optional[str] = None
    site_address: str = Field(min_length=1)
    city: str = Field(min_length=1)
    state: str = Field(min_length=1)

    coordinates: Optional[str] = None

    apn_number: Optional[str] = None
    authority_having_jurisdiction: Optional[str] = None
    utility_name: Optional[str] = None
    mount_type: str = Field(min_length=1)
    add_on_equipments: Optional[str] = None
    governing_codes: Optional[str] = None

    # residential | commercial
    property_type: str = Field(min_length=1)
    # pv | pv+battery | battery
    job_type: str = Field(min_length=1)
    new_construction: bool = False

    module_manufacturer: Optional[str] = None
    module_model_no: Optional[str] = None
    module_quantity: Optional[int] = Field(default=None, ge=0)

    inverter_manufacturer: Optional[str] = None
    inverter_model_no: Optional[str] = None
    inverter_quantity: Optional[int] = Field(default=None, ge=0)

    existing_solar_system: bool = False

    proposal_design_files: list[str] = Field(default_factory=list)
    sitesurvey_attachments: list[str] = Field(default_factory=list)
    additional_comments: Optional[str] = None
