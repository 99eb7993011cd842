from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Planset:
    """Site survey / proposal intake for one project.

    File attachment fields hold references (paths or URLs) produced by the
    upload handler; the files themselves are stored elsewhere.
    """

    id: str
    project_id: str

    company_name: str
    customer_name: str
    customer_email: str
    site_address: str
    city: str
    state: str
    mount_type: str
    property_type: str
    job_type: str

    created_at: datetime
    updated_at: datetime

    # Intake timing
    timezone: Optional[str] = None
    received_time: Optional[str] = None
    portal_name: Optional[str] = None

    customer_phone: Optional[str] = None
    coordinates: Optional[str] = None

    apn_number: Optional[str] = None
    authority_having_jurisdiction: Optional[str] = None
    utility_name: Optional[str] = None
    add_on_equipments: Optional[str] = None
    governing_codes: Optional[str] = None

    new_construction: bool = False
    existing_solar_system: bool = False

    module_manufacturer: Optional[str] = None
    module_model_no: Optional[str] = None
    module_quantity: Optional[int] = None

    inverter_manufacturer: Optional[str] = None
    inverter_model_no: Optional[str] = None
    inverter_quantity: Optional[int] = None

    proposal_design_files: list[str] = field(default_factory=list)
    sitesurvey_attachments: list[str] = field(default_factory=list)
    additional_comments: Optional[str] = None
