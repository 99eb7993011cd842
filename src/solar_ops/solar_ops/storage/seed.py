"""Demo records loaded at startup when SEED_SAMPLE_DATA is enabled."""
from __future__ import annotations

from ..container import Container

SAMPLE_EMPLOYEES = [
    {"name": "John Smith", "email": "john.smith@prootly.com", "role": "Project Manager"},
    {"name": "Sarah Johnson", "email": "sarah.johnson@prootly.com", "role": "Solar Engineer"},
]

SAMPLE_CLIENTS = [
    {
        "company_name": "Green Energy Solutions",
        "contact_person": "Michael Brown",
        "email": "michael@greenenergy.com",
        "phone": "+1-555-0123",
        "notes": "Leading renewable energy company",
    },
    {
        "company_name": "Solar Dynamics",
        "contact_person": "Lisa Davis",
        "email": "lisa@solardynamics.com",
        "phone": "+1-555-0456",
        "notes": "Residential solar installations",
    },
]

SAMPLE_PROJECTS = [
    {"name": "Residential Solar Installation", "status": "completed"},
    {"name": "Commercial Solar Array", "status": "new"},
]

SAMPLE_COMMENTS = [
    {
        "author": "SON LIGHT CONSTRUCTION",
        "company": "Mercedes Melendez",
        "text": "Hello. Any update on these revisions? It's been a few...",
    },
    {
        "author": "JOHNSUN ENERGY",
        "company": "Project Manager",
        "text": "Project timeline updated. Ready for next phase review.",
    },
]


def seed_sample_data(container: Container) -> None:
    for payload in SAMPLE_EMPLOYEES:
        container.employee_service.create(payload)

    clients = [container.client_service.create(payload) for payload in SAMPLE_CLIENTS]

    # Each sample project belongs to the sample client at the same position.
    for payload, client in zip(SAMPLE_PROJECTS, clients):
        container.project_service.create({**payload, "client_id": client.id})

    for payload in SAMPLE_COMMENTS:
        container.comment_service.create(payload)
