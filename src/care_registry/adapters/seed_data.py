"""
Built-in seed records.

The default contents of the patient and practitioner stores when no
record file is configured.
"""

from __future__ import annotations

from typing import List

from care_registry.domain.entities import Gender, Patient, Practitioner

# (id, name, date of birth, gender, email, phone, address)
SEED_PATIENTS = [
    ("P001", "John Smith", "1985-03-15", Gender.MALE,
     "john.smith@email.com", "+1-555-0101", "123 Main St, Anytown, USA"),
    ("P002", "Sarah Johnson", "1990-07-22", Gender.FEMALE,
     "sarah.johnson@email.com", "+1-555-0102", "456 Oak Ave, Somewhere, USA"),
    ("P003", "Michael Brown", "1978-11-08", Gender.MALE,
     "michael.brown@email.com", "+1-555-0103", "789 Pine Rd, Elsewhere, USA"),
    ("P004", "Emily Davis", "1992-04-12", Gender.FEMALE,
     "emily.davis@email.com", "+1-555-0104", "321 Elm St, Nowhere, USA"),
    ("P005", "David Wilson", "1983-09-30", Gender.MALE,
     "david.wilson@email.com", "+1-555-0105", "654 Maple Dr, Anywhere, USA"),
    ("P006", "Lisa Anderson", "1988-12-03", Gender.FEMALE,
     "lisa.anderson@email.com", "+1-555-0106", "987 Cedar Ln, Someplace, USA"),
    ("P007", "Robert Taylor", "1975-06-18", Gender.MALE,
     "robert.taylor@email.com", "+1-555-0107", "147 Birch Blvd, Elsewhere, USA"),
    ("P008", "Jennifer Martinez", "1995-01-25", Gender.FEMALE,
     "jennifer.martinez@email.com", "+1-555-0108", "258 Spruce Way, Anywhere, USA"),
]

# (id, name, specialty, email, phone, license number, years of experience)
SEED_PRACTITIONERS = [
    ("DOC001", "Dr. Alice Johnson", "Cardiology",
     "alice.johnson@hospital.com", "+1-555-0201", "MD12345", 15),
    ("DOC002", "Dr. Robert Chen", "Neurology",
     "robert.chen@hospital.com", "+1-555-0202", "MD12346", 12),
    ("DOC003", "Dr. Maria Garcia", "Pediatrics",
     "maria.garcia@hospital.com", "+1-555-0203", "MD12347", 8),
    ("DOC004", "Dr. James Wilson", "Orthopedics",
     "james.wilson@hospital.com", "+1-555-0204", "MD12348", 20),
    ("DOC005", "Dr. Lisa Thompson", "Dermatology",
     "lisa.thompson@hospital.com", "+1-555-0205", "MD12349", 10),
    ("DOC006", "Dr. Michael Brown", "Cardiology",
     "michael.brown@hospital.com", "+1-555-0206", "MD12350", 18),
    ("DOC007", "Dr. Sarah Williams", "Oncology",
     "sarah.williams@hospital.com", "+1-555-0207", "MD12351", 14),
    ("DOC008", "Dr. David Lee", "Psychiatry",
     "david.lee@hospital.com", "+1-555-0208", "MD12352", 22),
]


def seed_patients() -> List[Patient]:
    """Build the built-in patient records."""
    return [
        Patient(
            id=record_id,
            name=name,
            date_of_birth=date_of_birth,
            gender=gender,
            email=email,
            phone=phone,
            address=address,
        )
        for record_id, name, date_of_birth, gender, email, phone, address in SEED_PATIENTS
    ]


def seed_practitioners() -> List[Practitioner]:
    """Build the built-in practitioner records."""
    return [
        Practitioner(
            id=record_id,
            name=name,
            specialty=specialty,
            email=email,
            phone=phone,
            license_number=license_number,
            years_of_experience=years,
        )
        for record_id, name, specialty, email, phone, license_number, years
        in SEED_PRACTITIONERS
    ]
