"""
Pytest configuration and fixtures for document classification and parsing tests
"""
import sys
from datetime import datetime
from pathlib import Path

import pytest

# backend/ modules are imported flat, as main.py does
backend_dir = Path(__file__).parent.parent / "backend"
sys.path.insert(0, str(backend_dir))

MRZ_LINE1 = "P<UTOSMITH<<JOHN<<<<<<<<<<<<<<<<<<<<<<<<<<<"
MRZ_LINE2 = "L898902C36UTO7408122F1204159<<<<<<<<<<<<<06"


def pytest_configure(config):
    config.addinivalue_line("markers", "mrz: mark test as MRZ related")
    config.addinivalue_line("markers", "api: mark test as exercising the HTTP API")


@pytest.fixture
def mrz_lines():
    return MRZ_LINE1, MRZ_LINE2


@pytest.fixture
def passport_text():
    return (
        "REPUBLIC OF UTOPIA\r\n"
        "PASSPORT\r\n"
        "Surname: SMITH\r\n"
        "Given names: JOHN\r\n"
        f"  {MRZ_LINE1}  \r\n"
        f"{MRZ_LINE2}\r\n"
    )


@pytest.fixture
def emirates_id_text():
    return (
        "UNITED ARAB EMIRATES\n"
        "FEDERAL AUTHORITY FOR IDENTITY & CITIZENSHIP\n"
        "Resident Identity Card\n"
        "ID Number: 784-1990-1234567-1\n"
        "Name: Muhammad Aamar\n"
        "Date of Birth: 12/05/1990\n"
        "Nationality: Pakistan\n"
        "Expiry Date: 11/05/2030\n"
    )


@pytest.fixture
def trade_license_text():
    return (
        "GOVERNMENT OF DUBAI\n"
        "Department of Economic Development\n"
        "TRADE LICENSE\n"
        "License No.: 123822\n"
        "Trade Name: ACME GENERAL TRADING L.L.C\n"
        "Legal Type: Limited Liability Company\n"
        "Issue Date: 15/01/2024\n"
        "Expiry Date: 14/01/2026\n"
        "License Type: Commercial\n"
        "Activities: General Trading of Foodstuff\n"
        "Address: Office 1203, Al Moosa Tower, Sheikh Zayed Road\n"
        "Manager: Ahmed Khan Rashid\n"
        "Nationality: Pakistan\n"
        "Manager Passport: AB1234567\n"
    )


@pytest.fixture
def fixed_clock():
    """Reference 'now' for expiry checks: 1 June 2025"""
    return lambda: datetime(2025, 6, 1, 12, 0, 0)


@pytest.fixture
def client(monkeypatch):
    """Create a test client for the FastAPI app"""
    monkeypatch.setenv("ENHANCEMENT_ENABLED", "false")
    from fastapi.testclient import TestClient
    from main import app

    with TestClient(app) as test_client:
        yield test_client
