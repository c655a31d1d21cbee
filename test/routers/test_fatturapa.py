import pytest
from fastapi.testclient import TestClient

from fatturapa.core.dependencies import get_fatturapa_service
from fatturapa.core.settings import FatturaPASettings
from fatturapa.main import app
from fatturapa.services.fatturapa_service import FatturaPAService

client = TestClient(app)


@pytest.fixture(autouse=True)
def override_service(fixed_clock):
    app.dependency_overrides[get_fatturapa_service] = lambda: FatturaPAService(
        clock=fixed_clock, settings=FatturaPASettings()
    )
    yield
    app.dependency_overrides.clear()


def test_validate_valid_invoice(params):
    response = client.post("/api/v1/fatturapa/validate", json=params)

    assert response.status_code == 200
    assert response.json() == {"valid": True, "errors": []}


def test_validate_invalid_invoice(make_params):
    params = make_params(lineItems=[])
    params["client"]["vatNumber"] = None
    params["client"]["fiscalCode"] = None

    response = client.post("/api/v1/fatturapa/validate", json=params)

    # Verifica della risposta: errori nel body, non nello status
    assert response.status_code == 200
    assert response.json() == {
        "valid": False,
        "errors": [
            {"field": "client.vatNumber", "message": "P.IVA o Codice Fiscale cessionario obbligatorio"},
            {"field": "lineItems", "message": "Almeno una voce fattura obbligatoria"},
        ]
    }


def test_generate_xml(params):
    response = client.post("/api/v1/fatturapa/generate", json=params)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/xml")
    assert response.headers["content-disposition"] == "attachment; filename=IT12345678901_FT2026001.xml"
    assert response.headers["x-codice-destinatario"] == "M5UXCR1"
    assert "x-pec-destinatario" not in response.headers
    assert response.text.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert "<ProgressivoInvio>FT2026001</ProgressivoInvio>" in response.text


def test_generate_xml_with_pec(params):
    params["client"]["sdi"] = ""

    response = client.post("/api/v1/fatturapa/generate", json=params)

    assert response.status_code == 200
    assert response.headers["x-codice-destinatario"] == "0000000"
    assert response.headers["x-pec-destinatario"] == "cliente@pec.it"


def test_generate_invalid_invoice(params):
    params["company"]["ragioneSociale"] = "  "

    response = client.post("/api/v1/fatturapa/generate", json=params)

    assert response.status_code == 400
    assert response.json() == {
        "error_code": "VALIDATION_ERROR",
        "message": "Validazione fallita",
        "details": {
            "errors": [
                {"field": "company.ragioneSociale", "message": "Ragione sociale cedente obbligatoria"}
            ]
        },
        "status_code": 400
    }


def test_generate_non_numeric_amount(params):
    params["invoice"]["total"] = "abc"

    response = client.post("/api/v1/fatturapa/generate", json=params)

    assert response.status_code == 422
    assert response.json()["error_code"] == "VALIDATION_ERROR"


def test_generate_out_of_range_amount(params):
    params["invoice"]["total"] = "1" + "0" * 27

    response = client.post("/api/v1/fatturapa/generate", json=params)

    assert response.status_code == 422
    assert response.json()["error_code"] == "VALIDATION_ERROR"


def test_generate_non_numeric_discount(params):
    params["invoice"]["discount"] = "n/a"

    response = client.post("/api/v1/fatturapa/generate", json=params)

    assert response.status_code == 200
    assert "<ScontoMaggiorazione>" not in response.text
    assert "<ImponibileImporto>1000.00</ImponibileImporto>" in response.text


def test_validate_missing_invoice(params):
    del params["invoice"]

    response = client.post("/api/v1/fatturapa/validate", json=params)

    assert response.status_code == 422


def test_generate_missing_invoice(params):
    del params["invoice"]

    response = client.post("/api/v1/fatturapa/generate", json=params)

    assert response.status_code == 422


def test_health_check():
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
