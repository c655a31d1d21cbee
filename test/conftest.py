"""
Fixture condivise per i test FatturaPA
"""
import copy
from datetime import date

import pytest

FIXED_TODAY = date(2026, 3, 1)

VALID_PARAMS = {
    "company": {
        "ragioneSociale": "FODI SRL",
        "partitaIva": "12345678901",
        "codiceFiscale": "12345678901",
        "indirizzo": "Via Roma 1",
        "cap": "00100",
        "citta": "Roma",
        "provincia": "RM",
        "nazione": "IT",
        "regimeFiscale": "RF01",
        "iban": "IT60X0542811101000000123456",
        "pec": "fodi@pec.it",
        "telefono": "+390612345678",
        "email": "info@fodisrl.it",
    },
    "client": {
        "companyName": "Cliente Test SRL",
        "vatNumber": "98765432109",
        "fiscalCode": "RSSMRA80A01H501Z",
        "pec": "cliente@pec.it",
        "sdi": "M5UXCR1",
    },
    "invoice": {
        "number": "FT-2026/001",
        "issuedDate": "2026-01-15",
        "dueDate": "2026-02-15",
        "subtotal": "1000.00",
        "taxRate": "22",
        "taxAmount": "220.00",
        "total": "1220.00",
        "discount": "0",
        "notes": "Test fattura",
        "paymentMethod": "bonifico",
    },
    "lineItems": [
        {
            "description": "Servizio di consulenza",
            "quantity": 10,
            "unitPrice": "50.00",
            "total": "500.00",
            "sortOrder": 1,
        },
        {
            "description": "Sviluppo software",
            "quantity": 5,
            "unitPrice": "100.00",
            "total": "500.00",
            "sortOrder": 2,
        },
    ],
}


def make_valid_params(**overrides) -> dict:
    """Parametri validi (dict camelCase), con eventuali sezioni sostituite"""
    params = copy.deepcopy(VALID_PARAMS)
    params.update(copy.deepcopy(overrides))
    return params


@pytest.fixture
def params() -> dict:
    """Copia modificabile dei parametri validi"""
    return make_valid_params()


@pytest.fixture
def fixed_clock():
    """Sorgente data deterministica"""
    return lambda: FIXED_TODAY


@pytest.fixture
def make_params():
    """Factory dei parametri, per sostituire intere sezioni (es. lineItems)"""
    return make_valid_params


@pytest.fixture
def fixed_today() -> date:
    return FIXED_TODAY
