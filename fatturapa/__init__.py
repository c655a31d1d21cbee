"""
Validazione e generazione XML FatturaPA (formato FPR12)
"""
from fatturapa.schemas.fatturapa_models import (
    ClientInfo, CompanyInfo, FatturaPAValidationError, GenerateFatturaPAParams,
    GeneratedFatturaPA, InvoiceHeader, LineItem
)
from fatturapa.services.fatturapa_serializer import FatturaPASerializer, generate_fattura_pa
from fatturapa.services.fatturapa_service import FatturaPAService
from fatturapa.services.fatturapa_validator import FatturaPAValidator, validate_fattura_pa

__all__ = [
    "ClientInfo",
    "CompanyInfo",
    "FatturaPAService",
    "FatturaPASerializer",
    "FatturaPAValidationError",
    "FatturaPAValidator",
    "GenerateFatturaPAParams",
    "GeneratedFatturaPA",
    "InvoiceHeader",
    "LineItem",
    "generate_fattura_pa",
    "validate_fattura_pa",
]
