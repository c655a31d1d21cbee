"""
Modelli Pydantic per i dati in ingresso del generatore FatturaPA
"""

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, List, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from fatturapa.models.fatturapa_enums import RegimeFiscale
from fatturapa.services.core.tool import to_decimal

logger = logging.getLogger(__name__)

# Importo accettato come numero o stringa numerica, normalizzato in Decimal
Amount = Annotated[Decimal, BeforeValidator(to_decimal)]

DateInput = Optional[Union[datetime, date, str]]


class FatturaPABaseModel(BaseModel):
    """Record immutabile con alias camelCase (ragioneSociale, lineItems, ...)"""
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CompanyInfo(FatturaPABaseModel):
    """Cedente Prestatore"""
    ragione_sociale: Optional[str] = None
    partita_iva: Optional[str] = None
    codice_fiscale: Optional[str] = None
    indirizzo: Optional[str] = None
    cap: Optional[str] = None
    citta: Optional[str] = None
    provincia: Optional[str] = None
    nazione: Optional[str] = None
    regime_fiscale: str = RegimeFiscale.RF01.value
    iban: Optional[str] = None
    pec: Optional[str] = None
    telefono: Optional[str] = None
    email: Optional[str] = None


class ClientInfo(FatturaPABaseModel):
    """Cessionario Committente"""
    company_name: Optional[str] = None
    vat_number: Optional[str] = None
    fiscal_code: Optional[str] = None
    pec: Optional[str] = None
    sdi: Optional[str] = None

    # Sede: se assente viene emesso un segnaposto
    indirizzo: Optional[str] = None
    cap: Optional[str] = None
    comune: Optional[str] = None
    provincia: Optional[str] = None
    nazione: Optional[str] = None


class InvoiceHeader(FatturaPABaseModel):
    """Dati di testata della fattura"""
    number: str
    issued_date: DateInput = None
    due_date: DateInput = None
    subtotal: Amount
    tax_rate: Amount
    tax_amount: Amount
    total: Amount
    discount: Optional[Amount] = None
    notes: Optional[str] = None
    payment_method: Optional[str] = None

    @field_validator('discount', mode='before')
    @classmethod
    def discount_or_none(cls, v):
        """Sconto vuoto o non numerico: nessuno sconto"""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        try:
            return to_decimal(v)
        except ValueError:
            logger.warning(f"Sconto non valido ignorato: {v!r}")
            return None

    @property
    def discount_amount(self) -> Decimal:
        """Sconto globale, zero se assente"""
        return self.discount if self.discount is not None else Decimal("0")


class LineItem(FatturaPABaseModel):
    """Voce fattura"""
    description: str
    quantity: Amount
    unit_price: Amount
    total: Amount
    sort_order: int = 0


class GenerateFatturaPAParams(FatturaPABaseModel):
    """Parametri completi per validazione e generazione"""
    company: CompanyInfo
    client: ClientInfo
    invoice: InvoiceHeader
    line_items: List[LineItem] = Field(default_factory=list)


class FatturaPAValidationError(FatturaPABaseModel):
    """Errore di validazione per singolo campo"""
    field: str
    message: str


class GeneratedFatturaPA(BaseModel):
    """Risultato della generazione: XML e metadati di trasmissione"""
    xml_content: str
    xml_file_name: str
    progressivo_invio: str
    codice_destinatario: str
    pec_destinatario: Optional[str] = None
