import logging
from datetime import date
from typing import Callable, List, Optional

from fatturapa.core.exceptions import ExceptionFactory
from fatturapa.core.settings import FatturaPASettings, get_fatturapa_settings
from fatturapa.schemas.fatturapa_models import (
    FatturaPAValidationError, GenerateFatturaPAParams, GeneratedFatturaPA
)
from fatturapa.services.core.tool import progressivo_invio, utc_today
from fatturapa.services.fatturapa_serializer import (
    FatturaPASerializer, codice_destinatario, pec_destinatario
)
from fatturapa.services.fatturapa_validator import FatturaPAValidator, ensure_params
from fatturapa.services.interfaces.fatturapa_service_interface import IFatturaPAService


logger = logging.getLogger(__name__)


class FatturaPAService(IFatturaPAService):
    """
    Servizio FatturaPA

    Combina validazione e generazione XML e calcola i metadati di trasmissione
    (nome file, codice destinatario, PEC) da salvare insieme al documento.
    """

    def __init__(
        self,
        clock: Callable[[], date] = utc_today,
        settings: Optional[FatturaPASettings] = None
    ):
        self.settings = settings or get_fatturapa_settings()
        self.validator = FatturaPAValidator()
        self.serializer = FatturaPASerializer(clock=clock, settings=self.settings)

    def validate(self, params: GenerateFatturaPAParams) -> List[FatturaPAValidationError]:
        return self.validator.validate(params)

    def generate(self, params: GenerateFatturaPAParams) -> str:
        params = ensure_params(params)
        xml_content = self.serializer.to_xml(params)
        logger.info(f"XML FatturaPA generato per fattura {params.invoice.number} "
                    f"({len(params.line_items)} righe)")
        return xml_content

    def build(self, params: GenerateFatturaPAParams) -> GeneratedFatturaPA:
        params = ensure_params(params)

        errors = self.validate(params)
        if errors:
            logger.warning(f"Validazione FatturaPA fallita per fattura {params.invoice.number}: "
                           f"{', '.join(error.field for error in errors)}")
            raise ExceptionFactory.fatturapa_validation_failed([error.model_dump() for error in errors])

        return GeneratedFatturaPA(
            xml_content=self.generate(params),
            xml_file_name=self.xml_file_name(params),
            progressivo_invio=progressivo_invio(params.invoice.number),
            codice_destinatario=codice_destinatario(params.client),
            pec_destinatario=pec_destinatario(params.client),
        )

    def xml_file_name(self, params: GenerateFatturaPAParams) -> str:
        """
        Nome file nel formato SDI {IdPaese}{IdCodice}_{ProgressivoInvio}.xml

        Senza partita IVA del cedente ricade sul numero fattura con '/' sostituito da '-'.
        """
        params = ensure_params(params)
        partita_iva = (params.company.partita_iva or "").strip()
        progressivo = progressivo_invio(params.invoice.number)

        if not partita_iva or not progressivo:
            return f"{params.invoice.number.replace('/', '-')}.xml"

        id_paese = (params.company.nazione or "").strip() or self.settings.default_nazione
        return f"{id_paese}{partita_iva}_{progressivo}.xml"
