import logging
from typing import Any, List, Optional, Union

from fatturapa.schemas.fatturapa_models import FatturaPAValidationError, GenerateFatturaPAParams


logger = logging.getLogger(__name__)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


class FatturaPAValidator:
    """
    Validatore dei campi minimi obbligatori FatturaPA

    Tutte le regole vengono valutate ad ogni chiamata: gli errori si accumulano
    e vengono restituiti insieme, senza sollevare eccezioni.
    """

    MESSAGES = {
        'company.partitaIva': 'P.IVA cedente obbligatoria',
        'company.ragioneSociale': 'Ragione sociale cedente obbligatoria',
        'client.vatNumber': 'P.IVA o Codice Fiscale cessionario obbligatorio',
        'lineItems': 'Almeno una voce fattura obbligatoria',
    }

    def validate(self, params: Union[GenerateFatturaPAParams, dict]) -> List[FatturaPAValidationError]:
        """Restituisce la lista degli errori (vuota se i dati sono validi)"""
        params = ensure_params(params)
        errors: List[FatturaPAValidationError] = []

        if _is_blank(params.company.partita_iva):
            self._add_error(errors, 'company.partitaIva')

        if _is_blank(params.company.ragione_sociale):
            self._add_error(errors, 'company.ragioneSociale')

        if _is_blank(params.client.vat_number) and _is_blank(params.client.fiscal_code):
            self._add_error(errors, 'client.vatNumber')

        if not params.line_items:
            self._add_error(errors, 'lineItems')

        return errors

    def _add_error(self, errors: List[FatturaPAValidationError], field: str) -> None:
        message = self.MESSAGES[field]
        logger.debug(f"Regola violata: {field} - {message}")
        errors.append(FatturaPAValidationError(field=field, message=message))


def ensure_params(params: Any) -> GenerateFatturaPAParams:
    """Accetta il modello o un dict con le stesse chiavi (camelCase o snake_case)"""
    if isinstance(params, GenerateFatturaPAParams):
        return params
    return GenerateFatturaPAParams.model_validate(params)


def validate_fattura_pa(params: Union[GenerateFatturaPAParams, dict]) -> List[FatturaPAValidationError]:
    return FatturaPAValidator().validate(params)
