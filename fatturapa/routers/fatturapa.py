"""
Router FastAPI per FatturaPA
"""

from typing import List

from fastapi import APIRouter, status
from fastapi.responses import Response
from pydantic import BaseModel

from fatturapa.core.dependencies import fatturapa_service_dependency
from fatturapa.schemas.fatturapa_models import FatturaPAValidationError, GenerateFatturaPAParams

router = APIRouter(prefix="/api/v1/fatturapa", tags=["FatturaPA"])


class ValidationResponse(BaseModel):
    """Response per validazione"""
    valid: bool
    errors: List[FatturaPAValidationError]


@router.post("/validate", response_model=ValidationResponse, status_code=status.HTTP_200_OK)
async def validate_fattura(params: GenerateFatturaPAParams, service: fatturapa_service_dependency):
    """
    Verifica i campi obbligatori della fattura

    Restituisce sempre 200: gli errori sono elencati tutti insieme in **errors**.
    """
    errors = service.validate(params)
    return ValidationResponse(valid=not errors, errors=errors)


@router.post("/generate", response_class=Response)
async def generate_fattura(params: GenerateFatturaPAParams, service: fatturapa_service_dependency):
    """
    Valida e genera l'XML FatturaPA scaricabile

    **Response**: file XML con nome `{IdPaese}{IdCodice}_{ProgressivoInvio}.xml`.
    In caso di dati non validi risponde 400 con l'elenco degli errori in `details.errors`.
    """
    result = service.build(params)

    headers = {
        "Content-Disposition": f"attachment; filename={result.xml_file_name}",
        "X-Codice-Destinatario": result.codice_destinatario,
    }
    if result.pec_destinatario:
        headers["X-PEC-Destinatario"] = result.pec_destinatario

    return Response(
        content=result.xml_content,
        media_type="application/xml; charset=utf-8",
        headers=headers
    )
