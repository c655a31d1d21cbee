"""
Dependency injection per FastAPI
"""
from typing import Annotated

from fastapi import Depends

from fatturapa.services.fatturapa_service import FatturaPAService
from fatturapa.services.interfaces.fatturapa_service_interface import IFatturaPAService


def get_fatturapa_service() -> IFatturaPAService:
    """Istanza del servizio FatturaPA (sovrascrivibile nei test)"""
    return FatturaPAService()


fatturapa_service_dependency = Annotated[IFatturaPAService, Depends(get_fatturapa_service)]
