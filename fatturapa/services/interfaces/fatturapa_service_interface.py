"""
Interface per il servizio FatturaPA
"""
from abc import ABC, abstractmethod
from typing import List

from fatturapa.schemas.fatturapa_models import (
    FatturaPAValidationError, GenerateFatturaPAParams, GeneratedFatturaPA
)


class IFatturaPAService(ABC):
    """Interface per validazione e generazione XML FatturaPA"""

    @abstractmethod
    def validate(self, params: GenerateFatturaPAParams) -> List[FatturaPAValidationError]:
        """Valida i campi obbligatori, restituendo tutti gli errori"""
        pass

    @abstractmethod
    def generate(self, params: GenerateFatturaPAParams) -> str:
        """Genera l'XML senza validazione preventiva"""
        pass

    @abstractmethod
    def build(self, params: GenerateFatturaPAParams) -> GeneratedFatturaPA:
        """Valida e genera; solleva FatturaPAValidationException se i dati non sono validi"""
        pass

    @abstractmethod
    def xml_file_name(self, params: GenerateFatturaPAParams) -> str:
        """Nome file XML secondo la convenzione SDI"""
        pass
