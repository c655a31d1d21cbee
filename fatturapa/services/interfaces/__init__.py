from fatturapa.services.interfaces.fatturapa_service_interface import IFatturaPAService

__all__ = ["IFatturaPAService"]
