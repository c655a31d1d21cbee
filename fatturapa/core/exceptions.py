"""
Sistema di gestione errori centralizzato
"""
from abc import ABC
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCode(Enum):
    """Codici errore standardizzati"""
    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Business logic errors
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"


class BaseApplicationException(Exception, ABC):
    """Base exception per l'applicazione"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 400
    ):
        self.message = message
        self.error_code = error_code.value
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Converte l'eccezione in dizionario per la risposta API"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "status_code": self.status_code
        }


class DomainException(BaseApplicationException):
    """Eccezioni del dominio business"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.BUSINESS_RULE_VIOLATION,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details, 400)


class ValidationException(DomainException):
    """Errori di validazione"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details)


class FatturaPAValidationException(ValidationException):
    """Dati fattura non conformi ai requisiti minimi FatturaPA"""

    def __init__(self, errors: List[Dict[str, str]], message: str = "Validazione fallita"):
        self.errors = errors
        super().__init__(message, ErrorCode.VALIDATION_ERROR, {"errors": errors})


class ExceptionFactory:
    """Factory per creare eccezioni specifiche"""

    @staticmethod
    def fatturapa_validation_failed(errors: List[Dict[str, str]]) -> FatturaPAValidationException:
        return FatturaPAValidationException(errors)
