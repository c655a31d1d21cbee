import logging
import re
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional, Union
from xml.sax.saxutils import escape

from dateutil.parser import isoparse

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime, str, None]

TWO_PLACES = Decimal("0.01")
PROGRESSIVO_INVIO_MAX_LENGTH = 10
# Cifre intere ammesse: la quantizzazione a 2 decimali resta entro la precisione di default (28)
MAX_INTEGER_DIGITS = 18

_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")
# escape() gestisce gia' &, < e > (ampersand per primo)
_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def to_decimal(value: Any) -> Decimal:
    """
    Normalizza un importo numerico o stringa numerica in Decimal.

    Args:
        value: int, float, Decimal oppure stringa numerica (es. "1220.50")

    Returns:
        Decimal equivalente al valore ricevuto

    Raises:
        ValueError: se il valore non e' numerico, non e' finito o supera
            MAX_INTEGER_DIGITS cifre intere
    """
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Valore numerico non valido: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        # str() evita la rappresentazione binaria estesa dei float
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"Valore numerico non valido: {value!r}") from None
    else:
        raise ValueError(f"Tipo non numerico: {type(value).__name__}")

    if not result.is_finite():
        raise ValueError(f"Valore numerico non finito: {value!r}")
    if result and result.adjusted() >= MAX_INTEGER_DIGITS:
        raise ValueError(f"Valore numerico fuori intervallo: {value!r}")
    return result


def format_amount(value: Any) -> str:
    """Formatta un importo a 2 decimali con punto decimale (1000 -> "1000.00")"""
    try:
        amount = to_decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError(f"Importo non rappresentabile: {value!r}") from None
    return f"{amount:f}"


def format_quantity(value: Any) -> str:
    """Quantita' nel formato fisso a 2 decimali (10 -> "10.00")"""
    return format_amount(value)


def progressivo_invio(number: str) -> str:
    """Rimuove i caratteri non alfanumerici dal numero fattura (FT-2026/001 -> FT2026001)"""
    return _NON_ALPHANUMERIC.sub("", number or "")[:PROGRESSIVO_INVIO_MAX_LENGTH]


def escape_xml(text: str) -> str:
    """Escape delle entita' XML per i campi testuali inseriti dall'utente"""
    return escape(text, _QUOTE_ENTITIES)


def utc_today() -> date:
    """Data corrente in UTC"""
    return datetime.now(timezone.utc).date()


def format_date(value: DateLike, fallback: Optional[date] = None) -> Optional[str]:
    """
    Formatta una data in YYYY-MM-DD.

    Le stringhe ISO (data o datetime, anche con fuso) vengono convertite in UTC.
    Valori assenti o non interpretabili restituiscono il fallback.
    """
    resolved = _resolve_date(value)
    if resolved is None:
        resolved = fallback
    return resolved.isoformat() if resolved is not None else None


def _resolve_date(value: DateLike) -> Optional[date]:
    if value is None:
        return None

    if isinstance(value, str):
        if not value.strip():
            return None
        try:
            value = isoparse(value.strip())
        except (ValueError, OverflowError):
            logger.warning(f"Data non valida ignorata: {value!r}")
            return None

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value
