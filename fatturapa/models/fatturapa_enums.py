"""
Enums per FatturaPA - Domini dei codici fissi emessi nel tracciato FPR12
"""

from enum import Enum


NAMESPACE_FATTURA = "http://ivaservizi.agenziaentrate.gov.it/docs/xsd/fatture/v1.2"
NAMESPACE_DS = "http://www.w3.org/2000/09/xmldsig#"
NAMESPACE_XSI = "http://www.w3.org/2001/XMLSchema-instance"
SCHEMA_LOCATION = (
    f"{NAMESPACE_FATTURA} "
    "http://www.fatturapa.gov.it/export/fatturazione/sdi/fatturapa/v1.2.2/"
    "Schema_del_file_xml_FatturaPA_v1.2.2.xsd"
)

# Codice destinatario per i soggetti senza canale SDI
CODICE_DESTINATARIO_DEFAULT = "0000000"

DIVISA_EUR = "EUR"


class FormatoTrasmissione(str, Enum):
    """Formato Trasmissione"""
    FPR12 = "FPR12"  # Fattura verso privati
    FPA12 = "FPA12"  # Fattura verso PA


class RegimeFiscale(str, Enum):
    """Regime Fiscale - RFxx"""
    RF01 = "RF01"  # Ordinario
    RF02 = "RF02"  # Contribuenti minimi
    RF04 = "RF04"  # Agricoltura e attività connesse e pesca
    RF05 = "RF05"  # Vendita sali e tabacchi
    RF19 = "RF19"  # Regime forfettario


class TipoDocumento(str, Enum):
    """Tipo Documento - TDxx"""
    TD01 = "TD01"  # Fattura
    TD04 = "TD04"  # Nota di credito
    TD05 = "TD05"  # Nota di debito


class CondizioniPagamento(str, Enum):
    """Condizioni Pagamento"""
    TP01 = "TP01"  # A rate
    TP02 = "TP02"  # Pagamento completo
    TP03 = "TP03"  # Anticipo


class ModalitaPagamento(str, Enum):
    """Modalità Pagamento - MPxx"""
    MP01 = "MP01"  # Contanti
    MP02 = "MP02"  # Assegno
    MP05 = "MP05"  # Bonifico
    MP08 = "MP08"  # Carta di pagamento


class EsigibilitaIVA(str, Enum):
    """Esigibilità IVA"""
    I = "I"  # Immediata
    D = "D"  # Differita
    S = "S"  # Scissione pagamenti


class TipoScontoMaggiorazione(str, Enum):
    """Tipo Sconto/Maggiorazione"""
    SC = "SC"  # Sconto
    MG = "MG"  # Maggiorazione
