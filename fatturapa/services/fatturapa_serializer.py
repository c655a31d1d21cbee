"""
Serializer XML per FatturaPA (FPR12) con ordinamento deterministico e gestione opzionali
"""

import xml.etree.ElementTree as ET
from datetime import date
from typing import Callable, List, Optional, Union

from fatturapa.core.settings import FatturaPASettings, get_fatturapa_settings
from fatturapa.models.fatturapa_enums import (
    CODICE_DESTINATARIO_DEFAULT, DIVISA_EUR, NAMESPACE_DS, NAMESPACE_FATTURA, NAMESPACE_XSI,
    SCHEMA_LOCATION, CondizioniPagamento, EsigibilitaIVA, FormatoTrasmissione,
    ModalitaPagamento, TipoDocumento, TipoScontoMaggiorazione
)
from fatturapa.schemas.fatturapa_models import (
    ClientInfo, CompanyInfo, GenerateFatturaPAParams, InvoiceHeader, LineItem
)
from fatturapa.services.core.tool import (
    escape_xml, format_amount, format_date, format_quantity, progressivo_invio, utc_today
)
from fatturapa.services.fatturapa_validator import ensure_params

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
CAUSALE_MAX_LENGTH = 200

# Sede del cessionario quando il cliente non ha un indirizzo
SEDE_SEGNAPOSTO = {
    "indirizzo": "-",
    "cap": "00000",
    "comune": "-",
    "provincia": "RM",
}


def _present(value: Optional[str]) -> Optional[str]:
    """Valore ripulito, None se assente o vuoto"""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def codice_destinatario(client: ClientInfo) -> str:
    """Codice SDI del cliente, 0000000 se assente"""
    return _present(client.sdi) or CODICE_DESTINATARIO_DEFAULT


def pec_destinatario(client: ClientInfo) -> Optional[str]:
    """PEC di recapito, solo quando manca il codice SDI"""
    if codice_destinatario(client) != CODICE_DESTINATARIO_DEFAULT:
        return None
    return _present(client.pec)


class FatturaPASerializer:
    """Serializer XML per FatturaPA con ordinamento deterministico"""

    def __init__(
        self,
        clock: Callable[[], date] = utc_today,
        settings: Optional[FatturaPASettings] = None
    ):
        self.clock = clock
        self.settings = settings or get_fatturapa_settings()

    def to_xml(self, params: Union[GenerateFatturaPAParams, dict]) -> str:
        """Converte i parametri fattura in XML FatturaPA"""
        params = ensure_params(params)

        root = ET.Element("p:FatturaElettronica")
        root.set("versione", FormatoTrasmissione.FPR12.value)
        root.set("xmlns:ds", NAMESPACE_DS)
        root.set("xmlns:p", NAMESPACE_FATTURA)
        root.set("xmlns:xsi", NAMESPACE_XSI)
        root.set("xsi:schemaLocation", SCHEMA_LOCATION)

        # Header
        header_elem = ET.SubElement(root, "FatturaElettronicaHeader")
        header_elem.append(self._serialize_dati_trasmissione(params))
        header_elem.append(self._serialize_cedente_prestatore(params.company))
        header_elem.append(self._serialize_cessionario_committente(params.client))

        # Body
        body_elem = ET.SubElement(root, "FatturaElettronicaBody")
        body_elem.append(self._serialize_dati_generali(params.invoice))
        body_elem.append(self._serialize_dati_beni_servizi(params.invoice, params.line_items))
        body_elem.append(self._serialize_dati_pagamento(params.company, params.invoice))

        lines = [XML_DECLARATION]
        self._render(root, lines, 0)
        return "\n".join(lines)

    def _serialize_dati_trasmissione(self, params: GenerateFatturaPAParams) -> ET.Element:
        """Serializza DatiTrasmissione"""
        elem = ET.Element("DatiTrasmissione")

        # IdTrasmittente
        id_trasmittente = ET.SubElement(elem, "IdTrasmittente")
        self._emit(id_trasmittente, "IdPaese", self._nazione(params.company.nazione))
        self._emit(id_trasmittente, "IdCodice", params.company.partita_iva)

        self._emit(elem, "ProgressivoInvio", progressivo_invio(params.invoice.number))
        self._emit(elem, "FormatoTrasmissione", FormatoTrasmissione.FPR12.value)
        self._emit(elem, "CodiceDestinatario", codice_destinatario(params.client))

        # PECDestinatario (solo senza codice SDI)
        self._emit(elem, "PECDestinatario", pec_destinatario(params.client))

        return elem

    def _serialize_cedente_prestatore(self, company: CompanyInfo) -> ET.Element:
        """Serializza CedentePrestatore"""
        elem = ET.Element("CedentePrestatore")
        nazione = self._nazione(company.nazione)

        # DatiAnagrafici
        dati_anagrafici = ET.SubElement(elem, "DatiAnagrafici")
        id_fiscale = ET.SubElement(dati_anagrafici, "IdFiscaleIVA")
        self._emit(id_fiscale, "IdPaese", nazione)
        self._emit(id_fiscale, "IdCodice", company.partita_iva)

        # CodiceFiscale (opzionale)
        self._emit(dati_anagrafici, "CodiceFiscale", company.codice_fiscale)

        anagrafica = ET.SubElement(dati_anagrafici, "Anagrafica")
        self._emit(anagrafica, "Denominazione", company.ragione_sociale)
        self._emit(dati_anagrafici, "RegimeFiscale", company.regime_fiscale)

        # Sede
        sede = ET.SubElement(elem, "Sede")
        self._emit(sede, "Indirizzo", company.indirizzo)
        self._emit(sede, "CAP", company.cap)
        self._emit(sede, "Comune", company.citta)
        self._emit(sede, "Provincia", company.provincia)
        self._emit(sede, "Nazione", nazione)

        # Contatti (solo se almeno un recapito e' presente)
        telefono = _present(company.telefono)
        email = _present(company.email)
        if telefono or email:
            contatti = ET.SubElement(elem, "Contatti")
            self._emit(contatti, "Telefono", telefono)
            self._emit(contatti, "Email", email)

        return elem

    def _serialize_cessionario_committente(self, client: ClientInfo) -> ET.Element:
        """Serializza CessionarioCommittente"""
        elem = ET.Element("CessionarioCommittente")
        nazione = self._nazione(client.nazione)

        dati_anagrafici = ET.SubElement(elem, "DatiAnagrafici")

        # IdFiscaleIVA (solo con partita IVA)
        vat_number = _present(client.vat_number)
        if vat_number:
            id_fiscale = ET.SubElement(dati_anagrafici, "IdFiscaleIVA")
            self._emit(id_fiscale, "IdPaese", nazione)
            self._emit(id_fiscale, "IdCodice", vat_number)

        self._emit(dati_anagrafici, "CodiceFiscale", client.fiscal_code)

        anagrafica = ET.SubElement(dati_anagrafici, "Anagrafica")
        self._emit(anagrafica, "Denominazione", client.company_name)

        sede = ET.SubElement(elem, "Sede")
        self._emit(sede, "Indirizzo", _present(client.indirizzo) or SEDE_SEGNAPOSTO["indirizzo"])
        self._emit(sede, "CAP", _present(client.cap) or SEDE_SEGNAPOSTO["cap"])
        self._emit(sede, "Comune", _present(client.comune) or SEDE_SEGNAPOSTO["comune"])
        self._emit(sede, "Provincia", _present(client.provincia) or SEDE_SEGNAPOSTO["provincia"])
        self._emit(sede, "Nazione", nazione)

        return elem

    def _serialize_dati_generali(self, invoice: InvoiceHeader) -> ET.Element:
        """Serializza DatiGenerali"""
        elem = ET.Element("DatiGenerali")

        documento = ET.SubElement(elem, "DatiGeneraliDocumento")
        self._emit(documento, "TipoDocumento", TipoDocumento.TD01.value)
        self._emit(documento, "Divisa", DIVISA_EUR)
        self._emit(documento, "Data", format_date(invoice.issued_date, fallback=self.clock()))
        self._emit(documento, "Numero", invoice.number)

        # ScontoMaggiorazione (solo con sconto positivo)
        if invoice.discount_amount > 0:
            sconto = ET.SubElement(documento, "ScontoMaggiorazione")
            self._emit(sconto, "Tipo", TipoScontoMaggiorazione.SC.value)
            self._emit(sconto, "Importo", format_amount(invoice.discount_amount))

        self._emit(documento, "ImportoTotaleDocumento", format_amount(invoice.total))

        # Causale (opzionale)
        if self.settings.emit_causale:
            for causale in self._split_causale(invoice.notes):
                self._emit(documento, "Causale", causale)

        return elem

    def _serialize_dati_beni_servizi(self, invoice: InvoiceHeader, line_items: List[LineItem]) -> ET.Element:
        """Serializza DatiBeniServizi"""
        elem = ET.Element("DatiBeniServizi")
        aliquota_iva = format_amount(invoice.tax_rate)

        # DettaglioLinee, numerate dopo l'ordinamento per sort_order
        ordered = sorted(line_items, key=lambda item: item.sort_order)
        for numero_linea, linea in enumerate(ordered, start=1):
            dettaglio = ET.SubElement(elem, "DettaglioLinee")
            self._emit(dettaglio, "NumeroLinea", str(numero_linea))
            self._emit(dettaglio, "Descrizione", linea.description)
            self._emit(dettaglio, "Quantita", format_quantity(linea.quantity))
            self._emit(dettaglio, "PrezzoUnitario", format_amount(linea.unit_price))
            self._emit(dettaglio, "PrezzoTotale", format_amount(linea.total))
            self._emit(dettaglio, "AliquotaIVA", aliquota_iva)

        # DatiRiepilogo
        riepilogo = ET.SubElement(elem, "DatiRiepilogo")
        self._emit(riepilogo, "AliquotaIVA", aliquota_iva)
        self._emit(riepilogo, "ImponibileImporto", format_amount(invoice.subtotal - invoice.discount_amount))
        self._emit(riepilogo, "Imposta", format_amount(invoice.tax_amount))
        self._emit(riepilogo, "EsigibilitaIVA", EsigibilitaIVA.I.value)

        return elem

    def _serialize_dati_pagamento(self, company: CompanyInfo, invoice: InvoiceHeader) -> ET.Element:
        """Serializza DatiPagamento (bonifico a scadenza)"""
        elem = ET.Element("DatiPagamento")
        self._emit(elem, "CondizioniPagamento", CondizioniPagamento.TP02.value)

        dettaglio = ET.SubElement(elem, "DettaglioPagamento")
        self._emit(dettaglio, "ModalitaPagamento", ModalitaPagamento.MP05.value)
        self._emit(dettaglio, "DataScadenzaPagamento", format_date(invoice.due_date))
        self._emit(dettaglio, "ImportoPagamento", format_amount(invoice.total))
        self._emit(dettaglio, "IBAN", company.iban)

        return elem

    def _emit(self, parent: ET.Element, tag: str, value: Optional[str]) -> None:
        """Emetti tag solo se valore non è None/vuoto"""
        value = _present(value)
        if value is not None:
            elem = ET.SubElement(parent, tag)
            elem.text = value

    def _nazione(self, value: Optional[str]) -> str:
        return _present(value) or self.settings.default_nazione

    @staticmethod
    def _split_causale(notes: Optional[str]) -> List[str]:
        notes = _present(notes)
        if not notes:
            return []
        return [notes[i:i + CAUSALE_MAX_LENGTH] for i in range(0, len(notes), CAUSALE_MAX_LENGTH)]

    def _render(self, elem: ET.Element, lines: List[str], level: int) -> None:
        """Scrive l'elemento con escape completo (&, <, >, ", ') del testo"""
        pad = self.settings.indent * level
        attrs = "".join(f' {key}="{escape_xml(value)}"' for key, value in elem.attrib.items())
        children = list(elem)

        if children:
            lines.append(f"{pad}<{elem.tag}{attrs}>")
            for child in children:
                self._render(child, lines, level + 1)
            lines.append(f"{pad}</{elem.tag}>")
        elif elem.text is not None:
            lines.append(f"{pad}<{elem.tag}{attrs}>{escape_xml(elem.text)}</{elem.tag}>")
        else:
            lines.append(f"{pad}<{elem.tag}{attrs}/>")


def generate_fattura_pa(
    params: Union[GenerateFatturaPAParams, dict],
    clock: Optional[Callable[[], date]] = None
) -> str:
    return FatturaPASerializer(clock or utc_today).to_xml(params)
