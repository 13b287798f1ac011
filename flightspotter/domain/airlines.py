"""ICAO airline designators for labelling callsigns."""

from __future__ import annotations

AIRLINES: dict[str, str] = {
    # North America
    "AAL": "American Airlines",
    "UAL": "United Airlines",
    "DAL": "Delta Air Lines",
    "SWA": "Southwest Airlines",
    "JBU": "JetBlue Airways",
    "ASA": "Alaska Airlines",
    "FFT": "Frontier Airlines",
    "NKS": "Spirit Airlines",
    "SKW": "SkyWest Airlines",
    "ENY": "Envoy Air",
    "RPA": "Republic Airways",
    "JIA": "PSA Airlines",
    "PDT": "Piedmont Airlines",
    "ACA": "Air Canada",
    "WJA": "WestJet",
    # Europe
    "BAW": "British Airways",
    "DLH": "Lufthansa",
    "AFR": "Air France",
    "KLM": "KLM",
    "RYR": "Ryanair",
    "EZY": "easyJet",
    "IBE": "Iberia",
    "AEE": "Aegean Airlines",
    "SAS": "Scandinavian Airlines",
    "FIN": "Finnair",
    "SWR": "Swiss International",
    "AUA": "Austrian Airlines",
    "BEL": "Brussels Airlines",
    "TAP": "TAP Air Portugal",
    "EIN": "Aer Lingus",
    "NAX": "Norwegian Air",
    "WZZ": "Wizz Air",
    "VOE": "Volotea",
    "VIR": "Virgin Atlantic",
    "EXS": "Jet2",
    # Asia Pacific
    "ANA": "All Nippon Airways",
    "JAL": "Japan Airlines",
    "CPA": "Cathay Pacific",
    "SIA": "Singapore Airlines",
    "THA": "Thai Airways",
    "QFA": "Qantas",
    "CSN": "China Southern",
    "CES": "China Eastern",
    "CCA": "Air China",
    "KAL": "Korean Air",
    "AAR": "Asiana Airlines",
    "MAS": "Malaysia Airlines",
    "GIA": "Garuda Indonesia",
    "PAL": "Philippine Airlines",
    "HVN": "Vietnam Airlines",
    # Middle East and Africa
    "UAE": "Emirates",
    "ETD": "Etihad Airways",
    "QTR": "Qatar Airways",
    "SVA": "Saudia",
    "MEA": "Middle East Airlines",
    "RJA": "Royal Jordanian",
    "THY": "Turkish Airlines",
    "SAA": "South African Airways",
    "ETH": "Ethiopian Airlines",
    "MSR": "EgyptAir",
    "RAM": "Royal Air Maroc",
    "KQA": "Kenya Airways",
    # Latin America
    "LAN": "LATAM Airlines",
    "AZU": "Azul Brazilian Airlines",
    "GLO": "Gol Linhas Aéreas",
    "ARG": "Aerolíneas Argentinas",
    "AVA": "Avianca",
    "CMP": "Copa Airlines",
    # Cargo
    "FDX": "FedEx",
    "UPS": "UPS Airlines",
    "GTI": "Atlas Air",
    "ABX": "ABX Air",
    "CKS": "Kalitta Air",
}


def airline_from_callsign(callsign: str | None) -> str | None:
    """Airline name for a callsign such as ``BAW123``, if the prefix is known."""

    if not callsign:
        return None
    return AIRLINES.get(callsign.strip().upper()[:3])


__all__ = ["AIRLINES", "airline_from_callsign"]
