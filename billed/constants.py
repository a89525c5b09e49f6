ROUTES_PATH = {
    "Login": "/",
    "Bills": "#employee/bills",
    "NewBill": "#employee/bill/new",
    "Dashboard": "#admin/dashboard",
}

BILL_TYPES = [
    "Transports",
    "Restaurants et bars",
    "Hôtel et logement",
    "Services en ligne",
    "IT et électronique",
    "Equipement et matériel",
    "Fournitures de bureau",
]

DEFAULT_PCT = 20
DEFAULT_STATUS = "pending"

STATUS_LABELS = {
    "pending": "En attente",
    "accepted": "Accepté",
    "refused": "Refusé",
}

MONTHS_FR = {
    "01": "Jan.",
    "02": "Fév.",
    "03": "Mar.",
    "04": "Avr.",
    "05": "Mai.",
    "06": "Jui.",
    "07": "Jui.",
    "08": "Aoû.",
    "09": "Sep.",
    "10": "Oct.",
    "11": "Nov.",
    "12": "Déc.",
}


def format_date(value: str) -> str:
    """'2004-04-04' -> '4 Avr. 04'. Anything unparseable is returned unchanged."""
    if not value or value.count("-") != 2:
        return value or ""
    year, month, day = value.split("-")
    if month not in MONTHS_FR or not day.isdigit() or len(year) < 2:
        return value
    return f"{int(day)} {MONTHS_FR[month]} {year[-2:]}"


def format_status(status: str | None) -> str:
    if not status:
        return ""
    return STATUS_LABELS.get(status, status)


def format_amount(amount: float | None) -> str:
    """400 -> '400 €', 12.5 -> '12,50 €'."""
    if amount is None:
        return ""
    if float(amount).is_integer():
        return f"{int(amount)} €"
    return f"{amount:.2f} €".replace(".", ",")
