"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEPARTAMENTOS = (
    "Capital", "Valle Viejo", "Fray Mamerto Esquiú", "Andalgalá", "Belén",
    "Santa María", "Tinogasta", "Pomán", "Capayán", "La Paz", "Paclín",
    "El Alto", "Ancasti", "Santa Rosa", "Antofagasta de la Sierra", "Recreo",
)

INSPECTORES = (
    "Patato", "Nieva", "Ahumada", "Rodriguez", "Molina", "Ponce", "Inspectores", "Reartes",
)

LEYES_OPTIONS = (
    "ART. N° 5 LEY 24240",
    "ART. N° 42 CN",
    "ART. 5 LEY 24240 + ART. 42 CN",
    "ART. 1 RES E-51",
    "ART. 11 DNU 274/19",
    "ART. 75 DNU 274/19",
    "ART. 2 INC C RES 4/2025",
    "ART. 4 LEY 24240",
    "ART. 4, 7, 8 BIS LEY 24240",
    "LEY 24240",
)

# Any selected law containing one of these markers triggers the 5-day term.
SHORT_DEADLINE_MARKERS = ("ART. 5", "ART. N° 5")
SHORT_DEADLINE_DAYS = 5
STANDARD_DEADLINE_DAYS = 10

# Older sheet rows flag ex officio inspections through this label.
EX_OFFICIO_LAW_LABEL = "ACTUACIÓN DE OFICIO"

TAX_ID_LENGTH = 11

TOP_LAWS_LIMIT = 8
TOP_COMPANIES_LIMIT = 5

AUDIENCE_ALERT_MIN_DAYS = -1
AUDIENCE_ALERT_MAX_DAYS = 12

DEFAULT_API_TIMEOUT_SECONDS = 30
