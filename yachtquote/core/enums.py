from enum import Enum


class ChargeLabel(str, Enum):
    BASE = "Base"
    APA = "APA"
    VAT = "VAT"
    GRATUITY = "Gratuity"
    DELIVERY_FEE = "Delivery fee"
    TOTAL = "Total"

    def __str__(self):
        return self.value


class VatSource(str, Enum):
    EXPLICIT = "explicit"
    AREA = "area"

    def __str__(self):
        return self.value


class DeadLetterType(str, Enum):
    EMAIL = "email"
    WEBHOOK = "webhook"

    def __str__(self):
        return self.value
