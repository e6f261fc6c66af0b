from decimal import Decimal

from storefront.config import settings


def money(v: Decimal) -> str:
    return f"{v:.{settings.decimals}f} {settings.currency}"
