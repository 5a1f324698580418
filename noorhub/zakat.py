"""Zakat on net wealth in Pakistani rupees."""
from dataclasses import dataclass, fields

ZAKAT_RATE = 0.025
# Approximately 52.5 tolas of silver in PKR
NISAB_PKR = 195000


def parse_amount(value):
    """Form input to a number; blanks and junk count as zero"""
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        amount = float(value)
    else:
        try:
            amount = float(str(value).replace(",", "").strip() or 0)
        except ValueError:
            return 0.0
    if amount != amount:  # NaN
        return 0.0
    return amount


@dataclass
class ZakatInputs:
    cash: float = 0.0
    gold: float = 0.0
    silver: float = 0.0
    stocks: float = 0.0
    business: float = 0.0
    debts: float = 0.0

    @classmethod
    def from_form(cls, values):
        return cls(**{f.name: parse_amount(values.get(f.name)) for f in fields(cls)})

    @property
    def assets(self):
        return self.cash + self.gold + self.silver + self.stocks + self.business


@dataclass(frozen=True)
class ZakatResult:
    assets: float
    net_wealth: float
    zakat: float
    nisab: float
    obligatory: bool


def calculate(inputs, nisab=NISAB_PKR):
    net_wealth = max(0.0, inputs.assets - inputs.debts)
    return ZakatResult(
        assets=inputs.assets,
        net_wealth=net_wealth,
        zakat=net_wealth * ZAKAT_RATE,
        nisab=nisab,
        obligatory=net_wealth >= nisab,
    )
