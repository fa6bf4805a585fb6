"""
Offer DTO: a candidate next step for the player (permanent transfer or loan).
Offers reference their destination by team name; the registry resolves it at use time.
"""
from dataclasses import dataclass
from typing import Dict, Any

OFFER_KINDS = ("transfer", "loan")


@dataclass
class Offer:
    kind: str
    team_name: str
    wage: int
    contract_length: int = 0  # transfer only (years)
    loan_duration: int = 0  # loan only (seasons)
    wage_contribution: int = 100  # loan only: % of wage paid by the borrowing club
    expected_status: str = "Rotation"
    transfer_fee: float = 0.0  # millions
    issued_season: int = 0

    def __post_init__(self) -> None:
        if self.kind not in OFFER_KINDS:
            raise ValueError(f"kind must be one of {OFFER_KINDS}, got {self.kind!r}")
        if self.wage < 0:
            raise ValueError(f"wage must be >= 0, got {self.wage}")
        if self.kind == "transfer" and self.contract_length < 1:
            raise ValueError("transfer offers need a contract_length of at least 1")
        if self.kind == "loan" and self.loan_duration < 1:
            raise ValueError("loan offers need a loan_duration of at least 1")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "team_name": self.team_name,
            "wage": self.wage,
            "contract_length": self.contract_length,
            "loan_duration": self.loan_duration,
            "wage_contribution": self.wage_contribution,
            "expected_status": self.expected_status,
            "transfer_fee": self.transfer_fee,
            "issued_season": self.issued_season,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Offer":
        return cls(
            kind=data.get("kind", "transfer"),
            team_name=data.get("team_name", ""),
            wage=data.get("wage", 0),
            contract_length=data.get("contract_length", 0),
            loan_duration=data.get("loan_duration", 0),
            wage_contribution=data.get("wage_contribution", 100),
            expected_status=data.get("expected_status", "Rotation"),
            transfer_fee=data.get("transfer_fee", 0.0),
            issued_season=data.get("issued_season", 0),
        )
