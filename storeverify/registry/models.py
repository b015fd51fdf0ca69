"""Registry data models."""

from __future__ import annotations

from dataclasses import dataclass

from storeverify.identity import Principal


@dataclass(frozen=True)
class Store:
    """A single registered store."""

    id: int
    name: str
    address: str
    owner: Principal
    verified: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "verified": self.verified,
            "owner": self.owner,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Store:
        return cls(
            id=int(data["id"]),
            name=data["name"],
            address=data["address"],
            owner=data["owner"],
            verified=bool(data.get("verified", False)),
        )
