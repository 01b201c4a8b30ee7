"""Contract deployment models."""

from __future__ import annotations

from assetledger._constants import CONTRACT_NICKNAME
from assetledger.models._base import LedgerBaseModel


class ContractState(LedgerBaseModel):
    """Contract version record written by ``init``."""

    version: str


class InitEvent(LedgerBaseModel):
    """Argument sent to ``init`` on deployment."""

    version: str
    nickname: str = CONTRACT_NICKNAME
