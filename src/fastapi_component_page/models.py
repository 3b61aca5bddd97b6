"""Upstream block models — the subset of the latest-block payload we consume."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BlockHeader(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    chain_id: str = ""
    height: str = ""
    proposer_address: str = ""
    timestamp: str = Field(default="", alias="time")

    # null keeps the zero value, as the node's Go clients decode it
    @field_validator("chain_id", "height", "proposer_address", "timestamp", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class Block(BaseModel):
    model_config = ConfigDict(extra="ignore")

    header: BlockHeader = Field(default_factory=BlockHeader)

    @field_validator("header", mode="before")
    @classmethod
    def _null_header(cls, v: Any) -> Any:
        return BlockHeader() if v is None else v


class BlockInfo(BaseModel):
    """Latest block as returned by ``/cosmos/base/tendermint/v1beta1/blocks/latest``.

    The default instance is the empty state a component falls back to.
    """

    model_config = ConfigDict(extra="ignore")

    block: Block = Field(default_factory=Block)

    @field_validator("block", mode="before")
    @classmethod
    def _null_block(cls, v: Any) -> Any:
        return Block() if v is None else v

    @property
    def height(self) -> str:
        return self.block.header.height

    def is_empty(self) -> bool:
        return self == BlockInfo()
