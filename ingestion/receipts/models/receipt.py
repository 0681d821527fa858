from typing import Annotated

from eth_utils import encode_hex
from pydantic import BaseModel, ConfigDict, Field, field_serializer

UINT8_MAX = 2**8 - 1
UINT64_MAX = 2**64 - 1
UINT256_MAX = 2**256 - 1

Uint8 = Annotated[int, Field(ge=0, le=UINT8_MAX)]
Uint64 = Annotated[int, Field(ge=0, le=UINT64_MAX)]
Uint256 = Annotated[int, Field(ge=0, le=UINT256_MAX)]
Hash32 = Annotated[bytes, Field(min_length=32, max_length=32)]


class LegacyReceipt(BaseModel):
    """
    Receipt record of a legacy (pre-Bedrock) export.

    Field order matches the positional RLP layout of the export. Aliases are the
    names the export tool uses in its JSON form.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    type: Uint8 = 0
    post_state: bytes = Field(b"", alias="root")
    status: Uint64 = 0
    cumulative_gas_used: Uint64 = Field(0, alias="cumulativeGasUsed")
    bloom: bytes = Field(b"", alias="logsBloom")
    # Raw RLP encoding of the logs field, not decoded further
    logs: bytes = b""
    tx_hash: Hash32 = Field(alias="transactionHash")
    contract_address: str = Field("", alias="contractAddress")
    gas_used: Uint64 = Field(0, alias="gasUsed")
    block_hash: Hash32 = Field(alias="blockHash")
    block_number: Uint256 = Field(0, alias="blockNumber")
    transaction_index: Uint64 = Field(0, alias="transactionIndex")
    l1_gas_price: Uint256 = Field(0, alias="l1GasPrice")
    l1_gas_used: Uint256 = Field(0, alias="l1GasUsed")
    l1_fee: Uint256 = Field(0, alias="l1Fee")
    l1_fee_scalar: str = Field("", alias="l1FeeScalar")

    @field_serializer("post_state", "bloom", "logs", "tx_hash", "block_hash", when_used="json")
    def _serialize_hex(self, value: bytes) -> str:
        return encode_hex(value)
