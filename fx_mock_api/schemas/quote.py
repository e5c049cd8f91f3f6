from pydantic import BaseModel, ConfigDict, Field


class Quote(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    symbol: str
    offer: float
    bid: float
    last: float
    timestamp: str
    low_price: float = Field(alias="lowPrice")
    high_price: float = Field(alias="highPrice")
    open_price: float = Field(alias="openPrice")
    close_price: float = Field(alias="closePrice")


# fields that receive the +/-1 display jitter
JITTERED_FIELDS = (
    "offer",
    "bid",
    "last",
    "low_price",
    "high_price",
    "open_price",
    "close_price",
)
