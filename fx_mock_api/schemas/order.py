from pydantic import BaseModel, ConfigDict, Field

# signed 64-bit range of an SQLite INTEGER column
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


class OrderRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    amount: float
    currency: str
    quote_id: int = Field(alias="quoteId")
    side: str
    valuta: int = Field(ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX)


class OrderRecord(OrderRequest):
    id: str
    created_at: str = Field(alias="createdAt")


class OrderAccepted(BaseModel):
    message: str = "Order created successfully"
