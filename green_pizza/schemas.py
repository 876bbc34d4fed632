# schemas.py

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt

# Pydantic models for request and response. JSON keys are camelCase.

class OrderRequest(BaseModel):
    # Presence is checked by the order service, so every field may be left out here
    model_config = ConfigDict(populate_by_name=True)

    # strict types keep booleans and floats as sent, parse_pizza_id decides what they match
    pizza_id: Optional[Union[StrictBool, StrictInt, float, str]] = Field(None, alias="pizzaId", examples=[2])
    quantity: Optional[Union[int, float]] = Field(None, examples=[2])
    customer_name: Optional[str] = Field(None, alias="customerName", examples=["Test User"])


class OrderConfirmation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    order_id: str = Field(..., alias="orderId", examples=["3f2b9c0d1e4a4b5c8d7e6f5a4b3c2d1e"])
    pizza: str = Field(..., examples=["Green Pizza"])
    quantity: Union[int, float] = Field(..., examples=[2])
    customer_name: str = Field(..., alias="customerName", examples=["Test User"])
    total_price: float = Field(..., alias="totalPrice", examples=[31.98])
    status: Literal["confirmed"] = "confirmed"
    timestamp: str = Field(..., examples=["2024-05-01T12:00:00.000Z"])


class HealthResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    timestamp: str = Field(..., examples=["2024-05-01T12:00:00.000Z"])


class ErrorResponse(BaseModel):
    error: str = Field(..., examples=["Pizza not found"])
