"""Reported deposit record as returned by the report API."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DepositStatus(str, Enum):
    """Settlement status of a deposit."""
    PAID = "paid"
    EXPIRED = "expired"
    PENDING = "pending"
    CANCELED = "canceled"


class ReportedDeposit(BaseModel):
    """
    A single deposit transaction with its payment and settlement data.
    
    Immutable snapshot of what the data source reported. Wire names are
    camelCase; either form is accepted on input.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)
    
    transaction_id: str = Field(alias="transactionId", description="Transaction identifier")
    phone: str = Field(description="Payer phone number")
    cold_wallet: str = Field(alias="coldWallet", description="Destination wallet address")
    network: str = Field(description="Blockchain network selected for the payout")
    payment_method: str = Field(alias="paymentMethod")
    document_id: str = Field(alias="documentId", description="Payer CPF/CNPJ")
    transaction_date: str = Field(alias="transactionDate", description="Transaction timestamp as reported")
    coupon: Optional[str] = Field(default=None, description="Coupon code, if one was applied")
    value_btc: float = Field(alias="valueBTC", description="Value in the source asset")
    value_brl: float = Field(alias="valueBRL", description="Value in local currency")
    status: DepositStatus
    discount_value: float = Field(alias="discountValue", description="Discount percentage")
    value_collected: float = Field(alias="valueCollected", description="Collected/settled value")
