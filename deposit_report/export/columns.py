"""Column layout of the deposit export."""

from typing import Any, Callable, Mapping, Sequence

from deposit_report.models import ReportedDeposit

ColumnAccessor = Callable[[ReportedDeposit], Any]


def format_percentage(value: float) -> str:
    """Render a percentage value the way the report shows it (10 -> '10%')."""
    if float(value).is_integer():
        return f"{int(value)}%"
    return f"{value!r}%"


# Label -> accessor, in export order
DEPOSIT_COLUMNS: dict[str, ColumnAccessor] = {
    "Transaction ID": lambda d: d.transaction_id,
    "Phone": lambda d: d.phone,
    "Wallet": lambda d: d.cold_wallet,
    "Selected Network": lambda d: d.network,
    "Payment Method": lambda d: d.payment_method,
    "Document ID (CPF/CNPJ)": lambda d: d.document_id,
    "Transaction Date": lambda d: d.transaction_date,
    "Coupon": lambda d: d.coupon,
    "Value in source asset": lambda d: d.value_btc,
    "Value in local currency": lambda d: d.value_brl,
    "Status": lambda d: d.status.value,
    "Discount": lambda d: format_percentage(d.discount_value),
    "Collected Value": lambda d: d.value_collected,
}


def build_rows(
    records: Sequence[ReportedDeposit],
    columns: Mapping[str, ColumnAccessor] = DEPOSIT_COLUMNS,
) -> list[dict[str, Any]]:
    """Project records onto the column mapping, preserving record order."""
    return [
        {label: accessor(record) for label, accessor in columns.items()}
        for record in records
    ]
