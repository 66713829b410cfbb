"""
Sales analytics over the sales_db tables.

The read-only functions take DataFrames holding the table contents (as
returned by ``WarehouseConnector.read_table`` or ``SampleDataset.frame``);
the pipeline maintenance operations write through a connector.
"""

from datetime import date
from typing import Optional, Union

import pandas as pd
from sqlalchemy import update

from ..datasets.sales_db import VALID_SALES_STAGES, buyer, opportunities as opportunities_table
from ..quality.metrics import EMAIL_PATTERN
from ..utils.logger import get_logger
from ..warehouse.connector import WarehouseConnector

logger = get_logger(__name__)

HIGH_VALUE_THRESHOLD = 100000
MEDIUM_VALUE_THRESHOLD = 50000
LIKELY_TO_CLOSE_STAGES = ("Negotiation", "Proposal")


def _naive(values: pd.Series) -> pd.Series:
    stamps = pd.to_datetime(values)
    return stamps.dt.tz_localize(None) if stamps.dt.tz is not None else stamps


def _closed_won_totals(customers: pd.DataFrame, opportunities: pd.DataFrame) -> pd.Series:
    """Sum of closed-won amounts per customer id (customers with no deals omitted)."""
    won = opportunities[opportunities["salesstage"] == "Closed Won"]
    won = won[won["customerid"].isin(customers["customerid"])]
    amounts = pd.to_numeric(won["amount"], errors="coerce")
    return amounts.groupby(won["customerid"]).sum(min_count=1)


def customer_closed_won_value(
    customers: pd.DataFrame,
    opportunities: pd.DataFrame,
    customer_id: int
) -> Optional[float]:
    """
    Lifetime value of a customer: the sum of its closed-won deal amounts.

    Returns:
        Total amount, or None when the customer has no closed-won deals.
    """
    totals = _closed_won_totals(customers, opportunities)
    value = totals.get(customer_id)
    return None if value is None or pd.isna(value) else float(value)


def value_tier(value: Optional[float]) -> str:
    if value is not None and not pd.isna(value):
        if value >= HIGH_VALUE_THRESHOLD:
            return "High Value"
        if value >= MEDIUM_VALUE_THRESHOLD:
            return "Medium Value"
    return "Low Value"


def categorize_customer(customers: pd.DataFrame, opportunities: pd.DataFrame, customer_id: int) -> str:
    """Value tier of a customer based on its closed-won value."""
    return value_tier(customer_closed_won_value(customers, opportunities, customer_id))


def high_value_customers(customers: pd.DataFrame, opportunities: pd.DataFrame) -> pd.DataFrame:
    """Every customer with its closed-won total in ``totalvalue``."""
    totals = _closed_won_totals(customers, opportunities)
    result = customers.copy()
    result["totalvalue"] = result["customerid"].map(totals)
    return result


def customer_value_analysis(customers: pd.DataFrame, opportunities: pd.DataFrame) -> pd.DataFrame:
    """Customers with closed-won revenue, their total and value tier."""
    df = high_value_customers(customers, opportunities)
    df = df[df["totalvalue"] > 0]
    df = df.assign(customertier=df["totalvalue"].map(value_tier))
    return df[["customerid", "firstname", "lastname", "totalvalue", "customertier"]].reset_index(drop=True)


def opportunities_likely_to_close(
    opportunities: pd.DataFrame,
    today: Optional[Union[date, str]] = None
) -> pd.DataFrame:
    """
    Negotiation and proposal stage deals expected to close within a month.

    Args:
        opportunities: Opportunities table
        today: Reference date. If None, uses the current date.
    """
    today = pd.Timestamp(today or date.today()).normalize()
    horizon = today + pd.DateOffset(months=1)
    close = pd.to_datetime(opportunities["expectedclosedate"])
    mask = (
        opportunities["salesstage"].isin(LIKELY_TO_CLOSE_STAGES)
        & (close >= today)
        & (close <= horizon)
    )
    return opportunities[mask].reset_index(drop=True)


def data_quality_issues(customers: pd.DataFrame) -> pd.DataFrame:
    """
    Invalid emails and rows missing required fields in the customer table.

    Returns:
        DataFrame with columns issue, count.
    """
    emails = customers["email"].dropna().astype(str)
    invalid_email = sum(1 for value in emails if not EMAIL_PATTERN.fullmatch(value))
    missing = (
        customers["firstname"].isna()
        | customers["homelocation"].isna()
        | (customers["zipcode"] == "")
    )
    return pd.DataFrame([
        {"issue": "Invalid Email", "count": int(invalid_email)},
        {"issue": "Missing Required Fields", "count": int(missing.sum())},
    ])


def pipeline_analysis(opportunities: pd.DataFrame) -> pd.DataFrame:
    """
    Opportunity count, total value and average days to close per sales stage.

    Stages whose total is unknown sort first, the rest by total descending.
    """
    df = opportunities.assign(
        amount=pd.to_numeric(opportunities["amount"], errors="coerce"),
        days_to_close=(
            _naive(opportunities["expectedclosedate"]).dt.normalize()
            - _naive(opportunities["loaddate"]).dt.normalize()
        ).dt.days,
    )
    grouped = df.groupby("salesstage")
    result = pd.DataFrame({
        "opportunities": grouped.size(),
        "totalvalue": grouped["amount"].sum(min_count=1),
        "avgdaystoclose": grouped["days_to_close"].mean(),
    }).reset_index()
    return result.sort_values("totalvalue", ascending=False, na_position="first").reset_index(drop=True)


def update_opportunity_stage(
    connector: WarehouseConnector,
    opportunity_id: int,
    new_stage: str
) -> str:
    """
    Move an opportunity to a new sales stage.

    Raises:
        ValueError: If the stage is not a valid sales stage
    """
    if new_stage not in VALID_SALES_STAGES:
        raise ValueError(f"Invalid sales stage '{new_stage}', expected one of {list(VALID_SALES_STAGES)}")

    statement = (
        update(opportunities_table)
        .where(opportunities_table.c.opportunityid == opportunity_id)
        .values(salesstage=new_stage)
    )
    with connector.engine.begin() as conn:
        updated = conn.execute(statement).rowcount
    logger.info(f"Opportunity {opportunity_id} moved to {new_stage} ({updated} row(s))")
    return "Success"


def assign_buyer_to_customer(connector: WarehouseConnector, customer_id: int, buyer_id: int) -> str:
    """Link a buyer profile to the customer record it converted from."""
    statement = update(buyer).where(buyer.c.buyerid == buyer_id).values(customerid=customer_id)
    with connector.engine.begin() as conn:
        updated = conn.execute(statement).rowcount
    if not updated:
        logger.warning(f"Buyer {buyer_id} not found")
    else:
        logger.info(f"Buyer {buyer_id} assigned to customer {customer_id}")
    return "Success"
