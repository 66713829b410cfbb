"""
Device analysis queries over the medtech_db tables.

Covers complaint rates and costs per device type, warranty expiry,
regulatory approval age and keyword based satisfaction scoring.
"""

from datetime import date
from typing import Optional, Union

import pandas as pd

from ..datasets.medtech_db import DISSATISFACTION_KEYWORDS

DateLike = Union[date, str, pd.Timestamp]


def _today(today: Optional[DateLike]) -> pd.Timestamp:
    return pd.Timestamp(today or date.today()).normalize()


def _with_complaints(devices: pd.DataFrame, complaints: pd.DataFrame) -> pd.DataFrame:
    return devices.merge(
        complaints[["complaintid", "deviceid", "complaintdetails"]],
        on="deviceid",
        how="left",
    )


def complaint_rates(devices: pd.DataFrame, complaints: pd.DataFrame) -> pd.DataFrame:
    """
    Complaint count and average purchase price per device type.

    Devices without complaints still count towards the average price.
    """
    df = _with_complaints(devices, complaints)
    df = df.assign(purchaseprice=pd.to_numeric(df["purchaseprice"], errors="coerce"))
    result = df.groupby("devicetype", as_index=False).agg(
        complaintcount=("complaintid", "count"),
        avgprice=("purchaseprice", "mean"),
    )
    return result.sort_values("complaintcount", ascending=False, kind="stable").reset_index(drop=True)


def warranty_expiring(devices: pd.DataFrame, months: int = 3, today: Optional[DateLike] = None) -> pd.DataFrame:
    """
    Devices whose warranty ends before ``months`` from today.

    Already expired warranties are included with a negative day count.
    """
    today = _today(today)
    end = pd.to_datetime(devices["warrantyenddate"])
    df = devices.assign(
        warrantyenddate=end,
        daysuntilexpiration=(end - today).dt.days,
    )
    df = df[end < today + pd.DateOffset(months=months)]
    return (
        df[["devicename", "warrantyenddate", "daysuntilexpiration"]]
        .sort_values("daysuntilexpiration", kind="stable")
        .reset_index(drop=True)
    )


def compliance_overdue(devices: pd.DataFrame, months: int = 24, today: Optional[DateLike] = None) -> pd.DataFrame:
    """Devices approved more than ``months`` calendar months ago."""
    today = _today(today)
    approved = pd.to_datetime(devices["approvaldate"])
    # calendar month boundaries crossed, day of month ignored
    elapsed = (today.year - approved.dt.year) * 12 + (today.month - approved.dt.month)
    df = devices.assign(approvaldate=approved, monthssinceapproval=elapsed)
    df = df[df["monthssinceapproval"] > months]
    return df[["devicename", "regulatoryapproval", "approvaldate", "monthssinceapproval"]].reset_index(drop=True)


def satisfaction_score(text) -> int:
    """0 when the complaint text mentions a dissatisfaction keyword, else 1."""
    if text is None or pd.isna(text):
        return 1
    lowered = str(text).lower()
    return 0 if any(keyword in lowered for keyword in DISSATISFACTION_KEYWORDS) else 1


def satisfaction_scores(devices: pd.DataFrame, complaints: pd.DataFrame) -> pd.DataFrame:
    """
    Complaint count and average satisfaction score per device.

    Returns:
        DataFrame with devicename, devicetype, complaintcount,
        satisfactionscore, best scores first.
    """
    df = _with_complaints(devices, complaints)
    df = df.assign(score=df["complaintdetails"].map(satisfaction_score))
    result = df.groupby(["devicename", "devicetype"], as_index=False).agg(
        complaintcount=("complaintid", "count"),
        satisfactionscore=("score", "mean"),
    )
    return result.sort_values("satisfactionscore", ascending=False, kind="stable").reset_index(drop=True)
