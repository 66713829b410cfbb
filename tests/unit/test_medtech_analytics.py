"""Unit tests for medtech device analytics."""

import pytest
import pandas as pd
from demohub.analytics.medtech import (
    complaint_rates,
    warranty_expiring,
    compliance_overdue,
    satisfaction_score,
    satisfaction_scores,
)


@pytest.fixture
def devices():
    """Three devices, one without complaints."""
    return pd.DataFrame({
        "deviceid": [1, 2, 3],
        "devicename": ["GloboMedic 5000", "roScan Plus", "NeuroSync Pro"],
        "devicetype": ["Heart Monitor", "Dialysis Machine", "Heart Monitor"],
        "purchaseprice": [2500.0, 5000.0, 7500.0],
        "regulatoryapproval": ["FDA", "CE Mark", "FDA"],
        "approvaldate": pd.to_datetime(["2022-04-20", "2022-06-01", "2022-07-01"]),
        "warrantyenddate": pd.to_datetime(["2024-06-15", "2024-08-30", "2025-07-10"]),
    })


@pytest.fixture
def complaints():
    return pd.DataFrame({
        "complaintid": [1, 2, 3],
        "deviceid": [1, 1, 2],
        "complaintdetails": [
            "I am very disappointed with this device.",
            "Works as expected.",
            "There is a Problem with the display.",
        ],
    })


class TestComplaintRates:
    """Test complaint_rates."""

    def test_counts_and_prices(self, devices, complaints):
        """Test complaints per type and average price over joined rows."""
        df = complaint_rates(devices, complaints)

        assert df["devicetype"].tolist() == ["Heart Monitor", "Dialysis Machine"]
        assert df["complaintcount"].tolist() == [2, 1]
        # device 1 appears once per complaint in the join
        assert df["avgprice"].iloc[0] == pytest.approx((2500 + 2500 + 7500) / 3)

    def test_seeded_data(self, medtech_dataset):
        """Test every seeded complaint is counted."""
        df = complaint_rates(medtech_dataset.frame("devices"), medtech_dataset.frame("customer_complaints"))
        assert df["complaintcount"].sum() == 54
        assert df["complaintcount"].is_monotonic_decreasing


class TestWarrantyExpiring:
    """Test warranty_expiring."""

    def test_within_three_months(self, devices):
        """Test expiring and expired warranties, soonest first."""
        df = warranty_expiring(devices, today="2024-06-01")

        assert df["devicename"].tolist() == ["GloboMedic 5000", "roScan Plus"]
        assert df["daysuntilexpiration"].tolist() == [14, 90]

    def test_expired_warranty_negative(self, devices):
        """Test expired warranties have negative days."""
        df = warranty_expiring(devices, today="2024-07-01")
        assert df["daysuntilexpiration"].iloc[0] == -16

    def test_custom_window(self, devices):
        """Test the month window is configurable."""
        assert len(warranty_expiring(devices, months=1, today="2024-06-01")) == 1


class TestComplianceOverdue:
    """Test compliance_overdue."""

    def test_calendar_months(self, devices):
        """Test months since approval count month boundaries."""
        df = compliance_overdue(devices, today="2024-06-30")

        assert df["devicename"].tolist() == ["GloboMedic 5000"]
        assert df["monthssinceapproval"].tolist() == [26]

    def test_boundary_not_overdue(self, devices):
        """Test exactly 24 months is not overdue."""
        df = compliance_overdue(devices, today="2024-07-01")
        assert "NeuroSync Pro" not in df["devicename"].tolist()


class TestSatisfaction:
    """Test satisfaction scoring."""

    @pytest.mark.parametrize("text,score", [
        ("I am very disappointed", 0),
        ("Diagnosing vascular ISSUES quickly", 0),
        ("A problem occurred", 0),
        ("Greatly improved my quality of life", 1),
        (None, 1),
    ])
    def test_satisfaction_score(self, text, score):
        """Test keyword scoring."""
        assert satisfaction_score(text) == score

    def test_scores_per_device(self, devices, complaints):
        """Test average score per device, best first."""
        df = satisfaction_scores(devices, complaints)
        scores = df.set_index("devicename")

        assert scores.loc["GloboMedic 5000", "satisfactionscore"] == 0.5
        assert scores.loc["roScan Plus", "satisfactionscore"] == 0
        assert scores.loc["NeuroSync Pro", "satisfactionscore"] == 1
        assert scores.loc["NeuroSync Pro", "complaintcount"] == 0
        assert df["devicename"].iloc[0] == "NeuroSync Pro"
        assert df["devicename"].iloc[-1] == "roScan Plus"
