"""
Sales data model.

Customer -> Buyer -> Client lifecycle plus the Opportunities pipeline. The
seed rows carry intentional data quality defects used by the data quality
and fuzzy matching demos:

Customer
    missing FirstName (6), invalid Email (5), missing HomeLocation (7),
    empty ZipCode (8), duplicate Email (9), name variations (3, 10)
Buyer
    missing CustomerID (103), stale LoadDate (104), address and name
    variations against Customer
Client
    missing BuyerID (206), negative ContractValue (207), NULL ContractValue (205)
Opportunities
    invalid SalesStage (1006), negative Amount (1010), missing
    ExpectedCloseDate (1007), missing CustomerID (1004), missing Amount (1009)
"""

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    func,
)

from .base import SampleDataset

VALID_SALES_STAGES = (
    "Prospecting",
    "Qualification",
    "Proposal",
    "Negotiation",
    "Closed Won",
    "Closed Lost",
)

metadata = MetaData()

customer = Table(
    "customer",
    metadata,
    Column("customerid", Integer, primary_key=True, autoincrement=False),
    Column("firstname", String(50), comment="First name for personalized communication"),
    Column("lastname", String(50), comment="Last name for formal identification"),
    Column("varnumber", String(20),
           comment="Unique customer identifier across systems. Format: LTY-XXXXX"),
    Column("email", String(100), comment="Primary contact method and unique identifier"),
    Column("homelocation", String(200),
           comment="Primary residence or business address. Used for territory assignment "
                   "and geographic analysis."),
    Column("zipcode", String(10), comment="Geographic segmentation and targeting"),
    Column("loaddate", DateTime(timezone=True), server_default=func.current_timestamp(),
           comment="Data freshness tracking"),
    comment="Core customer entity. Contains all customer records including prospects "
            "and active customers. PII data is masked based on role.",
)

buyer = Table(
    "buyer",
    metadata,
    Column("buyerid", Integer, primary_key=True, autoincrement=False),
    Column("customerid", Integer, ForeignKey("customer.customerid"),
           comment="Links to original customer record"),
    Column("firstname", String(50), comment="May differ from customer record"),
    Column("lastname", String(50), comment="May differ from customer record"),
    Column("email", String(100), comment="Contact for purchase communications"),
    Column("address", String(200),
           comment="Shipping or billing address. May differ from Customer.HomeLocation"),
    Column("postalcode", String(10),
           comment="Postal code for shipping address. Used for logistics and delivery routing."),
    Column("loaddate", DateTime(timezone=True), server_default=func.current_timestamp()),
    comment="Active customer subset who have made purchases. Links to Customer table "
            "for full profile.",
)

client = Table(
    "client",
    metadata,
    Column("clientid", Integer, primary_key=True, autoincrement=False),
    Column("buyerid", Integer, ForeignKey("buyer.buyerid"), comment="Links to buyer profile"),
    Column("contractstartdate", Date, comment="Beginning of contractual obligation"),
    Column("contractvalue", Numeric(10, 2),
           comment="Total contract value in USD. Used for revenue forecasting and "
                   "customer segmentation."),
    Column("loaddate", DateTime(timezone=True), server_default=func.current_timestamp()),
    comment="Contracted customers with active agreements. Contains financial terms "
            "and contract details.",
)

opportunities = Table(
    "opportunities",
    metadata,
    Column("opportunityid", Integer, primary_key=True, autoincrement=False),
    Column("customerid", Integer, ForeignKey("customer.customerid"),
           comment="Prospect or customer link"),
    Column("buyerid", Integer, ForeignKey("buyer.buyerid"), comment="Optional buyer association"),
    Column("leadsource", String(50),
           comment="Original source of the opportunity. Critical for marketing attribution "
                   "and channel effectiveness."),
    Column("salesstage", String(20),
           comment="Current stage in sales process. Valid values: " + ", ".join(VALID_SALES_STAGES)),
    Column("expectedclosedate", Date, comment="Projected closure for pipeline planning"),
    Column("amount", Numeric(10, 2), comment="Potential revenue value"),
    Column("loaddate", DateTime(timezone=True), server_default=func.current_timestamp()),
    comment="Sales pipeline tracking. Includes all stages from prospect to closed deals.",
)

CUSTOMER_COLUMNS = (
    "customerid", "firstname", "lastname", "email", "homelocation", "zipcode", "varnumber", "loaddate",
)

CUSTOMER_ROWS = [
    (1, "Alice", "Johnson", "alice.johnson@example.com", "123 Oak St", "94105", "LTY-12345", "2024-04-20 10:30:00"),
    (2, "Bob", "Smith", "bob.smith@example.com", "456 Elm St", "10001", "LTY-23456", "2024-03-15 11:15:00"),
    (3, "Eva", "Davies", "eva.davis@example.com", "789 Maple Ave", "20001", "LTY-34567", "2024-02-10 14:45:00"),
    (4, "Dave", "Brown", "dave.brown@example.com", "123 Main St", "54321", "LTY-45678", "2023-12-30 09:20:00"),
    (5, "Emily", "White", "invalid_email", "456 Park Ave", "67890", "LTY-56789", "2024-05-15 16:55:00"),
    (6, None, "Wilson", "charlie.wilson@example.com", "789 Broadway", "87654", "LTY-67890", "2024-05-18 12:00:00"),
    (7, "Grace", "Lee", "grace.lee@example.com", None, "34567", "LTY-78901", "2024-05-10 08:50:00"),
    (8, "Henry", "Miller", "henry.miller@example.com", "1011 Market St", "", "LTY-89012", "2024-05-05 15:35:00"),
    (9, "Ivy", "Tailor", "alice.johnson@example.com", "5566 Sunset Blvd", "12345", "LTY-90123", "2024-05-19 18:10:00"),
    (10, "Eva", "Davis", "eva.davis@anderson.com", "2233 River Rd", "98765", "LTY-01234", "2024-05-01 13:25:00"),
]

BUYER_COLUMNS = (
    "buyerid", "customerid", "firstname", "lastname", "email", "address", "postalcode", "loaddate",
)

BUYER_ROWS = [
    (101, 1, "Alice", "Johnson", "alice.johnson@example.com", "123 Oak St", "94105", "2024-04-25 12:30:00"),
    (102, 2, "Bob", "Smith", "bob.smith@example.com", "456 Elm St", "10001", "2024-03-20 15:45:00"),
    (103, None, "David", "Lee", "david.lee@example.com", "987 Pine St", "33101", "2024-02-15 11:20:00"),
    (104, 4, "Dave", "Brown", "dave.brown@example.com", "123 Main St", "54321", "2023-12-31 14:30:00"),
    (105, 5, "Emily", "White", "invalid_email2", "456 Park Ave", "67890", "2024-05-16 10:15:00"),
    (106, 6, None, "Wilson", "charlie.wilson@example.com", "789 Broadway", "87654", "2024-05-19 09:45:00"),
    (107, 7, "Grace", "Li", "grace.lee@example.com", None, "34567", "2024-05-11 16:25:00"),
    (108, 8, "Henry", "Mila", "henry.miller@example.com", "1011 Market St", "", "2024-05-06 13:00:00"),
    (109, 9, "Ivy", "Taylor", "ivy.taylor@example.com", "5566 Sunset Blvd", "12345", "2024-05-20 17:50:00"),
    (110, 10, "Jack", "Anderson", "jack@anderson.com", "2233 River Rd", "98765", "2024-05-02 18:05:00"),
]

CLIENT_COLUMNS = ("clientid", "buyerid", "contractstartdate", "contractvalue", "loaddate")

CLIENT_ROWS = [
    (201, 101, "2024-01-15", 50000, "2024-01-15 10:30:00"),
    (202, 102, "2023-12-01", 85000, "2023-12-01 11:15:00"),
    (203, 103, "2024-03-10", 60000, "2024-03-10 14:45:00"),
    (204, 104, "2023-11-20", 75000, "2023-11-20 09:20:00"),
    (205, 105, "2024-04-30", None, "2024-04-30 16:55:00"),
    (206, None, "2024-02-28", 90000, "2024-02-28 12:00:00"),
    (207, 107, "2024-05-05", -5000, "2024-05-05 08:50:00"),
    (208, 108, "2024-01-01", 120000, "2024-01-01 15:35:00"),
    (209, 109, "2023-12-15", 100000, "2023-12-15 18:10:00"),
    (210, 110, "2024-04-10", 45000, "2024-04-10 13:25:00"),
]

OPPORTUNITY_COLUMNS = (
    "opportunityid", "customerid", "buyerid", "leadsource", "salesstage",
    "expectedclosedate", "amount", "loaddate",
)

OPPORTUNITY_ROWS = [
    (1003, 3, None, "Outbound Call", "Qualification", "2024-05-20", 75000, "2024-05-12 18:15:00"),
    (1004, None, 103, "Email Campaign", "Proposal", "2024-06-10", 90000, "2024-04-28 14:20:00"),
    (1005, 4, None, "Web Form", "Negotiation", "2024-07-15", 150000, "2024-05-19 11:35:00"),
    (1006, 5, None, "Partner Referral", "InvalidStage", "2024-08-20", 180000, "2024-05-22 16:40:00"),
    (1007, 6, None, "Email Campaign", "Qualification", None, 65000, "2024-05-17 13:50:00"),
    (1008, 7, 107, "Cold Call", "Closed Won", "2024-05-10", 110000, "2023-12-28 08:30:00"),
    (1009, 8, 108, "Webinar", "Closed Lost", "2024-03-25", None, "2024-04-15 15:10:00"),
    (1010, 9, None, "Referral", "Proposal", "2024-06-05", -80000, "2024-05-14 17:25:00"),
    (1011, 10, 110, "Social Media", "Negotiation", "2024-07-02", 135000, "2024-05-08 12:45:00"),
    (1012, 2, 102, "Email Campaign", "Closed Won", "2023-12-01", 85000, "2024-05-21 10:00:00"),
]

dataset = SampleDataset(
    name="sales_db",
    description="Customer, Buyer, Client and Opportunities with seeded data quality defects",
    metadata=metadata,
    seed_rows={
        "customer": (CUSTOMER_COLUMNS, CUSTOMER_ROWS),
        "buyer": (BUYER_COLUMNS, BUYER_ROWS),
        "client": (CLIENT_COLUMNS, CLIENT_ROWS),
        "opportunities": (OPPORTUNITY_COLUMNS, OPPORTUNITY_ROWS),
    },
    known_issues={
        "customer": [
            "Missing FirstName",
            "Missing HomeLocation",
            "Missing ZipCode",
            "Duplicate Email",
            "Invalid Email",
            "Stale LoadDate",
        ],
        "buyer": [
            "Missing CustomerID",
            "Stale LoadDate",
            "Address mismatches against Customer",
            "Name variations against Customer",
        ],
        "client": [
            "Missing BuyerID",
            "Negative ContractValue",
            "NULL ContractValue",
        ],
        "opportunities": [
            "Missing CustomerID",
            "Missing ExpectedCloseDate",
            "Missing Amount",
            "Negative Amount",
            "Invalid SalesStage",
            "Stale LoadDate",
        ],
    },
)
