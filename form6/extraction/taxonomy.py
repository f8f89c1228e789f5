"""
Form 6 tag taxonomy consumed by the extractors.

Tag -> label tables for every detail-report category. Labels are the keys
of the report's category maps, so they are part of the output contract.
Adding a tag or category is a change to these tables only.
"""

# =============================================================================
# Financial summary tags
# =============================================================================

SUMMARY_TAGS = {
    "trunk_revenues": "ferc:TrunkRevenues",
    "gathering_revenues": "ferc:GatheringRevenues",
    "delivery_revenues": "ferc:DeliveryRevenues",
    "operation_expenses": "ferc:OperationExpense",
    "maintenance_expenses": "ferc:MaintenanceExpense",
    "carrier_property": "ferc:CarrierProperty",
    "total_assets": "ferc:AssetsAndOtherDebits",
}

NET_INCOME_TAG = "ferc:NetIncome"
NET_INCOME_FALLBACK_TAG = "ferc:NetOperatingIncome"

# =============================================================================
# Pipeline and segment tags
# =============================================================================

PIPELINE_NAME_TAG = "ferc:PipelineSystemName"
PIPELINE_ID_TAG = "ferc:PipelineSystemIdentifier"
PIPELINE_MILES_TAG = "ferc:MilesOfPipeline"
PIPELINE_STATE_TAG = "ferc:StateOrTerritory"
TOTAL_MILES_TAG = "ferc:TotalMilesOfPipeline"

# Text tags whose short values are collected as state/jurisdiction codes
STATE_TAGS = (
    "ferc:StateOrTerritory",
    "ferc:StateOfIncorporation",
    "ferc:StateName",
)

SEGMENT_START_TAG = "ferc:PipelineStartPoint"
SEGMENT_END_TAG = "ferc:PipelineEndPoint"

# segment field -> tag, joined to the start point by context id
SEGMENT_MEASURE_TAGS = {
    "gathering_miles": "ferc:MilesOfGatheringLinesOperated",
    "gathering_diameter": "ferc:SizeOfGatheringLinesOperated",
    "trunk_crude_miles": "ferc:MilesOfTrunkLinesForCrudeOilOperated",
    "trunk_crude_diameter": "ferc:SizeOfTrunkLinesForCrudeOilOperated",
    "trunk_product_miles": "ferc:MilesOfTrunkLinesForProductsOperated",
    "trunk_product_diameter": "ferc:SizeOfTrunkLinesForProductsOperated",
}

# report total -> segment mileage tag
SEGMENT_MILEAGE_TOTALS = {
    "total_gathering_miles": SEGMENT_MEASURE_TAGS["gathering_miles"],
    "total_trunk_crude_miles": SEGMENT_MEASURE_TAGS["trunk_crude_miles"],
    "total_trunk_products_miles": SEGMENT_MEASURE_TAGS["trunk_product_miles"],
}

# =============================================================================
# Company information (text)
# =============================================================================

COMPANY_INFO_FIELDS = {
    "ferc:AddressOfPrincipalOfficeAtEndOfPeriod": "Principal Office",
    "ferc:NameOfContactPerson": "Contact Person",
    "ferc:TitleOfContactPerson": "Contact Title",
    "ferc:TelephoneOfContactPerson": "Contact Phone",
    "ferc:AddressOfContactPerson": "Contact Address",
    "ferc:IncorporationDate": "Incorporation Date",
    "ferc:SpecialLawRespondentIncorporatedUnder": "Incorporation Law",
    "ferc:PreviousName": "Previous Name",
}

# =============================================================================
# Numeric categories
# =============================================================================

REVENUE_FIELDS = {
    "ferc:TrunkRevenues": "Trunk Revenues",
    "ferc:GatheringRevenues": "Gathering Revenues",
    "ferc:DeliveryRevenues": "Delivery Revenues",
    "ferc:OperatingRevenues": "Operating Revenues",
    "ferc:AllowanceOilRevenue": "Allowance Oil Revenue",
    "ferc:StorageAndDemurrageRevenue": "Storage & Demurrage",
    "ferc:RentalRevenue": "Rental Revenue",
    "ferc:IncidentalRevenue": "Incidental Revenue",
    "ferc:GatheringTrunkAndDeliveryRevenues": "Total GT&D Revenues",
}

OPERATING_EXPENSE_FIELDS = {
    "ferc:OperationsAndMaintenanceExpensesOil": "O&M Expenses",
    "ferc:SalariesAndWagesOperationsAndMaintenance": "O&M Salaries & Wages",
    "ferc:MaterialsAndSuppliesOperationsAndMaintenance": "O&M Materials & Supplies",
    "ferc:OutsideServicesOperationsAndMaintenance": "O&M Outside Services",
    "ferc:OperatingFuelAndPowerOperationsAndMaintenance": "Fuel & Power",
    "ferc:RentalsOperationsAndMaintenance": "O&M Rentals",
    "ferc:OilLossesAndShortagesOperationsAndMaintenance": "Oil Losses",
    "ferc:OtherExpensesOperationsAndMaintenance": "O&M Other Expenses",
}

GENERAL_EXPENSE_FIELDS = {
    "ferc:GeneralExpensesOil": "Total General Expenses",
    "ferc:SalariesAndWagesGeneralExpense": "General Salaries & Wages",
    "ferc:MaterialsAndSuppliesGeneralExpense": "General Materials",
    "ferc:OutsideServicesGeneralExpense": "General Outside Services",
    "ferc:DepreciationAndAmortizationGeneralExpense": "Depreciation & Amortization",
    "ferc:DepreciationExpenseForAssetRetirementCosts": "Asset Retirement Depreciation",
    "ferc:InsuranceGeneralExpense": "Insurance",
    "ferc:RentalsGeneralExpense": "General Rentals",
    "ferc:PipelineTaxesGeneralExpense": "Pipeline Taxes",
    "ferc:AccretionExpense": "Accretion Expense",
    "ferc:OtherExpensesGeneralExpense": "General Other Expenses",
}

INCOME_STATEMENT_FIELDS = {
    "ferc:OperatingExpenses": "Total Operating Expenses",
    "ferc:NetCarrierOperatingIncome": "Net Carrier Operating Income",
    "ferc:OrdinaryIncomeBeforeFederalIncomeTaxes": "Income Before Taxes",
    "ferc:FederalIncomeTaxesOnIncomeFromContinuingOperations": "Federal Income Taxes",
    "ferc:ProvisionForDeferredTaxes": "Deferred Taxes",
    "ferc:IncomeLossFromContinuingOperations": "Income from Continuing Ops",
    "ferc:NetIncomeLoss": "Net Income (Loss)",
    "ferc:ComprehensiveIncomeLoss": "Comprehensive Income",
    "ferc:InterestExpense": "Interest Expense",
    "ferc:InterestAndDividendIncome": "Interest & Dividend Income",
    "ferc:MiscellaneousIncome": "Miscellaneous Income",
}

ASSET_FIELDS = {
    "ferc:CarrierProperty": "Carrier Property (Gross)",
    "ferc:CarrierPropertyNet": "Carrier Property (Net)",
    "ferc:Assets": "Total Assets",
    "ferc:CarrierPropertyTrunkLines": "Trunk Lines Property",
    "ferc:CarrierPropertyGatheringLines": "Gathering Lines Property",
    "ferc:AccruedDepreciationCarrierProperty": "Accumulated Depreciation",
    "ferc:CurrentAssets": "Current Assets",
    "ferc:CashAndCashEquivalents": "Cash",
    "ferc:AccountsReceivable": "Accounts Receivable",
    "ferc:ReceivablesFromAffiliatedCompanies": "Receivables from Affiliates",
    "ferc:OilInventory": "Oil Inventory",
    "ferc:MaterialAndSupplies": "Materials & Supplies",
    "ferc:Prepayments": "Prepayments",
    "ferc:OtherCurrentAssets": "Other Current Assets",
    "ferc:OtherDeferredCharges": "Other Deferred Charges",
    "ferc:ConstructionWorkInProgressGeneralCarrierProperty": "Construction WIP",
}

LIABILITY_EQUITY_FIELDS = {
    "ferc:Liabilities": "Total Liabilities",
    "ferc:LiabilitiesAndStockholdersEquity": "Total Liab & Equity",
    "ferc:CurrentLiabilities": "Current Liabilities",
    "ferc:NoncurrentLiabilities": "Non-Current Liabilities",
    "ferc:AccountsPayable": "Accounts Payable",
    "ferc:PayablesToAffiliatedCompanies": "Payables to Affiliates",
    "ferc:TaxesPayable": "Taxes Payable",
    "ferc:LongTermDebt": "Long-Term Debt",
    "ferc:LongTermDebtPayableAfterOneYear": "LT Debt (After 1 Yr)",
    "ferc:LongTermDebtPayableWithinOneYear": "LT Debt (Within 1 Yr)",
    "ferc:AssetRetirementObligations": "Asset Retirement Obligations",
    "ferc:OtherNoncurrentLiabilities": "Other Non-Current Liabilities",
    "ferc:StockholdersEquity": "Stockholders Equity",
    "ferc:CapitalStock": "Capital Stock",
    "ferc:AdditionalPaidInCapital": "Additional Paid-In Capital",
    "ferc:UnappropriatedRetainedIncome": "Retained Earnings",
}

CASH_FLOW_FIELDS = {
    "ferc:NetCashProvidedByUsedInOperatingActivities": "Cash from Operations",
    "ferc:CashFlowsProvidedFromUsedInInvestmentActivities": "Cash from Investing",
    "ferc:CashFlowsProvidedFromUsedInFinancingActivities": "Cash from Financing",
    "ferc:NetIncreaseDecreaseInCashAndCashEquivalents": "Net Change in Cash",
    "ferc:DepreciationAndDepletion": "Depreciation & Depletion",
    "ferc:Amortization": "Amortization",
    "ferc:DeferredIncomeTaxesNet": "Deferred Income Taxes",
    "ferc:NetIncreaseDecreaseInReceivablesOperatingActivities": "Change in Receivables",
    "ferc:NetIncreaseDecreaseInPayablesAndAccruedExpensesOperatingActivities": "Change in Payables",
    "ferc:GrossAdditionsToCarrierPropertyInvestmentActivities": "Capital Expenditures",
    "ferc:CashOutflowsForPlant": "Cash Outflows for Plant",
}

OPERATIONAL_FIELDS = {
    "ferc:NumberOfBarrelsReceived": "Barrels Received",
    "ferc:NumberOfBarrelsDeliveredOut": "Barrels Delivered",
    "ferc:NumberOfBarrelsReceivedOnGatheringLines": "Barrels Received (Gathering)",
    "ferc:NumberOfBarrelsReceivedOnTrunkLines": "Barrels Received (Trunk)",
    "ferc:NumberOfBarrelsDeliveredOutOnGatheringLines": "Barrels Delivered (Gathering)",
    "ferc:NumberOfBarrelsDeliveredOutOnTrunkLines": "Barrels Delivered (Trunk)",
    "ferc:NumberOfBarrelMiles": "Total Barrel-Miles",
    "ferc:NumberOfBarrelMilesOnTrunkLinesOfCrudeOil": "Barrel-Miles (Crude)",
    "ferc:NumberOfBarrelMilesOnTrunkLinesOfOilProducts": "Barrel-Miles (Products)",
    "ferc:AverageNumberOfEmployees": "Employees (Average)",
    "ferc:ThroughputVolume": "Throughput Volume",
    "ferc:PipelineCapacity": "Pipeline Capacity",
}

RATE_BASE_FIELDS = {
    "ferc:ReturnOnRateBase": "Return on Rate Base",
    "ferc:DebtComponentReturnOnRateBase": "Debt Component Return",
    "ferc:EquityComponentReturnOnRateBase": "Equity Component Return",
    "ferc:IncomeTaxAllowance": "Income Tax Allowance",
    "ferc:CompositeTaxRate": "Composite Tax Rate",
    "ferc:OriginalCostIncludedInRateBase": "Original Cost in Rate Base",
    "ferc:TrendedOriginalCostRateBase": "Trended Original Cost Rate Base",
    "ferc:AccumulatedNetDeferredEarningsIncludedInRateBase": "Deferred Earnings in Rate Base",
    "ferc:WeightedAverageCostOfCapitalRateOfReturn": "WACC",
    "ferc:RealCostOfStockholdersEquityRateOfReturn": "Cost of Equity",
    "ferc:CostOfLongTermDebtCapitalRateOfReturn": "Cost of Debt",
    "ferc:AdjustedCapitalStructureRatioForLongTermDebtRateOfReturn": "Debt Ratio",
    "ferc:AdjustedCapitalStructureRatioForStockholdersEquityRateOfReturn": "Equity Ratio",
}

# detail report attribute -> tag table, in report order
CATEGORY_FIELDS = {
    "financial_data": INCOME_STATEMENT_FIELDS,
    "revenues": REVENUE_FIELDS,
    "operating_expenses": OPERATING_EXPENSE_FIELDS,
    "general_expenses": GENERAL_EXPENSE_FIELDS,
    "asset_data": ASSET_FIELDS,
    "liabilities_equity": LIABILITY_EQUITY_FIELDS,
    "cash_flow": CASH_FLOW_FIELDS,
    "operational_data": OPERATIONAL_FIELDS,
    "rate_base": RATE_BASE_FIELDS,
}


def all_category_tags() -> set[str]:
    """Every tag referenced by a numeric category."""
    return {tag for fields in CATEGORY_FIELDS.values() for tag in fields}
