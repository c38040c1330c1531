"""
bai2_codes.py
Static BAI2 code tables.

Maps three-digit transaction and amount type codes to a direction/kind and a
snake_case category name, plus the small group-header enumerations. Every
lookup is total: codes that are not in a table classify as custom (inside the
reserved custom ranges) or unknown, never as an error.
"""

from enum import Enum
from typing import Optional, Tuple

from bai2_fields import parse_string


class Direction(str, Enum):
    CREDIT = "credit"
    DEBIT = "debit"
    UNKNOWN = "unknown"


class AmountKind(str, Enum):
    STATUS = "status"
    CREDIT_SUMMARY = "credit_summary"
    DEBIT_SUMMARY = "debit_summary"
    UNKNOWN = "unknown"


UNKNOWN_CATEGORY = "unknown"
CUSTOM_CATEGORY = "custom"


# ---------------------------------------------------------------------------
# Transaction detail (16) type codes
# ---------------------------------------------------------------------------
TRANSACTION_CODES = {
    "108": (Direction.CREDIT, "credit"),
    "115": (Direction.CREDIT, "lockbox_deposit"),
    "116": (Direction.CREDIT, "item_in_lockbox_deposit"),
    "118": (Direction.CREDIT, "lockbox_adjustment_credit"),
    "121": (Direction.CREDIT, "edi_transaction_credit"),
    "122": (Direction.CREDIT, "edibanx_credit_received"),
    "123": (Direction.CREDIT, "edibanx_credit_return"),
    "135": (Direction.CREDIT, "dtc_concentration_credit"),
    "136": (Direction.CREDIT, "item_in_dtc_deposit"),
    "142": (Direction.CREDIT, "ach_credit_received"),
    "143": (Direction.CREDIT, "item_in_ach_deposit"),
    "145": (Direction.CREDIT, "ach_concentration_credit"),
    "147": (Direction.CREDIT, "individual_bank_card_deposit"),
    "155": (Direction.CREDIT, "preauthorized_draft_credit"),
    "156": (Direction.CREDIT, "item_in_pac_deposit"),
    "164": (Direction.CREDIT, "corporate_trade_payment_credit"),
    "165": (Direction.CREDIT, "preauthorized_ach_credit"),
    "166": (Direction.CREDIT, "ach_settlement"),
    "168": (Direction.CREDIT, "ach_return_item_or_adjustment_settlement"),
    "169": (Direction.CREDIT, "miscellaneous_ach_credit"),
    "171": (Direction.CREDIT, "individual_loan_deposit"),
    "172": (Direction.CREDIT, "deposit_correction"),
    "173": (Direction.CREDIT, "bank_prepared_deposit"),
    "174": (Direction.CREDIT, "other_deposit"),
    "175": (Direction.CREDIT, "check_deposit_package"),
    "176": (Direction.CREDIT, "re_presented_check_deposit"),
    "184": (Direction.CREDIT, "draft_deposit"),
    "187": (Direction.CREDIT, "cash_letter_credit"),
    "189": (Direction.CREDIT, "cash_letter_adjustment"),
    "191": (Direction.CREDIT, "individual_incoming_internal_money_transfer"),
    "195": (Direction.CREDIT, "incoming_money_transfer"),
    "196": (Direction.CREDIT, "money_transfer_adjustment"),
    "198": (Direction.CREDIT, "compensation"),
    "201": (Direction.CREDIT, "individual_automatic_transfer_credit"),
    "202": (Direction.CREDIT, "bond_operations_credit"),
    "206": (Direction.CREDIT, "book_transfer_credit"),
    "208": (Direction.CREDIT, "individual_international_money_transfer_credit"),
    "212": (Direction.CREDIT, "foreign_letter_of_credit"),
    "213": (Direction.CREDIT, "letter_of_credit"),
    "214": (Direction.CREDIT, "foreign_exchange_of_credit"),
    "216": (Direction.CREDIT, "foreign_remittance_credit"),
    "218": (Direction.CREDIT, "foreign_collection_credit"),
    "221": (Direction.CREDIT, "foreign_check_purchase"),
    "222": (Direction.CREDIT, "foreign_checks_deposited"),
    "224": (Direction.CREDIT, "commission"),
    "226": (Direction.CREDIT, "international_money_market_trading"),
    "227": (Direction.CREDIT, "standing_order"),
    "229": (Direction.CREDIT, "miscellaneous_international_credit"),
    "232": (Direction.CREDIT, "sale_of_debt_security"),
    "233": (Direction.CREDIT, "securities_sold"),
    "234": (Direction.CREDIT, "sale_of_equity_security"),
    "235": (Direction.CREDIT, "matured_reverse_repurchase_order"),
    "236": (Direction.CREDIT, "maturity_of_debt_security"),
    "237": (Direction.CREDIT, "individual_collection_credit"),
    "238": (Direction.CREDIT, "collection_of_dividends"),
    "240": (Direction.CREDIT, "coupon_collections_banks"),
    "241": (Direction.CREDIT, "bankers_acceptances"),
    "242": (Direction.CREDIT, "collection_of_interest_income"),
    "243": (Direction.CREDIT, "matured_fed_funds_purchased"),
    "244": (Direction.CREDIT, "interest_matured_principal_payment"),
    "246": (Direction.CREDIT, "commercial_paper"),
    "247": (Direction.CREDIT, "capital_change"),
    "248": (Direction.CREDIT, "savings_bonds_sales_adjustment"),
    "249": (Direction.CREDIT, "miscellaneous_security_credit"),
    "252": (Direction.CREDIT, "debit_reversal"),
    "254": (Direction.CREDIT, "posting_error_correction_credit"),
    "255": (Direction.CREDIT, "check_posted_and_returned"),
    "257": (Direction.CREDIT, "individual_ach_return_item"),
    "258": (Direction.CREDIT, "ach_reversal_credit"),
    "261": (Direction.CREDIT, "individual_rejected_credit"),
    "263": (Direction.CREDIT, "overdraft"),
    "266": (Direction.CREDIT, "return_item"),
    "268": (Direction.CREDIT, "return_item_adjustment"),
    "274": (Direction.CREDIT, "cumulative_zba_or_disbursement_credits"),
    "275": (Direction.CREDIT, "zba_credit"),
    "276": (Direction.CREDIT, "zba_float_adjustment"),
    "277": (Direction.CREDIT, "zba_credit_transfer"),
    "278": (Direction.CREDIT, "zba_credit_adjustment"),
    "281": (Direction.CREDIT, "individual_controlled_disbursing_credit"),
    "286": (Direction.CREDIT, "individual_dtc_disbursing_credit"),
    "295": (Direction.CREDIT, "atm_credit"),
    "301": (Direction.CREDIT, "commercial_deposit"),
    "306": (Direction.CREDIT, "fed_funds_sold"),
    "308": (Direction.CREDIT, "trust_credit"),
    "331": (Direction.CREDIT, "individual_escrow_credit"),
    "342": (Direction.CREDIT, "broker_deposit"),
    "344": (Direction.CREDIT, "individual_back_value_credit"),
    "345": (Direction.CREDIT, "item_in_brokers_deposit"),
    "346": (Direction.CREDIT, "sweep_interest_income"),
    "347": (Direction.CREDIT, "sweep_principal_sell"),
    "348": (Direction.CREDIT, "futures_credit"),
    "349": (Direction.CREDIT, "principal_payments_credit"),
    "351": (Direction.CREDIT, "individual_investment_sold"),
    "353": (Direction.CREDIT, "cash_center_credit"),
    "354": (Direction.CREDIT, "interest_credit"),
    "357": (Direction.CREDIT, "credit_adjustment"),
    "358": (Direction.CREDIT, "ytd_adjustment_credit"),
    "359": (Direction.CREDIT, "interest_adjustment_credit"),
    "362": (Direction.CREDIT, "correspondent_collection"),
    "363": (Direction.CREDIT, "correspondent_collection_adjustment"),
    "364": (Direction.CREDIT, "loan_participation"),
    "366": (Direction.CREDIT, "currency_and_coin_deposited"),
    "367": (Direction.CREDIT, "food_stamp_letter"),
    "368": (Direction.CREDIT, "food_stamp_adjustment"),
    "369": (Direction.CREDIT, "clearing_settlement_credit"),
    "372": (Direction.CREDIT, "back_value_adjustment"),
    "373": (Direction.CREDIT, "customer_payroll"),
    "374": (Direction.CREDIT, "frb_statement_recap"),
    "376": (Direction.CREDIT, "savings_bond_letter_or_adjustment"),
    "377": (Direction.CREDIT, "treasury_tax_and_loan_credit"),
    "378": (Direction.CREDIT, "transfer_of_treasury_credit"),
    "379": (Direction.CREDIT, "frb_government_checks_cash_letter_credit"),
    "381": (Direction.CREDIT, "frb_government_check_adjustment"),
    "382": (Direction.CREDIT, "frb_postal_money_order_credit"),
    "383": (Direction.CREDIT, "frb_postal_money_order_adjustment"),
    "384": (Direction.CREDIT, "frb_cash_letter_auto_charge_credit"),
    "386": (Direction.CREDIT, "frb_cash_letter_auto_charge_adjustment"),
    "387": (Direction.CREDIT, "frb_fine_sort_cash_letter_credit"),
    "388": (Direction.CREDIT, "frb_fine_sort_adjustment"),
    "391": (Direction.CREDIT, "universal_credit"),
    "392": (Direction.CREDIT, "freight_payment_credit"),
    "393": (Direction.CREDIT, "itemized_credit_over_10000"),
    "394": (Direction.CREDIT, "cumulative_credits"),
    "395": (Direction.CREDIT, "check_reversal"),
    "397": (Direction.CREDIT, "float_adjustment"),
    "398": (Direction.CREDIT, "miscellaneous_fee_refund"),
    "399": (Direction.CREDIT, "miscellaneous_credit"),
    "408": (Direction.DEBIT, "float_adjustment"),
    "409": (Direction.DEBIT, "debit_any_type"),
    "415": (Direction.DEBIT, "lockbox_debit"),
    "421": (Direction.DEBIT, "edi_transaction_debit"),
    "422": (Direction.DEBIT, "edibanx_settlement_debit"),
    "423": (Direction.DEBIT, "edibanx_return_item_debit"),
    "435": (Direction.DEBIT, "payable_through_draft"),
    "445": (Direction.DEBIT, "ach_concentration_debit"),
    "447": (Direction.DEBIT, "ach_disbursement_funding_debit"),
    "451": (Direction.DEBIT, "ach_debit_received"),
    "452": (Direction.DEBIT, "item_in_ach_disbursement_or_debit"),
    "455": (Direction.DEBIT, "preauthorized_ach_debit"),
    "462": (Direction.DEBIT, "account_holder_initiated_ach_debit"),
    "464": (Direction.DEBIT, "corporate_trade_payment_debit"),
    "466": (Direction.DEBIT, "ach_settlement"),
    "468": (Direction.DEBIT, "ach_return_item_or_adjustment_settlement"),
    "469": (Direction.DEBIT, "miscellaneous_ach_debit"),
    "472": (Direction.DEBIT, "cumulative_checks_paid"),
    "474": (Direction.DEBIT, "certified_check_debit"),
    "475": (Direction.DEBIT, "check_paid"),
    "476": (Direction.DEBIT, "federal_reserve_bank_letter_debit"),
    "477": (Direction.DEBIT, "bank_originated_debit"),
    "479": (Direction.DEBIT, "list_post_debit"),
    "481": (Direction.DEBIT, "individual_loan_payment"),
    "484": (Direction.DEBIT, "draft"),
    "485": (Direction.DEBIT, "dtc_debit"),
    "487": (Direction.DEBIT, "cash_letter_debit"),
    "489": (Direction.DEBIT, "cash_letter_adjustment"),
    "491": (Direction.DEBIT, "individual_outgoing_internal_money_transfer"),
    "493": (Direction.DEBIT, "customer_terminal_initiated_money_transfer"),
    "495": (Direction.DEBIT, "outgoing_money_transfer"),
    "496": (Direction.DEBIT, "money_transfer_adjustment"),
    "498": (Direction.DEBIT, "compensation"),
    "501": (Direction.DEBIT, "individual_automatic_transfer_debit"),
    "502": (Direction.DEBIT, "bond_operations_debit"),
    "506": (Direction.DEBIT, "book_transfer_debit"),
    "508": (Direction.DEBIT, "individual_international_money_transfer_debits"),
    "512": (Direction.DEBIT, "letter_of_credit_debit"),
    "513": (Direction.DEBIT, "letter_of_credit"),
    "514": (Direction.DEBIT, "foreign_exchange_debit"),
    "516": (Direction.DEBIT, "foreign_remittance_debit"),
    "518": (Direction.DEBIT, "foreign_collection_debit"),
    "522": (Direction.DEBIT, "foreign_checks_paid"),
    "524": (Direction.DEBIT, "commission"),
    "526": (Direction.DEBIT, "international_money_market_trading"),
    "527": (Direction.DEBIT, "standing_order"),
    "529": (Direction.DEBIT, "miscellaneous_international_debit"),
    "531": (Direction.DEBIT, "securities_purchased"),
    "533": (Direction.DEBIT, "security_collection_debit"),
    "535": (Direction.DEBIT, "purchase_of_equity_securities"),
    "538": (Direction.DEBIT, "matured_repurchase_order"),
    "540": (Direction.DEBIT, "coupon_collection_debit"),
    "541": (Direction.DEBIT, "bankers_acceptances"),
    "542": (Direction.DEBIT, "purchase_of_debt_securities"),
    "543": (Direction.DEBIT, "domestic_collection"),
    "544": (Direction.DEBIT, "interest_matured_principal_payment"),
    "546": (Direction.DEBIT, "commercial_paper"),
    "547": (Direction.DEBIT, "capital_change"),
    "548": (Direction.DEBIT, "savings_bonds_sales_adjustment"),
    "549": (Direction.DEBIT, "miscellaneous_security_debit"),
    "552": (Direction.DEBIT, "credit_reversal"),
    "554": (Direction.DEBIT, "posting_error_correction_debit"),
    "555": (Direction.DEBIT, "deposited_item_returned"),
    "557": (Direction.DEBIT, "individual_ach_return_item"),
    "558": (Direction.DEBIT, "ach_reversal_debit"),
    "561": (Direction.DEBIT, "individual_rejected_debit"),
    "563": (Direction.DEBIT, "overdraft"),
    "564": (Direction.DEBIT, "overdraft_fee"),
    "566": (Direction.DEBIT, "return_item"),
    "567": (Direction.DEBIT, "return_item_fee"),
    "568": (Direction.DEBIT, "return_item_adjustment"),
    "574": (Direction.DEBIT, "cumulative_zba_debits"),
    "575": (Direction.DEBIT, "zba_debit"),
    "577": (Direction.DEBIT, "zba_debit_transfer"),
    "578": (Direction.DEBIT, "zba_debit_adjustment"),
    "581": (Direction.DEBIT, "individual_controlled_disbursing_debit"),
    "595": (Direction.DEBIT, "atm_debit"),
    "597": (Direction.DEBIT, "arp_debit"),
    "616": (Direction.DEBIT, "federal_reserve_bank_commercial_bank_debit"),
    "622": (Direction.DEBIT, "broker_debit"),
    "627": (Direction.DEBIT, "fed_funds_purchased"),
    "629": (Direction.DEBIT, "cash_center_debit"),
    "631": (Direction.DEBIT, "debit_adjustment"),
    "633": (Direction.DEBIT, "trust_debit"),
    "634": (Direction.DEBIT, "ytd_adjustment_debit"),
    "641": (Direction.DEBIT, "individual_escrow_debit"),
    "644": (Direction.DEBIT, "individual_back_value_debit"),
    "651": (Direction.DEBIT, "individual_investment_purchased"),
    "654": (Direction.DEBIT, "interest_debit"),
    "656": (Direction.DEBIT, "sweep_principal_buy"),
    "657": (Direction.DEBIT, "futures_debit"),
    "658": (Direction.DEBIT, "principal_payments_debit"),
    "659": (Direction.DEBIT, "interest_adjustment_debit"),
    "661": (Direction.DEBIT, "account_analysis_fee"),
    "662": (Direction.DEBIT, "correspondent_collection_debit"),
    "663": (Direction.DEBIT, "correspondent_collection_adjustment"),
    "664": (Direction.DEBIT, "loan_participation"),
    "666": (Direction.DEBIT, "currency_and_coin_shipped"),
    "667": (Direction.DEBIT, "food_stamp_letter"),
    "668": (Direction.DEBIT, "food_stamp_adjustment"),
    "669": (Direction.DEBIT, "clearing_settlement_debit"),
    "672": (Direction.DEBIT, "back_value_adjustment"),
    "673": (Direction.DEBIT, "customer_payroll"),
    "674": (Direction.DEBIT, "frb_statement_recap"),
    "676": (Direction.DEBIT, "savings_bond_letter_or_adjustment"),
    "677": (Direction.DEBIT, "treasury_tax_and_loan_debit"),
    "678": (Direction.DEBIT, "transfer_of_treasury_debit"),
    "679": (Direction.DEBIT, "frb_government_checks_cash_letter_debit"),
    "681": (Direction.DEBIT, "frb_government_check_adjustment"),
    "682": (Direction.DEBIT, "frb_postal_money_order_debit"),
    "683": (Direction.DEBIT, "frb_postal_money_order_adjustment"),
    "684": (Direction.DEBIT, "frb_cash_letter_auto_charge_debit"),
    "686": (Direction.DEBIT, "frb_cash_letter_auto_charge_adjustment"),
    "687": (Direction.DEBIT, "frb_fine_sort_cash_letter_debit"),
    "688": (Direction.DEBIT, "frb_fine_sort_adjustment"),
    "691": (Direction.DEBIT, "universal_debit"),
    "692": (Direction.DEBIT, "freight_payment_debit"),
    "693": (Direction.DEBIT, "itemized_debit_over_10000"),
    "694": (Direction.DEBIT, "deposit_reversal"),
    "695": (Direction.DEBIT, "deposit_correction_debit"),
    "696": (Direction.DEBIT, "regular_collection_debit"),
    "697": (Direction.DEBIT, "cumulative_debits"),
    "698": (Direction.DEBIT, "miscellaneous_fees"),
    "699": (Direction.DEBIT, "miscellaneous_debit"),
    "721": (Direction.CREDIT, "amount_applied_to_interest"),
    "722": (Direction.CREDIT, "amount_applied_to_principal"),
    "723": (Direction.CREDIT, "amount_applied_to_escrow"),
    "724": (Direction.CREDIT, "amount_applied_to_late_charges"),
    "725": (Direction.CREDIT, "amount_applied_to_buydown"),
    "726": (Direction.CREDIT, "amount_applied_to_misc_fees"),
    "727": (Direction.CREDIT, "amount_applied_to_deferred_interest_detail"),
    "728": (Direction.CREDIT, "amount_applied_to_service_charge"),
    "890": (Direction.UNKNOWN, "info"),
}


# ---------------------------------------------------------------------------
# Account summary / status (03) type codes
# ---------------------------------------------------------------------------
AMOUNT_CODES = {
    "010": (AmountKind.STATUS, "opening_ledger"),
    "011": (AmountKind.STATUS, "average_opening_ledger_mtd"),
    "012": (AmountKind.STATUS, "average_opening_ledger_ytd"),
    "015": (AmountKind.STATUS, "closing_ledger"),
    "020": (AmountKind.STATUS, "average_closing_ledger_mtd"),
    "021": (AmountKind.STATUS, "average_closing_ledger_previous_month"),
    "022": (AmountKind.STATUS, "aggregate_balance_adjustments"),
    "024": (AmountKind.STATUS, "average_closing_ledger_ytd_previous_month"),
    "025": (AmountKind.STATUS, "average_closing_ledger_ytd"),
    "030": (AmountKind.STATUS, "current_ledger"),
    "037": (AmountKind.STATUS, "ach_net_position"),
    "039": (AmountKind.STATUS, "opening_available_and_total_same_day_ach_dtc_deposit"),
    "040": (AmountKind.STATUS, "opening_available"),
    "041": (AmountKind.STATUS, "average_opening_available_mtd"),
    "042": (AmountKind.STATUS, "average_opening_available_ytd"),
    "043": (AmountKind.STATUS, "average_available_previous_month"),
    "044": (AmountKind.STATUS, "disbursing_opening_available_balance"),
    "045": (AmountKind.STATUS, "closing_available"),
    "050": (AmountKind.STATUS, "average_closing_available_mtd"),
    "051": (AmountKind.STATUS, "average_closing_available_last_month"),
    "054": (AmountKind.STATUS, "average_closing_available_ytd_last_month"),
    "055": (AmountKind.STATUS, "average_closing_available_ytd"),
    "056": (AmountKind.STATUS, "loan_balance"),
    "057": (AmountKind.STATUS, "total_investment_position"),
    "059": (AmountKind.STATUS, "current_available_crs_suppressed"),
    "060": (AmountKind.STATUS, "current_available"),
    "061": (AmountKind.STATUS, "average_current_available_mtd"),
    "062": (AmountKind.STATUS, "average_current_available_ytd"),
    "063": (AmountKind.STATUS, "total_float"),
    "065": (AmountKind.STATUS, "target_balance"),
    "066": (AmountKind.STATUS, "adjusted_balance"),
    "067": (AmountKind.STATUS, "adjusted_balance_mtd"),
    "068": (AmountKind.STATUS, "adjusted_balance_ytd"),
    "070": (AmountKind.STATUS, "zero_day_float"),
    "072": (AmountKind.STATUS, "one_day_float"),
    "073": (AmountKind.STATUS, "float_adjustment"),
    "074": (AmountKind.STATUS, "two_or_more_days_float"),
    "075": (AmountKind.STATUS, "three_or_more_days_float"),
    "076": (AmountKind.STATUS, "adjustment_to_balances"),
    "077": (AmountKind.STATUS, "average_adjustment_to_balances_mtd"),
    "078": (AmountKind.STATUS, "average_adjustment_to_balances_ytd"),
    "079": (AmountKind.STATUS, "four_day_float"),
    "080": (AmountKind.STATUS, "five_day_float"),
    "081": (AmountKind.STATUS, "six_day_float"),
    "082": (AmountKind.STATUS, "average1_day_float_mtd"),
    "083": (AmountKind.STATUS, "average1_day_float_ytd"),
    "084": (AmountKind.STATUS, "average2_day_float_mtd"),
    "085": (AmountKind.STATUS, "average2_day_float_ytd"),
    "086": (AmountKind.STATUS, "transfer_calculation"),
    "100": (AmountKind.CREDIT_SUMMARY, "total_credits"),
    "101": (AmountKind.CREDIT_SUMMARY, "total_credit_amount_mtd"),
    "105": (AmountKind.CREDIT_SUMMARY, "credits_not_detailed"),
    "106": (AmountKind.CREDIT_SUMMARY, "deposits_subject_to_float"),
    "107": (AmountKind.CREDIT_SUMMARY, "total_adjustment_credits_ytd"),
    "109": (AmountKind.CREDIT_SUMMARY, "current_day_total_lockbox_deposits"),
    "110": (AmountKind.CREDIT_SUMMARY, "total_lockbox_deposits"),
    "120": (AmountKind.CREDIT_SUMMARY, "edi_transaction_credit"),
    "130": (AmountKind.CREDIT_SUMMARY, "total_concentration_credits"),
    "131": (AmountKind.CREDIT_SUMMARY, "total_dtc_credits"),
    "140": (AmountKind.CREDIT_SUMMARY, "total_ach_credits"),
    "146": (AmountKind.CREDIT_SUMMARY, "total_bank_card_deposits"),
    "150": (AmountKind.CREDIT_SUMMARY, "total_preauthorized_payment_credits"),
    "160": (AmountKind.CREDIT_SUMMARY, "total_ach_disbursing_funding_credits"),
    "162": (AmountKind.CREDIT_SUMMARY, "corporate_trade_payment_settlement"),
    "163": (AmountKind.CREDIT_SUMMARY, "corporate_trade_payment_credits"),
    "167": (AmountKind.CREDIT_SUMMARY, "ach_settlement_credits"),
    "170": (AmountKind.CREDIT_SUMMARY, "total_other_check_deposits"),
    "178": (AmountKind.CREDIT_SUMMARY, "list_post_credits"),
    "180": (AmountKind.CREDIT_SUMMARY, "total_loan_proceeds"),
    "182": (AmountKind.CREDIT_SUMMARY, "total_bank_prepared_deposits"),
    "185": (AmountKind.CREDIT_SUMMARY, "total_miscellaneous_deposits"),
    "186": (AmountKind.CREDIT_SUMMARY, "total_cash_letter_credits"),
    "188": (AmountKind.CREDIT_SUMMARY, "total_cash_letter_adjustments"),
    "190": (AmountKind.CREDIT_SUMMARY, "total_incoming_money_transfers"),
    "200": (AmountKind.CREDIT_SUMMARY, "total_automatic_transfer_credits"),
    "205": (AmountKind.CREDIT_SUMMARY, "total_book_transfer_credits"),
    "207": (AmountKind.CREDIT_SUMMARY, "total_international_money_transfer_credits"),
    "210": (AmountKind.CREDIT_SUMMARY, "total_international_credits"),
    "215": (AmountKind.CREDIT_SUMMARY, "total_letters_of_credit"),
    "230": (AmountKind.CREDIT_SUMMARY, "total_security_credits"),
    "231": (AmountKind.CREDIT_SUMMARY, "total_collection_credits"),
    "239": (AmountKind.CREDIT_SUMMARY, "total_bankers_acceptance_credits"),
    "245": (AmountKind.CREDIT_SUMMARY, "monthly_dividends"),
    "250": (AmountKind.CREDIT_SUMMARY, "total_checks_posted_and_returned"),
    "251": (AmountKind.CREDIT_SUMMARY, "total_debit_reversals"),
    "256": (AmountKind.CREDIT_SUMMARY, "total_ach_return_items"),
    "260": (AmountKind.CREDIT_SUMMARY, "total_rejected_credits"),
    "270": (AmountKind.CREDIT_SUMMARY, "total_zba_credits"),
    "271": (AmountKind.CREDIT_SUMMARY, "net_zero_balance_amount"),
    "280": (AmountKind.CREDIT_SUMMARY, "total_controlled_disbursing_credits"),
    "285": (AmountKind.CREDIT_SUMMARY, "total_dtc_disbursing_credits"),
    "294": (AmountKind.CREDIT_SUMMARY, "total_atm_credits"),
    "302": (AmountKind.CREDIT_SUMMARY, "correspondent_bank_deposit"),
    "303": (AmountKind.CREDIT_SUMMARY, "total_wire_transfers_in_ff"),
    "304": (AmountKind.CREDIT_SUMMARY, "total_wire_transfers_in_chf"),
    "305": (AmountKind.CREDIT_SUMMARY, "total_fed_funds_sold"),
    "307": (AmountKind.CREDIT_SUMMARY, "total_trust_credits"),
    "309": (AmountKind.CREDIT_SUMMARY, "total_value_dated_funds"),
    "310": (AmountKind.CREDIT_SUMMARY, "total_commercial_deposits"),
    "315": (AmountKind.CREDIT_SUMMARY, "total_international_credits_ff"),
    "316": (AmountKind.CREDIT_SUMMARY, "total_international_credits_chf"),
    "318": (AmountKind.CREDIT_SUMMARY, "total_foreign_check_purchased"),
    "319": (AmountKind.CREDIT_SUMMARY, "late_deposit"),
    "320": (AmountKind.CREDIT_SUMMARY, "total_securities_sold_ff"),
    "321": (AmountKind.CREDIT_SUMMARY, "total_securities_sold_chf"),
    "324": (AmountKind.CREDIT_SUMMARY, "total_securities_matured_ff"),
    "325": (AmountKind.CREDIT_SUMMARY, "total_securities_matured_chf"),
    "326": (AmountKind.CREDIT_SUMMARY, "total_securities_interest"),
    "327": (AmountKind.CREDIT_SUMMARY, "total_securities_matured"),
    "328": (AmountKind.CREDIT_SUMMARY, "total_securities_interest_ff"),
    "329": (AmountKind.CREDIT_SUMMARY, "total_securities_interest_chf"),
    "330": (AmountKind.CREDIT_SUMMARY, "total_escrow_credits"),
    "332": (AmountKind.CREDIT_SUMMARY, "total_miscellaneous_securities_credits_ff"),
    "336": (AmountKind.CREDIT_SUMMARY, "total_miscellaneous_securities_credits_chf"),
    "338": (AmountKind.CREDIT_SUMMARY, "total_securities_sold"),
    "340": (AmountKind.CREDIT_SUMMARY, "total_broker_deposits"),
    "341": (AmountKind.CREDIT_SUMMARY, "total_broker_deposits_ff"),
    "343": (AmountKind.CREDIT_SUMMARY, "total_broker_deposits_chf"),
    "350": (AmountKind.CREDIT_SUMMARY, "investment_sold"),
    "352": (AmountKind.CREDIT_SUMMARY, "total_cash_center_credits"),
    "355": (AmountKind.CREDIT_SUMMARY, "investment_interest"),
    "356": (AmountKind.CREDIT_SUMMARY, "total_credit_adjustment"),
    "360": (AmountKind.CREDIT_SUMMARY, "total_credits_less_wire_transfer_and_returned_checks"),
    "361": (AmountKind.CREDIT_SUMMARY, "grand_total_credits_less_grand_total_debits"),
    "370": (AmountKind.CREDIT_SUMMARY, "total_back_value_credits"),
    "385": (AmountKind.CREDIT_SUMMARY, "total_universal_credits"),
    "389": (AmountKind.CREDIT_SUMMARY, "total_freight_payment_credits"),
    "390": (AmountKind.CREDIT_SUMMARY, "total_miscellaneous_credits"),
    "400": (AmountKind.DEBIT_SUMMARY, "total_debits"),
    "401": (AmountKind.DEBIT_SUMMARY, "total_debit_amount_mtd"),
    "403": (AmountKind.DEBIT_SUMMARY, "todays_total_debits"),
    "405": (AmountKind.DEBIT_SUMMARY, "total_debit_less_wire_transfers_and_charge_backs"),
    "406": (AmountKind.DEBIT_SUMMARY, "debits_not_detailed"),
    "410": (AmountKind.DEBIT_SUMMARY, "total_ytd_adjustment"),
    "412": (AmountKind.DEBIT_SUMMARY, "total_debits_excluding_returned_items"),
    "416": (AmountKind.DEBIT_SUMMARY, "total_lockbox_debits"),
    "420": (AmountKind.DEBIT_SUMMARY, "edi_transaction_debits"),
    "430": (AmountKind.DEBIT_SUMMARY, "total_payable_through_drafts"),
    "446": (AmountKind.DEBIT_SUMMARY, "total_ach_disbursement_funding_debits"),
    "450": (AmountKind.DEBIT_SUMMARY, "total_ach_debits"),
    "463": (AmountKind.DEBIT_SUMMARY, "corporate_trade_payment_debits"),
    "465": (AmountKind.DEBIT_SUMMARY, "corporate_trade_payment_settlement"),
    "467": (AmountKind.DEBIT_SUMMARY, "ach_settlement_debits"),
    "470": (AmountKind.DEBIT_SUMMARY, "total_check_paid"),
    "471": (AmountKind.DEBIT_SUMMARY, "total_check_paid_cumulative_mtd"),
    "478": (AmountKind.DEBIT_SUMMARY, "list_post_debits"),
    "480": (AmountKind.DEBIT_SUMMARY, "total_loan_payments"),
    "482": (AmountKind.DEBIT_SUMMARY, "total_bank_originated_debits"),
    "486": (AmountKind.DEBIT_SUMMARY, "total_cash_letter_debits"),
    "490": (AmountKind.DEBIT_SUMMARY, "total_outgoing_money_transfers"),
    "500": (AmountKind.DEBIT_SUMMARY, "total_automatic_transfer_debits"),
    "505": (AmountKind.DEBIT_SUMMARY, "total_book_transfer_debits"),
    "507": (AmountKind.DEBIT_SUMMARY, "total_international_money_transfer_debits"),
    "510": (AmountKind.DEBIT_SUMMARY, "total_international_debits"),
    "515": (AmountKind.DEBIT_SUMMARY, "total_letters_of_credit"),
    "530": (AmountKind.DEBIT_SUMMARY, "total_security_debits"),
    "532": (AmountKind.DEBIT_SUMMARY, "total_amount_of_securities_purchased"),
    "534": (AmountKind.DEBIT_SUMMARY, "total_miscellaneous_securities_db_ff"),
    "536": (AmountKind.DEBIT_SUMMARY, "total_miscellaneous_securities_debit_chf"),
    "537": (AmountKind.DEBIT_SUMMARY, "total_collection_debit"),
    "539": (AmountKind.DEBIT_SUMMARY, "total_bankers_acceptances_debit"),
    "550": (AmountKind.DEBIT_SUMMARY, "total_deposited_items_returned"),
    "551": (AmountKind.DEBIT_SUMMARY, "total_credit_reversals"),
    "556": (AmountKind.DEBIT_SUMMARY, "total_ach_return_items"),
    "560": (AmountKind.DEBIT_SUMMARY, "total_rejected_debits"),
    "570": (AmountKind.DEBIT_SUMMARY, "total_zba_debits"),
    "580": (AmountKind.DEBIT_SUMMARY, "total_controlled_disbursing_debits"),
    "583": (AmountKind.DEBIT_SUMMARY, "total_disbursing_checks_paid_early_amount"),
    "584": (AmountKind.DEBIT_SUMMARY, "total_disbursing_checks_paid_later_amount"),
    "585": (AmountKind.DEBIT_SUMMARY, "disbursing_funding_requirement"),
    "586": (AmountKind.DEBIT_SUMMARY, "frb_presentment_estimate"),
    "587": (AmountKind.DEBIT_SUMMARY, "late_debits_after_notification"),
    "588": (AmountKind.DEBIT_SUMMARY, "total_disbursing_checks_paid_last_amount"),
    "590": (AmountKind.DEBIT_SUMMARY, "total_dtc_debits"),
    "594": (AmountKind.DEBIT_SUMMARY, "total_atm_debits"),
    "596": (AmountKind.DEBIT_SUMMARY, "total_apr_debits"),
    "601": (AmountKind.DEBIT_SUMMARY, "estimated_total_disbursement"),
    "602": (AmountKind.DEBIT_SUMMARY, "adjusted_total_disbursement"),
    "610": (AmountKind.DEBIT_SUMMARY, "total_funds_required"),
    "611": (AmountKind.DEBIT_SUMMARY, "total_wire_transfers_out_chf"),
    "612": (AmountKind.DEBIT_SUMMARY, "total_wire_transfers_out_ff"),
    "613": (AmountKind.DEBIT_SUMMARY, "total_international_debit_chf"),
    "614": (AmountKind.DEBIT_SUMMARY, "total_international_debit_ff"),
    "615": (AmountKind.DEBIT_SUMMARY, "total_federal_reserve_bank_commercial_bank_debit"),
    "617": (AmountKind.DEBIT_SUMMARY, "total_securities_purchased_chf"),
    "618": (AmountKind.DEBIT_SUMMARY, "total_securities_purchased_ff"),
    "621": (AmountKind.DEBIT_SUMMARY, "total_broker_debits_chf"),
    "623": (AmountKind.DEBIT_SUMMARY, "total_broker_debits_ff"),
    "625": (AmountKind.DEBIT_SUMMARY, "total_broker_debits"),
    "626": (AmountKind.DEBIT_SUMMARY, "total_fed_funds_purchased"),
    "628": (AmountKind.DEBIT_SUMMARY, "total_cash_center_debits"),
    "630": (AmountKind.DEBIT_SUMMARY, "total_debit_adjustments"),
    "632": (AmountKind.DEBIT_SUMMARY, "total_trust_debits"),
    "640": (AmountKind.DEBIT_SUMMARY, "total_escrow_debits"),
    "646": (AmountKind.DEBIT_SUMMARY, "transfer_calculation_debit"),
    "650": (AmountKind.DEBIT_SUMMARY, "investments_purchased"),
    "655": (AmountKind.DEBIT_SUMMARY, "total_investment_interest_debits"),
    "665": (AmountKind.DEBIT_SUMMARY, "intercept_debits"),
    "670": (AmountKind.DEBIT_SUMMARY, "total_back_value_debits"),
    "685": (AmountKind.DEBIT_SUMMARY, "total_universal_debits"),
    "689": (AmountKind.DEBIT_SUMMARY, "frb_freight_payment_debits"),
    "690": (AmountKind.DEBIT_SUMMARY, "total_miscellaneous_debits"),
    "701": (AmountKind.STATUS, "principal_loan_balance"),
    "703": (AmountKind.STATUS, "available_commitment_amount"),
    "705": (AmountKind.STATUS, "payment_amount_due"),
    "707": (AmountKind.STATUS, "principal_amount_past_due"),
    "709": (AmountKind.STATUS, "interest_amount_past_due"),
    "720": (AmountKind.CREDIT_SUMMARY, "total_loan_payment"),
    "760": (AmountKind.DEBIT_SUMMARY, "loan_disbursement"),
}


def _code_number(code: str) -> Optional[int]:
    if len(code) != 3 or not code.isdigit():
        return None
    return int(code)


def classify_transaction_code(code: str) -> Tuple[Direction, str]:
    """Return (direction, category) for a transaction type code."""
    code = parse_string(code)
    if code in TRANSACTION_CODES:
        return TRANSACTION_CODES[code]

    number = _code_number(code)
    if number is not None and 920 <= number <= 959:
        return Direction.CREDIT, CUSTOM_CATEGORY
    if number is not None and 960 <= number <= 999:
        return Direction.DEBIT, CUSTOM_CATEGORY
    return Direction.UNKNOWN, UNKNOWN_CATEGORY


def classify_amount_code(code: str) -> Tuple[AmountKind, str]:
    """Return (kind, category) for an account summary/status type code."""
    code = parse_string(code)
    if code in AMOUNT_CODES:
        return AMOUNT_CODES[code]

    number = _code_number(code)
    if number is not None and 900 <= number <= 919:
        return AmountKind.STATUS, "custom_status"
    if number is not None and 920 <= number <= 959:
        return AmountKind.CREDIT_SUMMARY, "custom_credit_summary"
    if number is not None and 960 <= number <= 999:
        return AmountKind.DEBIT_SUMMARY, "custom_debit_summary"
    return AmountKind.UNKNOWN, UNKNOWN_CATEGORY


# ---------------------------------------------------------------------------
# Group header (02) enumerations
# ---------------------------------------------------------------------------
class GroupStatus(str, Enum):
    UPDATE = "update"
    DELETION = "deletion"
    CORRECTION = "correction"
    TEST_ONLY = "test_only"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str) -> "GroupStatus":
        return _GROUP_STATUS.get(parse_string(value), cls.UNKNOWN)


class AsOfDateModifier(str, Enum):
    INTERIM_PREVIOUS_DAY_DATA = "interim_previous_day_data"
    FINAL_PREVIOUS_DAY_DATA = "final_previous_day_data"
    INTERIM_SAME_DAY_DATA = "interim_same_day_data"
    FINAL_SAME_DAY_DATA = "final_same_day_data"

    @classmethod
    def parse(cls, value: str) -> Optional["AsOfDateModifier"]:
        return _AS_OF_DATE_MODIFIER.get(parse_string(value))


_GROUP_STATUS = {
    "1": GroupStatus.UPDATE,
    "2": GroupStatus.DELETION,
    "3": GroupStatus.CORRECTION,
    "4": GroupStatus.TEST_ONLY,
}

_AS_OF_DATE_MODIFIER = {
    "1": AsOfDateModifier.INTERIM_PREVIOUS_DAY_DATA,
    "2": AsOfDateModifier.FINAL_PREVIOUS_DAY_DATA,
    "3": AsOfDateModifier.INTERIM_SAME_DAY_DATA,
    "4": AsOfDateModifier.FINAL_SAME_DAY_DATA,
}
