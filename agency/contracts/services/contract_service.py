"""Contract Service - Validation, term tracking and renewals for contracts."""
from datetime import date
from decimal import Decimal
from typing import Optional, List, Dict, Any

from core.utils.validators import (
    clean_str, optional_int, require_date, check_date_range, to_money,
)
from ..repositories import ContractRepository
from .timeline import contract_timeline, add_years

DEFAULT_CONTRACT_TYPE = 'Service Agreement'
DEFAULT_PAYMENT_TERMS = 'Monthly'
DEFAULT_STATUS = 'active'

TERM_FILTERS = ('active', 'expiring', 'expired')

# contract.contract_value is NUMERIC(15,2)
CONTRACT_VALUE_LIMIT = Decimal(10) ** 13

MAX_EXTEND_YEARS = 50


def parse_contract(data: Dict[str, Any]) -> Dict[str, Any]:
    """Validate a contract form payload.

    Either a free-text company name or an existing client_id identifies
    the counterparty.

    Raises:
        ValueError: on missing counterparty or dates, a reversed date range
                    or a negative value
    """
    company_name = clean_str(data.get('company_name'))
    client_id = optional_int(data.get('client_id'), 'Client')
    if not company_name and client_id is None:
        raise ValueError('Company name is required')

    start_date = require_date(data.get('start_date'), 'Start date')
    end_date = require_date(data.get('end_date'), 'End date')
    check_date_range(start_date, end_date)

    return {
        'client_id': client_id,
        'company_name': company_name,
        'contract_type': clean_str(data.get('contract_type')) or DEFAULT_CONTRACT_TYPE,
        'start_date': start_date,
        'end_date': end_date,
        'contract_value': to_money(
            data.get('contract_value'), 'Contract value', default=Decimal('0.00'), limit=CONTRACT_VALUE_LIMIT),
        'payment_terms': clean_str(data.get('payment_terms')) or DEFAULT_PAYMENT_TERMS,
        'status': clean_str(data.get('status')) or DEFAULT_STATUS,
        'notes': clean_str(data.get('notes')),
    }


def with_timeline(contract: Dict[str, Any], today: date = None) -> Dict[str, Any]:
    """Attach the derived term fields to a contract row."""
    timeline = contract_timeline(
        date.fromisoformat(contract['start_date']),
        date.fromisoformat(contract['end_date']),
        today,
    )
    return {**contract, **timeline}


class ContractService:
    """Service for contract business logic."""

    def __init__(self, repo: ContractRepository = None):
        self.repo = repo or ContractRepository()

    def list(self, search: str = None, term: str = None, today: date = None) -> List[Dict[str, Any]]:
        """List contracts with term fields.

        Args:
            search: Substring filter (company, type, id)
            term: Optional 'active', 'expiring' or 'expired' filter on contract_status
            today: Reference date for the term fields
        """
        term = clean_str(term)
        if term and term != 'all' and term not in TERM_FILTERS:
            raise ValueError(f"Status filter must be one of: all, {', '.join(TERM_FILTERS)}")

        contracts = [with_timeline(c, today) for c in self.repo.get_all(search=clean_str(search))]
        if term and term != 'all':
            contracts = [c for c in contracts if c['contract_status'] == term]
        return contracts

    def get(self, contract_id: int, today: date = None) -> Optional[Dict[str, Any]]:
        contract = self.repo.get_by_id(contract_id)
        return with_timeline(contract, today) if contract else None

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        contract_id = self.repo.create(parse_contract(data))
        return self.get(contract_id)

    def update(self, contract_id: int, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        if not self.repo.update(contract_id, parse_contract(data)):
            return None
        return self.get(contract_id)

    def extend(self, contract_id: int, years: Any = 1) -> Optional[Dict[str, Any]]:
        """Push the end date forward by whole years and mark the contract active."""
        years = optional_int(years, 'Years', 1, MAX_EXTEND_YEARS)
        if years is None:
            years = 1

        contract = self.repo.get_by_id(contract_id)
        if not contract:
            return None
        new_end = add_years(date.fromisoformat(contract['end_date']), years)
        self.repo.set_end_date(contract_id, new_end, DEFAULT_STATUS)
        return self.get(contract_id)

    def delete(self, contract_id: int) -> bool:
        return self.repo.delete(contract_id)
