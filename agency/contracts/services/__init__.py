"""Contract services package."""
from .contract_service import ContractService, parse_contract
from .timeline import contract_timeline, add_years

__all__ = ['ContractService', 'parse_contract', 'contract_timeline', 'add_years']
