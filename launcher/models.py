"""
Deployment Models
Outcome of a single deployment attempt
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DeploymentResult:
    """
    Result of one deployment attempt. Immutable.

    Exactly one of address and error_detail is set; succeeded is True
    exactly when address is set.
    """
    contract_name: str
    succeeded: bool
    address: Optional[str] = None
    error_detail: Optional[str] = None
    error_type: Optional[str] = None
    transaction_hash: Optional[str] = None
    gas_used: Optional[int] = None

    def __post_init__(self):
        if (self.address is None) == (self.error_detail is None):
            raise ValueError("DeploymentResult needs exactly one of address or error_detail")
        if self.succeeded != (self.address is not None):
            raise ValueError("succeeded must be True exactly when an address is set")

    @classmethod
    def success(cls, contract_name: str, address: str, transaction_hash: str = None,
                gas_used: int = None) -> "DeploymentResult":
        """
        Build the result of a confirmed deployment

        Args:
            contract_name: Deployed artifact name
            address: Checksummed contract address
            transaction_hash: Creation transaction hash
            gas_used: Gas used by the creation transaction

        Returns:
            Succeeded DeploymentResult
        """
        return cls(
            contract_name=contract_name,
            succeeded=True,
            address=address,
            transaction_hash=transaction_hash,
            gas_used=gas_used,
        )

    @classmethod
    def failure(cls, contract_name: str, error: Exception,
                transaction_hash: str = None) -> "DeploymentResult":
        """
        Build the result of a failed deployment

        Args:
            contract_name: Artifact name that was requested
            error: Failure raised while resolving, submitting or confirming
            transaction_hash: Creation transaction hash, if one was broadcast

        Returns:
            Failed DeploymentResult carrying "<ErrorType>: <message>"
        """
        return cls(
            contract_name=contract_name,
            succeeded=False,
            error_detail=f"{type(error).__name__}: {error}",
            error_type=type(error).__name__,
            transaction_hash=transaction_hash,
        )
