"""
Blockchain Interaction Package
Handles artifact lookup, contract creation and confirmation
"""

from .artifact_store import ArtifactStore, ContractArtifact
from .contract_factory import ContractFactory
from .pending_deployment import PendingDeployment, DeployedContract
from .errors import (
    DeploymentError,
    ArtifactNotFoundError,
    TransactionSubmissionError,
    TransactionRevertedError,
    NetworkError,
    ConfigurationError
)

__all__ = [
    'ArtifactStore',
    'ContractArtifact',
    'ContractFactory',
    'PendingDeployment',
    'DeployedContract',
    'DeploymentError',
    'ArtifactNotFoundError',
    'TransactionSubmissionError',
    'TransactionRevertedError',
    'NetworkError',
    'ConfigurationError'
]
