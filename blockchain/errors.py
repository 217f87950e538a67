"""
Deployment Errors
Failure kinds raised while resolving, submitting and confirming a deployment
"""


class DeploymentError(Exception):
    """Base class for every failure of a single deployment attempt"""

    def __init__(self, message: str, transaction_hash: str = None):
        super().__init__(message)
        self.transaction_hash = transaction_hash


class ArtifactNotFoundError(DeploymentError):
    """Named contract artifact is missing, ambiguous or not deployable"""


class TransactionSubmissionError(DeploymentError):
    """Creation transaction could not be signed or was rejected by the node"""


class TransactionRevertedError(DeploymentError):
    """Creation transaction was mined but execution failed on-chain"""


class NetworkError(DeploymentError):
    """Connectivity failure or timeout while talking to the node"""


class ConfigurationError(Exception):
    """Launcher configuration is missing or invalid"""
