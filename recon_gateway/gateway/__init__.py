from recon_gateway.gateway.factory import GatewayFactory
from recon_gateway.gateway.gateway import ReconciliationGateway
from recon_gateway.gateway.models import (
    BinaryArtifact,
    ErrorKind,
    Failure,
    ProcessResult,
    RedirectArtifact,
)

__all__ = [
    "BinaryArtifact",
    "ErrorKind",
    "Failure",
    "GatewayFactory",
    "ProcessResult",
    "ReconciliationGateway",
    "RedirectArtifact",
]
