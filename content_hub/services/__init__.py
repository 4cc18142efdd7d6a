"""Business logic services."""
from content_hub.services.content_dna_service import ContentDNAService
from content_hub.services.post_gateway import PostGateway
from content_hub.services.reconciler import ResultReconciler

__all__ = ["ContentDNAService", "PostGateway", "ResultReconciler"]
