from csstweaks.store.sidecar import SidecarStore, document_id

__all__ = ["SidecarStore", "document_id"]
